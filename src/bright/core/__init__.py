"""
bright core: expression language, easing curves, animation, persistence
and configuration.
"""

from .easing import EasingKind, Exponential, Linear, Polynomial, parse_easing
from .errors import BrightError, ConfigError, ExpressionEvalError

__all__ = [
    "BrightError",
    "ConfigError",
    "EasingKind",
    "Exponential",
    "ExpressionEvalError",
    "Linear",
    "Polynomial",
    "parse_easing",
]
