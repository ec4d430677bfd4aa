"""
bright - animate backlight and LED brightness from small formulas.

    bright set 50%+
    bright set "clamp(20, 200+, 90%)" --duration 300ms
    bright set restore
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .core.animation import AnimationIter
from .core.easing import Exponential, Linear, Polynomial, parse_easing
from .core.errors import BrightError
from .core.expression_lang import evaluate, parse_expr


def _get_version() -> str:
    try:
        return _metadata_version("bright")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

__all__ = [
    "__version__",
    "AnimationIter",
    "BrightError",
    "Exponential",
    "Linear",
    "Polynomial",
    "evaluate",
    "parse_easing",
    "parse_expr",
]
