"""
Intermediate representation types for bright.
"""

from .expressions import ChangeDirection, Expr, FuncCall, Literal, default_expr

__all__ = [
    "ChangeDirection",
    "Expr",
    "FuncCall",
    "Literal",
    "default_expr",
]
