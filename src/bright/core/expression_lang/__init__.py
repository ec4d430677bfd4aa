"""
bright brightness expression language.

Tokenizer, parser and evaluator for formulas such as ``50%+``,
``200-`` or ``clamp(20, 200+, 90%)``.

Usage:
    from bright.core.expression_lang import parse_expr, evaluate

    expr = parse_expr("clamp(20, 200+, 90%)")
    target = evaluate(expr, device, easing)
"""

from bright.core.expression_lang.evaluator import EvalContext, evaluate
from bright.core.expression_lang.functions import BUILTINS, ArgumentCount, get_function
from bright.core.expression_lang.parser import ExpressionParseError, parse_expr, parse_tokens
from bright.core.expression_lang.tokenizer import (
    ExpressionError,
    ExpressionTokenError,
    TokenKind,
    tokenize,
)

__all__ = [
    "BUILTINS",
    "ArgumentCount",
    "EvalContext",
    "ExpressionError",
    "ExpressionParseError",
    "ExpressionTokenError",
    "TokenKind",
    "evaluate",
    "get_function",
    "parse_expr",
    "parse_tokens",
    "tokenize",
]
