"""
Expression evaluator for bright brightness expressions.

Reduces an expression tree to a single brightness value for one device.
The device and easing are only read from, never modified; writing the
result (and animating towards it) is up to the caller.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from bright.core.easing import Easing, Linear
from bright.core.errors import (
    BrightnessReadError,
    ExpressionEvalError,
    UnsupportedFunctionError,
    WrongArgumentCountError,
)
from bright.core.expression_lang.functions import get_function
from bright.core.ir.expressions import U16_MAX, ChangeDirection, Expr, FuncCall, Literal
from bright.core.restoration import RestoreStore
from bright.device.base import Device
from bright.device.errors import DeviceReadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvalContext:
    """Everything an evaluation reads from."""

    device: Device
    easing: Easing = field(default_factory=Linear)
    store: RestoreStore = field(default_factory=RestoreStore)

    def current(self) -> int:
        """The device's current brightness."""
        try:
            return self.device.current()
        except DeviceReadError as e:
            raise BrightnessReadError(e) from e

    def evaluate(self, expr: Expr) -> int:
        return _interpret(expr, self)


def evaluate(
    expr: Expr,
    device: Device,
    easing: Easing | None = None,
    *,
    store: RestoreStore | None = None,
) -> int:
    """Evaluate an expression against a device.

    The device's current brightness is only read where the expression
    needs it (relative literals, percentages and current()), so
    ``max(10, 20)`` evaluates without touching the device.

    Args:
        expr: Parsed expression AST.
        device: Device supplying the current and maximal brightness.
        easing: Perceptual curve used for percentages (default: linear).
        store: Saved brightness values for restore() (default: temp dir).

    Returns:
        The target brightness.

    Raises:
        ExpressionEvalError: If evaluation fails.
    """
    ctx = EvalContext(device, easing or Linear(), store or RestoreStore())
    result = _interpret(expr, ctx)
    logger.debug("Evaluated %s to %d", expr, result)
    return result


def _interpret(expr: Expr, ctx: EvalContext) -> int:
    """Dispatch evaluation to the appropriate handler."""
    if isinstance(expr, Literal):
        if expr.percent:
            return _interpret_percent(expr, ctx)
        return _interpret_absolute(expr, ctx)

    if isinstance(expr, FuncCall):
        return _interpret_func_call(expr, ctx)

    raise ExpressionEvalError(f"Unknown expression type: {type(expr).__name__}")


def _interpret_absolute(expr: Literal, ctx: EvalContext) -> int:
    """A raw device value; absolute values aren't limited to the maximum."""
    if expr.direction == ChangeDirection.ABS:
        return expr.value

    current = ctx.current()
    if expr.direction == ChangeDirection.INC:
        return min(current + expr.value, U16_MAX, ctx.device.max_brightness)
    return max(current - expr.value, 0)


def _interpret_percent(expr: Literal, ctx: EvalContext) -> int:
    """A perceptual percentage, converted through the easing."""
    current = ctx.current()
    max_brightness = ctx.device.max_brightness
    if max_brightness == 0:
        return 0

    perceived = ctx.easing.from_actual(current / max_brightness)
    value = expr.value / 100

    if expr.direction == ChangeDirection.INC:
        new_perceived = min(max(perceived + value, 0.0), 1.0)
    elif expr.direction == ChangeDirection.DEC:
        new_perceived = min(max(perceived - value, 0.0), 1.0)
    else:
        new_perceived = value

    actual = ctx.easing.to_actual(new_perceived) * max_brightness
    if not math.isfinite(actual):
        return 0
    # Truncates like a float to u16 cast
    return min(max(math.trunc(actual), 0), U16_MAX)


def _interpret_func_call(expr: FuncCall, ctx: EvalContext) -> int:
    """Evaluate a builtin function call (closed set, no user-defined functions)."""
    func = get_function(expr.name)
    if func is None:
        raise UnsupportedFunctionError(expr.name)

    args: Sequence[Expr] = expr.args
    if not func.arity.valid(len(args)):
        raise WrongArgumentCountError(func.name, len(args), func.arity.min, func.arity.max)

    return func.call(args, ctx)
