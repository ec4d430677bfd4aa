"""
Builtin functions of the expression language.

The set of builtins is closed and described by a static table: each
entry names the function, declares how many arguments it accepts and
points at its implementation. The evaluator validates the argument
count before calling, so implementations can rely on it.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

from bright.core.errors import ExpressionEvalError, MissingRestoreFileError
from bright.core.ir.expressions import Expr
from bright.device.base import UNNAMED

if TYPE_CHECKING:
    from bright.core.expression_lang.evaluator import EvalContext


@dataclass(frozen=True)
class ArgumentCount:
    """Accepted number of arguments; ``max=None`` means unbounded."""

    min: int
    max: int | None = None

    def valid(self, count: int) -> bool:
        return count >= self.min and (self.max is None or count <= self.max)

    @classmethod
    def exactly(cls, count: int) -> ArgumentCount:
        return cls(count, count)

    @classmethod
    def empty(cls) -> ArgumentCount:
        return cls(0, 0)


@dataclass(frozen=True)
class Function:
    """A builtin function."""

    name: str
    arity: ArgumentCount
    call: Callable[[Sequence[Expr], EvalContext], int]


def _current(args: Sequence[Expr], ctx: EvalContext) -> int:
    return ctx.current()


def _clamp(args: Sequence[Expr], ctx: EvalContext) -> int:
    # min > max isn't checked, the result is max then
    low = ctx.evaluate(args[0])
    optimal = ctx.evaluate(args[1])
    high = ctx.evaluate(args[2])
    return min(max(optimal, low), high)


def _max(args: Sequence[Expr], ctx: EvalContext) -> int:
    result = ctx.evaluate(args[0])
    for arg in args[1:]:
        value = ctx.evaluate(arg)
        if value > result:
            result = value
    return result


def _min(args: Sequence[Expr], ctx: EvalContext) -> int:
    result = ctx.evaluate(args[0])
    for arg in args[1:]:
        value = ctx.evaluate(arg)
        if value < result:
            result = value
    return result


def _restore(args: Sequence[Expr], ctx: EvalContext) -> int:
    name = ctx.device.name or UNNAMED
    try:
        return ctx.store.load(name)
    except FileNotFoundError as e:
        raise MissingRestoreFileError(ctx.store.path_for(name)) from e
    except (OSError, ValueError) as e:
        raise ExpressionEvalError(f"can't restore the brightness of {name}: {e}") from e


BUILTINS: MappingProxyType[str, Function] = MappingProxyType(
    {
        f.name: f
        for f in (
            Function("current", ArgumentCount.empty(), _current),
            Function("clamp", ArgumentCount.exactly(3), _clamp),
            Function("max", ArgumentCount(1), _max),
            Function("min", ArgumentCount(1), _min),
            Function("restore", ArgumentCount.empty(), _restore),
        )
    }
)


def get_function(name: str) -> Function | None:
    """Look up a builtin by name."""
    return BUILTINS.get(name)
