"""
Expression tree for brightness formulas.

A formula is either a number literal (``42``, ``50%``, ``10%+``, ``200-``)
or a call of a builtin function whose arguments are formulas themselves
(``clamp(20, 200+, 90%)``). Trees are immutable once parsed.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

U16_MAX = 0xFFFF


class ChangeDirection(StrEnum):
    """How a literal relates to the current brightness."""

    INC = "+"
    ABS = ""
    DEC = "-"


class Literal(BaseModel):
    """
    A number literal.

    ``value`` is a raw device unit when ``percent`` is False, otherwise a
    perceptual percentage (0-100 scale, values above 100 are accepted).

    Examples:
        - Literal(value=42) → 42
        - Literal(value=50, percent=True, direction=INC) → 50%+
    """

    value: int = Field(ge=0, le=U16_MAX, description="Literal value")
    percent: bool = Field(default=False, description="Value is a perceptual percentage")
    direction: ChangeDirection = Field(default=ChangeDirection.ABS)

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        suffix = "%" if self.percent else ""
        return f"{self.value}{suffix}{self.direction.value}"


class FuncCall(BaseModel):
    """
    Function call: name(arg1, arg2, ...).

    Built-in functions: current(), restore(), clamp(min, value, max),
    min(a, ...), max(a, ...). Names are resolved at evaluation time, so
    an unknown name parses fine and fails when evaluated.
    """

    name: str = Field(description="Function name")
    args: list[Expr] = Field(default_factory=list, description="Arguments")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        args_str = ", ".join(str(a) for a in self.args)
        return f"{self.name}({args_str})"


Expr = Literal | FuncCall

FuncCall.model_rebuild()


def default_expr() -> Expr:
    """The neutral formula: keep whatever brightness the device has."""
    return FuncCall(name="current")
