"""
Perceptual brightness curves.

Human perception of light is far from linear, so a brightness of 50% on
the device rarely looks like "half". An easing maps between the
perceptual domain (what the user means) and the actual domain (what the
device gets written), both normalized to [0, 1]:

    to_actual(perceptual) -> actual
    from_actual(actual) -> perceptual

Every curve passes through (0, 0) and (1, 1), is monotonically
increasing, and from_actual is the exact inverse of to_actual.

Textual forms:
    x        linear
    x^2.2    polynomial with exponent 2.2 (exponent > 0)
    3^x      exponential with base 3 (base > 0, base != 1)
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from bright.core.errors import BrightError


class EasingError(BrightError):
    """Error constructing or parsing an easing."""


class EasingPatternError(EasingError):
    """Text doesn't have the shape of the easing it was parsed as."""

    def __init__(self, text: str) -> None:
        super().__init__(f"invalid easing pattern: {text!r}")
        self.text = text


class EasingNumberError(EasingError):
    """The numeric part of an easing isn't a number."""

    def __init__(self, text: str) -> None:
        super().__init__(f"can't parse float: {text!r}")
        self.text = text


class InvalidEasingParameterError(EasingError):
    """A base or exponent outside of the valid range."""


@runtime_checkable
class Easing(Protocol):
    """Bidirectional mapping between perceptual and actual brightness."""

    def to_actual(self, perceptual: float) -> float:
        """Map a perceptual brightness in [0, 1] to an actual one."""
        ...

    def from_actual(self, actual: float) -> float:
        """Map an actual brightness in [0, 1] to a perceptual one."""
        ...


def _format_number(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


_NUMBER_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def _parse_number(text: str) -> float:
    # Plain decimal notation only; no whitespace, underscores, inf or nan
    if _NUMBER_RE.fullmatch(text) is None:
        raise EasingNumberError(text)
    return float(text)


@dataclass(frozen=True)
class Linear:
    """Identity curve."""

    def to_actual(self, perceptual: float) -> float:
        return perceptual

    def from_actual(self, actual: float) -> float:
        return actual

    def __str__(self) -> str:
        return "x"

    @classmethod
    def parse(cls, text: str) -> Linear:
        if text != "x":
            raise EasingPatternError(text)
        return cls()


@dataclass(frozen=True)
class Exponential:
    """f(x) = (b^x - 1) / (b - 1)"""

    base: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.base) and self.base > 0 and self.base != 1):
            raise InvalidEasingParameterError(
                f"exponential base must be positive and not 1, got {self.base}"
            )

    def to_actual(self, perceptual: float) -> float:
        return (self.base**perceptual - 1) / (self.base - 1)

    def from_actual(self, actual: float) -> float:
        if actual == 1:
            # (b - 1) + 1 doesn't round-trip to b for every float
            return 1.0
        # log_b(y * (b - 1) + 1)
        arg = actual * (self.base - 1) + 1
        if arg <= 0:
            # Outside the curve's range, only reachable for b < 1 and y > 1
            return math.nan
        return math.log(arg) / math.log(self.base)

    def __str__(self) -> str:
        return f"{_format_number(self.base)}^x"

    @classmethod
    def parse(cls, text: str) -> Exponential:
        if not text.endswith("^x"):
            raise EasingPatternError(text)
        return cls(_parse_number(text[:-2]))


@dataclass(frozen=True)
class Polynomial:
    """f(x) = x^e"""

    exponent: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.exponent) and self.exponent > 0):
            raise InvalidEasingParameterError(
                f"polynomial exponent must be positive, got {self.exponent}"
            )

    def to_actual(self, perceptual: float) -> float:
        return perceptual**self.exponent

    def from_actual(self, actual: float) -> float:
        return actual ** (1 / self.exponent)

    def __str__(self) -> str:
        return f"x^{_format_number(self.exponent)}"

    @classmethod
    def parse(cls, text: str) -> Polynomial:
        if not text.startswith("x^"):
            raise EasingPatternError(text)
        return cls(_parse_number(text[2:]))


EasingKind = Linear | Exponential | Polynomial

# Tried in order; only a pattern mismatch moves on to the next one
_PARSERS = (Exponential.parse, Polynomial.parse, Linear.parse)


def parse_easing(text: str) -> EasingKind:
    """Parse the textual form of an easing.

    Raises:
        EasingPatternError: If the text matches none of the forms.
        EasingNumberError: If the numeric part isn't a number.
        InvalidEasingParameterError: If the number is out of range.
    """
    for parser in _PARSERS[:-1]:
        try:
            return parser(text)
        except EasingPatternError:
            continue
    return _PARSERS[-1](text)
