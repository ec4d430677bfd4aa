"""Tests for perceptual easing curves."""

from __future__ import annotations

import math

import pytest

from bright.core.easing import (
    Easing,
    EasingNumberError,
    EasingPatternError,
    Exponential,
    InvalidEasingParameterError,
    Linear,
    Polynomial,
    parse_easing,
)

CURVES = [
    Linear(),
    Polynomial(1.0),
    Polynomial(0.3),
    Polynomial(1.3),
    Polynomial(2.2),
    Exponential(0.5),
    Exponential(2.0),
    Exponential(3.0),
    Exponential(10.0),
]

SAMPLES = [0.0, 0.05, 0.1, 0.25, 0.5, 0.75, 0.9, 1.0]


class TestCurves:
    """Laws every easing satisfies."""

    @pytest.mark.parametrize("easing", CURVES, ids=str)
    def test_boundaries(self, easing: Easing) -> None:
        assert easing.to_actual(0.0) == 0.0
        assert easing.to_actual(1.0) == pytest.approx(1.0)
        assert easing.from_actual(0.0) == 0.0
        assert easing.from_actual(1.0) == pytest.approx(1.0)

    @pytest.mark.parametrize("easing", CURVES, ids=str)
    def test_inverse(self, easing: Easing) -> None:
        for x in SAMPLES:
            assert easing.from_actual(easing.to_actual(x)) == pytest.approx(x)
            assert easing.to_actual(easing.from_actual(x)) == pytest.approx(x)

    @pytest.mark.parametrize("easing", CURVES, ids=str)
    def test_monotonic(self, easing: Easing) -> None:
        values = [easing.to_actual(x) for x in SAMPLES]
        assert values == sorted(values)

    def test_protocol(self) -> None:
        for easing in CURVES:
            assert isinstance(easing, Easing)

    def test_polynomial_values(self) -> None:
        assert Polynomial(2.0).to_actual(0.5) == 0.25
        assert Polynomial(2.0).from_actual(0.25) == 0.5

    def test_exponential_values(self) -> None:
        assert Exponential(3.0).to_actual(0.5) == pytest.approx((math.sqrt(3) - 1) / 2)
        assert Exponential(3.0).from_actual(1.0) == 1.0

    def test_exponential_below_one(self) -> None:
        easing = Exponential(0.5)
        assert easing.to_actual(0.5) > 0.5

    def test_exponential_outside_range(self) -> None:
        assert math.isnan(Exponential(0.5).from_actual(3.0))
        assert Exponential(0.5).from_actual(1.5) == pytest.approx(2.0)


class TestConstruction:
    @pytest.mark.parametrize("base", [1.0, 0.0, -2.0, math.inf, math.nan])
    def test_invalid_base(self, base: float) -> None:
        with pytest.raises(InvalidEasingParameterError):
            Exponential(base)

    @pytest.mark.parametrize("exponent", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_exponent(self, exponent: float) -> None:
        with pytest.raises(InvalidEasingParameterError):
            Polynomial(exponent)


class TestParsing:
    def test_linear(self) -> None:
        assert parse_easing("x") == Linear()

    def test_polynomial(self) -> None:
        assert parse_easing("x^2") == Polynomial(2.0)
        assert parse_easing("x^0.5") == Polynomial(0.5)

    def test_exponential(self) -> None:
        assert parse_easing("2.5^x") == Exponential(2.5)
        assert parse_easing("3^x") == Exponential(3.0)

    def test_format(self) -> None:
        assert str(Linear()) == "x"
        assert str(Polynomial(2.0)) == "x^2"
        assert str(Polynomial(2.2)) == "x^2.2"
        assert str(Exponential(3.0)) == "3^x"
        assert str(Exponential(0.5)) == "0.5^x"

    @pytest.mark.parametrize("easing", CURVES, ids=str)
    def test_format_parses_back(self, easing: Easing) -> None:
        assert parse_easing(str(easing)) == easing

    def test_zero_exponent(self) -> None:
        with pytest.raises(InvalidEasingParameterError):
            parse_easing("x^0")

    def test_zero_base(self) -> None:
        with pytest.raises(InvalidEasingParameterError):
            parse_easing("0^x")

    def test_base_one(self) -> None:
        with pytest.raises(InvalidEasingParameterError):
            parse_easing("1^x")

    def test_bad_number(self) -> None:
        with pytest.raises(EasingNumberError):
            parse_easing("x^abc")

    @pytest.mark.parametrize(
        "text", ["x^ 2", "x^2 ", "x^1_0", "x^inf", "infinity^x", "x^nan", "x^2.5.1"]
    )
    def test_strict_numbers(self, text: str) -> None:
        with pytest.raises(EasingNumberError):
            parse_easing(text)

    def test_number_notations(self) -> None:
        assert parse_easing("x^.5") == Polynomial(0.5)
        assert parse_easing("x^2.") == Polynomial(2.0)
        assert parse_easing("1e1^x") == Exponential(10.0)
        assert parse_easing("x^+3") == Polynomial(3.0)

    def test_exponential_tried_first(self) -> None:
        # "x^x" has the exponential shape with a non numeric base
        with pytest.raises(EasingNumberError):
            parse_easing("x^x")

    @pytest.mark.parametrize("text", ["", "y", "x2", "2*x"])
    def test_unknown_pattern(self, text: str) -> None:
        with pytest.raises(EasingPatternError):
            parse_easing(text)
