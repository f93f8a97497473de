"""Tests for core.money rounding helpers."""

from decimal import Decimal

import pytest

from unterhalt_rechner.core.money import floor_cents, round_cents, round_euro, to_decimal

D = Decimal


class TestRoundCents:
    @pytest.mark.parametrize("amount, expected", [
        ("460.505", "460.51"),
        ("460.504", "460.50"),
        ("0.125", "0.13"),
        ("-0.125", "-0.13"),
        ("542", "542.00"),
    ])
    def test_half_away_from_zero(self, amount, expected):
        assert round_cents(D(amount)) == D(expected)

    def test_two_decimal_places(self):
        assert round_cents(D("1")).as_tuple().exponent == -2


class TestFloorCents:
    @pytest.mark.parametrize("amount, expected", [
        ("308.6666666666666666666666667", "308.66"),
        ("542", "542.00"),
        ("0.009", "0.00"),
    ])
    def test_cuts_toward_zero(self, amount, expected):
        assert floor_cents(D(amount)) == D(expected)


class TestRoundEuro:
    @pytest.mark.parametrize("amount, expected", [
        ("2100.49", 2100),
        ("2100.50", 2101),
        ("2.5", 3),
        ("-2.5", -3),
    ])
    def test_half_away_from_zero(self, amount, expected):
        assert round_euro(D(amount)) == expected

    def test_returns_int(self):
        assert isinstance(round_euro(D("10.2")), int)


class TestToDecimal:
    def test_float_without_artefacts(self):
        assert to_decimal(0.1) == D("0.1")

    def test_int(self):
        assert to_decimal(2100) == D("2100")

    def test_decimal_passthrough(self):
        value = D("1.23")
        assert to_decimal(value) is value
