"""Tests for Decimal helpers."""

from decimal import Decimal

import pytest

from src.utils.decimal_utils import coerce_decimal, to_display_amount


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, Decimal("0")),
        ("", Decimal("0")),
        (Decimal("1.10"), Decimal("1.10")),
        (0.1, Decimal("0.1")),
        (" 42.5 ", Decimal("42.5")),
        (7, Decimal("7")),
    ],
)
def test_coerce_decimal(raw, expected) -> None:
    assert coerce_decimal(raw) == expected


@pytest.mark.parametrize("raw", ["abc", True])
def test_coerce_decimal_rejects_non_numbers(raw) -> None:
    with pytest.raises(ValueError):
        coerce_decimal(raw)


def test_to_display_amount_rounds_half_up() -> None:
    """Display rounding is two places, half up."""
    assert to_display_amount(Decimal("35.7075")) == Decimal("35.71")
    assert to_display_amount(Decimal("0.125")) == Decimal("0.13")
    assert str(to_display_amount(Decimal("80"))) == "80.00"
