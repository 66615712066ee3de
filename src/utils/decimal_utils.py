"""Helpers for Decimal normalization."""

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

DISPLAY_QUANTUM = Decimal("0.01")


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a record row or adapter.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        ValueError: If the value cannot be read as a number.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise ValueError(f"Boolean is not a numeric amount: {value!r}")
    if isinstance(value, str) and not value.strip():
        return Decimal("0")
    try:
        return Decimal(str(value).strip())
    except InvalidOperation as exc:
        raise ValueError(f"Invalid numeric value: {value!r}") from exc


def to_display_amount(value: Decimal) -> Decimal:
    """Round an amount to two decimal places for display.

    Computations keep full precision; only presentation rounds.
    """
    return coerce_decimal(value).quantize(DISPLAY_QUANTUM, rounding=ROUND_HALF_UP)


__all__ = ["coerce_decimal", "to_display_amount", "DISPLAY_QUANTUM"]
