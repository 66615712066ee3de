"""Tests for date helpers."""

from datetime import date, datetime

import pytest

from src.utils.date_utils import coerce_date


@pytest.mark.parametrize(
    "raw",
    [
        date(2024, 3, 15),
        datetime(2024, 3, 15, 23, 59),
        "2024-03-15",
        "2024-03-15T10:20:30.123Z",
        "2024-03-15T10:20:30+03:00",
    ],
)
def test_coerce_date_accepts_store_formats(raw) -> None:
    assert coerce_date(raw) == date(2024, 3, 15)


@pytest.mark.parametrize("raw", [None, "", "15/03/2024", 20240315])
def test_coerce_date_rejects_invalid_values(raw) -> None:
    with pytest.raises(ValueError):
        coerce_date(raw)
