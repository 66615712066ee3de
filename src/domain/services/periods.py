"""Calendar windows for daily to yearly reports."""

from collections.abc import Iterator
from datetime import date, timedelta

from src.domain.exceptions import UnknownPeriodTypeError
from src.domain.models import PeriodType, PeriodWindow


def parse_period_type(value: str | PeriodType) -> PeriodType:
    """Return the PeriodType matching a name such as 'monthly'.

    Raises:
        UnknownPeriodTypeError: If the name is not a supported period.
    """
    if isinstance(value, PeriodType):
        return value
    try:
        return PeriodType(str(value).strip().lower())
    except ValueError as exc:
        supported = ", ".join(p.value for p in PeriodType)
        raise UnknownPeriodTypeError(
            f"Unknown period type '{value}'. Expected one of: {supported}"
        ) from exc


def resolve_period_window(
    reference_date: date,
    period_type: PeriodType | str,
) -> PeriodWindow:
    """Return the calendar window containing the reference date.

    Weeks run Sunday to Saturday. Months, quarters, and years follow
    calendar boundaries.

    Args:
        reference_date: Any date inside the wanted window.
        period_type: Period partition to use.

    Returns:
        PeriodWindow: Inclusive start and end dates.
    """
    period = parse_period_type(period_type)
    if period is PeriodType.DAILY:
        start = end = reference_date
    elif period is PeriodType.WEEKLY:
        # date.weekday() is Monday=0; shift so Sunday starts the week.
        start = reference_date - timedelta(days=(reference_date.weekday() + 1) % 7)
        end = start + timedelta(days=6)
    elif period is PeriodType.MONTHLY:
        start = reference_date.replace(day=1)
        end = _add_months(start, 1) - timedelta(days=1)
    elif period is PeriodType.QUARTERLY:
        first_month = (reference_date.month - 1) // 3 * 3 + 1
        start = date(reference_date.year, first_month, 1)
        end = _add_months(start, 3) - timedelta(days=1)
    else:
        start = date(reference_date.year, 1, 1)
        end = date(reference_date.year, 12, 31)
    return PeriodWindow(period_type=period, start_date=start, end_date=end)


def iter_period_windows(
    start_date: date,
    end_date: date,
    period_type: PeriodType | str,
) -> Iterator[PeriodWindow]:
    """Yield contiguous windows covering start_date through end_date.

    The first window is the one containing start_date, so it may begin
    earlier; the last one contains end_date.
    """
    if end_date < start_date:
        return
    window = resolve_period_window(start_date, period_type)
    while window.start_date <= end_date:
        yield window
        window = resolve_period_window(
            window.end_date + timedelta(days=1),
            window.period_type,
        )


def _add_months(day: date, months: int) -> date:
    month_index = day.month - 1 + months
    return date(day.year + month_index // 12, month_index % 12 + 1, 1)


__all__ = ["parse_period_type", "resolve_period_window", "iter_period_windows"]
