"""Period aggregation for the P&L statement and VAT report."""

from collections.abc import Iterable, Mapping
from datetime import date
from decimal import Decimal

from src.domain.exceptions import RecordValidationError
from src.domain.models import (
    ExpenseBreakdown,
    ExpenseRecord,
    InvoiceRecord,
    PeriodBucket,
    PeriodType,
    PeriodWindow,
    ProfitAndLossStatement,
    RevenueBreakdown,
    TaxReport,
)
from src.domain.services.line_items import HUNDRED, invoice_total
from src.domain.services.normalization import normalize_category
from src.domain.services.periods import iter_period_windows, resolve_period_window
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal


def aggregate_by_category(
    records: Iterable,
    date_field: str,
    category_field: str,
    amount_field: str,
    reference_date: date,
    period_type: PeriodType | str,
) -> PeriodBucket:
    """Sum record amounts by category for the window of reference_date.

    Fields are read by attribute, or by key for mapping rows.

    Args:
        records: Records carrying a date, a category, and an amount.
        date_field: Name of the date field.
        category_field: Name of the category field.
        amount_field: Name of the amount field.
        reference_date: Date selecting the window.
        period_type: Window size.

    Returns:
        PeriodBucket: Sums by category; ``total`` gives the grand total.
    """
    window = resolve_period_window(reference_date, period_type)
    return _fill_bucket(
        window, records, date_field, category_field, amount_field
    )


def aggregate_by_period(
    records: Iterable,
    date_field: str,
    category_field: str,
    amount_field: str,
    start_date: date,
    end_date: date,
    period_type: PeriodType | str,
) -> list[PeriodBucket]:
    """Bucket records into contiguous windows between two dates.

    Every window is returned, including empty ones, in ascending order.
    """
    rows = list(records)
    return [
        _fill_bucket(window, rows, date_field, category_field, amount_field)
        for window in iter_period_windows(start_date, end_date, period_type)
    ]


def compute_profit_and_loss(
    invoices: Iterable[InvoiceRecord],
    expenses: Iterable[ExpenseRecord],
    reference_date: date,
    period_type: PeriodType | str,
) -> ProfitAndLossStatement:
    """Compute the P&L statement for the window of reference_date.

    Revenue counts invoices at their VAT-inclusive total. Net profit keeps
    its sign, so a loss is negative.
    """
    window = resolve_period_window(reference_date, period_type)
    invoices_total = sum(
        (
            invoice_total(inv.subtotal, inv.vat_rate)
            for inv in invoices
            if window.contains(inv.issue_date)
        ),
        Decimal("0"),
    )
    revenue = RevenueBreakdown(
        invoices=invoices_total,
        other=Decimal("0"),
        total=invoices_total,
    )
    bucket = _fill_bucket(
        window, expenses, "expense_date", "category", "amount"
    )
    expense_breakdown = ExpenseBreakdown(
        by_category=dict(bucket.sums),
        total=bucket.total,
    )
    return ProfitAndLossStatement(
        window=window,
        revenue=revenue,
        expenses=expense_breakdown,
        gross_profit=revenue.total,
        net_profit=revenue.total - expense_breakdown.total,
    )


def compute_tax_report(
    invoices: Iterable[InvoiceRecord],
    expenses: Iterable[ExpenseRecord],
    reference_date: date,
    period_type: PeriodType | str,
) -> TaxReport:
    """Compute VAT collected on sales and paid on purchases for a window."""
    window = resolve_period_window(reference_date, period_type)
    total_sales = Decimal("0")
    vat_collected = Decimal("0")
    for inv in invoices:
        if not window.contains(inv.issue_date):
            continue
        total_sales += inv.subtotal
        vat_collected += inv.subtotal * inv.vat_rate / HUNDRED

    total_purchases = Decimal("0")
    vat_paid = Decimal("0")
    for exp in expenses:
        if not window.contains(exp.expense_date):
            continue
        total_purchases += exp.amount
        vat_paid += exp.tax_amount

    return TaxReport(
        window=window,
        total_sales=total_sales,
        total_purchases=total_purchases,
        vat_collected=vat_collected,
        vat_paid=vat_paid,
        net_vat=vat_collected - vat_paid,
    )


def _fill_bucket(
    window: PeriodWindow,
    records: Iterable,
    date_field: str,
    category_field: str,
    amount_field: str,
) -> PeriodBucket:
    sums: dict[str, Decimal] = {}
    for record in records:
        day = _read_date(record, date_field)
        if not window.contains(day):
            continue
        category = normalize_category(_read_field(record, category_field))
        amount = _read_amount(record, amount_field)
        sums[category] = sums.get(category, Decimal("0")) + amount
    return PeriodBucket(window=window, sums=sums)


def _read_field(record, name: str):
    if isinstance(record, Mapping):
        if name not in record:
            raise RecordValidationError(type(record).__name__, name, "missing")
        return record[name]
    try:
        return getattr(record, name)
    except AttributeError as exc:
        raise RecordValidationError(
            type(record).__name__, name, "missing"
        ) from exc


def _read_date(record, name: str) -> date:
    try:
        return coerce_date(_read_field(record, name))
    except RecordValidationError:
        raise
    except ValueError as exc:
        raise RecordValidationError(type(record).__name__, name, str(exc)) from exc


def _read_amount(record, name: str) -> Decimal:
    try:
        return coerce_decimal(_read_field(record, name))
    except RecordValidationError:
        raise
    except ValueError as exc:
        raise RecordValidationError(type(record).__name__, name, str(exc)) from exc


__all__ = [
    "aggregate_by_category",
    "aggregate_by_period",
    "compute_profit_and_loss",
    "compute_tax_report",
]
