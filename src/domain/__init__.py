"""Domain package for accounting calculations and core models."""

from .constants import DEFAULT_CURRENCY, DEFAULT_VAT_RATE
from .exceptions import RecordValidationError, UnknownPeriodTypeError
from .models import (
    Direction,
    DocumentKind,
    DocumentTotals,
    ExpenseRecord,
    InvoiceRecord,
    LedgerEntry,
    LedgerKind,
    LedgerSummary,
    LedgerTransaction,
    LineItem,
    PeriodBucket,
    PeriodType,
    PeriodWindow,
    ProfitAndLossStatement,
    TaxReport,
)
from .services import (
    aggregate_by_category,
    aggregate_document_totals,
    compute_amount,
    compute_profit_and_loss,
    compute_tax_report,
    resolve_period_window,
    summarize_ledger,
)

__all__ = [
    "DEFAULT_CURRENCY",
    "DEFAULT_VAT_RATE",
    "RecordValidationError",
    "UnknownPeriodTypeError",
    "Direction",
    "DocumentKind",
    "DocumentTotals",
    "ExpenseRecord",
    "InvoiceRecord",
    "LedgerEntry",
    "LedgerKind",
    "LedgerSummary",
    "LedgerTransaction",
    "LineItem",
    "PeriodBucket",
    "PeriodType",
    "PeriodWindow",
    "ProfitAndLossStatement",
    "TaxReport",
    "aggregate_by_category",
    "aggregate_document_totals",
    "compute_amount",
    "compute_profit_and_loss",
    "compute_tax_report",
    "resolve_period_window",
    "summarize_ledger",
]
