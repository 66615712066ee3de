"""Domain models package."""

from .documents import DocumentKind, DocumentTotals, LineItem
from .finance import (
    ExpenseBreakdown,
    ProfitAndLossStatement,
    RevenueBreakdown,
    TaxReport,
)
from .forms import FormAction, FormState, Reset, SetField, Submit
from .ledger import (
    Direction,
    LedgerEntry,
    LedgerKind,
    LedgerSummary,
    LedgerTransaction,
)
from .periods import PeriodBucket, PeriodType, PeriodWindow
from .records import ExpenseRecord, InvoiceRecord

__all__ = [
    "DocumentKind",
    "DocumentTotals",
    "LineItem",
    "ExpenseBreakdown",
    "ProfitAndLossStatement",
    "RevenueBreakdown",
    "TaxReport",
    "FormAction",
    "FormState",
    "Reset",
    "SetField",
    "Submit",
    "Direction",
    "LedgerEntry",
    "LedgerKind",
    "LedgerSummary",
    "LedgerTransaction",
    "PeriodBucket",
    "PeriodType",
    "PeriodWindow",
    "ExpenseRecord",
    "InvoiceRecord",
]
