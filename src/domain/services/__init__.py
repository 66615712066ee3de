"""Domain services package."""

from .aggregation import (
    aggregate_by_category,
    aggregate_by_period,
    compute_profit_and_loss,
    compute_tax_report,
)
from .forms import initial_form_state, reduce_form
from .ledger import filter_ledger_entries, summarize_ledger
from .line_items import (
    aggregate_document_totals,
    compute_amount,
    compute_document_totals,
    invoice_total,
    line_amount,
)
from .normalization import (
    normalize_category,
    normalize_label,
    normalize_search_term,
)
from .periods import iter_period_windows, parse_period_type, resolve_period_window
from .validation import (
    parse_expense,
    parse_invoice,
    parse_ledger_transaction,
    parse_line_item,
    validate_bank_transaction_form,
    validate_cash_transaction_form,
    validate_expense_form,
    validate_invoice_form,
    validate_ledger_transaction_form,
)

__all__ = [
    "aggregate_by_category",
    "aggregate_by_period",
    "compute_profit_and_loss",
    "compute_tax_report",
    "initial_form_state",
    "reduce_form",
    "filter_ledger_entries",
    "summarize_ledger",
    "aggregate_document_totals",
    "compute_amount",
    "compute_document_totals",
    "invoice_total",
    "line_amount",
    "normalize_category",
    "normalize_label",
    "normalize_search_term",
    "iter_period_windows",
    "parse_period_type",
    "resolve_period_window",
    "parse_expense",
    "parse_invoice",
    "parse_ledger_transaction",
    "parse_line_item",
    "validate_expense_form",
    "validate_invoice_form",
    "validate_ledger_transaction_form",
    "validate_cash_transaction_form",
    "validate_bank_transaction_form",
]
