"""Boundary parsing of raw record rows and entry-form validation.

Rows arrive from the record store as loosely typed mappings. They are
parsed here into domain records so the calculation services only ever see
well-formed values; anything malformed raises RecordValidationError.
"""

from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from src.domain.constants import BANK_DIRECTION_LABELS, CASH_DIRECTION_LABELS
from src.domain.exceptions import RecordValidationError
from src.domain.models import (
    Direction,
    ExpenseRecord,
    InvoiceRecord,
    LedgerKind,
    LedgerTransaction,
    LineItem,
)
from src.domain.services.normalization import normalize_label
from src.utils.date_utils import coerce_date
from src.utils.decimal_utils import coerce_decimal

LEDGER_DIRECTION_LABELS = {
    LedgerKind.CASH: CASH_DIRECTION_LABELS,
    LedgerKind.BANK: BANK_DIRECTION_LABELS,
}


def parse_line_item(row: Mapping[str, Any]) -> LineItem:
    """Parse an invoice or estimate line row.

    Accepts the column names used by both documents: ``price`` or ``rate``
    for the unit rate, ``discount`` and ``sales_tax`` or ``tax_rate``.
    """
    kind = "line item"
    product_ref = _first(row, "product_ref", "product_id")
    if product_ref in (None, ""):
        raise RecordValidationError(kind, "product_ref", "missing")
    quantity = _non_negative(kind, "quantity", row.get("quantity"))
    unit_rate = _non_negative(
        kind, "unit_rate", _first(row, "unit_rate", "rate", "price")
    )
    discount = _non_negative(
        kind, "discount_percent", _first(row, "discount_percent", "discount")
    )
    if discount > 100:
        raise RecordValidationError(kind, "discount_percent", "above 100")
    tax = _non_negative(
        kind, "tax_percent", _first(row, "tax_percent", "sales_tax", "tax_rate")
    )
    return LineItem(
        product_ref=str(product_ref),
        quantity=quantity,
        unit_rate=unit_rate,
        discount_percent=discount,
        tax_percent=tax,
    )


def parse_invoice(row: Mapping[str, Any]) -> InvoiceRecord:
    """Parse a stored invoice header row."""
    kind = "invoice"
    due_raw = row.get("due_date")
    return InvoiceRecord(
        invoice_number=_required_text(kind, "invoice_number", row),
        client_ref=str(_required(kind, "client_id", _first(row, "client_ref", "client_id"))),
        issue_date=_date(kind, "issue_date", row.get("issue_date")),
        subtotal=_non_negative(kind, "subtotal", row.get("subtotal")),
        vat_rate=_non_negative(kind, "vat_rate", row.get("vat_rate")),
        status=str(row.get("status") or "Draft"),
        due_date=_date(kind, "due_date", due_raw) if due_raw else None,
    )


def parse_expense(row: Mapping[str, Any]) -> ExpenseRecord:
    """Parse a stored expense row."""
    kind = "expense"
    amount = _non_negative(kind, "amount", row.get("amount"))
    if amount == 0:
        raise RecordValidationError(kind, "amount", "must be greater than 0")
    return ExpenseRecord(
        expense_number=_required_text(kind, "expense_number", row),
        expense_date=_date(kind, "expense_date", row.get("expense_date")),
        vendor_ref=str(_required(kind, "vendor_id", _first(row, "vendor_ref", "vendor_id"))),
        category=_required_text(kind, "category", row),
        amount=amount,
        tax_amount=_non_negative(kind, "tax_amount", row.get("tax_amount")),
        payment_status=str(row.get("payment_status") or "Pending"),
    )


def parse_ledger_transaction(
    row: Mapping[str, Any],
    ledger_kind: LedgerKind,
) -> LedgerTransaction:
    """Parse a cash or bank book row.

    Cash rows use ``receipt``/``payment`` and bank rows use
    ``deposit``/``withdrawal`` in their ``type`` column.
    """
    kind = f"{ledger_kind.value} transaction"
    direction = _direction(kind, row.get("type"), ledger_kind)
    amount = _non_negative(kind, "amount", row.get("amount"))
    if amount == 0:
        raise RecordValidationError(kind, "amount", "must be greater than 0")
    raw_id = row.get("id")
    return LedgerTransaction(
        date=_date(kind, "date", row.get("date")),
        direction=direction,
        amount=amount,
        category=str(row.get("category") or ""),
        reference=str(row.get("reference") or ""),
        description=str(row.get("description") or ""),
        vat_rate=_non_negative(kind, "vat_rate", row.get("vat_rate")),
        transaction_id=str(raw_id) if raw_id is not None else None,
    )


def validate_invoice_form(values: Mapping[str, Any]) -> dict[str, str]:
    """Check the invoice form before it is saved.

    Returns:
        dict[str, str]: Field name to message; empty when valid.
    """
    errors: dict[str, str] = {}
    if not values.get("client_ref"):
        errors["client_ref"] = "Please select a client"
    if not values.get("invoice_number"):
        errors["invoice_number"] = "Please enter an invoice number"
    lines = list(values.get("line_items") or ())
    if not lines:
        errors["line_items"] = "Please add at least one line item"
    elif any(not _valid_invoice_line(line) for line in lines):
        errors["line_items"] = (
            "Each line item needs a product, a quantity and a price above 0"
        )
    _check_due_date(values, errors)
    if _is_negative(values.get("vat_rate")):
        errors["vat_rate"] = "VAT rate cannot be negative"
    return errors


def validate_expense_form(values: Mapping[str, Any]) -> dict[str, str]:
    """Check the expense form before it is saved."""
    errors: dict[str, str] = {}
    for name in ("expense_date", "expense_number", "vendor_ref", "category"):
        if not values.get(name):
            errors[name] = "This field is required"
    if not _is_positive(values.get("amount")):
        errors["amount"] = "Amount must be greater than 0"
    return errors


def validate_ledger_transaction_form(
    values: Mapping[str, Any],
    ledger_kind: LedgerKind = LedgerKind.CASH,
) -> dict[str, str]:
    """Check a new cash or bank transaction before it is saved."""
    errors: dict[str, str] = {}
    if normalize_label(values.get("type")) not in LEDGER_DIRECTION_LABELS[ledger_kind]:
        errors["type"] = "Please choose a transaction type"
    if not _is_positive(values.get("amount")):
        errors["amount"] = "Amount must be greater than 0"
    for name in ("description", "category"):
        if not str(values.get(name) or "").strip():
            errors[name] = "This field is required"
    if _is_negative(values.get("vat_rate")):
        errors["vat_rate"] = "VAT rate cannot be negative"
    return errors


def validate_cash_transaction_form(values: Mapping[str, Any]) -> dict[str, str]:
    """Check a new cash book entry (receipt or payment)."""
    return validate_ledger_transaction_form(values, LedgerKind.CASH)


def validate_bank_transaction_form(values: Mapping[str, Any]) -> dict[str, str]:
    """Check a new bank book entry (deposit or withdrawal)."""
    return validate_ledger_transaction_form(values, LedgerKind.BANK)


def _check_due_date(values: Mapping[str, Any], errors: dict[str, str]) -> None:
    parsed: dict[str, date] = {}
    for name in ("issue_date", "due_date"):
        raw = values.get(name)
        if not raw:
            continue
        try:
            parsed[name] = coerce_date(raw)
        except ValueError:
            errors[name] = "Please enter a valid date"
    if len(parsed) == 2 and parsed["due_date"] < parsed["issue_date"]:
        errors["due_date"] = "Due date cannot be earlier than issue date"


def _valid_invoice_line(line) -> bool:
    if isinstance(line, LineItem):
        return bool(line.product_ref) and line.quantity > 0 and line.unit_rate > 0
    if not isinstance(line, Mapping):
        return False
    return (
        bool(_first(line, "product_ref", "product_id"))
        and _is_positive(line.get("quantity"))
        and _is_positive(_first(line, "unit_rate", "rate", "price"))
    )


def _first(row: Mapping[str, Any], *names: str):
    for name in names:
        if row.get(name) is not None:
            return row[name]
    return None


def _required(kind: str, field: str, value):
    if value is None or (isinstance(value, str) and not value.strip()):
        raise RecordValidationError(kind, field, "missing")
    return value


def _required_text(kind: str, field: str, row: Mapping[str, Any]) -> str:
    return str(_required(kind, field, row.get(field))).strip()


def _decimal(kind: str, field: str, value) -> Decimal:
    try:
        return coerce_decimal(value)
    except ValueError as exc:
        raise RecordValidationError(kind, field, str(exc)) from exc


def _non_negative(kind: str, field: str, value) -> Decimal:
    amount = _decimal(kind, field, value)
    if not amount.is_finite():
        raise RecordValidationError(kind, field, "not a finite number")
    if amount < 0:
        raise RecordValidationError(kind, field, "cannot be negative")
    return amount


def _date(kind: str, field: str, value) -> date:
    try:
        return coerce_date(value)
    except ValueError as exc:
        raise RecordValidationError(kind, field, str(exc)) from exc


def _direction(kind: str, value, ledger_kind: LedgerKind) -> Direction:
    incoming, outgoing = LEDGER_DIRECTION_LABELS[ledger_kind]
    label = normalize_label(value)
    if label == incoming:
        return Direction.IN
    if label == outgoing:
        return Direction.OUT
    raise RecordValidationError(
        kind, "type", f"expected '{incoming}' or '{outgoing}', got {value!r}"
    )


def _is_positive(value) -> bool:
    try:
        amount = coerce_decimal(value)
    except ValueError:
        return False
    return amount.is_finite() and amount > 0


def _is_negative(value) -> bool:
    try:
        amount = coerce_decimal(value)
    except ValueError:
        return False
    return amount.is_finite() and amount < 0


__all__ = [
    "parse_line_item",
    "parse_invoice",
    "parse_expense",
    "parse_ledger_transaction",
    "validate_invoice_form",
    "validate_expense_form",
    "validate_ledger_transaction_form",
    "validate_cash_transaction_form",
    "validate_bank_transaction_form",
]
