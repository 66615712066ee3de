"""Domain models for invoice and expense records."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class InvoiceRecord:
    """Stored invoice header."""

    invoice_number: str
    client_ref: str
    issue_date: date
    subtotal: Decimal
    vat_rate: Decimal
    status: str = "Draft"
    due_date: date | None = None


@dataclass(frozen=True)
class ExpenseRecord:
    """Stored expense."""

    expense_number: str
    expense_date: date
    vendor_ref: str
    category: str
    amount: Decimal
    tax_amount: Decimal = Decimal("0")
    payment_status: str = "Pending"


__all__ = ["InvoiceRecord", "ExpenseRecord"]
