"""Domain constants for invoicing and bookkeeping."""

from decimal import Decimal

DEFAULT_VAT_RATE = Decimal("15")
DEFAULT_CURRENCY = "SAR"

# Direction labels as stored for each ledger kind: (incoming, outgoing).
CASH_DIRECTION_LABELS = ("receipt", "payment")
BANK_DIRECTION_LABELS = ("deposit", "withdrawal")

INVOICE_STATUSES = ("Draft", "Pending", "Paid", "Overdue", "Cancelled")
EXPENSE_CATEGORIES = (
    "Travel",
    "Supplies",
    "Utilities",
    "Office",
    "Marketing",
    "Other",
)
EXPENSE_PAYMENT_STATUSES = ("Pending", "Approved", "Paid")
PAYMENT_METHODS = ("cash", "bank_transfer", "cheque")

UNCATEGORIZED = "Uncategorized"

INVOICE_FORM_DEFAULTS = {
    "client_ref": "",
    "invoice_number": "",
    "issue_date": "",
    "due_date": "",
    "vat_rate": DEFAULT_VAT_RATE,
    "status": "Draft",
    "notes": "",
    "line_items": (),
}

EXPENSE_FORM_DEFAULTS = {
    "expense_date": "",
    "expense_number": "",
    "vendor_ref": "",
    "category": "",
    "description": "",
    "amount": Decimal("0"),
    "tax_amount": Decimal("0"),
    "payment_status": "Pending",
    "payment_method": "Cash",
}

CASH_TRANSACTION_FORM_DEFAULTS = {
    "type": "receipt",
    "amount": Decimal("0"),
    "description": "",
    "category": "",
    "reference": "",
    "payment_method": "cash",
    "vat_rate": DEFAULT_VAT_RATE,
    "invoice_number": "",
    "notes": "",
    "vat_number": "",
}

BANK_TRANSACTION_FORM_DEFAULTS = {
    "type": "deposit",
    "amount": Decimal("0"),
    "description": "",
    "category": "",
    "reference": "",
    "bank_account": "",
    "cheque_number": "",
    "beneficiary": "",
    "vat_rate": DEFAULT_VAT_RATE,
    "purpose": "",
    "iban": "",
}


__all__ = [
    "DEFAULT_VAT_RATE",
    "DEFAULT_CURRENCY",
    "CASH_DIRECTION_LABELS",
    "BANK_DIRECTION_LABELS",
    "INVOICE_STATUSES",
    "EXPENSE_CATEGORIES",
    "EXPENSE_PAYMENT_STATUSES",
    "PAYMENT_METHODS",
    "UNCATEGORIZED",
    "INVOICE_FORM_DEFAULTS",
    "EXPENSE_FORM_DEFAULTS",
    "CASH_TRANSACTION_FORM_DEFAULTS",
    "BANK_TRANSACTION_FORM_DEFAULTS",
]
