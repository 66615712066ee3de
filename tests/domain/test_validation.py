"""Tests for record parsing and form validation."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.exceptions import RecordValidationError
from src.domain.models import Direction, LedgerKind, LineItem
from src.domain.services.validation import (
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


def test_parse_line_item_accepts_estimate_columns() -> None:
    """Estimate rows use rate, discount, and sales_tax columns."""
    line = parse_line_item(
        {"product_id": 7, "quantity": "3", "rate": 10.0, "discount": 10, "sales_tax": "15"}
    )

    assert line == LineItem(
        product_ref="7",
        quantity=Decimal("3"),
        unit_rate=Decimal("10.0"),
        discount_percent=Decimal("10"),
        tax_percent=Decimal("15"),
    )


def test_parse_line_item_accepts_invoice_columns() -> None:
    """Invoice rows use price and tax_rate and carry no discount."""
    line = parse_line_item({"product_id": "p1", "quantity": 2, "price": "19.99", "tax_rate": 5})

    assert line.unit_rate == Decimal("19.99")
    assert line.discount_percent == 0
    assert line.tax_percent == Decimal("5")


@pytest.mark.parametrize(
    "row, field",
    [
        ({"quantity": 1, "price": 1}, "product_ref"),
        ({"product_id": 1, "quantity": -1, "price": 1}, "quantity"),
        ({"product_id": 1, "quantity": 1, "price": "abc"}, "unit_rate"),
        ({"product_id": 1, "quantity": 1, "price": 1, "discount": 120}, "discount_percent"),
        ({"product_id": 1, "quantity": 1, "price": 1, "tax_rate": "NaN"}, "tax_percent"),
    ],
)
def test_parse_line_item_rejects_malformed_rows(row, field) -> None:
    """Malformed rows raise a typed error naming the field."""
    with pytest.raises(RecordValidationError) as excinfo:
        parse_line_item(row)

    assert excinfo.value.field == field
    assert excinfo.value.record_kind == "line item"


def test_parse_invoice_reads_store_row() -> None:
    """Invoice timestamps are reduced to their calendar date."""
    invoice = parse_invoice(
        {
            "id": 1,
            "client_id": 3,
            "invoice_number": "INV-001",
            "issue_date": "2024-03-15T00:00:00.000Z",
            "due_date": "2024-03-30",
            "subtotal": 1000,
            "vat_rate": 15.0,
            "status": "Pending",
        }
    )

    assert invoice.client_ref == "3"
    assert invoice.issue_date == date(2024, 3, 15)
    assert invoice.due_date == date(2024, 3, 30)
    assert invoice.subtotal == Decimal("1000")
    assert invoice.vat_rate == Decimal("15.0")
    assert invoice.status == "Pending"


def test_parse_invoice_requires_issue_date() -> None:
    with pytest.raises(RecordValidationError) as excinfo:
        parse_invoice({"client_id": 1, "invoice_number": "INV-9", "subtotal": 1})

    assert excinfo.value.field == "issue_date"


def test_parse_expense_requires_positive_amount() -> None:
    """Expenses must cost something, as the expense form requires."""
    row = {
        "expense_date": "2024-03-09",
        "expense_number": "EXP-001",
        "vendor_id": 2,
        "category": "Office",
        "amount": 0,
    }

    with pytest.raises(RecordValidationError):
        parse_expense(row)

    expense = parse_expense({**row, "amount": "120.40", "tax_amount": "18.06"})
    assert expense.amount == Decimal("120.40")
    assert expense.tax_amount == Decimal("18.06")
    assert expense.payment_status == "Pending"


def test_parse_ledger_transaction_maps_labels_per_book() -> None:
    """Cash and bank books use their own direction labels."""
    cash = parse_ledger_transaction(
        {
            "id": "tx-1",
            "date": "2024-03-15T10:00:00Z",
            "type": "Payment",
            "amount": "40",
            "category": "Rent",
            "reference": "REC002",
            "vat_rate": 15,
        },
        LedgerKind.CASH,
    )
    bank = parse_ledger_transaction(
        {"date": "2024-03-15", "type": "deposit", "amount": 100},
        LedgerKind.BANK,
    )

    assert cash.direction is Direction.OUT
    assert cash.transaction_id == "tx-1"
    assert cash.vat_amount == Decimal("6")
    assert bank.direction is Direction.IN
    assert bank.category == ""

    with pytest.raises(RecordValidationError) as excinfo:
        parse_ledger_transaction(
            {"date": "2024-03-15", "type": "deposit", "amount": 100},
            LedgerKind.CASH,
        )
    assert excinfo.value.field == "type"


def test_validate_invoice_form_reports_missing_fields() -> None:
    """Client, number, and valid lines are required."""
    errors = validate_invoice_form({"line_items": []})

    assert set(errors) == {"client_ref", "invoice_number", "line_items"}


def test_validate_invoice_form_checks_each_line() -> None:
    """Every line needs a product, a quantity, and a price above zero."""
    values = {
        "client_ref": "acme",
        "invoice_number": "INV-001",
        "vat_rate": Decimal("15"),
        "line_items": [
            {"product_id": "p1", "quantity": 2, "price": "19.99"},
            {"product_id": "p2", "quantity": 0, "price": "5"},
        ],
    }

    assert "line_items" in validate_invoice_form(values)

    values["line_items"] = [
        LineItem("p1", Decimal("2"), Decimal("19.99")),
        {"product_id": "p2", "quantity": 1, "price": "5"},
    ]
    assert validate_invoice_form(values) == {}


@pytest.mark.parametrize(
    "issue_date, due_date, expected",
    [
        (date(2024, 3, 15), date(2024, 3, 1), {"due_date"}),
        (date(2024, 3, 15), date(2024, 3, 15), set()),
        ("2024-03-15", "2024-04-14", set()),
        ("2024-03-15", "not a date", {"due_date"}),
        (None, date(2024, 3, 1), set()),
    ],
)
def test_validate_invoice_form_checks_due_date(issue_date, due_date, expected) -> None:
    """A due date may not fall before the issue date."""
    values = {
        "client_ref": "acme",
        "invoice_number": "INV-001",
        "issue_date": issue_date,
        "due_date": due_date,
        "line_items": [{"product_id": "p1", "quantity": 1, "price": "5"}],
    }

    assert set(validate_invoice_form(values)) == expected


def test_validate_expense_form() -> None:
    errors = validate_expense_form({"expense_date": "2024-03-09", "amount": "-5"})

    assert set(errors) == {"expense_number", "vendor_ref", "category", "amount"}


def test_validate_ledger_transaction_form() -> None:
    """New book entries need a known type, an amount, and descriptions."""
    values = {
        "type": "withdrawal",
        "amount": Decimal("0"),
        "description": "",
        "category": "Fees",
        "vat_rate": Decimal("15"),
    }

    errors = validate_ledger_transaction_form(values, LedgerKind.CASH)
    assert set(errors) == {"type", "amount", "description"}

    values.update(amount=Decimal("12"), description="Bank fee")
    assert validate_ledger_transaction_form(values, LedgerKind.BANK) == {}


def test_cash_and_bank_form_validators_use_their_own_directions() -> None:
    """Each book accepts only its own direction labels."""
    cash = {"type": "receipt", "amount": "10", "description": "Sale", "category": "Sales"}
    bank = dict(cash, type="deposit")

    assert validate_cash_transaction_form(cash) == {}
    assert validate_bank_transaction_form(bank) == {}
    assert "type" in validate_cash_transaction_form(bank)
    assert "type" in validate_bank_transaction_form(cash)
