"""Tests for the GetTaxReportUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.get_tax_report import GetTaxReportUseCase


def test_execute_computes_quarterly_vat() -> None:
    """Use case should sum VAT over the quarter of the reference date."""
    repository = MagicMock()
    repository.fetch_invoices.return_value = [
        {
            "client_id": 1,
            "invoice_number": "INV-001",
            "issue_date": "2024-01-15",
            "subtotal": "2000",
            "vat_rate": "15",
        },
        {
            "client_id": 2,
            "invoice_number": "INV-002",
            "issue_date": "2024-04-01",
            "subtotal": "500",
            "vat_rate": "15",
        },
    ]
    repository.fetch_expenses.return_value = [
        {
            "expense_date": "2024-02-10",
            "expense_number": "EXP-001",
            "vendor_id": 4,
            "category": "Supplies",
            "amount": "800",
            "tax_amount": "120",
        }
    ]

    report = GetTaxReportUseCase(repository, logger=MagicMock()).execute(
        date(2024, 3, 31), "quarterly"
    )

    assert report.window.label == "2024-Q1"
    assert report.total_sales == Decimal("2000")
    assert report.vat_collected == Decimal("300")
    assert report.total_purchases == Decimal("800")
    assert report.vat_paid == Decimal("120")
    assert report.net_vat == Decimal("180")
    assert report.status == "draft"
