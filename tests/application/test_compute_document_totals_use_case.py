"""Tests for the ComputeDocumentTotalsUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.use_cases.compute_document_totals import (
    ComputeDocumentTotalsUseCase,
)
from src.domain.models import DocumentKind


def test_invoice_uses_default_vat_rate() -> None:
    """Invoices without a header rate use the configured default."""
    use_case = ComputeDocumentTotalsUseCase(
        default_vat_rate=Decimal("15"), logger=MagicMock()
    )

    totals = use_case.execute(
        DocumentKind.INVOICE,
        [
            {"product_id": "p1", "quantity": 3, "price": "10.35"},
        ],
    )

    assert totals.subtotal == Decimal("31.05")
    assert totals.tax_amount == Decimal("4.6575")
    assert totals.total == Decimal("35.7075")


def test_estimate_skips_invalid_lines() -> None:
    """Invalid estimate lines are logged and excluded."""
    logger = MagicMock()
    use_case = ComputeDocumentTotalsUseCase(logger=logger)

    totals = use_case.execute(
        DocumentKind.ESTIMATE,
        [
            {"product_id": "p1", "quantity": 3, "rate": "10", "discount": 10, "sales_tax": 15},
            {"product_id": "p2", "quantity": -1, "rate": "10"},
        ],
    )

    assert totals.total == Decimal("31.05")
    assert totals.tax_amount == 0
    logger.warning.assert_called_once()
