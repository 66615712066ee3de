"""Use case to total the lines of an invoice or estimate being edited."""

from collections.abc import Iterable
from decimal import Decimal

from src.application.ports.records_repository import RawRow
from src.application.use_cases.record_parsing import parse_rows
from src.domain.constants import DEFAULT_VAT_RATE
from src.domain.models import DocumentKind, DocumentTotals
from src.domain.services.line_items import compute_document_totals
from src.domain.services.validation import parse_line_item
from src.infrastructure.logging.logger import get_app_logger


class ComputeDocumentTotalsUseCase:
    """Parse raw line rows and compute document totals."""

    def __init__(
        self,
        default_vat_rate: Decimal = DEFAULT_VAT_RATE,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            default_vat_rate: Header rate used for invoices without one.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._default_vat_rate = default_vat_rate
        self._logger = logger or get_app_logger()

    def execute(
        self,
        kind: DocumentKind,
        raw_lines: Iterable[RawRow],
        header_tax_percent: Decimal | None = None,
    ) -> DocumentTotals:
        """Return subtotal, tax, and total for the document lines.

        Lines that fail validation are skipped with a warning.
        """
        lines = parse_rows(raw_lines, parse_line_item, self._logger)
        if kind is DocumentKind.INVOICE and header_tax_percent is None:
            header_tax_percent = self._default_vat_rate
        return compute_document_totals(kind, lines, header_tax_percent)


__all__ = ["ComputeDocumentTotalsUseCase"]
