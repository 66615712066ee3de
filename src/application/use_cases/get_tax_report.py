"""Use case to compute the VAT report for a period."""

from datetime import date

from src.application.ports.records_repository import RecordsRepositoryPort
from src.application.use_cases.record_parsing import parse_rows
from src.domain.models import PeriodType, TaxReport
from src.domain.services.aggregation import compute_tax_report
from src.domain.services.validation import parse_expense, parse_invoice
from src.infrastructure.logging.logger import get_app_logger


class GetTaxReportUseCase:
    """Compute VAT collected, VAT paid, and net VAT due."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        logger=None,
    ) -> None:
        self._records_repository = records_repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        reference_date: date,
        period_type: PeriodType | str = PeriodType.MONTHLY,
    ) -> TaxReport:
        """Return the draft VAT report for the window of reference_date."""
        invoices = parse_rows(
            self._records_repository.fetch_invoices(),
            parse_invoice,
            self._logger,
        )
        expenses = parse_rows(
            self._records_repository.fetch_expenses(),
            parse_expense,
            self._logger,
        )
        report = compute_tax_report(invoices, expenses, reference_date, period_type)
        self._logger.info(
            f"Tax report {report.window.label}: collected={report.vat_collected}, "
            f"paid={report.vat_paid}, net={report.net_vat}"
        )
        return report


__all__ = ["GetTaxReportUseCase"]
