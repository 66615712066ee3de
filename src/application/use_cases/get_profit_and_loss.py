"""Use case to compute the P&L statement for a period."""

from datetime import date

from src.application.ports.records_repository import RecordsRepositoryPort
from src.application.use_cases.record_parsing import parse_rows
from src.domain.models import PeriodType, ProfitAndLossStatement
from src.domain.services.aggregation import compute_profit_and_loss
from src.domain.services.validation import parse_expense, parse_invoice
from src.infrastructure.logging.logger import get_app_logger


class GetProfitAndLossUseCase:
    """Compute revenue, expenses, and net profit from stored records."""

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
    ) -> ProfitAndLossStatement:
        """Return the P&L statement for the window of reference_date."""
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
        statement = compute_profit_and_loss(
            invoices, expenses, reference_date, period_type
        )
        self._logger.info(
            f"P&L {statement.window.label}: revenue={statement.revenue.total}, "
            f"expenses={statement.expenses.total}, net={statement.net_profit}"
        )
        return statement


__all__ = ["GetProfitAndLossUseCase"]
