"""Use case to summarize the cash or bank book for a period."""

from datetime import date

from src.application.ports.records_repository import RecordsRepositoryPort
from src.application.use_cases.record_parsing import parse_rows
from src.domain.models import LedgerKind, LedgerSummary, PeriodType
from src.domain.services.ledger import summarize_ledger
from src.domain.services.validation import parse_ledger_transaction
from src.infrastructure.logging.logger import get_app_logger


class GetLedgerSummaryUseCase:
    """Compute running balances and totals for one book."""

    def __init__(
        self,
        records_repository: RecordsRepositoryPort,
        ledger_kind: LedgerKind = LedgerKind.CASH,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            records_repository: Port providing raw transaction rows.
            ledger_kind: Book to summarize (cash or bank).
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._records_repository = records_repository
        self._ledger_kind = ledger_kind
        self._logger = logger or get_app_logger()

    def execute(
        self,
        reference_date: date,
        period_type: PeriodType | str = PeriodType.DAILY,
    ) -> LedgerSummary:
        """Return the ledger summary for the window of reference_date.

        Args:
            reference_date: Date selecting the window.
            period_type: Window size (daily, weekly, monthly, ...).

        Returns:
            LedgerSummary: Opening/closing balances, totals, and entries.
        """
        rows = self._records_repository.fetch_ledger_transactions(
            self._ledger_kind
        )
        self._logger.info(
            f"Fetched {len(rows)} {self._ledger_kind.value} book rows"
        )
        transactions = parse_rows(
            rows,
            parse_ledger_transaction,
            self._logger,
            self._ledger_kind,
        )
        summary = summarize_ledger(transactions, reference_date, period_type)
        self._logger.info(
            f"{self._ledger_kind.value} book {summary.window.label}: "
            f"in={summary.total_in}, out={summary.total_out}, "
            f"closing={summary.closing_balance}"
        )
        return summary


__all__ = ["GetLedgerSummaryUseCase"]
