"""CLI adapter printing the cash book, bank book, P&L, and VAT report.

The period is selected with REPORT_DATE (YYYY-MM-DD, defaults to today)
and REPORT_PERIOD (daily, weekly, monthly, quarterly, yearly).
"""

from datetime import date
import os

from src.application.use_cases.get_ledger_summary import GetLedgerSummaryUseCase
from src.application.use_cases.get_profit_and_loss import GetProfitAndLossUseCase
from src.application.use_cases.get_tax_report import GetTaxReportUseCase
from src.domain.exceptions import UnknownPeriodTypeError
from src.domain.models import LedgerKind, LedgerSummary
from src.domain.services.periods import parse_period_type
from src.infrastructure.container import build_records_repository
from src.infrastructure.logging.logger import get_app_logger, get_usage_logger
from src.infrastructure.settings import AccountingSettings
from src.utils.decimal_utils import to_display_amount


def _parse_date(value: str | None, logger) -> date:
    """Parse an ISO date string, falling back to today.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date: Parsed date or today when missing or invalid.
    """
    if not value:
        return date.today()
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return date.today()


def _print_ledger(title: str, summary: LedgerSummary, currency: str) -> None:
    print(f"{title} ({summary.window.label})")
    print(f"  Opening balance: {currency} {to_display_amount(summary.opening_balance)}")
    for entry in summary.entries:
        tx = entry.transaction
        print(
            f"  {tx.date.isoformat()}  {tx.direction.value:<3}  "
            f"{to_display_amount(tx.amount):>12}  "
            f"{to_display_amount(entry.running_balance):>12}  {tx.description}"
        )
    print(f"  Total in: {currency} {to_display_amount(summary.total_in)}")
    print(f"  Total out: {currency} {to_display_amount(summary.total_out)}")
    print(f"  Closing balance: {currency} {to_display_amount(summary.closing_balance)}")


def main() -> None:
    """Compute and print the reports for the selected period."""
    logger = get_app_logger()
    settings = AccountingSettings.from_env()
    if settings.records_file is None:
        logger.warning("ACCOUNTING_RECORDS_FILE is required to print reports.")
        return

    reference_date = _parse_date(os.getenv("REPORT_DATE"), logger)
    try:
        period_type = parse_period_type(os.getenv("REPORT_PERIOD", "monthly"))
    except UnknownPeriodTypeError as exc:
        logger.error(str(exc))
        return

    repository = build_records_repository(settings)
    currency = settings.currency_code
    try:
        cash_book = GetLedgerSummaryUseCase(
            repository, LedgerKind.CASH, logger=logger
        ).execute(reference_date, period_type)
        bank_book = GetLedgerSummaryUseCase(
            repository, LedgerKind.BANK, logger=logger
        ).execute(reference_date, period_type)
        statement = GetProfitAndLossUseCase(repository, logger=logger).execute(
            reference_date, period_type
        )
        tax_report = GetTaxReportUseCase(repository, logger=logger).execute(
            reference_date, period_type
        )
    except RuntimeError as exc:
        logger.error(str(exc))
        return

    _print_ledger("Cash book", cash_book, currency)
    _print_ledger("Bank book", bank_book, currency)

    print(f"Profit & loss ({statement.window.label})")
    print(f"  Revenue: {currency} {to_display_amount(statement.revenue.total)}")
    for category, amount in sorted(statement.expenses.by_category.items()):
        print(f"  Expense {category}: {currency} {to_display_amount(amount)}")
    print(f"  Expenses: {currency} {to_display_amount(statement.expenses.total)}")
    print(f"  Net profit: {currency} {to_display_amount(statement.net_profit)}")

    print(f"VAT report ({tax_report.window.label}, {tax_report.status})")
    print(f"  VAT collected: {currency} {to_display_amount(tax_report.vat_collected)}")
    print(f"  VAT paid: {currency} {to_display_amount(tax_report.vat_paid)}")
    print(f"  Net VAT due: {currency} {to_display_amount(tax_report.net_vat)}")

    get_usage_logger().info(
        f"Reports printed for {period_type.value} period of {reference_date}"
    )


if __name__ == "__main__":  # pragma: no cover
    main()
