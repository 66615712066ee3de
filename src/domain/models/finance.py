"""Domain models for financial statements."""

from dataclasses import dataclass, field
from decimal import Decimal

from .periods import PeriodWindow


@dataclass(frozen=True)
class RevenueBreakdown:
    """Revenue figures of a P&L statement.

    Attributes:
        invoices: VAT-inclusive total of invoices issued in the period.
        other: Revenue from other sources.
        total: Sum of all revenue.
    """

    invoices: Decimal
    other: Decimal
    total: Decimal


@dataclass(frozen=True)
class ExpenseBreakdown:
    """Expense totals grouped by category."""

    by_category: dict[str, Decimal] = field(default_factory=dict)
    total: Decimal = Decimal("0")


@dataclass(frozen=True)
class ProfitAndLossStatement:
    """Profit and loss for a period."""

    window: PeriodWindow
    revenue: RevenueBreakdown
    expenses: ExpenseBreakdown
    gross_profit: Decimal
    net_profit: Decimal

    @property
    def is_loss(self) -> bool:
        return self.net_profit < 0


@dataclass(frozen=True)
class TaxReport:
    """VAT return figures for a period.

    Attributes:
        window: Reporting period.
        total_sales: Pre-VAT invoice subtotals.
        total_purchases: Expense amounts.
        vat_collected: VAT charged on sales.
        vat_paid: VAT paid on purchases.
        net_vat: VAT due to the authority (negative means refundable).
        status: Filing status; reports are produced as drafts.
    """

    window: PeriodWindow
    total_sales: Decimal
    total_purchases: Decimal
    vat_collected: Decimal
    vat_paid: Decimal
    net_vat: Decimal
    status: str = "draft"


__all__ = [
    "RevenueBreakdown",
    "ExpenseBreakdown",
    "ProfitAndLossStatement",
    "TaxReport",
]
