"""Domain models for reporting periods."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum


class PeriodType(str, Enum):
    """Calendar partition used to build report windows."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class PeriodWindow:
    """Inclusive date range for one period."""

    period_type: PeriodType
    start_date: date
    end_date: date

    @property
    def label(self) -> str:
        """Return a human-readable label for the window."""
        if self.period_type is PeriodType.DAILY:
            return self.start_date.isoformat()
        if self.period_type is PeriodType.MONTHLY:
            return self.start_date.strftime("%Y-%m")
        if self.period_type is PeriodType.QUARTERLY:
            quarter = (self.start_date.month - 1) // 3 + 1
            return f"{self.start_date.year}-Q{quarter}"
        if self.period_type is PeriodType.YEARLY:
            return str(self.start_date.year)
        return f"{self.start_date.isoformat()} - {self.end_date.isoformat()}"

    def contains(self, day: date) -> bool:
        """Return True when day falls inside the window, both ends included."""
        return self.start_date <= day <= self.end_date


@dataclass(frozen=True)
class PeriodBucket:
    """Sums by category for the records falling inside one window."""

    window: PeriodWindow
    sums: dict[str, Decimal] = field(default_factory=dict)

    @property
    def label(self) -> str:
        """Return the label of the bucket window."""
        return self.window.label

    @property
    def start_date(self) -> date:
        """Return the first day of the bucket window."""
        return self.window.start_date

    @property
    def end_date(self) -> date:
        """Return the last day of the bucket window."""
        return self.window.end_date

    @property
    def total(self) -> Decimal:
        """Return the grand total across categories."""
        return sum(self.sums.values(), Decimal("0"))


__all__ = ["PeriodType", "PeriodWindow", "PeriodBucket"]
