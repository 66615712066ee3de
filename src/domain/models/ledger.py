"""Domain models for cash and bank books."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum

from .periods import PeriodWindow


class LedgerKind(str, Enum):
    """Book a transaction belongs to."""

    CASH = "cash"
    BANK = "bank"


class Direction(str, Enum):
    """Whether a transaction adds money to the book or takes it out."""

    IN = "in"
    OUT = "out"


@dataclass(frozen=True)
class LedgerTransaction:
    """Single immutable cash or bank movement.

    Attributes:
        date: Posting date of the movement.
        direction: Receipt/deposit (IN) or payment/withdrawal (OUT).
        amount: Positive amount moved.
        category: Free-form category chosen by the user.
        reference: External reference such as a receipt number.
        description: Optional description shown in the book.
        vat_rate: VAT percentage attached to the movement.
        transaction_id: Identifier assigned by the record store.
    """

    date: date
    direction: Direction
    amount: Decimal
    category: str
    reference: str
    description: str = ""
    vat_rate: Decimal = Decimal("0")
    transaction_id: str | None = None

    @property
    def signed_amount(self) -> Decimal:
        """Return the amount with the sign of its direction."""
        return self.amount if self.direction is Direction.IN else -self.amount

    @property
    def vat_amount(self) -> Decimal:
        """Return the VAT attached to the movement (amount * rate / 100)."""
        return self.amount * self.vat_rate / Decimal("100")


@dataclass(frozen=True)
class LedgerEntry:
    """Transaction paired with the balance after applying it."""

    transaction: LedgerTransaction
    running_balance: Decimal


@dataclass(frozen=True)
class LedgerSummary:
    """Balances and totals for a ledger window.

    Attributes:
        window: Date range the summary covers.
        opening_balance: Balance before the first entry of the window.
        closing_balance: Balance after the last entry of the window.
        total_in: Sum of incoming amounts.
        total_out: Sum of outgoing amounts.
        entries: Transactions in ascending date order with running balances.
    """

    window: PeriodWindow
    opening_balance: Decimal
    closing_balance: Decimal
    total_in: Decimal
    total_out: Decimal
    entries: tuple[LedgerEntry, ...] = ()

    @property
    def net_movement(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


__all__ = [
    "LedgerKind",
    "Direction",
    "LedgerTransaction",
    "LedgerEntry",
    "LedgerSummary",
]
