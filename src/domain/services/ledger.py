"""Running-balance summaries for the cash and bank books."""

from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from src.domain.models import (
    Direction,
    LedgerEntry,
    LedgerSummary,
    LedgerTransaction,
    PeriodType,
)
from src.domain.services.normalization import normalize_search_term
from src.domain.services.periods import resolve_period_window


def summarize_ledger(
    transactions: Iterable[LedgerTransaction],
    reference_date: date,
    period_type: PeriodType | str,
) -> LedgerSummary:
    """Summarize the transactions of the window containing reference_date.

    Transactions are filtered to the inclusive window and sorted by date;
    same-day transactions keep their arrival order. The running balance
    starts at zero for each window and the opening balance is derived as
    closing minus net movement, so no balance is carried over from earlier
    periods.

    Args:
        transactions: Cash or bank transactions, in any order.
        reference_date: Date selecting the window.
        period_type: Window size (daily, weekly, monthly, ...).

    Returns:
        LedgerSummary: Totals, balances, and entries with running balances.
    """
    window = resolve_period_window(reference_date, period_type)
    in_window = sorted(
        (tx for tx in transactions if window.contains(tx.date)),
        key=lambda tx: tx.date,
    )

    running_balance = Decimal("0")
    total_in = Decimal("0")
    total_out = Decimal("0")
    entries: list[LedgerEntry] = []
    for tx in in_window:
        running_balance += tx.signed_amount
        if tx.direction is Direction.IN:
            total_in += tx.amount
        else:
            total_out += tx.amount
        entries.append(LedgerEntry(transaction=tx, running_balance=running_balance))

    # TODO: accept a carried-forward balance once prior-period totals are
    # fetched alongside the window.
    opening_balance = running_balance - (total_in - total_out)
    return LedgerSummary(
        window=window,
        opening_balance=opening_balance,
        closing_balance=running_balance,
        total_in=total_in,
        total_out=total_out,
        entries=tuple(entries),
    )


def filter_ledger_entries(
    entries: Iterable[LedgerEntry],
    direction: Direction | None = None,
    search_term: str = "",
) -> list[LedgerEntry]:
    """Narrow ledger entries for display.

    Running balances are left untouched; filtering only hides rows.

    Args:
        entries: Entries from a LedgerSummary.
        direction: Keep only this direction when given.
        search_term: Case-insensitive text matched against description,
            reference, and category.

    Returns:
        list[LedgerEntry]: Matching entries in their original order.
    """
    needle = normalize_search_term(search_term)
    result: list[LedgerEntry] = []
    for entry in entries:
        tx = entry.transaction
        if direction is not None and tx.direction is not direction:
            continue
        if needle and not any(
            needle in (text or "").lower()
            for text in (tx.description, tx.reference, tx.category)
        ):
            continue
        result.append(entry)
    return result


__all__ = ["summarize_ledger", "filter_ledger_entries"]
