"""Port for reading raw bookkeeping records."""

from collections.abc import Mapping
from typing import Any, Protocol

from src.domain.models import LedgerKind

RawRow = Mapping[str, Any]


class RecordsRepositoryPort(Protocol):
    """Port exposing the record rows the reports are computed from."""

    def fetch_invoices(self) -> list[RawRow]:
        """Return invoice header rows."""

    def fetch_expenses(self) -> list[RawRow]:
        """Return expense rows."""

    def fetch_ledger_transactions(self, ledger_kind: LedgerKind) -> list[RawRow]:
        """Return cash or bank book rows."""


__all__ = ["RecordsRepositoryPort", "RawRow"]
