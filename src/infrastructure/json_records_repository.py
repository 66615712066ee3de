"""Records repository backed by a JSON export of the record store."""

import json
from pathlib import Path

from src.application.ports.records_repository import RawRow
from src.domain.models import LedgerKind

LEDGER_SECTIONS = {
    LedgerKind.CASH: "cash_transactions",
    LedgerKind.BANK: "bank_transactions",
}


class JsonRecordsRepository:
    """Read invoices, expenses, and book transactions from a JSON document.

    The document holds one list of row objects per table::

        {"invoices": [...], "expenses": [...],
         "cash_transactions": [...], "bank_transactions": [...]}

    Missing sections read as empty tables.
    """

    def __init__(self, path: Path | str, logger) -> None:
        self._path = Path(path)
        self._logger = logger
        self._document: dict | None = None

    def fetch_invoices(self) -> list[RawRow]:
        return self._section("invoices")

    def fetch_expenses(self) -> list[RawRow]:
        return self._section("expenses")

    def fetch_ledger_transactions(self, ledger_kind: LedgerKind) -> list[RawRow]:
        return self._section(LEDGER_SECTIONS[ledger_kind])

    def _section(self, name: str) -> list[RawRow]:
        rows = self._load().get(name, [])
        if not isinstance(rows, list):
            raise RuntimeError(
                f"Section '{name}' in {self._path} must be a list of rows."
            )
        return [row for row in rows if isinstance(row, dict)]

    def _load(self) -> dict:
        if self._document is None:
            if not self._path.exists():
                raise RuntimeError(f"Records file not found: {self._path}")
            try:
                with self._path.open(encoding="utf-8") as handle:
                    document = json.load(handle)
            except json.JSONDecodeError as exc:
                raise RuntimeError(
                    f"Records file {self._path} is not valid JSON: {exc}"
                ) from exc
            except (ValueError, OSError) as exc:
                raise RuntimeError(
                    f"Records file {self._path} cannot be read: {exc}"
                ) from exc
            if not isinstance(document, dict):
                raise RuntimeError(
                    f"Records file {self._path} must hold a JSON object."
                )
            self._logger.info(f"Loaded records from {self._path}")
            self._document = document
        return self._document


__all__ = ["JsonRecordsRepository"]
