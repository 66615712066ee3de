"""Composition root for wiring infrastructure adapters."""

from src.application.ports.records_repository import RecordsRepositoryPort
from src.infrastructure.json_records_repository import JsonRecordsRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import AccountingSettings


def build_records_repository(
    settings: AccountingSettings | None = None,
) -> RecordsRepositoryPort:
    """Return the configured records repository.

    Raises:
        RuntimeError: If no records file is configured.
    """
    resolved = settings or AccountingSettings.from_env()
    if resolved.records_file is None:
        raise RuntimeError(
            "Reports require an ACCOUNTING_RECORDS_FILE value."
        )
    return JsonRecordsRepository(resolved.records_file, logger=get_app_logger())


__all__ = ["build_records_repository"]
