"""Tests for the composition root."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import container
from src.infrastructure.json_records_repository import JsonRecordsRepository
from src.infrastructure.settings import AccountingSettings


def test_build_records_repository_uses_settings_file(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(container, "get_app_logger", MagicMock)

    repository = container.build_records_repository(
        AccountingSettings(records_file=Path(tmp_path / "records.json"))
    )

    assert isinstance(repository, JsonRecordsRepository)


def test_build_records_repository_requires_file() -> None:
    with pytest.raises(RuntimeError):
        container.build_records_repository(AccountingSettings())
