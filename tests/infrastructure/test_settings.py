"""Tests for infrastructure settings."""

from decimal import Decimal
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import AccountingSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch, tmp_path):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    monkeypatch.setattr(settings_module, "get_project_root", lambda: tmp_path)
    for name in (
        "ACCOUNTING_RECORDS_FILE",
        "ACCOUNTING_DEFAULT_VAT_RATE",
        "ACCOUNTING_CURRENCY",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_reads_values(monkeypatch, tmp_path: Path) -> None:
    """Environment values override the defaults."""
    records = tmp_path / "records.json"
    records.write_text("{}")
    monkeypatch.setenv("ACCOUNTING_RECORDS_FILE", str(records))
    monkeypatch.setenv("ACCOUNTING_DEFAULT_VAT_RATE", "5")
    monkeypatch.setenv("ACCOUNTING_CURRENCY", "usd")

    settings = AccountingSettings.from_env()

    assert settings.records_file == records.resolve()
    assert settings.default_vat_rate == Decimal("5")
    assert settings.currency_code == "USD"


def test_from_env_defaults() -> None:
    """Without configuration, VAT is 15% in SAR and no file is set."""
    settings = AccountingSettings.from_env()

    assert settings.records_file is None
    assert settings.default_vat_rate == Decimal("15")
    assert settings.currency_code == "SAR"


@pytest.mark.parametrize("raw", ["abc", "-1", "NaN"])
def test_from_env_ignores_invalid_vat_rate(monkeypatch, raw) -> None:
    monkeypatch.setenv("ACCOUNTING_DEFAULT_VAT_RATE", raw)

    assert AccountingSettings.from_env().default_vat_rate == Decimal("15")


def test_from_env_finds_single_export_in_data_dir(tmp_path: Path) -> None:
    """A lone JSON export in data/ is picked up automatically."""
    data_dir = tmp_path / "data"
    data_dir.mkdir()
    export = data_dir / "export.json"
    export.write_text("{}")

    assert AccountingSettings.from_env().records_file == export.resolve()

    (data_dir / "other.json").write_text("{}")
    assert AccountingSettings.from_env().records_file is None
