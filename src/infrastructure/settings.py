"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal
import os
from pathlib import Path
from typing import Optional

import dotenv

from src.domain.constants import DEFAULT_CURRENCY, DEFAULT_VAT_RATE
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import coerce_decimal
from src.utils.utils import get_project_root


@dataclass(frozen=True)
class AccountingSettings:
    """Settings for the reporting adapters.

    Attributes:
        records_file: Optional path to a JSON export of the records.
        default_vat_rate: VAT rate applied to invoices without one.
        currency_code: Currency shown next to amounts.
    """

    records_file: Optional[Path] = None
    default_vat_rate: Decimal = DEFAULT_VAT_RATE
    currency_code: str = DEFAULT_CURRENCY

    @classmethod
    def from_env(cls) -> "AccountingSettings":
        """Build settings from environment variables (and a .env file).

        Returns:
            AccountingSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        raw_records = os.getenv("ACCOUNTING_RECORDS_FILE")
        if raw_records:
            records_file = cls._normalize_path(raw_records, logger=logger)
        else:
            records_file = cls._default_records_file(logger=logger)
        return cls(
            records_file=records_file,
            default_vat_rate=cls._parse_vat_rate(
                os.getenv("ACCOUNTING_DEFAULT_VAT_RATE"), logger=logger
            ),
            currency_code=(
                os.getenv("ACCOUNTING_CURRENCY", DEFAULT_CURRENCY).strip().upper()
                or DEFAULT_CURRENCY
            ),
        )

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Records file does not exist at {path}")
        return path

    @staticmethod
    def _parse_vat_rate(raw_rate: str | None, logger) -> Decimal:
        """Parse the default VAT rate, falling back when invalid.

        Args:
            raw_rate: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            Decimal: Parsed rate, or the domain default.
        """
        if not raw_rate:
            return DEFAULT_VAT_RATE
        try:
            rate = coerce_decimal(raw_rate)
        except ValueError:
            logger.warning(
                f"Invalid ACCOUNTING_DEFAULT_VAT_RATE '{raw_rate}'. "
                f"Using {DEFAULT_VAT_RATE}."
            )
            return DEFAULT_VAT_RATE
        if not rate.is_finite() or rate < 0:
            logger.warning(
                f"ACCOUNTING_DEFAULT_VAT_RATE must be a non-negative number, "
                f"got '{raw_rate}'. Using {DEFAULT_VAT_RATE}."
            )
            return DEFAULT_VAT_RATE
        return rate

    @staticmethod
    def _default_records_file(logger) -> Path | None:
        """Return a default records export when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single export is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.json"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .json files found in data/. "
                "Set ACCOUNTING_RECORDS_FILE to choose one."
            )
        return None


__all__ = ["AccountingSettings"]
