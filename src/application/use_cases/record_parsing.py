"""Shared helper turning raw rows into domain records."""

from collections.abc import Callable, Iterable
from typing import TypeVar

from src.domain.exceptions import RecordValidationError

T = TypeVar("T")


def parse_rows(
    rows: Iterable,
    parser: Callable[..., T],
    logger,
    *parser_args,
) -> list[T]:
    """Parse rows, logging and skipping the malformed ones.

    Args:
        rows: Raw rows from the records repository.
        parser: Domain parser applied to each row.
        logger: Logger used for warnings.
        *parser_args: Extra positional arguments for the parser.

    Returns:
        list[T]: Parsed records in their original order.
    """
    parsed: list[T] = []
    for index, row in enumerate(rows):
        try:
            parsed.append(parser(row, *parser_args))
        except RecordValidationError as exc:
            logger.warning(f"Skipping row {index}: {exc}")
    return parsed


__all__ = ["parse_rows"]
