"""Domain normalization helpers."""

from src.domain.constants import UNCATEGORIZED


def normalize_category(category: str | None) -> str:
    """Normalize category labels used as aggregation keys.

    Args:
        category: Raw category value from a record.

    Returns:
        str: Stripped category, or the uncategorized label when blank.
    """
    if category is None:
        return UNCATEGORIZED
    cleaned = str(category).strip()
    return cleaned if cleaned else UNCATEGORIZED


def normalize_search_term(term: str | None) -> str:
    """Normalize free-text search input for case-insensitive matching."""
    if not term:
        return ""
    return term.strip().lower()


def normalize_label(value: str | None) -> str:
    """Normalize stored enum-like labels such as 'Receipt ' to 'receipt'."""
    if not value:
        return ""
    return str(value).strip().lower()


__all__ = ["normalize_category", "normalize_search_term", "normalize_label"]
