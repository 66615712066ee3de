"""Application ports package."""

from .records_repository import RawRow, RecordsRepositoryPort

__all__ = ["RawRow", "RecordsRepositoryPort"]
