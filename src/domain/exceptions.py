"""Domain error types."""


class RecordValidationError(ValueError):
    """Raised when a raw record row cannot be parsed into a domain record."""

    def __init__(self, record_kind: str, field: str, message: str) -> None:
        self.record_kind = record_kind
        self.field = field
        super().__init__(f"Invalid {record_kind} record, field '{field}': {message}")


class UnknownPeriodTypeError(ValueError):
    """Raised when a period type name is not supported."""


__all__ = ["RecordValidationError", "UnknownPeriodTypeError"]
