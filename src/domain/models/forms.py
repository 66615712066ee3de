"""Domain models for entry form state."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class FormState:
    """Snapshot of an entry form.

    Attributes:
        values: Current field values.
        initial: Values the form resets to.
        errors: Field name to validation message, from the last submit.
        submitted: True once a submit passed validation.
    """

    values: dict[str, Any] = field(default_factory=dict)
    initial: dict[str, Any] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    submitted: bool = False

    @property
    def is_valid(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class SetField:
    """Replace the value of a single field."""

    name: str
    value: Any


@dataclass(frozen=True)
class Reset:
    """Restore the initial values."""


@dataclass(frozen=True)
class Submit:
    """Validate the current values."""


FormAction = SetField | Reset | Submit


__all__ = ["FormState", "SetField", "Reset", "Submit", "FormAction"]
