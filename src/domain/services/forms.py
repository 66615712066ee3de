"""Reducer for entry-form state."""

from collections.abc import Callable, Mapping
from typing import Any

from src.domain.models import FormAction, FormState, Reset, SetField, Submit

FormValidator = Callable[[Mapping[str, Any]], dict[str, str]]


def initial_form_state(values: Mapping[str, Any]) -> FormState:
    """Return a fresh form holding the given starting values."""
    return FormState(values=dict(values), initial=dict(values))


def reduce_form(
    state: FormState,
    action: FormAction,
    validator: FormValidator,
) -> FormState:
    """Apply an action to a form and return the new state.

    Args:
        state: Current form state; never mutated.
        action: SetField, Reset, or Submit.
        validator: Returns field errors for a set of values.

    Returns:
        FormState: The updated state.

    Raises:
        TypeError: If the action type is unknown.
    """
    if isinstance(action, SetField):
        values = dict(state.values)
        values[action.name] = action.value
        errors = {k: v for k, v in state.errors.items() if k != action.name}
        return FormState(
            values=values,
            initial=dict(state.initial),
            errors=errors,
            submitted=False,
        )
    if isinstance(action, Reset):
        return initial_form_state(state.initial)
    if isinstance(action, Submit):
        errors = validator(state.values)
        return FormState(
            values=dict(state.values),
            initial=dict(state.initial),
            errors=errors,
            submitted=not errors,
        )
    raise TypeError(f"Unsupported form action: {action!r}")


__all__ = ["FormValidator", "initial_form_state", "reduce_form"]
