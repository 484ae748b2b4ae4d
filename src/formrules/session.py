"""Headless form state driving the engine the way a renderer does."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Literal

from formrules.conditions import get_visible_fields
from formrules.logging import get_logger
from formrules.validation import validate_field, validate_form

if TYPE_CHECKING:
    from formrules.typing.models import BaseFieldDefinition, FormSchema

logger = get_logger(__name__)

SubmitStatus = Literal["idle", "success", "error"]
SUBMIT_SUCCESS_MESSAGE = "Form submitted successfully!"


def initial_values_for(fields: list[BaseFieldDefinition]) -> dict[str, Any]:
    """Collect `default_value` of every field that declares one.

    Args:
        fields (list[BaseFieldDefinition]): Form fields.

    Returns:
        dict[str, Any]: Values keyed by value key.
    """
    return {field.value_key: field.default_value for field in fields if field.default_value is not None}


class FormSession:
    """Values, errors and submission state of one rendered form.

    Every change produces a new values mapping. Schema fields are never
    modified.
    """

    def __init__(self, schema: FormSchema, initial_values: Mapping[str, Any] | None = None) -> None:
        """Start a session.

        Args:
            schema (FormSchema): Form being filled in.
            initial_values (Mapping[str, Any] | None): Starting values. Field
                defaults are used when omitted.
        """
        self.schema = schema
        if initial_values is None:
            initial_values = initial_values_for(schema.fields)
        self._initial_values: dict[str, Any] = dict(initial_values)
        self.values: dict[str, Any] = dict(self._initial_values)
        self.errors: dict[str, str] = {}
        self.touched: dict[str, bool] = {}
        self.status: SubmitStatus = "idle"
        self.status_message = ""

    def _find_field(self, key: str) -> BaseFieldDefinition | None:
        return next((field for field in self.schema.fields if field.value_key == key), None)

    def set_value(self, key: str, value: Any) -> None:
        """Change one value and clear its pending error.

        Args:
            key (str): Field value key.
            value (Any): New value.
        """
        self.values = {**self.values, key: value}
        self.errors.pop(key, None)

    def blur(self, key: str) -> str | None:
        """Mark a field touched and validate it.

        Args:
            key (str): Field value key.

        Returns:
            str | None: Error message of the field, if any.
        """
        self.touched[key] = True
        field = self._find_field(key)
        if field is None:
            return None
        error = validate_field(field, self.values.get(key), self.values)
        if error:
            self.errors[key] = error
        else:
            self.errors.pop(key, None)
        return error

    def visible_fields(self) -> list[BaseFieldDefinition]:
        """Return the fields to render for the current values."""
        return get_visible_fields(self.schema.fields, self.values)

    def validate(self) -> bool:
        """Validate the visible fields and replace the error map.

        Returns:
            bool: True when every visible field is valid.
        """
        visible = self.visible_fields()
        keys_by_id = {field.id: field.value_key for field in visible}
        self.errors = {keys_by_id[error.field_id]: error.message for error in validate_form(visible, self.values)}
        return not self.errors

    def submit(self, handler: Callable[[dict[str, Any]], object]) -> bool:
        """Validate and hand the values to `handler`.

        Args:
            handler (Callable[[dict[str, Any]], object]): Receives a copy of the values.

        Returns:
            bool: True when the handler ran without raising.
        """
        self.touched = {field.value_key: True for field in self.schema.fields}
        if not self.validate():
            logger.info("Form submission blocked", extra={"form_id": self.schema.id, "errors": len(self.errors)})
            return False

        try:
            handler(dict(self.values))
        except Exception as exc:
            logger.exception("Form submission failed", extra={"form_id": self.schema.id})
            self.status = "error"
            self.status_message = str(exc) or "An error occurred while submitting the form."
            return False

        self.status = "success"
        self.status_message = SUBMIT_SUCCESS_MESSAGE
        if self.schema.settings and self.schema.settings.clear_on_submit:
            self.values = dict(self._initial_values)
            self.touched = {}
        return True

    def reset(self) -> None:
        """Restore the initial values and clear errors, touched and status."""
        self.values = dict(self._initial_values)
        self.errors = {}
        self.touched = {}
        self.status = "idle"
        self.status_message = ""
