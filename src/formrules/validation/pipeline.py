"""Ordered per-field validator chain and form-level aggregation."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from formrules.exceptions import PatternError
from formrules.logging import get_logger
from formrules.typing.enums import STATIC_FIELD_TYPES, FieldType
from formrules.typing.models import FieldValidationError
from formrules.values import is_truthy, to_number, to_text

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from formrules.typing.models import BaseFieldDefinition, ValidatorFunction

logger = get_logger(__name__)

EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
INVALID_EMAIL_MESSAGE = "Please enter a valid email address"
INVALID_URL_MESSAGE = "Please enter a valid URL"
INVALID_FORMAT_MESSAGE = "Invalid format"
INVALID_PATTERN_MESSAGE = "Invalid validation pattern"

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def _required(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    # 0, False and "" all count as not provided.
    if field.required and not is_truthy(value):
        custom_message = field.validation.custom_message if field.validation else None
        return custom_message or f"{field.label or 'This field'} is required"
    return None


def _min_length(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    bound = field.validation.min_length if field.validation else None
    if bound and isinstance(value, (str, list, tuple)) and value and len(value) < bound:
        return f"Minimum length is {bound} characters"
    return None


def _max_length(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    bound = field.validation.max_length if field.validation else None
    if bound and isinstance(value, (str, list, tuple)) and value and len(value) > bound:
        return f"Maximum length is {bound} characters"
    return None


def _min(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    bound = field.validation.min if field.validation else None
    if bound is not None and value is not None and to_number(value) < bound:
        return f"Minimum value is {to_text(bound)}"
    return None


def _max(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    bound = field.validation.max if field.validation else None
    if bound is not None and value is not None and to_number(value) > bound:
        return f"Maximum value is {to_text(bound)}"
    return None


def _email(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    if field.type == FieldType.EMAIL and is_truthy(value) and not EMAIL_PATTERN.fullmatch(to_text(value)):
        return INVALID_EMAIL_MESSAGE
    return None


def _phone(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    # Extension point: phone numbers are not format-checked.
    return None


def _url(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    if field.type != FieldType.URL or not is_truthy(value):
        return None
    try:
        _URL_ADAPTER.validate_python(to_text(value))
    except PydanticValidationError:
        return INVALID_URL_MESSAGE
    return None


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Compile a field validation pattern.

    Args:
        pattern (str): Regular expression source.

    Raises:
        PatternError: If the pattern is not a valid regular expression.

    Returns:
        re.Pattern[str]: Compiled pattern.
    """
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise PatternError(pattern=pattern, exc=exc) from exc


def _pattern(value: Any, field: BaseFieldDefinition, form_values: Mapping[str, Any] | None) -> str | None:  # noqa: ARG001
    validation = field.validation
    if validation is None or not validation.pattern or not is_truthy(value):
        return None
    try:
        regex = compile_pattern(validation.pattern)
    except PatternError as exc:
        logger.warning("Invalid validation pattern", extra={"field_id": field.id, "error": str(exc)})
        return INVALID_PATTERN_MESSAGE
    if not regex.search(to_text(value)):
        return validation.custom_message or INVALID_FORMAT_MESSAGE
    return None


# Order is observable: the first failing validator wins.
BUILTIN_VALIDATORS: tuple[tuple[str, ValidatorFunction], ...] = (
    ("required", _required),
    ("min_length", _min_length),
    ("max_length", _max_length),
    ("min", _min),
    ("max", _max),
    ("email", _email),
    ("phone", _phone),
    ("url", _url),
    ("pattern", _pattern),
)


def validate_field(
    field: BaseFieldDefinition,
    value: Any,
    form_values: Mapping[str, Any] | None = None,
) -> str | None:
    """Run the validator chain for one field.

    Static field types always pass. Otherwise the built-in validators run in
    order, followed by `field.validation.custom`, and the first error message
    is returned.

    Args:
        field (BaseFieldDefinition): Field definition.
        value (Any): Current value of the field.
        form_values (Mapping[str, Any] | None): Every form value, for
            cross-field custom validators.

    Returns:
        str | None: Error message, or None when the value is valid.
    """
    if field.type in STATIC_FIELD_TYPES:
        return None

    for _name, validator in BUILTIN_VALIDATORS:
        error = validator(value, field, form_values)
        if error:
            return error

    custom = field.validation.custom if field.validation else None
    if callable(custom):
        error = custom(value, field, form_values)
        if error:
            return error

    return None


def validate_form(
    fields: Sequence[BaseFieldDefinition],
    values: Mapping[str, Any],
) -> list[FieldValidationError]:
    """Validate every given field, in order.

    Visibility is not considered: callers pass the fields that must block
    submission.

    Args:
        fields (Sequence[BaseFieldDefinition]): Fields to validate.
        values (Mapping[str, Any]): Form values keyed by `name`, else `id`.

    Returns:
        list[FieldValidationError]: One entry per failing field.
    """
    errors: list[FieldValidationError] = []
    for field in fields:
        message = validate_field(field, values.get(field.value_key), values)
        if message:
            errors.append(FieldValidationError(field_id=field.id, message=message))
    return errors
