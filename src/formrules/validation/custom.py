"""Reusable custom validators for `FieldValidation.custom`."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date, datetime, time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

    from formrules.typing.models import BaseFieldDefinition, ValidatorFunction

_BYTES_PER_MB = 1024 * 1024


def create_custom_validator(
    predicate: Callable[[Any, Mapping[str, Any] | None], bool],
    message: str,
) -> ValidatorFunction:
    """Wrap a boolean predicate into a validator returning `message` on failure.

    Args:
        predicate (Callable[[Any, Mapping[str, Any] | None], bool]): Receives
            the field value and every form value.
        message (str): Error message returned when the predicate is false.

    Returns:
        ValidatorFunction: Validator usable as `FieldValidation.custom`.
    """

    def _validator(
        value: Any,
        field: BaseFieldDefinition | None = None,  # noqa: ARG001
        form_values: Mapping[str, Any] | None = None,
    ) -> str | None:
        return None if predicate(value, form_values) else message

    return _validator


def _parse_datetime(value: Any) -> datetime | None:
    """Read a date-like form value as a naive local datetime.

    Args:
        value (Any): `datetime`, `date` or ISO 8601 string.

    Returns:
        datetime | None: Parsed value, None when it cannot be read.
    """
    parsed: datetime
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime.combine(value, time.min)
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def _start_of_today() -> datetime:
    return datetime.combine(date.today(), time.min)  # noqa: DTZ011


def _passwords_match(value: Any, form_values: Mapping[str, Any] | None) -> bool:
    return value == (form_values or {}).get("password")


confirm_password = create_custom_validator(_passwords_match, "Passwords do not match")


def min_age(years: int) -> ValidatorFunction:
    """Return a validator requiring a birth date at least `years` ago.

    The age is the difference of calendar years, as shown to users in the
    builder preview.

    Args:
        years (int): Minimum age.

    Returns:
        ValidatorFunction: Validator for a birth date field.
    """

    def _old_enough(value: Any, form_values: Mapping[str, Any] | None) -> bool:  # noqa: ARG001
        if not value:
            return True
        birth = _parse_datetime(value)
        if birth is None:
            return False
        return date.today().year - birth.year >= years  # noqa: DTZ011

    return create_custom_validator(_old_enough, f"Must be at least {years} years old")


def _file_size(item: Any) -> float | None:
    if isinstance(item, Mapping):
        return item.get("size")
    return getattr(item, "size", None)


def file_size(max_size_mb: float) -> ValidatorFunction:
    """Return a validator capping the size of the first uploaded file.

    Args:
        max_size_mb (float): Maximum size in megabytes.

    Returns:
        ValidatorFunction: Validator for a file field.
    """

    def _small_enough(value: Any, form_values: Mapping[str, Any] | None) -> bool:  # noqa: ARG001
        if not value or not value[0]:
            return True
        size = _file_size(value[0])
        return size is None or size <= max_size_mb * _BYTES_PER_MB

    return create_custom_validator(_small_enough, f"File size must be less than {max_size_mb}MB")


def _not_before_today(value: Any, form_values: Mapping[str, Any] | None) -> bool:  # noqa: ARG001
    if not value:
        return True
    parsed = _parse_datetime(value)
    return parsed is not None and parsed >= _start_of_today()


def _before_today(value: Any, form_values: Mapping[str, Any] | None) -> bool:  # noqa: ARG001
    if not value:
        return True
    parsed = _parse_datetime(value)
    return parsed is not None and parsed < _start_of_today()


future_date = create_custom_validator(_not_before_today, "Date must be in the future")
past_date = create_custom_validator(_before_today, "Date must be in the past")
