"""Field validation pipeline."""

from formrules.validation.custom import (
    confirm_password,
    create_custom_validator,
    file_size,
    future_date,
    min_age,
    past_date,
)
from formrules.validation.pipeline import (
    BUILTIN_VALIDATORS,
    compile_pattern,
    validate_field,
    validate_form,
)

__all__ = [
    "BUILTIN_VALIDATORS",
    "compile_pattern",
    "confirm_password",
    "create_custom_validator",
    "file_size",
    "future_date",
    "min_age",
    "past_date",
    "validate_field",
    "validate_form",
]
