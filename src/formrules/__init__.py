"""formrules package: conditional visibility and validation for form schemas."""

from formrules.exceptions import (
    FormValuesError,
    PackageError,
    PatternError,
    SchemaStoreError,
    SettingsError,
)
from formrules.logging import configure_logging, get_logger
from formrules.settings import Settings, get_settings

__version__ = "0.1.0"

# Initialize package logger at import time via `get_logger`.
logger = get_logger("formrules")

from formrules.conditions import get_visible_fields, is_visible  # noqa: E402
from formrules.validation import validate_field, validate_form  # noqa: E402

__all__ = [
    "FormValuesError",
    "PackageError",
    "PatternError",
    "SchemaStoreError",
    "Settings",
    "SettingsError",
    "__version__",
    "configure_logging",
    "get_logger",
    "get_settings",
    "get_visible_fields",
    "is_visible",
    "logger",
    "validate_field",
    "validate_form",
]
