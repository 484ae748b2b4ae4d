"""Typing-centric domain modules."""

from formrules.typing.enums import (
    DISPLAY_FIELD_TYPES,
    STATIC_FIELD_TYPES,
    ConditionLogic,
    ConditionOperator,
    FieldType,
)
from formrules.typing.models import (
    BaseFieldDefinition,
    ConditionRule,
    FieldConditions,
    FieldDefinition,
    FieldValidation,
    FieldValidationError,
    FormSchema,
    FormSettings,
    OperatorOption,
    parse_field,
)

__all__ = [
    "DISPLAY_FIELD_TYPES",
    "STATIC_FIELD_TYPES",
    "BaseFieldDefinition",
    "ConditionLogic",
    "ConditionOperator",
    "ConditionRule",
    "FieldConditions",
    "FieldDefinition",
    "FieldType",
    "FieldValidation",
    "FieldValidationError",
    "FormSchema",
    "FormSettings",
    "OperatorOption",
    "parse_field",
]
