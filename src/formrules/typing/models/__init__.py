"""Core domain model exports."""

from formrules.typing.models.results import FieldValidationError, OperatorOption
from formrules.typing.models.schema import (
    BaseFieldDefinition,
    ChoiceFieldDefinition,
    ConditionRule,
    DateTimeFieldDefinition,
    FieldConditions,
    FieldDefinition,
    FieldStyle,
    FieldValidation,
    FileFieldDefinition,
    FormSchema,
    FormSettings,
    NumberFieldDefinition,
    SectionFieldDefinition,
    SelectOption,
    StaticFieldDefinition,
    TextFieldDefinition,
    ValidatorFunction,
    parse_field,
)

__all__ = [
    "BaseFieldDefinition",
    "ChoiceFieldDefinition",
    "ConditionRule",
    "DateTimeFieldDefinition",
    "FieldConditions",
    "FieldDefinition",
    "FieldStyle",
    "FieldValidation",
    "FieldValidationError",
    "FileFieldDefinition",
    "FormSchema",
    "FormSettings",
    "NumberFieldDefinition",
    "OperatorOption",
    "SectionFieldDefinition",
    "SelectOption",
    "StaticFieldDefinition",
    "TextFieldDefinition",
    "ValidatorFunction",
    "parse_field",
]
