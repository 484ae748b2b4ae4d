"""Engine output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from formrules.typing.enums import ConditionOperator


class FieldValidationError(BaseModel):
    """Validation failure of one field, serialized as `{fieldId, message}`."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True, frozen=True)

    field_id: str
    message: str


class OperatorOption(BaseModel):
    """Operator offered for a referenced field type."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True, frozen=True)

    value: ConditionOperator
    label: str
    requires_value: bool
