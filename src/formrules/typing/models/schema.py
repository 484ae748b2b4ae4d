"""Form schema domain models."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic.alias_generators import to_camel

from formrules.typing.enums import ConditionLogic, ConditionOperator, FieldType

ValidatorFunction = Callable[..., str | None]


class _SchemaModel(BaseModel):
    """Base model mapping snake_case attributes to camelCase JSON keys."""

    model_config = ConfigDict(extra="forbid", alias_generator=to_camel, populate_by_name=True)


class ConditionRule(_SchemaModel):
    """Single predicate on another field of the same form.

    `field_id` references the other field by `id`, never by `name`. Operators
    outside the known vocabulary are kept verbatim so evaluation fails closed.
    """

    field_id: str
    operator: Annotated[ConditionOperator | str, Field(union_mode="left_to_right")]
    value: Any = None


class FieldConditions(_SchemaModel):
    """Show/hide rule sets attached to a field."""

    show: list[ConditionRule] | None = None
    hide: list[ConditionRule] | None = None
    logic: ConditionLogic = ConditionLogic.AND


class FieldValidation(_SchemaModel):
    """Declarative constraints checked by the validation pipeline."""

    # Builder mirror of the field-level `required` flag, which is the one enforced.
    required: bool | None = None
    min_length: int | None = None
    max_length: int | None = None
    min: int | float | None = None
    max: int | float | None = None
    pattern: str | None = None
    custom_message: str | None = None
    custom: ValidatorFunction | None = Field(default=None, exclude=True)


class FieldStyle(_SchemaModel):
    """Presentation hints, inert to the engine."""

    width: Literal["25%", "50%", "75%", "100%"] | None = None
    class_name: str | None = None
    text_align: Literal["left", "center", "right"] | None = None


class SelectOption(_SchemaModel):
    """Option of a choice field."""

    label: str
    value: str | int | float


class BaseFieldDefinition(_SchemaModel):
    """Attributes shared by every field type."""

    # Builder attributes outside the known set survive round-trips.
    model_config = ConfigDict(extra="allow")

    id: str
    type: str
    name: str | None = None
    label: str | None = None
    placeholder: str | None = None
    help_text: str | None = None
    default_value: Any = None
    validation: FieldValidation | None = None
    style: FieldStyle | None = None
    required: bool = False
    disabled: bool = False
    hidden: bool = False
    conditions: FieldConditions | None = None

    @property
    def field_type(self) -> FieldType:
        """Return the type tag as an enum member."""
        return FieldType(self.type)

    @property
    def value_key(self) -> str:
        """Return the key indexing this field in the form values."""
        return self.name or self.id


class TextFieldDefinition(BaseFieldDefinition):
    """Free text inputs."""

    type: Literal["text", "email", "password", "textarea", "phone", "url", "search", "richtext"]
    max_length: int | None = None
    pattern: str | None = None
    toolbar: list[str] | None = None


class NumberFieldDefinition(BaseFieldDefinition):
    """Numeric inputs."""

    type: Literal["number", "range", "rating"]
    min: int | float | None = None
    max: int | float | None = None
    step: int | float | None = None
    show_value: bool | None = None
    max_rating: int | None = None
    allow_half: bool | None = None
    icon: str | None = None


class ChoiceFieldDefinition(BaseFieldDefinition):
    """Single or multiple choice inputs."""

    type: Literal["select", "radio", "checkbox", "switch"]
    options: list[SelectOption] | None = None
    multiple: bool | None = None
    on_label: str | None = None
    off_label: str | None = None


class DateTimeFieldDefinition(BaseFieldDefinition):
    """Date, time and color pickers."""

    type: Literal["date", "time", "datetime", "daterange", "color"]
    min_date: str | None = None
    max_date: str | None = None
    min_time: str | None = None
    max_time: str | None = None
    format: str | None = None
    start_label: str | None = None
    end_label: str | None = None
    show_input: bool | None = None


class FileFieldDefinition(BaseFieldDefinition):
    """Upload inputs. Transport settings are opaque to the engine."""

    type: Literal["file", "image", "signature"]
    accept: str | None = None
    multiple: bool | None = None
    max_size: float | None = None
    max_files: int | None = None
    show_preview: bool | None = None
    button_text: str | None = None
    drag_drop_text: str | None = None
    upload_url: str | None = None
    upload_method: str | None = None
    upload_field_name: str | None = None
    upload_headers: str | None = None
    with_credentials: bool | None = None
    response_success_key: str | None = None
    response_url_key: str | None = None


class StaticFieldDefinition(BaseFieldDefinition):
    """Display-only content."""

    type: Literal["header", "paragraph", "divider", "alert"]
    content: str | None = None
    level: int | None = Field(default=None, ge=1, le=6)
    alert_type: Literal["info", "success", "warning", "error"] | None = None


class SectionFieldDefinition(BaseFieldDefinition):
    """Container owning an ordered list of nested fields."""

    type: Literal["section"]
    title: str | None = None
    collapsible: bool | None = None
    collapsed: bool | None = None
    fields: list[FieldDefinition] = Field(default_factory=list)


FieldDefinition = Annotated[
    TextFieldDefinition
    | NumberFieldDefinition
    | ChoiceFieldDefinition
    | DateTimeFieldDefinition
    | FileFieldDefinition
    | StaticFieldDefinition
    | SectionFieldDefinition,
    Field(discriminator="type"),
]

SectionFieldDefinition.model_rebuild()


class FormSettings(_SchemaModel):
    """Form-level presentation settings."""

    submit_button_text: str | None = None
    cancel_button_text: str | None = None
    show_labels: bool | None = None
    label_position: Literal["top", "left", "right"] | None = None
    theme: Literal["light", "dark"] | None = None
    clear_on_submit: bool | None = None


class FormSchema(_SchemaModel):
    """Persisted form: ordered fields plus metadata."""

    id: str
    title: str
    description: str | None = None
    fields: list[FieldDefinition] = Field(default_factory=list)
    settings: FormSettings | None = None
    version: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


_FIELD_ADAPTER: TypeAdapter[FieldDefinition] = TypeAdapter(FieldDefinition)


def parse_field(payload: object) -> BaseFieldDefinition:
    """Validate one raw field payload into its typed variant.

    Args:
        payload (object): Field mapping (camelCase or snake_case keys).

    Returns:
        BaseFieldDefinition: Typed field definition.
    """
    return _FIELD_ADAPTER.validate_python(payload)
