"""Form schema persistence and field factories."""

from __future__ import annotations

import json
import re
from datetime import UTC, datetime
from pathlib import Path
from typing import Any, cast
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from formrules.exceptions import SchemaStoreError
from formrules.logging import get_logger
from formrules.typing.enums import FieldType
from formrules.typing.models import BaseFieldDefinition, FormSchema, FormSettings, parse_field

logger = get_logger(__name__)

_SCHEMA_SUFFIX = ".form.json"

_BASE_FIELD_CONFIG: dict[str, Any] = {
    "label": "",
    "placeholder": "",
    "help_text": "",
    "required": False,
    "disabled": False,
    "hidden": False,
    "style": {"width": "100%", "text_align": "left"},
}

_OPTIONS = [
    {"label": "Option 1", "value": "option1"},
    {"label": "Option 2", "value": "option2"},
]

# Defaults applied by the builder when a field is dropped on the canvas.
DEFAULT_FIELD_CONFIG: dict[FieldType, dict[str, Any]] = {
    FieldType.TEXT: {"label": "Text Field", "placeholder": "Enter text...", "name": "text_field"},
    FieldType.NUMBER: {"label": "Number Field", "placeholder": "Enter number...", "name": "number_field"},
    FieldType.EMAIL: {"label": "Email", "placeholder": "email@example.com", "name": "email"},
    FieldType.PASSWORD: {"label": "Password", "placeholder": "Enter password...", "name": "password"},
    FieldType.TEXTAREA: {
        "label": "Text Area",
        "placeholder": "Enter multiple lines of text...",
        "name": "textarea",
    },
    FieldType.PHONE: {"label": "Phone", "placeholder": "(123) 456-7890", "name": "phone"},
    FieldType.URL: {"label": "URL", "placeholder": "https://example.com", "name": "url"},
    FieldType.SEARCH: {"label": "Search", "placeholder": "Search...", "name": "search"},
    FieldType.SELECT: {
        "label": "Select",
        "placeholder": "Choose an option",
        "name": "select_field",
        "options": [*_OPTIONS, {"label": "Option 3", "value": "option3"}],
    },
    FieldType.CHECKBOX: {"label": "Checkbox Group", "name": "checkbox_group", "options": _OPTIONS},
    FieldType.RADIO: {"label": "Radio Group", "name": "radio_group", "options": _OPTIONS},
    FieldType.SWITCH: {"label": "Switch", "name": "switch_field", "on_label": "On", "off_label": "Off"},
    FieldType.RATING: {
        "label": "Rating",
        "name": "rating",
        "placeholder": None,
        "max_rating": 5,
        "allow_half": False,
        "icon": "star",
    },
    FieldType.RANGE: {"label": "Range", "name": "range", "min": 0, "max": 100, "step": 1, "show_value": True},
    FieldType.DATE: {"label": "Date", "name": "date_field"},
    FieldType.TIME: {"label": "Time", "name": "time_field"},
    FieldType.DATETIME: {"label": "Date & Time", "name": "datetime_field"},
    FieldType.DATERANGE: {
        "label": "Date Range",
        "name": "daterange_field",
        "start_label": "Start Date",
        "end_label": "End Date",
    },
    FieldType.RICHTEXT: {
        "label": "Rich Text",
        "name": "richtext_field",
        "toolbar": ["bold", "italic", "underline", "link", "list"],
    },
    FieldType.COLOR: {"label": "Color", "name": "color_field", "format": "hex", "show_input": True},
    FieldType.FILE: {"label": "File Upload", "name": "file_upload", "accept": "*", "multiple": False},
    FieldType.IMAGE: {"label": "Image Upload", "name": "image_upload", "accept": "image/*", "multiple": False},
    FieldType.SIGNATURE: {"label": "Signature", "name": "signature_field"},
    FieldType.HEADER: {"content": "Header Text", "level": 2},
    FieldType.PARAGRAPH: {"content": "This is a paragraph of text. You can edit this content."},
    FieldType.DIVIDER: {},
    FieldType.SECTION: {"title": "Section Title", "collapsible": True, "collapsed": False},
    FieldType.ALERT: {"content": "This is an alert message", "alert_type": "info"},
}


def generate_field_id() -> str:
    """Return a new opaque field identifier.

    Returns:
        str: Unique identifier, never reused.
    """
    return uuid4().hex


def create_field(field_type: FieldType | str, **overrides: Any) -> BaseFieldDefinition:
    """Create a field from the builder defaults for its type.

    Args:
        field_type (FieldType | str): Field type tag.
        **overrides (Any): Attributes replacing the defaults (snake_case).

    Returns:
        BaseFieldDefinition: New field with a fresh id unless one is given.
    """
    kind = FieldType.from_str(str(field_type))
    payload: dict[str, Any] = {
        **_BASE_FIELD_CONFIG,
        **DEFAULT_FIELD_CONFIG[kind],
        **overrides,
        "type": kind.value,
    }
    payload.setdefault("id", generate_field_id())
    return parse_field(payload)


def duplicate_field(field: BaseFieldDefinition) -> BaseFieldDefinition:
    """Copy a field under a fresh id.

    Args:
        field (BaseFieldDefinition): Field to copy.

    Returns:
        BaseFieldDefinition: Copy with `_copy` / ` (Copy)` suffixed name and label.
    """
    return field.model_copy(
        deep=True,
        update={
            "id": generate_field_id(),
            "name": f"{field.name}_copy" if field.name else None,
            "label": f"{field.label} (Copy)" if field.label else None,
        },
    )


def build_schema_with_generated_id(
    title: str,
    fields: list[BaseFieldDefinition],
    *,
    description: str | None = None,
    settings: FormSettings | None = None,
) -> FormSchema:
    """Create a form schema with a generated UUID id.

    Args:
        title (str): Form title.
        fields (list[BaseFieldDefinition]): Ordered form fields.
        description (str | None): Optional description.
        settings (FormSettings | None): Optional form settings.

    Returns:
        FormSchema: Generated schema.
    """
    now = datetime.now(tz=UTC)
    return FormSchema(
        id=str(uuid4()),
        title=title,
        description=description,
        fields=fields,
        settings=settings,
        created_at=now,
        updated_at=now,
    )


def schema_to_payload(schema: FormSchema) -> dict[str, Any]:
    """Return the JSON-ready payload of a schema (camelCase, nulls omitted).

    Args:
        schema (FormSchema): Schema to serialize.

    Returns:
        dict[str, Any]: Persistence payload.
    """
    return schema.model_dump(mode="json", by_alias=True, exclude_none=True)


def dumps_schema(schema: FormSchema, *, indent: int | None = 2) -> str:
    """Serialize a schema to its persistence JSON.

    Custom validator callables are not serialized.

    Args:
        schema (FormSchema): Schema to serialize.
        indent (int | None): JSON indentation.

    Returns:
        str: JSON document.
    """
    return json.dumps(schema_to_payload(schema), indent=indent, ensure_ascii=False)


def loads_schema(text: str) -> FormSchema:
    """Parse a schema from its persistence JSON.

    Args:
        text (str): JSON document.

    Raises:
        SchemaStoreError: If the document is not valid JSON or not a valid schema.

    Returns:
        FormSchema: Parsed schema.
    """
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaStoreError(message=f"Schema is not valid JSON: {exc}") from exc
    return schema_from_payload(payload)


def schema_from_payload(payload: object) -> FormSchema:
    """Validate a decoded schema payload.

    Both the bare schema object and a `{"schema": {...}}` envelope are accepted.

    Args:
        payload (object): Decoded JSON payload.

    Raises:
        SchemaStoreError: If the payload is not a JSON object or not a valid schema.

    Returns:
        FormSchema: Parsed schema.
    """
    if not isinstance(payload, dict):
        raise SchemaStoreError(message="Schema payload must be a JSON object")

    payload_obj = cast("dict[str, object]", payload)
    embedded = payload_obj.get("schema")
    if isinstance(embedded, dict):
        payload_obj = cast("dict[str, object]", embedded)

    try:
        return FormSchema.model_validate(payload_obj)
    except ValidationError as exc:
        raise SchemaStoreError(message=f"Invalid form schema: {exc}") from exc


class SchemaStore(BaseModel):
    """Filesystem-based form schema store."""

    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    root: Path = Field(description="Store directory root.")

    def model_post_init(self, __context: object, /) -> None:
        """Ensure the store directory exists after model initialization.

        Args:
            __context (object): Pydantic model context.
        """
        self.root.mkdir(parents=True, exist_ok=True)

    def schema_path(self, *, title: str, schema_id: str) -> Path:
        """Build the file path of a schema.

        Args:
            title (str): Form title.
            schema_id (str): Schema identifier.

        Returns:
            Path: Schema file path.
        """
        safe_title = re.sub(r"[^a-z0-9._-]+", "-", title.lower()).strip("-")
        if not safe_title:
            safe_title = "form"
        return self.root / f"{safe_title}-{schema_id}{_SCHEMA_SUFFIX}"

    @staticmethod
    def load(path: Path) -> FormSchema:
        """Load a schema from path.

        Args:
            path (Path): Schema file path.

        Returns:
            FormSchema: Loaded schema.
        """
        _validate_schema_file_path(path)
        return loads_schema(path.read_text(encoding="utf-8"))

    def save(self, schema: FormSchema) -> Path:
        """Persist a schema, replacing any earlier file with the same id.

        Args:
            schema (FormSchema): Schema to persist.

        Returns:
            Path: Written file path.
        """
        path = self.schema_path(title=schema.title, schema_id=schema.id)
        for stale in self.root.glob(f"*-{schema.id}{_SCHEMA_SUFFIX}"):
            if stale != path:
                stale.unlink()
        path.write_text(dumps_schema(schema), encoding="utf-8")
        logger.info("Form schema saved", extra={"schema_path": str(path), "field_count": len(schema.fields)})
        return path

    def list_schemas(self) -> list[Path]:
        """List stored schema files.

        Returns:
            list[Path]: Schema files, sorted.
        """
        return sorted(self.root.glob(f"*{_SCHEMA_SUFFIX}"))

    def find(self, schema_id: str) -> FormSchema | None:
        """Return the stored schema with this id.

        Args:
            schema_id (str): Schema identifier.

        Returns:
            FormSchema | None: Stored schema, None when absent.
        """
        for path in self.root.glob(f"*-{schema_id}{_SCHEMA_SUFFIX}"):
            schema = self.load(path)
            if schema.id == schema_id:
                return schema
        return None


def _validate_schema_file_path(path: Path) -> None:
    """Validate schema file path before loading.

    Args:
        path (Path): Schema file path.

    Raises:
        SchemaStoreError: If path is not a `pathlib.Path` or not a readable schema JSON file.
    """
    if not isinstance(path, Path):
        raise SchemaStoreError(message=f"Schema path must be a pathlib.Path instance, got: {type(path)!r}")
    if not path.is_file():
        raise SchemaStoreError(message=f"Schema path is not a file: {path}")
    if not path.name.endswith(".json"):
        raise SchemaStoreError(message=f"Schema path must end with '.json': {path}")
