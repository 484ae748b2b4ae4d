"""Project enums."""

from __future__ import annotations

from enum import StrEnum


class _EnumMixin(StrEnum):
    """Shared conversion helpers for user-facing enums."""

    @classmethod
    def from_str(cls, value: str) -> _EnumMixin:
        """Parse enum from string.

        Args:
            value: Raw string value.

        Raises:
            ValueError: If the value is not supported.

        Returns:
            _EnumMixin: Parsed enum value.
        """
        try:
            return cls(value)
        except ValueError as exc:
            supported = ", ".join(member.value for member in cls)
            message = f"Unsupported {cls.__name__} value '{value}'. Expected one of: {supported}"
            raise ValueError(message) from exc

    def to_str(self) -> str:
        """Return string representation.

        Returns:
            str: Enum string value.
        """
        return self.value


class FieldType(_EnumMixin):
    """Supported form field types."""

    # Input fields
    TEXT = "text"
    NUMBER = "number"
    EMAIL = "email"
    PASSWORD = "password"  # noqa: S105
    TEXTAREA = "textarea"
    PHONE = "phone"
    URL = "url"
    SEARCH = "search"
    # Choice fields
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SWITCH = "switch"
    RATING = "rating"
    RANGE = "range"
    # Date & time
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    DATERANGE = "daterange"
    # Rich inputs
    RICHTEXT = "richtext"
    COLOR = "color"
    FILE = "file"
    IMAGE = "image"
    SIGNATURE = "signature"
    # Layout & display
    HEADER = "header"
    PARAGRAPH = "paragraph"
    DIVIDER = "divider"
    SECTION = "section"
    ALERT = "alert"


class ConditionOperator(_EnumMixin):
    """Operators available to condition rules."""

    IS_CHECKED = "is_checked"
    IS_NOT_CHECKED = "is_not_checked"
    EQUALS = "equals"
    NOT_EQUALS = "not_equals"
    CONTAINS = "contains"
    NOT_CONTAINS = "not_contains"
    STARTS_WITH = "starts_with"
    ENDS_WITH = "ends_with"
    IS_EMPTY = "is_empty"
    IS_NOT_EMPTY = "is_not_empty"
    GREATER_THAN = "greater_than"
    LESS_THAN = "less_than"
    GREATER_THAN_OR_EQUAL = "greater_than_or_equal"
    LESS_THAN_OR_EQUAL = "less_than_or_equal"
    INCLUDES = "includes"
    NOT_INCLUDES = "not_includes"


class ConditionLogic(_EnumMixin):
    """How multiple condition rules are combined."""

    AND = "and"
    OR = "or"


# Types exempt from validation.
STATIC_FIELD_TYPES: frozenset[FieldType] = frozenset(
    {
        FieldType.HEADER,
        FieldType.PARAGRAPH,
        FieldType.DIVIDER,
        FieldType.SECTION,
        FieldType.ALERT,
    },
)

# Types that never hold a value and cannot be referenced by a rule.
DISPLAY_FIELD_TYPES: frozenset[FieldType] = STATIC_FIELD_TYPES - {FieldType.SECTION}

TEXT_LIKE_FIELD_TYPES: frozenset[FieldType] = frozenset(
    {
        FieldType.TEXT,
        FieldType.EMAIL,
        FieldType.PASSWORD,
        FieldType.TEXTAREA,
        FieldType.PHONE,
        FieldType.URL,
        FieldType.SEARCH,
    },
)
