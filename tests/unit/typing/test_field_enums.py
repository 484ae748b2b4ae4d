from __future__ import annotations

import pytest

from formrules.typing.enums import (
    DISPLAY_FIELD_TYPES,
    STATIC_FIELD_TYPES,
    ConditionLogic,
    ConditionOperator,
    FieldType,
)


def test_field_type_from_str() -> None:
    assert FieldType.from_str("daterange") == FieldType.DATERANGE
    assert FieldType.DATERANGE.to_str() == "daterange"


def test_condition_operator_from_str_raises_on_invalid_value() -> None:
    with pytest.raises(ValueError, match="Expected one of"):
        ConditionOperator.from_str("resembles")


def test_condition_logic_values() -> None:
    assert {member.value for member in ConditionLogic} == {"and", "or"}


def test_static_and_display_field_types() -> None:
    assert FieldType.SECTION in STATIC_FIELD_TYPES
    assert FieldType.SECTION not in DISPLAY_FIELD_TYPES
    assert DISPLAY_FIELD_TYPES < STATIC_FIELD_TYPES
    assert "header" in DISPLAY_FIELD_TYPES
