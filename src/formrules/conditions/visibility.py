"""Field visibility resolution from show/hide rule sets."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formrules.conditions.evaluator import evaluate_rule
from formrules.typing.enums import (
    DISPLAY_FIELD_TYPES,
    TEXT_LIKE_FIELD_TYPES,
    ConditionLogic,
    ConditionOperator,
    FieldType,
)
from formrules.typing.models import OperatorOption

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from formrules.typing.models import BaseFieldDefinition, ConditionRule


def _is_referenceable(field: BaseFieldDefinition | None) -> bool:
    """Return whether a rule may read the value of `field`."""
    if field is None or not field.name:
        return False
    return field.type not in DISPLAY_FIELD_TYPES


def combine_rules(
    rules: Sequence[ConditionRule],
    logic: ConditionLogic | str,
    all_fields: Sequence[BaseFieldDefinition],
    values: Mapping[str, Any],
) -> bool:
    """Evaluate a rule set and combine the outcomes.

    An empty rule set is vacuously true. A rule referencing a missing, unnamed
    or display-only field is not met.

    Args:
        rules (Sequence[ConditionRule]): Rules to evaluate.
        logic (ConditionLogic | str): `or` requires any rule, anything else
            requires every rule.
        all_fields (Sequence[BaseFieldDefinition]): Fields a rule may reference.
        values (Mapping[str, Any]): Current form values keyed by field name.

    Returns:
        bool: Combined outcome.
    """
    if not rules:
        return True

    fields_by_id = {field.id: field for field in all_fields}

    def _rule_met(rule: ConditionRule) -> bool:
        field = fields_by_id.get(rule.field_id)
        if not _is_referenceable(field):
            return False
        return evaluate_rule(rule, values.get(field.value_key), field)

    if logic == ConditionLogic.OR:
        return any(_rule_met(rule) for rule in rules)
    return all(_rule_met(rule) for rule in rules)


def is_visible(
    field: BaseFieldDefinition,
    all_fields: Sequence[BaseFieldDefinition],
    values: Mapping[str, Any],
) -> bool:
    """Decide whether a field is currently visible.

    `hidden` wins over everything. Otherwise a non-empty `show` set decides
    alone, and `hide` is only consulted when `show` is absent or empty.

    Args:
        field (BaseFieldDefinition): Field to resolve.
        all_fields (Sequence[BaseFieldDefinition]): Fields its rules may reference.
        values (Mapping[str, Any]): Current form values keyed by field name.

    Returns:
        bool: True when the field should be rendered.
    """
    if field.hidden:
        return False

    conditions = field.conditions
    if conditions is None:
        return True

    if conditions.show:
        return combine_rules(conditions.show, conditions.logic, all_fields, values)
    if conditions.hide:
        return not combine_rules(conditions.hide, conditions.logic, all_fields, values)
    return True


def get_visible_fields(
    fields: Sequence[BaseFieldDefinition],
    values: Mapping[str, Any],
) -> list[BaseFieldDefinition]:
    """Return the visible subset of `fields`, preserving order.

    Section children are not resolved here.

    Args:
        fields (Sequence[BaseFieldDefinition]): Ordered form fields.
        values (Mapping[str, Any]): Current form values keyed by field name.

    Returns:
        list[BaseFieldDefinition]: Visible fields.
    """
    return [field for field in fields if is_visible(field, fields, values)]


_EMPTINESS = (
    OperatorOption(value=ConditionOperator.IS_EMPTY, label="Is Empty", requires_value=False),
    OperatorOption(value=ConditionOperator.IS_NOT_EMPTY, label="Is Not Empty", requires_value=False),
)
_EQUALITY = (
    OperatorOption(value=ConditionOperator.EQUALS, label="Equals", requires_value=True),
    OperatorOption(value=ConditionOperator.NOT_EQUALS, label="Not Equals", requires_value=True),
)
_CHECKED = (
    OperatorOption(value=ConditionOperator.IS_CHECKED, label="Is Checked", requires_value=False),
    OperatorOption(value=ConditionOperator.IS_NOT_CHECKED, label="Is Not Checked", requires_value=False),
)
_TEXT = (
    *_EQUALITY,
    OperatorOption(value=ConditionOperator.CONTAINS, label="Contains", requires_value=True),
    OperatorOption(value=ConditionOperator.NOT_CONTAINS, label="Does Not Contain", requires_value=True),
    OperatorOption(value=ConditionOperator.STARTS_WITH, label="Starts With", requires_value=True),
    OperatorOption(value=ConditionOperator.ENDS_WITH, label="Ends With", requires_value=True),
    *_EMPTINESS,
)
_NUMERIC = (
    *_EQUALITY,
    OperatorOption(value=ConditionOperator.GREATER_THAN, label="Greater Than", requires_value=True),
    OperatorOption(value=ConditionOperator.LESS_THAN, label="Less Than", requires_value=True),
    OperatorOption(
        value=ConditionOperator.GREATER_THAN_OR_EQUAL,
        label="Greater Than or Equal",
        requires_value=True,
    ),
    OperatorOption(value=ConditionOperator.LESS_THAN_OR_EQUAL, label="Less Than or Equal", requires_value=True),
    *_EMPTINESS,
)
_TEMPORAL = (
    *_EQUALITY,
    OperatorOption(value=ConditionOperator.GREATER_THAN, label="After", requires_value=True),
    OperatorOption(value=ConditionOperator.LESS_THAN, label="Before", requires_value=True),
    *_EMPTINESS,
)


def operators_for_field_type(field_type: FieldType | str) -> list[OperatorOption]:
    """Return the operators a rule may use against a field of this type.

    Args:
        field_type (FieldType | str): Type of the referenced field.

    Returns:
        list[OperatorOption]: Operators in display order.
    """
    if field_type in (FieldType.CHECKBOX, FieldType.SWITCH):
        return list(_CHECKED)
    if field_type in TEXT_LIKE_FIELD_TYPES:
        return list(_TEXT)
    if field_type in (FieldType.NUMBER, FieldType.RANGE, FieldType.RATING):
        return list(_NUMERIC)
    if field_type in (FieldType.SELECT, FieldType.RADIO):
        return [*_EQUALITY, *_EMPTINESS]
    if field_type in (FieldType.DATE, FieldType.TIME, FieldType.DATETIME):
        return list(_TEMPORAL)
    return list(_EMPTINESS)


def referenceable_fields(
    fields: Sequence[BaseFieldDefinition],
    exclude_id: str | None = None,
) -> list[BaseFieldDefinition]:
    """Return fields a condition rule may point at.

    Args:
        fields (Sequence[BaseFieldDefinition]): Ordered form fields.
        exclude_id (str | None): Field being edited, never offered as its own target.

    Returns:
        list[BaseFieldDefinition]: Candidate fields, order preserved.
    """
    return [field for field in fields if field.id != exclude_id and field.type not in DISPLAY_FIELD_TYPES]
