"""Evaluation of a single condition rule."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from formrules.logging import get_logger
from formrules.typing.enums import ConditionOperator
from formrules.values import is_empty, is_sequence, is_truthy, same_value, to_number, to_text

if TYPE_CHECKING:
    from collections.abc import Callable

    from formrules.typing.models import BaseFieldDefinition, ConditionRule

logger = get_logger(__name__)


def _is_checked(value: Any, _: Any) -> bool:
    # Strict for booleans, truthiness for everything else.
    return value is True if isinstance(value, bool) else is_truthy(value)


def _is_not_checked(value: Any, _: Any) -> bool:
    return value is False if isinstance(value, bool) else not is_truthy(value)


def _is_empty(value: Any, _: Any) -> bool:
    return is_empty(value)


def _is_not_empty(value: Any, _: Any) -> bool:
    return not is_empty(value)


def _equals(value: Any, operand: Any) -> bool:
    return to_text(value) == to_text(operand)


def _not_equals(value: Any, operand: Any) -> bool:
    return to_text(value) != to_text(operand)


def _contains(value: Any, operand: Any) -> bool:
    return to_text(operand).lower() in to_text(value).lower()


def _not_contains(value: Any, operand: Any) -> bool:
    return to_text(operand).lower() not in to_text(value).lower()


def _starts_with(value: Any, operand: Any) -> bool:
    return to_text(value).lower().startswith(to_text(operand).lower())


def _ends_with(value: Any, operand: Any) -> bool:
    return to_text(value).lower().endswith(to_text(operand).lower())


# NaN compares false under every ordering, which is the intended outcome for
# non-numeric operands.
def _greater_than(value: Any, operand: Any) -> bool:
    return to_number(value) > to_number(operand)


def _less_than(value: Any, operand: Any) -> bool:
    return to_number(value) < to_number(operand)


def _greater_than_or_equal(value: Any, operand: Any) -> bool:
    return to_number(value) >= to_number(operand)


def _less_than_or_equal(value: Any, operand: Any) -> bool:
    return to_number(value) <= to_number(operand)


def _includes(value: Any, operand: Any) -> bool:
    if not is_sequence(value):
        return False
    return any(same_value(item, operand) for item in value)


def _not_includes(value: Any, operand: Any) -> bool:
    # Quirk: False on non-list values too, so this is not the negation of
    # `includes` outside of lists.
    if not is_sequence(value):
        return False
    return not any(same_value(item, operand) for item in value)


_OPERATORS: dict[ConditionOperator, Callable[[Any, Any], bool]] = {
    ConditionOperator.IS_CHECKED: _is_checked,
    ConditionOperator.IS_NOT_CHECKED: _is_not_checked,
    ConditionOperator.IS_EMPTY: _is_empty,
    ConditionOperator.IS_NOT_EMPTY: _is_not_empty,
    ConditionOperator.EQUALS: _equals,
    ConditionOperator.NOT_EQUALS: _not_equals,
    ConditionOperator.CONTAINS: _contains,
    ConditionOperator.NOT_CONTAINS: _not_contains,
    ConditionOperator.STARTS_WITH: _starts_with,
    ConditionOperator.ENDS_WITH: _ends_with,
    ConditionOperator.GREATER_THAN: _greater_than,
    ConditionOperator.LESS_THAN: _less_than,
    ConditionOperator.GREATER_THAN_OR_EQUAL: _greater_than_or_equal,
    ConditionOperator.LESS_THAN_OR_EQUAL: _less_than_or_equal,
    ConditionOperator.INCLUDES: _includes,
    ConditionOperator.NOT_INCLUDES: _not_includes,
}


def evaluate_rule(
    rule: ConditionRule,
    field_value: Any,
    field: BaseFieldDefinition | None,
) -> bool:
    """Evaluate one condition rule against the referenced field's value.

    Evaluation never raises: a missing referenced field or an unknown operator
    yields False, meaning the condition is not met.

    Args:
        rule (ConditionRule): Rule to evaluate.
        field_value (Any): Current value of the referenced field.
        field (BaseFieldDefinition | None): Referenced field, None when the
            rule points at an id that does not exist.

    Returns:
        bool: Whether the condition is met.
    """
    if field is None:
        return False

    try:
        operator = ConditionOperator(rule.operator)
    except ValueError:
        logger.warning("Unknown condition operator", extra={"operator": str(rule.operator), "field_id": rule.field_id})
        return False

    return _OPERATORS[operator](field_value, rule.value)
