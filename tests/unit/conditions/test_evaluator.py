from __future__ import annotations

import pytest

from formrules.conditions.evaluator import evaluate_rule
from formrules.typing.enums import ConditionOperator
from formrules.typing.models import ConditionRule, TextFieldDefinition

FIELD = TextFieldDefinition(id="f1", type="text", name="answer")


def _rule(operator: str, value: object = None) -> ConditionRule:
    return ConditionRule(field_id="f1", operator=operator, value=value)


def test_missing_referenced_field_is_never_met() -> None:
    assert evaluate_rule(_rule("is_empty"), None, None) is False
    assert evaluate_rule(_rule("not_equals", "x"), "y", None) is False


def test_equals_compares_stringified_operands() -> None:
    assert evaluate_rule(_rule("equals", "5"), 5, FIELD) is True
    assert evaluate_rule(_rule("equals", "true"), True, FIELD) is True
    assert evaluate_rule(_rule("not_equals", "5"), 5, FIELD) is False
    assert evaluate_rule(_rule("equals", "abc"), "ABC", FIELD) is False


def test_missing_value_never_equals_empty_string() -> None:
    assert evaluate_rule(_rule("equals", ""), None, FIELD) is False
    assert evaluate_rule(_rule("not_equals", ""), None, FIELD) is True
    assert evaluate_rule(_rule("equals", ""), "", FIELD) is True


@pytest.mark.parametrize(
    ("operator", "value", "operand", "expected"),
    [
        ("contains", "Hello World", "WORLD", True),
        ("contains", "Hello", "bye", False),
        ("not_contains", "Hello", "bye", True),
        ("not_contains", "Hello", "ELL", False),
        ("starts_with", "Hello", "he", True),
        ("starts_with", "Hello", "lo", False),
        ("ends_with", "Hello", "LO", True),
        ("ends_with", "Hello", "he", False),
    ],
)
def test_string_operators_ignore_case(operator, value, operand, expected) -> None:
    assert evaluate_rule(_rule(operator, operand), value, FIELD) is expected


@pytest.mark.parametrize(
    ("operator", "value", "operand", "expected"),
    [
        ("greater_than", 10, "9", True),
        ("greater_than", "10", 9, True),
        ("less_than", 3, 4, True),
        ("greater_than_or_equal", 4, "4", True),
        ("less_than_or_equal", "5", 4, False),
    ],
)
def test_numeric_operators_coerce_operands(operator, value, operand, expected) -> None:
    assert evaluate_rule(_rule(operator, operand), value, FIELD) is expected


@pytest.mark.parametrize(
    "operator",
    ["greater_than", "less_than", "greater_than_or_equal", "less_than_or_equal"],
)
def test_numeric_operators_are_false_against_nan(operator) -> None:
    assert evaluate_rule(_rule(operator, "abc"), 10, FIELD) is False
    assert evaluate_rule(_rule(operator, 10), None, FIELD) is False


def test_emptiness_operators() -> None:
    assert evaluate_rule(_rule("is_empty"), [], FIELD) is True
    assert evaluate_rule(_rule("is_empty"), [1], FIELD) is False
    assert evaluate_rule(_rule("is_empty"), None, FIELD) is True
    assert evaluate_rule(_rule("is_empty"), "", FIELD) is True
    assert evaluate_rule(_rule("is_empty"), 0, FIELD) is False
    assert evaluate_rule(_rule("is_not_empty"), [1], FIELD) is True
    assert evaluate_rule(_rule("is_not_empty"), "", FIELD) is False


def test_checked_operators_are_strict_for_booleans() -> None:
    assert evaluate_rule(_rule("is_checked"), True, FIELD) is True
    assert evaluate_rule(_rule("is_checked"), False, FIELD) is False
    assert evaluate_rule(_rule("is_not_checked"), False, FIELD) is True
    assert evaluate_rule(_rule("is_not_checked"), True, FIELD) is False


def test_checked_operators_use_truthiness_for_other_values() -> None:
    assert evaluate_rule(_rule("is_checked"), "yes", FIELD) is True
    assert evaluate_rule(_rule("is_checked"), [], FIELD) is True
    assert evaluate_rule(_rule("is_checked"), 0, FIELD) is False
    assert evaluate_rule(_rule("is_not_checked"), None, FIELD) is True
    assert evaluate_rule(_rule("is_not_checked"), "", FIELD) is True


def test_array_operators_use_strict_membership() -> None:
    assert evaluate_rule(_rule("includes", "a"), ["a", "b"], FIELD) is True
    assert evaluate_rule(_rule("includes", "1"), [1], FIELD) is False
    assert evaluate_rule(_rule("includes", 1), [True], FIELD) is False
    assert evaluate_rule(_rule("not_includes", "c"), ["a", "b"], FIELD) is True
    assert evaluate_rule(_rule("not_includes", "a"), ["a", "b"], FIELD) is False


def test_array_operators_are_false_on_non_list_values() -> None:
    assert evaluate_rule(_rule("includes", "a"), "abc", FIELD) is False
    assert evaluate_rule(_rule("not_includes", "z"), "abc", FIELD) is False
    assert evaluate_rule(_rule("not_includes", "z"), None, FIELD) is False


def test_unknown_operator_fails_closed() -> None:
    rule = _rule("matches_regex", ".*")

    assert not isinstance(rule.operator, ConditionOperator)
    assert evaluate_rule(rule, "anything", FIELD) is False
