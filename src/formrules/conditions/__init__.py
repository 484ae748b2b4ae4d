"""Conditional visibility engine."""

from formrules.conditions.evaluator import evaluate_rule
from formrules.conditions.visibility import (
    combine_rules,
    get_visible_fields,
    is_visible,
    operators_for_field_type,
    referenceable_fields,
)

__all__ = [
    "combine_rules",
    "evaluate_rule",
    "get_visible_fields",
    "is_visible",
    "operators_for_field_type",
    "referenceable_fields",
]
