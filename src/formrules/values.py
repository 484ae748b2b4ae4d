"""Form value coercion helpers.

Persisted schemas were authored against browser semantics: operands are
stringified with `String()`, coerced with `Number()` and tested for
truthiness the JavaScript way. These helpers reproduce those rules for Python
values so rule evaluation and validation agree with the builder preview.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from typing import Any

_NUMERIC_TEXT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_INFINITY_TEXT = re.compile(r"[+-]?Infinity")
_RADIX_TEXT = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def is_sequence(value: Any) -> bool:
    """Return whether the value is a list-like form value."""
    return isinstance(value, (list, tuple))


def is_empty(value: Any) -> bool:
    """Return whether a form value counts as not provided.

    Args:
        value (Any): Raw form value.

    Returns:
        bool: True for None, the empty string, or an empty list/tuple.
    """
    if value is None or (isinstance(value, str) and not value):
        return True
    if is_sequence(value):
        return len(value) == 0
    return False


def is_truthy(value: Any) -> bool:
    """Return JavaScript truthiness of a form value.

    Empty lists and mappings are truthy, as they are in the browser.

    Args:
        value (Any): Raw form value.

    Returns:
        bool: Truthiness of the value.
    """
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float, Decimal)):
        return value != 0 and not math.isnan(value)
    if isinstance(value, str):
        return value != ""
    return True


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer():
        return str(int(value))
    return repr(value)


def to_text(value: Any) -> str:
    """Stringify a form value.

    A missing value reads as `"undefined"`, so it never equals the empty
    string.

    Args:
        value (Any): Raw form value.

    Returns:
        str: Text form used by string operators.
    """
    if value is None:
        return "undefined"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_number(value)
    if isinstance(value, Decimal):
        return _format_number(float(value))
    if is_sequence(value):
        # Missing items render empty when a list is joined.
        return ",".join("" if item is None else to_text(item) for item in value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def _parse_numeric_text(text: str) -> float:
    stripped = text.strip()
    if not stripped:
        return 0.0
    if _NUMERIC_TEXT.fullmatch(stripped):
        return float(stripped)
    if _INFINITY_TEXT.fullmatch(stripped):
        return -math.inf if stripped.startswith("-") else math.inf
    radix = _RADIX_TEXT.fullmatch(stripped)
    if radix:
        try:
            return float(int(radix.group(2), _RADIX_BASES[radix.group(1).lower()]))
        except ValueError:
            return math.nan
    return math.nan


def to_number(value: Any) -> float:
    """Coerce a form value to a number.

    Args:
        value (Any): Raw form value.

    Returns:
        float: Numeric value, NaN when the value has no numeric reading.
    """
    if value is None:
        return math.nan
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, Decimal):
        try:
            return float(value)
        except (InvalidOperation, ValueError):
            return math.nan
    if isinstance(value, str):
        return _parse_numeric_text(value)
    if isinstance(value, datetime):
        return value.timestamp() * 1000
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day).timestamp() * 1000  # noqa: DTZ001
    if is_sequence(value):
        if not value:
            return 0.0
        if len(value) == 1:
            return _parse_numeric_text(to_text(value))
    return math.nan


def same_value(left: Any, right: Any) -> bool:
    """Compare two values the way list membership does in the browser.

    Booleans never equal numbers and NaN equals NaN.

    Args:
        left (Any): First value.
        right (Any): Second value.

    Returns:
        bool: True when both values are the same.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        if math.isnan(left) and math.isnan(right):
            return True
        return left == right
    if isinstance(left, (int, float)) or isinstance(right, (int, float)):
        return False
    return left == right
