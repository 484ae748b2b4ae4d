"""Shared fixtures and pytest marker auto-assignment by folder."""

from __future__ import annotations

from pathlib import Path

import pytest

from formrules import logger
from formrules.typing.models import FormSchema, parse_field


def _mark_tests_by_directory(
    config: pytest.Config,
    items: list[pytest.Item],
    marker: str,
) -> None:
    """Mark collected tests located under tests/<marker>/."""
    target_dir = Path(config.rootpath) / "tests" / marker
    target_dir = target_dir.resolve()

    for item in items:
        try:
            path = Path(str(item.fspath)).resolve()
        except Exception:
            logger.warning(
                f"Could not resolve path for test item {item.name!s}; skipping {marker!s} marker assignment",
            )
            continue

        if path == target_dir or target_dir in path.parents:
            item.add_marker(getattr(pytest.mark, marker))


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Apply directory-based markers to test items."""
    _mark_tests_by_directory(config, items, "unit")
    _mark_tests_by_directory(config, items, "integration")
    _mark_tests_by_directory(config, items, "end2end")


@pytest.fixture
def agreement_schema() -> FormSchema:
    """Checkbox `agree` revealing a required text field `details`."""
    agree = parse_field({"id": "field-agree", "type": "checkbox", "name": "agree", "label": "Agree"})
    details = parse_field(
        {
            "id": "field-details",
            "type": "text",
            "name": "details",
            "label": "Details",
            "required": True,
            "conditions": {"show": [{"fieldId": "field-agree", "operator": "is_checked"}]},
        },
    )
    return FormSchema(id="form-1", title="Agreement", fields=[agree, details])
