from __future__ import annotations

import pytest

from formrules.session import SUBMIT_SUCCESS_MESSAGE, FormSession, initial_values_for
from formrules.typing.models import FormSchema, FormSettings, parse_field


def test_initial_values_come_from_field_defaults() -> None:
    fields = [
        parse_field({"id": "a", "type": "text", "name": "nick", "defaultValue": "anon"}),
        parse_field({"id": "b", "type": "number", "defaultValue": 3}),
        parse_field({"id": "c", "type": "text", "name": "empty"}),
    ]

    assert initial_values_for(fields) == {"nick": "anon", "b": 3}


def test_explicit_initial_values_override_defaults(agreement_schema) -> None:
    session = FormSession(agreement_schema, initial_values={"agree": True})
    assert session.values == {"agree": True}


def test_visible_fields_follow_values(agreement_schema) -> None:
    session = FormSession(agreement_schema)
    assert [field.id for field in session.visible_fields()] == ["field-agree"]

    session.set_value("agree", True)
    assert [field.id for field in session.visible_fields()] == ["field-agree", "field-details"]


def test_set_value_builds_new_mapping_and_clears_error(agreement_schema) -> None:
    session = FormSession(agreement_schema)
    session.errors["details"] = "Details is required"
    before = session.values

    session.set_value("details", "text")

    assert session.values is not before
    assert before == {}
    assert "details" not in session.errors


def test_blur_validates_single_field(agreement_schema) -> None:
    session = FormSession(agreement_schema)

    assert session.blur("details") == "Details is required"
    assert session.touched == {"details": True}
    assert session.errors == {"details": "Details is required"}

    session.set_value("details", "ok")
    assert session.blur("details") is None
    assert session.errors == {}
    assert session.blur("unknown") is None


def test_validate_ignores_hidden_fields(agreement_schema) -> None:
    session = FormSession(agreement_schema)
    assert session.validate() is True

    session.set_value("agree", True)
    assert session.validate() is False
    assert session.errors == {"details": "Details is required"}


def test_submit_blocked_by_errors(agreement_schema, mocker) -> None:
    handler = mocker.Mock()
    session = FormSession(agreement_schema, initial_values={"agree": True})

    assert session.submit(handler) is False
    handler.assert_not_called()
    assert session.touched == {"agree": True, "details": True}


def test_submit_hands_values_to_handler(agreement_schema, mocker) -> None:
    handler = mocker.Mock()
    session = FormSession(agreement_schema)

    assert session.submit(handler) is True
    handler.assert_called_once_with({})
    assert session.status == "success"
    assert session.status_message == SUBMIT_SUCCESS_MESSAGE


def test_submit_records_handler_failure(agreement_schema) -> None:
    def _fail(values: dict[str, object]) -> None:
        raise RuntimeError("backend down")

    session = FormSession(agreement_schema)

    assert session.submit(_fail) is False
    assert session.status == "error"
    assert session.status_message == "backend down"


@pytest.mark.parametrize(("clear_on_submit", "expected"), [(True, {}), (False, {"agree": False})])
def test_submit_clears_values_when_configured(agreement_schema, mocker, clear_on_submit, expected) -> None:
    schema = FormSchema(
        id=agreement_schema.id,
        title=agreement_schema.title,
        fields=agreement_schema.fields,
        settings=FormSettings(clear_on_submit=clear_on_submit),
    )
    session = FormSession(schema)
    session.set_value("agree", False)

    assert session.submit(mocker.Mock()) is True
    assert session.values == expected


def test_reset_restores_initial_state(agreement_schema) -> None:
    session = FormSession(agreement_schema, initial_values={"agree": False})
    session.set_value("agree", True)
    session.blur("details")

    session.reset()

    assert session.values == {"agree": False}
    assert session.errors == {}
    assert session.touched == {}
    assert session.status == "idle"
