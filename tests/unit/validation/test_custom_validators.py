from __future__ import annotations

from datetime import date, timedelta

from formrules.typing.models import parse_field
from formrules.validation import validate_field
from formrules.validation.custom import (
    confirm_password,
    create_custom_validator,
    file_size,
    future_date,
    min_age,
    past_date,
)


def test_create_custom_validator_passes_form_values() -> None:
    validator = create_custom_validator(lambda value, form_values: value == form_values["expected"], "Mismatch")

    assert validator("a", None, {"expected": "a"}) is None
    assert validator("b", None, {"expected": "a"}) == "Mismatch"


def test_confirm_password_as_field_custom_validator() -> None:
    field = parse_field(
        {"id": "c", "type": "password", "name": "confirm", "validation": {"custom": confirm_password}},
    )

    assert validate_field(field, "secret", {"password": "secret"}) is None
    assert validate_field(field, "other", {"password": "secret"}) == "Passwords do not match"
    assert validate_field(field, "other", None) == "Passwords do not match"


def test_min_age() -> None:
    validator = min_age(18)
    this_year = date.today().year

    assert validator(f"{this_year - 30}-06-15") is None
    assert validator(date(this_year - 5, 1, 1)) == "Must be at least 18 years old"
    assert validator("") is None
    assert validator("not a date") == "Must be at least 18 years old"


def test_file_size_checks_first_file() -> None:
    validator = file_size(1)

    assert validator([{"name": "a.txt", "size": 512}]) is None
    assert validator([{"name": "b.bin", "size": 2 * 1024 * 1024}]) == "File size must be less than 1MB"
    assert validator([]) is None
    assert validator(None) is None


def test_future_and_past_dates() -> None:
    today = date.today()
    tomorrow = (today + timedelta(days=1)).isoformat()
    yesterday = (today - timedelta(days=1)).isoformat()

    assert future_date(tomorrow) is None
    assert future_date(today.isoformat()) is None
    assert future_date(yesterday) == "Date must be in the future"
    assert past_date(yesterday) is None
    assert past_date(today.isoformat()) == "Date must be in the past"
    assert past_date("") is None
