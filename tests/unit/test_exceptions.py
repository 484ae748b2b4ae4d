from __future__ import annotations

from formrules.exceptions import (
    FormValuesError,
    PackageError,
    PatternError,
    SchemaStoreError,
    SettingsError,
)


def test_root_exception_hierarchy() -> None:
    assert issubclass(SettingsError, PackageError)
    assert issubclass(SchemaStoreError, PackageError)
    assert issubclass(PatternError, PackageError)
    assert issubclass(FormValuesError, PackageError)


def test_error_messages() -> None:
    assert str(SettingsError()) == "Failed to load settings"
    assert str(SettingsError(exc=ValueError("bad"))) == "Failed to load settings: bad"
    assert str(SchemaStoreError(message="broken")) == "broken"
    assert str(PatternError(pattern="([")) == "Invalid validation pattern '(['"
    assert str(FormValuesError(source="v.json", reason="expected a JSON object")) == (
        "Cannot read form values from v.json: expected a JSON object"
    )
