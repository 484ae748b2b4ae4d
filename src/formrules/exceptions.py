"""Package exceptions."""

from __future__ import annotations

from dataclasses import dataclass


class PackageError(Exception):
    """Root exception for the package."""


@dataclass(frozen=True)
class SettingsError(PackageError):
    """Raised when settings cannot be loaded or validated."""

    message: str = "Failed to load settings"
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        return f"{self.message}: {self.exc}" if self.exc else self.message


@dataclass
class SchemaStoreError(PackageError):
    """Raised when schema loading/saving constraints are violated."""

    message: str

    def __str__(self) -> str:
        """Return error message payload."""
        return self.message


@dataclass(frozen=True)
class PatternError(PackageError):
    """Raised when a validation pattern is not a valid regular expression."""

    pattern: str
    exc: BaseException | None = None

    def __str__(self) -> str:
        """Return error message payload."""
        reason = f": {self.exc}" if self.exc else ""
        return f"Invalid validation pattern '{self.pattern}'{reason}"


@dataclass(frozen=True)
class FormValuesError(PackageError):
    """Raised when submitted form values cannot be read."""

    source: str
    reason: str

    def __str__(self) -> str:
        """Return error message payload."""
        return f"Cannot read form values from {self.source}: {self.reason}"
