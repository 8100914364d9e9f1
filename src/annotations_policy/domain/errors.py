"""Settings validation errors.

Two disjoint kinds, each with a stable ``code`` for the service layer:
structural criterion errors and annotation naming errors.
"""

from __future__ import annotations

from collections.abc import Iterable


class SettingsValidationError(ValueError):
    """Base class for settings that fail validation."""

    code = "INVALID_SETTINGS"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidCriterionError(SettingsValidationError):
    """The criterion failed its own structural check (e.g. empty values)."""

    code = "INVALID_CRITERION"


class InvalidAnnotationNamesError(SettingsValidationError):
    """One or more configured values are not well-formed annotation keys."""

    code = "INVALID_ANNOTATION_NAMES"

    def __init__(self, names: Iterable[str]) -> None:
        self.names = list(names)
        super().__init__(f"Invalid annotation names: {', '.join(self.names)}")
