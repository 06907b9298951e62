"""
Form validation exception hierarchy with fuzzy-match suggestions.

Failed validation is reported as data (booleans, error lists,
``ValidationResult``). These exceptions cover programming errors
(unknown fields, unknown rule names) and the explicit raising APIs.
All of them inherit from ``FormValidationError`` and provide
``to_dict()`` for API-friendly error responses.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class FormValidationError(Exception):
    """Base exception for all litefi-validation errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class ValidationError(FormValidationError):
    """Raised when a form is submitted with invalid fields.

    Carries structured errors: ``{field: [messages]}``.
    """

    def __init__(self, errors: dict[str, list[str]] | str | None = None) -> None:
        if isinstance(errors, str):
            self.errors: dict[str, list[str]] = {"__root__": [errors]}
        elif errors is None:
            self.errors = {}
        else:
            self.errors = errors
        super().__init__(str(self.errors))

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "VALIDATION_ERROR",
            "errors": self.errors,
        }


class FieldNotFoundError(FormValidationError):
    """
    A field name that is not part of the form.

    Forms have a fixed field set, decided by the initial data.
    Uses fuzzy matching to suggest the field that was probably meant.
    """

    def __init__(
        self,
        invalid_field: str,
        available_fields: list[str],
        form_name: str = "form",
        cutoff: float = 0.6,
    ) -> None:
        self.invalid_field = invalid_field
        self.available_fields = available_fields
        self.form_name = form_name
        self.suggestions = get_close_matches(
            invalid_field, available_fields, n=3, cutoff=cutoff
        )

        message = f"Unknown field '{invalid_field}' on '{form_name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.invalid_field,
            "form": self.form_name,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class RuleNotFoundError(FormValidationError):
    """
    Unknown rule name requested from a registry.

    Provides fuzzy-matched suggestions for likely intended rules.
    """

    def __init__(self, rule: str, valid_rules: list[str]) -> None:
        self.rule = rule
        self.valid_rules = valid_rules
        self.suggestions = get_close_matches(rule, valid_rules, n=3, cutoff=0.6)

        message = f"Unknown validation rule: '{rule}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid rules: {', '.join(sorted(valid_rules))}"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "RULE_NOT_FOUND",
            "rule": self.rule,
            "suggestions": self.suggestions,
            "valid_rules": sorted(self.valid_rules),
        }


class PresetNotFoundError(FormValidationError):
    """Unknown form preset name."""

    def __init__(self, preset: str, valid_presets: list[str]) -> None:
        self.preset = preset
        self.valid_presets = valid_presets
        self.suggestions = get_close_matches(preset, valid_presets, n=3, cutoff=0.6)

        message = f"Unknown form preset: '{preset}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PRESET_NOT_FOUND",
            "preset": self.preset,
            "suggestions": self.suggestions,
            "valid_presets": sorted(self.valid_presets),
        }
