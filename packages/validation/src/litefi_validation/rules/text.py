"""Presence and length rules: required, min_length, not_empty, has_value."""

from __future__ import annotations

from typing import Any

from .base import AnyOfRule, FieldRule, RuleLike
from .names import RuleName


class RequiredRule(FieldRule):
    """Strings must be non-blank; anything else must not be None."""

    default_message = "This field is required"

    @property
    def name(self) -> RuleName:
        return RuleName.REQUIRED

    def test(self, value: Any) -> bool:
        if isinstance(value, str):
            return len(value.strip()) > 0
        return value is not None


class MinLengthRule(FieldRule):
    """Trimmed text must be at least ``length`` characters."""

    def __init__(self, length: int, message: str | None = None) -> None:
        super().__init__(message)
        self.length = length

    @property
    def name(self) -> RuleName:
        return RuleName.MIN_LENGTH

    def test(self, value: Any) -> bool:
        if value is None:
            return False
        text = value if isinstance(value, str) else str(value)
        return len(text.strip()) >= self.length

    def _default_message(self) -> str:
        return f"Must be at least {self.length} characters"

    def __repr__(self) -> str:
        return f"MinLengthRule({self.length})"


class NotEmptyRule(FieldRule):
    """Anything but the exact empty string. Whitespace counts as a value."""

    default_message = "Please select an option"

    @property
    def name(self) -> RuleName:
        return RuleName.NOT_EMPTY

    def test(self, value: Any) -> bool:
        return value != ""


class HasValueRule(FieldRule):
    """
    Browser truthiness: fails ``None``, ``False``, ``""``, zero and NaN.

    Containers pass even when empty, and whitespace-only strings pass.
    """

    default_message = "This field is required"

    @property
    def name(self) -> RuleName:
        return RuleName.HAS_VALUE

    def test(self, value: Any) -> bool:
        if value is None or isinstance(value, bool):
            return bool(value)
        if isinstance(value, str):
            return value != ""
        if isinstance(value, (int, float)):
            return value == value and value != 0
        return True


def optional(rule: RuleLike) -> AnyOfRule:
    """Accept a blank value; otherwise defer to *rule*."""
    return AnyOfRule(~RequiredRule(), rule)
