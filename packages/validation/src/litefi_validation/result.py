"""Field-keyed error collections returned by form and password checks."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .exceptions import ValidationError


@dataclass
class ValidationResult:
    """
    Messages per field, in the order the checks produced them.

    The profile screens show one line under each field, so ``first_errors``
    is what a UI renders; the API routes return every message as a flat
    list, which is ``messages``.
    """

    errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @property
    def fields(self) -> list[str]:
        return list(self.errors)

    @classmethod
    def success(cls) -> ValidationResult:
        return cls()

    @classmethod
    def failure(cls, errors: dict[str, list[str]]) -> ValidationResult:
        return cls(errors={name: list(messages) for name, messages in errors.items()})

    def add_error(self, field_name: str, message: str) -> None:
        self.errors.setdefault(field_name, []).append(message)

    def first_error(self, field_name: str) -> str | None:
        messages = self.errors.get(field_name)
        return messages[0] if messages else None

    def first_errors(self) -> dict[str, str]:
        """One message per failing field."""
        return {name: messages[0] for name, messages in self.errors.items() if messages}

    def messages(self) -> list[str]:
        return [message for messages in self.errors.values() for message in messages]

    def merge(self, other: ValidationResult) -> ValidationResult:
        """A new result holding this result's messages followed by *other*'s."""
        merged = ValidationResult.failure(self.errors)
        for field_name, messages in other.errors.items():
            merged.errors.setdefault(field_name, []).extend(messages)
        return merged

    def raise_for_errors(self) -> None:
        """
        Raise ``ValidationError`` carrying these errors, if there are any.

        Raises:
            ValidationError: If at least one field failed.
        """
        if self.errors:
            raise ValidationError(self.failure(self.errors).errors)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": {name: list(messages) for name, messages in self.errors.items()},
        }

    def __bool__(self) -> bool:
        return self.is_valid
