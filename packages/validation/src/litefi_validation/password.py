"""
Password policy: rule checks, strength scoring and display helpers.

Two independent notions of strength live here and are kept apart:

* ``validate_password().strength`` buckets by the number of failed rules
  (0 → strong, 1-2 → medium, 3+ → weak).
* ``calculate_password_strength()`` produces a 0-100 score that the
  strength meter maps to a color and a label with its own thresholds.

The two can disagree on the same password.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .result import ValidationResult

UPPERCASE_RE = re.compile(r"[A-Z]")
LOWERCASE_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"\d", re.ASCII)
SPECIAL_RE = re.compile(r"[!@#$%^&*()_+\-=\[\]{};':\"\\|,.<>/?]")
REPEATED_RE = re.compile(r"(.)\1{2,}")

CHARACTER_CLASSES = (UPPERCASE_RE, LOWERCASE_RE, DIGIT_RE, SPECIAL_RE)


class PasswordStrength(str, Enum):
    """Rule-count strength bucket reported by ``validate_password``."""

    WEAK = "weak"
    MEDIUM = "medium"
    STRONG = "strong"


class StrengthColor(str, Enum):
    """Meter color for a 0-100 strength score."""

    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"


@dataclass(frozen=True)
class PasswordPolicy:
    """Configurable part of the password rules."""

    min_length: int = 8


DEFAULT_PASSWORD_POLICY = PasswordPolicy()


@dataclass(frozen=True)
class PasswordStrengthReport:
    is_valid: bool
    errors: list[str] = field(default_factory=list)
    strength: PasswordStrength = PasswordStrength.WEAK

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "strength": self.strength.value,
        }


@dataclass(frozen=True)
class PasswordStrengthMeter:
    """Score, color and label shown by the strength meter widget."""

    score: int
    color: StrengthColor
    label: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "score": self.score,
            "color": self.color.value,
            "label": self.label,
        }


def validate_password(
    password: str,
    policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
) -> PasswordStrengthReport:
    """
    Check *password* against the policy.

    Errors are reported in a fixed order: length, uppercase, lowercase,
    number, special character.
    """
    errors: list[str] = []

    if len(password) < policy.min_length:
        errors.append(
            f"Password must be at least {policy.min_length} characters long"
        )
    if not UPPERCASE_RE.search(password):
        errors.append("Password must contain at least one uppercase letter")
    if not LOWERCASE_RE.search(password):
        errors.append("Password must contain at least one lowercase letter")
    if not DIGIT_RE.search(password):
        errors.append("Password must contain at least one number")
    if not SPECIAL_RE.search(password):
        errors.append("Password must contain at least one special character")

    if not errors:
        strength = PasswordStrength.STRONG
    elif len(errors) <= 2:
        strength = PasswordStrength.MEDIUM
    else:
        strength = PasswordStrength.WEAK

    return PasswordStrengthReport(
        is_valid=not errors,
        errors=errors,
        strength=strength,
    )


def calculate_password_strength(password: str) -> int:
    """Return a score between 0 and 100 for the strength meter."""
    if not password:
        return 0

    score = min(25, len(password) * 2)

    if UPPERCASE_RE.search(password):
        score += 10
    if LOWERCASE_RE.search(password):
        score += 10
    if DIGIT_RE.search(password):
        score += 10
    if SPECIAL_RE.search(password):
        score += 15

    # Variety bonus, counted on top of the per-class points above.
    variety = sum(1 for pattern in CHARACTER_CLASSES if pattern.search(password))
    score += variety * 10

    if REPEATED_RE.search(password):
        score -= 10

    return min(100, max(0, score))


def get_password_strength_color(strength: int) -> StrengthColor:
    if strength < 30:
        return StrengthColor.RED
    if strength < 60:
        return StrengthColor.ORANGE
    if strength < 80:
        return StrengthColor.YELLOW
    return StrengthColor.GREEN


def get_password_strength_label(strength: int) -> str:
    if strength < 30:
        return "Very Weak"
    if strength < 60:
        return "Weak"
    if strength < 80:
        return "Medium"
    return "Strong"


def measure_password_strength(password: str) -> PasswordStrengthMeter:
    score = calculate_password_strength(password)
    return PasswordStrengthMeter(
        score=score,
        color=get_password_strength_color(score),
        label=get_password_strength_label(score),
    )


def validate_password_change(
    current_password: str,
    new_password: str,
    confirm_password: str,
    policy: PasswordPolicy = DEFAULT_PASSWORD_POLICY,
) -> ValidationResult:
    """Validate the change-password form, collecting every error per field."""
    result = ValidationResult.success()

    if not current_password.strip():
        result.add_error("current_password", "Current password is required")

    for message in validate_password(new_password, policy).errors:
        result.add_error("new_password", message)

    if new_password != confirm_password:
        result.add_error("confirm_password", "New passwords do not match")

    return result
