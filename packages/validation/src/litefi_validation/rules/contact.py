"""Contact detail rules: email, optional_email, phone."""

from __future__ import annotations

import re
from typing import Any

from .base import FieldRule
from .names import RuleName

EMAIL_RE = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
PHONE_CHARS_RE = re.compile(r"[^\d+]", re.ASCII)
NON_DIGIT_RE = re.compile(r"\D", re.ASCII)

PHONE_MIN_DIGITS = 9
PHONE_MAX_DIGITS = 15
LOCAL_PHONE_DIGITS = 11


def is_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_RE.fullmatch(value) is not None


class EmailRule(FieldRule):
    default_message = "Please enter a valid email address"

    @property
    def name(self) -> RuleName:
        return RuleName.EMAIL

    def test(self, value: Any) -> bool:
        return is_email(value)


class OptionalEmailRule(FieldRule):
    """Blank is accepted; anything else must be an email address."""

    default_message = "Please enter a valid email address or leave blank"

    @property
    def name(self) -> RuleName:
        return RuleName.OPTIONAL_EMAIL

    def test(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str) and value.strip() == "":
            return True
        return is_email(value)


class PhoneRule(FieldRule):
    """
    Loose phone number check.

    ``+`` numbers need 9-15 digits after the plus, local numbers starting
    with ``0`` need exactly 11 digits, anything else 9-15 digits.
    """

    default_message = "Enter a valid phone number"

    @property
    def name(self) -> RuleName:
        return RuleName.PHONE

    def test(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False

        cleaned = PHONE_CHARS_RE.sub("", value)
        digits = NON_DIGIT_RE.sub("", cleaned)

        if cleaned.startswith("+"):
            return PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS
        if cleaned.startswith("0"):
            return len(digits) == LOCAL_PHONE_DIGITS
        return PHONE_MIN_DIGITS <= len(digits) <= PHONE_MAX_DIGITS
