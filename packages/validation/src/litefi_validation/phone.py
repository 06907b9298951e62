"""
Phone number classification.

Nigerian numbers are verified by SMS OTP; every other number is saved in
international format and verified automatically. Detection is heuristic:
country code and length, local trunk prefix and length, or a known mobile
network prefix.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

NON_DIGIT_RE = re.compile(r"\D", re.ASCII)

NIGERIAN_MOBILE_PREFIXES: tuple[str, ...] = (
    "0701", "0702", "0703", "0704", "0705", "0706", "0707", "0708", "0709",
    "0802", "0803", "0804", "0805", "0806", "0807", "0808", "0809",
    "0810", "0811", "0812", "0813", "0814", "0815", "0816", "0817", "0818", "0819",
    "0901", "0902", "0903", "0904", "0905", "0906", "0907", "0908", "0909",
    "0912", "0913", "0915", "0916", "0917", "0918",
)  # fmt: skip

NIGERIA = "Nigeria"
INTERNATIONAL = "International"

SMS_OTP_VERIFICATION = "SMS OTP verification"
AUTOMATIC_VERIFICATION = "Automatic verification (saved in international format)"


@dataclass(frozen=True)
class PhoneClassification:
    is_valid: bool
    is_nigerian: bool
    requires_verification: bool
    formatted_number: str
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "isNigerian": self.is_nigerian,
            "requiresVerification": self.requires_verification,
            "formattedNumber": self.formatted_number,
            "errors": list(self.errors),
        }


@dataclass(frozen=True)
class PhoneNumberInfo:
    country: str
    requires_verification: bool
    verification_method: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "country": self.country,
            "requiresVerification": self.requires_verification,
            "verificationMethod": self.verification_method,
        }


def _digits(phone: str) -> str:
    return NON_DIGIT_RE.sub("", phone)


def _group(*parts: str) -> str:
    return " ".join(part for part in parts if part)


def is_nigerian_number(phone: str) -> bool:
    digits = _digits(phone)

    if digits.startswith("234") and len(digits) == 13:
        return True
    if digits.startswith("0") and len(digits) == 11:
        return True
    return digits.startswith(NIGERIAN_MOBILE_PREFIXES)


def format_phone_number(phone: str) -> str:
    """
    Format *phone* for display.

    ``2348031234567`` → ``+234 803 123 4567``; ``08031234567`` →
    ``0803 123 4567``; anything else is returned in international form
    with a leading ``+``.
    """
    if not phone:
        return ""

    digits = _digits(phone)
    if is_nigerian_number(phone):
        if digits.startswith("234"):
            return "+" + _group(digits[:3], digits[3:6], digits[6:9], digits[9:])
        if digits.startswith("0"):
            return _group(digits[:4], digits[4:7], digits[7:])

    return phone if phone.startswith("+") else f"+{digits}"


def validate_phone_number(phone: str) -> PhoneClassification:
    if not phone or not phone.strip():
        return PhoneClassification(
            is_valid=False,
            is_nigerian=False,
            requires_verification=False,
            formatted_number="",
            errors=["Phone number is required"],
        )

    errors: list[str] = []
    digits = _digits(phone)

    # Independent checks, not an if/elif chain.
    if len(digits) < 10:
        errors.append("Phone number must be at least 10 digits")
    if len(digits) > 15:
        errors.append("Phone number cannot exceed 15 digits")

    is_nigerian = is_nigerian_number(phone)
    return PhoneClassification(
        is_valid=not errors,
        is_nigerian=is_nigerian,
        requires_verification=is_nigerian,
        formatted_number=format_phone_number(phone),
        errors=errors,
    )


def get_phone_number_info(phone: str) -> PhoneNumberInfo:
    if is_nigerian_number(phone):
        return PhoneNumberInfo(
            country=NIGERIA,
            requires_verification=True,
            verification_method=SMS_OTP_VERIFICATION,
        )
    return PhoneNumberInfo(
        country=INTERNATIONAL,
        requires_verification=False,
        verification_method=AUTOMATIC_VERIFICATION,
    )
