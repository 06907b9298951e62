"""Nigerian identity number rules: BVN and NIN."""

from __future__ import annotations

import re
from typing import Any

from .base import FieldRule
from .names import RuleName

IDENTITY_NUMBER_RE = re.compile(r"\d{11}", re.ASCII)


def is_identity_number(value: Any) -> bool:
    return isinstance(value, str) and IDENTITY_NUMBER_RE.fullmatch(value) is not None


class BvnRule(FieldRule):
    """Bank Verification Number: exactly 11 digits."""

    default_message = "Enter a valid BVN (11 digits)"

    @property
    def name(self) -> RuleName:
        return RuleName.BVN

    def test(self, value: Any) -> bool:
        return is_identity_number(value)


class NinRule(FieldRule):
    """National Identification Number: optional, else exactly 11 digits."""

    default_message = "Enter a valid NIN (11 digits) or leave blank"

    @property
    def name(self) -> RuleName:
        return RuleName.NIN

    def test(self, value: Any) -> bool:
        if value is None:
            return True
        if isinstance(value, str) and value.strip() == "":
            return True
        return is_identity_number(value)
