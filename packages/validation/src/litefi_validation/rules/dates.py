"""Strict ``dd/mm/yyyy`` date rule."""

from __future__ import annotations

import datetime
import re
from typing import Any

from .base import FieldRule
from .names import RuleName

DATE_RE = re.compile(r"(\d{2})/(\d{2})/(\d{4})", re.ASCII)


def parse_date(value: Any) -> datetime.date | None:
    """Parse ``dd/mm/yyyy`` into a date, or None if it is not a real day."""
    if not isinstance(value, str):
        return None
    match = DATE_RE.fullmatch(value)
    if match is None:
        return None
    day, month, year = (int(part) for part in match.groups())
    try:
        return datetime.date(year, month, day)
    except ValueError:
        return None


class DateRule(FieldRule):
    """Rejects impossible days such as 31/02/2024 or 29/02/2023."""

    default_message = "Please enter a valid date in DD/MM/YYYY format"

    @property
    def name(self) -> RuleName:
        return RuleName.DATE

    def test(self, value: Any) -> bool:
        return parse_date(value) is not None
