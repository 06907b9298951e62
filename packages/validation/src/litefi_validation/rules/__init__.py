"""
Field validation rules.

Each rule is a pure ``value -> bool`` predicate object. Ready-made
instances cover the rules the LiteFi forms use::

    from litefi_validation import rules

    ruleset = {
        "first_name": rules.min_length(2),
        "email": rules.email,
        "nin": rules.nin,
    }

Rules are immutable, so the shared instances below are safe to reuse
across forms.
"""

from __future__ import annotations

from .base import (
    DEFAULT_MESSAGE,
    AllOfRule,
    AnyOfRule,
    CallableRule,
    FieldRule,
    NotRule,
    OptionalRule,
    PatternRule,
    Predicate,
    RuleLike,
    as_rule,
    describe_failure,
)
from .contact import EmailRule, OptionalEmailRule, PhoneRule
from .dates import DateRule, parse_date
from .identity import BvnRule, NinRule
from .names import RuleName
from .text import HasValueRule, MinLengthRule, NotEmptyRule, RequiredRule, optional

required = RequiredRule()
email = EmailRule()
optional_email = OptionalEmailRule()
phone = PhoneRule()
bvn = BvnRule()
nin = NinRule()
not_empty = NotEmptyRule()
has_value = HasValueRule()
date = DateRule()
always_valid = OptionalRule()


def min_length(length: int) -> MinLengthRule:
    return MinLengthRule(length)


def pattern(regex: str, message: str | None = None) -> PatternRule:
    return PatternRule(regex, message)


__all__ = [
    # Strategy interface
    "FieldRule",
    "RuleName",
    "Predicate",
    "RuleLike",
    "DEFAULT_MESSAGE",
    "as_rule",
    "describe_failure",
    # Rule classes
    "RequiredRule",
    "MinLengthRule",
    "NotEmptyRule",
    "HasValueRule",
    "EmailRule",
    "OptionalEmailRule",
    "PhoneRule",
    "BvnRule",
    "NinRule",
    "DateRule",
    "PatternRule",
    "OptionalRule",
    "CallableRule",
    # Composition
    "AllOfRule",
    "AnyOfRule",
    "NotRule",
    "optional",
    # Ready-made rules
    "required",
    "min_length",
    "email",
    "optional_email",
    "phone",
    "bvn",
    "nin",
    "not_empty",
    "has_value",
    "date",
    "pattern",
    "always_valid",
    # Helpers
    "parse_date",
]
