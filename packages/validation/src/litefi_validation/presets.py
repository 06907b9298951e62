"""
Rulesets for the LiteFi profile forms.

Each preset factory returns fresh initial data and rules, so forms never
share state. Messages are the ones the profile screens show under each
field.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable

from . import rules
from .exceptions import FieldNotFoundError, PresetNotFoundError
from .form import FormValidator
from .rules import CallableRule, RuleLike

logger = logging.getLogger("litefi.validation.presets")


@dataclass(frozen=True)
class FormPreset:
    name: str
    initial_data: dict[str, Any]
    rules: dict[str, RuleLike]

    def create_form(self, **values: Any) -> FormValidator:
        """Build a form, pre-filling any *values* (for example from a saved profile)."""
        unknown = [field for field in values if field not in self.initial_data]
        if unknown:
            raise FieldNotFoundError(
                unknown[0], list(self.initial_data), form_name=self.name
            )
        return FormValidator({**self.initial_data, **values}, self.rules, name=self.name)


def is_positive_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return float(value) > 0
    except (TypeError, ValueError):
        return False


def is_payment_day(value: Any) -> bool:
    """Day of the month a salary lands on: a number from 1 to 31."""
    if isinstance(value, bool):
        return False
    try:
        return 1 <= float(value) <= 31
    except (TypeError, ValueError):
        return False


def _blank(*fields: str) -> dict[str, Any]:
    return dict.fromkeys(fields, "")


def personal_info() -> FormPreset:
    initial = _blank(
        "first_name",
        "last_name",
        "middle_name",
        "phone_number",
        "email",
        "bvn",
        "nin",
        "date_of_birth",
        "marital_status",
        "highest_education",
        "employment_type",
        "street_no",
        "street_name",
        "nearest_bus_stop",
        "state",
        "local_government",
        "home_ownership",
        "years_in_current_address",
    )
    ruleset: dict[str, RuleLike] = dict.fromkeys(initial, rules.always_valid)
    ruleset.update(
        first_name=rules.MinLengthRule(2, "First name must be at least 2 characters"),
        last_name=rules.MinLengthRule(2, "Last name must be at least 2 characters"),
        phone_number=rules.phone,
        email=rules.email,
        bvn=rules.bvn,
        nin=rules.nin,
        date_of_birth=rules.date,
    )
    return FormPreset("personal_info", initial, ruleset)


def next_of_kin() -> FormPreset:
    initial = _blank(
        "first_name",
        "last_name",
        "middle_name",
        "relationship",
        "phone_number",
        "email_address",
    )
    ruleset: dict[str, RuleLike] = {
        "first_name": rules.required.with_message("First name is required"),
        "last_name": rules.required.with_message("Last name is required"),
        "middle_name": rules.always_valid,
        "relationship": rules.required.with_message("Relationship is required"),
        "phone_number": rules.phone,
        "email_address": rules.optional_email,
    }
    return FormPreset("next_of_kin", initial, ruleset)


def guarantor() -> FormPreset:
    preset = next_of_kin()
    initial = {**preset.initial_data, "bvn": ""}
    ruleset = {**preset.rules, "bvn": rules.bvn}
    return FormPreset("guarantor", initial, ruleset)


def business_info() -> FormPreset:
    initial: dict[str, Any] = {
        **_blank(
            "business_name",
            "business_type",
            "business_address",
            "registration_number",
        ),
        "monthly_revenue": 0,
        **_blank("year_established", "business_email", "business_phone"),
    }
    ruleset: dict[str, RuleLike] = {
        "business_name": rules.required.with_message("Business name is required"),
        "business_type": rules.required.with_message("Business type is required"),
        "business_address": rules.required.with_message("Business address is required"),
        "registration_number": rules.always_valid,
        "monthly_revenue": CallableRule(
            is_positive_number, "Monthly revenue must be greater than zero"
        ),
        "year_established": rules.required.with_message("Year established is required"),
        "business_email": rules.email,
        "business_phone": rules.phone,
    }
    return FormPreset("business_info", initial, ruleset)


def employment_info() -> FormPreset:
    initial = _blank(
        "employer_name",
        "employer_address",
        "title",
        "work_email",
        "net_salary",
        "business_name",
        "business_description",
        "industry",
        "business_email",
        "business_address",
        "employment_type",
        "employment_start_date",
        "salary_payment_date",
    )
    ruleset: dict[str, RuleLike] = {
        "employer_name": rules.required.with_message("Employer name is required"),
        "employer_address": rules.required.with_message("Employer address is required"),
        "title": rules.required.with_message("Job title is required"),
        "work_email": rules.optional_email,
        "net_salary": rules.required.with_message("Net salary is required"),
        "business_name": rules.required.with_message("Business name is required"),
        "business_description": rules.required.with_message(
            "Business description is required"
        ),
        "industry": rules.not_empty.with_message("Please select an industry"),
        "business_email": rules.optional_email,
        "business_address": rules.required.with_message("Business address is required"),
        "employment_type": rules.not_empty.with_message("Please select employment type"),
        "employment_start_date": rules.date,
        "salary_payment_date": CallableRule(
            is_payment_day, "Salary payment date must be between 1 and 31"
        ),
    }
    return FormPreset("employment_info", initial, ruleset)


def naira_bank_account() -> FormPreset:
    initial = {"bank_type": "naira", **_blank("bank_name", "account_number", "account_name")}
    ruleset: dict[str, RuleLike] = {
        "bank_name": rules.has_value.with_message("Please select your bank"),
        "account_number": rules.pattern(r"[0-9]{10}", "Account number must be 10 digits"),
        "account_name": rules.has_value.with_message("Account name is required"),
    }
    return FormPreset("naira_bank_account", initial, ruleset)


def foreign_bank_account() -> FormPreset:
    initial = {
        "bank_type": "foreign",
        **_blank("account_name", "account_number", "swift_code", "bank_name"),
    }
    ruleset: dict[str, RuleLike] = {
        "account_name": rules.has_value.with_message("Account name is required"),
        "account_number": rules.has_value.with_message("Account number is required"),
        "swift_code": rules.has_value.with_message("SWIFT code is required"),
        "bank_name": rules.has_value.with_message("Bank name is required"),
    }
    return FormPreset("foreign_bank_account", initial, ruleset)


PRESETS: dict[str, Callable[[], FormPreset]] = {
    "personal_info": personal_info,
    "next_of_kin": next_of_kin,
    "guarantor": guarantor,
    "business_info": business_info,
    "employment_info": employment_info,
    "naira_bank_account": naira_bank_account,
    "foreign_bank_account": foreign_bank_account,
}


def get_preset(name: str) -> FormPreset:
    factory = PRESETS.get(name)
    if factory is None:
        raise PresetNotFoundError(name, list(PRESETS))
    return factory()


def create_form(name: str, **values: Any) -> FormValidator:
    """Build a ``FormValidator`` for the named profile form."""
    form = get_preset(name).create_form(**values)
    logger.debug("Created %s form with %d fields", name, len(form.fields))
    return form
