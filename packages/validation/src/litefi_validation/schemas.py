"""
Pydantic payload models for the LiteFi profile forms.

Fields reuse the same ``FieldRule`` objects as the in-browser forms, wrapped
as ``AfterValidator`` callables. A field checked by the form carries the same
rule here, on top of its declared type: ``monthly_revenue`` must be a number
and ``salary_payment_date`` an integer day. Fields the form does not check are
plain strings defaulting to ``""``. Models take snake_case names or the
camelCase keys the frontend sends.
"""

from __future__ import annotations

from typing import Annotated, Any, Callable, Literal, Union

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from . import rules
from .rules import FieldRule


def rule_validator(rule: FieldRule) -> Callable[[Any], Any]:
    """Adapt a rule to pydantic: pass the value through or raise ``ValueError``."""

    def check(value: Any) -> Any:
        if not rule.test(value):
            raise ValueError(rule.describe_failure(value))
        return value

    return check


RequiredText = Annotated[str, AfterValidator(rule_validator(rules.required))]
FilledText = Annotated[str, AfterValidator(rule_validator(rules.has_value))]
PersonName = Annotated[
    str,
    AfterValidator(rule_validator(rules.MinLengthRule(2, "Must be at least 2 characters"))),
]
EmailAddress = Annotated[str, AfterValidator(rule_validator(rules.email))]
OptionalEmailAddress = Annotated[str, AfterValidator(rule_validator(rules.optional_email))]
PhoneNumber = Annotated[str, AfterValidator(rule_validator(rules.phone))]
Bvn = Annotated[str, AfterValidator(rule_validator(rules.bvn))]
Nin = Annotated[str, AfterValidator(rule_validator(rules.nin))]
DayMonthYear = Annotated[str, AfterValidator(rule_validator(rules.date))]
SelectedOption = Annotated[str, AfterValidator(rule_validator(rules.not_empty))]
NairaAccountNumber = Annotated[
    str,
    AfterValidator(
        rule_validator(rules.pattern(r"[0-9]{10}", "Account number must be 10 digits"))
    ),
]


class ProfilePayload(BaseModel):
    """Base class for profile form payloads."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class PersonalInfo(ProfilePayload):
    first_name: PersonName
    last_name: PersonName
    middle_name: str = ""
    phone_number: PhoneNumber
    email: EmailAddress
    bvn: Bvn
    nin: Nin = ""
    date_of_birth: DayMonthYear
    marital_status: str = ""
    highest_education: str = ""
    employment_type: str = ""
    street_no: str = ""
    street_name: str = ""
    nearest_bus_stop: str = ""
    state: str = ""
    local_government: str = ""
    home_ownership: str = ""
    years_in_current_address: str = ""


class NextOfKin(ProfilePayload):
    first_name: RequiredText
    last_name: RequiredText
    middle_name: str = ""
    relationship: RequiredText
    phone_number: PhoneNumber
    email_address: OptionalEmailAddress = ""


class Guarantor(NextOfKin):
    bvn: Bvn


class BusinessInfo(ProfilePayload):
    business_name: RequiredText
    business_type: RequiredText
    business_address: RequiredText
    registration_number: str = ""
    monthly_revenue: float = Field(gt=0)
    year_established: RequiredText
    business_email: EmailAddress
    business_phone: PhoneNumber


class EmploymentInfo(ProfilePayload):
    """
    Employment details.

    Salaried applicants fill the employer fields and self-employed
    applicants the business fields; the form validates both groups.
    """

    employer_name: RequiredText
    employer_address: RequiredText
    title: RequiredText
    work_email: OptionalEmailAddress = ""
    net_salary: RequiredText
    business_name: RequiredText
    business_description: RequiredText
    industry: SelectedOption
    business_email: OptionalEmailAddress = ""
    business_address: RequiredText
    employment_type: SelectedOption
    employment_start_date: DayMonthYear
    salary_payment_date: int = Field(ge=1, le=31)


class NairaBankAccount(ProfilePayload):
    bank_type: Literal["naira"] = "naira"
    bank_name: FilledText
    account_number: NairaAccountNumber
    account_name: FilledText


class ForeignBankAccount(ProfilePayload):
    bank_type: Literal["foreign"] = "foreign"
    account_name: FilledText
    account_number: FilledText
    swift_code: FilledText
    bank_name: FilledText


BankAccount = Annotated[
    Union[NairaBankAccount, ForeignBankAccount],
    Field(discriminator="bank_type"),
]

SCHEMAS: dict[str, type[ProfilePayload]] = {
    "personal_info": PersonalInfo,
    "next_of_kin": NextOfKin,
    "guarantor": Guarantor,
    "business_info": BusinessInfo,
    "employment_info": EmploymentInfo,
    "naira_bank_account": NairaBankAccount,
    "foreign_bank_account": ForeignBankAccount,
}
