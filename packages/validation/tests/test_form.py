"""Tests for the FormValidator state machine."""

from __future__ import annotations

import logging

import pytest
from pydantic import BaseModel

from litefi_validation import FormValidator, rules
from litefi_validation.exceptions import FieldNotFoundError, ValidationError
from litefi_validation.presets import create_form
from litefi_validation.schemas import NextOfKin

# ══════════════════════════════════════════════════════════════════════
# Touch gating
# ══════════════════════════════════════════════════════════════════════


class TestShowErrors:
    def test_hidden_until_blur(self, email_form: FormValidator) -> None:
        assert email_form.validations == {"email": False}
        assert email_form.show_errors == {"email": False}

        email_form.handle_blur("email")
        assert email_form.show_errors == {"email": True}

    def test_fixing_the_value_hides_error_without_reblur(
        self, email_form: FormValidator
    ) -> None:
        email_form.handle_blur("email")
        email_form.handle_change("email", "a@b.com")
        assert email_form.touched == {"email": True}
        assert email_form.show_errors == {"email": False}

    def test_blur_is_idempotent(self, email_form: FormValidator) -> None:
        email_form.handle_blur("email")
        once = (email_form.touched, email_form.show_errors)
        email_form.handle_blur("email")
        assert (email_form.touched, email_form.show_errors) == once

    def test_never_shown_for_untouched_field(self) -> None:
        form = FormValidator(
            {"first_name": "", "email": ""},
            {"first_name": rules.required, "email": rules.email},
        )
        form.handle_blur("first_name")
        assert form.show_errors == {"first_name": True, "email": False}

    def test_touch_all_fields(self) -> None:
        form = FormValidator(
            {"first_name": "", "middle_name": "", "email": "x"},
            {"first_name": rules.required, "email": rules.email},
        )
        form.touch_all_fields()
        assert form.touched == {"first_name": True, "middle_name": True, "email": True}
        assert form.show_errors == {
            "first_name": True,
            "middle_name": False,
            "email": True,
        }


# ══════════════════════════════════════════════════════════════════════
# Validity
# ══════════════════════════════════════════════════════════════════════


class TestValidity:
    def test_fields_without_rules_are_valid(self) -> None:
        form = FormValidator({"a": "", "b": ""}, {"a": rules.required})
        assert form.validations == {"a": False, "b": True}

    def test_empty_ruleset_is_always_valid(self) -> None:
        form = FormValidator({"email": "not an email", "bvn": "1"})
        assert form.is_form_valid() is True
        form.handle_change("email", "")
        assert form.is_form_valid() is True

    def test_is_form_valid_follows_changes(self) -> None:
        form = FormValidator(
            {"first_name": "", "bvn": ""},
            {"first_name": rules.required, "bvn": rules.bvn},
        )
        assert form.is_form_valid() is False
        form.handle_change("first_name", "Ada")
        assert form.is_form_valid() is False
        form.handle_change("bvn", "12345678901")
        assert form.is_form_valid() is True

    def test_plain_functions_work_as_rules(self) -> None:
        form = FormValidator({"amount": 0}, {"amount": lambda value: value > 0})
        assert form.is_form_valid() is False
        form.handle_change("amount", 500)
        assert form.is_form_valid() is True

    def test_set_validation_rules_replaces_instead_of_merging(self) -> None:
        form = FormValidator(
            {"a": "", "b": ""},
            {"a": rules.required, "b": rules.required},
        )
        form.set_validation_rules({"a": rules.required})
        assert form.validations == {"a": False, "b": True}
        assert form.validation_rules == {"a": rules.required}

        form.handle_change("a", "x")
        assert form.is_form_valid() is True

    def test_rule_for_field_outside_form(self) -> None:
        form = FormValidator({"a": "x"}, {"ghost": rules.required})
        form.touch_all_fields()
        assert form.validations == {"a": True, "ghost": False}
        assert form.show_errors["ghost"] is False
        assert form.is_form_valid() is False


# ══════════════════════════════════════════════════════════════════════
# Field set and ownership
# ══════════════════════════════════════════════════════════════════════


class TestFieldSet:
    def test_unknown_field_on_change(self, email_form: FormValidator) -> None:
        with pytest.raises(FieldNotFoundError) as exc_info:
            email_form.handle_change("emial", "a@b.com")
        assert exc_info.value.suggestions == ["email"]

    def test_unknown_field_on_blur(self, email_form: FormValidator) -> None:
        with pytest.raises(FieldNotFoundError):
            email_form.handle_blur("phone")
        assert email_form.fields == ["email"]

    def test_set_form_data_is_all_or_nothing(self) -> None:
        form = FormValidator({"a": "", "b": ""})
        with pytest.raises(FieldNotFoundError):
            form.set_form_data({"a": "x", "c": "y"})
        assert form.form_data == {"a": "", "b": ""}

        form.set_form_data({"a": "x", "b": "y"})
        assert form.form_data == {"a": "x", "b": "y"}

    def test_readers_return_copies(self, email_form: FormValidator) -> None:
        email_form.form_data["email"] = "a@b.com"
        email_form.touched["email"] = True
        assert email_form.form_data == {"email": ""}
        assert email_form.show_errors == {"email": False}

    def test_instances_do_not_share_state(self) -> None:
        initial = {"email": ""}
        first = FormValidator(initial, {"email": rules.email})
        second = FormValidator(initial, {"email": rules.email})
        first.handle_change("email", "a@b.com")
        first.handle_blur("email")
        assert second.form_data == {"email": ""}
        assert second.touched == {"email": False}
        assert initial == {"email": ""}

    def test_reset(self, email_form: FormValidator) -> None:
        email_form.handle_change("email", "a@b.com")
        email_form.touch_all_fields()
        email_form.reset()
        assert email_form.form_data == {"email": ""}
        assert email_form.touched == {"email": False}
        assert email_form.validations == {"email": False}

    def test_reset_with_new_defaults(self, email_form: FormValidator) -> None:
        email_form.reset({"email": "saved@litefi.ng"})
        assert email_form.is_form_valid() is True
        email_form.handle_change("email", "")
        email_form.reset()
        assert email_form.form_data == {"email": "saved@litefi.ng"}

    def test_logs_rule_replacement(
        self, email_form: FormValidator, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="litefi.validation.form"):
            email_form.set_validation_rules({})
        assert "Validation rules replaced" in caplog.text


# ══════════════════════════════════════════════════════════════════════
# Error reporting and submission
# ══════════════════════════════════════════════════════════════════════


class TestSubmission:
    def _form(self) -> FormValidator:
        return FormValidator(
            {"first_name": "", "email": "bad", "nin": ""},
            {
                "first_name": rules.required.with_message("First name is required"),
                "email": rules.email,
                "nin": rules.nin,
            },
        )

    def test_errors_ignore_touch_state(self) -> None:
        form = self._form()
        assert form.errors().errors == {
            "first_name": ["First name is required"],
            "email": ["Please enter a valid email address"],
        }
        assert form.visible_errors().is_valid

    def test_visible_errors_follow_blur(self) -> None:
        form = self._form()
        form.handle_blur("email")
        assert form.visible_errors().errors == {
            "email": ["Please enter a valid email address"]
        }

    def test_submit_touches_everything(self) -> None:
        form = self._form()
        result = form.submit()
        assert not result
        assert all(form.touched.values())
        assert result.fields == ["first_name", "email"]

    def test_to_model(self, next_of_kin_values: dict[str, str]) -> None:
        form = create_form("next_of_kin", **next_of_kin_values)
        model = form.to_model(NextOfKin)
        assert isinstance(model, NextOfKin)
        assert model.first_name == "Ngozi"
        assert model.model_dump(by_alias=True)["emailAddress"] == "ngozi@example.com"

    def test_to_model_raises_rule_errors(self) -> None:
        form = self._form()
        with pytest.raises(ValidationError) as exc_info:
            form.to_model(NextOfKin)
        assert set(exc_info.value.errors) == {"first_name", "email"}
        assert all(form.touched.values())

    def test_to_model_converts_pydantic_errors(self) -> None:
        class Amount(BaseModel):
            amount: int

        form = FormValidator({"amount": "abc"})
        with pytest.raises(ValidationError) as exc_info:
            form.to_model(Amount)
        assert list(exc_info.value.errors) == ["amount"]
