"""Tests for the exception hierarchy."""

from __future__ import annotations

from litefi_validation.exceptions import (
    FieldNotFoundError,
    FormValidationError,
    PresetNotFoundError,
    RuleNotFoundError,
    ValidationError,
)

# -- ValidationError -----------------------------------------------------------


def test_validation_error_from_dict():
    err = ValidationError({"email": ["Please enter a valid email address"]})
    assert err.errors == {"email": ["Please enter a valid email address"]}
    assert err.to_dict() == {
        "error": "VALIDATION_ERROR",
        "errors": {"email": ["Please enter a valid email address"]},
    }


def test_validation_error_from_string():
    err = ValidationError("Form is incomplete")
    assert err.errors == {"__root__": ["Form is incomplete"]}


def test_validation_error_empty():
    assert ValidationError().errors == {}


# -- FieldNotFoundError --------------------------------------------------------


def test_field_not_found_fuzzy():
    err = FieldNotFoundError("frist_name", ["first_name", "last_name"], "next_of_kin")
    assert "frist_name" in str(err)
    assert "first_name" in err.suggestions
    d = err.to_dict()
    assert d["error"] == "FIELD_NOT_FOUND"
    assert d["form"] == "next_of_kin"
    assert d["available_fields"] == ["first_name", "last_name"]


def test_field_not_found_no_matches():
    err = FieldNotFoundError("zzzz", ["email"])
    assert err.suggestions == []
    assert "Did you mean" not in str(err)


# -- RuleNotFoundError / PresetNotFoundError -----------------------------------


def test_rule_not_found():
    err = RuleNotFoundError("requird", ["required", "email"])
    assert "required" in err.suggestions
    assert err.to_dict()["error"] == "RULE_NOT_FOUND"


def test_preset_not_found():
    err = PresetNotFoundError("gurantor", ["guarantor", "next_of_kin"])
    assert err.suggestions == ["guarantor"]
    assert err.to_dict()["valid_presets"] == ["guarantor", "next_of_kin"]


def test_hierarchy():
    for exc in (
        ValidationError(),
        FieldNotFoundError("a", []),
        RuleNotFoundError("a", []),
        PresetNotFoundError("a", []),
    ):
        assert isinstance(exc, FormValidationError)


def test_base_to_dict():
    assert FormValidationError("boom").to_dict() == {
        "error": "FormValidationError",
        "message": "boom",
    }
