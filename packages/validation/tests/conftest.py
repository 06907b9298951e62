"""Shared fixtures for validation tests."""

from __future__ import annotations

import pytest

from litefi_validation import FormValidator, rules
from litefi_validation.registry import build_default_registry


@pytest.fixture
def registry():
    """Default rule registry."""
    return build_default_registry()


@pytest.fixture
def email_form() -> FormValidator:
    """Single-field form whose only value starts out invalid."""
    return FormValidator({"email": ""}, {"email": rules.email})


@pytest.fixture
def next_of_kin_values() -> dict[str, str]:
    return {
        "first_name": "Ngozi",
        "last_name": "Okafor",
        "middle_name": "",
        "relationship": "Sister",
        "phone_number": "08031234567",
        "email_address": "ngozi@example.com",
    }
