"""
FormValidator — per-form validation and touch-tracking state.

One instance per form. The field set is fixed by the initial data; values
change through ``handle_change`` and fields become *touched* through
``handle_blur`` or ``touch_all_fields``. Validity is recomputed eagerly
inside every mutator, so readers always see results for the latest
values and ruleset.

Usage::

    form = FormValidator({"email": ""}, {"email": rules.email})
    form.show_errors["email"]       # False, untouched
    form.handle_blur("email")
    form.show_errors["email"]       # True, "" is not an email
    form.handle_change("email", "a@b.com")
    form.show_errors["email"]       # False
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Mapping, TypeVar

from pydantic import ValidationError as PydanticValidationError

from .exceptions import FieldNotFoundError, ValidationError
from .result import ValidationResult
from .rules import RuleLike, describe_failure

if TYPE_CHECKING:
    from pydantic import BaseModel

logger = logging.getLogger("litefi.validation.form")

M = TypeVar("M", bound="BaseModel")


class FormValidator:
    """Validation state machine over form data, touched flags and a ruleset."""

    def __init__(
        self,
        initial_data: Mapping[str, Any],
        validation_rules: Mapping[str, RuleLike] | None = None,
        name: str = "form",
    ) -> None:
        self.name = name
        self._initial_data: dict[str, Any] = dict(initial_data)
        self._form_data: dict[str, Any] = dict(initial_data)
        self._touched: dict[str, bool] = dict.fromkeys(initial_data, False)
        self._rules: dict[str, RuleLike] = dict(validation_rules or {})
        self._validations: dict[str, bool] = {}
        self._recompute()

    # -- derived state -------------------------------------------------------

    def _recompute(self) -> None:
        validations = {field: True for field in self._form_data}
        for field, rule in self._rules.items():
            validations[field] = bool(rule(self._form_data.get(field)))
        self._validations = validations

    def _check_field(self, field: str) -> None:
        if field not in self._touched:
            raise FieldNotFoundError(field, list(self._touched), form_name=self.name)

    @property
    def fields(self) -> list[str]:
        return list(self._touched)

    @property
    def form_data(self) -> dict[str, Any]:
        return dict(self._form_data)

    @property
    def touched(self) -> dict[str, bool]:
        return dict(self._touched)

    @property
    def validation_rules(self) -> dict[str, RuleLike]:
        return dict(self._rules)

    @property
    def validations(self) -> dict[str, bool]:
        """Per-field validity. Fields without a rule are valid."""
        return dict(self._validations)

    @property
    def show_errors(self) -> dict[str, bool]:
        """Per-field error visibility: touched, ruled, and failing."""
        return {
            field: (
                self._touched.get(field, False)
                and field in self._rules
                and not valid
            )
            for field, valid in self._validations.items()
        }

    def is_form_valid(self) -> bool:
        return all(self._validations[field] for field in self._rules)

    # -- mutators ------------------------------------------------------------

    def handle_change(self, field: str, value: Any) -> None:
        self._check_field(field)
        self._form_data[field] = value
        self._recompute()

    def set_form_data(self, updates: Mapping[str, Any]) -> None:
        """Apply several field changes at once."""
        for field in updates:
            self._check_field(field)
        self._form_data.update(updates)
        self._recompute()

    def handle_blur(self, field: str) -> None:
        self._check_field(field)
        self._touched[field] = True

    def touch_all_fields(self) -> None:
        """Mark every field touched, usually right before submitting."""
        self._touched = dict.fromkeys(self._touched, True)
        logger.debug("All %d fields touched on %s", len(self._touched), self.name)

    def set_validation_rules(self, validation_rules: Mapping[str, RuleLike]) -> None:
        """Replace the whole ruleset. Rules are not merged."""
        self._rules = dict(validation_rules)
        self._recompute()
        logger.debug(
            "Validation rules replaced on %s (%d rules)", self.name, len(self._rules)
        )

    def reset(self, initial_data: Mapping[str, Any] | None = None) -> None:
        """
        Restore the initial values and clear every touched flag.

        Passing *initial_data* replaces the defaults but must keep the
        same field set.
        """
        if initial_data is not None:
            for field in initial_data:
                self._check_field(field)
            self._initial_data.update(initial_data)
        self._form_data = dict(self._initial_data)
        self._touched = dict.fromkeys(self._touched, False)
        self._recompute()
        logger.debug("Form %s reset", self.name)

    # -- error reporting -----------------------------------------------------

    def _collect(self, fields: list[str]) -> ValidationResult:
        result = ValidationResult.success()
        for field in fields:
            rule = self._rules[field]
            result.add_error(field, describe_failure(rule, self._form_data.get(field)))
        return result

    def errors(self) -> ValidationResult:
        """Messages for every failing field, touched or not."""
        return self._collect(
            [field for field in self._rules if not self._validations[field]]
        )

    def visible_errors(self) -> ValidationResult:
        """Messages for the fields whose errors are currently shown."""
        shown = self.show_errors
        return self._collect([field for field in self._rules if shown.get(field)])

    def submit(self) -> ValidationResult:
        """Touch every field and report all outstanding errors."""
        self.touch_all_fields()
        return self.errors()

    def to_model(self, model_cls: type[M]) -> M:
        """
        Submit the form and validate its data into *model_cls*.

        Raises:
            ValidationError: If a field rule fails, or the model rejects
                the data. Errors are keyed by field name.
        """
        self.submit().raise_for_errors()

        try:
            return model_cls.model_validate(self._form_data)
        except PydanticValidationError as exc:
            errors: dict[str, list[str]] = {}
            for error in exc.errors():
                loc = ".".join(str(p) for p in error.get("loc", ("__root__",)))
                msg = error.get("msg", "validation error")
                errors.setdefault(loc, []).append(msg)
            raise ValidationError(errors) from exc

    def __repr__(self) -> str:
        return f"FormValidator(name={self.name!r}, fields={self.fields!r})"
