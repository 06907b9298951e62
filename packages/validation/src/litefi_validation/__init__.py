from . import rules
from .exceptions import (
    FieldNotFoundError,
    FormValidationError,
    PresetNotFoundError,
    RuleNotFoundError,
    ValidationError,
)
from .form import FormValidator
from .password import (
    DEFAULT_PASSWORD_POLICY,
    PasswordPolicy,
    PasswordStrength,
    PasswordStrengthMeter,
    PasswordStrengthReport,
    StrengthColor,
    calculate_password_strength,
    get_password_strength_color,
    get_password_strength_label,
    measure_password_strength,
    validate_password,
    validate_password_change,
)
from .phone import (
    NIGERIAN_MOBILE_PREFIXES,
    PhoneClassification,
    PhoneNumberInfo,
    format_phone_number,
    get_phone_number_info,
    is_nigerian_number,
    validate_phone_number,
)
from .presets import FormPreset, create_form, get_preset
from .registry import RuleRegistry, build_default_registry
from .result import ValidationResult
from .rules import FieldRule, RuleName

__all__ = [
    # Form engine
    "FormValidator",
    "ValidationResult",
    # Rules
    "rules",
    "FieldRule",
    "RuleName",
    "RuleRegistry",
    "build_default_registry",
    # Presets
    "FormPreset",
    "create_form",
    "get_preset",
    # Password policy
    "PasswordPolicy",
    "DEFAULT_PASSWORD_POLICY",
    "PasswordStrength",
    "StrengthColor",
    "PasswordStrengthReport",
    "PasswordStrengthMeter",
    "validate_password",
    "calculate_password_strength",
    "get_password_strength_color",
    "get_password_strength_label",
    "measure_password_strength",
    "validate_password_change",
    # Phone classification
    "NIGERIAN_MOBILE_PREFIXES",
    "PhoneClassification",
    "PhoneNumberInfo",
    "is_nigerian_number",
    "format_phone_number",
    "validate_phone_number",
    "get_phone_number_info",
    # Exceptions
    "FormValidationError",
    "ValidationError",
    "FieldNotFoundError",
    "RuleNotFoundError",
    "PresetNotFoundError",
]
