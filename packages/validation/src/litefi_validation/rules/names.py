from enum import Enum


class RuleName(str, Enum):
    """Names of the built-in field rules."""

    # Presence
    REQUIRED = "required"
    MIN_LENGTH = "min_length"
    NOT_EMPTY = "not_empty"
    HAS_VALUE = "has_value"
    OPTIONAL = "optional"

    # Contact details
    EMAIL = "email"
    OPTIONAL_EMAIL = "optional_email"
    PHONE = "phone"

    # Identity numbers
    BVN = "bvn"
    NIN = "nin"

    # Calendar
    DATE = "date"

    # Generic
    PATTERN = "pattern"
    CUSTOM = "custom"

    # Logical composition
    ALL_OF = "all_of"
    ANY_OF = "any_of"
    NOT = "not"
