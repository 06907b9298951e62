"""
Field rule strategy interface and logical composition.

A rule is a pure predicate over one raw field value. Rules are callable,
so a ruleset may mix ``FieldRule`` instances and plain functions.
"""

from __future__ import annotations

import copy
import re
from abc import ABC, abstractmethod
from typing import Any, Callable, Union

from .names import RuleName

Predicate = Callable[[Any], bool]
RuleLike = Union["FieldRule", Predicate]

DEFAULT_MESSAGE = "Invalid value"


class FieldRule(ABC):
    """
    Strategy interface for validating a single field value.

    Subclasses implement ``name`` and ``test``. ``test`` must be total:
    any input yields a boolean, never an exception.
    """

    default_message = DEFAULT_MESSAGE

    def __init__(self, message: str | None = None) -> None:
        self._message = message

    @property
    @abstractmethod
    def name(self) -> RuleName:
        """The rule this strategy implements."""
        ...

    @abstractmethod
    def test(self, value: Any) -> bool:
        """Return True if *value* satisfies the rule."""
        ...

    @property
    def message(self) -> str:
        """Human-readable message shown when the rule fails."""
        if self._message is not None:
            return self._message
        return self._default_message()

    def _default_message(self) -> str:
        return self.default_message

    def describe_failure(self, value: Any) -> str:
        """Message for a value that failed this rule."""
        return self.message

    def with_message(self, message: str) -> FieldRule:
        """Return a copy of this rule with a different failure message."""
        clone = copy.copy(self)
        clone._message = message
        return clone

    def __call__(self, value: Any) -> bool:
        return self.test(value)

    def __and__(self, other: RuleLike) -> AllOfRule:
        return AllOfRule(self, other)

    def __or__(self, other: RuleLike) -> AnyOfRule:
        return AnyOfRule(self, other)

    def __invert__(self) -> NotRule:
        return NotRule(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


def as_rule(rule: RuleLike) -> FieldRule:
    """Wrap a plain predicate in a ``CallableRule``; pass rules through."""
    if isinstance(rule, FieldRule):
        return rule
    return CallableRule(rule)


def describe_failure(rule: RuleLike, value: Any) -> str:
    if isinstance(rule, FieldRule):
        return rule.describe_failure(value)
    return DEFAULT_MESSAGE


class CallableRule(FieldRule):
    """Adapts a plain ``value -> bool`` function."""

    def __init__(self, func: Predicate, message: str | None = None) -> None:
        super().__init__(message)
        self.func = func

    @property
    def name(self) -> RuleName:
        return RuleName.CUSTOM

    def test(self, value: Any) -> bool:
        return bool(self.func(value))

    def __repr__(self) -> str:
        return f"CallableRule({getattr(self.func, '__name__', self.func)!r})"


class OptionalRule(FieldRule):
    """Accepts anything. Marks a field as optional but still tracked."""

    default_message = ""

    @property
    def name(self) -> RuleName:
        return RuleName.OPTIONAL

    def test(self, value: Any) -> bool:
        return True


class PatternRule(FieldRule):
    """Full-match of the value against a regular expression."""

    default_message = "Invalid format"

    def __init__(self, pattern: str | re.Pattern[str], message: str | None = None) -> None:
        super().__init__(message)
        self.pattern = re.compile(pattern) if isinstance(pattern, str) else pattern

    @property
    def name(self) -> RuleName:
        return RuleName.PATTERN

    def test(self, value: Any) -> bool:
        if not isinstance(value, str):
            return False
        return self.pattern.fullmatch(value) is not None

    def __repr__(self) -> str:
        return f"PatternRule({self.pattern.pattern!r})"


class AllOfRule(FieldRule):
    """Logical AND of several rules."""

    def __init__(self, *rules: RuleLike, message: str | None = None) -> None:
        super().__init__(message)
        self.rules = tuple(as_rule(rule) for rule in rules)

    @property
    def name(self) -> RuleName:
        return RuleName.ALL_OF

    def test(self, value: Any) -> bool:
        return all(rule.test(value) for rule in self.rules)

    def _default_message(self) -> str:
        return self.rules[0].message if self.rules else DEFAULT_MESSAGE

    def describe_failure(self, value: Any) -> str:
        if self._message is not None:
            return self._message
        for rule in self.rules:
            if not rule.test(value):
                return rule.describe_failure(value)
        return self.message

    def __repr__(self) -> str:
        return f"AllOfRule{self.rules!r}"


class AnyOfRule(FieldRule):
    """Logical OR of several rules."""

    def __init__(self, *rules: RuleLike, message: str | None = None) -> None:
        super().__init__(message)
        self.rules = tuple(as_rule(rule) for rule in rules)

    @property
    def name(self) -> RuleName:
        return RuleName.ANY_OF

    def test(self, value: Any) -> bool:
        return any(rule.test(value) for rule in self.rules)

    def _default_message(self) -> str:
        return self.rules[-1].message if self.rules else DEFAULT_MESSAGE

    def __repr__(self) -> str:
        return f"AnyOfRule{self.rules!r}"


class NotRule(FieldRule):
    """Logical NOT of a rule."""

    def __init__(self, rule: RuleLike, message: str | None = None) -> None:
        super().__init__(message)
        self.rule = as_rule(rule)

    @property
    def name(self) -> RuleName:
        return RuleName.NOT

    def test(self, value: Any) -> bool:
        return not self.rule.test(value)

    def __repr__(self) -> str:
        return f"NotRule({self.rule!r})"

