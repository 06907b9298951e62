"""
Named rule lookup.

Maps a ``RuleName`` to a factory producing a ``FieldRule``, so rulesets
can be described as plain data::

    registry = build_default_registry()
    ruleset = registry.build_ruleset({
        "first_name": ("min_length", 2),
        "email": "email",
        "nin": RuleName.NIN,
    })

New rules are added with ``register()``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from .exceptions import RuleNotFoundError
from .rules import (
    BvnRule,
    DateRule,
    EmailRule,
    FieldRule,
    HasValueRule,
    MinLengthRule,
    NinRule,
    NotEmptyRule,
    OptionalEmailRule,
    OptionalRule,
    PatternRule,
    PhoneRule,
    RequiredRule,
    RuleName,
    as_rule,
)

logger = logging.getLogger("litefi.validation.registry")

RuleFactory = Callable[..., FieldRule]
RuleSpec = Any


class RuleRegistry:
    """
    Registry of rule factories keyed by ``RuleName``.

    Usage::

        registry = RuleRegistry()
        registry.register(RuleName.EMAIL, EmailRule)

        rule = registry.create("email")
    """

    def __init__(self) -> None:
        self._factories: dict[RuleName, RuleFactory] = {}

    # -- registration --------------------------------------------------------

    def register(self, name: RuleName, factory: RuleFactory) -> None:
        """Register a factory (usually a ``FieldRule`` subclass) for *name*."""
        if name in self._factories:
            logger.debug("Replacing rule factory for %s", name.value)
        self._factories[name] = factory

    def register_all(self, factories: Mapping[RuleName, RuleFactory]) -> None:
        for name, factory in factories.items():
            self.register(name, factory)

    def unregister(self, name: RuleName) -> None:
        self._factories.pop(name, None)

    # -- look-up -------------------------------------------------------------

    def _resolve_name(self, name: RuleName | str) -> RuleName:
        valid = [rule.value for rule in self._factories]
        try:
            resolved = RuleName(name)
        except ValueError:
            raise RuleNotFoundError(str(name), valid) from None
        if resolved not in self._factories:
            raise RuleNotFoundError(resolved.value, valid)
        return resolved

    def get(self, name: RuleName | str) -> RuleFactory | None:
        """Return the registered factory or ``None``."""
        try:
            return self._factories.get(RuleName(name))
        except ValueError:
            return None

    def has(self, name: RuleName | str) -> bool:
        return self.get(name) is not None

    @property
    def supported_rules(self) -> set[RuleName]:
        return set(self._factories.keys())

    # -- construction --------------------------------------------------------

    def create(self, name: RuleName | str, *args: Any, **kwargs: Any) -> FieldRule:
        """
        Build a rule by name.

        Raises:
            RuleNotFoundError: If no factory is registered for *name*.
        """
        factory = self._factories[self._resolve_name(name)]
        return factory(*args, **kwargs)

    def build_rule(self, spec: RuleSpec) -> FieldRule:
        """
        Turn one declarative rule spec into a rule.

        Accepted forms: a ``FieldRule``, a plain predicate, a rule name,
        or a ``(name, *args)`` tuple for parameterised rules.
        """
        if isinstance(spec, FieldRule):
            return spec
        if isinstance(spec, (str, RuleName)):
            return self.create(spec)
        if isinstance(spec, tuple) and spec:
            name, *args = spec
            return self.create(name, *args)
        if callable(spec):
            return as_rule(spec)
        raise TypeError(f"Cannot build a validation rule from {spec!r}")

    def build_ruleset(self, specs: Mapping[str, RuleSpec]) -> dict[str, FieldRule]:
        """Build a ``{field: rule}`` ruleset from declarative specs."""
        return {field: self.build_rule(spec) for field, spec in specs.items()}


def build_default_registry() -> RuleRegistry:
    """
    Create a registry with all built-in rules.

    Each call returns a fresh instance, so callers may register their own
    rules without affecting other registries.
    """
    registry = RuleRegistry()
    registry.register_all(
        {
            # Presence
            RuleName.REQUIRED: RequiredRule,
            RuleName.MIN_LENGTH: MinLengthRule,
            RuleName.NOT_EMPTY: NotEmptyRule,
            RuleName.HAS_VALUE: HasValueRule,
            RuleName.OPTIONAL: OptionalRule,
            # Contact
            RuleName.EMAIL: EmailRule,
            RuleName.OPTIONAL_EMAIL: OptionalEmailRule,
            RuleName.PHONE: PhoneRule,
            # Identity
            RuleName.BVN: BvnRule,
            RuleName.NIN: NinRule,
            # Calendar
            RuleName.DATE: DateRule,
            # Generic
            RuleName.PATTERN: PatternRule,
        }
    )
    return registry
