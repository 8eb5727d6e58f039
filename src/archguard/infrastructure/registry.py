"""
Rule Registry with Entry Points Discovery.

Provides dynamic rule loading via Python entry points (archguard.rules group).
External packages can register rules in their pyproject.toml:

    [project.entry-points."archguard.rules"]
    my_rule = "mypackage.rules:MyRule"
"""

import logging
import warnings
from importlib.metadata import entry_points
from typing import Any

from archguard.domain.interfaces import RuleInterface
from archguard.rules.static import (
    ForbiddenNameFragmentRule,
    IndependentSlicesRule,
    LowercaseNamespaceRule,
    MarkerArityRule,
    NoForbiddenCallsRule,
    NoGenericExceptionsRule,
    NoNamespaceDependencyRule,
)

logger = logging.getLogger("archguard.registry")

BUILTIN_RULES: dict[str, type[RuleInterface]] = {
    "marker_arity": MarkerArityRule,
    "forbidden_calls": NoForbiddenCallsRule,
    "generic_exceptions": NoGenericExceptionsRule,
    "forbidden_name_fragment": ForbiddenNameFragmentRule,
    "lowercase_namespace": LowercaseNamespaceRule,
    "namespace_dependency": NoNamespaceDependencyRule,
    "independent_slices": IndependentSlicesRule,
}


class RuleRegistry:
    """
    Registry for RuleInterface implementations, keyed by rule type name.

    Built-in rules are always available; third-party rules are discovered
    via the 'archguard.rules' entry point group.
    Uses lazy loading - entry points are only loaded on first access.

    Example usage:
        rule = RuleRegistry.create("marker_arity", marker="location_info_streamer")
    """

    _rules: dict[str, type[RuleInterface]] = {}
    _loaded: bool = False

    @classmethod
    def _load_entry_points(cls) -> None:
        """Load rules from entry points (lazy, called once)."""
        if cls._loaded:
            return

        for name, rule_class in BUILTIN_RULES.items():
            cls._rules.setdefault(name, rule_class)

        for ep in entry_points(group="archguard.rules"):
            try:
                cls._rules.setdefault(ep.name, ep.load())
            except Exception as e:
                warnings.warn(
                    f"Failed to load rule '{ep.name}' from entry point: {e}",
                    stacklevel=2,
                )
        logger.debug("Rule registry loaded: %s", ", ".join(sorted(cls._rules)))

        cls._loaded = True

    @classmethod
    def register(cls, name: str, rule_class: type[RuleInterface]) -> None:
        """
        Manually register a rule class.

        Useful for testing or project-local rules.

        Args:
            name: Rule type name used in configuration (e.g., "marker_arity")
            rule_class: Class implementing RuleInterface
        """
        cls._rules[name] = rule_class

    @classmethod
    def get(cls, name: str) -> type[RuleInterface]:
        """
        Get a rule class by type name.

        Raises:
            KeyError: If rule type not found
        """
        cls._load_entry_points()
        if name not in cls._rules:
            available = ", ".join(sorted(cls._rules)) or "(none)"
            raise KeyError(f"Rule type '{name}' not found. Available rules: {available}")
        return cls._rules[name]

    @classmethod
    def create(cls, name: str, **options: Any) -> RuleInterface:
        """
        Create a rule instance by type name.

        Args:
            name: Rule type name
            **options: Options passed to the rule constructor

        Raises:
            KeyError: If rule type not found
            TypeError: If options don't match constructor signature
        """
        return cls.get(name)(**options)

    @classmethod
    def available(cls) -> list[str]:
        """List available rule type names."""
        cls._load_entry_points()
        return sorted(cls._rules)

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered rules (useful for testing).

        Also resets the loaded flag so entry points can be reloaded.
        """
        cls._rules.clear()
        cls._loaded = False
