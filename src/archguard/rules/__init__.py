"""
Rules for the architecture rule engine.

Rules are pure predicates that return a Violation (fail) or None (pass) for
one declaration. They can be wrapped with NamespaceExclusion to skip parts of
the code base.

Organization by validation profile:
- static/: Pure checks over declaration snapshots
- namespaces: Namespace prefixes and patterns shared by rules
- composite/: Rule composition patterns
"""

from archguard.rules.composite import NamespaceExclusion, exclude_namespaces
from archguard.rules.static import (
    ForbiddenNameFragmentRule,
    IndependentSlicesRule,
    LowercaseNamespaceRule,
    MarkerArityRule,
    NoForbiddenCallsRule,
    NoGenericExceptionsRule,
    NoNamespaceDependencyRule,
)

__all__ = [
    # Static rules
    "MarkerArityRule",
    "NoForbiddenCallsRule",
    "NoGenericExceptionsRule",
    "ForbiddenNameFragmentRule",
    "LowercaseNamespaceRule",
    "NoNamespaceDependencyRule",
    "IndependentSlicesRule",
    # Composition patterns
    "NamespaceExclusion",
    "exclude_namespaces",
]
