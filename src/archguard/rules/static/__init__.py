"""
Static rules - Pure checks over declaration snapshots.

These rules are deterministic, hold no state across declarations and never
read source code themselves.
"""

from archguard.rules.static.arity import MarkerArityRule
from archguard.rules.static.behaviour import (
    GENERIC_EXCEPTIONS,
    STANDARD_STREAMS,
    NoForbiddenCallsRule,
    NoGenericExceptionsRule,
)
from archguard.rules.static.dependencies import (
    IndependentSlicesRule,
    NoNamespaceDependencyRule,
)
from archguard.rules.static.naming import ForbiddenNameFragmentRule, LowercaseNamespaceRule

__all__ = [
    "MarkerArityRule",
    "NoForbiddenCallsRule",
    "NoGenericExceptionsRule",
    "ForbiddenNameFragmentRule",
    "LowercaseNamespaceRule",
    "NoNamespaceDependencyRule",
    "IndependentSlicesRule",
    "STANDARD_STREAMS",
    "GENERIC_EXCEPTIONS",
]
