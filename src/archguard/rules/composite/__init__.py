"""
Composite rules - Rule composition patterns.

These rules wrap other rules and decide whether to delegate.
"""

from archguard.rules.composite.exclusion import NamespaceExclusion, exclude_namespaces

__all__ = [
    "NamespaceExclusion",
    "exclude_namespaces",
]
