"""
Infrastructure layer for the architecture rule engine.

Contains adapters for external concerns (structural models, rule registry).
"""

from archguard.infrastructure.model import (
    InMemoryModelProvider,
    PythonSourceModelProvider,
)
from archguard.infrastructure.registry import RuleRegistry

__all__ = [
    # Structural models
    "InMemoryModelProvider",
    "PythonSourceModelProvider",
    # Registry
    "RuleRegistry",
]
