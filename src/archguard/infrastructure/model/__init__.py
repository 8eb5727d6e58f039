"""
Structural model providers.

Implementations of ModelProviderInterface for different sources.
"""

from archguard.infrastructure.model.memory import InMemoryModelProvider
from archguard.infrastructure.model.python_source import PythonSourceModelProvider

__all__ = [
    "InMemoryModelProvider",
    "PythonSourceModelProvider",
]
