"""
In-memory structural model.

Useful for testing and for callers that build declarations themselves.
"""

from collections.abc import Iterable

from archguard.domain.interfaces import ModelProviderInterface
from archguard.domain.models import Declaration


class InMemoryModelProvider(ModelProviderInterface):
    """Snapshot over declarations supplied at construction."""

    def __init__(self, declarations: Iterable[Declaration] = ()) -> None:
        self._declarations = tuple(declarations)

    def declarations(self) -> tuple[Declaration, ...]:
        return self._declarations
