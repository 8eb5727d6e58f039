"""
Domain interfaces (Ports) for the architecture rule engine.

These abstract base classes define the contracts that rules and structural
model providers must satisfy. They have no external dependencies.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archguard.domain.models import Declaration, Violation


class RuleInterface(ABC):
    """
    Port for a structural rule.

    Rules are pure predicates over a single declaration: they return a
    Violation when the declaration breaks the rule and None otherwise.
    A rule that cannot evaluate a declaration's shape raises
    InapplicableTargetError instead of reporting a violation.
    """

    rule_id: str

    @abstractmethod
    def evaluate(self, declaration: "Declaration") -> "Violation | None":
        """
        Evaluate one declaration.

        Args:
            declaration: Immutable declaration snapshot

        Returns:
            A Violation, or None when the rule passes or does not apply

        Raises:
            InapplicableTargetError: If the declaration's shape is unsupported
        """
        pass


class ModelProviderInterface(ABC):
    """
    Port for the structural model of a code base.

    Implementations read a code base (or hold declarations directly) and
    expose an already-materialized, read-only snapshot.
    """

    @abstractmethod
    def declarations(self) -> tuple["Declaration", ...]:
        """
        Materialize the declarations of the code base.

        Returns:
            Declarations in a deterministic order

        Raises:
            ModelLoadError: If the code base cannot be read
        """
        pass
