"""
Domain models for the architecture rule engine.

Pure data structures describing a code base snapshot and the outcome of
evaluating rules against it. All models are immutable (frozen dataclasses);
rules and evaluators never mutate them.
"""

from dataclasses import dataclass
from enum import Enum

# =============================================================================
# STRUCTURAL MODEL
# =============================================================================


class DeclarationKind(Enum):
    """Shape of a declaration in the structural model."""

    CLASS = "class"
    FUNCTION = "function"  # Module-level callable
    METHOD = "method"  # Callable defined in a class body


@dataclass(frozen=True)
class Declaration:
    """
    Immutable snapshot of a named structural unit in a code base.

    Produced by a model provider at evaluation time. ``parameter_count`` is
    only defined for callables; it is ``None`` for classes.
    """

    # Identity
    name: str  # Fully-qualified, e.g. "conference.location.canada.Canada.send"
    namespace_path: tuple[str, ...]  # Package/module segments

    # Selection
    markers: frozenset[str] = frozenset()

    # Shape
    parameter_count: int | None = None
    kind: DeclarationKind = DeclarationKind.METHOD

    # Body facts (collected by providers that read source)
    calls: frozenset[str] = frozenset()
    raises: frozenset[str] = frozenset()
    imports: frozenset[str] = frozenset()  # Dotted names depended on
    source: str | None = None  # "path:line" when known

    @property
    def simple_name(self) -> str:
        return self.name.rsplit(".", 1)[-1]

    @property
    def namespace(self) -> str:
        return ".".join(self.namespace_path)

    @property
    def is_callable(self) -> bool:
        return self.parameter_count is not None

    def has_marker(self, marker: str) -> bool:
        return marker in self.markers


# =============================================================================
# EVALUATION OUTCOME
# =============================================================================


@dataclass(frozen=True)
class Violation:
    """A declaration that failed a rule's structural check."""

    declaration_id: str
    rule_id: str
    reason: str

    def __str__(self) -> str:
        return f"{self.declaration_id} [{self.rule_id}]: {self.reason}"


@dataclass(frozen=True)
class EvaluationReport:
    """Pass/fail outcome of one evaluation run."""

    violations: tuple[Violation, ...] = ()
    rules_evaluated: int = 0
    declarations_evaluated: int = 0

    @property
    def passed(self) -> bool:
        return not self.violations

    def by_rule(self) -> dict[str, tuple[Violation, ...]]:
        """Group violations by rule id, keeping first-seen rule order."""
        grouped: dict[str, list[Violation]] = {}
        for violation in self.violations:
            grouped.setdefault(violation.rule_id, []).append(violation)
        return {rule_id: tuple(items) for rule_id, items in grouped.items()}

    def summary(self) -> str:
        status = "PASSED" if self.passed else "FAILED"
        return (
            f"{status}: {len(self.violations)} violation(s) from "
            f"{self.rules_evaluated} rule(s) over "
            f"{self.declarations_evaluated} declaration(s)"
        )

    def assert_passes(self) -> None:
        """
        Raise if any violation was reported.

        Intended for test runners; the evaluator itself never raises on
        violations.

        Raises:
            ArchitectureViolationError: If the report contains violations
        """
        if self.violations:
            from archguard.domain.exceptions import ArchitectureViolationError

            raise ArchitectureViolationError(self.violations)
