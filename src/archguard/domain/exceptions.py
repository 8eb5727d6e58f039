"""
Domain exceptions for the architecture rule engine.

Violations are data and are never raised by rules or the evaluator. The
exceptions here are faults: a rule or model that is set up wrongly.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from archguard.domain.models import Violation


class InapplicableTargetError(Exception):
    """
    Raised when a rule is applied to a declaration shape it cannot evaluate.

    For example, an arity rule evaluated against a marked declaration that is
    not callable. This signals a rule/model mismatch the caller must fix, not
    a defect in the analysed code base.
    """

    def __init__(self, rule_id: str, declaration_id: str, reason: str):
        """
        Args:
            rule_id: Identity of the rule that could not evaluate
            declaration_id: Identity of the offending declaration
            reason: Why the declaration is out of the rule's reach
        """
        super().__init__(
            f"Rule '{rule_id}' cannot evaluate '{declaration_id}': {reason}"
        )
        self.rule_id = rule_id
        self.declaration_id = declaration_id
        self.reason = reason


class RuleConfigurationError(ValueError):
    """Raised when a rule cannot be constructed from the given settings."""


class ModelLoadError(Exception):
    """Raised when a model provider cannot read or parse a source file."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot load structural model from {path}: {reason}")
        self.path = path
        self.reason = reason


class ArchitectureViolationError(AssertionError):
    """
    Raised by ``EvaluationReport.assert_passes()`` when violations exist.

    Subclasses AssertionError so test runners report it as a failed check.
    """

    def __init__(self, violations: tuple["Violation", ...]):
        lines = "\n".join(f"  - {v}" for v in violations)
        super().__init__(
            f"{len(violations)} architecture violation(s) found:\n{lines}"
        )
        self.violations = violations
