"""
Rule evaluator.

Runs an ordered list of rules over a declaration snapshot and collects
violations. Violations are data and never stop a run; faults raised by a
rule (e.g. InapplicableTargetError) propagate unmodified and abort it.
"""

import logging
from collections.abc import Iterable, Sequence

from archguard.domain.interfaces import ModelProviderInterface, RuleInterface
from archguard.domain.models import Declaration, EvaluationReport, Violation

logger = logging.getLogger("archguard.evaluator")


class RuleEvaluator:
    """
    Stateless runner evaluating every (rule, declaration) pair exactly once.

    Output order is rule-major, then declaration order, matching the input
    sequences. Instances hold no state across runs, so concurrent runs over
    independent inputs need no synchronization.
    """

    def run(
        self,
        rules: Sequence[RuleInterface],
        declarations: Iterable[Declaration],
    ) -> tuple[Violation, ...]:
        """
        Evaluate all rules against all declarations.

        Args:
            rules: Rules in evaluation order
            declarations: Declaration snapshot (materialized once)

        Returns:
            Violations, rule-major then declaration order

        Raises:
            InapplicableTargetError: If a rule cannot evaluate a declaration
        """
        snapshot = tuple(declarations)
        violations: list[Violation] = []

        for rule in rules:
            found = 0
            for declaration in snapshot:
                violation = rule.evaluate(declaration)
                if violation is not None:
                    violations.append(violation)
                    found += 1
            logger.debug(
                "Rule %s: %d violation(s) over %d declaration(s)",
                rule.rule_id,
                found,
                len(snapshot),
            )

        return tuple(violations)

    def evaluate(
        self,
        rules: Sequence[RuleInterface],
        declarations: Iterable[Declaration],
    ) -> EvaluationReport:
        """Run the rules and wrap the outcome in a pass/fail report."""
        snapshot = tuple(declarations)
        violations = self.run(rules, snapshot)
        report = EvaluationReport(
            violations=violations,
            rules_evaluated=len(rules),
            declarations_evaluated=len(snapshot),
        )
        logger.info(report.summary())
        return report

    def check(
        self,
        rules: Sequence[RuleInterface],
        provider: ModelProviderInterface,
    ) -> EvaluationReport:
        """Materialize a provider's snapshot, then evaluate it."""
        return self.evaluate(rules, provider.declarations())
