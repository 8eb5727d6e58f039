"""
Namespace exclusion - Decorator pattern over any rule.

Skips declarations located under excluded namespaces without invoking the
wrapped rule at all, so its side effects and faults never surface there.
"""

from collections.abc import Iterable

from archguard.domain.interfaces import RuleInterface
from archguard.domain.models import Declaration, Violation
from archguard.rules.namespaces import NamespacePrefix, has_prefix, normalize_prefixes


class NamespaceExclusion(RuleInterface):
    """
    Evaluates the wrapped rule only outside the excluded namespaces.

    Wrapping an already-wrapped rule excludes the union of both prefix sets.

    Example:
        rule = NamespaceExclusion(
            MarkerArityRule("location_info_streamer"),
            excluded_prefixes={"conference.logging"},
        )
    """

    def __init__(self, rule: RuleInterface, excluded_prefixes: Iterable[NamespacePrefix]):
        """
        Args:
            rule: Rule to delegate to for non-excluded declarations
            excluded_prefixes: Dotted strings or segment tuples
        """
        self.rule = rule
        self.excluded_prefixes = normalize_prefixes(excluded_prefixes)
        self.rule_id = rule.rule_id

    def is_excluded(self, declaration: Declaration) -> bool:
        return any(
            has_prefix(declaration.namespace_path, prefix)
            for prefix in self.excluded_prefixes
        )

    def evaluate(self, declaration: Declaration) -> Violation | None:
        if self.is_excluded(declaration):
            return None  # Short-circuit: the wrapped rule never runs
        return self.rule.evaluate(declaration)

    def __repr__(self) -> str:
        prefixes = sorted(".".join(p) for p in self.excluded_prefixes)
        return f"NamespaceExclusion({self.rule!r}, excluded_prefixes={prefixes})"


def exclude_namespaces(
    excluded_prefixes: Iterable[NamespacePrefix], *rules: RuleInterface
) -> list[RuleInterface]:
    """Wrap each rule independently with the same exclusion configuration."""
    prefixes = normalize_prefixes(excluded_prefixes)
    return [NamespaceExclusion(rule, prefixes) for rule in rules]
