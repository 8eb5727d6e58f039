"""
Dependency rules.

Checks over the imports a model provider collected for each declaration.
Patterns are namespace prefixes (``conference.location``) or ``..``-anchored
patterns matched anywhere (``..speakers``). A declaration is located by its
full dotted name, so class names such as ``..LocalPresentation`` select too.
"""

from archguard.domain.interfaces import RuleInterface
from archguard.domain.models import Declaration, Violation
from archguard.rules.namespaces import NamespacePattern, NamespacePrefix


def _segments(dotted: str) -> tuple[str, ...]:
    return tuple(dotted.split("."))


class NoNamespaceDependencyRule(RuleInterface):
    """
    Declarations matching ``source`` must not import anything matching ``target``.

    Example:
        # Speakers may give talks in different locations
        NoNamespaceDependencyRule("..location", "..speakers")
    """

    def __init__(
        self,
        source: NamespacePrefix,
        target: NamespacePrefix,
        rule_id: str | None = None,
    ):
        self.source = NamespacePattern(source)
        self.target = NamespacePattern(target)
        self.rule_id = rule_id or f"no-dependency:{self.source.text}->{self.target.text}"

    def evaluate(self, declaration: Declaration) -> Violation | None:
        if not self.source.matches(_segments(declaration.name)):
            return None
        hits = sorted(i for i in declaration.imports if self.target.matches(_segments(i)))
        if not hits:
            return None
        return Violation(
            declaration_id=declaration.name,
            rule_id=self.rule_id,
            reason=(
                f"{declaration.simple_name} in '{self.source.text}' depends on "
                f"'{self.target.text}': {', '.join(hits)}"
            ),
        )


class IndependentSlicesRule(RuleInterface):
    """
    Sub-packages directly below ``parent`` must not import each other.

    With ``parent="..tickets"``, code in ``shop.tickets.vip`` may import
    ``shop.tickets.vip.*`` and anything outside ``tickets``, but not
    ``shop.tickets.standard``.
    """

    def __init__(self, parent: NamespacePrefix, rule_id: str | None = None):
        self.parent = NamespacePattern(parent)
        self.rule_id = rule_id or f"independent-slices:{self.parent.text}"

    def _slice_of(self, segments: tuple[str, ...]) -> str | None:
        end = self.parent.find(segments)
        if end is None or end >= len(segments):
            return None
        return segments[end]

    def evaluate(self, declaration: Declaration) -> Violation | None:
        own = self._slice_of(declaration.namespace_path)
        if own is None:
            return None
        hits = []
        for imported in sorted(declaration.imports):
            other = self._slice_of(_segments(imported))
            if other is not None and other != own:
                hits.append(imported)
        if not hits:
            return None
        return Violation(
            declaration_id=declaration.name,
            rule_id=self.rule_id,
            reason=(
                f"{declaration.simple_name} in slice '{own}' depends on other "
                f"slice(s): {', '.join(hits)}"
            ),
        )
