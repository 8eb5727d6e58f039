"""Naming convention rules."""

from collections.abc import Iterable

from archguard.domain.exceptions import RuleConfigurationError
from archguard.domain.interfaces import RuleInterface
from archguard.domain.models import Declaration, DeclarationKind, Violation


class ForbiddenNameFragmentRule(RuleInterface):
    """
    Declarations of the given kinds must not contain ``fragment`` in their name.

    Example:
        # Abstract types should not be called "SomethingInterface"
        ForbiddenNameFragmentRule("Interface")
    """

    def __init__(
        self,
        fragment: str,
        kinds: Iterable[DeclarationKind | str] = (DeclarationKind.CLASS,),
        rule_id: str | None = None,
    ):
        if not fragment:
            raise RuleConfigurationError("ForbiddenNameFragmentRule requires a fragment")
        try:
            self.kinds = frozenset(DeclarationKind(kind) for kind in kinds)
        except ValueError as e:
            raise RuleConfigurationError(f"Unknown declaration kind: {e}") from e
        self.fragment = fragment
        self.rule_id = rule_id or f"forbidden-name-fragment:{fragment}"

    def evaluate(self, declaration: Declaration) -> Violation | None:
        if declaration.kind not in self.kinds:
            return None
        if self.fragment not in declaration.simple_name:
            return None
        return Violation(
            declaration_id=declaration.name,
            rule_id=self.rule_id,
            reason=(
                f"{declaration.kind.value} name '{declaration.simple_name}' "
                f"must not contain '{self.fragment}'"
            ),
        )


class LowercaseNamespaceRule(RuleInterface):
    """All namespace segments must be lower case."""

    def __init__(self, rule_id: str | None = None):
        self.rule_id = rule_id or "lowercase-namespace"

    def evaluate(self, declaration: Declaration) -> Violation | None:
        offending = [s for s in declaration.namespace_path if s != s.lower()]
        if not offending:
            return None
        return Violation(
            declaration_id=declaration.name,
            rule_id=self.rule_id,
            reason=(
                f"namespace '{declaration.namespace}' has non-lower-case "
                f"segment(s): {', '.join(offending)}"
            ),
        )
