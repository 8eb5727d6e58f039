"""
Body behaviour rules.

Checks over the calls and raised exception types a model provider collected
from callable bodies. Declarations without body facts (classes, or models
that do not read source) pass trivially.
"""

from collections.abc import Iterable

from archguard.domain.exceptions import RuleConfigurationError
from archguard.domain.interfaces import RuleInterface
from archguard.domain.models import Declaration, Violation

STANDARD_STREAMS = (
    "print",
    "sys.stdout",
    "sys.stderr",
    "sys.__stdout__",
    "sys.__stderr__",
)

GENERIC_EXCEPTIONS = ("Exception", "BaseException", "RuntimeError")


def _matches(name: str, target: str) -> bool:
    """Segment-wise match: ``sys.stdout`` matches ``sys.stdout.write``."""
    return name == target or name.startswith(target + ".")


def _require_names(rule: str, names: Iterable[str]) -> tuple[str, ...]:
    result = tuple(names)
    if not result or not all(result):
        raise RuleConfigurationError(f"{rule} requires at least one non-empty name")
    return result


class NoForbiddenCallsRule(RuleInterface):
    """
    Callables must not invoke any of the forbidden names.

    The default list forbids access to the standard streams, so code logs
    through a logger instead of printing.
    """

    def __init__(
        self,
        forbidden: Iterable[str] = STANDARD_STREAMS,
        rule_id: str | None = None,
    ):
        self.forbidden = _require_names("NoForbiddenCallsRule", forbidden)
        self.rule_id = rule_id or "no-forbidden-calls"

    def evaluate(self, declaration: Declaration) -> Violation | None:
        hits = sorted(
            call
            for call in declaration.calls
            if any(_matches(call, target) for target in self.forbidden)
        )
        if not hits:
            return None
        return Violation(
            declaration_id=declaration.name,
            rule_id=self.rule_id,
            reason=f"{declaration.simple_name} calls forbidden: {', '.join(hits)}",
        )


class NoGenericExceptionsRule(RuleInterface):
    """Callables must raise specific exception types, not generic ones."""

    def __init__(
        self,
        generic: Iterable[str] = GENERIC_EXCEPTIONS,
        rule_id: str | None = None,
    ):
        self.generic = frozenset(_require_names("NoGenericExceptionsRule", generic))
        self.rule_id = rule_id or "no-generic-exceptions"

    def evaluate(self, declaration: Declaration) -> Violation | None:
        # "builtins.Exception" and "Exception" are the same type
        hits = sorted(
            raised
            for raised in declaration.raises
            if raised.removeprefix("builtins.") in self.generic
        )
        if not hits:
            return None
        return Violation(
            declaration_id=declaration.name,
            rule_id=self.rule_id,
            reason=(
                f"{declaration.simple_name} raises generic exception(s): "
                f"{', '.join(hits)}"
            ),
        )
