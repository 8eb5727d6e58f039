"""
Marker arity rule.

Pure rule over the structural model: callables carrying a marker must
declare a bounded number of parameters.
"""

from archguard.domain.exceptions import InapplicableTargetError, RuleConfigurationError
from archguard.domain.interfaces import RuleInterface
from archguard.domain.models import Declaration, Violation


class MarkerArityRule(RuleInterface):
    """
    Declarations tagged with ``marker`` must take ``min_args..max_args`` parameters.

    Bounds are inclusive on both ends. Declarations without the marker are
    out of scope and always pass, whatever their shape.

    Example:
        rule = MarkerArityRule("location_info_streamer", min_args=1, max_args=3)
    """

    def __init__(
        self,
        marker: str,
        min_args: int = 1,
        max_args: int = 3,
        rule_id: str | None = None,
    ):
        """
        Args:
            marker: Marker name selecting the declarations to check
            min_args: Smallest allowed parameter count (inclusive)
            max_args: Largest allowed parameter count (inclusive)
            rule_id: Identity used in violations (derived when omitted)

        Raises:
            RuleConfigurationError: If the marker is empty or the bounds are invalid
        """
        if not marker:
            raise RuleConfigurationError("MarkerArityRule requires a marker name")
        if min_args < 0 or max_args < 0:
            raise RuleConfigurationError(
                f"Arity bounds must be non-negative, got [{min_args},{max_args}]"
            )
        if min_args > max_args:
            raise RuleConfigurationError(
                f"min_args ({min_args}) must not exceed max_args ({max_args})"
            )
        self.marker = marker
        self.min_args = min_args
        self.max_args = max_args
        self.rule_id = rule_id or f"marker-arity:{marker}[{min_args},{max_args}]"

    def evaluate(self, declaration: Declaration) -> Violation | None:
        if not declaration.has_marker(self.marker):
            return None

        count = declaration.parameter_count
        if count is None:
            raise InapplicableTargetError(
                self.rule_id,
                declaration.name,
                f"@{self.marker} is attached to a non-callable "
                f"{declaration.kind.value}; parameter count is undefined",
            )

        if self.min_args <= count <= self.max_args:
            return None

        return Violation(
            declaration_id=declaration.name,
            rule_id=self.rule_id,
            reason=(
                f"{declaration.simple_name} declares {count} parameter(s) but "
                f"declarations marked @{self.marker} must take between "
                f"{self.min_args} and {self.max_args}: "
                f"{count} not in [{self.min_args},{self.max_args}]"
            ),
        )

    def __repr__(self) -> str:
        return (
            f"MarkerArityRule(marker={self.marker!r}, "
            f"min_args={self.min_args}, max_args={self.max_args})"
        )
