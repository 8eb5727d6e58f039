"""
Namespace prefixes and patterns shared by rules.

A prefix is a dotted string (``"conference.logging"``) or a segment tuple
and matches segment-wise from the start of a namespace path. A pattern may
also start with ``..`` (``"..speakers"``), in which case its segments may
appear contiguously anywhere in the path.
"""

from collections.abc import Iterable

from archguard.domain.exceptions import RuleConfigurationError

NamespacePrefix = str | tuple[str, ...]

ANYWHERE = ".."


def normalize_prefix(prefix: NamespacePrefix) -> tuple[str, ...]:
    """
    Turn a dotted string or segment sequence into a segment tuple.

    Raises:
        RuleConfigurationError: If the prefix is empty or has blank segments
    """
    segments = tuple(prefix.split(".")) if isinstance(prefix, str) else tuple(prefix)
    if not segments or not all(
        isinstance(segment, str) and segment.strip() for segment in segments
    ):
        raise RuleConfigurationError(f"Invalid namespace prefix: {prefix!r}")
    return segments


def normalize_prefixes(prefixes: Iterable[NamespacePrefix]) -> frozenset[tuple[str, ...]]:
    """
    Normalize a collection of prefixes.

    A bare string is rejected rather than iterated character by character.

    Raises:
        RuleConfigurationError: If ``prefixes`` is a string or holds an invalid prefix
    """
    if isinstance(prefixes, str):
        raise RuleConfigurationError(
            f"Expected a collection of namespace prefixes, got the string {prefixes!r}; "
            f"use [{prefixes!r}]"
        )
    return frozenset(normalize_prefix(prefix) for prefix in prefixes)


def has_prefix(path: tuple[str, ...], prefix: tuple[str, ...]) -> bool:
    """Segment-wise prefix test: ``a.b.logging`` does not prefix ``a.b.loggingutils``."""
    return path[: len(prefix)] == prefix


class NamespacePattern:
    """
    Compiled namespace prefix or ``..``-anchored pattern.

    Example:
        NamespacePattern("..location").find(("conference", "location", "canada"))
        # -> 2, the index just past the matched segments
    """

    def __init__(self, pattern: NamespacePrefix):
        self.anywhere = isinstance(pattern, str) and pattern.startswith(ANYWHERE)
        self.segments = normalize_prefix(
            pattern[len(ANYWHERE) :] if self.anywhere else pattern
        )
        self.text = pattern if isinstance(pattern, str) else ".".join(pattern)

    def find(self, path: tuple[str, ...]) -> int | None:
        """Index just past the first match in ``path``, or None."""
        size = len(self.segments)
        starts = range(len(path) - size + 1) if self.anywhere else range(1)
        for start in starts:
            if path[start : start + size] == self.segments:
                return start + size
        return None

    def matches(self, path: tuple[str, ...]) -> bool:
        return self.find(path) is not None

    def __repr__(self) -> str:
        return f"NamespacePattern({self.text!r})"
