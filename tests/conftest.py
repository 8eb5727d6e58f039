"""Shared pytest fixtures for archguard tests."""

from pathlib import Path

import pytest

from archguard.application.evaluator import RuleEvaluator
from archguard.domain.models import Declaration, DeclarationKind
from archguard.rules.static import MarkerArityRule

FIXTURES_DIR = Path(__file__).parent / "fixtures"

MARKER = "location_info_streamer"


def make_method(
    name: str,
    parameter_count: int | None,
    namespace: str = "com.conference.location",
    markers: frozenset[str] = frozenset({MARKER}),
    **extra,
) -> Declaration:
    """Create a declaration for ``namespace.Owner.name``."""
    kind = DeclarationKind.METHOD if parameter_count is not None else DeclarationKind.CLASS
    return Declaration(
        name=f"{namespace}.{name}",
        namespace_path=tuple(namespace.split(".")),
        markers=markers,
        parameter_count=parameter_count,
        kind=extra.pop("kind", kind),
        **extra,
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the sample conference code base."""
    return FIXTURES_DIR


@pytest.fixture
def evaluator() -> RuleEvaluator:
    return RuleEvaluator()


@pytest.fixture
def arity_rule() -> MarkerArityRule:
    """Marked methods must take between 1 and 3 arguments."""
    return MarkerArityRule(MARKER, min_args=1, max_args=3)


@pytest.fixture
def declaration_factory():
    """Factory for method declarations (see make_method)."""
    return make_method
