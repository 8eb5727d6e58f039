"""
ArchGuard: Architecture rule engine over a structural code model.

Rules are pure predicates over declarations (classes, functions, methods)
supplied by a structural model provider. Violations are collected as data;
misconfigured rules fail fast.

Example:
    from archguard import MarkerArityRule, NamespaceExclusion, RuleEvaluator
    from archguard.infrastructure import PythonSourceModelProvider

    provider = PythonSourceModelProvider("src", package="conference")
    rule = NamespaceExclusion(
        MarkerArityRule("location_info_streamer", min_args=1, max_args=3),
        excluded_prefixes={"conference.logging"},
    )
    report = RuleEvaluator().check([rule], provider)
    report.assert_passes()
"""

# Application layer (orchestration)
from archguard.application.evaluator import RuleEvaluator

# Domain exceptions
from archguard.domain.exceptions import (
    ArchitectureViolationError,
    InapplicableTargetError,
    ModelLoadError,
    RuleConfigurationError,
)

# Domain interfaces (for type hints and custom implementations)
from archguard.domain.interfaces import ModelProviderInterface, RuleInterface

# Domain models
from archguard.domain.models import (
    Declaration,
    DeclarationKind,
    EvaluationReport,
    Violation,
)

# Rules (commonly composed)
from archguard.rules import (
    ForbiddenNameFragmentRule,
    IndependentSlicesRule,
    LowercaseNamespaceRule,
    MarkerArityRule,
    NamespaceExclusion,
    NoForbiddenCallsRule,
    NoGenericExceptionsRule,
    NoNamespaceDependencyRule,
    exclude_namespaces,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain models
    "Declaration",
    "DeclarationKind",
    "Violation",
    "EvaluationReport",
    # Domain interfaces
    "RuleInterface",
    "ModelProviderInterface",
    # Domain exceptions
    "InapplicableTargetError",
    "RuleConfigurationError",
    "ModelLoadError",
    "ArchitectureViolationError",
    # Application layer
    "RuleEvaluator",
    # Rules
    "MarkerArityRule",
    "NoForbiddenCallsRule",
    "NoGenericExceptionsRule",
    "ForbiddenNameFragmentRule",
    "LowercaseNamespaceRule",
    "NoNamespaceDependencyRule",
    "IndependentSlicesRule",
    "NamespaceExclusion",
    "exclude_namespaces",
]
