"""
Domain layer for the architecture rule engine.

Contains the structural model, rule ports and faults, with no external
dependencies.
"""

from archguard.domain.exceptions import (
    ArchitectureViolationError,
    InapplicableTargetError,
    ModelLoadError,
    RuleConfigurationError,
)
from archguard.domain.interfaces import (
    ModelProviderInterface,
    RuleInterface,
)
from archguard.domain.models import (
    Declaration,
    DeclarationKind,
    EvaluationReport,
    Violation,
)

__all__ = [
    # Models
    "Declaration",
    "DeclarationKind",
    "Violation",
    "EvaluationReport",
    # Interfaces
    "RuleInterface",
    "ModelProviderInterface",
    # Exceptions
    "InapplicableTargetError",
    "RuleConfigurationError",
    "ModelLoadError",
    "ArchitectureViolationError",
]
