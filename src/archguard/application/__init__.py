"""
Application layer for the architecture rule engine.

Orchestrates rule evaluation over a structural model snapshot.
"""

from archguard.application.evaluator import RuleEvaluator

__all__ = [
    "RuleEvaluator",
]
