"""Baseline policies and match helpers for Hexapawn."""

from .policies import FirstLegalPolicy, Policy, RandomPolicy
from .match import EvaluationResult, MatchConfig, evaluate_policies

__all__ = [
    "Policy",
    "RandomPolicy",
    "FirstLegalPolicy",
    "EvaluationResult",
    "MatchConfig",
    "evaluate_policies",
]
