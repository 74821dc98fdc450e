"""
Backend evaluation module for yardcalc.

This module reduces postfix token sequences to a numeric result.
"""

from .evaluator import Evaluator, EvaluationError, evaluate

__all__ = [
    "Evaluator",
    "EvaluationError",
    "evaluate",
]
