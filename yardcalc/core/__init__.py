"""
Core calculator module for yardcalc.

This module contains the pipeline orchestration that ties the lexer,
reorderer and evaluator together.
"""

from .calculator import Calculator, CalculationResult, format_postfix

__all__ = [
    "Calculator",
    "CalculationResult",
    "format_postfix",
]
