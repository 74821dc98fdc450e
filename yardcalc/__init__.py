"""
yardcalc - Shunting-Yard Arithmetic Calculator

Evaluates arithmetic expressions in three stages: a lexer turns text into
tokens, the shunting-yard algorithm reorders them into postfix (RPN), and a
stack evaluator reduces the postfix sequence to a float.

Example:
    >>> from yardcalc import Calculator
    >>> result = Calculator().calculate("2 ^ 3 ^ 2")
    >>> if result.success:
    ...     print(result.value)
    512.0

Version: 0.1.0
"""

__version__ = "0.1.0"
__author__ = "yardcalc Team"

from .core import Calculator, CalculationResult
from .frontend import Lexer, LexerError, ParenthesisError, Token, TokenType
from .backend import EvaluationError

__all__ = [
    "__version__",
    "__author__",
    "Calculator",
    "CalculationResult",
    "Lexer",
    "LexerError",
    "ParenthesisError",
    "Token",
    "TokenType",
    "EvaluationError",
]
