"""
Frontend module for yardcalc.

This module provides the lexer and the shunting-yard reorderer. Together
they turn expression text into a postfix token sequence.
"""

from .lexer import Lexer, Token, TokenType, LexerError, tokenize_source
from .shunting_yard import ShuntingYard, ParenthesisError, reorder

__all__ = [
    # Lexer components
    "Lexer",
    "Token",
    "TokenType",
    "LexerError",
    "tokenize_source",
    # Reorderer components
    "ShuntingYard",
    "ParenthesisError",
    "reorder",
]
