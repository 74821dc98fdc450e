"""
Main calculator orchestration module for yardcalc.

This module provides the high-level Calculator class that runs an
expression through the lexer, the shunting-yard stage and the postfix
evaluator, and turns each class of failure into a result object.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..backend.evaluator import EvaluationError, Evaluator
from ..frontend.lexer import Lexer, LexerError, Token
from ..frontend.shunting_yard import ParenthesisError, ShuntingYard
from ..utils.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)

ERROR_LEXICAL = "lexical"
ERROR_STRUCTURAL = "structural"
ERROR_EVALUATION = "evaluation"


@dataclass
class CalculationResult:
    """Result of a calculation.

    Attributes:
        success: Whether the expression produced a value
        value: The value of the expression, if it produced one
        postfix: The postfix token sequence that was evaluated
        error_message: Error message if the calculation failed
        error_kind: "lexical", "structural" or "evaluation" on failure
    """
    success: bool
    value: Optional[float] = None
    postfix: List[Token] = field(default_factory=list)
    error_message: Optional[str] = None
    error_kind: Optional[str] = None


def format_postfix(tokens: List[Token]) -> str:
    """Render a postfix sequence as space-separated symbols.

    Unary minus is shown as 'm' to tell it apart from subtraction.
    """
    return " ".join(token.value for token in tokens)


class Calculator:
    """Main calculator class for yardcalc.

    One Lexer instance is reused across calls; its token buffer is cleared
    after every expression.

    Example:
        >>> calculator = Calculator()
        >>> result = calculator.calculate("(1 + 2) * 3")
        >>> result.value
        9.0
    """

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the calculator.

        Args:
            settings: Optional settings passed on to the lexer
        """
        self._settings = settings or DEFAULT_SETTINGS
        self._lexer = Lexer(self._settings)
        self._shunting_yard = ShuntingYard()
        self._evaluator = Evaluator()

    @property
    def lexer(self) -> Lexer:
        return self._lexer

    def tokenize(self, text: str) -> List[Token]:
        """Tokenize an expression.

        Raises:
            LexerError: If the text is not lexically valid
        """
        try:
            return self._lexer.tokenize(text)
        finally:
            self._lexer.clear()

    def to_postfix(self, text: str) -> List[Token]:
        """Tokenize an expression and reorder it into postfix.

        Raises:
            LexerError: If the text is not lexically valid
            ParenthesisError: If the parentheses do not balance
        """
        return self._shunting_yard.convert(self.tokenize(text))

    def calculate(self, text: str) -> CalculationResult:
        """Evaluate an expression.

        Args:
            text: Expression source

        Returns:
            CalculationResult: The value, or which stage failed and why
        """
        try:
            tokens = self.tokenize(text)
        except LexerError as e:
            return CalculationResult(
                success=False,
                error_message=f"Lexical error: {e}",
                error_kind=ERROR_LEXICAL
            )

        try:
            postfix = self._shunting_yard.convert(tokens)
        except ParenthesisError as e:
            logger.debug("Rejected %r: %s", text, e)
            return CalculationResult(
                success=False,
                error_message=f"Structural error: {e}",
                error_kind=ERROR_STRUCTURAL
            )

        logger.debug("Postfix: %s", format_postfix(postfix))

        try:
            value = self._evaluator.evaluate(postfix)
        except EvaluationError as e:
            return CalculationResult(
                success=False,
                postfix=postfix,
                error_message=f"Evaluation error: {e}",
                error_kind=ERROR_EVALUATION
            )

        return CalculationResult(
            success=True,
            value=value,
            postfix=postfix
        )
