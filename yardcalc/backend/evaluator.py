"""
Postfix evaluator for yardcalc.

This module reduces a postfix token list to a single float with a value
stack. Arithmetic follows IEEE-754 / C library conventions: division by
zero gives an infinity or NaN instead of raising, modulo behaves like C's
fmod and power like C's pow.
"""

import logging
import math
from typing import Callable, Dict, List

from ..frontend.lexer import Token, TokenType

logger = logging.getLogger(__name__)


class EvaluationError(Exception):
    """Exception raised when a postfix sequence is malformed."""

    def __init__(self, message: str, token: Token = None):
        self.message = message
        self.token = token
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.token is not None:
            return f"{self.message} (at {self.token.value!r}, col {self.token.col_offset})"
        return self.message


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _add(lhs: float, rhs: float) -> float:
    return lhs + rhs


def _subtract(lhs: float, rhs: float) -> float:
    return lhs - rhs


def _multiply(lhs: float, rhs: float) -> float:
    return lhs * rhs


def _divide(lhs: float, rhs: float) -> float:
    if rhs == 0.0:
        if lhs == 0.0 or math.isnan(lhs):
            return math.nan
        # Signed zero in the divisor flips the infinity
        return math.copysign(math.inf, lhs) * math.copysign(1.0, rhs)
    return lhs / rhs


def _modulo(lhs: float, rhs: float) -> float:
    if rhs == 0.0 or math.isinf(lhs):
        return math.nan
    return math.fmod(lhs, rhs)


def _power(lhs: float, rhs: float) -> float:
    try:
        return math.pow(lhs, rhs)
    except OverflowError:
        if lhs < 0 and _is_odd_integer(rhs):
            return -math.inf
        return math.inf
    except ValueError:
        # Domain errors: zero to a negative power, or a negative base
        # with a non-integer exponent
        if lhs == 0.0:
            if _is_odd_integer(rhs):
                return math.copysign(math.inf, lhs)
            return math.inf
        return math.nan


class Evaluator:
    """Evaluates postfix token sequences.

    Every stack access is checked, so a malformed sequence raises
    EvaluationError instead of producing a garbage value.

    Example:
        >>> postfix = ShuntingYard().convert(Lexer().tokenize("2 ^ 3 ^ 2"))
        >>> Evaluator().evaluate(postfix)
        512.0
    """

    _BINARY_OPS: Dict[TokenType, Callable[[float, float], float]] = {
        TokenType.PLUS: _add,
        TokenType.MINUS: _subtract,
        TokenType.STAR: _multiply,
        TokenType.SLASH: _divide,
        TokenType.PERCENT: _modulo,
        TokenType.CARET: _power,
    }

    def evaluate(self, tokens: List[Token]) -> float:
        """Evaluate a postfix token sequence.

        Args:
            tokens: Tokens in postfix order

        Returns:
            float: The value of the expression

        Raises:
            EvaluationError: If the sequence is not a valid postfix expression
        """
        stack: List[float] = []

        for token in tokens:
            if token.is_literal:
                stack.append(token.numeric_value)
            elif token.type == TokenType.MINUS and token.unary:
                if not stack:
                    raise EvaluationError(
                        "Missing operand for unary minus (write stacked negations as -(-x))",
                        token,
                    )
                stack[-1] = -stack[-1]
            elif token.type in self._BINARY_OPS:
                if len(stack) < 2:
                    raise EvaluationError(
                        f"Operator {token.value!r} needs two operands, found {len(stack)}",
                        token,
                    )
                rhs = stack.pop()
                lhs = stack.pop()
                stack.append(self._BINARY_OPS[token.type](lhs, rhs))
            else:
                raise EvaluationError(f"Unexpected token in postfix sequence: {token.type.name}", token)

        if not stack:
            raise EvaluationError("Empty expression")
        if len(stack) > 1:
            raise EvaluationError(
                f"Malformed expression: {len(stack)} values left on the stack"
            )

        logger.debug("Evaluated %d tokens to %r", len(tokens), stack[0])
        return stack[0]


def evaluate(tokens: List[Token]) -> float:
    """Convenience function to evaluate a postfix token sequence.

    Args:
        tokens: Tokens in postfix order

    Returns:
        float: The value of the expression
    """
    return Evaluator().evaluate(tokens)
