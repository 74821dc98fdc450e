"""
Shunting-yard module for yardcalc.

This module reorders an infix token list into postfix (RPN) order using
Dijkstra's shunting-yard algorithm. Precedence and associativity come from
the tokens themselves; this stage never creates or modifies a token.
"""

import logging
from typing import List

from .lexer import Token, TokenType

logger = logging.getLogger(__name__)

UNMATCHED_RIGHT = "unmatched-right"
UNMATCHED_LEFT = "unmatched-left"


class ParenthesisError(Exception):
    """Exception raised for unbalanced parentheses."""

    def __init__(self, message: str, kind: str, token: Token = None):
        self.message = message
        self.kind = kind
        self.token = token
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.token is not None:
            return f"Col {self.token.col_offset}: {self.message}"
        return self.message


class ShuntingYard:
    """Infix to postfix converter.

    Example:
        >>> tokens = Lexer().tokenize("1 + 2 * 3")
        >>> [t.value for t in ShuntingYard().convert(tokens)]
        ['1', '2', '3', '*', '+']
    """

    def convert(self, tokens: List[Token]) -> List[Token]:
        """Convert an infix token list to postfix order.

        Args:
            tokens: Tokens in source order, as produced by the lexer

        Returns:
            Tokens in postfix order, with all parentheses removed

        Raises:
            ParenthesisError: If the parentheses do not balance
        """
        queue: List[Token] = []
        stack: List[Token] = []

        for token in tokens:
            if token.is_literal:
                queue.append(token)
            elif token.is_operator:
                self._push_operator(token, stack, queue)
            elif token.type == TokenType.LPAR:
                stack.append(token)
            elif token.type == TokenType.RPAR:
                self._close_group(token, stack, queue)

        while stack:
            top = stack.pop()
            if top.type == TokenType.LPAR:
                raise ParenthesisError(
                    "Mismatched parenthesis error", UNMATCHED_LEFT, top
                )
            queue.append(top)

        return queue

    @staticmethod
    def _push_operator(o1: Token, stack: List[Token], queue: List[Token]) -> None:
        # An open group shields everything beneath it
        while stack and stack[-1].type != TokenType.LPAR:
            o2 = stack[-1]
            if (not o1.right_associative and o1.precedence <= o2.precedence) or \
                    (o1.right_associative and o1.precedence < o2.precedence):
                queue.append(stack.pop())
                continue
            break
        stack.append(o1)

    @staticmethod
    def _close_group(token: Token, stack: List[Token], queue: List[Token]) -> None:
        while stack and stack[-1].type != TokenType.LPAR:
            queue.append(stack.pop())

        if not stack:
            raise ParenthesisError(
                "Right parenthesis error", UNMATCHED_RIGHT, token
            )

        stack.pop()


def reorder(tokens: List[Token]) -> List[Token]:
    """Convert tokens to postfix order, returning [] on a parenthesis error.

    The error is logged rather than raised so a caller can treat the
    expression as absent and carry on.

    Args:
        tokens: Tokens in source order

    Returns:
        Tokens in postfix order, or an empty list
    """
    try:
        return ShuntingYard().convert(tokens)
    except ParenthesisError as e:
        logger.error("%s", e)
        return []
