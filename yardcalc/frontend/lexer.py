"""
Lexer module for yardcalc.

This module provides a hand-written single-pass scanner that converts an
arithmetic expression into a list of tokens for the shunting-yard stage.
Operator precedence and associativity are attached to each token here and
never change afterwards.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from ..utils.settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Token types for yardcalc expressions."""
    # Grouping
    LPAR = auto()        # (
    RPAR = auto()        # )

    # Operators
    PLUS = auto()        # +
    MINUS = auto()       # - (binary or unary)
    STAR = auto()        # * or x
    SLASH = auto()       # /
    PERCENT = auto()     # %
    CARET = auto()       # ^

    # Literals
    INTEGER = auto()     # 42, 3_000
    FLOAT = auto()       # 3.14, .5

    # Special
    NONE = auto()


# Precedence ranks. Higher binds tighter.
PREC_LPAR = 9
PREC_MODULO = 6
PREC_UNARY_MINUS = 5
PREC_POWER = 4
PREC_MULTIPLICATIVE = 3
PREC_ADDITIVE = 2
PREC_RPAR = 0

OPERATOR_TYPES = frozenset({
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.STAR,
    TokenType.SLASH,
    TokenType.PERCENT,
    TokenType.CARET,
})

LITERAL_TYPES = frozenset({TokenType.INTEGER, TokenType.FLOAT})

_DIGITS = frozenset("0123456789")

INT64_MAX = 2 ** 63 - 1
_INT64_DIGITS = len(str(INT64_MAX))

# A '-' following one of these is unary negation
_UNARY_CONTEXT = OPERATOR_TYPES | {TokenType.LPAR}


@dataclass(frozen=True)
class Token:
    """Represents a token in an expression.

    Attributes:
        type: The token type
        value: Source text of a literal, or the canonical operator symbol
        precedence: Ordering rank used by the shunting-yard stage
        right_associative: True only for the power operator
        unary: True when a MINUS token is unary negation
        int_value: Parsed payload of an INTEGER token
        float_value: Parsed payload of a FLOAT token
        col_offset: Column offset (0-indexed) in the source text
    """
    type: TokenType
    value: str
    precedence: int = 0
    right_associative: bool = False
    unary: bool = False
    int_value: Optional[int] = None
    float_value: Optional[float] = None
    col_offset: int = 0

    @property
    def is_literal(self) -> bool:
        return self.type in LITERAL_TYPES

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    @property
    def numeric_value(self) -> float:
        """The literal payload as a float.

        Raises:
            ValueError: If the token is not a literal
        """
        if self.type == TokenType.INTEGER:
            return float(self.int_value)
        if self.type == TokenType.FLOAT:
            return self.float_value
        raise ValueError(f"{self!r} is not a numeric literal")

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, prec={self.precedence})"


class LexerError(Exception):
    """Exception raised for lexer errors."""

    def __init__(self, message: str, col_offset: int = -1, text: str = ""):
        self.message = message
        self.col_offset = col_offset
        self.text = text
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.col_offset >= 0:
            return f"Col {self.col_offset}: {self.message}"
        return self.message


class Lexer:
    """Lexer for tokenizing arithmetic expressions.

    Scans the input left to right, skipping whitespace, and emits one Token
    per operator, parenthesis or numeric literal. The tokens of the most
    recent run are kept in a buffer so a driver can reuse one instance.

    Example:
        >>> lexer = Lexer()
        >>> tokens = lexer.tokenize("2 ^ 3 ^ 2")
        >>> [t.value for t in tokens]
        ['2', '^', '3', '^', '2']
    """

    _WHITESPACE = frozenset(" \t\n\r")

    # Character -> (type, canonical symbol, precedence, right associative)
    _OP_MAP = {
        '(': (TokenType.LPAR, '(', PREC_LPAR, False),
        ')': (TokenType.RPAR, ')', PREC_RPAR, False),
        '+': (TokenType.PLUS, '+', PREC_ADDITIVE, False),
        '*': (TokenType.STAR, '*', PREC_MULTIPLICATIVE, False),
        '/': (TokenType.SLASH, '/', PREC_MULTIPLICATIVE, False),
        '%': (TokenType.PERCENT, '%', PREC_MODULO, False),
        '^': (TokenType.CARET, '^', PREC_POWER, True),
    }

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the lexer.

        Args:
            settings: Optional settings; supplies the multiplication aliases
        """
        settings = settings or DEFAULT_SETTINGS
        self._multiply_aliases = frozenset(settings.multiply_aliases)
        self._tokens: List[Token] = []
        self._text: str = ""
        self._pos: int = 0

    @property
    def tokens(self) -> List[Token]:
        """Tokens produced by the most recent call to tokenize()."""
        return self._tokens

    def clear(self) -> None:
        """Empty the token buffer."""
        self._tokens = []

    def tokenize(self, text: str) -> List[Token]:
        """Tokenize an arithmetic expression.

        Args:
            text: Expression source

        Returns:
            List of Token objects in source order

        Raises:
            LexerError: On a malformed literal or unrecognised character
        """
        self.clear()
        self._text = text
        self._pos = 0

        while self._pos < len(text):
            c = text[self._pos]

            if c in self._WHITESPACE:
                self._pos += 1
                continue

            if c in _DIGITS or (c == '.' and self._peek_is_digit()):
                self._tokens.append(self._scan_number())
                continue

            if c == '.':
                raise LexerError("Unexpected: '.'", self._pos, text)

            self._tokens.append(self._scan_operator(c))
            self._pos += 1

        logger.debug("Lexed %d tokens from %r", len(self._tokens), text)
        return list(self._tokens)

    def _peek_is_digit(self) -> bool:
        nxt = self._pos + 1
        return nxt < len(self._text) and self._text[nxt] in _DIGITS

    def _scan_operator(self, c: str) -> Token:
        """Build the token for a single operator or parenthesis character."""
        if c == '-':
            return self._scan_minus()

        if c in self._multiply_aliases:
            c = '*'

        if c not in self._OP_MAP:
            raise LexerError(f"Unexpected: {c!r}", self._pos, self._text)

        token_type, symbol, precedence, right_assoc = self._OP_MAP[c]
        return Token(
            type=token_type,
            value=symbol,
            precedence=precedence,
            right_associative=right_assoc,
            col_offset=self._pos,
        )

    def _scan_minus(self) -> Token:
        """Disambiguate '-' between unary negation and subtraction."""
        if not self._tokens or self._tokens[-1].type in _UNARY_CONTEXT:
            return Token(
                type=TokenType.MINUS,
                value='m',
                precedence=PREC_UNARY_MINUS,
                unary=True,
                col_offset=self._pos,
            )
        return Token(
            type=TokenType.MINUS,
            value='-',
            precedence=PREC_ADDITIVE,
            col_offset=self._pos,
        )

    def _scan_number(self) -> Token:
        """Scan an integer or float literal starting at the current position.

        Underscores are digit separators and are dropped. A second decimal
        point inside the same literal is an error.
        """
        start = self._pos
        digits = []
        is_float = False

        while self._pos < len(self._text):
            c = self._text[self._pos]
            if c == '_':
                pass
            elif c == '.':
                if is_float:
                    raise LexerError(
                        f"Redefinition of float: {self._text[start:self._pos + 1]!r}",
                        self._pos,
                        self._text,
                    )
                is_float = True
                digits.append(c)
            elif c in _DIGITS:
                digits.append(c)
            else:
                break
            self._pos += 1

        literal = ''.join(digits)
        source = self._text[start:self._pos]

        if is_float:
            float_value = float(literal)
            if math.isinf(float_value):
                raise LexerError(f"Float literal out of range: {source!r}", start, self._text)
            return Token(
                type=TokenType.FLOAT,
                value=source,
                float_value=float_value,
                col_offset=start,
            )

        # Length check first: int() refuses very long digit strings
        significant = literal.lstrip('0') or '0'
        if len(significant) > _INT64_DIGITS or int(significant) > INT64_MAX:
            raise LexerError(f"Integer literal out of range: {source!r}", start, self._text)
        return Token(
            type=TokenType.INTEGER,
            value=source,
            int_value=int(significant),
            col_offset=start,
        )


def tokenize_source(text: str) -> List[Token]:
    """Convenience function to tokenize an expression.

    Args:
        text: Expression source

    Returns:
        List of Token objects
    """
    lexer = Lexer()
    return lexer.tokenize(text)
