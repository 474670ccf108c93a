"""
Token definitions for the exprlex expression lexer.

This module defines the token categories produced when scanning a
mathematical expression:
- Numbers (integers, decimals, scientific notation)
- Operators and parentheses
- Functions, constants and variables from the vocabulary
- Invalid fragments that the parser is expected to report

Author: exprlex maintainers
"""

from enum import Enum, auto
from dataclasses import dataclass
from typing import Any


class TokenType(Enum):
    """
    Enumeration of all token types in an expression.

    The set is closed: the parser downstream switches on exactly these.
    """

    NUMBER = auto()                 # 42, 3.14, .5, 12., 3.2e-5
    OPERATOR = auto()               # + - * / ^ % =
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    FUNCTION = auto()               # sin, sqrt, nroot
    CONSTANT = auto()               # pi, e
    VARIABLE = auto()               # x, y, z
    INVALID = auto()                # foo, _, $, non-ASCII characters


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression text.

    Used for error reporting so the parser can point at a fragment.
    """
    filename: str
    line: int
    column: int
    offset: int  # Character index from start of the expression

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"


@dataclass(frozen=True)
class Token:
    """
    Represents a lexical token of a mathematical expression.

    Contains the token type, lexeme (exact text matched), semantic value
    and source location.
    """
    type: TokenType
    lexeme: str                     # Raw text from the expression
    value: Any                      # int/float for numbers and constants, else None
    location: SourceLocation

    def __str__(self) -> str:
        if self.value is not None and str(self.value) != self.lexeme:
            return f"{self.type.name}({self.lexeme!r} -> {self.value!r})"
        return f"{self.type.name}({self.lexeme!r})"

    def __repr__(self) -> str:
        return (f"Token({self.type.name}, {self.lexeme!r}, "
                f"{self.value!r}, {self.location!r})")

    @property
    def kind(self) -> TokenType:
        return self.type

    @property
    def text(self) -> str:
        return self.lexeme

    @property
    def is_literal(self) -> bool:
        """Check if this token carries a numeric value."""
        return self.type in {TokenType.NUMBER, TokenType.CONSTANT}

    @property
    def is_operator(self) -> bool:
        return self.type == TokenType.OPERATOR

    @property
    def is_paren(self) -> bool:
        return self.type in {TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN}

    @property
    def is_invalid(self) -> bool:
        """Check if this token is a fragment the lexer could not classify."""
        return self.type == TokenType.INVALID


# Single-character lookup tables used by the dispatch loop

OPERATORS = frozenset("+-*/^%=")

PARENTHESES = {
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
}
