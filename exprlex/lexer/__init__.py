"""
exprlex Lexer Package

Implements a single-pass lexical analyzer for mathematical expressions.

Key Features:
- Integer, decimal and scientific-notation numbers (3.2e-5, .5, 12.)
- Function, constant and variable recognition against a read-only vocabulary
- Fatal errors only for malformed numbers; everything else degrades to INVALID tokens
- Spelling suggestions for unknown identifiers
- Source location tracking for parser diagnostics
"""

from .tokens import Token, TokenType, SourceLocation
from .vocabulary import Vocabulary, DEFAULT_VOCABULARY
from .lexer import Lexer, LexResult, tokenize, try_tokenize
from .errors import LexerError, LexerWarning, LexErrorKind

__all__ = [
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "Vocabulary",
    "DEFAULT_VOCABULARY",
    "LexerError",
    "LexerWarning",
    "LexErrorKind",
    "tokenize",
    "try_tokenize",
]
