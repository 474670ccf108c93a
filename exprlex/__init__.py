"""
exprlex - Mathematical Expression Lexer

Front end of an expression-evaluation pipeline: converts expression text
into classified tokens for a parser to consume.

Architecture:
    exprlex/
    └── lexer/           # Tokens, vocabulary, diagnostics and the scanner

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import (
    Lexer,
    LexResult,
    Token,
    TokenType,
    SourceLocation,
    Vocabulary,
    DEFAULT_VOCABULARY,
    LexerError,
    LexerWarning,
    LexErrorKind,
    tokenize,
    try_tokenize,
)

__all__ = [
    # Core classes
    "Lexer",
    "LexResult",
    "Token",
    "TokenType",
    "SourceLocation",
    "Vocabulary",
    "DEFAULT_VOCABULARY",

    # Diagnostics
    "LexerError",
    "LexerWarning",
    "LexErrorKind",

    # Convenience functions
    "tokenize",
    "try_tokenize",

    # Version info
    "__version__",
    "__license__",
]
