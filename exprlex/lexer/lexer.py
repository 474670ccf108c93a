"""
exprlex Lexer - turns a mathematical expression into tokens

Single pass, left to right. Numbers go through a small state machine
that tracks whether a decimal point and an exponent have been seen;
alphabetic runs are classified against the vocabulary; everything else
is a one-character operator, parenthesis or INVALID token.

Only malformed numbers are fatal. Unknown words and stray characters
come out as INVALID tokens so the parser can report them in context.
"""

import logging
from typing import List, Optional, Union
from dataclasses import dataclass, field

from .tokens import Token, TokenType, SourceLocation, OPERATORS, PARENTHESES
from .vocabulary import Vocabulary, DEFAULT_VOCABULARY
from .errors import (
    LexErrorKind, LexerError, LexerWarning, create_number_error,
    create_unknown_identifier_warning, create_unexpected_character_warning
)

logger = logging.getLogger(__name__)


WHITESPACE = frozenset(" \t\n\r\v\f")


def _is_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


@dataclass
class LexResult:
    """
    Outcome of a scan: either the full token list or the fatal error.

    When ``error`` is set ``tokens`` is always empty.
    """
    tokens: List[Token] = field(default_factory=list)
    error: Optional[LexerError] = None
    warnings: List[LexerWarning] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[Token]:
        """Return the tokens, raising the stored error if the scan failed."""
        if self.error is not None:
            raise self.error
        return self.tokens


class Lexer:
    """
    Lexical analyzer for mathematical expressions.

    A Lexer holds the cursor for one expression. The vocabulary it reads
    is immutable and may be shared between lexers on any thread.
    """

    def __init__(
        self,
        source: str,
        filename: str = "<expression>",
        vocabulary: Optional[Vocabulary] = None,
    ):
        """
        Initialize the lexer with an expression.

        Args:
            source: Expression text
            filename: Label used in source locations
            vocabulary: Identifier tables, DEFAULT_VOCABULARY if omitted
        """
        self.source = source
        self.filename = filename
        self.vocabulary = vocabulary or DEFAULT_VOCABULARY
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []
        self.warnings: List[LexerWarning] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire expression.

        Returns:
            List of tokens in scan order (no EOF marker)

        Raises:
            LexerError: If a numeric literal is malformed
        """
        return self.scan().unwrap()

    def scan(self) -> LexResult:
        """Tokenize the entire expression, reporting failure as a value."""
        self.pos = 0
        self.line = 1
        self.column = 1
        self.tokens = []
        self.errors.clear()
        self.warnings.clear()

        logger.debug("Scanning %s (%d characters)", self.filename, len(self.source))

        try:
            while self.pos < len(self.source):
                if self.source[self.pos] in WHITESPACE:
                    self._advance()
                    continue
                self.tokens.append(self._next_token())
        except LexerError as e:
            logger.debug("Scan of %s aborted: %s at %s", self.filename, e.kind.name, e.location)
            self.errors.append(e)
            self.tokens = []
            return LexResult(error=e, warnings=list(self.warnings))

        logger.debug("Scanned %s into %d tokens", self.filename, len(self.tokens))
        return LexResult(tokens=list(self.tokens), warnings=list(self.warnings))

    def _next_token(self) -> Token:
        """Get the next token, starting at a non-whitespace character."""
        location = self._location_at(self.pos)
        current_char = self.source[self.pos]

        # Numbers, including a leading-dot form like .5
        if _is_digit(current_char) or (current_char == '.' and _is_digit(self._peek())):
            return self._tokenize_number(location)

        # Functions, constants and variables
        if _is_letter(current_char):
            return self._tokenize_identifier(location)

        self._advance()

        if current_char in PARENTHESES:
            return Token(PARENTHESES[current_char], current_char, None, location)

        # '^' is also listed as a function but the operator check comes first
        if current_char in OPERATORS:
            return Token(TokenType.OPERATOR, current_char, None, location)

        logger.debug("Unexpected character %r at %s", current_char, location)
        self.warnings.append(create_unexpected_character_warning(current_char, location))
        return Token(TokenType.INVALID, current_char, None, location)

    def _tokenize_number(self, location: SourceLocation) -> Token:
        """Tokenize a numeric literal such as 42, 12., .5 or 3.2e-5."""
        lexeme = self._scan_number(self.pos)
        self._advance_by(len(lexeme))

        if '.' in lexeme or 'e' in lexeme or 'E' in lexeme:
            value: Union[int, float] = float(lexeme)
        else:
            try:
                value = int(lexeme)
            except ValueError:
                # Digit runs past the interpreter's int conversion limit
                value = float(lexeme)

        return Token(TokenType.NUMBER, lexeme, value, location)

    def _scan_number(self, start: int) -> str:
        """
        Match the numeric literal beginning at ``start`` without moving the cursor.

        The first character that cannot extend the literal is left for the
        dispatch loop. A completed exponent ends the literal immediately.
        """
        source = self.source
        seen_dot = source[start] == '.'
        seen_exp = False
        i = start + 1

        while i < len(source):
            char = source[i]

            if _is_digit(char):
                i += 1
            elif char == '.':
                # One decimal point, and never inside the exponent
                if seen_dot or seen_exp:
                    raise self._number_error(LexErrorKind.MULTIPLE_DECIMAL_POINTS, start, i)
                seen_dot = True
                i += 1
            elif char in 'eE':
                if seen_exp:
                    raise self._number_error(LexErrorKind.MULTIPLE_EXPONENTS, start, i)
                seen_exp = True
                i += 1

                if i >= len(source):
                    raise self._number_error(LexErrorKind.INCOMPLETE_EXPONENT, start, i)

                if source[i] in '+-':
                    i += 1
                    if i >= len(source) or not _is_digit(source[i]):
                        raise self._number_error(LexErrorKind.EXPONENT_NOT_FOLLOWED_BY_DIGIT, start, i)
                elif not _is_digit(source[i]):
                    raise self._number_error(LexErrorKind.EXPONENT_NOT_FOLLOWED_BY_DIGIT, start, i)

                while i < len(source) and _is_digit(source[i]):
                    i += 1
                break
            else:
                break

        return source[start:i]

    def _number_error(self, kind: LexErrorKind, start: int, index: int) -> LexerError:
        return create_number_error(kind, self.source[start:index], self._location_at(index))

    def _tokenize_identifier(self, location: SourceLocation) -> Token:
        """Tokenize a run of letters and classify it against the vocabulary."""
        start_pos = self.pos

        # Letters only: digits and underscores end the run
        while self.pos < len(self.source) and _is_letter(self.source[self.pos]):
            self._advance()

        lexeme = self.source[start_pos:self.pos]
        token_type = self.vocabulary.classify(lexeme)

        value = None
        if token_type == TokenType.CONSTANT:
            value = self.vocabulary.constant_value(lexeme)
        elif token_type == TokenType.INVALID:
            logger.debug("Unknown identifier %r at %s", lexeme, location)
            self.warnings.append(
                create_unknown_identifier_warning(lexeme, location, self.vocabulary.words())
            )

        return Token(token_type, lexeme, value, location)

    def _location_at(self, index: int) -> SourceLocation:
        """Location of ``index``, which must not lie before the cursor or past a newline."""
        return SourceLocation(self.filename, self.line, self.column + (index - self.pos), index)

    def _advance(self):
        """Advance position by one character, updating line/column."""
        if self.pos < len(self.source):
            if self.source[self.pos] == '\n':
                self.line += 1
                self.column = 1
            else:
                self.column += 1
            self.pos += 1

    def _advance_by(self, count: int):
        """Advance position by multiple characters."""
        for _ in range(count):
            self._advance()

    def _peek(self, offset: int = 1) -> str:
        """Peek at character ahead without advancing."""
        peek_pos = self.pos + offset
        if peek_pos < len(self.source):
            return self.source[peek_pos]
        return '\0'

    def has_errors(self) -> bool:
        """Check if the last scan hit a malformed number."""
        return len(self.errors) > 0

    def has_warnings(self) -> bool:
        """Check if the last scan produced INVALID tokens."""
        return len(self.warnings) > 0

    def get_diagnostics(self) -> List[Union[LexerError, LexerWarning]]:
        """Get all diagnostics (errors and warnings)."""
        return self.errors + self.warnings


def tokenize(
    expression: str,
    vocabulary: Optional[Vocabulary] = None,
    filename: str = "<expression>",
) -> List[Token]:
    """
    Convenience function to tokenize an expression.

    Args:
        expression: Expression text
        vocabulary: Identifier tables, DEFAULT_VOCABULARY if omitted
        filename: Label used in source locations

    Returns:
        List of tokens

    Raises:
        LexerError: If a numeric literal is malformed
    """
    return Lexer(expression, filename, vocabulary).tokenize()


def try_tokenize(
    expression: str,
    vocabulary: Optional[Vocabulary] = None,
    filename: str = "<expression>",
) -> LexResult:
    """Like tokenize() but returns a LexResult instead of raising."""
    return Lexer(expression, filename, vocabulary).scan()
