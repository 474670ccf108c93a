"""
Error handling for the exprlex lexer.

Malformed numeric literals abort the scan with a LexerError. Unknown
identifiers and stray characters are not errors: they become INVALID
tokens and are reported as LexerWarning diagnostics, with spelling
suggestions where the vocabulary has a close match.

Author: exprlex maintainers
"""

from enum import Enum
from typing import Optional, List, Iterable
from dataclasses import dataclass
from .tokens import SourceLocation


class LexErrorKind(Enum):
    """Machine-distinguishable reasons a numeric literal is rejected."""

    MULTIPLE_DECIMAL_POINTS = ("L001", "malformed number: multiple decimal points")
    MULTIPLE_EXPONENTS = ("L002", "malformed number: multiple exponents")
    INCOMPLETE_EXPONENT = ("L003", "incomplete exponent")
    EXPONENT_NOT_FOLLOWED_BY_DIGIT = ("L004", "exponent must be followed by a digit")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def message(self) -> str:
        return self.value[1]


@dataclass
class Diagnostic:
    """Base class for lexer diagnostics (errors, warnings)."""
    message: str
    location: SourceLocation
    severity: str  # "error" or "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer meets a malformed numeric literal.

    The scan stops at the first such error and no tokens are returned.
    """

    def __init__(
        self,
        kind: LexErrorKind,
        lexeme: str,
        location: SourceLocation,
        help_text: Optional[str] = None,
    ):
        super().__init__(kind.message)
        self.kind = kind
        self.lexeme = lexeme
        self.diagnostic = Diagnostic(
            message=kind.message,
            location=location,
            severity="error",
            code=kind.code,
            help_text=help_text,
        )

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def location(self) -> SourceLocation:
        return self.diagnostic.location

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerWarning:
    """
    Represents an INVALID token that doesn't stop the scan.
    """

    def __init__(
        self,
        message: str,
        location: SourceLocation,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="warning",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    @property
    def code(self) -> Optional[str]:
        return self.diagnostic.code

    @property
    def suggestions(self) -> List[str]:
        return self.diagnostic.suggestions or []

    def __str__(self) -> str:
        return str(self.diagnostic)

    def __repr__(self) -> str:
        return f"LexerWarning({self.diagnostic.message!r}, {self.diagnostic.location!r})"


class ErrorRecovery:
    """
    Utilities for reporting INVALID fragments helpfully.
    """

    @staticmethod
    def suggest_identifier_corrections(invalid_word: str, known_words: Iterable[str]) -> List[str]:
        """Suggest known names close to a misspelled identifier using edit distance."""
        word = invalid_word.lower()
        candidates = []
        for known in known_words:
            distance = ErrorRecovery._edit_distance(word, known)
            if distance <= 2:  # Allow up to 2 character differences
                candidates.append((distance, known))

        return [known for _, known in sorted(candidates)][:3]

    @staticmethod
    def _edit_distance(s1: str, s2: str) -> int:
        """Calculate Levenshtein distance between two strings."""
        if len(s1) < len(s2):
            return ErrorRecovery._edit_distance(s2, s1)

        if len(s2) == 0:
            return len(s1)

        previous_row = list(range(len(s2) + 1))
        for i, c1 in enumerate(s1):
            current_row = [i + 1]
            for j, c2 in enumerate(s2):
                insertions = previous_row[j + 1] + 1
                deletions = current_row[j] + 1
                substitutions = previous_row[j] + (c1 != c2)
                current_row.append(min(insertions, deletions, substitutions))
            previous_row = current_row

        return previous_row[-1]


# Error codes for categorization
ERROR_CODES = {kind.code: kind.message for kind in LexErrorKind}
ERROR_CODES.update({
    "L100": "Unknown identifier",
    "L101": "Unexpected character",
})


def create_number_error(
    kind: LexErrorKind, lexeme: str, location: SourceLocation
) -> LexerError:
    """Create an error for a malformed numeric literal."""
    if kind in (LexErrorKind.INCOMPLETE_EXPONENT, LexErrorKind.EXPONENT_NOT_FOLLOWED_BY_DIGIT):
        help_text = f"Write the exponent as digits after the marker, e.g. '{lexeme.rstrip('+-eE')}e10'."
    else:
        help_text = f"A number may contain one decimal point and one exponent; got '{lexeme}'."

    return LexerError(kind, lexeme, location, help_text=help_text)


def create_unknown_identifier_warning(
    word: str, location: SourceLocation, known_words: Iterable[str]
) -> LexerWarning:
    """Create a warning for an identifier missing from the vocabulary."""
    suggestions = ErrorRecovery.suggest_identifier_corrections(word, known_words)
    help_text = None
    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"

    return LexerWarning(
        message=f"Unknown identifier: '{word}'",
        location=location,
        code="L100",
        help_text=help_text,
        suggestions=suggestions,
    )


def create_unexpected_character_warning(char: str, location: SourceLocation) -> LexerWarning:
    """Create a warning for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in an expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerWarning(
        message=f"Unexpected character: '{char}'",
        location=location,
        code="L101",
        help_text=help_text,
    )
