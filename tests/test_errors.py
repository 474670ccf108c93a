"""
Test suite for lexer diagnostics: error kinds, warnings and suggestions.
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprlex.lexer.lexer import Lexer, try_tokenize
from exprlex.lexer.tokens import SourceLocation
from exprlex.lexer.vocabulary import DEFAULT_VOCABULARY
from exprlex.lexer.errors import (
    LexErrorKind, LexerError, ErrorRecovery, ERROR_CODES, create_number_error
)


class TestErrorKinds(unittest.TestCase):
    """Test cases for the fatal error taxonomy."""

    def test_codes_are_unique(self):
        codes = [kind.code for kind in LexErrorKind]
        self.assertEqual(len(codes), len(set(codes)))
        for code in codes:
            self.assertIn(code, ERROR_CODES)

    def test_messages(self):
        self.assertEqual(LexErrorKind.MULTIPLE_EXPONENTS.message, "malformed number: multiple exponents")
        self.assertEqual(LexErrorKind.INCOMPLETE_EXPONENT.code, "L003")

    def test_error_is_an_exception_with_diagnostic(self):
        location = SourceLocation("<expression>", 1, 3, 2)
        error = create_number_error(LexErrorKind.INCOMPLETE_EXPONENT, "2e", location)
        self.assertIsInstance(error, Exception)
        self.assertEqual(error.args, ("incomplete exponent",))
        self.assertEqual(error.diagnostic.severity, "error")
        self.assertEqual(error.diagnostic.help_text,
                         "Write the exponent as digits after the marker, e.g. '2e10'.")
        rendered = str(error)
        self.assertTrue(rendered.startswith("ERROR: incomplete exponent\n"))
        self.assertIn("--> <expression>:1:3", rendered)

    def test_multiple_exponents_error_can_be_built(self):
        """The scanner stops after an exponent, so this kind only arises
        from callers constructing it; it still renders normally."""
        location = SourceLocation("<expression>", 1, 4, 3)
        error = LexerError(LexErrorKind.MULTIPLE_EXPONENTS, "1e5", location)
        self.assertEqual(error.kind.code, "L002")
        self.assertEqual(error.code, "L002")
        self.assertIsNone(error.diagnostic.help_text)


class TestWarnings(unittest.TestCase):
    """Test cases for non-fatal diagnostics on INVALID tokens."""

    def test_unknown_identifier_suggestions(self):
        result = try_tokenize("sine(x) + sqr(4)")
        self.assertTrue(result.ok)
        self.assertEqual(len(result.warnings), 2)

        first, second = result.warnings
        self.assertEqual(first.code, "L100")
        self.assertEqual(first.suggestions[0], "sin")
        self.assertIn("sqrt", second.suggestions)
        self.assertIn("Did you mean:", str(first))

    def test_no_suggestion_for_distant_word(self):
        warning = try_tokenize("quaternion").warnings[0]
        self.assertEqual(warning.suggestions, [])
        self.assertIsNone(warning.diagnostic.help_text)

    def test_unexpected_character(self):
        warning = try_tokenize("2 # 3").warnings[0]
        self.assertEqual(warning.code, "L101")
        self.assertEqual(warning.diagnostic.location.column, 3)
        self.assertIn("Unexpected character: '#'", str(warning))

    def test_non_printable_character(self):
        warning = try_tokenize("1\x00").warnings[0]
        self.assertIn("U+0000", warning.diagnostic.help_text)

    def test_warnings_reset_between_scans(self):
        lexer = Lexer("foo")
        lexer.scan()
        lexer.scan()
        self.assertEqual(len(lexer.warnings), 1)


class TestErrorRecovery(unittest.TestCase):
    """Test cases for spelling suggestions."""

    def test_edit_distance(self):
        self.assertEqual(ErrorRecovery._edit_distance("sin", "sin"), 0)
        self.assertEqual(ErrorRecovery._edit_distance("sni", "sin"), 2)
        self.assertEqual(ErrorRecovery._edit_distance("", "abs"), 3)
        self.assertEqual(ErrorRecovery._edit_distance("kitten", "sitting"), 3)

    def test_suggestions_are_ranked_and_capped(self):
        suggestions = ErrorRecovery.suggest_identifier_corrections("cos", DEFAULT_VOCABULARY.words())
        self.assertEqual(suggestions[0], "cos")
        self.assertLessEqual(len(suggestions), 3)

    def test_suggestions_ignore_case(self):
        suggestions = ErrorRecovery.suggest_identifier_corrections("SQRT", DEFAULT_VOCABULARY.words())
        self.assertEqual(suggestions[0], "sqrt")


if __name__ == '__main__':
    unittest.main()
