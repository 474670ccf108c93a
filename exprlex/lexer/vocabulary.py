"""
Vocabulary tables for identifier classification.

Functions, their arities, named constants and variable names. The shipped
tables are built once at import time and are read-only afterwards, so a
single vocabulary can be shared by lexers running on different threads.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

from .tokens import TokenType


FUNCTIONS = frozenset({
    # Trigonometric
    "sin", "cos", "tan", "sec", "csc", "cot",
    # Inverse trigonometric
    "asin", "acos", "atan", "asec", "acsc", "acot",
    # Logarithms, roots and misc
    "log", "ln", "log_base", "sqrt", "abs", "nroot",
    # Listed as a binary function but always lexed as an operator
    "^",
})

# Informational only; the lexer never checks argument counts
FUNCTION_ARITY = MappingProxyType({
    "sin": 1, "cos": 1, "tan": 1, "sec": 1, "csc": 1, "cot": 1,
    "asin": 1, "acos": 1, "atan": 1, "asec": 1, "acsc": 1, "acot": 1,
    "log": 1, "ln": 1, "log_base": 2,
    "sqrt": 1, "abs": 1, "nroot": 2,
    "^": 2,
})

CONSTANTS = MappingProxyType({
    "pi": 3.141592653589793,
    "e": 2.718281828459045,
})

VARIABLES = frozenset({"x", "y", "z"})


@dataclass(frozen=True)
class Vocabulary:
    """
    Bundle of the four identifier tables used by the lexer.

    Classification order when a word appears in more than one table is
    function, then constant, then variable.
    """
    functions: frozenset
    function_arity: Mapping[str, int]
    constants: Mapping[str, float]
    variables: frozenset

    def classify(self, word: str) -> TokenType:
        """Classify a completed alphabetic run."""
        if word in self.functions:
            return TokenType.FUNCTION
        if word in self.constants:
            return TokenType.CONSTANT
        if word in self.variables and len(word) == 1:
            return TokenType.VARIABLE
        return TokenType.INVALID

    def arity(self, name: str) -> Optional[int]:
        return self.function_arity.get(name)

    def constant_value(self, name: str) -> Optional[float]:
        return self.constants.get(name)

    def words(self) -> List[str]:
        """All names that can be matched by the identifier scanner."""
        names = set(self.functions) | set(self.constants) | set(self.variables)
        return sorted(name for name in names if name.isascii() and name.isalpha())

    def extend(
        self,
        functions: Optional[Mapping[str, int]] = None,
        constants: Optional[Mapping[str, float]] = None,
        variables: Optional[Iterable[str]] = None,
    ) -> "Vocabulary":
        """
        Return a new vocabulary with additional entries.

        Args:
            functions: Mapping of function name to arity
            constants: Mapping of constant name to value
            variables: Extra single-letter variable names, as an iterable of
                strings; a bare str is rejected rather than split into letters

        The receiver is left untouched.
        """
        if isinstance(variables, str):
            raise TypeError("variables must be an iterable of names, not a str")

        functions = dict(functions or {})
        return Vocabulary(
            functions=self.functions | frozenset(functions),
            function_arity=MappingProxyType({**self.function_arity, **functions}),
            constants=MappingProxyType({**self.constants, **(constants or {})}),
            variables=self.variables | frozenset(variables or ()),
        )


DEFAULT_VOCABULARY = Vocabulary(
    functions=FUNCTIONS,
    function_arity=FUNCTION_ARITY,
    constants=CONSTANTS,
    variables=VARIABLES,
)
