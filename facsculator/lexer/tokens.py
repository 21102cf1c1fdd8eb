"""
Token definitions for the Facsculator lexer.

This module defines the token types of the complex expression language:
- Literals (complex numbers such as 5, 3+4i, -i, and the unit i)
- Variables
- Arithmetic operators
- Function keywords (conj, root)
- Grouping delimiters

Author: xwest
"""

from enum import Enum, auto
from dataclasses import dataclass


class TokenType(Enum):
    """Enumeration of all token types in Facsculator expressions."""

    # Values
    COMPLEX_NUMBER = auto()         # 3+4i, 5, -2i, i
    VARIABLE = auto()               # x, y, z1

    # Operators
    PLUS = auto()                   # +
    MINUS = auto()                  # -
    MULTIPLY = auto()               # *
    DIVIDE = auto()                 # /
    POWER = auto()                  # **

    # Functions
    CONJUGATE = auto()              # conj(expr)
    ROOT = auto()                   # root[n](expr)

    # Delimiters
    LEFT_PAREN = auto()             # (
    RIGHT_PAREN = auto()            # )
    LEFT_BRACKET = auto()           # [ (root index)
    RIGHT_BRACKET = auto()          # ]

    # Control
    END_OF_FILE = auto()            # End of expression


@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in the expression source.

    Used for error reporting only; tokens do not carry locations.
    """
    filename: str
    line: int
    column: int
    offset: int  # 0-based character index into the source

    def __str__(self) -> str:
        return f"{self.filename}:{self.line}:{self.column}"

    def __repr__(self) -> str:
        return f"SourceLocation({self.filename!r}, {self.line}, {self.column}, {self.offset})"

    @classmethod
    def from_offset(cls, source: str, offset: int, filename: str = "<input>") -> 'SourceLocation':
        """Compute line and column (both 1-based) for a character offset."""
        line = source.count('\n', 0, offset) + 1
        line_start = source.rfind('\n', 0, offset) + 1
        return cls(filename, line, offset - line_start + 1, offset)


@dataclass(frozen=True)
class Token:
    """
    A lexical token: its type and the exact source text that produced it.

    Numeric tokens keep only their text; turning "3+4i" into a value is up
    to whoever consumes the token stream.
    """
    type: TokenType
    text: str

    def __str__(self) -> str:
        return f"{self.type.name}({self.text!r})"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.text!r})"

    @property
    def is_literal(self) -> bool:
        """Check if this token is a complex number literal."""
        return self.type == TokenType.COMPLEX_NUMBER

    @property
    def is_operator(self) -> bool:
        """Check if this token is a binary arithmetic operator."""
        return self.type in OPERATOR_TYPES

    @property
    def is_keyword(self) -> bool:
        """Check if this token is a function keyword."""
        return self.type in (TokenType.CONJUGATE, TokenType.ROOT)


# Lookup tables used by the tokenizer

# Text of the synthetic end marker
EOF_TEXT = "<EOF>"

# The imaginary unit, both as a standalone identifier and a literal suffix
IMAGINARY_UNIT = "i"

# Exact, case-sensitive identifier matches
KEYWORDS = {
    "conj": TokenType.CONJUGATE,
    "root": TokenType.ROOT,
    IMAGINARY_UNIT: TokenType.COMPLEX_NUMBER,
}

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = {
    "/": TokenType.DIVIDE,
    "(": TokenType.LEFT_PAREN,
    ")": TokenType.RIGHT_PAREN,
    "[": TokenType.LEFT_BRACKET,
    "]": TokenType.RIGHT_BRACKET,
}

# A sign that follows one of these starts an operand, not an operation
OPERATOR_TYPES = frozenset({
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.MULTIPLY,
    TokenType.DIVIDE,
    TokenType.POWER,
})
