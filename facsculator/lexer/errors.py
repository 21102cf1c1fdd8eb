"""
Error handling for the Facsculator lexer.

Provides error reporting with source location information so a caller can
point at the exact character that stopped tokenization.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass

from .tokens import SourceLocation


@dataclass
class Diagnostic:
    """Base class for diagnostics (errors, warnings, info)."""
    message: str
    location: Optional[SourceLocation]
    severity: str  # "error", "warning", "info", "hint"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        if self.code:
            severity_prefix += f"[{self.code}]"
        result = f"{severity_prefix}: {self.message}\n"

        if self.location is not None:
            result += f"  --> {self.location}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexicalError(Exception):
    """
    Exception raised when the tokenizer meets a character it cannot use.

    Tokenization stops at the first such character; there is no recovery.
    The offending character and its 0-based position are available as
    attributes and are part of the message.
    """

    def __init__(
        self,
        character: str,
        location: SourceLocation,
        code: Optional[str] = "L001",
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        message = f"Unexpected character '{character}' at position {location.offset}"
        super().__init__(message)
        self.message = message
        self.character = character
        self.position = location.offset
        self.location = location
        self.diagnostic = Diagnostic(
            message=message,
            location=location,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return self.message


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Invalid character",
}

# ASCII look-alikes for characters people paste from documents
_ASCII_ALTERNATIVES = {
    '×': ['*'],
    '⋅': ['*'],
    '÷': ['/'],
    '−': ['-'],
    '^': ['**'],
    '{': ['('],
    '}': [')'],
}


def create_invalid_character_error(char: str, location: SourceLocation) -> LexicalError:
    """Create an error for an invalid character."""
    suggestions = _ASCII_ALTERNATIVES.get(char, [])

    if suggestions:
        help_text = f"Did you mean: {', '.join(suggestions)}?"
    elif char.isprintable():
        help_text = f"The character '{char}' is not valid in an expression."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexicalError(
        char,
        location,
        code="L001",
        help_text=help_text,
        suggestions=suggestions
    )
