"""
Facsculator Package

Scientific calculator core for complex numbers: an immutable complex-number
type and the tokenizer that reads complex expressions.

Architecture:
    facsculator/
    ├── lexer/           # Tokenization and lexical analysis
    └── numbers/         # Complex-number arithmetic

Author: xwest
License: MIT
"""

__version__ = "0.1.0-alpha"
__author__ = "xwest"
__email__ = "dev@facsculator.org"
__license__ = "MIT"

from .lexer import Tokenizer, Token, TokenType, LexicalError, tokenize
from .numbers import ComplexNumber, DivisionByZero, InvalidArgument

__all__ = [
    # Core classes
    "Tokenizer",
    "Token",
    "TokenType",
    "ComplexNumber",
    "tokenize",

    # Errors
    "LexicalError",
    "DivisionByZero",
    "InvalidArgument",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
