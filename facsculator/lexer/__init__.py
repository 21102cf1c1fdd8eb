"""
Facsculator Lexer Package

Implements a hand-written lexical analyzer (tokenizer) for complex-number
expressions such as "(6+2i) * y - 25 / (1+i**2)".

Key Features:
- Fused complex literals (3+4i, 5.5-2i, -i, .5)
- Unary/binary sign disambiguation from the previous token
- Keywords conj and root, and the imaginary unit i
- Error reporting with the offending character and its position

Author: xwest
"""

from .tokens import Token, TokenType, SourceLocation
from .tokenizer import Tokenizer, tokenize
from .errors import Diagnostic, LexicalError

__all__ = [
    "Tokenizer",
    "tokenize",
    "Token",
    "TokenType",
    "SourceLocation",
    "Diagnostic",
    "LexicalError",
]
