"""
Facsculator Tokenizer - turns an expression string into tokens

Single pass, one character of lookahead, no backtracking. The fiddly part
is numbers: "3+4i" is one literal, "5+x" is three tokens, and "-i" at the
start of an expression is a literal rather than a minus sign.

xwest
"""

from typing import List

from .tokens import (
    Token, TokenType, SourceLocation, KEYWORDS, SINGLE_CHAR_TOKENS, OPERATOR_TYPES,
    EOF_TEXT, IMAGINARY_UNIT
)
from .errors import create_invalid_character_error


# Returned by the peek helpers past the end of the input
_NO_CHAR = '\0'


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_letter(char: str) -> bool:
    return char.isascii() and char.isalpha()


class Tokenizer:
    """
    Facsculator lexical analyzer.

    Converts an expression such as "(6+2i) * y - 25 / (1+i**2)" into a flat
    list of tokens ending with END_OF_FILE. Fused complex literals ("5.5-2i")
    come out as a single COMPLEX_NUMBER token.

    An instance keeps a cursor while tokenizing, so don't share one between
    threads.
    """

    def __init__(self, source: str, filename: str = "<input>"):
        """
        Initialize the tokenizer with an expression.

        Args:
            source: Expression text
            filename: Name used in error locations
        """
        self.source = source
        self.filename = filename
        self.pos = 0

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire expression.

        Returns:
            List of tokens, always ending with a single END_OF_FILE token

        Raises:
            LexicalError: On the first character that cannot start a token
        """
        self.pos = 0
        tokens: List[Token] = []

        while self.pos < len(self.source):
            current = self._peek()

            if current.isspace():
                self._advance()
                continue

            # Numbers: "5", "5.5", ".5", "3+4i", "2i"
            if _is_digit(current) or (current == '.' and _is_digit(self._peek_next())):
                tokens.append(self._scan_number())

            # Sign of a literal ("-5", "+i") or a binary operator
            elif current in ('+', '-'):
                next_char = self._peek_next()
                if self._at_operand_position(tokens) and (
                        _is_digit(next_char) or next_char == IMAGINARY_UNIT):
                    tokens.append(self._scan_number())
                else:
                    token_type = TokenType.PLUS if current == '+' else TokenType.MINUS
                    tokens.append(Token(token_type, self._advance()))

            elif current == '*':
                if self._peek_next() == '*':
                    self._advance()
                    self._advance()
                    tokens.append(Token(TokenType.POWER, "**"))
                else:
                    tokens.append(Token(TokenType.MULTIPLY, self._advance()))

            elif current in SINGLE_CHAR_TOKENS:
                tokens.append(Token(SINGLE_CHAR_TOKENS[current], self._advance()))

            # Variables, function keywords and the unit 'i'
            elif _is_letter(current):
                tokens.append(self._scan_identifier())

            else:
                raise create_invalid_character_error(
                    current,
                    SourceLocation.from_offset(self.source, self.pos, self.filename)
                )

        tokens.append(Token(TokenType.END_OF_FILE, EOF_TEXT))
        return tokens

    def _at_operand_position(self, tokens: List[Token]) -> bool:
        """Check if an operand (rather than an operator) is expected next."""
        if not tokens:
            return True
        previous = tokens[-1].type
        return previous == TokenType.LEFT_PAREN or previous in OPERATOR_TYPES

    def _scan_identifier(self) -> Token:
        """Scan a run of letters and digits; classify as keyword or variable."""
        start = self.pos

        while _is_letter(self._peek()) or _is_digit(self._peek()):
            self._advance()

        text = self.source[start:self.pos]
        return Token(KEYWORDS.get(text, TokenType.VARIABLE), text)

    def _scan_number(self) -> Token:
        """
        Scan a real, imaginary or fused complex literal.

        Greedily folds a signed imaginary part into the literal ("3+4i",
        "5.5-2i"). A sign that isn't followed by a digit, '.' or 'i' is left
        for the next token, so "5+x" stops after the "5".
        """
        start = self.pos

        if self._peek() in ('+', '-'):
            self._advance()

        has_digits = False
        while _is_digit(self._peek()):
            self._advance()
            has_digits = True

        if self._peek() == '.':
            self._advance()
            while _is_digit(self._peek()):
                self._advance()
                has_digits = True

        # Imaginary part: "+4i", "-.5i", or a bare "-i"
        if self._peek() in ('+', '-'):
            if not has_digits and self._peek_next() == IMAGINARY_UNIT:
                self._advance()
                self._advance()
                return self._number_token(start)

            if _is_digit(self._peek_next()) or self._peek_next() == '.':
                self._advance()
                self._skip_digits()
                if self._peek() == '.':
                    self._advance()
                    self._skip_digits()
            else:
                # Sign belongs to the next token ("5+x")
                return self._number_token(start)

        if self._peek() == IMAGINARY_UNIT:
            self._advance()

        return self._number_token(start)

    def _number_token(self, start: int) -> Token:
        return Token(TokenType.COMPLEX_NUMBER, self.source[start:self.pos])

    def _skip_digits(self):
        while _is_digit(self._peek()):
            self._advance()

    def _peek(self) -> str:
        """Character at the cursor, or '\\0' at end of input."""
        if self.pos >= len(self.source):
            return _NO_CHAR
        return self.source[self.pos]

    def _peek_next(self) -> str:
        """Character after the cursor, or '\\0' past end of input."""
        if self.pos + 1 >= len(self.source):
            return _NO_CHAR
        return self.source[self.pos + 1]

    def _advance(self) -> str:
        """Consume and return the current character."""
        current = self._peek()
        if self.pos < len(self.source):
            self.pos += 1
        return current


def tokenize(source: str, filename: str = "<input>") -> List[Token]:
    """
    Convenience function to tokenize an expression string.

    Args:
        source: Expression text
        filename: Name used in error locations

    Returns:
        List of tokens

    Raises:
        LexicalError: If tokenization fails
    """
    return Tokenizer(source, filename).tokenize()
