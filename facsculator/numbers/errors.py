"""
Error handling for complex-number arithmetic.

Arithmetic failures are raised straight to the caller. Each error also
derives from the matching builtin exception so code that only knows about
ZeroDivisionError or ValueError still catches it.

Author: xwest
"""

from typing import Optional

from ..lexer.errors import Diagnostic


class ComplexArithmeticError(Exception):
    """
    Base class for errors raised by ComplexNumber operations.

    Carries a Diagnostic so arithmetic failures render the same way as
    lexical ones.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            location=None,
            severity="error",
            code=code,
            help_text=help_text
        )

    def __str__(self) -> str:
        return self.message


class DivisionByZero(ComplexArithmeticError, ZeroDivisionError):
    """Raised when dividing by a complex number within tolerance of zero."""


class InvalidArgument(ComplexArithmeticError, ValueError):
    """Raised when an operation receives an argument outside its domain."""


ERROR_CODES = {
    "A001": "Division by complex zero",
    "A002": "Invalid root index",
}


def create_division_by_zero_error() -> DivisionByZero:
    """Create the error for a quotient whose divisor is (0+0i)."""
    return DivisionByZero(
        "Division by complex zero (0+0i)",
        code="A001",
        help_text="The divisor's squared magnitude is below the zero tolerance."
    )


def create_invalid_root_index_error(n: int) -> InvalidArgument:
    """Create the error for a non-positive root index."""
    return InvalidArgument(
        f"Root index must be a positive integer, got {n}",
        code="A002",
        help_text="Use n >= 1, e.g. 2 for a square root or 3 for a cube root."
    )
