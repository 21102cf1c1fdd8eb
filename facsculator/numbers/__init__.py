"""
Facsculator Numbers Package

Immutable complex-number value type used to evaluate the literals the
lexer produces.

Key Features:
- Rectangular arithmetic (sum, subtract, multiply, divide, conjugate)
- Polar helpers (magnitude, phase) with De Moivre powers and principal roots
- Division-by-zero detection with a 1e-9 tolerance
- Clean display formatting ("3 - 4i", "5", "-i")

Author: xwest
"""

from .complex_number import ComplexNumber, ZERO_TOLERANCE
from .errors import ComplexArithmeticError, DivisionByZero, InvalidArgument

__all__ = [
    "ComplexNumber",
    "ZERO_TOLERANCE",
    "ComplexArithmeticError",
    "DivisionByZero",
    "InvalidArgument",
]
