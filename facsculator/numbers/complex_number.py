"""
Immutable complex number value type.

Rectangular arithmetic (sum, difference, product, quotient, conjugate) plus
the polar helpers used for powers and roots. Every operation returns a new
ComplexNumber; operands are never modified.

Author: xwest
"""

import math
from dataclasses import dataclass
from decimal import Context, Decimal, ROUND_HALF_EVEN

from .errors import create_division_by_zero_error, create_invalid_root_index_error


# Squared magnitudes and display parts below this are treated as zero
ZERO_TOLERANCE = 1e-9

# Decimal places kept before formatting, to hide representation noise (e-16)
DISPLAY_PRECISION = 10

# Formatter keeps at most this many fractional digits
MAX_FRACTION_DIGITS = 14

_DISPLAY_SCALE = 10 ** DISPLAY_PRECISION
_FRACTION_QUANTUM = Decimal(1).scaleb(-MAX_FRACTION_DIGITS)

# Wide enough for every finite double written out in full
_FORMAT_CONTEXT = Context(prec=400)


@dataclass(frozen=True)
class ComplexNumber:
    """
    A complex number a + bi stored as two IEEE doubles.

    Equality is exact on both fields; no tolerance is applied. Use
    ComplexNumber(x) for a purely real value.
    """
    real: float
    imaginary: float = 0.0

    def __post_init__(self):
        object.__setattr__(self, "real", float(self.real))
        object.__setattr__(self, "imaginary", float(self.imaginary))

    # ========================================================================
    # Construction helpers
    # ========================================================================

    @classmethod
    def from_polar(cls, magnitude: float, phase: float) -> 'ComplexNumber':
        """Build a number from its magnitude and phase (radians)."""
        return cls(magnitude * math.cos(phase), magnitude * math.sin(phase))

    @classmethod
    def from_complex(cls, value: complex) -> 'ComplexNumber':
        """Build a number from a Python complex."""
        return cls(value.real, value.imag)

    # ========================================================================
    # Arithmetic
    # ========================================================================

    def sum(self, other: 'ComplexNumber') -> 'ComplexNumber':
        """(a+bi) + (c+di) = (a+c) + (b+d)i"""
        return ComplexNumber(self.real + other.real, self.imaginary + other.imaginary)

    def subtract(self, other: 'ComplexNumber') -> 'ComplexNumber':
        """(a+bi) - (c+di) = (a-c) + (b-d)i"""
        return ComplexNumber(self.real - other.real, self.imaginary - other.imaginary)

    def multiply(self, other: 'ComplexNumber') -> 'ComplexNumber':
        """(a+bi) * (c+di) = (ac-bd) + (ad+bc)i"""
        real = self.real * other.real - self.imaginary * other.imaginary
        imaginary = self.real * other.imaginary + self.imaginary * other.real
        return ComplexNumber(real, imaginary)

    def conjugate(self) -> 'ComplexNumber':
        """Return a - bi."""
        return ComplexNumber(self.real, -self.imaginary)

    def divide(self, other: 'ComplexNumber') -> 'ComplexNumber':
        """
        Divide by another complex number.

        Multiplies by the divisor's conjugate: [(a+bi)(c-di)] / (c^2 + d^2).

        Raises:
            DivisionByZero: If c^2 + d^2 is below ZERO_TOLERANCE
        """
        denominator = other.real * other.real + other.imaginary * other.imaginary

        if abs(denominator) < ZERO_TOLERANCE:
            raise create_division_by_zero_error()

        numerator = self.multiply(other.conjugate())
        return ComplexNumber(numerator.real / denominator, numerator.imaginary / denominator)

    # ========================================================================
    # Polar form
    # ========================================================================

    def magnitude(self) -> float:
        """Distance from the origin, sqrt(a^2 + b^2)."""
        return math.sqrt(self.real * self.real + self.imaginary * self.imaginary)

    def phase(self) -> float:
        """Angle from the positive real axis in radians, in (-pi, pi]."""
        return math.atan2(self.imaginary, self.real)

    def power(self, exponent: float) -> 'ComplexNumber':
        """
        Raise to a real exponent using De Moivre's formula.

        z^n = r^n * (cos(n*theta) + i*sin(n*theta))

        Fractional and negative exponents work the same way. Invalid
        combinations are not trapped: zero to a negative power raises
        ValueError straight from math.pow.
        """
        new_magnitude = math.pow(self.magnitude(), exponent)
        new_phase = self.phase() * exponent
        return ComplexNumber.from_polar(new_magnitude, new_phase)

    def nth_root(self, n: int) -> 'ComplexNumber':
        """
        Principal n-th root, computed as z^(1/n).

        Only the root on the principal branch is returned, not all n roots.

        Raises:
            InvalidArgument: If n <= 0
        """
        if n <= 0:
            raise create_invalid_root_index_error(n)

        return self.power(1.0 / n)

    # ========================================================================
    # Predicates
    # ========================================================================

    def is_real(self) -> bool:
        """Check if the imaginary part is zero within tolerance."""
        return abs(self.imaginary) < ZERO_TOLERANCE

    def is_imaginary(self) -> bool:
        """Check if the real part is zero within tolerance."""
        return abs(self.real) < ZERO_TOLERANCE

    # ========================================================================
    # Python numeric protocol
    # ========================================================================

    def __add__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.sum(other)

    def __radd__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.sum(self)

    def __sub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.subtract(other)

    def __rsub__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.subtract(self)

    def __mul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.multiply(other)

    def __rmul__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.multiply(self)

    def __truediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return self.divide(other)

    def __rtruediv__(self, other):
        other = _coerce(other)
        if other is NotImplemented:
            return other
        return other.divide(self)

    def __pow__(self, exponent):
        if isinstance(exponent, bool) or not isinstance(exponent, (int, float)):
            return NotImplemented
        return self.power(exponent)

    def __neg__(self) -> 'ComplexNumber':
        return ComplexNumber(-self.real, -self.imaginary)

    def __abs__(self) -> float:
        return self.magnitude()

    def __complex__(self) -> complex:
        return complex(self.real, self.imaginary)

    # ========================================================================
    # Display
    # ========================================================================

    def __str__(self) -> str:
        """
        Human-readable form such as "3 - 4i", "5", "7i" or "-i".

        Both parts are rounded to DISPLAY_PRECISION places first so that
        floating-point noise does not show up in the output.
        """
        r = _round_for_display(self.real)
        i = _round_for_display(self.imaginary)

        r_str = _format_part(r)
        i_abs_str = _format_part(abs(i))

        # Practically real
        if abs(i) < ZERO_TOLERANCE:
            return r_str

        # Practically pure imaginary
        if abs(r) < ZERO_TOLERANCE:
            if i_abs_str == "1":
                return "-i" if i < 0 else "i"
            return _format_part(i) + "i"

        if i < 0:
            if i_abs_str == "1":
                return r_str + " - i"
            return f"{r_str} - {i_abs_str}i"

        if i_abs_str == "1":
            return r_str + " + i"
        return f"{r_str} + {i_abs_str}i"


def _coerce(value):
    """Promote a plain real operand to a ComplexNumber."""
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return ComplexNumber(value)
    return NotImplemented


def _round_for_display(value: float) -> float:
    """Round half-up to DISPLAY_PRECISION places, dropping negative zero."""
    scaled = value * _DISPLAY_SCALE
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / _DISPLAY_SCALE


def _format_part(value: float) -> str:
    """Plain decimal notation, at most MAX_FRACTION_DIGITS places, no trailing zeros."""
    if not math.isfinite(value):
        return str(value)

    # repr() gives the shortest round-tripping digits, which is what we want to show
    text = format(Decimal(repr(value)).quantize(
        _FRACTION_QUANTUM, rounding=ROUND_HALF_EVEN, context=_FORMAT_CONTEXT
    ), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return text
