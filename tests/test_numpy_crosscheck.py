"""
Cross-checks ComplexNumber arithmetic against numpy's complex128.

numpy is an optional (scientific extra) dependency; the suite is skipped
when it isn't installed.

Author: xwest
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

try:
    import numpy as np
    HAS_NUMPY = True
except ImportError:
    HAS_NUMPY = False

from facsculator.numbers import ComplexNumber


@unittest.skipUnless(HAS_NUMPY, "numpy not available - pip install numpy")
class TestNumpyCrossCheck(unittest.TestCase):
    """Compare every operation with the equivalent numpy computation."""

    def setUp(self):
        """Set up test fixtures."""
        rng = np.random.default_rng(2024)
        parts = rng.uniform(-50, 50, size=(40, 2))
        self.values = [complex(re, im) for re, im in parts]
        self.numbers = [ComplexNumber.from_complex(z) for z in self.values]

    def _assert_close(self, actual: ComplexNumber, expected):
        np.testing.assert_allclose(complex(actual), complex(expected), rtol=1e-9, atol=1e-12)

    def test_binary_operations(self):
        """Test sum, subtract, multiply and divide."""
        pairs = zip(self.numbers, self.values, reversed(self.numbers), reversed(self.values))
        for a, za, b, zb in pairs:
            za, zb = np.complex128(za), np.complex128(zb)
            self._assert_close(a.sum(b), za + zb)
            self._assert_close(a.subtract(b), za - zb)
            self._assert_close(a.multiply(b), za * zb)
            self._assert_close(a.divide(b), za / zb)

    def test_unary_operations(self):
        """Test conjugate, magnitude and phase."""
        for a, z in zip(self.numbers, self.values):
            z = np.complex128(z)
            self._assert_close(a.conjugate(), np.conj(z))
            np.testing.assert_allclose(a.magnitude(), np.abs(z), rtol=1e-12)
            np.testing.assert_allclose(a.phase(), np.angle(z), rtol=1e-12)

    def test_power_principal_branch(self):
        """Test real exponents against numpy's principal-branch power."""
        for exponent in (2.0, 3.0, 0.5, -1.0, 1.0 / 3.0, -2.5):
            for a, z in zip(self.numbers, self.values):
                with self.subTest(a=a, exponent=exponent):
                    self._assert_close(a.power(exponent), np.power(np.complex128(z), exponent))

    def test_roots(self):
        """Test principal roots against numpy."""
        for n in (1, 2, 3, 5):
            for a, z in zip(self.numbers, self.values):
                with self.subTest(a=a, n=n):
                    self._assert_close(a.nth_root(n), np.power(np.complex128(z), 1.0 / n))


if __name__ == '__main__':
    unittest.main()
