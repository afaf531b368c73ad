"""
Tests for the polynomial module.
"""

import numpy as np
import pytest

from bioseq.polynomial import Polynomial


class TestPolynomial:
    """Tests for the Polynomial class."""

    def test_creation(self):
        p = Polynomial([1, 2, 3])
        assert p.degree == 2
        np.testing.assert_array_equal(p.coefficients, [1.0, 2.0, 3.0])

        with pytest.raises(ValueError):
            Polynomial([])

    def test_trailing_zeros_trimmed(self):
        assert Polynomial([1, 2, 0, 0]).degree == 1
        assert Polynomial([1, 2, 1e-15]).degree == 1
        zero = Polynomial([0, 0, 0])
        assert zero.degree == 0
        assert str(zero) == "W(x) = 0"

    def test_string(self):
        assert str(Polynomial([1, 2, 3])) == "W(x) = 3x^2 + 2x + 1"
        assert str(Polynomial([-1, 0, 1])) == "W(x) = x^2 - 1"
        assert str(Polynomial([0, -1])) == "W(x) = -x"
        assert str(Polynomial([1])) == "W(x) = 1"
        assert str(Polynomial([-1])) == "W(x) = -1"
        assert str(Polynomial([0.5, 0, -2.5])) == "W(x) = -2.5x^2 + 0.5"

    def test_arithmetic(self):
        w1 = Polynomial([1, 2, 3])
        w2 = Polynomial([-1, 0, 1])

        assert str(w1 + w2) == "W(x) = 4x^2 + 2x"
        assert str(w1 - w2) == "W(x) = 2x^2 + 2x + 2"
        assert str(w1 * w2) == "W(x) = 3x^4 + 2x^3 - 2x^2 - 2x - 1"
        assert (w1 - w1).degree == 0
        assert Polynomial([1, 1]) * Polynomial([1, 1]) == Polynomial([1, 2, 1])

    def test_in_place(self):
        w1 = Polynomial([1, 2, 3])
        alias = w1
        w1 += Polynomial([-1, 0, 1])
        assert alias is w1
        assert w1 == Polynomial([0, 2, 4])
        w1 -= Polynomial([0, 2, 4])
        assert w1 == Polynomial([0])
        w1 *= Polynomial([5])
        assert w1 == Polynomial([0])

    def test_evaluate(self):
        assert Polynomial([1, 2, 3])(2.0) == 17.0
        assert Polynomial([-1, 0, 1])(0) == -1.0
