"""
Polynomials with real coefficients.

Independent of the sequence classes; coefficients are stored lowest degree first.
"""

from typing import Iterable, Optional

import numpy as np

from bioseq.config import get_config


class Polynomial:
    """
    A polynomial with real coefficients.

    Trailing high-degree coefficients whose magnitude is below the tolerance
    are trimmed on construction, keeping at least the constant term.

    Example:
        >>> str(Polynomial([1, 2, 3]))
        'W(x) = 3x^2 + 2x + 1'
    """

    def __init__(self, coefficients: Iterable[float], tolerance: Optional[float] = None) -> None:
        coeffs = np.asarray(list(coefficients), dtype=float)
        if coeffs.size == 0:
            raise ValueError("Polynomial must have at least one coefficient")

        self._tolerance = get_config().zero_tolerance if tolerance is None else tolerance
        self._coefficients = self._trim(coeffs, self._tolerance)

    @staticmethod
    def _trim(coeffs: np.ndarray, tolerance: float) -> np.ndarray:
        end = coeffs.size
        while end > 1 and abs(coeffs[end - 1]) < tolerance:
            end -= 1
        return coeffs[:end].copy()

    @property
    def coefficients(self) -> np.ndarray:
        """Coefficients from the constant term upwards (a copy)."""
        return self._coefficients.copy()

    @property
    def degree(self) -> int:
        return self._coefficients.size - 1

    def __call__(self, x: float) -> float:
        result = 0.0
        for c in self._coefficients[::-1]:
            result = result * x + c
        return float(result)

    def _combine(self, other: "Polynomial", sign: float) -> np.ndarray:
        n = max(self._coefficients.size, other._coefficients.size)
        result = np.zeros(n)
        result[:self._coefficients.size] += self._coefficients
        result[:other._coefficients.size] += sign * other._coefficients
        return result

    def __add__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(self._combine(other, 1.0), tolerance=self._tolerance)

    def __sub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(self._combine(other, -1.0), tolerance=self._tolerance)

    def __mul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        return Polynomial(np.convolve(self._coefficients, other._coefficients), tolerance=self._tolerance)

    def __iadd__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._coefficients = (self + other)._coefficients
        return self

    def __isub__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._coefficients = (self - other)._coefficients
        return self

    def __imul__(self, other: "Polynomial") -> "Polynomial":
        if not isinstance(other, Polynomial):
            return NotImplemented
        self._coefficients = (self * other)._coefficients
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Polynomial):
            return NotImplemented
        return np.array_equal(self._coefficients, other._coefficients)

    __hash__ = None

    def __str__(self) -> str:
        terms = []
        for power in range(self.degree, -1, -1):
            c = self._coefficients[power]
            if abs(c) < self._tolerance:
                continue

            if terms:
                sign = " - " if c < 0 else " + "
            else:
                sign = "-" if c < 0 else ""

            magnitude = abs(c)
            term = f"{magnitude:g}" if magnitude != 1 or power == 0 else ""
            if power > 0:
                term += "x" if power == 1 else f"x^{power}"
            terms.append(sign + term)

        if not terms:
            return "W(x) = 0"
        return "W(x) = " + "".join(terms)

    def __repr__(self) -> str:
        return f"Polynomial({self._coefficients.tolist()})"
