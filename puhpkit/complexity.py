"""Rough checks of how measured run times scale with input size."""

from __future__ import annotations

import math
from typing import Protocol


class _Timed(Protocol):
    def microseconds(self) -> int: ...


class Complexity:
    """Compares measured timings against predictions within a relative tolerance."""

    DEFAULT_PREDICTION_TOLERANCE = 0.2
    DEFAULT_VERBOSE = False

    def __init__(
        self,
        tolerance: float = DEFAULT_PREDICTION_TOLERANCE,
        verbose: bool = DEFAULT_VERBOSE,
    ) -> None:
        self.tolerance = tolerance
        self.verbose = verbose

    def __repr__(self) -> str:
        return f"Complexity(tolerance={self.tolerance!r}, verbose={self.verbose!r})"

    def check_constant_time(self, t1: _Timed, n1: int, t2: _Timed, n2: int) -> bool:
        """True if both timings agree within tolerance, regardless of size."""
        return self.check_prediction(float(t1.microseconds()), float(t2.microseconds()))

    def check_linear(self, t1: _Timed, n1: int, t2: _Timed, n2: int) -> bool:
        """Scale the first timing linearly to ``n2`` and compare it with the first timing."""
        print("WARNING: Complexity.check_linear() is untested!")
        prediction = self._microseconds_per_n(t1, n1) * n2
        return self.check_prediction(float(t1.microseconds()), prediction)

    def check_polynomial(
        self, t1: _Timed, n1: int, t2: _Timed, n2: int, power: float
    ) -> bool:
        """Predict the second timing as ``n2 ** power + t1 / n1 ** power``."""
        print("WARNING: Complexity.check_polynomial() is untested!")
        first = float(t1.microseconds())
        denominator = math.pow(float(n1), power)
        if denominator == 0.0:
            offset = math.inf if first > 0 else math.nan
        else:
            offset = first / denominator
        prediction = math.pow(float(n2), power) + offset
        return self.check_prediction(float(t2.microseconds()), prediction)

    @staticmethod
    def _microseconds_per_n(t: _Timed, n: int) -> float:
        if n == 0:
            return 0.0
        return float(t.microseconds()) / float(n)

    def check_prediction(self, actual: float, predicted: float) -> bool:
        """True if the relative error of ``predicted`` against ``actual`` is within tolerance.

        An actual value of zero always fails.
        """
        if actual == 0.0:
            if self.verbose:
                print("Complexity.check_prediction() - Actual was 0.0; Returning false")
            return False

        error = abs(actual - predicted) / actual
        result = error <= self.tolerance

        message = (
            f"Complexity.check_prediction() - Prediction "
            f"{'correct' if result else 'incorrect'}"
            f" ({predicted:g} vs. {actual:g})"
            f"; Error {error * 100:g}% {'within' if result else 'outside'}"
            f" tolerance of {self.tolerance * 100:g}%\n"
        )
        if self.verbose or not result:
            print("> " + message)
        return result