"""Exceptions and warnings raised by the numerical core."""

from __future__ import annotations

import numpy as np


class CurveError(ValueError):
    """Base class for all curve_lab failures."""


class DimensionMismatchError(CurveError):
    """Operands have incompatible shapes."""


class SingularMatrixError(CurveError, np.linalg.LinAlgError):
    """A required inverse or solve has no unique solution."""


class DegenerateInputError(CurveError):
    """Spline knots are duplicated or not strictly increasing.

    Attributes:
        index: Index of the knot that starts the offending segment.
    """

    def __init__(self, message: str, index: int | None = None) -> None:
        super().__init__(message)
        self.index = index


class UnderdeterminedFitError(CurveError):
    """Requested polynomial degree needs more points than were given."""

    def __init__(self, degree: int, n_points: int) -> None:
        super().__init__(
            f"Degree {degree} needs at least {degree + 1} points, "
            f"got {n_points}. Reduce the degree or add points."
        )
        self.degree = degree
        self.n_points = n_points


class IllConditionedWarning(UserWarning):
    """Matrix is invertible but its condition number is very large."""
