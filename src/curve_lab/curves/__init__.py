"""Curves module: Bézier evaluation, spline interpolation, polynomial fitting."""

from .bezier import (
    BezierCurve,
    CUBIC_INTERPOLATION_PARAMETERS,
    bernstein_basis,
    bernstein_matrix,
    binomial,
    evaluate_bezier,
    interpolate_bezier,
    interpolate_cubic_bezier,
    sample_bezier,
)
from .spline import NaturalCubicSpline, natural_cubic_spline, solve_tridiagonal
from .least_squares import PolynomialFit, design_matrix, evaluate_polynomial, fit_polynomial
from .sampling import parameter_grid, sample_domain

__all__ = [
    # Bézier
    "BezierCurve",
    "CUBIC_INTERPOLATION_PARAMETERS",
    "binomial",
    "bernstein_basis",
    "bernstein_matrix",
    "evaluate_bezier",
    "sample_bezier",
    "interpolate_bezier",
    "interpolate_cubic_bezier",
    # Splines
    "NaturalCubicSpline",
    "natural_cubic_spline",
    "solve_tridiagonal",
    # Least squares
    "PolynomialFit",
    "design_matrix",
    "evaluate_polynomial",
    "fit_polynomial",
    # Sampling
    "parameter_grid",
    "sample_domain",
]
