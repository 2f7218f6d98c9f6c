"""curve_lab: numerical core for interactive curve demonstrations.

Evaluates Bézier curves in the Bernstein basis, fits Bézier control points
through given points by inverting the basis matrix, interpolates natural
cubic splines, and approximates scattered points with least-squares
polynomials. Every operation is a pure function of its input, so a UI can
simply re-run it whenever the user moves a point.
"""

from .config import CurveConfig, DEFAULT_CONFIG
from .errors import (
    CurveError,
    DegenerateInputError,
    DimensionMismatchError,
    IllConditionedWarning,
    SingularMatrixError,
    UnderdeterminedFitError,
)
from .geometry import ControlPointSet, CurveSample, Point2D
from .curves import (
    BezierCurve,
    NaturalCubicSpline,
    PolynomialFit,
    evaluate_bezier,
    fit_polynomial,
    interpolate_cubic_bezier,
    sample_bezier,
)

__version__ = "0.1.0"

__all__ = [
    "CurveConfig",
    "DEFAULT_CONFIG",
    # Errors
    "CurveError",
    "DimensionMismatchError",
    "SingularMatrixError",
    "DegenerateInputError",
    "UnderdeterminedFitError",
    "IllConditionedWarning",
    # Values
    "Point2D",
    "ControlPointSet",
    "CurveSample",
    # Curves
    "BezierCurve",
    "NaturalCubicSpline",
    "PolynomialFit",
    "evaluate_bezier",
    "sample_bezier",
    "interpolate_cubic_bezier",
    "fit_polynomial",
]
