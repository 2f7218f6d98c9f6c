"""Least-squares polynomial approximation via the normal equations."""

from __future__ import annotations

import warnings
from dataclasses import dataclass, field

import numpy as np

from ..config import DEFAULT_CONFIG, CurveConfig
from ..errors import DimensionMismatchError, IllConditionedWarning, UnderdeterminedFitError
from ..geometry.points import CurveSample, as_points
from ..linalg import multiply, solve, transpose
from .sampling import sample_domain


def design_matrix(x: np.ndarray, degree: int) -> np.ndarray:
    """Vandermonde matrix with A[row, i] = x[row] ** i, i = 0..degree."""
    x = np.asarray(x, dtype=float).ravel()
    return np.vander(x, degree + 1, increasing=True)


def evaluate_polynomial(coefficients: np.ndarray, x: np.ndarray | float) -> np.ndarray | float:
    """Evaluate sum(c[i] * x**i) with Horner's scheme."""
    x = np.asarray(x, dtype=float)
    result = np.zeros_like(x)
    for c in np.asarray(coefficients, dtype=float)[::-1]:
        result = result * x + c
    if x.ndim == 0:
        return float(result)
    return result


def fit_polynomial(
    x: np.ndarray,
    y: np.ndarray,
    degree: int,
    tol: float | None = None,
    condition_warning: float | None = None,
    config: CurveConfig | None = None
) -> np.ndarray:
    """Least-squares polynomial coefficients, lowest power first.

    Solves the normal equations A^T A c = A^T y where A is the design
    matrix of the x values.

    Args:
        x: Abscissae, shape (n,).
        y: Ordinates, shape (n,).
        degree: Polynomial degree, 0 <= degree <= n - 1.
        tol: Singularity tolerance; defaults to config.singular_tolerance.
        condition_warning: Condition number above which an
            IllConditionedWarning is emitted; defaults to
            config.condition_warning. The condition number is taken after
            scaling each column of A to unit max magnitude, so it does not
            depend on the units of x.
        config: Settings to read defaults from (DEFAULT_CONFIG if None).

    Returns:
        Coefficients c of shape (degree + 1,), c[i] multiplying x**i.

    Raises:
        UnderdeterminedFitError: If degree + 1 > n.
        SingularMatrixError: If A^T A is singular (e.g. all x identical).
    """
    config = config or DEFAULT_CONFIG
    tol = config.singular_tolerance if tol is None else tol
    if condition_warning is None:
        condition_warning = config.condition_warning

    x = np.asarray(x, dtype=float).ravel()
    y = np.asarray(y, dtype=float).ravel()

    if int(degree) != degree or degree < 0:
        raise ValueError(f"Degree must be a non-negative integer, got {degree}")
    degree = int(degree)
    if len(x) != len(y):
        raise DimensionMismatchError(f"x has {len(x)} values but y has {len(y)}")
    if len(x) == 0:
        raise ValueError("Need at least one point to fit")
    if degree + 1 > len(x):
        raise UnderdeterminedFitError(degree, len(x))

    a = design_matrix(x, degree)
    a_t = transpose(a)
    normal = multiply(a_t, a)
    coefficients = solve(normal, multiply(a_t, y), tol=tol)

    # Nonzero columns: a zero column makes solve() raise above
    scaled = a / np.max(np.abs(a), axis=0)
    cond = np.linalg.cond(multiply(transpose(scaled), scaled))
    if cond > condition_warning:
        warnings.warn(
            f"Normal equations for degree {degree} are ill-conditioned "
            f"(condition number {cond:.3g}); coefficients may be inaccurate.",
            IllConditionedWarning,
            stacklevel=2,
        )
    return coefficients


@dataclass
class PolynomialFit:
    """Least-squares polynomial approximation of scattered points.

    Attributes:
        degree: Polynomial degree. Defaults to config.default_degree.
        config: Tolerances and sampling resolution (DEFAULT_CONFIG if None).
    """
    degree: int | None = None
    config: CurveConfig | None = field(default=None, repr=False)

    _coefficients: np.ndarray | None = field(default=None, repr=False)
    _x: np.ndarray | None = field(default=None, repr=False)
    _y: np.ndarray | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = DEFAULT_CONFIG
        if self.degree is None:
            self.degree = self.config.default_degree

    @property
    def is_fitted(self) -> bool:
        return self._coefficients is not None

    def fit(self, x: np.ndarray, y: np.ndarray) -> PolynomialFit:
        """Fit to (x, y). Returns self for method chaining."""
        self._coefficients = fit_polynomial(x, y, self.degree, config=self.config)
        self._x = np.asarray(x, dtype=float).ravel().copy()
        self._y = np.asarray(y, dtype=float).ravel().copy()
        return self

    @classmethod
    def from_points(
        cls,
        points,
        degree: int | None = None,
        config: CurveConfig | None = None
    ) -> PolynomialFit:
        pts = as_points(points)
        return cls(degree=degree, config=config).fit(pts[:, 0], pts[:, 1])

    def _check_fitted(self) -> None:
        if not self.is_fitted:
            raise RuntimeError("Polynomial not fitted. Call fit() first.")

    @property
    def coefficients(self) -> np.ndarray:
        self._check_fitted()
        return self._coefficients.copy()

    @property
    def domain(self) -> tuple[float, float]:
        """Range of the fitted x values."""
        self._check_fitted()
        return float(self._x.min()), float(self._x.max())

    def evaluate(self, x: np.ndarray | float) -> np.ndarray | float:
        self._check_fitted()
        return evaluate_polynomial(self._coefficients, x)

    def residuals(self) -> np.ndarray:
        """y - p(x) at the fitted points."""
        self._check_fitted()
        return self._y - self.evaluate(self._x)

    @property
    def rmse(self) -> float:
        return float(np.sqrt(np.mean(self.residuals() ** 2)))

    def sample(self, n: int | None = None, step: float | None = None) -> CurveSample:
        """Sample the polynomial over the fitted x range for drawing."""
        x_min, x_max = self.domain
        if n is None and step is None:
            n, step = self.config.domain_samples, self.config.domain_step
        xs = sample_domain(x_min, x_max, n=n, step=step)
        return CurveSample.from_xy(xs, self.evaluate(xs))

    def __call__(self, x: np.ndarray | float) -> np.ndarray | float:
        return self.evaluate(x)

    def __repr__(self) -> str:
        if self.is_fitted:
            return f"PolynomialFit(degree={self.degree}, rmse={self.rmse:.4g})"
        return f"PolynomialFit(degree={self.degree}, not fitted)"
