"""Natural cubic spline interpolation."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ..config import DEFAULT_CONFIG, CurveConfig
from ..errors import DegenerateInputError, DimensionMismatchError, SingularMatrixError
from ..geometry.points import CurveSample, as_points
from .sampling import sample_domain


def solve_tridiagonal(
    sub: np.ndarray,
    diag: np.ndarray,
    sup: np.ndarray,
    rhs: np.ndarray
) -> np.ndarray:
    """Solve a tridiagonal system with the Thomas algorithm.

    Args:
        sub: Sub-diagonal, shape (m - 1,).
        diag: Main diagonal, shape (m,).
        sup: Super-diagonal, shape (m - 1,).
        rhs: Right-hand side, shape (m,).

    Returns:
        Solution, shape (m,).

    Raises:
        DimensionMismatchError: If the band lengths are inconsistent.
        SingularMatrixError: If elimination meets a zero pivot.
    """
    sub, diag, sup, rhs = (np.asarray(v, dtype=float) for v in (sub, diag, sup, rhs))
    m = len(diag)
    if len(rhs) != m or len(sub) != max(m - 1, 0) or len(sup) != max(m - 1, 0):
        raise DimensionMismatchError(
            f"Inconsistent bands: sub={len(sub)}, diag={m}, "
            f"sup={len(sup)}, rhs={len(rhs)}"
        )
    if m == 0:
        return np.empty(0)

    # Forward elimination
    c_prime = np.zeros(m)
    d_prime = np.zeros(m)
    for i in range(m):
        pivot = diag[i]
        carry = 0.0
        if i > 0:
            pivot -= sub[i - 1] * c_prime[i - 1]
            carry = sub[i - 1] * d_prime[i - 1]
        if pivot == 0:
            raise SingularMatrixError(f"Zero pivot in tridiagonal row {i}")
        if i < m - 1:
            c_prime[i] = sup[i] / pivot
        d_prime[i] = (rhs[i] - carry) / pivot

    # Back substitution
    solution = np.empty(m)
    solution[-1] = d_prime[-1]
    for i in range(m - 2, -1, -1):
        solution[i] = d_prime[i] - c_prime[i] * solution[i + 1]
    return solution


@dataclass
class NaturalCubicSpline:
    """Piecewise cubic interpolant with zero curvature at both ends.

    On segment i (x[i] <= x <= x[i+1]) the spline is

        S_i(x) = a[i] + b[i]*dx + c[i]*dx**2 + d[i]*dx**3,  dx = x - x[i].

    Queries outside [x[0], x[-1]] use the nearest end segment's cubic.
    """
    _x: np.ndarray | None = field(default=None, repr=False)
    _a: np.ndarray | None = field(default=None, repr=False)
    _b: np.ndarray | None = field(default=None, repr=False)
    _c: np.ndarray | None = field(default=None, repr=False)
    _d: np.ndarray | None = field(default=None, repr=False)

    @property
    def is_fitted(self) -> bool:
        return self._x is not None

    def fit(self, x: np.ndarray, y: np.ndarray, sort: bool = False) -> NaturalCubicSpline:
        """Fit the spline through (x, y).

        Args:
            x: Knots, strictly increasing unless sort is True.
            y: Values at the knots.
            sort: Order the data by x before fitting.

        Returns:
            self for method chaining.

        Raises:
            DimensionMismatchError: If x and y lengths differ.
            DegenerateInputError: If two knots coincide, are out of order or
                are NaN; its index attribute names the segment start.
            ValueError: If any knot or value is infinite, or y holds NaN.
        """
        x = np.asarray(x, dtype=float).ravel()
        y = np.asarray(y, dtype=float).ravel()

        if len(x) != len(y):
            raise DimensionMismatchError(
                f"x has {len(x)} values but y has {len(y)}"
            )
        if len(x) < 2:
            raise ValueError(f"Need at least 2 knots, got {len(x)}")

        if sort:
            order = np.argsort(x, kind='stable')
            x = x[order]
            y = y[order]

        h = np.diff(x)
        # NaN gaps fail h > 0 as well
        bad = np.flatnonzero(~(h > 0))
        if len(bad):
            i = int(bad[0])
            raise DegenerateInputError(
                f"Knots must be strictly increasing: x[{i}]={x[i]} and "
                f"x[{i + 1}]={x[i + 1]}",
                index=i,
            )
        if not (np.all(np.isfinite(x)) and np.all(np.isfinite(y))):
            raise ValueError("Spline knots and values must be finite")

        n = len(x)
        a = y.copy()
        c = np.zeros(n)

        if n > 2:
            slopes = np.diff(a) / h
            alpha = 3 * (slopes[1:] - slopes[:-1])
            c[1:-1] = solve_tridiagonal(
                sub=h[1:-1],
                diag=2 * (h[:-1] + h[1:]),
                sup=h[1:-1],
                rhs=alpha,
            )

        b = np.diff(a) / h - h * (c[1:] + 2 * c[:-1]) / 3
        d = np.diff(c) / (3 * h)

        self._x = x
        self._a = a
        self._b = b
        self._c = c
        self._d = d
        return self

    @classmethod
    def from_points(cls, points, sort: bool = True) -> NaturalCubicSpline:
        """Fit through 2D points, taking x as the knot coordinate."""
        pts = as_points(points)
        return cls().fit(pts[:, 0], pts[:, 1], sort=sort)

    def _check_fitted(self) -> None:
        if not self.is_fitted:
            raise RuntimeError("Spline not fitted. Call fit() first.")

    def _locate(self, x: np.ndarray) -> tuple[np.ndarray, np.ndarray]:
        """Segment index and offset from its left knot for each query."""
        idx = np.searchsorted(self._x, x, side='right') - 1
        idx = np.clip(idx, 0, len(self._x) - 2)
        return idx, x - self._x[idx]

    def evaluate(self, x: np.ndarray | float) -> np.ndarray | float:
        """Evaluate the spline at given point(s)."""
        self._check_fitted()
        x = np.asarray(x, dtype=float)
        idx, dx = self._locate(x)
        result = self._a[idx] + dx * (self._b[idx] + dx * (self._c[idx] + dx * self._d[idx]))
        if x.ndim == 0:
            return float(result)
        return result

    def derivative(self, x: np.ndarray | float, order: int = 1) -> np.ndarray | float:
        """Evaluate the first, second or third derivative."""
        self._check_fitted()
        x = np.asarray(x, dtype=float)
        idx, dx = self._locate(x)
        b, c, d = self._b[idx], self._c[idx], self._d[idx]

        if order == 1:
            result = b + 2 * c * dx + 3 * d * dx ** 2
        elif order == 2:
            result = 2 * c + 6 * d * dx
        elif order == 3:
            result = 6 * d * np.ones_like(dx)
        else:
            raise ValueError(f"Derivative order must be 1, 2 or 3, got {order}")

        if x.ndim == 0:
            return float(result)
        return result

    def sample(
        self,
        n: int | None = None,
        step: float | None = None,
        config: CurveConfig | None = None
    ) -> CurveSample:
        """Sample the spline over its knot range for drawing.

        Without n or step, the resolution comes from config (DEFAULT_CONFIG
        if None).
        """
        x_min, x_max = self.domain
        if n is None and step is None:
            config = config or DEFAULT_CONFIG
            n, step = config.domain_samples, config.domain_step
        xs = sample_domain(x_min, x_max, n=n, step=step)
        return CurveSample.from_xy(xs, self.evaluate(xs))

    @property
    def knots(self) -> np.ndarray:
        self._check_fitted()
        return self._x.copy()

    @property
    def coefficients(self) -> tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
        """Per-segment polynomial coefficients (a, b, c, d)."""
        self._check_fitted()
        return self._a[:-1].copy(), self._b.copy(), self._c[:-1].copy(), self._d.copy()

    @property
    def domain(self) -> tuple[float, float]:
        self._check_fitted()
        return float(self._x[0]), float(self._x[-1])

    def __call__(self, x: np.ndarray | float) -> np.ndarray | float:
        return self.evaluate(x)

    def __repr__(self) -> str:
        if self.is_fitted:
            return f"NaturalCubicSpline(n_knots={len(self._x)})"
        return "NaturalCubicSpline(not fitted)"


def natural_cubic_spline(x, y, x_query) -> np.ndarray:
    """Fit a natural cubic spline through (x, y) and evaluate it at x_query."""
    return np.asarray(NaturalCubicSpline().fit(x, y).evaluate(np.asarray(x_query, dtype=float)))
