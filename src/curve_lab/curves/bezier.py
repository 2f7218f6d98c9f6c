"""Bézier curves in the Bernstein basis.

A Bézier curve of degree n with control points P0..Pn is

    B(t) = sum_i C(n, i) * t^i * (1 - t)^(n - i) * Pi,    t in [0, 1].

The same basis gives the inverse problem: given n + 1 points the curve
must pass through at known parameters t_j, the control points solve
M @ P = Q with M[j, i] = C(n, i) * t_j^i * (1 - t_j)^(n - i).
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from ..config import DEFAULT_CONFIG, CurveConfig
from ..errors import DimensionMismatchError
from ..geometry.points import CurveSample, as_points
from ..linalg import invert, multiply
from .sampling import parameter_grid

# Parameters at which a cubic is made to pass through four given points
CUBIC_INTERPOLATION_PARAMETERS = (0.0, 1 / 3, 2 / 3, 1.0)


def binomial(n: int, k: int) -> int:
    """Binomial coefficient C(n, k) as a falling factorial over k!."""
    if k < 0 or k > n:
        return 0
    k = min(k, n - k)
    result = 1
    for i in range(1, k + 1):
        # Exact: the running product of i consecutive integers is divisible by i!
        result = result * (n - k + i) // i
    return result


def bernstein_basis(n: int, t: np.ndarray | float) -> np.ndarray:
    """Degree-n Bernstein polynomials evaluated at t.

    Args:
        n: Degree, >= 0.
        t: Parameter value(s).

    Returns:
        Array of shape (len(t), n + 1); row j holds b_{i,n}(t_j) for i = 0..n.
    """
    if n < 0:
        raise ValueError(f"Degree must be non-negative, got {n}")
    t = np.atleast_1d(np.asarray(t, dtype=float))[:, None]
    i = np.arange(n + 1)
    coeffs = np.array([binomial(n, k) for k in i], dtype=float)
    # numpy defines 0.0 ** 0 == 1, which gives the correct endpoint values
    return coeffs * t ** i * (1 - t) ** (n - i)


def bernstein_matrix(params, degree: int = 3) -> np.ndarray:
    """Square basis matrix M[j, i] = b_{i,degree}(params[j])."""
    params = np.asarray(params, dtype=float)
    if params.ndim != 1 or len(params) != degree + 1:
        raise DimensionMismatchError(
            f"Degree {degree} needs {degree + 1} parameters, got {params.shape}"
        )
    return bernstein_basis(degree, params)


def evaluate_bezier(control_points, t: np.ndarray | float) -> np.ndarray:
    """Evaluate a Bézier curve.

    Args:
        control_points: P0..Pn, any form accepted by as_points (n >= 0).
        t: Parameter value(s) in [0, 1].

    Returns:
        Shape (2,) for scalar t, otherwise (len(t), 2).
    """
    pts = as_points(control_points)
    if len(pts) == 0:
        raise ValueError("A Bézier curve needs at least one control point")

    t_arr = np.asarray(t, dtype=float)
    if not np.all((t_arr >= 0) & (t_arr <= 1)):
        raise ValueError("Parameter t must lie in [0, 1]")

    curve = bernstein_basis(len(pts) - 1, t_arr) @ pts
    if t_arr.ndim == 0:
        return curve[0]
    return curve


def sample_bezier(
    control_points,
    step: float | None = None,
    config: CurveConfig | None = None
) -> CurveSample:
    """Sample a Bézier curve at t = 0, step, ..., 1 for drawing.

    step defaults to config.bezier_step.
    """
    config = config or DEFAULT_CONFIG
    step = config.bezier_step if step is None else step
    return CurveSample(evaluate_bezier(control_points, parameter_grid(step)))


def interpolate_bezier(
    points,
    params=None,
    tol: float | None = None,
    config: CurveConfig | None = None
) -> np.ndarray:
    """Control points of the Bézier curve passing through points at params.

    Args:
        points: n + 1 points Q0..Qn the curve must pass through.
        params: Parameter of each point. Defaults to n + 1 evenly spaced
            values over [0, 1].
        tol: Singularity tolerance for the basis inversion. Defaults to
            config.singular_tolerance.
        config: Settings to read defaults from (DEFAULT_CONFIG if None).

    Returns:
        Control points, shape (n + 1, 2). Each axis is solved independently.

    Raises:
        SingularMatrixError: If the basis matrix at params is singular
            (e.g. repeated parameters).
    """
    pts = as_points(points)
    if len(pts) < 2:
        raise ValueError(f"Need at least 2 points to interpolate, got {len(pts)}")

    if tol is None:
        tol = (config or DEFAULT_CONFIG).singular_tolerance

    degree = len(pts) - 1
    if params is None:
        params = np.linspace(0.0, 1.0, degree + 1)

    m_inv = invert(bernstein_matrix(params, degree), tol=tol)
    return np.column_stack([
        multiply(m_inv, pts[:, 0]),
        multiply(m_inv, pts[:, 1]),
    ])


def interpolate_cubic_bezier(points) -> np.ndarray:
    """Cubic control points through four points at t = 0, 1/3, 2/3, 1."""
    pts = as_points(points)
    if len(pts) != 4:
        raise DimensionMismatchError(
            f"Cubic interpolation needs exactly 4 points, got {len(pts)}"
        )
    return interpolate_bezier(pts, CUBIC_INTERPOLATION_PARAMETERS)


def _de_casteljau(pts: np.ndarray, t: float) -> tuple[np.ndarray, np.ndarray]:
    """Split control polygon at t, returning the two sub-polygons."""
    left = [pts[0]]
    right = [pts[-1]]
    level = pts
    while len(level) > 1:
        level = (1 - t) * level[:-1] + t * level[1:]
        left.append(level[0])
        right.append(level[-1])
    return np.array(left), np.array(right[::-1])


@dataclass(frozen=True, eq=False)
class BezierCurve:
    """Immutable Bézier curve of arbitrary degree.

    Attributes:
        control_points: Array of shape (degree + 1, 2).
    """
    control_points: np.ndarray

    def __post_init__(self) -> None:
        pts = as_points(self.control_points)
        if len(pts) == 0:
            raise ValueError("A Bézier curve needs at least one control point")
        pts.setflags(write=False)
        object.__setattr__(self, 'control_points', pts)

    @property
    def degree(self) -> int:
        return len(self.control_points) - 1

    @property
    def start(self) -> np.ndarray:
        return self.control_points[0].copy()

    @property
    def end(self) -> np.ndarray:
        return self.control_points[-1].copy()

    def __call__(self, t: np.ndarray | float) -> np.ndarray:
        return evaluate_bezier(self.control_points, t)

    def sample(
        self,
        step: float | None = None,
        config: CurveConfig | None = None
    ) -> CurveSample:
        return sample_bezier(self.control_points, step, config=config)

    def derivative_curve(self) -> BezierCurve:
        """Hodograph: the degree n-1 curve with points n * (P[i+1] - P[i])."""
        if self.degree == 0:
            raise ValueError("A constant curve has no derivative curve")
        return BezierCurve(self.degree * np.diff(self.control_points, axis=0))

    def split(self, t: float) -> tuple[BezierCurve, BezierCurve]:
        """Split into two curves of the same degree meeting at B(t)."""
        if not 0 <= t <= 1:
            raise ValueError(f"Split parameter must lie in [0, 1], got {t}")
        left, right = _de_casteljau(self.control_points, t)
        return BezierCurve(left), BezierCurve(right)

    @classmethod
    def from_interpolation(
        cls,
        points,
        params=None,
        config: CurveConfig | None = None
    ) -> BezierCurve:
        """Curve passing through points at params (see interpolate_bezier)."""
        return cls(interpolate_bezier(points, params, config=config))

    def __repr__(self) -> str:
        return f"BezierCurve(degree={self.degree})"
