"""Dense linear algebra used by the curve evaluators.

Thin wrappers around numpy and scipy.linalg that enforce shape checks and
turn singular systems into SingularMatrixError instead of returning
inf/nan or emitting LinAlgWarning. Every function returns a fresh array.

Square systems are equilibrated (rows, then columns, scaled to unit max
magnitude) before LU factorization, so the singularity test compares pivots
against 1 regardless of the units of the input.
"""

from __future__ import annotations

import warnings
from dataclasses import dataclass

import numpy as np
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from .config import DEFAULT_CONFIG
from .errors import DimensionMismatchError, SingularMatrixError

SINGULAR_TOLERANCE = DEFAULT_CONFIG.singular_tolerance


def _as_square(matrix: np.ndarray) -> np.ndarray:
    matrix = np.asarray(matrix, dtype=float)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise DimensionMismatchError(
            f"Expected a square matrix, got shape {matrix.shape}"
        )
    if matrix.size == 0:
        raise DimensionMismatchError("Expected a non-empty matrix")
    return matrix


@dataclass
class _Factorization:
    """LU factors of diag(1/row) @ A @ diag(1/col)."""
    lu: np.ndarray
    piv: np.ndarray
    row: np.ndarray
    col: np.ndarray

    def solve(self, rhs: np.ndarray) -> np.ndarray:
        scaled_rhs = rhs / (self.row if rhs.ndim == 1 else self.row[:, None])
        y = lu_solve((self.lu, self.piv), scaled_rhs)
        return y / (self.col if y.ndim == 1 else self.col[:, None])


def _factor(matrix: np.ndarray, tol: float) -> _Factorization:
    """Equilibrate and LU-factor, raising if any pivot is negligible."""
    row = np.max(np.abs(matrix), axis=1)
    if np.any(row == 0):
        raise SingularMatrixError(f"Matrix of shape {matrix.shape} has a zero row")
    scaled = matrix / row[:, None]
    col = np.max(np.abs(scaled), axis=0)
    if np.any(col == 0):
        raise SingularMatrixError(f"Matrix of shape {matrix.shape} has a zero column")
    scaled = scaled / col

    with warnings.catch_warnings():
        # Exact zero pivots are reported below as SingularMatrixError
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(scaled)

    smallest = np.min(np.abs(np.diag(lu)))
    if not smallest > tol:
        raise SingularMatrixError(
            f"Matrix of shape {matrix.shape} is singular "
            f"(smallest scaled pivot {smallest:.3g})"
        )
    return _Factorization(lu, piv, row, col)


def is_singular(matrix: np.ndarray, tol: float = SINGULAR_TOLERANCE) -> bool:
    """Whether a square matrix has no usable inverse at tolerance tol."""
    try:
        _factor(_as_square(matrix), tol)
    except SingularMatrixError:
        return True
    return False


def transpose(matrix: np.ndarray) -> np.ndarray:
    """Transpose a matrix. A 1D vector is treated as a single row."""
    return np.atleast_2d(np.asarray(matrix, dtype=float)).T.copy()


def multiply(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """Matrix-matrix or matrix-vector product.

    Args:
        a: Matrix, shape (m, k).
        b: Matrix of shape (k, p) or vector of shape (k,).

    Returns:
        Product of shape (m, p), or (m,) for a vector operand.

    Raises:
        DimensionMismatchError: If a is not 2D, b is not 1D/2D, or the
            inner dimensions differ.
    """
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)

    if a.ndim != 2:
        raise DimensionMismatchError(f"Left operand must be 2D, got {a.ndim}D")
    if b.ndim not in (1, 2):
        raise DimensionMismatchError(
            f"Right operand must be 1D or 2D, got {b.ndim}D"
        )
    if a.shape[1] != b.shape[0]:
        raise DimensionMismatchError(
            f"Inner dimensions differ: {a.shape} @ {b.shape}"
        )
    return a @ b


def invert(matrix: np.ndarray, tol: float = SINGULAR_TOLERANCE) -> np.ndarray:
    """Multiplicative inverse of a square matrix.

    Raises:
        DimensionMismatchError: If matrix is not square.
        SingularMatrixError: If matrix is singular at tolerance tol.
    """
    matrix = _as_square(matrix)
    return _factor(matrix, tol).solve(np.eye(matrix.shape[0]))


def solve(
    matrix: np.ndarray,
    rhs: np.ndarray,
    tol: float = SINGULAR_TOLERANCE
) -> np.ndarray:
    """Solve matrix @ x = rhs by LU decomposition with partial pivoting.

    Args:
        matrix: Square coefficient matrix, shape (n, n).
        rhs: Right-hand side, shape (n,) or (n, k).
        tol: Pivot tolerance for the singularity check, relative to the
            equilibrated matrix.

    Returns:
        Solution with the same shape as rhs.

    Raises:
        DimensionMismatchError: If shapes are incompatible.
        SingularMatrixError: If matrix is singular at tolerance tol.
    """
    matrix = _as_square(matrix)
    rhs = np.asarray(rhs, dtype=float)
    if rhs.ndim not in (1, 2) or rhs.shape[0] != matrix.shape[0]:
        raise DimensionMismatchError(
            f"Right-hand side of shape {rhs.shape} does not match "
            f"matrix of shape {matrix.shape}"
        )
    return _factor(matrix, tol).solve(rhs)
