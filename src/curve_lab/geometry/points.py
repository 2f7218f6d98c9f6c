"""Plane point value objects exchanged with the rendering layer."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class Point2D:
    """A point in the plane."""
    x: float
    y: float

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y], dtype=float)

    def to_dict(self) -> dict[str, float]:
        return {'x': self.x, 'y': self.y}

    @classmethod
    def from_array(cls, xy: np.ndarray) -> Point2D:
        return cls(float(xy[0]), float(xy[1]))


def _coerce_point(p) -> tuple[float, float]:
    if isinstance(p, Point2D):
        return p.x, p.y
    if isinstance(p, Mapping):
        return float(p['x']), float(p['y'])
    x, y = p
    return float(x), float(y)


def as_points(points) -> np.ndarray:
    """Convert any supported point collection to a float array of shape (n, 2).

    Accepts ControlPointSet, CurveSample, an (n, 2) array, or an iterable of
    Point2D, {'x': ..., 'y': ...} mappings or (x, y) pairs. The result is
    always a fresh, writable copy.
    """
    if isinstance(points, (ControlPointSet, CurveSample)):
        return points.points.copy()

    if isinstance(points, np.ndarray):
        arr = np.array(points, dtype=float)
    else:
        if not isinstance(points, Iterable):
            raise TypeError(f"Cannot interpret {type(points).__name__} as points")
        arr = np.array([_coerce_point(p) for p in points], dtype=float)

    if arr.size == 0:
        return np.empty((0, 2))
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Points must have shape (n, 2), got {arr.shape}")
    return arr


def _frozen(arr: np.ndarray) -> np.ndarray:
    arr = np.array(arr, dtype=float)
    arr.setflags(write=False)
    return arr


class _PointArray:
    """Shared accessors for immutable point sequences."""
    points: np.ndarray

    @property
    def x(self) -> np.ndarray:
        return self.points[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.points[:, 1]

    def __len__(self) -> int:
        return len(self.points)

    def __getitem__(self, index: int) -> Point2D:
        return Point2D.from_array(self.points[index])

    def __iter__(self):
        for row in self.points:
            yield Point2D.from_array(row)

    def to_dicts(self) -> list[dict[str, float]]:
        """Points as [{'x': ..., 'y': ...}, ...] for the rendering layer."""
        return [{'x': float(x), 'y': float(y)} for x, y in self.points]


@dataclass(frozen=True, eq=False)
class ControlPointSet(_PointArray):
    """Ordered control points parametrizing a curve.

    Order is significant: it defines the Bézier parametrization and the
    row order of the interpolation matrix.
    """
    points: np.ndarray

    def __post_init__(self) -> None:
        arr = as_points(self.points)
        if len(arr) < 2:
            raise ValueError(
                f"ControlPointSet needs at least 2 points, got {len(arr)}"
            )
        object.__setattr__(self, 'points', _frozen(arr))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ControlPointSet):
            return NotImplemented
        return np.array_equal(self.points, other.points)

    def __hash__(self) -> int:
        return hash(self.points.tobytes())

    @property
    def degree(self) -> int:
        """Degree of the Bézier curve these points define."""
        return len(self.points) - 1

    def sorted_by_x(self) -> ControlPointSet:
        """Copy with points ordered by increasing x (stable)."""
        order = np.argsort(self.points[:, 0], kind='stable')
        return ControlPointSet(self.points[order])


@dataclass(frozen=True, eq=False)
class CurveSample(_PointArray):
    """Ordered samples of an evaluated curve, ready to draw as a polyline."""
    points: np.ndarray

    def __post_init__(self) -> None:
        object.__setattr__(self, 'points', _frozen(as_points(self.points)))

    @classmethod
    def from_xy(cls, x: np.ndarray, y: np.ndarray) -> CurveSample:
        return cls(np.column_stack([np.asarray(x, dtype=float),
                                    np.asarray(y, dtype=float)]))

    def __repr__(self) -> str:
        return f"CurveSample(n_points={len(self)})"
