"""Pure editing operations on control points, plus screen mapping.

Each function returns a new array; the caller's points are never modified.
A UI re-evaluates its curves from the returned points.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .points import as_points


def _checked_index(points: np.ndarray, index: int) -> int:
    n = len(points)
    if not -n <= index < n:
        raise IndexError(f"Point index {index} out of range for {n} points")
    return index % n


def nearest_point_index(points, target) -> int:
    """Index of the point closest to target (first one on ties)."""
    pts = as_points(points)
    if len(pts) == 0:
        raise ValueError("Cannot search an empty point set")
    target = as_points([target])[0]
    return int(np.argmin(np.linalg.norm(pts - target, axis=1)))


def move_point(points, index: int, position) -> np.ndarray:
    """Replace one point with a new position."""
    pts = as_points(points)
    pts[_checked_index(pts, index)] = as_points([position])[0]
    return pts


def add_point(points, position) -> np.ndarray:
    """Append a point at the end of the sequence."""
    pts = as_points(points)
    return np.vstack([pts, as_points([position])])


def remove_point(points, index: int, min_points: int = 2) -> np.ndarray:
    """Delete one point, keeping at least min_points."""
    pts = as_points(points)
    if len(pts) <= min_points:
        raise ValueError(
            f"Cannot remove a point: {len(pts)} left, minimum is {min_points}"
        )
    return np.delete(pts, _checked_index(pts, index), axis=0)


def jitter_point(
    points,
    index: int,
    amount: float = 1.0,
    seed: int | None = None
) -> np.ndarray:
    """Nudge one point by a random offset in [-amount/2, amount/2] per axis."""
    pts = as_points(points)
    rng = np.random.default_rng(seed)
    pts[_checked_index(pts, index)] += (rng.random(2) - 0.5) * amount
    return pts


def bounding_box(points) -> tuple[np.ndarray, np.ndarray]:
    """Axis-aligned bounds (lower, upper) of a point set."""
    pts = as_points(points)
    if len(pts) == 0:
        raise ValueError("Cannot bound an empty point set")
    return pts.min(axis=0), pts.max(axis=0)


@dataclass
class Viewport:
    """Mapping between curve coordinates and a y-down pixel canvas.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        scale: Pixels per curve unit.
        origin: Curve coordinates drawn at the bottom-left canvas corner.
    """
    width: float
    height: float
    scale: float = 1.0
    origin: tuple[float, float] = (0.0, 0.0)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Viewport width and height must be positive")
        if self.scale <= 0:
            raise ValueError(f"scale must be positive, got {self.scale}")

    def to_screen(self, points) -> np.ndarray:
        pts = as_points(points)
        ox, oy = self.origin
        sx = (pts[:, 0] - ox) * self.scale
        sy = self.height - (pts[:, 1] - oy) * self.scale
        return np.column_stack([sx, sy])

    def to_world(self, pixels) -> np.ndarray:
        px = as_points(pixels)
        ox, oy = self.origin
        wx = px[:, 0] / self.scale + ox
        wy = (self.height - px[:, 1]) / self.scale + oy
        return np.column_stack([wx, wy])

    def clamp(self, pixels) -> np.ndarray:
        """Clip pixel positions to the visible canvas."""
        px = as_points(pixels)
        return np.clip(px, [0.0, 0.0], [self.width, self.height])

    @classmethod
    def fit(cls, points, scale: float = 50.0, margin: float = 50.0) -> Viewport:
        """Size a canvas to hold all points with a margin on every side."""
        lower, upper = bounding_box(points)
        extent = (upper - lower) * scale
        return cls(
            width=float(extent[0] + 2 * margin),
            height=float(extent[1] + 2 * margin),
            scale=scale,
            origin=(float(lower[0] - margin / scale),
                    float(lower[1] - margin / scale)),
        )
