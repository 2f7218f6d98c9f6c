"""SVG path strings for browser rendering."""

from __future__ import annotations

import numpy as np

from ..geometry.points import as_points


def _fmt(value: float) -> str:
    return f"{float(value):g}"


def polyline_path(points) -> str:
    """Path "M x0 y0 L x1 y1 ..."; empty for fewer than two points."""
    pts = as_points(points)
    if len(pts) < 2:
        return ''
    head = f"M {_fmt(pts[0, 0])} {_fmt(pts[0, 1])}"
    tail = ''.join(f" L {_fmt(x)} {_fmt(y)}" for x, y in pts[1:])
    return head + tail


def cubic_bezier_path(p0, p1, p2, p3) -> str:
    """Single cubic segment "M x0 y0 C x1 y1, x2 y2, x3 y3"."""
    (x0, y0), (x1, y1), (x2, y2), (x3, y3) = as_points([p0, p1, p2, p3])
    return (
        f"M {_fmt(x0)} {_fmt(y0)} "
        f"C {_fmt(x1)} {_fmt(y1)}, {_fmt(x2)} {_fmt(y2)}, {_fmt(x3)} {_fmt(y3)}"
    )


def midpoint_cubic_path(points) -> str:
    """Cubic from P0 to P3 steered by the midpoints of P0P1 and P2P3.

    Only the first four points are used. Fewer than two points give an
    empty path.
    """
    pts = as_points(points)
    if len(pts) < 2:
        return ''
    if len(pts) < 4:
        raise ValueError(f"Need at least 4 points, got {len(pts)}")
    cp1 = np.mean(pts[0:2], axis=0)
    cp2 = np.mean(pts[2:4], axis=0)
    return cubic_bezier_path(pts[0], cp1, cp2, pts[3])
