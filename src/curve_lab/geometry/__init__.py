"""Geometry module: point value objects and editing helpers."""

from .points import Point2D, ControlPointSet, CurveSample, as_points
from .editing import (
    Viewport,
    add_point,
    bounding_box,
    jitter_point,
    move_point,
    nearest_point_index,
    remove_point,
)

__all__ = [
    "Point2D",
    "ControlPointSet",
    "CurveSample",
    "as_points",
    # Editing
    "nearest_point_index",
    "move_point",
    "add_point",
    "remove_point",
    "jitter_point",
    "bounding_box",
    "Viewport",
]
