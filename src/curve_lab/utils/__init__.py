"""Utility functions for rendering curves."""

from .svg import cubic_bezier_path, midpoint_cubic_path, polyline_path
from .visualization import plot_control_points, plot_curve, plot_polynomial_fit

__all__ = [
    "polyline_path",
    "cubic_bezier_path",
    "midpoint_cubic_path",
    "plot_curve",
    "plot_control_points",
    "plot_polynomial_fit",
]
