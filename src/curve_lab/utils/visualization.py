"""Visualization utilities for curves and their control points."""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
import matplotlib.pyplot as plt

from ..geometry.points import as_points

if TYPE_CHECKING:
    from ..curves.least_squares import PolynomialFit


def plot_curve(
    sample,
    ax: plt.Axes | None = None,
    **kwargs
) -> plt.Axes:
    """Plot a sampled curve as a polyline.

    Args:
        sample: CurveSample or any point collection, in drawing order.
        ax: Matplotlib axes (creates new if None).
        **kwargs: Additional arguments to ax.plot.

    Returns:
        The matplotlib axes.
    """
    if ax is None:
        fig, ax = plt.subplots()

    pts = as_points(sample)
    ax.plot(pts[:, 0], pts[:, 1], **kwargs)
    ax.set_xlabel('x')
    ax.set_ylabel('y')

    return ax


def plot_control_points(
    points,
    ax: plt.Axes | None = None,
    polygon: bool = True,
    color: str = 'red',
    label: str | None = 'Control points',
    **kwargs
) -> plt.Axes:
    """Plot control points, optionally joined by their control polygon.

    Args:
        points: Control points in order.
        ax: Matplotlib axes.
        polygon: Draw dashed segments between consecutive points.
        color: Marker color.
        label: Legend label.
        **kwargs: Additional arguments to ax.scatter.

    Returns:
        The matplotlib axes.
    """
    if ax is None:
        fig, ax = plt.subplots()

    pts = as_points(points)
    if polygon and len(pts) > 1:
        ax.plot(pts[:, 0], pts[:, 1], '--', color='gray', alpha=0.5, linewidth=1)
    ax.scatter(pts[:, 0], pts[:, 1], c=color, zorder=3, label=label, **kwargs)

    # Number points so their order (and hence the parametrization) is visible
    for i, (x, y) in enumerate(pts):
        ax.annotate(str(i), (x, y), textcoords='offset points', xytext=(5, 5))

    return ax


def plot_polynomial_fit(
    fit: PolynomialFit,
    points,
    ax: plt.Axes | None = None,
    n_grid: int = 200,
    **kwargs
) -> plt.Axes:
    """Plot a least-squares polynomial over the points it was fitted to.

    Args:
        fit: Fitted PolynomialFit.
        points: The data points.
        ax: Matplotlib axes.
        n_grid: Number of samples along the curve.
        **kwargs: Additional arguments to ax.plot.

    Returns:
        The matplotlib axes.
    """
    if ax is None:
        fig, ax = plt.subplots()

    pts = as_points(points)
    ax.scatter(pts[:, 0], pts[:, 1], c='blue', alpha=0.7, label='Data')

    x_min, x_max = fit.domain
    x_grid = np.linspace(x_min, x_max, n_grid)
    kwargs.setdefault('label', f'Degree {fit.degree} fit (RMSE={fit.rmse:.3g})')
    ax.plot(x_grid, fit.evaluate(x_grid), 'r-', **kwargs)
    ax.set_xlabel('x')
    ax.set_ylabel('y')

    return ax
