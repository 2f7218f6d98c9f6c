"""Interpolation vs. approximation example.

Fits the same control points two ways: a natural cubic spline that passes
through every point, and a least-squares polynomial that only approximates
them. Points are given in curve units and drawn at 50 pixels per unit, so
both curves are sampled one pixel apart along x.

A random nudge of one point (the "degree of change") shows that each edit
is handled by simply refitting from scratch.

Usage:
    python spline_vs_least_squares.py                         # Print results only
    python spline_vs_least_squares.py --degree 4              # Choose polynomial degree
    python spline_vs_least_squares.py --save --outdir ./figs  # Save plots
"""

import argparse
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from curve_lab import CurveError, NaturalCubicSpline, PolynomialFit
from curve_lab.geometry import Viewport, jitter_point, nearest_point_index
from curve_lab.utils import plot_control_points, plot_curve

SCALE = 50.0


def fit_curves(points, degree):
    """Spline and polynomial through the scaled points, sampled per pixel."""
    pixels = points * SCALE
    spline = NaturalCubicSpline.from_points(pixels)
    poly = PolynomialFit.from_points(pixels, degree=degree)
    return spline, poly, spline.sample(step=1.0), poly.sample(step=1.0)


def run(points, degree, change, seed):
    print("=" * 60)
    print(f"Spline vs. least squares (degree {degree})")
    print("=" * 60)

    view = Viewport.fit(points, scale=SCALE)
    print(f"Canvas: {view.width:.0f} x {view.height:.0f} px")

    spline, poly, spline_sample, poly_sample = fit_curves(points, degree)
    print(f"Spline samples:     {len(spline_sample)}")
    print(f"Polynomial RMSE:    {poly.rmse:.3f} px")

    # Simulate a click near the third point
    idx = nearest_point_index(points, points[2] + 0.1)
    edited = jitter_point(points, idx, amount=change, seed=seed)
    print(f"Nudged point {idx}: {points[idx]} -> {edited[idx]}")

    try:
        _, poly_edited, _, _ = fit_curves(edited, degree)
        print(f"Polynomial RMSE after edit: {poly_edited.rmse:.3f} px")
    except CurveError as e:
        print(f"Refit failed: {e}")

    return spline_sample, poly_sample


def visualize(points, spline_sample, poly_sample, degree):
    fig, ax = plt.subplots(figsize=(10, 6))

    plot_curve(spline_sample, ax, color='blue', label='Natural cubic spline')
    plot_curve(poly_sample, ax, color='red', label=f'Least squares, degree {degree}')
    plot_control_points(points * SCALE, ax, polygon=False, color='black')

    ax.set_title('Interpolation vs. approximation')
    ax.legend()
    ax.grid(True, alpha=0.3)

    return fig


def parse_args():
    parser = argparse.ArgumentParser(description="Spline vs. least-squares example")
    parser.add_argument('--degree', type=int, default=3,
                        help='Least-squares polynomial degree (default: 3)')
    parser.add_argument('--change', type=float, default=1.0,
                        help='Size of the random nudge applied to one point')
    parser.add_argument('--seed', type=int, default=42,
                        help='Random seed for the nudge')
    parser.add_argument('--save', action='store_true',
                        help='Save plots to files')
    parser.add_argument('--outdir', type=str, default='.',
                        help='Output directory for saved plots (default: current dir)')
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    points = np.array([
        [1.0, 1.0],
        [2.0, 3.0],
        [4.0, 2.0],
        [5.0, 4.0],
        [7.0, 1.5],
        [8.0, 3.0],
    ])

    spline_sample, poly_sample = run(points, args.degree, args.change, args.seed)

    print("\n" + "=" * 60)
    print("Example completed!")
    print("=" * 60)

    if args.save:
        fig = visualize(points, spline_sample, poly_sample, args.degree)
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        fig.savefig(outdir / 'spline_vs_least_squares.png', dpi=150, bbox_inches='tight')
        print(f"\nFigure saved to {outdir.absolute()}")
