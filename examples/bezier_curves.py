"""Bézier curve example.

Evaluates a Bézier curve from its control points, then solves the inverse
problem: find the cubic whose curve passes through four given points at
t = 0, 1/3, 2/3, 1. Both curves are sampled with the default step of 0.01.

Usage:
    python bezier_curves.py                        # Print results only
    python bezier_curves.py --save                 # Save plots to current directory
    python bezier_curves.py --save --outdir ./figs # Save plots to specific directory
"""

import argparse
from pathlib import Path

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from curve_lab.curves import (
    CUBIC_INTERPOLATION_PARAMETERS,
    BezierCurve,
    evaluate_bezier,
    interpolate_cubic_bezier,
)
from curve_lab.geometry import ControlPointSet, move_point
from curve_lab.utils import plot_control_points, plot_curve, polyline_path


def example_direct():
    """Direct evaluation in the Bernstein basis."""
    print("=" * 60)
    print("Bézier curve - direct evaluation")
    print("=" * 60)

    control = ControlPointSet([(50, 200), (150, 50), (250, 350), (350, 200)])
    curve = BezierCurve(control.points)
    sample = curve.sample()

    print(f"Degree: {curve.degree}")
    print(f"Samples: {len(sample)}")
    print(f"B(0)   = {curve(0.0)}  (P0 = {control.points[0]})")
    print(f"B(0.5) = {curve(0.5)}")
    print(f"B(1)   = {curve(1.0)}  (P3 = {control.points[-1]})")
    print(f"SVG path prefix: {polyline_path(sample)[:60]}...")

    # Dragging a control point is just a new evaluation on the edited points
    edited = move_point(control, 1, (150, 300))
    print(f"After moving P1: B(0.5) = {evaluate_bezier(edited, 0.5)}")

    return curve


def example_interpolation():
    """Cubic through four points via basis-matrix inversion."""
    print("\n" + "=" * 60)
    print("Bézier curve - interpolation through four points")
    print("=" * 60)

    targets = np.array([[0.0, 0.0], [1.0, 2.0], [2.0, 3.0], [3.0, 4.0]])
    control = interpolate_cubic_bezier(targets)
    reproduced = evaluate_bezier(control, CUBIC_INTERPOLATION_PARAMETERS)

    print("Target points:")
    print(targets)
    print("Computed control points:")
    print(control)

    error = np.max(np.abs(reproduced - targets))
    print(f"Max interpolation error: {error:.2e}")
    assert error < 1e-9, f"Interpolation error too large: {error}"

    return targets, BezierCurve(control)


def visualize(curve, targets, fitted):
    """Plot both examples side by side."""
    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 6))

    plot_curve(curve.sample(), ax1, color='blue', label='Bézier curve')
    plot_control_points(curve.control_points, ax1)
    ax1.set_title('Direct evaluation')
    ax1.legend()
    ax1.grid(True, alpha=0.3)

    plot_curve(fitted.sample(), ax2, color='blue', label='Interpolating cubic')
    plot_control_points(fitted.control_points, ax2, label='Computed control points')
    ax2.scatter(targets[:, 0], targets[:, 1], c='green', marker='s', zorder=4,
                label='Targets')
    ax2.set_title('Interpolation at t = 0, 1/3, 2/3, 1')
    ax2.legend()
    ax2.grid(True, alpha=0.3)

    return fig


def parse_args():
    parser = argparse.ArgumentParser(description="Bézier curve example")
    parser.add_argument('--save', action='store_true',
                        help='Save plots to files')
    parser.add_argument('--outdir', type=str, default='.',
                        help='Output directory for saved plots (default: current dir)')
    return parser.parse_args()


if __name__ == "__main__":
    args = parse_args()

    curve = example_direct()
    targets, fitted = example_interpolation()

    print("\n" + "=" * 60)
    print("All Bézier examples completed!")
    print("=" * 60)

    if args.save:
        fig = visualize(curve, targets, fitted)
        outdir = Path(args.outdir)
        outdir.mkdir(parents=True, exist_ok=True)
        fig.savefig(outdir / 'bezier_curves.png', dpi=150, bbox_inches='tight')
        print(f"\nFigure saved to {outdir.absolute()}")
