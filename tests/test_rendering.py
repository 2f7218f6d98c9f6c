"""Tests for SVG path output and matplotlib rendering."""

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np
import pytest

from curve_lab.curves.bezier import sample_bezier
from curve_lab.curves.least_squares import PolynomialFit
from curve_lab.utils.svg import cubic_bezier_path, midpoint_cubic_path, polyline_path
from curve_lab.utils.visualization import plot_control_points, plot_curve, plot_polynomial_fit


class TestSvgPaths:
    """Tests for SVG path strings."""

    def test_polyline(self):
        path = polyline_path([(0, 0), (10, 5.5), (20, 0)])
        assert path == "M 0 0 L 10 5.5 L 20 0"

    def test_polyline_too_short(self):
        assert polyline_path([(1, 1)]) == ''
        assert polyline_path([]) == ''

    def test_cubic(self):
        path = cubic_bezier_path((0, 0), (1, 2), (3, 2), (4, 0))
        assert path == "M 0 0 C 1 2, 3 2, 4 0"

    def test_midpoint_cubic(self):
        """Controls are the midpoints of the first and last pairs."""
        path = midpoint_cubic_path([(0, 0), (2, 4), (4, 4), (6, 0)])
        assert path == "M 0 0 C 1 2, 5 2, 6 0"

    def test_midpoint_cubic_needs_four_points(self):
        assert midpoint_cubic_path([(0, 0)]) == ''
        with pytest.raises(ValueError):
            midpoint_cubic_path([(0, 0), (1, 1), (2, 0)])

    def test_sample_to_path(self):
        """A sampled curve renders as one move plus a line per segment."""
        sample = sample_bezier([(0, 0), (1, 2), (2, 0)], step=0.1)
        path = polyline_path(sample)

        assert path.startswith("M 0 0")
        assert path.count(" L ") == len(sample) - 1


class TestVisualization:
    """Smoke tests for matplotlib helpers."""

    def teardown_method(self):
        plt.close('all')

    def test_plot_curve(self):
        sample = sample_bezier([(0, 0), (1, 2), (2, 0)])
        ax = plot_curve(sample, color='blue')

        line = ax.get_lines()[0]
        np.testing.assert_allclose(line.get_xdata(), sample.x)

    def test_plot_control_points(self):
        fig, ax = plt.subplots()
        returned = plot_control_points([(0, 0), (1, 2), (2, 0)], ax=ax)

        assert returned is ax
        assert len(ax.collections) == 1
        assert len(ax.texts) == 3

    def test_plot_polynomial_fit(self):
        points = np.array([[0.0, 1.0], [1.0, 2.0], [2.0, 2.5], [3.0, 5.0]])
        fit = PolynomialFit.from_points(points, degree=2)

        ax = plot_polynomial_fit(fit, points)

        assert 'Degree 2' in ax.get_lines()[0].get_label()
