"""Tests for point value objects and editing helpers."""

import numpy as np
import pytest

from curve_lab.geometry.editing import (
    Viewport,
    add_point,
    bounding_box,
    jitter_point,
    move_point,
    nearest_point_index,
    remove_point,
)
from curve_lab.geometry.points import ControlPointSet, CurveSample, Point2D, as_points


@pytest.fixture
def points():
    return np.array([[1.0, 1.0], [2.0, 3.0], [4.0, 2.0], [5.0, 4.0]])


class TestAsPoints:
    """Tests for point collection coercion."""

    def test_mixed_inputs(self):
        arr = as_points([Point2D(1, 2), {'x': 3, 'y': 4}, (5, 6)])
        np.testing.assert_array_equal(arr, [[1, 2], [3, 4], [5, 6]])

    def test_returns_copy(self, points):
        arr = as_points(points)
        arr[0, 0] = -1.0

        assert points[0, 0] == 1.0

    def test_bad_shape(self):
        with pytest.raises(ValueError):
            as_points(np.ones((3, 3)))

    def test_empty(self):
        assert as_points([]).shape == (0, 2)


class TestControlPointSet:
    """Tests for ControlPointSet."""

    def test_needs_two_points(self):
        with pytest.raises(ValueError):
            ControlPointSet([(0.0, 0.0)])

    def test_is_immutable_copy(self, points):
        cps = ControlPointSet(points)
        points[0] = [9.0, 9.0]

        assert cps[0] == Point2D(1.0, 1.0)
        with pytest.raises(ValueError):
            cps.points[0, 0] = 0.0

    def test_accessors(self, points):
        cps = ControlPointSet(points)

        assert len(cps) == 4
        assert cps.degree == 3
        np.testing.assert_array_equal(cps.x, [1.0, 2.0, 4.0, 5.0])
        assert list(cps)[1] == Point2D(2.0, 3.0)
        assert cps.to_dicts()[2] == {'x': 4.0, 'y': 2.0}

    def test_equality(self, points):
        assert ControlPointSet(points) == ControlPointSet(points.copy())
        assert ControlPointSet(points) != ControlPointSet(points[:3])

    def test_sorted_by_x(self):
        cps = ControlPointSet([(3.0, 0.0), (1.0, 1.0), (2.0, 2.0)])
        np.testing.assert_array_equal(cps.sorted_by_x().x, [1.0, 2.0, 3.0])


class TestCurveSample:
    """Tests for CurveSample."""

    def test_from_xy(self):
        sample = CurveSample.from_xy([0.0, 1.0], [2.0, 3.0])

        np.testing.assert_array_equal(sample.points, [[0.0, 2.0], [1.0, 3.0]])
        assert sample.to_dicts() == [{'x': 0.0, 'y': 2.0}, {'x': 1.0, 'y': 3.0}]


class TestEditing:
    """Tests for point editing operations."""

    def test_nearest_point(self, points):
        assert nearest_point_index(points, (4.2, 2.1)) == 2
        assert nearest_point_index(points, Point2D(0.0, 0.0)) == 0

    def test_nearest_point_tie_picks_first(self):
        assert nearest_point_index([(0.0, 0.0), (2.0, 0.0)], (1.0, 0.0)) == 0

    def test_move_point(self, points):
        moved = move_point(points, 1, (10.0, 10.0))

        np.testing.assert_array_equal(moved[1], [10.0, 10.0])
        np.testing.assert_array_equal(points[1], [2.0, 3.0])

    def test_move_point_bad_index(self, points):
        with pytest.raises(IndexError):
            move_point(points, 4, (0.0, 0.0))

    def test_add_point(self, points):
        added = add_point(points, {'x': 6.0, 'y': 1.0})

        assert len(added) == 5
        np.testing.assert_array_equal(added[-1], [6.0, 1.0])
        assert len(points) == 4

    def test_remove_point(self, points):
        removed = remove_point(points, 0)

        np.testing.assert_array_equal(removed, points[1:])

    def test_remove_point_minimum(self):
        with pytest.raises(ValueError):
            remove_point([(0.0, 0.0), (1.0, 1.0)], 0)

    def test_jitter_point(self, points):
        jittered = jitter_point(points, 2, amount=1.0, seed=0)
        offset = jittered[2] - points[2]

        assert np.all(np.abs(offset) <= 0.5)
        np.testing.assert_array_equal(np.delete(jittered, 2, axis=0),
                                      np.delete(points, 2, axis=0))

    def test_jitter_is_reproducible(self, points):
        np.testing.assert_array_equal(jitter_point(points, 0, seed=7),
                                      jitter_point(points, 0, seed=7))

    def test_bounding_box(self, points):
        lower, upper = bounding_box(points)

        np.testing.assert_array_equal(lower, [1.0, 1.0])
        np.testing.assert_array_equal(upper, [5.0, 4.0])


class TestViewport:
    """Tests for the screen mapping."""

    def test_round_trip(self, points):
        view = Viewport(width=400, height=300, scale=50.0, origin=(-1.0, -1.0))
        np.testing.assert_allclose(view.to_world(view.to_screen(points)), points)

    def test_y_axis_is_flipped(self):
        view = Viewport(width=100, height=100, scale=10.0)
        screen = view.to_screen([(0.0, 0.0), (0.0, 10.0)])

        np.testing.assert_allclose(screen, [[0.0, 100.0], [0.0, 0.0]])

    def test_clamp(self):
        view = Viewport(width=100, height=50)
        np.testing.assert_array_equal(view.clamp([(-5.0, 20.0), (150.0, 60.0)]),
                                      [[0.0, 20.0], [100.0, 50.0]])

    def test_fit(self, points):
        """Canvas is the point extent times scale plus a margin on each side."""
        view = Viewport.fit(points, scale=50.0, margin=50.0)

        assert view.width == 4 * 50 + 100
        assert view.height == 3 * 50 + 100
        screen = view.to_screen(points)
        assert np.all(screen >= 50.0 - 1e-9)
        assert np.all(screen[:, 0] <= view.width - 50.0 + 1e-9)

    def test_invalid(self):
        with pytest.raises(ValueError):
            Viewport(width=0, height=10)
