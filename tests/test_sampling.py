"""Tests for evaluation grids."""

import numpy as np
import pytest

from curve_lab.curves.sampling import parameter_grid, sample_domain


class TestParameterGrid:
    """Tests for t grids over [0, 1]."""

    def test_default_step(self):
        t = parameter_grid()

        assert len(t) == 101
        assert t[0] == 0.0
        assert t[-1] == 1.0
        assert np.all(np.diff(t) > 0)

    def test_uneven_step_still_ends_at_one(self):
        np.testing.assert_allclose(parameter_grid(0.3), [0.0, 0.3, 0.6, 0.9, 1.0])

    def test_whole_interval(self):
        np.testing.assert_array_equal(parameter_grid(1.0), [0.0, 1.0])

    @pytest.mark.parametrize('step', [0.0, -0.1, 1.5])
    def test_invalid_step(self, step):
        with pytest.raises(ValueError):
            parameter_grid(step)


class TestSampleDomain:
    """Tests for x grids."""

    def test_count(self):
        xs = sample_domain(0.0, 2.0, n=5)
        np.testing.assert_allclose(xs, [0.0, 0.5, 1.0, 1.5, 2.0])

    def test_step_includes_endpoint(self):
        np.testing.assert_allclose(sample_domain(0.0, 2.5, step=1.0), [0.0, 1.0, 2.0, 2.5])

    def test_step_exact_division(self):
        assert len(sample_domain(0.0, 1.0, step=0.1)) == 11

    def test_zero_width(self):
        np.testing.assert_array_equal(sample_domain(3.0, 3.0), [3.0])

    def test_reversed_domain(self):
        with pytest.raises(ValueError):
            sample_domain(1.0, 0.0)

    def test_invalid_count(self):
        with pytest.raises(ValueError):
            sample_domain(0.0, 1.0, n=1)
