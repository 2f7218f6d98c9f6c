"""Tests for CurveConfig."""

import dataclasses
import json

import numpy as np
import pytest

from curve_lab.config import DEFAULT_CONFIG, CurveConfig
from curve_lab.curves.bezier import BezierCurve, interpolate_bezier, sample_bezier
from curve_lab.curves.least_squares import PolynomialFit, fit_polynomial
from curve_lab.curves.spline import NaturalCubicSpline
from curve_lab.errors import IllConditionedWarning, SingularMatrixError


class TestCurveConfig:
    """Tests for configuration defaults and loading."""

    def test_defaults(self):
        config = CurveConfig()

        assert config.bezier_step == 0.01
        assert config.domain_samples == 101
        assert config.singular_tolerance == 1e-12
        assert config.default_degree == 1

    def test_dict_round_trip(self):
        config = CurveConfig(bezier_step=0.05, domain_step=2.0)
        assert CurveConfig.from_dict(config.to_dict()) == config

    def test_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown config keys"):
            CurveConfig.from_dict({'bezier_stp': 0.1})

    def test_from_json(self, tmp_path):
        path = tmp_path / 'curves.json'
        path.write_text(json.dumps({'domain_samples': 201, 'default_degree': 3}))

        config = CurveConfig.from_json(path)

        assert config.domain_samples == 201
        assert config.default_degree == 3
        assert config.bezier_step == 0.01

    @pytest.mark.parametrize('kwargs', [
        {'bezier_step': 0.0},
        {'bezier_step': 1.5},
        {'domain_samples': 1},
        {'domain_step': -1.0},
        {'singular_tolerance': 0.0},
        {'default_degree': -1},
    ])
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            CurveConfig(**kwargs)

    def test_default_config_is_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.bezier_step = 0.5


@pytest.fixture
def four_points():
    return np.array([[0.0, 0.0], [1.0, 2.0], [2.0, 3.0], [3.0, 1.0]])


class TestConfigOverrides:
    """Tests for passing a config to the evaluators."""

    def test_bezier_step(self, four_points):
        coarse = CurveConfig(bezier_step=0.5)

        assert len(sample_bezier(four_points, config=coarse)) == 3
        assert len(BezierCurve(four_points).sample(config=coarse)) == 3
        assert len(sample_bezier(four_points)) == 101

    def test_explicit_step_wins(self, four_points):
        coarse = CurveConfig(bezier_step=0.5)
        assert len(sample_bezier(four_points, step=0.25, config=coarse)) == 5

    def test_domain_samples(self, four_points):
        config = CurveConfig(domain_samples=11)
        spline = NaturalCubicSpline.from_points(four_points)
        fit = PolynomialFit(degree=2, config=config).fit(
            four_points[:, 0], four_points[:, 1]
        )

        assert len(spline.sample(config=config)) == 11
        assert len(fit.sample()) == 11
        assert len(spline.sample()) == 101

    def test_domain_step(self, four_points):
        config = CurveConfig(domain_step=0.5)
        spline = NaturalCubicSpline.from_points(four_points)

        np.testing.assert_allclose(spline.sample(config=config).x,
                                   [0.0, 0.5, 1.0, 1.5, 2.0, 2.5, 3.0])

    def test_singular_tolerance(self):
        """A larger tolerance rejects a system the default accepts."""
        x = [0.0, 1.0, 2.0, 3.0]
        y = [0.0, 1.0, 4.0, 9.0]
        strict = CurveConfig(singular_tolerance=0.5)

        np.testing.assert_allclose(fit_polynomial(x, y, degree=2), [0.0, 0.0, 1.0],
                                   atol=1e-9)
        with pytest.raises(SingularMatrixError):
            fit_polynomial(x, y, degree=2, config=strict)
        with pytest.raises(SingularMatrixError):
            PolynomialFit(degree=2, config=strict).fit(x, y)

    def test_interpolation_tolerance(self, four_points):
        strict = CurveConfig(singular_tolerance=0.9)

        interpolate_bezier(four_points)
        with pytest.raises(SingularMatrixError):
            interpolate_bezier(four_points, config=strict)

    def test_condition_warning(self):
        config = CurveConfig(condition_warning=100.0)
        x = np.linspace(1.0, 1.1, 8)

        with pytest.warns(IllConditionedWarning):
            fit_polynomial(x, np.sin(x), degree=2, config=config)

    def test_default_degree(self, four_points):
        config = CurveConfig(default_degree=3)

        assert PolynomialFit(config=config).degree == 3
        assert PolynomialFit.from_points(four_points, config=config).degree == 3
        assert PolynomialFit().degree == 1

    def test_loaded_config_reaches_evaluators(self, tmp_path, four_points):
        path = tmp_path / 'curves.json'
        path.write_text(json.dumps({'bezier_step': 0.25, 'domain_samples': 7}))
        config = CurveConfig.from_json(path)

        assert len(sample_bezier(four_points, config=config)) == 5
        assert len(NaturalCubicSpline.from_points(four_points).sample(config=config)) == 7
