"""Evaluation grids for parametric and function curves."""

from __future__ import annotations

import numpy as np


def parameter_grid(step: float = 0.01) -> np.ndarray:
    """Parameter values t = 0, step, 2*step, ..., 1 (1 always included).

    Args:
        step: Spacing in (0, 1]. The default gives 101 samples.

    Returns:
        Increasing array of t values starting at 0 and ending at 1.
    """
    if not 0 < step <= 1:
        raise ValueError(f"step must be in (0, 1], got {step}")

    # Round to avoid losing the last sample to floating error (1/0.01 = 100.000...01)
    n_steps = int(np.ceil(round(1.0 / step, 9)))
    t = np.minimum(np.arange(n_steps + 1) * step, 1.0)
    t[-1] = 1.0
    return t


def sample_domain(
    x_min: float,
    x_max: float,
    n: int | None = None,
    step: float | None = None
) -> np.ndarray:
    """Inclusive grid over [x_min, x_max].

    Either n (number of samples) or step (spacing) may be given; step wins
    when both are. A zero-width domain yields the single value x_min.

    Raises:
        ValueError: If x_max < x_min, n < 2 or step <= 0.
    """
    if x_max < x_min:
        raise ValueError(f"Empty domain: [{x_min}, {x_max}]")
    if x_max == x_min:
        return np.array([float(x_min)])

    if step is not None:
        if step <= 0:
            raise ValueError(f"step must be positive, got {step}")
        n_steps = int(np.floor(round((x_max - x_min) / step, 9)))
        grid = np.minimum(x_min + np.arange(n_steps + 1) * step, x_max)
        if grid[-1] < x_max:
            grid = np.append(grid, x_max)
        return grid

    n = 101 if n is None else n
    if n < 2:
        raise ValueError(f"n must be >= 2, got {n}")
    return np.linspace(x_min, x_max, n)
