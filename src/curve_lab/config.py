"""Sampling and tolerance settings for the curve evaluators.

Every evaluator takes an optional config; None means DEFAULT_CONFIG. Configs
are frozen, so a loaded config is passed explicitly rather than installed
globally.
"""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class CurveConfig:
    """Sampling resolution and numerical tolerances.

    Attributes:
        bezier_step: Parameter step for sampling t over [0, 1].
        domain_samples: Number of x samples for function curves.
        domain_step: Explicit x step; overrides domain_samples when set.
        singular_tolerance: Equilibrated pivot size below which a matrix
            is treated as singular.
        condition_warning: Condition number above which the normal
            equations trigger an IllConditionedWarning.
        default_degree: Polynomial degree used when none is requested.
    """
    bezier_step: float = 0.01
    domain_samples: int = 101
    domain_step: float | None = None
    singular_tolerance: float = 1e-12
    condition_warning: float = 1e12
    default_degree: int = 1

    def __post_init__(self) -> None:
        if not 0 < self.bezier_step <= 1:
            raise ValueError(
                f"bezier_step must be in (0, 1], got {self.bezier_step}"
            )
        if self.domain_samples < 2:
            raise ValueError(
                f"domain_samples must be >= 2, got {self.domain_samples}"
            )
        if self.domain_step is not None and self.domain_step <= 0:
            raise ValueError(f"domain_step must be positive, got {self.domain_step}")
        if self.singular_tolerance <= 0 or self.condition_warning <= 0:
            raise ValueError("Tolerances must be positive")
        if self.default_degree < 0:
            raise ValueError("default_degree must be non-negative")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CurveConfig:
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown config keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str | Path) -> CurveConfig:
        """Load a config from a JSON file."""
        with open(path) as f:
            return cls.from_dict(json.load(f))


DEFAULT_CONFIG = CurveConfig()
