from __future__ import annotations

import logging
import os
from dataclasses import dataclass

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolverConfig:
    # Sample table
    sample_count: int = 11             # t = 0.0, 0.1, ... 1.0

    # Newton-Raphson
    newton_iterations: int = 8
    newton_min_slope: float = 1e-3     # below this dx/dt, bisect instead

    # Convergence
    precision: float = 1e-7            # residual |x(t) - x| accepted as solved

    # Bisection fallback
    subdivision_max_iterations: int = 16

    def __post_init__(self) -> None:
        if self.sample_count < 2:
            raise ValueError("sample_count must be at least 2")
        if self.newton_iterations < 0 or self.subdivision_max_iterations < 0:
            raise ValueError("iteration counts must not be negative")
        if self.newton_min_slope <= 0:
            raise ValueError("newton_min_slope must be positive")
        if self.precision <= 0:
            raise ValueError("precision must be positive")

    @property
    def sample_step(self) -> float:
        return 1.0 / (self.sample_count - 1)


DEFAULT_CONFIG = SolverConfig()


_ENV_OVERRIDES = (
    ("BEZIER_SAMPLE_COUNT", "sample_count", int),
    ("BEZIER_NEWTON_ITERATIONS", "newton_iterations", int),
    ("BEZIER_NEWTON_MIN_SLOPE", "newton_min_slope", float),
    ("BEZIER_PRECISION", "precision", float),
    ("BEZIER_SUBDIVISION_ITERATIONS", "subdivision_max_iterations", int),
)


def load_config() -> SolverConfig:
    """Return the solver defaults with any BEZIER_* environment overrides applied."""
    values = {}
    for env_name, field_name, cast in _ENV_OVERRIDES:
        raw = os.getenv(env_name)
        if raw is None:
            continue
        values[field_name] = cast(raw)
        log.debug(f"{field_name} overridden from {env_name}={raw}")
    return SolverConfig(**values)
