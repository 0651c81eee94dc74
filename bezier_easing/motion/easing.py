from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..config import DEFAULT_CONFIG, SolverConfig
from .solver import bezier_component, sample_table, solve_t

log = logging.getLogger(__name__)


def linear(u: float) -> float:
    if u <= 0.0:
        return 0.0
    if u >= 1.0:
        return 1.0
    return u


def _clamp01(v: float) -> float:
    return 0.0 if v < 0.0 else (1.0 if v > 1.0 else v)


@dataclass(frozen=True)
class CubicBezier:
    """Easing curve through (0,0), (p1x,p1y), (p2x,p2y), (1,1).

    p1x and p2x are clamped into [0, 1]; p1y and p2y may overshoot. The sample
    table is built once here and never changes, so a single instance can be
    evaluated from several threads without locking.

    With both x coordinates inside [0, 1], x(t) never decreases, so each u
    maps to a single t. Nothing checks this at evaluation time.
    """

    # Control points (x1, y1, x2, y2); start is (0,0) end is (1,1)
    p1x: float
    p1y: float
    p2x: float
    p2y: float
    config: SolverConfig = field(default=DEFAULT_CONFIG, repr=False)

    is_linear: bool = field(init=False)
    samples: Tuple[float, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "p1x", _clamp01(float(self.p1x)))
        object.__setattr__(self, "p1y", float(self.p1y))
        object.__setattr__(self, "p2x", _clamp01(float(self.p2x)))
        object.__setattr__(self, "p2y", float(self.p2y))

        is_linear = self.p1x == self.p1y and self.p2x == self.p2y
        object.__setattr__(self, "is_linear", is_linear)
        if is_linear:
            log.debug(f"{self!r} is the identity line; no sample table")
            object.__setattr__(self, "samples", ())
        else:
            object.__setattr__(self, "samples", sample_table(self.p1x, self.p2x, self.config))
            log.debug(f"{self!r} sampled at {len(self.samples)} points")

    def solve_t(self, u: float) -> float:
        """Return the curve parameter t whose x(t) equals ``u``."""
        if u <= 0.0:
            return 0.0
        if u >= 1.0:
            return 1.0
        return solve_t(u, self.samples, self.p1x, self.p2x, self.config)

    def ease(self, u: float) -> float:
        """Return y for a given u in [0,1], solving x(t) = u, then y(t).

        Inputs at or below 0 give exactly 0, at or above 1 exactly 1.
        """
        if u <= 0.0:
            return 0.0
        if u >= 1.0:
            return 1.0
        if self.is_linear:
            return u
        t = solve_t(u, self.samples, self.p1x, self.p2x, self.config)
        return bezier_component(t, self.p1y, self.p2y)

    evaluate = ease

    def __call__(self, u: float) -> float:
        return self.ease(u)

    @property
    def control_points(self) -> Tuple[float, float, float, float]:
        return (self.p1x, self.p1y, self.p2x, self.p2y)


def bezier_easing(
    x1: float, y1: float, x2: float, y2: float, config: Optional[SolverConfig] = None
) -> CubicBezier:
    """Build an easing function from the two free control points.

    The result is callable as ``f(u)`` and also exposes ``f.evaluate(u)``.
    """
    return CubicBezier(x1, y1, x2, y2, config or DEFAULT_CONFIG)
