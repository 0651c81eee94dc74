"""Numeric inversion of the unit cubic Bezier x(t).

Every function here is pure: the sample table, the bracket and the solver
settings are passed in explicitly, so one table can be read by any number of
threads at once.
"""
from __future__ import annotations

import logging
from typing import NamedTuple, Optional, Sequence, Tuple

from ..config import DEFAULT_CONFIG, SolverConfig

log = logging.getLogger(__name__)


class Bracket(NamedTuple):
    lo: float
    hi: float
    guess: float


def bezier_component(t: float, a1: float, a2: float) -> float:
    # B(t) = 3*(1-t)^2*t*a1 + 3*(1-t)*t^2*a2 + t^3, endpoints fixed at 0 and 1
    mt = 1 - t
    return 3 * mt * mt * t * a1 + 3 * mt * t * t * a2 + t ** 3


def bezier_slope(t: float, a1: float, a2: float) -> float:
    """Derivative dB/dt of :func:`bezier_component`."""
    mt = 1 - t
    return 3 * mt * mt * a1 + 6 * mt * t * (a2 - a1) + 3 * t * t * (1 - a2)


def sample_table(x1: float, x2: float, cfg: SolverConfig = DEFAULT_CONFIG) -> Tuple[float, ...]:
    """x(t) at ``cfg.sample_count`` evenly spaced t values, t=0 and t=1 included."""
    last = cfg.sample_count - 1
    return tuple(bezier_component(i / last, x1, x2) for i in range(last + 1))


def locate_bracket(samples: Sequence[float], x: float) -> Bracket:
    """Find the table interval whose sampled x values straddle ``x``.

    The guess is a linear interpolation inside that interval. Targets outside
    the table fall into the first or last interval. An empty table brackets
    the whole [0, 1] range.
    """
    if len(samples) < 2:
        return Bracket(0.0, 1.0, min(max(x, 0.0), 1.0))

    last = len(samples) - 1
    i = 0
    while i < last - 1 and samples[i + 1] <= x:
        i += 1

    lo_x, hi_x = samples[i], samples[i + 1]
    span = hi_x - lo_x
    dist = (x - lo_x) / span if span > 0 else 0.0
    dist = min(max(dist, 0.0), 1.0)

    lo = i / last
    hi = (i + 1) / last
    return Bracket(lo, hi, lo + dist * (hi - lo))


def newton_refine(
    x: float, bracket: Bracket, x1: float, x2: float, cfg: SolverConfig = DEFAULT_CONFIG
) -> Optional[float]:
    """Newton-Raphson from ``bracket.guess``.

    Returns t once the residual is below ``cfg.precision`` or the iteration
    budget runs out. Returns None when the slope flattens out or an iterate
    would leave the bracket; the caller should bisect instead.
    """
    t = bracket.guess
    for _ in range(cfg.newton_iterations):
        residual = bezier_component(t, x1, x2) - x
        if abs(residual) < cfg.precision:
            return t
        slope = bezier_slope(t, x1, x2)
        if abs(slope) < cfg.newton_min_slope:
            return None
        nxt = t - residual / slope
        if nxt < bracket.lo or nxt > bracket.hi:
            return None
        t = nxt
    return t


def bisect(
    x: float, bracket: Bracket, x1: float, x2: float, cfg: SolverConfig = DEFAULT_CONFIG
) -> float:
    """Binary subdivision of ``bracket``, assuming x(t) increases over it."""
    lo, hi = bracket.lo, bracket.hi
    for _ in range(cfg.subdivision_max_iterations):
        t = lo + (hi - lo) / 2
        residual = bezier_component(t, x1, x2) - x
        if abs(residual) < cfg.precision or hi - lo < cfg.precision:
            return t
        if residual > 0:
            hi = t
        else:
            lo = t
    log.debug("Bisection budget exhausted for x=%r, bracket [%r, %r]", x, lo, hi)
    return lo + (hi - lo) / 2


def solve_t(
    x: float, samples: Sequence[float], x1: float, x2: float, cfg: SolverConfig = DEFAULT_CONFIG
) -> float:
    """Return t such that x(t) == x, to within the configured precision."""
    bracket = locate_bracket(samples, x)
    t = newton_refine(x, bracket, x1, x2, cfg)
    if t is None:
        log.debug("Newton abandoned for x=%r; bisecting [%r, %r]", x, bracket.lo, bracket.hi)
        t = bisect(x, bracket, x1, x2, cfg)
    return t
