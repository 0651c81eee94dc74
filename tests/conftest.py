"""Shared test fixtures."""

from __future__ import annotations

from typing import Callable

import pytest


def _poly(a1: float, a2: float) -> Callable[[float], float]:
    # Power-basis form, independent of the library's Bernstein form
    c = 3.0 * a1
    b = 3.0 * (a2 - a1) - c
    a = 1.0 - c - b
    return lambda t: ((a * t + b) * t + c) * t


@pytest.fixture
def reference_ease():
    """Slow but exact-enough easing: 100 bisection steps over the whole [0, 1]."""

    def ease(x1: float, y1: float, x2: float, y2: float, x: float) -> float:
        bx, by = _poly(x1, x2), _poly(y1, y2)
        lo, hi = 0.0, 1.0
        for _ in range(100):
            mid = (lo + hi) / 2
            if bx(mid) < x:
                lo = mid
            else:
                hi = mid
        return by((lo + hi) / 2)

    return ease


@pytest.fixture
def grid() -> list:
    """Progress values 0.00, 0.01, ... 1.00."""
    return [i / 100 for i in range(101)]
