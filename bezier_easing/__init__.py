"""Cubic Bezier easing curves: map progress x in [0, 1] to eased y."""

from .config import SolverConfig, load_config
from .motion import (
    PRESETS,
    CubicBezier,
    Ease,
    UnknownEasing,
    bezier_easing,
    get_preset,
    linear,
    parse_easing,
)

__version__ = "0.1.0"

__all__ = [
    "CubicBezier",
    "Ease",
    "PRESETS",
    "SolverConfig",
    "UnknownEasing",
    "bezier_easing",
    "get_preset",
    "linear",
    "load_config",
    "parse_easing",
]
