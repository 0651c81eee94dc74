from .easing import CubicBezier, bezier_easing, linear
from .models import Ease
from .presets import PRESETS, UnknownEasing, get_preset, parse_easing

__all__ = [
    "CubicBezier",
    "Ease",
    "PRESETS",
    "UnknownEasing",
    "bezier_easing",
    "get_preset",
    "linear",
    "parse_easing",
]
