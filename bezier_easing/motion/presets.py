"""Named easing curves and CSS-style easing strings."""
from __future__ import annotations

import re
from typing import Callable, Dict, Tuple

from .easing import CubicBezier, linear

ControlPoints = Tuple[float, float, float, float]


class UnknownEasing(ValueError):
    pass


PRESETS: Dict[str, ControlPoints] = {
    # CSS keywords
    "linear": (0.0, 0.0, 1.0, 1.0),
    "ease": (0.25, 0.1, 0.25, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
    # Penner curves, cubic approximations
    "ease-in-sine": (0.12, 0.0, 0.39, 0.0),
    "ease-out-sine": (0.61, 1.0, 0.88, 1.0),
    "ease-in-out-sine": (0.37, 0.0, 0.63, 1.0),
    "ease-in-quad": (0.11, 0.0, 0.5, 0.0),
    "ease-out-quad": (0.5, 1.0, 0.89, 1.0),
    "ease-in-out-quad": (0.45, 0.0, 0.55, 1.0),
    "ease-in-cubic": (0.32, 0.0, 0.67, 0.0),
    "ease-out-cubic": (0.33, 1.0, 0.68, 1.0),
    "ease-in-out-cubic": (0.65, 0.0, 0.35, 1.0),
    "ease-in-quart": (0.5, 0.0, 0.75, 0.0),
    "ease-out-quart": (0.25, 1.0, 0.5, 1.0),
    "ease-in-out-quart": (0.76, 0.0, 0.24, 1.0),
    "ease-in-quint": (0.64, 0.0, 0.78, 0.0),
    "ease-out-quint": (0.22, 1.0, 0.36, 1.0),
    "ease-in-out-quint": (0.83, 0.0, 0.17, 1.0),
    "ease-in-expo": (0.7, 0.0, 0.84, 0.0),
    "ease-out-expo": (0.16, 1.0, 0.3, 1.0),
    "ease-in-out-expo": (0.87, 0.0, 0.13, 1.0),
    "ease-in-circ": (0.55, 0.0, 1.0, 0.45),
    "ease-out-circ": (0.0, 0.55, 0.45, 1.0),
    "ease-in-out-circ": (0.85, 0.0, 0.15, 1.0),
    # Overshooting
    "ease-in-back": (0.36, 0.0, 0.66, -0.56),
    "ease-out-back": (0.34, 1.56, 0.64, 1.0),
    "ease-in-out-back": (0.68, -0.6, 0.32, 1.6),
}

_CAMEL_RE = re.compile(r"(?<=[a-z])(?=[A-Z])")
_NUMBER = r"\s*([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?)\s*"
_CUBIC_BEZIER_RE = re.compile(r"^cubic-bezier\(" + ",".join([_NUMBER] * 4) + r"\)$")


def normalize_name(name: str) -> str:
    """``easeInOut``, ``ease_in_out`` and ``EASE-IN-OUT`` all become ``ease-in-out``."""
    name = _CAMEL_RE.sub("-", name.strip())
    return name.replace("_", "-").replace(" ", "-").lower()


def preset_points(name: str) -> ControlPoints:
    key = normalize_name(name)
    try:
        return PRESETS[key]
    except KeyError:
        raise UnknownEasing(f"Unknown easing preset: {name!r}") from None


def get_preset(name: str) -> CubicBezier:
    return CubicBezier(*preset_points(name))


def parse_easing(text: str) -> Callable[[float], float]:
    """Turn ``"ease-out"`` or ``"cubic-bezier(0.68, -0.55, 0.265, 1.55)"`` into an easing function."""
    stripped = text.strip()
    m = _CUBIC_BEZIER_RE.match(stripped.lower())
    if m:
        return CubicBezier(*(float(g) for g in m.groups()))
    if stripped.lower().startswith("cubic-bezier"):
        raise UnknownEasing(f"Malformed cubic-bezier(): {text!r}")
    if normalize_name(stripped) == "linear":
        return linear
    return get_preset(stripped)
