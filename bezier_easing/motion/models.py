from __future__ import annotations

from typing import Callable, Literal, Optional
from pydantic import BaseModel, Field, model_validator

from .easing import CubicBezier, linear
from .presets import PRESETS, normalize_name


class Ease(BaseModel):
    type: Literal["linear", "cubic-bezier", "preset"] = "linear"
    p: Optional[list[float]] = Field(default=None, description="Bezier control points [x1,y1,x2,y2]")
    name: Optional[str] = Field(default=None, description="Preset name, e.g. 'ease-in-out'")

    @model_validator(mode="after")
    def validate_curve(self):
        if self.type == "cubic-bezier":
            if not self.p or len(self.p) != 4:
                raise ValueError("cubic-bezier requires p=[x1,y1,x2,y2]")
        elif self.type == "preset":
            if not self.name:
                raise ValueError("preset requires name")
            if normalize_name(self.name) not in PRESETS:
                raise ValueError(f"Unknown preset '{self.name}'")
        return self

    def to_function(self) -> Callable[[float], float]:
        if self.type == "cubic-bezier":
            x1, y1, x2, y2 = self.p  # type: ignore
            return CubicBezier(x1, y1, x2, y2)
        elif self.type == "preset":
            return CubicBezier(*PRESETS[normalize_name(self.name)])  # type: ignore
        else:
            return linear
