"""Tests for bezier_easing.motion.models: the Ease pydantic model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from bezier_easing.motion.easing import CubicBezier, linear
from bezier_easing.motion.models import Ease


class TestValidation:
    def test_default_is_linear(self):
        assert Ease().type == "linear"

    def test_cubic_bezier_requires_points(self):
        with pytest.raises(ValidationError, match="requires p"):
            Ease(type="cubic-bezier")

    def test_cubic_bezier_requires_four_points(self):
        with pytest.raises(ValidationError):
            Ease(type="cubic-bezier", p=[0.1, 0.2, 0.3])

    def test_preset_requires_name(self):
        with pytest.raises(ValidationError, match="requires name"):
            Ease(type="preset")

    def test_unknown_preset(self):
        with pytest.raises(ValidationError, match="Unknown preset"):
            Ease(type="preset", name="jiggle")

    def test_unknown_type(self):
        with pytest.raises(ValidationError):
            Ease(type="spring")

    def test_from_json(self):
        e = Ease.model_validate_json('{"type": "cubic-bezier", "p": [0.42, 0, 0.58, 1]}')
        assert e.p == [0.42, 0.0, 0.58, 1.0]


class TestToFunction:
    def test_linear(self):
        assert Ease().to_function() is linear

    def test_cubic_bezier(self):
        fn = Ease(type="cubic-bezier", p=[0.42, 0.0, 0.58, 1.0]).to_function()
        assert isinstance(fn, CubicBezier)
        assert fn(0.5) == pytest.approx(0.5, abs=1e-6)

    def test_preset_any_spelling(self):
        fn = Ease(type="preset", name="easeInOut").to_function()
        assert fn == CubicBezier(0.42, 0.0, 0.58, 1.0)

    def test_round_trip_through_dump(self):
        e = Ease(type="preset", name="ease-out")
        again = Ease(**e.model_dump())
        assert again.to_function() == e.to_function()
