"""Tests for the Parameter and Outcome models (paramsim.models)."""

import math

import pytest
from pydantic import ValidationError

from paramsim.exceptions import ConfigurationError
from paramsim.models import Outcome, Parameter, ProbabilityTier


def make_outcome(values, probability=0.5, factor=None):
    return Outcome(
        values=values,
        key=tuple(values.values()),
        count=1,
        probability=probability,
        interaction_factor=factor,
    )


class TestParameter:
    """Tests for Parameter validation and helpers."""

    def test_default_weight(self):
        """Weight defaults to 5."""
        assert Parameter(name="a", min=0, max=1).weight == 5

    @pytest.mark.parametrize("weight", [0, 11, -3])
    def test_weight_out_of_range(self, weight):
        """Weights outside 1..10 are rejected."""
        with pytest.raises(ValidationError):
            Parameter(name="a", min=0, max=1, weight=weight)

    def test_empty_name_rejected(self):
        """Names must be non-empty."""
        with pytest.raises(ValidationError):
            Parameter(name="", min=0, max=1)

    def test_non_finite_bounds_rejected(self):
        """NaN and infinite bounds are rejected."""
        with pytest.raises(ValidationError):
            Parameter(name="a", min=math.nan, max=1)
        with pytest.raises(ValidationError):
            Parameter(name="a", min=0, max=math.inf)

    def test_non_numeric_bounds_rejected(self):
        """Bounds must be numbers."""
        with pytest.raises(ValidationError):
            Parameter(name="a", min="low", max=1)

    def test_degenerate_range_allowed_on_model(self):
        """min == max is accepted by the model itself."""
        p = Parameter(name="a", min=3, max=3)
        assert p.span == 0

    def test_frozen(self):
        """Parameters cannot be modified after creation."""
        p = Parameter(name="a", min=0, max=1)
        with pytest.raises(ValidationError):
            p.min = 5

    def test_span_and_center(self):
        p = Parameter(name="a", min=2, max=8)
        assert p.span == 6
        assert p.center == 5

    def test_widened_returns_copy(self):
        """Widening leaves the original untouched."""
        p = Parameter(name="a", min=10, max=20)
        wide = p.widened(1.0)
        assert (wide.min, wide.max) == (9.0, 21.0)
        assert (p.min, p.max) == (10.0, 20.0)
        assert wide.weight == p.weight

    def test_widened_clamps_at_floor(self):
        """The lower bound is clamped at the floor."""
        wide = Parameter(name="a", min=0, max=10).widened(1.0, floor=0.0)
        assert wide.min == 0.0
        assert wide.max == 11.0

    def test_widened_below_floor_not_clamped(self):
        """A range that starts below the floor still widens downwards."""
        wide = Parameter(name="a", min=-10, max=-5).widened(0.5, floor=0.0)
        assert wide.min == -10.5
        assert wide.max == -4.5


class TestFromUserInput:
    """Tests for Parameter.from_user_input."""

    def test_defaults(self):
        """Blank fields fall back to the form defaults."""
        p = Parameter.from_user_input({"name": "  ", "min": "", "max": None})
        assert p.name == "Unnamed Parameter"
        assert p.min == 0.0
        assert p.max == 100.0
        assert p.weight == 5

    def test_string_values_parsed(self):
        p = Parameter.from_user_input({"name": "speed", "min": "2.5", "max": "7", "weight": "9"})
        assert p.name == "speed"
        assert p.min == 2.5
        assert p.max == 7.0
        assert p.weight == 9

    def test_name_is_stripped(self):
        assert Parameter.from_user_input({"name": "  cost "}).name == "cost"

    def test_invalid_value_raises_configuration_error(self):
        """Unparseable input becomes a ConfigurationError."""
        with pytest.raises(ConfigurationError):
            Parameter.from_user_input({"name": "a", "min": "abc", "max": 3})

    def test_invalid_weight_raises_configuration_error(self):
        with pytest.raises(ConfigurationError):
            Parameter.from_user_input({"name": "a", "min": 0, "max": 3, "weight": 20})


class TestOutcome:
    """Tests for Outcome display helpers."""

    @pytest.mark.parametrize(
        "probability, tier",
        [
            (0.5, ProbabilityTier.HIGH),
            (0.11, ProbabilityTier.HIGH),
            (0.10, ProbabilityTier.MEDIUM),
            (0.05, ProbabilityTier.MEDIUM),
            (0.03, ProbabilityTier.LOW),
            (0.0, ProbabilityTier.LOW),
        ],
    )
    def test_tier(self, probability, tier):
        assert make_outcome({"a": 1}, probability=probability).tier == tier

    def test_interaction_effect(self):
        """Interaction effect is the factor expressed as a signed percentage."""
        assert make_outcome({"a": 1}).interaction_effect is None
        assert make_outcome({"a": 1}, factor=1.05).interaction_effect == pytest.approx(5.0)
        assert make_outcome({"a": 1}, factor=0.9).interaction_effect == pytest.approx(-10.0)

    def test_label_two_parameters(self):
        assert make_outcome({"a": 1, "b": 2}).label == "a: 1, b: 2"

    def test_label_truncates(self):
        """More than two parameters are elided."""
        assert make_outcome({"a": 1, "b": 2, "c": 3}).label == "a: 1, b: 2..."
