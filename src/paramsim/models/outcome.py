"""Outcome and summary records produced by a simulation run."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# Probability thresholds for display tiers
HIGH_PROBABILITY = 0.10
MEDIUM_PROBABILITY = 0.03


class ProbabilityTier(str, Enum):
    """Display tier of an outcome's probability."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class Outcome(BaseModel):
    """One distinct joint combination of rounded parameter values."""

    model_config = ConfigDict(frozen=True)

    values: dict[str, int] = Field(..., description="Rounded value per parameter name")
    key: tuple[int, ...] = Field(..., description="Rounded values in parameter order")
    count: int = Field(..., ge=0, description="Trials that produced this combination")
    probability: float = Field(..., ge=0.0, description="Current probability")
    original_probability: float | None = Field(
        default=None,
        description="Probability before interaction adjustment",
    )
    interaction_factor: float | None = Field(
        default=None,
        description="Multiplicative interaction adjustment applied",
    )

    @property
    def tier(self) -> ProbabilityTier:
        """Display tier for this outcome's probability."""
        if self.probability > HIGH_PROBABILITY:
            return ProbabilityTier.HIGH
        if self.probability > MEDIUM_PROBABILITY:
            return ProbabilityTier.MEDIUM
        return ProbabilityTier.LOW

    @property
    def interaction_effect(self) -> float | None:
        """Interaction adjustment as a signed percentage."""
        if self.interaction_factor is None:
            return None
        return (self.interaction_factor - 1.0) * 100

    @property
    def label(self) -> str:
        """Short label built from the first two parameter values."""
        items = list(self.values.items())
        label = ", ".join(f"{name}: {value}" for name, value in items[:2])
        if len(items) > 2:
            label += "..."
        return label


class ParameterAverage(BaseModel):
    """Probability-weighted average of one parameter across all outcomes."""

    model_config = ConfigDict(frozen=True)

    parameter: str
    average: float
    percentage: float = Field(..., description="Share of the total weighted sum (0-100)")


SensitivityReport = dict[str, float]
