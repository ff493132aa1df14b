"""Run configuration."""

from enum import Enum

from pydantic import BaseModel, Field


class InteractionStrategy(str, Enum):
    """How pairwise interaction strengths are generated."""

    RANDOM = "random"
    WEIGHT_SIMILARITY = "weight_similarity"


class SimulationConfig(BaseModel):
    """Settings for a full simulation run."""

    iterations: int = Field(
        default=1000,
        ge=1,
        description="Number of Monte Carlo trials for the main run",
    )
    sensitivity_iterations: int = Field(
        default=500,
        ge=1,
        description="Upper bound on trials per sensitivity pass",
    )
    run_sensitivity: bool = Field(
        default=True,
        description="Whether to compute per-parameter sensitivity scores",
    )
    seed: int | None = Field(
        default=None,
        ge=0,
        description="Base random seed (None = fresh entropy)",
    )
    interaction_strategy: InteractionStrategy = Field(
        default=InteractionStrategy.RANDOM,
        description="Interaction strength function",
    )
    interaction_floor: float = Field(
        default=0.1,
        gt=0.0,
        description="Lowest allowed interaction factor",
    )
    perturbation: float = Field(
        default=0.1,
        gt=0.0,
        le=1.0,
        description="Fraction of a range added on each side for sensitivity",
    )
    zero_span_widening: float = Field(
        default=1.0,
        gt=0.0,
        description="Widening applied to zero-width ranges for sensitivity",
    )
    domain_floor: float | None = Field(
        default=0.0,
        description="Lowest lower bound after widening (None = unclamped)",
    )

    def effective_sensitivity_iterations(self, iterations: int) -> int:
        """Trials per sensitivity pass for a main run of ``iterations``."""
        return min(iterations, self.sensitivity_iterations)
