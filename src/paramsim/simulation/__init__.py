"""Simulation engine components."""

from .generator import OutcomeGenerator
from .interactions import (
    InteractionMatrixBuilder,
    apply_interactions,
    random_strength,
    weight_similarity_strength,
)
from .normalize import normalize, sort_by_probability

__all__ = [
    "InteractionMatrixBuilder",
    "OutcomeGenerator",
    "apply_interactions",
    "normalize",
    "random_strength",
    "sort_by_probability",
    "weight_similarity_strength",
]
