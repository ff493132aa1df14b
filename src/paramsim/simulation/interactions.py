"""Pairwise parameter interaction model.

Each pair of parameters gets a coupling strength derived from their weights.
An outcome's probability is then scaled by how far both parameters of every
pair sit from the middle of their ranges: extreme settings interact more
strongly than central ones.
"""

import logging
import math
from typing import Callable

import numpy as np

from paramsim.config import InteractionStrategy
from paramsim.exceptions import DegenerateCase
from paramsim.models import Outcome, Parameter
from paramsim.observers import SimulationObserver, report_degenerate

logger = logging.getLogger(__name__)

# Maximum magnitude of a strength before weight scaling
MAX_STRENGTH = 0.2
DEFAULT_FLOOR = 0.1

StrengthFunction = Callable[[Parameter, Parameter, np.random.Generator], float]


def weight_factor(first: Parameter, second: Parameter) -> float:
    """Scale factor growing with the combined weight of a pair (0.1 to 1.0)."""
    return (first.weight + second.weight) / 20


def random_strength(first: Parameter, second: Parameter, rng: np.random.Generator) -> float:
    """Uniform strength in [-0.2, 0.2] scaled by the pair's weight factor."""
    return rng.uniform(-MAX_STRENGTH, MAX_STRENGTH) * weight_factor(first, second)


def weight_similarity_strength(
    first: Parameter,
    second: Parameter,
    rng: np.random.Generator,
) -> float:
    """Deterministic strength: positive for similar weights, negative for divergent ones.

    A weight difference of 0 gives +0.2, a difference of 9 gives -0.2, both
    scaled by the weight factor. ``rng`` is ignored.
    """
    divergence = abs(first.weight - second.weight) / 9
    return MAX_STRENGTH * math.cos(math.pi * divergence) * weight_factor(first, second)


STRENGTH_FUNCTIONS: dict[InteractionStrategy, StrengthFunction] = {
    InteractionStrategy.RANDOM: random_strength,
    InteractionStrategy.WEIGHT_SIMILARITY: weight_similarity_strength,
}


class InteractionMatrixBuilder:
    """Builds symmetric coupling matrices between parameters."""

    def __init__(
        self,
        strength: StrengthFunction | InteractionStrategy = InteractionStrategy.RANDOM,
        rng: np.random.Generator | None = None,
    ):
        """Initialize the builder.

        Args:
            strength: Strength function, or the strategy naming one
            rng: Random number generator passed to the strength function
        """
        if isinstance(strength, InteractionStrategy):
            strength = STRENGTH_FUNCTIONS[strength]
        self.strength = strength
        self.rng = rng if rng is not None else np.random.default_rng()

    def build(self, parameters: list[Parameter]) -> np.ndarray:
        """Compute a fresh n x n interaction matrix.

        The diagonal is zero. Each unordered pair is evaluated once and the
        value mirrored, so the matrix is symmetric.
        """
        n = len(parameters)
        matrix = np.zeros((n, n))
        for i in range(n):
            for j in range(i + 1, n):
                value = float(self.strength(parameters[i], parameters[j], self.rng))
                matrix[i, j] = value
                matrix[j, i] = value
        return matrix


def apply_interactions(
    outcomes: list[Outcome],
    parameters: list[Parameter],
    matrix: np.ndarray,
    floor: float = DEFAULT_FLOOR,
    observer: SimulationObserver | None = None,
) -> list[Outcome]:
    """Rescale outcome probabilities by pairwise interaction effects.

    For every pair i < j the factor gains ``matrix[i, j] * dev_i * dev_j``
    where ``dev`` is the distance of the value's normalized position from
    0.5. Pairs involving a zero-width range contribute nothing. The factor
    never drops below ``floor``.

    Args:
        outcomes: Outcomes from the generator
        parameters: Parameters in the same order as the outcome keys
        matrix: Interaction matrix from InteractionMatrixBuilder.build
        floor: Lowest allowed interaction factor
        observer: Optional stage observer

    Returns:
        New outcomes carrying original_probability and interaction_factor
    """
    n = len(parameters)
    if matrix.shape != (n, n):
        raise ValueError(f"Interaction matrix shape {matrix.shape} does not match {n} parameters")
    if not outcomes:
        return []

    lows = np.array([p.min for p in parameters], dtype=float)
    spans = np.array([p.span for p in parameters], dtype=float)
    zero_width = spans == 0

    for idx in np.flatnonzero(zero_width):
        report_degenerate(
            observer,
            DegenerateCase.ZERO_WIDTH_RANGE,
            f"parameter {parameters[idx].name!r} has a zero-width range; "
            "its interaction terms are skipped",
        )

    values = np.array([o.key for o in outcomes], dtype=float)
    safe_spans = np.where(zero_width, 1.0, spans)
    deviations = np.abs((values - lows) / safe_spans - 0.5)
    deviations[:, zero_width] = 0.0

    pairs = np.triu(matrix, k=1)
    factors = 1.0 + np.einsum("ki,ij,kj->k", deviations, pairs, deviations)
    factors = np.maximum(factors, floor)

    adjusted = [
        outcome.model_copy(update={
            "probability": outcome.probability * float(factor),
            "original_probability": outcome.probability,
            "interaction_factor": float(factor),
        })
        for outcome, factor in zip(outcomes, factors)
    ]

    if observer is not None:
        observer.on_interactions_applied(adjusted, matrix)
    return adjusted
