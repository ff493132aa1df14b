"""Monte Carlo outcome generation."""

import logging

import numpy as np

from paramsim.exceptions import ConfigurationError
from paramsim.models import Outcome, Parameter

logger = logging.getLogger(__name__)


def round_half_up(values: np.ndarray) -> np.ndarray:
    """Round to the nearest integer with halves rounded up.

    The result keeps a float dtype so magnitudes beyond the int64 range
    stay exact; convert element-wise with ``int()`` when building keys.
    """
    return np.floor(values + 0.5)


class OutcomeGenerator:
    """Samples parameters uniformly and counts identical joint outcomes."""

    def __init__(self, rng: np.random.Generator | None = None):
        """Initialize the generator.

        Args:
            rng: Random number generator
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def sample(self, parameters: list[Parameter], iterations: int) -> np.ndarray:
        """Draw rounded values for every trial.

        Args:
            parameters: Parameters to sample, in key order
            iterations: Number of trials

        Returns:
            Array of integral values, shape (iterations, len(parameters))
        """
        lows = np.array([p.min for p in parameters], dtype=float)
        highs = np.array([p.max for p in parameters], dtype=float)
        draws = self.rng.uniform(lows, highs, size=(iterations, len(parameters)))
        return round_half_up(draws)

    def generate(self, parameters: list[Parameter], iterations: int) -> list[Outcome]:
        """Run independent trials and aggregate them into outcomes.

        Args:
            parameters: Parameters to sample
            iterations: Number of trials (>= 1)

        Returns:
            Outcomes sorted by probability (descending), ties in first-seen order

        Raises:
            ConfigurationError: If there are no parameters or no iterations
        """
        if not parameters:
            raise ConfigurationError("At least one parameter is required")
        if iterations < 1:
            raise ConfigurationError(f"Iterations must be at least 1, got {iterations}")

        samples = self.sample(parameters, iterations)
        rows, first_seen, counts = np.unique(
            samples, axis=0, return_index=True, return_counts=True,
        )

        # Most frequent first, earlier first appearance breaks ties
        order = np.lexsort((first_seen, -counts))
        names = [p.name for p in parameters]

        outcomes = []
        for idx in order:
            key = tuple(int(v) for v in rows[idx])
            count = int(counts[idx])
            outcomes.append(Outcome(
                values=dict(zip(names, key)),
                key=key,
                count=count,
                probability=count / iterations,
            ))

        logger.debug(
            "Sampled %d parameters x %d iterations into %d outcomes",
            len(parameters), iterations, len(outcomes),
        )
        return outcomes
