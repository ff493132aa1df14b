"""Exceptions and degenerate-case markers."""

from enum import Enum


class SimulationError(Exception):
    """Base class for simulation errors."""


class ConfigurationError(SimulationError, ValueError):
    """Invalid parameter definitions or run settings.

    Raised before any sampling starts, so no partial run occurs.
    """


class SimulationCancelled(SimulationError):
    """The caller's cancel token was set during a run."""


class SimulationFailedError(SimulationError):
    """Unexpected failure inside the computation phase of a run."""


class DegenerateCase(str, Enum):
    """Degenerate inputs absorbed with a safe substitute instead of failing."""

    ZERO_WIDTH_RANGE = "zero_width_range"
    ZERO_TOTAL_PROBABILITY = "zero_total_probability"
    ZERO_WEIGHTED_SUM = "zero_weighted_sum"
