"""Data models for parameter simulation."""

from .outcome import Outcome, ParameterAverage, ProbabilityTier, SensitivityReport
from .parameter import Parameter

__all__ = [
    "Outcome",
    "Parameter",
    "ParameterAverage",
    "ProbabilityTier",
    "SensitivityReport",
]
