"""Run orchestration, aggregation and sensitivity analysis."""

from .aggregate import aggregate, winner
from .runner import SimulationResults, SimulationRunner, validate_parameters
from .sensitivity import SensitivityAnalyzer, total_variation

__all__ = [
    "SensitivityAnalyzer",
    "SimulationResults",
    "SimulationRunner",
    "aggregate",
    "total_variation",
    "validate_parameters",
    "winner",
]
