"""Monte Carlo parameter-outcome simulator."""

from paramsim.analysis import SensitivityAnalyzer, SimulationResults, SimulationRunner
from paramsim.config import InteractionStrategy, SimulationConfig
from paramsim.exceptions import (
    ConfigurationError,
    DegenerateCase,
    SimulationCancelled,
    SimulationError,
    SimulationFailedError,
)
from paramsim.models import Outcome, Parameter, ParameterAverage
from paramsim.observers import LoggingObserver, NullObserver, SimulationObserver

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DegenerateCase",
    "InteractionStrategy",
    "LoggingObserver",
    "NullObserver",
    "Outcome",
    "Parameter",
    "ParameterAverage",
    "SensitivityAnalyzer",
    "SimulationCancelled",
    "SimulationConfig",
    "SimulationError",
    "SimulationFailedError",
    "SimulationObserver",
    "SimulationResults",
    "SimulationRunner",
]
