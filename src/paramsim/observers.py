"""Stage observers for simulation runs.

An observer receives one callback per completed stage plus a callback for
every degenerate input that was absorbed with a substitute value. The
engine calls the methods of whatever observer it is given and never
inspects the result, so instrumentation stays out of the algorithms.

    on_outcomes_generated(outcomes, iterations)
    on_interactions_applied(outcomes, matrix)
    on_normalized(outcomes)
    on_aggregated(averages)
    on_sensitivity_pass(parameter, score)
    on_degenerate(case, detail)
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

import numpy as np

from paramsim.exceptions import DegenerateCase
from paramsim.models import Outcome, ParameterAverage

logger = logging.getLogger(__name__)


@runtime_checkable
class SimulationObserver(Protocol):
    """Protocol for objects notified as a run progresses."""

    def on_outcomes_generated(self, outcomes: list[Outcome], iterations: int) -> None: ...

    def on_interactions_applied(self, outcomes: list[Outcome], matrix: np.ndarray) -> None: ...

    def on_normalized(self, outcomes: list[Outcome]) -> None: ...

    def on_aggregated(self, averages: list[ParameterAverage]) -> None: ...

    def on_sensitivity_pass(self, parameter: str, score: float) -> None: ...

    def on_degenerate(self, case: DegenerateCase, detail: str) -> None: ...


class NullObserver:
    """Observer that ignores every notification.

    Subclass it to override only the hooks you care about.
    """

    def on_outcomes_generated(self, outcomes: list[Outcome], iterations: int) -> None:
        pass

    def on_interactions_applied(self, outcomes: list[Outcome], matrix: np.ndarray) -> None:
        pass

    def on_normalized(self, outcomes: list[Outcome]) -> None:
        pass

    def on_aggregated(self, averages: list[ParameterAverage]) -> None:
        pass

    def on_sensitivity_pass(self, parameter: str, score: float) -> None:
        pass

    def on_degenerate(self, case: DegenerateCase, detail: str) -> None:
        pass


NULL_OBSERVER = NullObserver()


class LoggingObserver(NullObserver):
    """Narrates run progress through the standard logging module."""

    def __init__(self, log: logging.Logger | None = None):
        self.log = log if log is not None else logger

    def on_outcomes_generated(self, outcomes: list[Outcome], iterations: int) -> None:
        self.log.info(
            "Generated %d distinct outcomes from %d iterations",
            len(outcomes), iterations,
        )

    def on_interactions_applied(self, outcomes: list[Outcome], matrix: np.ndarray) -> None:
        factors = [o.interaction_factor for o in outcomes if o.interaction_factor is not None]
        if factors:
            self.log.info(
                "Applied %dx%d interaction matrix (factor range %.4f..%.4f)",
                matrix.shape[0], matrix.shape[1], min(factors), max(factors),
            )
        self.log.debug("Interaction matrix:\n%s", matrix)

    def on_normalized(self, outcomes: list[Outcome]) -> None:
        self.log.debug("Normalized %d outcome probabilities", len(outcomes))

    def on_aggregated(self, averages: list[ParameterAverage]) -> None:
        if averages:
            top = averages[0]
            self.log.info(
                "Highest weighted average: %s = %.2f (%.1f%%)",
                top.parameter, top.average, top.percentage,
            )

    def on_sensitivity_pass(self, parameter: str, score: float) -> None:
        self.log.info("Sensitivity of %s: %.4f", parameter, score)


def report_degenerate(
    observer: SimulationObserver | None,
    case: DegenerateCase,
    detail: str,
) -> None:
    """Log a degenerate input and forward it to the observer, if any."""
    logger.warning("Degenerate input (%s): %s", case.value, detail)
    if observer is not None:
        observer.on_degenerate(case, detail)
