"""Per-parameter sensitivity analysis.

Each parameter's range is widened in turn while the others stay fixed, and
the resulting raw outcome distribution is compared with a shared baseline.
The score is the summed absolute probability shift over the baseline's
outcome keys; a baseline outcome that no longer occurs counts with its full
probability. Interactions are not applied here.
"""

import logging
import threading

from paramsim.exceptions import SimulationCancelled
from paramsim.models import Outcome, Parameter, SensitivityReport
from paramsim.observers import SimulationObserver
from paramsim.simulation import OutcomeGenerator

logger = logging.getLogger(__name__)


def total_variation(baseline: list[Outcome], varied: list[Outcome]) -> float:
    """Summed probability shift of the baseline outcomes.

    Args:
        baseline: Reference distribution
        varied: Distribution after a perturbation

    Returns:
        Non-negative score; 0 when every baseline outcome kept its probability
    """
    varied_by_key = {o.key: o.probability for o in varied}
    score = 0.0
    for outcome in baseline:
        matching = varied_by_key.get(outcome.key)
        if matching is None:
            score += outcome.probability
        else:
            score += abs(outcome.probability - matching)
    return score


class SensitivityAnalyzer:
    """Measures how much widening each parameter shifts the outcome distribution."""

    def __init__(
        self,
        generator: OutcomeGenerator | None = None,
        perturbation: float = 0.1,
        zero_span_widening: float = 1.0,
        domain_floor: float | None = 0.0,
    ):
        """Initialize the analyzer.

        Args:
            generator: Outcome generator used for every pass
            perturbation: Fraction of the span added to each side of a range
            zero_span_widening: Widening used instead when the span is zero
            domain_floor: Lowest allowed lower bound after widening
        """
        self.generator = generator if generator is not None else OutcomeGenerator()
        self.perturbation = perturbation
        self.zero_span_widening = zero_span_widening
        self.domain_floor = domain_floor

    def perturb(self, parameter: Parameter) -> Parameter:
        """Widened copy of ``parameter``."""
        span = parameter.span
        delta = span * self.perturbation if span > 0 else self.zero_span_widening
        return parameter.widened(delta, floor=self.domain_floor)

    def analyze(
        self,
        parameters: list[Parameter],
        iterations: int,
        cancel_event: threading.Event | None = None,
        observer: SimulationObserver | None = None,
    ) -> SensitivityReport:
        """Score every parameter against a common baseline.

        Args:
            parameters: Parameters to analyze; never modified
            iterations: Trials per generator call
            cancel_event: Checked before each per-parameter pass
            observer: Optional stage observer

        Returns:
            Mapping of parameter name to sensitivity score, in parameter order

        Raises:
            SimulationCancelled: If cancel_event is set between passes
        """
        baseline = self.generator.generate(parameters, iterations)
        report: SensitivityReport = {}

        for idx, parameter in enumerate(parameters):
            if cancel_event is not None and cancel_event.is_set():
                raise SimulationCancelled(
                    f"Sensitivity analysis cancelled after {idx} of {len(parameters)} parameters"
                )

            varied_parameters = list(parameters)
            varied_parameters[idx] = self.perturb(parameter)
            varied = self.generator.generate(varied_parameters, iterations)

            score = total_variation(baseline, varied)
            report[parameter.name] = score
            logger.debug(
                "Sensitivity pass %d/%d: %s -> %.4f",
                idx + 1, len(parameters), parameter.name, score,
            )
            if observer is not None:
                observer.on_sensitivity_pass(parameter.name, score)

        return report
