"""Full simulation run: sampling, interactions, aggregation and sensitivity."""

import asyncio
import logging
import threading
from dataclasses import dataclass

import numpy as np

from paramsim.analysis.aggregate import aggregate, winner
from paramsim.analysis.sensitivity import SensitivityAnalyzer
from paramsim.config import SimulationConfig
from paramsim.exceptions import (
    ConfigurationError,
    SimulationCancelled,
    SimulationError,
    SimulationFailedError,
)
from paramsim.models import Outcome, Parameter, ParameterAverage, SensitivityReport
from paramsim.observers import NULL_OBSERVER, SimulationObserver
from paramsim.simulation import (
    InteractionMatrixBuilder,
    OutcomeGenerator,
    apply_interactions,
    normalize,
    sort_by_probability,
)

logger = logging.getLogger(__name__)


@dataclass
class SimulationResults:
    """Results from one simulation run."""

    iterations: int
    parameters: list[Parameter]
    outcomes: list[Outcome]  # Sorted by probability, most likely first
    averages: list[ParameterAverage]  # Sorted by weighted average
    sensitivities: SensitivityReport | None = None
    sensitivity_iterations: int = 0
    interaction_matrix: np.ndarray | None = None
    seed: int | None = None

    @property
    def winner(self) -> ParameterAverage | None:
        """Parameter with the highest weighted average."""
        return winner(self.averages)

    @property
    def interactions_applied(self) -> bool:
        """Whether interaction effects were modelled for this run."""
        return self.interaction_matrix is not None

    def top_outcomes(self, limit: int = 20) -> list[Outcome]:
        """Most probable outcomes."""
        return self.outcomes[:limit]

    def total_probability(self) -> float:
        """Sum of all outcome probabilities (1.0 for a complete run)."""
        return float(sum(o.probability for o in self.outcomes))

    def most_sensitive_parameter(self) -> str | None:
        """Name of the parameter with the highest sensitivity score."""
        if not self.sensitivities:
            return None
        return max(self.sensitivities.items(), key=lambda x: x[1])[0]


def validate_parameters(parameters: list[Parameter], iterations: int) -> None:
    """Check run input before any sampling happens.

    Raises:
        ConfigurationError: On an empty parameter list, a range with
            min >= max, a repeated name, or fewer than one iteration
    """
    if not parameters:
        raise ConfigurationError("Please add at least one parameter")
    if iterations < 1:
        raise ConfigurationError(f"Iterations must be at least 1, got {iterations}")

    invalid = [p.name for p in parameters if not p.min < p.max]
    if invalid:
        raise ConfigurationError(
            f"Parameters have invalid min/max values: {', '.join(invalid)}"
        )

    seen: set[str] = set()
    duplicates = []
    for p in parameters:
        if p.name in seen and p.name not in duplicates:
            duplicates.append(p.name)
        seen.add(p.name)
    if duplicates:
        raise ConfigurationError(f"Parameter names must be unique: {', '.join(duplicates)}")


def _check_cancelled(cancel_event: threading.Event | None, stage: str) -> None:
    if cancel_event is not None and cancel_event.is_set():
        raise SimulationCancelled(f"Simulation cancelled before {stage}")


class SimulationRunner:
    """Runs the complete parameter simulation for a presenter."""

    def __init__(
        self,
        config: SimulationConfig | None = None,
        observer: SimulationObserver | None = None,
    ):
        """Initialize the runner.

        Args:
            config: Run settings (defaults if omitted)
            observer: Receives stage notifications (none if omitted)
        """
        self.config = config if config is not None else SimulationConfig()
        self.observer = observer if observer is not None else NULL_OBSERVER
        self.base_seed = (
            self.config.seed
            if self.config.seed is not None
            else int(np.random.default_rng().integers(0, 2**31))
        )

    def run(
        self,
        parameters: list[Parameter],
        iterations: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> SimulationResults:
        """Run sampling, interactions, normalization, aggregation and sensitivity.

        Args:
            parameters: Parameter definitions from the presenter
            iterations: Trials for the main run (config default if omitted)
            cancel_event: Optional token checked between stages and
                between sensitivity passes

        Returns:
            SimulationResults for this run

        Raises:
            ConfigurationError: If the input is invalid (nothing is sampled)
            SimulationCancelled: If cancel_event was set
            SimulationFailedError: On any unexpected failure during the run
        """
        iterations = iterations if iterations is not None else self.config.iterations
        validate_parameters(parameters, iterations)
        parameters = list(parameters)

        try:
            return self._run(parameters, iterations, cancel_event)
        except SimulationError:
            raise
        except Exception as e:
            logger.exception("Simulation run failed")
            raise SimulationFailedError(f"Simulation run failed: {e}") from e

    def _run(
        self,
        parameters: list[Parameter],
        iterations: int,
        cancel_event: threading.Event | None,
    ) -> SimulationResults:
        observer = self.observer
        generator = OutcomeGenerator(rng=np.random.default_rng(self.base_seed))

        outcomes = generator.generate(parameters, iterations)
        observer.on_outcomes_generated(outcomes, iterations)

        matrix = None
        if len(parameters) > 1:
            _check_cancelled(cancel_event, "interactions")
            builder = InteractionMatrixBuilder(
                strength=self.config.interaction_strategy,
                rng=np.random.default_rng(self.base_seed + 1),
            )
            matrix = builder.build(parameters)
            outcomes = apply_interactions(
                outcomes,
                parameters,
                matrix,
                floor=self.config.interaction_floor,
                observer=observer,
            )
            outcomes = normalize(outcomes, observer=observer)

        outcomes = sort_by_probability(outcomes)
        averages = aggregate(outcomes, observer=observer)

        sensitivities = None
        sensitivity_iterations = 0
        if self.config.run_sensitivity:
            _check_cancelled(cancel_event, "sensitivity analysis")
            sensitivity_iterations = self.config.effective_sensitivity_iterations(iterations)
            analyzer = SensitivityAnalyzer(
                generator=OutcomeGenerator(rng=np.random.default_rng(self.base_seed + 2)),
                perturbation=self.config.perturbation,
                zero_span_widening=self.config.zero_span_widening,
                domain_floor=self.config.domain_floor,
            )
            sensitivities = analyzer.analyze(
                parameters,
                sensitivity_iterations,
                cancel_event=cancel_event,
                observer=observer,
            )

        logger.info(
            "Simulation complete: %d parameters, %d iterations, %d outcomes",
            len(parameters), iterations, len(outcomes),
        )

        return SimulationResults(
            iterations=iterations,
            parameters=parameters,
            outcomes=outcomes,
            averages=averages,
            sensitivities=sensitivities,
            sensitivity_iterations=sensitivity_iterations,
            interaction_matrix=matrix,
            seed=self.base_seed,
        )

    async def run_async(
        self,
        parameters: list[Parameter],
        iterations: int | None = None,
        cancel_event: threading.Event | None = None,
    ) -> SimulationResults:
        """Run on a worker thread after yielding once to the event loop.

        The yield gives an interactive host a chance to repaint between
        submission and the start of the blocking computation.
        """
        await asyncio.sleep(0)
        return await asyncio.to_thread(self.run, parameters, iterations, cancel_event)

    def run_quick(
        self,
        parameters: list[Parameter],
        iterations: int = 100,
    ) -> SimulationResults:
        """Run a small simulation without sensitivity analysis.

        Useful for previews or testing.
        """
        quick = SimulationRunner(
            config=self.config.model_copy(update={"run_sensitivity": False, "seed": self.base_seed}),
            observer=self.observer,
        )
        return quick.run(parameters, iterations)
