"""Tests for full simulation runs (paramsim.analysis.runner).

Covers validation before sampling, the stage sequence for single- and
multi-parameter runs, reproducibility, cancellation and the failure
boundary around the computation phase.
"""

import asyncio
import threading

import pytest

from paramsim.analysis import SimulationRunner, validate_parameters
from paramsim.analysis import runner as runner_module
from paramsim.config import InteractionStrategy, SimulationConfig
from paramsim.exceptions import (
    ConfigurationError,
    SimulationCancelled,
    SimulationFailedError,
)
from paramsim.models import Parameter


def make_runner(seed=11, observer=None, **config):
    return SimulationRunner(config=SimulationConfig(seed=seed, **config), observer=observer)


class TestValidateParameters:
    """Tests for validate_parameters."""

    def test_valid(self, five_parameters):
        validate_parameters(five_parameters, 100)

    def test_empty(self):
        with pytest.raises(ConfigurationError):
            validate_parameters([], 100)

    @pytest.mark.parametrize("low, high", [(5, 5), (6, 2)])
    def test_min_not_below_max(self, low, high):
        with pytest.raises(ConfigurationError, match="invalid min/max"):
            validate_parameters([Parameter(name="a", min=low, max=high)], 100)

    def test_duplicate_names(self):
        params = [
            Parameter(name="a", min=0, max=1),
            Parameter(name="a", min=0, max=2),
        ]
        with pytest.raises(ConfigurationError, match="unique"):
            validate_parameters(params, 100)

    def test_zero_iterations(self, single_parameter):
        with pytest.raises(ConfigurationError):
            validate_parameters(single_parameter, 0)


class TestSimulationRunner:
    """Tests for SimulationRunner.run."""

    def test_single_parameter_skips_interactions(self, single_parameter, recorder):
        """One parameter: raw frequencies, no interaction or normalization stage."""
        results = make_runner(observer=recorder).run(single_parameter, 1000)

        assert len(results.outcomes) <= 2
        assert {o.key for o in results.outcomes} <= {(0,), (1,)}
        assert results.total_probability() == pytest.approx(1.0)
        assert not results.interactions_applied
        for o in results.outcomes:
            assert o.interaction_factor is None
            assert o.probability == o.count / 1000

        hooks = recorder.hooks()
        assert "interactions_applied" not in hooks
        assert "normalized" not in hooks

    def test_multi_parameter_stage_order(self, two_parameters, recorder):
        make_runner(observer=recorder).run(two_parameters, 500)
        assert recorder.hooks() == [
            "outcomes_generated",
            "interactions_applied",
            "normalized",
            "aggregated",
            "sensitivity_pass",
            "sensitivity_pass",
        ]

    def test_multi_parameter_results(self, two_parameters):
        results = make_runner().run(two_parameters, 2000)

        assert results.interactions_applied
        assert results.interaction_matrix.shape == (2, 2)
        assert abs(results.total_probability() - 1.0) < 1e-6
        probs = [o.probability for o in results.outcomes]
        assert probs == sorted(probs, reverse=True)
        assert sum(o.count for o in results.outcomes) == 2000
        for o in results.outcomes:
            assert o.interaction_factor >= 0.1
            assert o.original_probability == o.count / 2000

    def test_five_parameters(self, five_parameters):
        results = make_runner().run(five_parameters, 10000)

        assert len(results.averages) == 5
        assert all(a.percentage >= 0 for a in results.averages)
        assert sum(a.percentage for a in results.averages) == pytest.approx(100.0)
        assert results.winner is results.averages[0]
        assert set(results.sensitivities) == {p.name for p in five_parameters}

    def test_sensitivity_iterations_capped(self, two_parameters):
        results = make_runner(sensitivity_iterations=200).run(two_parameters, 1000)
        assert results.sensitivity_iterations == 200

        results = make_runner().run(two_parameters, 50)
        assert results.sensitivity_iterations == 50

    def test_sensitivity_disabled(self, two_parameters):
        results = make_runner(run_sensitivity=False).run(two_parameters, 100)
        assert results.sensitivities is None
        assert results.most_sensitive_parameter() is None

    def test_most_sensitive_parameter(self, two_parameters):
        results = make_runner().run(two_parameters, 300)
        top = results.most_sensitive_parameter()
        assert results.sensitivities[top] == max(results.sensitivities.values())

    def test_default_iterations(self, single_parameter):
        results = make_runner(iterations=250).run(single_parameter)
        assert results.iterations == 250
        assert sum(o.count for o in results.outcomes) == 250

    def test_reproducible_with_seed(self, five_parameters):
        first = make_runner(seed=5).run(five_parameters, 500)
        second = make_runner(seed=5).run(five_parameters, 500)
        assert first.outcomes == second.outcomes
        assert first.sensitivities == second.sensitivities
        assert (first.interaction_matrix == second.interaction_matrix).all()

    def test_weight_similarity_strategy(self, two_parameters):
        results = make_runner(
            interaction_strategy=InteractionStrategy.WEIGHT_SIMILARITY,
        ).run(two_parameters, 200)
        # Weights 7 and 3: cos(pi * 4/9) > 0
        assert results.interaction_matrix[0, 1] > 0

    def test_invalid_input_raises_before_sampling(self, recorder):
        with pytest.raises(ConfigurationError):
            make_runner(observer=recorder).run([Parameter(name="a", min=3, max=1)], 100)
        assert recorder.calls == []

    def test_parameters_not_modified(self, five_parameters):
        before = [p.model_copy() for p in five_parameters]
        make_runner().run(five_parameters, 200)
        assert five_parameters == before

    def test_cancelled_before_interactions(self, two_parameters, recorder):
        cancel = threading.Event()
        cancel.set()
        with pytest.raises(SimulationCancelled):
            make_runner(observer=recorder).run(two_parameters, 100, cancel_event=cancel)
        assert recorder.hooks() == ["outcomes_generated"]

    def test_unexpected_failure_wrapped(self, two_parameters, monkeypatch):
        """Unexpected errors surface as one SimulationFailedError."""
        def broken(outcomes, observer=None):
            raise RuntimeError("out of memory")

        monkeypatch.setattr(runner_module, "aggregate", broken)
        with pytest.raises(SimulationFailedError) as excinfo:
            make_runner().run(two_parameters, 100)
        assert isinstance(excinfo.value.__cause__, RuntimeError)

    def test_random_seed_when_unset(self, single_parameter):
        runner = SimulationRunner()
        assert runner.base_seed is not None
        assert runner.run(single_parameter, 10).seed == runner.base_seed

    def test_run_quick(self, two_parameters):
        results = make_runner().run_quick(two_parameters)
        assert results.iterations == 100
        assert results.sensitivities is None

    def test_run_async(self, two_parameters):
        runner = make_runner()
        results = asyncio.run(runner.run_async(two_parameters, 300))
        assert results.outcomes == runner.run(two_parameters, 300).outcomes

    def test_top_outcomes(self, five_parameters):
        results = make_runner(run_sensitivity=False).run(five_parameters, 1000)
        assert results.top_outcomes(3) == results.outcomes[:3]

    def test_bounds_beyond_int64(self):
        """Huge ranges still produce non-negative shares summing to 100."""
        params = [
            Parameter(name="small", min=0, max=10),
            Parameter(name="huge", min=0, max=1e20),
        ]
        results = make_runner(run_sensitivity=False).run(params, 500)

        assert all(a.percentage >= 0 for a in results.averages)
        assert sum(a.percentage for a in results.averages) == pytest.approx(100.0)
        assert results.winner.parameter == "huge"
        assert abs(results.total_probability() - 1.0) < 1e-6
