"""Shared test fixtures for the paramsim test suite.

Provides seeded random generators and a few parameter sets:

    single_parameter: one parameter spanning [0, 1]
        Only two rounded values are reachable; interactions never run.

    degenerate_pair: two parameters with zero-width ranges at 0
        Every trial produces the same outcome.

    five_parameters: five small ranges with varied weights
        A realistic multi-parameter run for aggregation checks.

RecordingObserver keeps every notification so tests can assert which
stages ran.
"""

import numpy as np
import pytest

from paramsim.models import Parameter
from paramsim.observers import NullObserver


class RecordingObserver(NullObserver):
    """Observer that records each hook call as (hook_name, payload)."""

    def __init__(self):
        self.calls = []

    def on_outcomes_generated(self, outcomes, iterations):
        self.calls.append(("outcomes_generated", iterations))

    def on_interactions_applied(self, outcomes, matrix):
        self.calls.append(("interactions_applied", matrix.shape))

    def on_normalized(self, outcomes):
        self.calls.append(("normalized", len(outcomes)))

    def on_aggregated(self, averages):
        self.calls.append(("aggregated", len(averages)))

    def on_sensitivity_pass(self, parameter, score):
        self.calls.append(("sensitivity_pass", parameter))

    def on_degenerate(self, case, detail):
        self.calls.append(("degenerate", case))

    def hooks(self):
        return [name for name, _ in self.calls]


@pytest.fixture
def rng():
    return np.random.default_rng(42)


@pytest.fixture
def recorder():
    return RecordingObserver()


@pytest.fixture
def single_parameter():
    return [Parameter(name="A", min=0, max=1, weight=5)]


@pytest.fixture
def degenerate_pair():
    return [
        Parameter(name="A", min=0, max=0),
        Parameter(name="B", min=0, max=0),
    ]


@pytest.fixture
def two_parameters():
    return [
        Parameter(name="x", min=0, max=10, weight=7),
        Parameter(name="y", min=0, max=10, weight=3),
    ]


@pytest.fixture
def five_parameters():
    return [
        Parameter(name="alpha", min=0, max=3, weight=1),
        Parameter(name="beta", min=1, max=4, weight=3),
        Parameter(name="gamma", min=2, max=5, weight=5),
        Parameter(name="delta", min=0, max=2, weight=8),
        Parameter(name="epsilon", min=3, max=6, weight=10),
    ]
