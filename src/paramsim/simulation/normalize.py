"""Probability normalization."""

from paramsim.exceptions import DegenerateCase
from paramsim.models import Outcome
from paramsim.observers import SimulationObserver, report_degenerate


def normalize(
    outcomes: list[Outcome],
    observer: SimulationObserver | None = None,
) -> list[Outcome]:
    """Rescale probabilities so they sum to 1.

    Falls back to a uniform distribution when every probability is zero.
    """
    if not outcomes:
        return []

    total = sum(o.probability for o in outcomes)
    if total > 0:
        normalized = [
            o.model_copy(update={"probability": o.probability / total})
            for o in outcomes
        ]
    else:
        report_degenerate(
            observer,
            DegenerateCase.ZERO_TOTAL_PROBABILITY,
            f"total probability of {len(outcomes)} outcomes is zero; using a uniform distribution",
        )
        uniform = 1.0 / len(outcomes)
        normalized = [o.model_copy(update={"probability": uniform}) for o in outcomes]

    if observer is not None:
        observer.on_normalized(normalized)
    return normalized


def sort_by_probability(outcomes: list[Outcome]) -> list[Outcome]:
    """Sort outcomes by probability, most likely first (stable)."""
    return sorted(outcomes, key=lambda o: o.probability, reverse=True)
