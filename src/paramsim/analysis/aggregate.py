"""Probability-weighted parameter averages."""

from paramsim.exceptions import DegenerateCase
from paramsim.models import Outcome, ParameterAverage
from paramsim.observers import SimulationObserver, report_degenerate


def aggregate(
    outcomes: list[Outcome],
    observer: SimulationObserver | None = None,
) -> list[ParameterAverage]:
    """Compute each parameter's probability-weighted average and share.

    Args:
        outcomes: Outcomes whose probabilities act as weights
        observer: Optional stage observer

    Returns:
        One record per parameter name, sorted by average (descending)
    """
    sums: dict[str, float] = {}
    total = 0.0

    for outcome in outcomes:
        for name, value in outcome.values.items():
            weighted = value * outcome.probability
            sums[name] = sums.get(name, 0.0) + weighted
            total += weighted

    if sums and total == 0:
        report_degenerate(
            observer,
            DegenerateCase.ZERO_WEIGHTED_SUM,
            "weighted sum across all parameters is zero; percentages use a divisor of 1",
        )
        total = 1.0

    averages = [
        ParameterAverage(
            parameter=name,
            average=weighted_sum,
            percentage=weighted_sum / total * 100,
        )
        for name, weighted_sum in sums.items()
    ]
    averages.sort(key=lambda a: a.average, reverse=True)

    if observer is not None:
        observer.on_aggregated(averages)
    return averages


def winner(averages: list[ParameterAverage]) -> ParameterAverage | None:
    """Parameter with the highest weighted average, or None when there is no data."""
    return averages[0] if averages else None
