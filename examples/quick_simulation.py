#!/usr/bin/env python3
"""Quick simulation example using a fixed set of parameters.

Runs the full pipeline on a small product-launch scenario and prints the
results, without needing any input files.

Usage:
    python examples/quick_simulation.py
"""

import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from paramsim.analysis import SimulationRunner
from paramsim.config import SimulationConfig
from paramsim.models import Parameter
from paramsim.observers import LoggingObserver
from paramsim.output import ConsoleOutput, Exporter


def create_launch_parameters() -> list[Parameter]:
    """Create a handful of launch-planning parameters."""
    return [
        Parameter(name="budget", min=2, max=8, weight=8),
        Parameter(name="team_size", min=3, max=6, weight=6),
        Parameter(name="marketing", min=0, max=4, weight=4),
        Parameter(name="risk", min=1, max=3, weight=2),
    ]


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print("Parameter Monte Carlo Simulation - Quick Example")
    print("=" * 50)

    parameters = create_launch_parameters()
    for param in parameters:
        print(f"  {param.name:<12} {param.min:g}..{param.max:g} (weight {param.weight})")
    print()

    runner = SimulationRunner(
        config=SimulationConfig(iterations=5000, seed=123),
        observer=LoggingObserver(),
    )
    results = runner.run(parameters)

    ConsoleOutput.print_summary(results)

    print("\nExporting results...")
    exporter = Exporter(output_dir="output")
    files = exporter.export_all(results, prefix="launch_quick")
    for fmt, path in files.items():
        print(f"  {fmt}: {path}")

    print("\nDone!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
