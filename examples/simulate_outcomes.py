#!/usr/bin/env python3
"""Example: Simulate outcomes for parameters given on the command line.

This script demonstrates the full workflow:
1. Collect parameter definitions (command line or file)
2. Run the Monte Carlo simulation with interaction effects
3. Display sensitivities and weighted averages
4. Optionally export results

Usage:
    python examples/simulate_outcomes.py -p NAME:MIN:MAX[:WEIGHT] ... [-n N]

Examples:
    python examples/simulate_outcomes.py -p speed:0:10:7 -p cost:5:20 -n 5000
    python examples/simulate_outcomes.py --params-file params.json --export
"""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from paramsim.analysis import SimulationRunner
from paramsim.config import InteractionStrategy, SimulationConfig
from paramsim.data import ParameterLoader, parse_parameter_spec
from paramsim.exceptions import ConfigurationError, SimulationError
from paramsim.observers import LoggingObserver
from paramsim.output import ConsoleOutput, Exporter


def main():
    parser = argparse.ArgumentParser(description="Monte Carlo parameter outcome simulation")
    parser.add_argument(
        "--param",
        "-p",
        action="append",
        default=[],
        help="Parameter as NAME:MIN:MAX[:WEIGHT] (repeatable)",
    )
    parser.add_argument(
        "--params-file",
        help="JSON or CSV file with parameter definitions",
    )
    parser.add_argument(
        "--iterations",
        "-n",
        type=int,
        default=1000,
        help="Number of iterations (default: 1000)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--strategy",
        choices=[s.value for s in InteractionStrategy],
        default=InteractionStrategy.RANDOM.value,
        help="Interaction strength function (default: random)",
    )
    parser.add_argument(
        "--no-sensitivity",
        action="store_false",
        dest="sensitivity",
        help="Skip the sensitivity analysis",
    )
    parser.add_argument(
        "--export",
        action="store_true",
        help="Export results to CSV/JSON",
    )
    parser.add_argument(
        "--output-dir",
        default="output",
        help="Output directory for exports (default: output)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log stage progress",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        parameters = [parse_parameter_spec(spec) for spec in args.param]
        if args.params_file:
            parameters.extend(ParameterLoader().load(args.params_file))
        config = SimulationConfig(
            iterations=args.iterations,
            seed=args.seed,
            interaction_strategy=InteractionStrategy(args.strategy),
            run_sensitivity=args.sensitivity,
        )
    except (ConfigurationError, ValueError) as e:
        print(f"Invalid input: {e}")
        return 2

    runner = SimulationRunner(
        config=config,
        observer=LoggingObserver() if args.verbose else None,
    )

    print(f"Running {args.iterations} iterations over {len(parameters)} parameters...")
    try:
        results = runner.run(parameters)
    except ConfigurationError as e:
        print(f"Invalid input: {e}")
        return 2
    except SimulationError as e:
        print(f"Simulation failed: {e}")
        return 1

    ConsoleOutput.print_summary(results)

    if args.export:
        print(f"\nExporting results to {args.output_dir}/...")
        exporter = Exporter(output_dir=args.output_dir)
        files = exporter.export_all(results)

        print("Exported files:")
        for fmt, path in files.items():
            print(f"  {fmt}: {path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
