"""Export simulation results to CSV and JSON."""

import csv
import json
from pathlib import Path
from typing import Any

from paramsim.analysis.runner import SimulationResults


class Exporter:
    """Exports simulation results to various formats."""

    def __init__(self, output_dir: str | Path = "output"):
        """Initialize exporter.

        Args:
            output_dir: Directory for output files
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def export_outcomes_csv(
        self,
        results: SimulationResults,
        filename: str = "outcomes.csv",
    ) -> Path:
        """Export every outcome to CSV, most probable first.

        Args:
            results: Simulation results
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename
        names = [p.name for p in results.parameters]

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow([
                "rank", "count", "probability", "original_probability",
                "interaction_factor", *names,
            ])

            for rank, outcome in enumerate(results.outcomes, 1):
                writer.writerow([
                    rank,
                    outcome.count,
                    f"{outcome.probability:.6f}",
                    f"{outcome.original_probability:.6f}" if outcome.original_probability is not None else "",
                    f"{outcome.interaction_factor:.6f}" if outcome.interaction_factor is not None else "",
                    *(outcome.values[name] for name in names),
                ])

        return filepath

    def export_averages_csv(
        self,
        results: SimulationResults,
        filename: str = "averages.csv",
    ) -> Path:
        """Export weighted parameter averages to CSV.

        Args:
            results: Simulation results
            filename: Output filename

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename

        with open(filepath, "w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["parameter", "average", "percentage", "sensitivity"])

            sensitivities = results.sensitivities or {}
            for avg in results.averages:
                score = sensitivities.get(avg.parameter)
                writer.writerow([
                    avg.parameter,
                    f"{avg.average:.4f}",
                    f"{avg.percentage:.2f}",
                    f"{score:.6f}" if score is not None else "",
                ])

        return filepath

    def export_summary_json(
        self,
        results: SimulationResults,
        filename: str = "summary.json",
        top: int = 20,
    ) -> Path:
        """Export a run summary to JSON.

        Args:
            results: Simulation results
            filename: Output filename
            top: Number of outcomes to include

        Returns:
            Path to created file
        """
        filepath = self.output_dir / filename
        top_winner = results.winner

        summary: dict[str, Any] = {
            "metadata": {
                "iterations": results.iterations,
                "seed": results.seed,
                "distinct_outcomes": len(results.outcomes),
                "interactions_applied": results.interactions_applied,
                "sensitivity_iterations": results.sensitivity_iterations,
            },
            "parameters": [p.model_dump() for p in results.parameters],
            "winner": top_winner.model_dump() if top_winner else None,
            "averages": [a.model_dump() for a in results.averages],
            "sensitivities": results.sensitivities,
            "top_outcomes": [
                {
                    "values": o.values,
                    "count": o.count,
                    "probability": o.probability,
                    "original_probability": o.original_probability,
                    "interaction_factor": o.interaction_factor,
                    "tier": o.tier.value,
                }
                for o in results.top_outcomes(top)
            ],
        }
        if results.interaction_matrix is not None:
            summary["interaction_matrix"] = results.interaction_matrix.tolist()

        with open(filepath, "w") as f:
            json.dump(summary, f, indent=2)

        return filepath

    def export_all(
        self,
        results: SimulationResults,
        prefix: str = "",
    ) -> dict[str, Path]:
        """Export all result formats.

        Args:
            results: Simulation results
            prefix: Optional prefix for filenames

        Returns:
            Dictionary of format -> filepath
        """
        prefix = f"{prefix}_" if prefix else ""

        return {
            "outcomes_csv": self.export_outcomes_csv(
                results, f"{prefix}outcomes.csv"
            ),
            "averages_csv": self.export_averages_csv(
                results, f"{prefix}averages.csv"
            ),
            "summary_json": self.export_summary_json(
                results, f"{prefix}summary.json"
            ),
        }
