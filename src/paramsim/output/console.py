"""Console output formatting."""

from paramsim.analysis.runner import SimulationResults


class ConsoleOutput:
    """Formats simulation results for console display."""

    @staticmethod
    def print_outcomes(results: SimulationResults, limit: int = 20) -> None:
        """Print the most probable outcomes.

        Args:
            results: Simulation results
            limit: Maximum number of outcomes to list
        """
        print("\n" + "=" * 70)
        print(f"MOST LIKELY OUTCOMES ({len(results.outcomes)} distinct)")
        print("=" * 70)
        print(f"{'#':<4} {'Prob':>8} {'Tier':<8} {'Values':<34} {'Interaction':>12}")
        print("-" * 70)

        for rank, outcome in enumerate(results.top_outcomes(limit), 1):
            values = ", ".join(f"{name}: {value}" for name, value in outcome.values.items())
            effect = outcome.interaction_effect
            effect_str = f"{effect:+.2f}%" if effect is not None else ""

            print(
                f"{rank:<4} "
                f"{outcome.probability * 100:7.2f}% "
                f"{outcome.tier.value:<8} "
                f"{values:<34} "
                f"{effect_str:>12}"
            )

        print("=" * 70)

    @staticmethod
    def print_probability_chart(results: SimulationResults, limit: int = 10) -> None:
        """Print a bar chart of the most probable outcomes.

        Bars are scaled so the most probable outcome fills the chart width.
        """
        top = results.top_outcomes(limit)
        if not top:
            return

        print("\nOUTCOME PROBABILITIES:")
        print("-" * 70)
        max_prob = top[0].probability
        for outcome in top:
            width = int(outcome.probability / max_prob * 30) if max_prob > 0 else 0
            bar = "#" * width
            print(f"{outcome.label:<28.28} {outcome.probability * 100:6.2f}% {bar}")

    @staticmethod
    def print_parameter_averages(results: SimulationResults) -> None:
        """Print weighted averages with the winning parameter."""
        print("\nPARAMETER AVERAGES:")
        print("-" * 50)

        top = results.winner
        if top is None:
            print("Winner: No data")
            return

        print(f"Winner: {top.parameter} - {top.average:.2f} ({top.percentage:.1f}%)")
        print()
        for avg in results.averages:
            bar = "#" * int(avg.percentage / 2)
            print(f"{avg.parameter:<20} {avg.average:8.2f} {avg.percentage:5.1f}% {bar}")

    @staticmethod
    def print_sensitivities(results: SimulationResults) -> None:
        """Print per-parameter sensitivity scores."""
        print("\nPARAMETER SENSITIVITY:")
        print("-" * 50)

        if results.sensitivities is None:
            print("  (not computed)")
            return

        print(f"({results.sensitivity_iterations} iterations per pass)")
        for name, score in sorted(
            results.sensitivities.items(),
            key=lambda x: x[1],
            reverse=True,
        ):
            bar = "#" * int(score * 25)
            print(f"{name:<20} {score:6.4f} {bar}")

    @staticmethod
    def print_summary(results: SimulationResults) -> None:
        """Print the complete run summary."""
        print("\n" + "=" * 70)
        print(f"PARAMETER SIMULATION RESULTS ({results.iterations} iterations)")
        print(f"Parameters: {', '.join(p.name for p in results.parameters)}")
        if results.interactions_applied:
            print("Interaction effects: applied")
        print("=" * 70)

        ConsoleOutput.print_outcomes(results)
        ConsoleOutput.print_probability_chart(results)
        ConsoleOutput.print_parameter_averages(results)
        ConsoleOutput.print_sensitivities(results)

        print("=" * 70)
