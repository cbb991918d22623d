#!/usr/bin/env python3
"""
Wine style recommendation from the command line.

Scores every wine profile for a dish, an occasion and an intimacy level,
then shows the winner, the close-second alternative and the full ranking.
"""

import argparse
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wineselector.config import load_config
from wineselector.constants import ConfidenceBand, IntimacyLevel, MainDish, Occasion
from wineselector.error_handling import WineSelectorError
from wineselector.justification import JustificationGenerator, serving_suggestion
from wineselector.score_calculator import ScoreCalculator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Recommend a wine style for a dish, an occasion and the company."
    )
    parser.add_argument("dish", help=f"Main dish: {', '.join(MainDish.choices())}")
    parser.add_argument("occasion", help=f"Occasion: {', '.join(Occasion.choices())}")
    parser.add_argument("intimacy", help=f"Intimacy level: {', '.join(IntimacyLevel.choices())}")
    parser.add_argument("--report", action="store_true", help="Print the plain-text calculation report")
    parser.add_argument("--breakdown", action="store_true", help="Show per-dimension contributions")
    parser.add_argument("--env-file", default=None, help="Optional .env file with WINESELECTOR_* overrides")
    return parser


def create_ranking_table(ranking, decision):
    """Table with every profile's final score, winner highlighted."""
    table = Table(
        title="🍷 Profile Ranking",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
        title_style="bold white"
    )

    table.add_column("#", justify="right", style="dim white", width=3)
    table.add_column("Profile", style="cyan", width=20)
    table.add_column("Score", justify="right", style="bold white", width=8)
    table.add_column("Bar", width=26)

    for position, entry in enumerate(ranking, start=1):
        if entry.profile is decision.primary:
            style = "bold green"
        elif entry.profile is decision.alternative:
            style = "bold yellow"
        else:
            style = "white"

        bar = "█" * int(entry.score / 2)
        table.add_row(
            str(position),
            f"[{style}]{entry.profile.display_name}[/{style}]",
            f"{entry.score:.2f}",
            bar
        )

    return table


def create_decision_panel(decision, band, justification, serving):
    lines = [
        f"[bold green]{decision.primary.display_name}[/bold green] "
        f"({decision.rounded_primary_score} points)",
        f"[dim]{decision.primary.description}[/dim]",
        "",
        justification,
        "",
        f"🌡️  {serving}",
        f"Confidence: [bold]{band.display}[/bold] ({band.level:.1f})",
    ]
    if decision.has_alternative:
        lines.extend([
            "",
            f"Alternative: [bold yellow]{decision.alternative.display_name}[/bold yellow] "
            f"({decision.rounded_alternative_score} points)",
        ])

    return Panel("\n".join(lines), title="Recommendation", border_style="green")


def main():
    """Run the recommendation."""
    console = Console()
    args = build_parser().parse_args()

    try:
        calculator = ScoreCalculator(load_config(args.env_file))
        ranking = calculator.calculate_scores(args.dish, args.occasion, args.intimacy)
        decision = calculator.decide(ranking)
        band: ConfidenceBand = calculator.confidence_band(ranking)
        justification = JustificationGenerator().generate(
            args.dish, args.occasion, args.intimacy, decision.primary
        )
    except WineSelectorError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        sys.exit(1)

    console.print()
    console.print(create_decision_panel(decision, band, justification, serving_suggestion(decision.primary)))
    console.print()
    console.print(create_ranking_table(ranking, decision))
    console.print()

    if args.breakdown:
        console.print(calculator.breakdown(args.dish, args.occasion, args.intimacy).round(2).to_string())
        console.print()

    if args.report:
        console.print(calculator.calculation_report(args.dish, args.occasion, args.intimacy, ranking), markup=False)


if __name__ == "__main__":
    main()
