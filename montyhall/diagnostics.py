"""
Console reporting of experiment series.
"""

from typing import List, Optional

from .types import GameConfig, SeriesResult


def format_series_result(result: SeriesResult) -> str:
    """Format one experiment as mean line, deviation line and separator."""
    strategy = "switching" if result.switch else "staying"
    lines = [
        f"Series of {result.n_trials} trials ({strategy}): "
        f"{result.mean.winnings} wins, {result.mean.losses} losses",
        f"Deviation: wins - {result.deviation.winnings}, losses - {result.deviation.losses} "
        f"(p={result.p_value:.3f})",
        "-" * 43,
    ]
    return "\n".join(lines)


def format_diagnostics(results: List[SeriesResult], config: Optional[GameConfig] = None) -> str:
    """Format a whole experiment series into readable console output."""
    lines = []
    lines.append("MONTY HALL EXPERIMENTS")
    lines.append("=" * 60)

    if config is not None:
        items = ", ".join(f"{count} x {item}" for item, count in config.item_counts.items())
        lines.append(f"  Doors: {config.total_doors} ({items})")
        lines.append(f"  Winning item: {config.winning_item}")
        lines.append(f"  Revealed doors: {config.revealed_doors}")
        lines.append("")

    for result in results:
        lines.append(format_series_result(result))

    return "\n".join(lines)
