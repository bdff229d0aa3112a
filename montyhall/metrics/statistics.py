"""
Win/loss statistics and their theoretical counterparts.

For N doors, w winning items and k revealed doors:
- staying wins with probability w / N
- switching to a random remaining closed door wins with probability
  w (N - 1) / (N (N - 1 - k))
"""

from typing import Literal
from scipy import stats

from ..types import GameConfig, ExperimentStatistic, Expectation


StatisticType = Literal["winnings", "losses"]


def calc_mean(statistic: ExperimentStatistic, target: StatisticType) -> float:
    """Share of trials that ended as `target`."""
    if statistic.n_trials == 0:
        return 0.0
    return getattr(statistic, target) / statistic.n_trials


def calc_means(statistic: ExperimentStatistic) -> Expectation:
    return Expectation(
        winnings=calc_mean(statistic, "winnings"),
        losses=calc_mean(statistic, "losses"),
    )


def calc_deviation(statistic: ExperimentStatistic, expected: Expectation) -> Expectation:
    """Absolute deviation of observed win and loss rates from theory."""
    means = calc_means(statistic)
    return Expectation(
        winnings=abs(means.winnings - expected.winnings),
        losses=abs(means.losses - expected.losses),
    )


def compute_expectation(config: GameConfig, switch: bool) -> Expectation:
    """
    Theoretical win and loss rates for a game configuration.

    Args:
        config: Game configuration
        switch: Whether the player switches to a random closed door after the reveal

    Returns:
        Expectation with winnings + losses == 1
    """
    n_doors = config.total_doors
    n_winning = config.winning_count

    if not switch:
        p_win = n_winning / n_doors
    else:
        # GameConfig guarantees at least one
        closed_doors = n_doors - 1 - config.revealed_doors
        p_win = n_winning * (n_doors - 1) / (n_doors * closed_doors)

    return Expectation(winnings=p_win, losses=1.0 - p_win)


def binomial_p_value(statistic: ExperimentStatistic, expected: Expectation) -> float:
    """
    Two-sided exact binomial test of the win count against the expected win rate.

    Returns 1.0 when there is nothing to test.
    """
    if statistic.n_trials == 0:
        return 1.0
    p_win = min(max(expected.winnings, 0.0), 1.0)
    result = stats.binomtest(statistic.winnings, statistic.n_trials, p_win)
    return float(result.pvalue)
