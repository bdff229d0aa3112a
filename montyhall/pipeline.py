"""
Experiment orchestration.

Plays many independent games, tallies wins and losses, and compares
them with the theoretical expectation over a growing series of trial counts.
"""

import numpy as np
import pandas as pd
from typing import List, Optional
import logging

from .types import GameConfig, ExperimentSettings, ExperimentStatistic, SeriesResult
from .config import GAME_PRESETS, DEFAULT_GAME_PRESET, DEFAULT_SETTINGS
from .game.engine import MontyHallGame
from .metrics.statistics import (
    calc_means, calc_deviation, compute_expectation, binomial_p_value
)

logger = logging.getLogger(__name__)

# Log progress every this many trials
PROGRESS_INTERVAL = 100000


def play_game(config: GameConfig, switch: bool = False, seed=None) -> bool:
    """
    Play one game with random choices.

    Args:
        config: Game configuration
        switch: Whether to switch to another closed door after the reveal
        seed: Random source for this game

    Returns:
        True if the final choice hides the winning item
    """
    game = MontyHallGame(config, seed=seed)
    game.run()
    game.choose()
    game.open_doors()
    if switch:
        game.choose()
    return game.is_winner()


def run_experiment(
    n_trials: int,
    switch: bool = False,
    config: Optional[GameConfig] = None,
    seed=None
) -> ExperimentStatistic:
    """
    Run a number of independent games and count wins and losses.

    Args:
        n_trials: Number of games to play
        switch: Whether the player switches after the reveal
        config: Game configuration (default: classic three doors)
        seed: Random seed for reproducibility (accepts int, SeedSequence or Generator)

    Returns:
        ExperimentStatistic with winnings + losses == n_trials
    """
    if n_trials < 0:
        raise ValueError(f"n_trials must be non-negative, got {n_trials}")

    if config is None:
        config = GAME_PRESETS[DEFAULT_GAME_PRESET]

    rng = np.random.default_rng(seed)

    outcomes = np.empty(n_trials, dtype=bool)
    for trial in range(n_trials):
        outcomes[trial] = play_game(config, switch=switch, seed=rng)

        if (trial + 1) % PROGRESS_INTERVAL == 0:
            logger.info(f"Played {trial + 1}/{n_trials} games")

    winnings = int(outcomes.sum())
    return ExperimentStatistic(winnings=winnings, losses=n_trials - winnings)


def run_experiment_series(
    config: Optional[GameConfig] = None,
    settings: Optional[ExperimentSettings] = None,
    seed: Optional[int] = None,
    verbose: bool = True
) -> List[SeriesResult]:
    """
    Run experiments with a growing number of trials, staying and switching.

    For every trial count in settings.trial_counts one experiment without
    switching and one with switching is run and compared against theory.

    Args:
        config: Game configuration (default: classic three doors)
        settings: Series settings (default: factor 10 up to 10**6 trials)
        seed: Random seed for reproducibility
        verbose: Whether to log progress

    Returns:
        List of SeriesResult, staying before switching for each trial count
    """
    if verbose:
        logging.basicConfig(level=logging.INFO)

    if config is None:
        config = GAME_PRESETS[DEFAULT_GAME_PRESET]
    if settings is None:
        settings = DEFAULT_SETTINGS

    logger.info(
        f"Game: {config.total_doors} doors, {config.winning_count} winning, "
        f"{config.revealed_doors} revealed"
    )

    # One independent stream per experiment
    trial_counts = settings.trial_counts
    child_seeds = np.random.SeedSequence(seed).spawn(2 * len(trial_counts))

    results = []
    for i, n_trials in enumerate(trial_counts):
        for j, switch in enumerate((False, True)):
            logger.info(f"Running {n_trials} trials ({'switching' if switch else 'staying'})...")
            statistic = run_experiment(
                n_trials, switch=switch, config=config, seed=child_seeds[2 * i + j]
            )
            results.append(_compare_with_theory(config, n_trials, switch, statistic))

    return results


def _compare_with_theory(
    config: GameConfig,
    n_trials: int,
    switch: bool,
    statistic: ExperimentStatistic
) -> SeriesResult:
    expected = compute_expectation(config, switch)
    mean = calc_means(statistic)
    deviation = calc_deviation(statistic, expected)
    p_value = binomial_p_value(statistic, expected)

    logger.info(
        f"{n_trials} trials ({'switch' if switch else 'stay'}): "
        f"win rate {mean.winnings:.4f} (expected {expected.winnings:.4f}, p={p_value:.3f})"
    )

    return SeriesResult(
        n_trials=n_trials,
        switch=switch,
        statistic=statistic,
        mean=mean,
        expected=expected,
        deviation=deviation,
        p_value=p_value,
    )


def series_to_frame(results: List[SeriesResult]) -> pd.DataFrame:
    """Flatten series results into one row per experiment."""
    rows = [
        {
            'n_trials': r.n_trials,
            'switch': r.switch,
            'winnings': r.statistic.winnings,
            'losses': r.statistic.losses,
            'mean_winnings': r.mean.winnings,
            'mean_losses': r.mean.losses,
            'expected_winnings': r.expected.winnings,
            'expected_losses': r.expected.losses,
            'deviation_winnings': r.deviation.winnings,
            'deviation_losses': r.deviation.losses,
            'p_value': r.p_value,
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=[
        'n_trials', 'switch', 'winnings', 'losses',
        'mean_winnings', 'mean_losses',
        'expected_winnings', 'expected_losses',
        'deviation_winnings', 'deviation_losses',
        'p_value',
    ])
