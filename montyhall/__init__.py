"""
Monty Hall Simulator

Plays the generalized Monty Hall game many times and compares
empirical win rates of staying and switching with theory.
"""

from .types import GameConfig, ExperimentSettings, ExperimentStatistic, CAR, GOAT
from .draw import NoRepeatGenerator
from .game import MontyHallGame
from .pipeline import run_experiment, run_experiment_series

__version__ = "0.1.0"

__all__ = [
    "GameConfig",
    "ExperimentSettings",
    "ExperimentStatistic",
    "CAR",
    "GOAT",
    "NoRepeatGenerator",
    "MontyHallGame",
    "run_experiment",
    "run_experiment_series",
]
