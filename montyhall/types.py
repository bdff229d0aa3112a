"""
Core data structures for the Monty Hall simulator.

Game configuration, experiment tallies and theoretical expectations.
"""

import numbers
from dataclasses import dataclass
from typing import Dict, Hashable, List


# Item types of the classic game
CAR = "car"
GOAT = "goat"


def _is_integer(value) -> bool:
    """True for ints and numpy integers, False for bools and floats."""
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


@dataclass
class GameConfig:
    """
    Configuration of a single game.

    Attributes:
        item_counts: Mapping of item type -> number of doors hiding it
        revealed_doors: Number of non-winning doors opened after the choice
        winning_item: Item type that counts as a win
    """
    item_counts: Dict[Hashable, int]
    revealed_doors: int = 1
    winning_item: Hashable = CAR

    def __post_init__(self) -> None:
        for item, count in self.item_counts.items():
            if not _is_integer(count) or count < 0:
                raise ValueError(
                    f"GameConfig.item_counts[{item!r}] must be a non-negative integer, got {count!r}."
                )
        if self.winning_count == 0:
            raise ValueError(
                f"GameConfig.winning_item {self.winning_item!r} must be placed behind at least one door."
            )
        if not _is_integer(self.revealed_doors) or self.revealed_doors < 0:
            raise ValueError(
                f"GameConfig.revealed_doors must be a non-negative integer, got {self.revealed_doors!r}."
            )
        if self.revealed_doors > 0 and self.revealed_doors > self.max_revealed_doors:
            raise ValueError(
                f"Cannot reveal {self.revealed_doors} doors: only {self.max_revealed_doors} "
                f"non-winning doors are left besides the player's choice."
            )
        # The player must always have a closed door to switch to
        if self.total_doors - 1 - self.revealed_doors < 1:
            raise ValueError(
                f"Cannot reveal {self.revealed_doors} of {self.total_doors} doors: "
                f"no closed door would be left to switch to."
            )

    @property
    def total_doors(self) -> int:
        """Number of doors (sum of all item counts)."""
        return sum(self.item_counts.values())

    @property
    def winning_count(self) -> int:
        """Number of doors hiding the winning item."""
        return self.item_counts.get(self.winning_item, 0)

    @property
    def max_revealed_doors(self) -> int:
        """Most doors that can be opened without running out of eligible doors."""
        return self.total_doors - self.winning_count - 1

    def to_dict(self) -> Dict:
        """Convert to serializable dict."""
        return {
            'item_counts': dict(self.item_counts),
            'revealed_doors': self.revealed_doors,
            'winning_item': self.winning_item,
        }


@dataclass
class ExperimentSettings:
    """
    Settings of an experiment series.

    Experiments are run with factor, factor**2, ... factor**max_power trials.
    """
    factor: int = 10
    max_power: int = 6

    def __post_init__(self) -> None:
        if self.factor < 2:
            raise ValueError("ExperimentSettings.factor must be at least 2.")
        if self.max_power < 1:
            raise ValueError("ExperimentSettings.max_power must be at least 1.")

    @property
    def trial_counts(self) -> List[int]:
        return [self.factor ** power for power in range(1, self.max_power + 1)]

    def to_dict(self) -> Dict:
        return {'factor': self.factor, 'max_power': self.max_power}


@dataclass
class ExperimentStatistic:
    """Wins and losses tallied over a run of trials."""
    winnings: int = 0
    losses: int = 0

    @property
    def n_trials(self) -> int:
        return self.winnings + self.losses

    def to_dict(self) -> Dict:
        return {'winnings': self.winnings, 'losses': self.losses}


@dataclass
class Expectation:
    """
    Win and loss rates.

    Used both for theoretical means and for absolute deviations
    of observed means from them.
    """
    winnings: float
    losses: float

    def to_dict(self) -> Dict:
        return {'winnings': self.winnings, 'losses': self.losses}


@dataclass
class SeriesResult:
    """
    One experiment of a series, compared against theory.

    Attributes:
        n_trials: Number of games played
        switch: Whether the player switched after the reveal
        statistic: Observed wins and losses
        mean: Observed win and loss rates
        expected: Theoretical win and loss rates
        deviation: Absolute difference between mean and expected
        p_value: Two-sided binomial test of the win count against expected.winnings
    """
    n_trials: int
    switch: bool
    statistic: ExperimentStatistic
    mean: Expectation
    expected: Expectation
    deviation: Expectation
    p_value: float

    def to_dict(self) -> Dict:
        """Convert to serializable dict."""
        return {
            'n_trials': self.n_trials,
            'switch': self.switch,
            'statistic': self.statistic.to_dict(),
            'mean': self.mean.to_dict(),
            'expected': self.expected.to_dict(),
            'deviation': self.deviation.to_dict(),
            'p_value': self.p_value,
        }
