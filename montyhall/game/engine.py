"""
Single-trial Monty Hall game engine.

One instance plays exactly one game:
    run() -> choose() -> open_doors() -> [choose() again to switch] -> is_winner()

Doors are addressed 0-based. Two private generators track the trial:
- placement: hands out doors while items are put behind them
- reveal tracking: doors still closed and not chosen, i.e. what a random
  (re-)choice may land on
"""

import numpy as np
from typing import List, Optional, Tuple, Hashable
import logging

from ..types import GameConfig
from ..draw.generator import NoRepeatGenerator

logger = logging.getLogger(__name__)


class ChoiceRequiredError(RuntimeError):
    """Raised when doors are opened or the game judged before the player has chosen."""


class GameStateError(RuntimeError):
    """Raised when the game is used outside its run -> choose -> reveal order."""


class MontyHallGame:
    """
    A single game of the generalized Monty Hall problem.

    Args:
        config: Item counts, number of doors to reveal and the winning item
        seed: Random source (accepts None, int, SeedSequence or Generator).
              Passing a Generator lets many trials share one stream.
    """

    def __init__(self, config: GameConfig, seed=None):
        self.config = config
        self._rng = np.random.default_rng(seed)

        self._doors: List[Optional[Hashable]] = []
        self._choice: Optional[int] = None
        self._opened: List[int] = []

        self._placement: Optional[NoRepeatGenerator] = None
        self._reveal_tracking: Optional[NoRepeatGenerator] = None

    @property
    def total_doors(self) -> int:
        return self.config.total_doors

    @property
    def doors(self) -> Tuple[Hashable, ...]:
        """Item type behind each door."""
        return tuple(self._doors)

    @property
    def choice(self) -> Optional[int]:
        """Currently chosen door, None before the first choice."""
        return self._choice

    @property
    def opened_doors(self) -> Tuple[int, ...]:
        return tuple(self._opened)

    @property
    def started(self) -> bool:
        return self._placement is not None

    def run(self) -> None:
        """Create both generators and put every item behind a door."""
        if self.started:
            raise GameStateError("Game has already been started; create a new game per trial")

        n_doors = self.total_doors
        self._placement = NoRepeatGenerator(0, n_doors - 1, seed=self._rng)
        self._reveal_tracking = NoRepeatGenerator(0, n_doors - 1, seed=self._rng)

        self._doors = [None] * n_doors
        for item, count in self.config.item_counts.items():
            self._arrange(item, count)

        logger.debug("Placed items behind %d doors: %s", n_doors, self._doors)

    def _arrange(self, item: Hashable, count: int) -> None:
        for _ in range(count):
            self._doors[self._placement.draw()] = item

    def choose(self, door_number: Optional[int] = None) -> int:
        """
        Record the player's choice.

        Called once before the reveal, and again afterwards to switch.

        Args:
            door_number: Door to choose. If None, a random door that is
                         neither opened nor chosen before is picked.

        Returns:
            The chosen door
        """
        self._require_started()

        if door_number is not None:
            self._reveal_tracking.force_remove(door_number)
            self._choice = door_number
        else:
            self._choice = self._reveal_tracking.draw()

        return self._choice

    def open_doors(self) -> List[int]:
        """
        Open the configured number of non-winning doors besides the choice.

        Returns:
            Opened doors in the order they were drawn

        Raises:
            ChoiceRequiredError: If no door has been chosen yet
        """
        self._require_started()
        if self._choice is None:
            raise ChoiceRequiredError("Cannot open doors before the player has made a choice")

        eligible = [
            door for door, item in enumerate(self._doors)
            if item != self.config.winning_item
            and door != self._choice
            and door not in self._opened
        ]
        non_winning = NoRepeatGenerator(remaining=eligible, seed=self._rng)

        opened = []
        for _ in range(self.config.revealed_doors):
            door = non_winning.draw()
            self._reveal_tracking.force_remove(door)
            opened.append(door)

        self._opened.extend(opened)
        return opened

    def is_winner(self) -> bool:
        """Whether the chosen door hides the winning item."""
        self._require_started()
        if self._choice is None:
            raise ChoiceRequiredError("Cannot judge the game before the player has made a choice")

        return self._doors[self._choice] == self.config.winning_item

    def _require_started(self) -> None:
        if not self.started:
            raise GameStateError("Call run() before playing the game")
