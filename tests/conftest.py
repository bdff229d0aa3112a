"""
Pytest fixtures for Monty Hall tests.
"""

import pytest

from montyhall.types import GameConfig, CAR, GOAT
from montyhall.game.engine import MontyHallGame


@pytest.fixture
def classic_config() -> GameConfig:
    """Three doors, one car, one door revealed."""
    return GameConfig(item_counts={CAR: 1, GOAT: 2}, revealed_doors=1, winning_item=CAR)


@pytest.fixture
def ten_door_config() -> GameConfig:
    """Ten doors, one car, all goats but one revealed."""
    return GameConfig(item_counts={CAR: 1, GOAT: 9}, revealed_doors=8, winning_item=CAR)


@pytest.fixture
def two_car_config() -> GameConfig:
    """Five doors, two cars, two doors revealed."""
    return GameConfig(item_counts={CAR: 2, GOAT: 3}, revealed_doors=2, winning_item=CAR)


@pytest.fixture
def started_game(classic_config: GameConfig) -> MontyHallGame:
    """Classic game with items already placed."""
    game = MontyHallGame(classic_config, seed=7)
    game.run()
    return game
