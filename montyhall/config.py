"""
Configuration management for the Monty Hall simulator.

Game presets, experiment series defaults, and JSON loading utilities.
"""

import json
from typing import Dict, Any

from .types import GameConfig, ExperimentSettings, CAR, GOAT


SETTINGS_VERSION = "1.0"


# =============================================================================
# Game Presets
# =============================================================================

GAME_PRESETS: Dict[str, GameConfig] = {
    # Three doors, one car, host opens one goat door.
    'classic': GameConfig(
        item_counts={CAR: 1, GOAT: 2},
        revealed_doors=1,
        winning_item=CAR,
    ),

    # Ten doors, host opens every goat door but one. Switching wins 9/10.
    'ten_doors': GameConfig(
        item_counts={CAR: 1, GOAT: 9},
        revealed_doors=8,
        winning_item=CAR,
    ),

    # Five doors, two cars, one goat door opened. Switching wins 8/15.
    'two_cars': GameConfig(
        item_counts={CAR: 2, GOAT: 3},
        revealed_doors=1,
        winning_item=CAR,
    ),
}

DEFAULT_GAME_PRESET = 'classic'


# =============================================================================
# Default Experiment Settings
# =============================================================================

DEFAULT_SETTINGS = ExperimentSettings(
    factor=10,
    max_power=6,
)


# =============================================================================
# JSON Loading Utilities
# =============================================================================

def game_from_dict(data: Dict[str, Any]) -> GameConfig:
    """Build a GameConfig from its dict form (see load_game_from_json)."""
    return GameConfig(
        item_counts=dict(data['item_counts']),
        revealed_doors=data.get('revealed_doors', 1),
        winning_item=data.get('winning_item', CAR),
    )


def load_game_from_json(path: str) -> GameConfig:
    """
    Load game configuration from JSON file.

    Expected format:
    {
        "item_counts": {"car": 1, "goat": 2},
        "revealed_doors": 1,
        "winning_item": "car"
    }
    """
    with open(path, 'r') as f:
        data = json.load(f)

    return game_from_dict(data)


def save_game_to_json(config: GameConfig, path: str):
    """Save game configuration to JSON file."""
    with open(path, 'w') as f:
        json.dump(config.to_dict(), f, indent=2)


def _validate_version(data: Dict[str, Any]) -> None:
    version = data.get('version', SETTINGS_VERSION)
    if version != SETTINGS_VERSION:
        raise ValueError(
            f"Unsupported settings version '{version}'. "
            f"Expected '{SETTINGS_VERSION}'."
        )


def load_settings_from_json(path: str) -> ExperimentSettings:
    """
    Load experiment series settings from JSON file.

    Expected format:
    {
        "version": "1.0",
        "factor": 10,
        "max_power": 6
    }

    Raises:
        ValueError: If the settings version is unsupported
    """
    with open(path, 'r') as f:
        data = json.load(f)

    _validate_version(data)
    return ExperimentSettings(
        factor=data.get('factor', DEFAULT_SETTINGS.factor),
        max_power=data.get('max_power', DEFAULT_SETTINGS.max_power),
    )


def save_settings_to_json(settings: ExperimentSettings, path: str):
    """Save experiment series settings to JSON file."""
    data = {'version': SETTINGS_VERSION}
    data.update(settings.to_dict())

    with open(path, 'w') as f:
        json.dump(data, f, indent=2)
