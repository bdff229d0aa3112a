"""Single-trial game engine."""

from .engine import MontyHallGame, ChoiceRequiredError, GameStateError

__all__ = ["MontyHallGame", "ChoiceRequiredError", "GameStateError"]
