"""Board and game state."""

from .board import GameBoard
from .game_state import GameSettings, GameState

__all__ = ["GameBoard", "GameSettings", "GameState"]
