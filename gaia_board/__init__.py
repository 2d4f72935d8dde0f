"""
Gaia Board - board-state core of a turn-based space strategy engine.

This package tracks what occupies each hex of the map (planets, buildings,
owners, federations, ships, trade markers) and validates moves against it
before committing them.
"""

__version__ = "0.1.0"

from .game.game_state import GameState, GameSettings
from .game.board import GameBoard
from .entities.hex_cell import HexCell

__all__ = ["GameState", "GameSettings", "GameBoard", "HexCell"]
