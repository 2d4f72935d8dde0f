import pytest

from gaia_board.actions import BuildAction
from gaia_board.core.enums import Building, Faction, Planet, Player
from gaia_board.game.board import GameBoard
from gaia_board.game.game_state import GameSettings, GameState

P1 = Player.PLAYER1
P2 = Player.PLAYER2

# Distances from 0x0: 1x0, 0x1, -1x1, -1x0, 1x-1 and 0x-1 are adjacent,
# 2x0 is two hexes away, 3x0 and -3x3 three.
LAYOUT = {
    "0x0": Planet.TERRA,
    "1x0": Planet.DESERT,
    "2x0": Planet.SWAMP,
    "3x0": Planet.TITANIUM,
    "0x1": Planet.OXIDE,
    "-1x1": Planet.VOLCANIC,
    "-1x0": Planet.TRANSDIM,
    "1x-1": Planet.GAIA,
    "-3x3": Planet.ICE,
    "-3x2": Planet.TERRA,
    "4x-4": Planet.DESERT,
}


@pytest.fixture
def board() -> GameBoard:
    return GameBoard.hexagon(5, LAYOUT)


@pytest.fixture
def game(board) -> GameState:
    """Two seated players, still in setup."""
    game = GameState(settings=GameSettings(player_count=2), board=board)
    game.add_player(P1, Faction.TERRANS)
    game.add_player(P2, Faction.LANTIDS)
    return game


@pytest.fixture
def started_game(game) -> GameState:
    """p1 has a mine on 0x0, p2 a mine on -3x3, main phase."""
    game.apply(BuildAction(P1, "0x0", Building.MINE))
    game.apply(BuildAction(P2, "-3x3", Building.MINE))
    game.start()
    return game
