import pytest

from gaia_board.actions import LaunchShipAction, MoveShipAction, TradeAction
from gaia_board.core.enums import Building, Player, Resource, TradeToken
from gaia_board.core.exceptions import OutOfRangeError, ShipMovementError, TradeError

P1 = Player.PLAYER1
P2 = Player.PLAYER2


@pytest.fixture
def fleet_game(started_game):
    """p1 has one ship on its home hex; p2 also holds a mine on -1x1."""
    started_game.board.cell("-1x1").claim(P2, Building.MINE)
    started_game.apply(LaunchShipAction(P1, "0x0"))
    return started_game


class TestLaunch:
    def test_launch_from_colonized_hex(self, started_game):
        started_game.apply(LaunchShipAction(P1, "0x0"))

        assert started_game.board.cell("0x0").has_ship(P1)
        assert started_game.player(P1).resource(Resource.ORE) == 3

    def test_launch_site_must_be_own(self, started_game):
        with pytest.raises(ShipMovementError):
            started_game.apply(LaunchShipAction(P1, "1x0"))
        with pytest.raises(ShipMovementError):
            started_game.apply(LaunchShipAction(P1, "-3x3"))

    def test_fleet_limit(self, started_game):
        for _ in range(3):
            started_game.apply(LaunchShipAction(P1, "0x0"))
        assert started_game.board.cell("0x0").ship_count(P1) == 3

        with pytest.raises(ShipMovementError):
            started_game.apply(LaunchShipAction(P1, "0x0"))
        assert started_game.player(P1).resource(Resource.ORE) == 1


class TestMove:
    def test_move(self, fleet_game):
        fleet_game.apply(MoveShipAction(P1, "0x0", "0x-1"))

        assert not fleet_game.board.cell("0x0").has_ships()
        assert fleet_game.board.cell("0x-1").has_ship(P1)

    def test_move_out_of_range(self, fleet_game):
        with pytest.raises(OutOfRangeError):
            fleet_game.apply(MoveShipAction(P1, "0x0", "3x0"))
        assert fleet_game.board.cell("0x0").has_ship(P1)

    def test_move_without_ship(self, fleet_game):
        with pytest.raises(ShipMovementError):
            fleet_game.apply(MoveShipAction(P1, "1x0", "2x0"))

    def test_must_move(self, fleet_game):
        with pytest.raises(ShipMovementError):
            fleet_game.apply(MoveShipAction(P1, "0x0", "0x0"))


class TestTrade:
    def test_trade(self, fleet_game):
        fleet_game.apply(TradeAction(P1, "0x0", "-1x1"))

        player = fleet_game.player(P1)
        target = fleet_game.board.cell("-1x1")
        assert target.has_trade_token(P1)
        assert not fleet_game.board.cell("0x0").has_ships()
        assert player.resource(Resource.CREDITS) == 18
        assert player.resource(Resource.VICTORY_POINTS) == 11

    def test_one_marker_per_player(self, fleet_game):
        fleet_game.apply(TradeAction(P1, "0x0", "-1x1"))
        fleet_game.apply(LaunchShipAction(P1, "0x0"))

        with pytest.raises(TradeError):
            fleet_game.apply(TradeAction(P1, "0x0", "-1x1"))
        assert fleet_game.board.cell("0x0").has_ship(P1)

    def test_wild_marker_closes_trade(self, fleet_game):
        fleet_game.board.cell("-1x1").add_trade_token(TradeToken.WILD)
        with pytest.raises(TradeError):
            fleet_game.apply(TradeAction(P1, "0x0", "-1x1"))

    def test_needs_foreign_structure(self, fleet_game):
        with pytest.raises(TradeError):
            fleet_game.apply(TradeAction(P1, "0x0", "0x0"))
        with pytest.raises(TradeError):
            fleet_game.apply(TradeAction(P1, "0x0", "1x0"))

    def test_needs_adjacent_ship(self, fleet_game):
        with pytest.raises(TradeError):
            fleet_game.apply(TradeAction(P1, "0x0", "-3x3"))
