"""Tests for the hex cell occupancy ledger."""

import pytest

from gaia_board.core.enums import Building, Planet, Player, TradeToken
from gaia_board.core.exceptions import OccupancyError, ShipNotPresentError
from gaia_board.entities.hex_cell import HexCell
from gaia_board.entities.occupancy import MainAndSecondary, MainOnly, Unoccupied
from gaia_board.utils.hex_utils import AxialCoordinate

P1 = Player.PLAYER1
P2 = Player.PLAYER2
P3 = Player.PLAYER3


def make_cell(planet: Planet = Planet.TERRA) -> HexCell:
    return HexCell(coordinate=AxialCoordinate(-3, 4), planet=planet)


class TestUnoccupiedCell:
    def test_has_planet(self):
        assert make_cell(Planet.TERRA).has_planet()
        assert not make_cell(Planet.EMPTY).has_planet()

    @pytest.mark.parametrize("player", list(Player))
    def test_no_claims_for_any_player(self, player):
        cell = make_cell()
        assert not cell.occupied()
        assert cell.occupying_players() == []
        assert not cell.colonized_by(player)
        assert not cell.is_main_occupier(player)
        assert not cell.is_range_starting_point(player)
        assert cell.building_of(player) is None

    def test_no_structure(self):
        assert not make_cell().has_structure()

    def test_occupancy_state(self):
        cell = make_cell()
        assert isinstance(cell.occupancy, Unoccupied)
        assert cell.building is None
        assert cell.main_occupant is None
        assert cell.secondary_occupant is None


class TestMainOccupant:
    def test_build_mine(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)

        assert cell.occupied()
        assert cell.colonized_by(P1)
        assert cell.occupying_players() == [P1]
        assert cell.is_main_occupier(P1)
        assert cell.is_range_starting_point(P1)
        assert cell.has_structure()
        assert not cell.colonized_by(P2)

    def test_upgrade_in_place(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)
        cell.claim(P1, Building.TRADING_STATION)

        assert cell.building == Building.TRADING_STATION
        assert cell.occupancy == MainOnly(Building.TRADING_STATION, P1)

    def test_other_player_cannot_claim(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)

        with pytest.raises(OccupancyError):
            cell.claim(P2, Building.MINE)
        assert cell.main_occupant == P1

    def test_gaia_former_occupies_without_counting(self):
        cell = make_cell(Planet.TRANSDIM)
        cell.claim(P1, Building.GAIA_FORMER)

        assert cell.occupied()
        assert cell.occupying_players() == []
        assert not cell.colonized_by(P1)
        assert not cell.is_range_starting_point(P1)
        assert not cell.has_structure()
        assert cell.building_of(P1) == Building.GAIA_FORMER

    def test_space_station(self):
        cell = make_cell(Planet.EMPTY)
        cell.claim(P1, Building.SPACE_STATION)

        assert cell.occupied()
        assert cell.occupying_players() == [P1]
        assert not cell.colonized_by(P1)
        assert not cell.is_main_occupier(P1)
        assert cell.is_range_starting_point(P1)
        assert not cell.has_structure()

    @pytest.mark.parametrize("building", [
        Building.MINE, Building.TRADING_STATION, Building.PLANETARY_INSTITUTE,
        Building.RESEARCH_LAB, Building.ACADEMY1, Building.ACADEMY2,
    ])
    def test_colonizing_buildings(self, building):
        cell = make_cell()
        cell.claim(P1, building)
        assert cell.colonized_by(P1)
        assert cell.has_structure()


class TestSecondaryOccupant:
    def test_shared_planet(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)
        cell.add_secondary_occupant(P2)

        assert cell.occupying_players() == [P1, P2]
        assert cell.building_of(P2) == Building.MINE
        assert cell.colonized_by(P2)
        assert not cell.is_main_occupier(P2)
        assert cell.is_main_occupier(P1)
        assert cell.secondary_occupant != cell.main_occupant

    def test_secondary_always_holds_a_mine(self):
        cell = make_cell()
        cell.claim(P1, Building.PLANETARY_INSTITUTE)
        cell.add_secondary_occupant(P2)

        assert cell.building_of(P2) == Building.MINE
        assert cell.building_of(P1) == Building.PLANETARY_INSTITUTE

    def test_upgrade_keeps_secondary(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)
        cell.add_secondary_occupant(P2)
        cell.claim(P1, Building.TRADING_STATION)

        assert cell.occupancy == MainAndSecondary(Building.TRADING_STATION, P1, P2)

    def test_secondary_cannot_be_main(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)

        with pytest.raises(OccupancyError):
            cell.add_secondary_occupant(P1)
        assert isinstance(cell.occupancy, MainOnly)

    def test_no_secondary_without_main(self):
        with pytest.raises(OccupancyError):
            make_cell().add_secondary_occupant(P2)

    def test_only_one_secondary(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)
        cell.add_secondary_occupant(P2)

        with pytest.raises(OccupancyError):
            cell.add_secondary_occupant(P3)

    def test_variant_rejects_duplicate_owner(self):
        with pytest.raises(OccupancyError):
            MainAndSecondary(Building.MINE, P1, P1)


class TestFederations:
    def test_add_is_idempotent(self):
        cell = make_cell()
        cell.add_to_federation_of(P1)
        once = set(cell.federation_members)
        cell.add_to_federation_of(P1)

        assert cell.federation_members == once == {P1}
        assert cell.belongs_to_federation_of(P1)
        assert not cell.belongs_to_federation_of(P2)

    def test_several_players(self):
        cell = make_cell(Planet.EMPTY)
        cell.add_to_federation_of(P1)
        cell.add_to_federation_of(P2)
        assert cell.federation_members == {P1, P2}


class TestShips:
    def test_add_then_remove_restores_absence(self):
        cell = make_cell()
        cell.add_ship(P1)
        assert cell.has_ships()
        assert cell.has_ship(P1)

        cell.remove_ship(P1)
        assert not cell.has_ships()
        assert not cell.has_ship(P1)
        assert len(cell.ships) == 0

    def test_ships_stack(self):
        cell = make_cell()
        cell.add_ship(P1)
        cell.add_ship(P1)
        cell.add_ship(P2)

        cell.remove_ship(P1)
        assert cell.ship_count(P1) == 1
        assert cell.ship_count(P2) == 1

        cell.remove_ship(P2)
        assert cell.has_ships()
        assert not cell.has_ship(P2)

    def test_add_then_remove_keeps_other_ships(self):
        cell = make_cell()
        cell.add_ship(P2)
        cell.add_ship(P1)
        cell.remove_ship(P1)
        assert dict(cell.ships) == {P2: 1}

    def test_remove_missing_ship_is_a_contract_error(self):
        cell = make_cell()
        cell.add_ship(P2)

        with pytest.raises(ShipNotPresentError):
            cell.remove_ship(P1)
        assert dict(cell.ships) == {P2: 1}


class TestTradeTokens:
    def test_presence(self):
        cell = make_cell()
        assert not cell.has_trade_tokens()

        cell.add_trade_token(P1)
        assert cell.has_trade_tokens()
        assert cell.has_trade_token(P1)
        assert not cell.has_trade_token(P2)
        assert not cell.has_wild_trade_token()

    def test_wild_and_duplicates(self):
        cell = make_cell()
        cell.add_trade_token(TradeToken.WILD)
        cell.add_trade_token(P1)
        cell.add_trade_token(P1)

        assert cell.has_wild_trade_token()
        assert cell.trade_tokens == [TradeToken.WILD, P1, P1]


class TestSerialization:
    def test_to_dict(self):
        cell = make_cell()
        cell.claim(P1, Building.MINE)
        cell.add_secondary_occupant(P2)
        cell.add_to_federation_of(P1)
        cell.add_ship(P2)

        data = cell.to_dict()
        assert data["coordinate"] == "-3x4"
        assert data["planet"] == "terra"
        assert data["occupancy"] == {"state": "shared", "building": "m", "owner": "p1", "secondary_owner": "p2"}
        assert data["federation_members"] == ["p1"]
        assert data["ships"] == {"p2": 1}
