"""Building placement and upgrade actions."""

from typing import Dict, Tuple

from .base_action import BaseAction, ActionOutcome, ActionResult
from ..game.game_state import GameState
from ..core.enums import (
    Building, GamePhase, Planet, Player, ResearchField, Resource, get_colonizable_planets
)
from ..core.exceptions import (
    InvalidActionError, InvalidPhaseError, PlanetAlreadyColonizedError, UpgradeNotAllowedError
)
from ..core.constants import (
    BUILDING_COSTS, GAIA_FORMER_TOKEN_COST, GAIA_FORMERS_AVAILABLE, GAIA_PLANET_EXTRA_COST,
    TRADING_STATION_NEIGHBOR_COST, TRADING_STATION_NEIGHBOR_DISTANCE, UNIQUE_BUILDINGS,
    UPGRADE_SOURCES
)
from ..entities.hex_cell import HexCell
from ..utils.hex_utils import CoordinateLike, parse_coordinate

MAIN = "main"
SECONDARY = "secondary"


def _merge_costs(*costs: Dict[Resource, int]) -> Dict[Resource, int]:
    merged: Dict[Resource, int] = {}
    for cost in costs:
        for resource, amount in cost.items():
            merged[resource] = merged.get(resource, 0) + amount
    return merged


class BuildAction(BaseAction):
    """Place a new building or upgrade an existing one (``p1 build m -4x-1``)."""

    def __init__(self, player: Player, coordinate: CoordinateLike, building: Building):
        super().__init__(player, "build")
        self.coordinate = parse_coordinate(coordinate)
        self.building = building

    def check(self, game_state: GameState) -> None:
        cost, _ = self._resolve(game_state)
        game_state.player(self.player).check_cost(cost)

    def _commit(self, game_state: GameState) -> ActionOutcome:
        cost, placement = self._resolve(game_state)
        cell = game_state.board.cell(self.coordinate)

        game_state.player(self.player).pay(cost)
        if placement == SECONDARY:
            cell.add_secondary_occupant(self.player)
        else:
            cell.claim(self.player, self.building)

        return ActionOutcome(
            ActionResult.SUCCESS,
            f"Built {self.building.value} on {self.coordinate}",
            {
                "coordinate": str(self.coordinate),
                "building": self.building.value,
                "placement": placement,
                "cost": {resource.value: amount for resource, amount in cost.items()},
            }
        )

    def _resolve(self, game_state: GameState) -> Tuple[Dict[Resource, int], str]:
        """Work out cost and kind of placement, raising on an illegal build."""
        cell = game_state.board.cell(self.coordinate)

        if game_state.phase == GamePhase.SETUP:
            return self._resolve_setup(cell), MAIN

        if self.building == Building.MINE:
            return self._resolve_mine(game_state, cell)
        if self.building in UPGRADE_SOURCES:
            return self._resolve_upgrade(game_state, cell), MAIN
        if self.building == Building.GAIA_FORMER:
            return self._resolve_gaia_former(game_state, cell), MAIN
        if self.building == Building.SPACE_STATION:
            return self._resolve_space_station(game_state, cell), MAIN

        raise InvalidActionError(f"Cannot build {self.building.value}", error_code="UNKNOWN_BUILDING")

    def _resolve_setup(self, cell: HexCell) -> Dict[Resource, int]:
        if self.building != Building.MINE:
            raise InvalidPhaseError(
                f"Only mines can be placed during setup, not {self.building.value}",
                error_code="SETUP_MINES_ONLY"
            )
        self._require_free(cell)
        self._require_colonizable(cell)
        return {}

    def _resolve_mine(self, game_state: GameState, cell: HexCell) -> Tuple[Dict[Resource, int], str]:
        player_state = game_state.player(self.player)
        mine_cost = BUILDING_COSTS[Building.MINE]

        if not cell.occupied():
            self._require_colonizable(cell)
            self.require_in_range(game_state, cell.coordinate)
            if cell.planet == Planet.GAIA:
                return _merge_costs(mine_cost, GAIA_PLANET_EXTRA_COST), MAIN
            return mine_cost, MAIN

        if cell.main_occupant == self.player and cell.building == Building.GAIA_FORMER:
            return mine_cost, MAIN

        shareable = (
            player_state.can_share_planets
            and cell.main_occupant != self.player
            and cell.secondary_occupant is None
            and cell.has_structure()
        )
        if not shareable:
            self._require_free(cell)

        self.require_in_range(game_state, cell.coordinate)
        return mine_cost, SECONDARY

    def _resolve_upgrade(self, game_state: GameState, cell: HexCell) -> Dict[Resource, int]:
        if not cell.is_main_occupier(self.player):
            raise UpgradeNotAllowedError(
                f"{self.player.value} does not own the building on {cell.coordinate}",
                error_code="NOT_OWNER",
                context={"hex_coord": str(cell.coordinate)}
            )

        sources = UPGRADE_SOURCES[self.building]
        if cell.building not in sources:
            raise UpgradeNotAllowedError(
                f"Cannot upgrade {cell.building.value} to {self.building.value}",
                error_code="BAD_UPGRADE",
                context={"from": cell.building.value, "to": self.building.value}
            )

        if self.building in UNIQUE_BUILDINGS and game_state.board.count_buildings(self.player, self.building) > 0:
            raise UpgradeNotAllowedError(
                f"{self.player.value} already has a {self.building.value}",
                error_code="UNIQUE_BUILDING"
            )

        if self.building == Building.TRADING_STATION and game_state.board.has_foreign_structure_nearby(
                self.player, cell.coordinate, TRADING_STATION_NEIGHBOR_DISTANCE):
            return TRADING_STATION_NEIGHBOR_COST
        return BUILDING_COSTS[self.building]

    def _resolve_gaia_former(self, game_state: GameState, cell: HexCell) -> Dict[Resource, int]:
        level = game_state.player(self.player).research_level(ResearchField.GAIA_PROJECT)
        if level == 0:
            raise InvalidActionError(
                "Gaia-formers require the gaia project track",
                error_code="NO_GAIA_FORMERS"
            )
        if game_state.board.count_buildings(self.player, Building.GAIA_FORMER) >= GAIA_FORMERS_AVAILABLE[level]:
            raise InvalidActionError(
                f"All {GAIA_FORMERS_AVAILABLE[level]} gaia-formers are on the board",
                error_code="NO_GAIA_FORMERS"
            )

        self._require_free(cell)
        if cell.planet != Planet.TRANSDIM:
            raise InvalidActionError(
                f"Gaia-formers go on transdim planets, {cell.coordinate} is {cell.planet.value}",
                error_code="NOT_TRANSDIM"
            )
        self.require_in_range(game_state, cell.coordinate)
        return {Resource.POWER_TOKENS: GAIA_FORMER_TOKEN_COST[level]}

    def _resolve_space_station(self, game_state: GameState, cell: HexCell) -> Dict[Resource, int]:
        if not game_state.player(self.player).can_build_space_stations:
            raise InvalidActionError(
                f"{game_state.player(self.player).faction.value} cannot build space stations",
                error_code="NO_SPACE_STATIONS"
            )
        self._require_free(cell)
        if cell.has_planet():
            raise InvalidActionError(
                f"Space stations go on empty space, {cell.coordinate} has a planet",
                error_code="NOT_EMPTY_SPACE"
            )
        self.require_in_range(game_state, cell.coordinate)
        return BUILDING_COSTS[Building.SPACE_STATION]

    def _require_free(self, cell: HexCell) -> None:
        if cell.occupied():
            raise PlanetAlreadyColonizedError(
                f"{cell.coordinate} is already occupied by {cell.main_occupant.value}",
                error_code="HEX_TAKEN",
                context={"hex_coord": str(cell.coordinate), "occupants": [p.value for p in cell.occupancy.players()]}
            )

    def _require_colonizable(self, cell: HexCell) -> None:
        if cell.planet not in get_colonizable_planets():
            raise InvalidActionError(
                f"Cannot place a mine on {cell.planet.value} at {cell.coordinate}",
                error_code="NOT_COLONIZABLE",
                context={"hex_coord": str(cell.coordinate), "planet": cell.planet.value}
            )
