"""Federation formation action."""

from typing import Dict, Iterable, List

from .base_action import BaseAction, ActionOutcome, ActionResult
from ..game.game_state import GameState
from ..core.enums import FederationTile, GamePhase, Player, Resource
from ..core.exceptions import FederationTileUnavailableError, InvalidFederationError
from ..core.constants import FEDERATION_TILE_REWARDS
from ..entities.hex_cell import HexCell
from ..utils.hex_utils import CoordinateLike, parse_coordinate


class FederationAction(BaseAction):
    """Group connected hexes into a federation (``p1 federation 1x-3,2x-1,2x-3 fed3``).

    Hexes where the player is an occupying player contribute their building
    value; every other selected hex holds a satellite paid with power tokens.
    """

    def __init__(self, player: Player, coordinates: Iterable[CoordinateLike], tile: FederationTile):
        super().__init__(player, "federation")
        self.coordinates = [parse_coordinate(coord) for coord in coordinates]
        self.tile = tile

    def check(self, game_state: GameState) -> None:
        self.require_phase(game_state, GamePhase.MAIN)
        player_state = game_state.player(self.player)
        board = game_state.board

        if not self.coordinates:
            raise InvalidFederationError("A federation needs at least one hex", error_code="EMPTY_FEDERATION")
        if len(set(self.coordinates)) != len(self.coordinates):
            raise InvalidFederationError("Federation lists a hex twice", error_code="DUPLICATE_HEX")

        cells = [board.cell(coord) for coord in self.coordinates]
        if not board.is_connected(self.coordinates):
            raise InvalidFederationError(
                "Federation hexes must form one connected group",
                error_code="NOT_CONNECTED",
                context={"hexes": [str(c) for c in self.coordinates]}
            )

        if game_state.federation_supply.get(self.tile, 0) <= 0:
            raise FederationTileUnavailableError(
                f"No {self.tile.value} tile left in supply",
                error_code="TILE_UNAVAILABLE"
            )

        taken = [str(cell.coordinate) for cell in cells if cell.belongs_to_federation_of(self.player)]
        if taken:
            raise InvalidFederationError(
                f"Hexes already in a federation of {self.player.value}: {', '.join(taken)}",
                error_code="ALREADY_FEDERATED",
                context={"hexes": taken}
            )

        members = self._members(cells)
        if not members:
            raise InvalidFederationError(
                f"Federation contains no building of {self.player.value}",
                error_code="NO_BUILDINGS"
            )

        value = board.federation_value(self.player, [cell.coordinate for cell in members])
        threshold = game_state.settings.federation_threshold
        if value < threshold:
            raise InvalidFederationError(
                f"Federation value {value} is below the required {threshold}",
                error_code="TOO_WEAK",
                context={"value": value, "threshold": threshold}
            )

        player_state.check_cost(self._satellite_cost(game_state, cells))

    def _commit(self, game_state: GameState) -> ActionOutcome:
        player_state = game_state.player(self.player)
        cells = [game_state.board.cell(coord) for coord in self.coordinates]
        satellite_cost = self._satellite_cost(game_state, cells)

        player_state.pay(satellite_cost)
        for cell in cells:
            cell.add_to_federation_of(self.player)

        game_state.federation_supply[self.tile] -= 1
        player_state.add_federation(self.tile)
        reward = FEDERATION_TILE_REWARDS[self.tile]
        player_state.gain(reward)

        return ActionOutcome(
            ActionResult.SUCCESS,
            f"Formed federation of {len(cells)} hexes with {self.tile.value}",
            {
                "hexes": [str(coord) for coord in self.coordinates],
                "satellites": len(cells) - len(self._members(cells)),
                "tile": self.tile.value,
                "reward": {resource.value: amount for resource, amount in reward.items()},
            }
        )

    def _members(self, cells: List[HexCell]) -> List[HexCell]:
        return [cell for cell in cells if self.player in cell.occupying_players()]

    def _satellite_cost(self, game_state: GameState, cells: List[HexCell]) -> Dict[Resource, int]:
        satellites = len(cells) - len(self._members(cells))
        if satellites == 0:
            return {}
        return {Resource.POWER_TOKENS: satellites * game_state.settings.satellite_cost}
