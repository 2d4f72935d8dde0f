"""Ship launch, movement and trade actions."""

from .base_action import BaseAction, ActionOutcome, ActionResult
from ..game.game_state import GameState
from ..core.enums import GamePhase, Player
from ..core.exceptions import OutOfRangeError, ShipMovementError, TradeError
from ..core.constants import MAX_SHIPS_PER_PLAYER, SHIP_LAUNCH_COST, TRADE_REWARD
from ..utils.hex_utils import CoordinateLike, parse_coordinate


def _require_ship(game_state: GameState, player: Player, coordinate) -> None:
    if not game_state.board.cell(coordinate).has_ship(player):
        raise ShipMovementError(
            f"{player.value} has no ship on {coordinate}",
            error_code="NO_SHIP",
            context={"hex_coord": str(coordinate)}
        )


class LaunchShipAction(BaseAction):
    """Put a new ship on a hex the player can measure range from."""

    def __init__(self, player: Player, coordinate: CoordinateLike):
        super().__init__(player, "launch")
        self.coordinate = parse_coordinate(coordinate)

    def check(self, game_state: GameState) -> None:
        self.require_phase(game_state, GamePhase.MAIN)
        player_state = game_state.player(self.player)
        cell = game_state.board.cell(self.coordinate)

        if not cell.is_range_starting_point(self.player):
            raise ShipMovementError(
                f"Ships launch from colonized hexes or space stations, not {self.coordinate}",
                error_code="BAD_LAUNCH_SITE"
            )
        if len(game_state.board.ship_locations(self.player)) >= MAX_SHIPS_PER_PLAYER:
            raise ShipMovementError(
                f"{self.player.value} already has {MAX_SHIPS_PER_PLAYER} ships in play",
                error_code="FLEET_FULL"
            )
        player_state.check_cost(SHIP_LAUNCH_COST)

    def _commit(self, game_state: GameState) -> ActionOutcome:
        game_state.player(self.player).pay(SHIP_LAUNCH_COST)
        game_state.board.cell(self.coordinate).add_ship(self.player)
        return ActionOutcome(
            ActionResult.SUCCESS,
            f"Launched ship on {self.coordinate}",
            {"coordinate": str(self.coordinate)}
        )


class MoveShipAction(BaseAction):
    """Move one ship up to the player's navigation range."""

    def __init__(self, player: Player, origin: CoordinateLike, destination: CoordinateLike):
        super().__init__(player, "move")
        self.origin = parse_coordinate(origin)
        self.destination = parse_coordinate(destination)

    def check(self, game_state: GameState) -> None:
        self.require_phase(game_state, GamePhase.MAIN)
        player_state = game_state.player(self.player)
        board = game_state.board

        _require_ship(game_state, self.player, self.origin)
        board.cell(self.destination)
        if self.origin == self.destination:
            raise ShipMovementError("Ship must move to a different hex", error_code="NO_MOVE")

        distance = board.grid.distance(self.origin, self.destination)
        if distance > player_state.navigation_range:
            raise OutOfRangeError(
                f"{self.destination} is {distance} hexes away, range is {player_state.navigation_range}",
                error_code="OUT_OF_RANGE",
                context={"distance": distance, "range": player_state.navigation_range}
            )

    def _commit(self, game_state: GameState) -> ActionOutcome:
        game_state.board.cell(self.origin).remove_ship(self.player)
        game_state.board.cell(self.destination).add_ship(self.player)
        return ActionOutcome(
            ActionResult.SUCCESS,
            f"Moved ship from {self.origin} to {self.destination}",
            {"from": str(self.origin), "to": str(self.destination)}
        )


class TradeAction(BaseAction):
    """Spend an adjacent ship to trade with another player's structure.

    The ship returns to supply and the player's trade marker stays on the
    target. A hex carries at most one marker per player, and a wild marker
    closes it to trade.
    """

    def __init__(self, player: Player, ship_coordinate: CoordinateLike, target: CoordinateLike):
        super().__init__(player, "trade")
        self.ship_coordinate = parse_coordinate(ship_coordinate)
        self.target = parse_coordinate(target)

    def check(self, game_state: GameState) -> None:
        self.require_phase(game_state, GamePhase.MAIN)
        game_state.player(self.player)
        board = game_state.board

        _require_ship(game_state, self.player, self.ship_coordinate)
        target = board.cell(self.target)

        if board.grid.distance(self.ship_coordinate, self.target) > 1:
            raise TradeError(
                f"Ship on {self.ship_coordinate} is not next to {self.target}",
                error_code="NOT_ADJACENT"
            )
        if not target.has_structure() or self.player in target.occupying_players():
            raise TradeError(
                f"{self.target} holds no structure of another player",
                error_code="NO_PARTNER"
            )
        if target.has_trade_token(self.player):
            raise TradeError(
                f"{self.player.value} already traded with {self.target}",
                error_code="ALREADY_TRADED"
            )
        if target.has_wild_trade_token():
            raise TradeError(f"{self.target} is closed to trade", error_code="WILD_MARKER")

    def _commit(self, game_state: GameState) -> ActionOutcome:
        board = game_state.board
        board.cell(self.ship_coordinate).remove_ship(self.player)
        board.cell(self.target).add_trade_token(self.player)
        game_state.player(self.player).gain(TRADE_REWARD)
        return ActionOutcome(
            ActionResult.SUCCESS,
            f"Traded with {self.target}",
            {
                "target": str(self.target),
                "reward": {resource.value: amount for resource, amount in TRADE_REWARD.items()},
            }
        )
