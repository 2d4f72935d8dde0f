"""Central game state: board, seated players, phase and action log."""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, TYPE_CHECKING

from ..core.enums import Faction, FederationTile, GamePhase, Player, ResearchField
from ..core.exceptions import GameStateError, RuleViolationError, raise_if_invalid_player
from ..core.constants import (
    FEDERATION_THRESHOLD, FEDERATION_TILE_SUPPLY, MAX_RESEARCH_LEVEL, SATELLITE_TOKEN_COST
)
from ..entities.player import PlayerState, create_starting_player
from ..utils.validation import GameValidator, Validator
from .board import GameBoard

if TYPE_CHECKING:
    from ..actions.base_action import ActionOutcome, BaseAction


@dataclass
class GameSettings:
    """Configuration settings for a game."""

    player_count: int = 2
    federation_threshold: int = FEDERATION_THRESHOLD
    satellite_cost: int = SATELLITE_TOKEN_COST
    federation_tile_supply: int = FEDERATION_TILE_SUPPLY

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        """Validate game settings."""
        GameValidator.validate_player_count(self.player_count)
        Validator.validate_positive(self.federation_threshold, "federation_threshold")
        Validator.validate_non_negative(self.satellite_cost, "satellite_cost")
        Validator.validate_non_negative(self.federation_tile_supply, "federation_tile_supply")


@dataclass
class GameState:
    """Central game state coordinator.

    Moves go through ``apply``: the action's checks run to completion before
    any mutation, so a rejected move leaves board and counters untouched.
    """

    game_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    settings: GameSettings = field(default_factory=GameSettings)
    phase: GamePhase = GamePhase.SETUP
    board: GameBoard = field(default_factory=GameBoard)
    players: Dict[Player, PlayerState] = field(default_factory=dict)
    federation_supply: Dict[FederationTile, int] = field(default_factory=dict)
    action_log: List[Dict[str, Any]] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)

    def __post_init__(self):
        """Initialize federation tile supply."""
        for tile in FederationTile:
            self.federation_supply.setdefault(tile, self.settings.federation_tile_supply)

    def validate(self) -> None:
        """Validate entire game state."""
        self.settings.validate()
        Validator.validate_enum(self.phase, GamePhase, "phase")
        if len(self.players) > self.settings.player_count:
            raise GameStateError(
                f"Too many players: {len(self.players)} > {self.settings.player_count}"
            )
        for player_state in self.players.values():
            player_state.validate()
        self.board.validate()

    @property
    def is_setup(self) -> bool:
        return self.phase == GamePhase.SETUP

    def add_player(self, player: Player, faction: Faction) -> PlayerState:
        """Seat a player with starting resources."""
        if player in self.players:
            raise GameStateError(f"Player {player.value} is already seated", error_code="DUPLICATE_PLAYER")
        if len(self.players) >= self.settings.player_count:
            raise GameStateError(
                f"Game is full with {self.settings.player_count} players",
                error_code="GAME_FULL"
            )
        if any(seated.faction == faction for seated in self.players.values()):
            raise GameStateError(f"Faction {faction.value} is already taken", error_code="DUPLICATE_FACTION")

        player_state = create_starting_player(player, faction)
        self.players[player] = player_state
        logging.info(f"{player.value} joins game {self.game_id} as {faction.value}")
        return player_state

    def player(self, player: Player) -> PlayerState:
        """Get a seated player's state."""
        raise_if_invalid_player(player, list(self.players.keys()))
        return self.players[player]

    def start(self) -> None:
        """Leave the setup phase."""
        if self.phase != GamePhase.SETUP:
            raise GameStateError("Game has already started", error_code="ALREADY_STARTED")
        self.phase = GamePhase.MAIN
        logging.info(f"Game {self.game_id} started with {len(self.players)} players")

    def research_leader(self, research_field: ResearchField) -> Optional[Player]:
        """Player holding the last level of a track, if any."""
        for player, player_state in self.players.items():
            if player_state.research_level(research_field) >= MAX_RESEARCH_LEVEL:
                return player
        return None

    # Two-phase move API
    def can_apply(self, action: "BaseAction") -> bool:
        """Query phase: True if the action would be accepted now."""
        return action.validate(self)

    def apply(self, action: "BaseAction") -> "ActionOutcome":
        """Commit phase: check the whole action, then execute it.

        Raises the RuleViolationError describing why a move was rejected.
        """
        try:
            outcome = action.execute(self)
        except RuleViolationError as e:
            logging.warning(f"Rejected {action.action_type} by {action.player.value}: {e}")
            raise

        logging.info(f"{action.player.value} {action.action_type}: {outcome.message}")
        return outcome

    def try_apply(self, action: "BaseAction") -> "ActionOutcome":
        """Like ``apply`` but reports a rejected move as an INVALID outcome."""
        from ..actions.base_action import ActionOutcome, ActionResult

        try:
            return self.apply(action)
        except RuleViolationError as e:
            return ActionOutcome(
                ActionResult.INVALID, e.message,
                {"error_code": e.error_code, "context": e.context}
            )

    def _log_action(self, action_type: str, data: Dict[str, Any]) -> None:
        """Append an executed action to the log."""
        self.action_log.append({
            "action_type": action_type,
            "phase": self.phase.value,
            "timestamp": datetime.now().isoformat(),
            **data
        })

    def get_state_summary(self) -> Dict[str, Any]:
        """Get a summary of the current game state."""
        return {
            "game_id": self.game_id,
            "phase": self.phase.value,
            "players": {p.value: state.to_dict() for p, state in self.players.items()},
            "federation_supply": {tile.value: count for tile, count in self.federation_supply.items()},
            "board": self.board.get_state_summary(),
            "actions": len(self.action_log),
        }
