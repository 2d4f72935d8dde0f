"""Base action class for the command pattern implementation."""

import copy
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

from ..core.enums import GamePhase, Player
from ..core.exceptions import InvalidActionError, InvalidPhaseError, OutOfRangeError, RuleViolationError
from ..game.game_state import GameState
from ..utils.hex_utils import AxialCoordinate


class ActionResult(Enum):
    """Result types for action execution."""
    SUCCESS = "success"
    INVALID = "invalid"


@dataclass
class ActionOutcome:
    """Result of executing an action."""
    result: ActionResult
    message: str
    data: Optional[Dict[str, Any]] = None


class BaseAction(ABC):
    """Base class for all game actions using Command pattern.

    ``check`` only queries and raises a RuleViolationError on an illegal move.
    ``execute`` runs ``check`` and then commits through ``_commit``.
    """

    def __init__(self, player: Player, action_type: str):
        self.player = player
        self.action_type = action_type
        self.executed = False
        self.outcome: Optional[ActionOutcome] = None

    @abstractmethod
    def check(self, game_state: GameState) -> None:
        """Raise a RuleViolationError if the action is illegal. Must not mutate."""
        pass

    @abstractmethod
    def _commit(self, game_state: GameState) -> ActionOutcome:
        """Apply the action to an already checked state."""
        pass

    def validate(self, game_state: GameState) -> bool:
        """Check if this action can be executed in the current game state."""
        try:
            self.check(game_state)
            return True
        except RuleViolationError:
            return False

    def execute(self, game_state: GameState) -> ActionOutcome:
        """Execute the action and return the outcome."""
        self.check(game_state)
        outcome = self._commit(game_state)

        self.executed = True
        self.outcome = outcome
        self.log_execution(game_state, outcome)
        return outcome

    def get_action_data(self) -> Dict[str, Any]:
        """Get serializable data about this action."""
        return {
            "player": self.player.value,
            "action_type": self.action_type,
            "executed": self.executed,
            "outcome": self.outcome.result.value if self.outcome else None
        }

    def log_execution(self, game_state: GameState, outcome: ActionOutcome):
        """Log this action's execution."""
        action_data = self.get_action_data()
        action_data.update({
            "outcome_message": outcome.message,
            "outcome_data": outcome.data
        })

        game_state._log_action(self.action_type, action_data)

    # Shared checks
    def require_phase(self, game_state: GameState, phase: GamePhase) -> None:
        if game_state.phase != phase:
            raise InvalidPhaseError(
                f"Cannot {self.action_type} during the {game_state.phase.value} phase",
                error_code="WRONG_PHASE",
                context={"current_phase": game_state.phase.value, "required_phase": phase.value}
            )

    def require_in_range(self, game_state: GameState, target: AxialCoordinate) -> None:
        """Target must lie within navigation range of one of the player's range starting points."""
        player_state = game_state.player(self.player)
        distance = game_state.board.distance_from_starting_points(self.player, target)
        if distance is None or distance > player_state.navigation_range:
            raise OutOfRangeError(
                f"{target} is out of range for {self.player.value}",
                error_code="OUT_OF_RANGE",
                context={"distance": distance, "range": player_state.navigation_range}
            )


class CompoundAction(BaseAction):
    """Chain of sub-actions forming one move.

    The whole chain is rehearsed on a copy of the game state, so a later
    illegal step rejects the move before any earlier step is committed.
    """

    def __init__(self, player: Player, sub_actions: List[BaseAction]):
        super().__init__(player, "compound")
        self.sub_actions = sub_actions

    def check(self, game_state: GameState) -> None:
        """All sub-actions must be valid when run in order."""
        if not self.sub_actions:
            raise InvalidActionError("Move contains no actions", error_code="EMPTY_MOVE")
        for action in self.sub_actions:
            if action.player != self.player:
                raise InvalidActionError(
                    f"Sub-action {action.action_type} belongs to {action.player.value}, "
                    f"not {self.player.value}",
                    error_code="MIXED_PLAYERS"
                )

        rehearsal = copy.deepcopy(game_state)
        for action in copy.deepcopy(self.sub_actions):
            action.execute(rehearsal)

    def _commit(self, game_state: GameState) -> ActionOutcome:
        """Execute all sub-actions in sequence."""
        results = [action.execute(game_state) for action in self.sub_actions]
        return ActionOutcome(
            ActionResult.SUCCESS,
            f"All {len(self.sub_actions)} sub-actions completed successfully",
            {"sub_results": [outcome.message for outcome in results]}
        )
