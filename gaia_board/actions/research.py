"""Research track advancement (``p1 up nav``)."""

from .base_action import BaseAction, ActionOutcome, ActionResult
from ..game.game_state import GameState
from ..core.enums import GamePhase, Player, ResearchField
from ..core.exceptions import ResearchTrackCappedError, ResearchTrackOccupiedError
from ..core.constants import MAX_RESEARCH_LEVEL, RESEARCH_COST, RESEARCH_REWARDS


class ResearchAction(BaseAction):
    """Advance one step on a research track.

    Reaching the last level spends a green federation token, and only one
    player may ever sit on the last level of a track.
    """

    def __init__(self, player: Player, research_field: ResearchField):
        super().__init__(player, "research")
        self.research_field = research_field

    def check(self, game_state: GameState) -> None:
        self.require_phase(game_state, GamePhase.MAIN)
        player_state = game_state.player(self.player)
        level = player_state.research_level(self.research_field)

        if level >= MAX_RESEARCH_LEVEL:
            raise ResearchTrackCappedError(
                f"{self.research_field.value} is already at level {MAX_RESEARCH_LEVEL}",
                error_code="TRACK_MAXED",
                context={"field": self.research_field.value}
            )

        if level + 1 == MAX_RESEARCH_LEVEL:
            leader = game_state.research_leader(self.research_field)
            if leader is not None:
                raise ResearchTrackOccupiedError(
                    f"{leader.value} already holds the top of {self.research_field.value}",
                    error_code="TRACK_OCCUPIED",
                    context={"field": self.research_field.value, "leader": leader.value}
                )
            if not player_state.has_green_federation():
                raise ResearchTrackCappedError(
                    f"Reaching level {MAX_RESEARCH_LEVEL} of {self.research_field.value} "
                    f"needs a green federation token",
                    error_code="NEEDS_FEDERATION",
                    context={"field": self.research_field.value}
                )

        player_state.check_cost(RESEARCH_COST)

    def _commit(self, game_state: GameState) -> ActionOutcome:
        player_state = game_state.player(self.player)
        player_state.pay(RESEARCH_COST)
        level = player_state.advance_research(self.research_field)
        if level == MAX_RESEARCH_LEVEL:
            player_state.use_green_federation()

        reward = RESEARCH_REWARDS.get((self.research_field, level), {})
        player_state.gain(reward)

        return ActionOutcome(
            ActionResult.SUCCESS,
            f"Advanced {self.research_field.value} to level {level}",
            {
                "field": self.research_field.value,
                "level": level,
                "reward": {resource.value: amount for resource, amount in reward.items()},
            }
        )
