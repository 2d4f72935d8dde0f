"""Player state: faction, resources, research levels and federation tokens."""

from dataclasses import dataclass, field
from typing import Dict, List

from ..core.enums import Faction, FederationTile, Player, ResearchField, Resource
from ..core.exceptions import InvalidActionError, raise_if_insufficient_resources
from ..core.constants import (
    MAX_RESEARCH_LEVEL, NAVIGATION_RANGE, PLANET_SHARING_FACTIONS,
    SPACE_STATION_FACTIONS, STARTING_RESOURCES
)
from ..utils.validation import GameValidator, Validator
from .base import BaseEntity


@dataclass
class FederationToken:
    """A federation tile held by a player; green tokens can still be spent."""
    tile: FederationTile
    green: bool = True

    def to_dict(self) -> Dict[str, object]:
        return {"tile": self.tile.value, "green": self.green}


@dataclass
class PlayerState(BaseEntity):
    """Represents a seated player."""

    player: Player = Player.PLAYER1
    faction: Faction = Faction.TERRANS
    resources: Dict[Resource, int] = field(default_factory=dict)
    research: Dict[ResearchField, int] = field(default_factory=dict)
    federations: List[FederationToken] = field(default_factory=list)

    def __post_init__(self):
        for resource in Resource:
            self.resources.setdefault(resource, 0)
        for research_field in ResearchField:
            self.research.setdefault(research_field, 0)
        super().__post_init__()

    def validate(self) -> None:
        """Validate player state."""
        Validator.validate_enum(self.player, Player, "player")
        Validator.validate_enum(self.faction, Faction, "faction")
        GameValidator.validate_resources(self.resources)
        for research_field, level in self.research.items():
            GameValidator.validate_research_level(level, f"research.{research_field.value}")

    @property
    def navigation_range(self) -> int:
        """Building range granted by the navigation track."""
        return NAVIGATION_RANGE[self.research_level(ResearchField.NAVIGATION)]

    @property
    def can_share_planets(self) -> bool:
        """Check if the faction may place a mine on another player's planet."""
        return self.faction in PLANET_SHARING_FACTIONS

    @property
    def can_build_space_stations(self) -> bool:
        return self.faction in SPACE_STATION_FACTIONS

    # Resources
    def resource(self, resource: Resource) -> int:
        return self.resources.get(resource, 0)

    def can_afford(self, cost: Dict[Resource, int]) -> bool:
        """Check if the player holds at least the given amounts."""
        return all(self.resource(resource) >= amount for resource, amount in cost.items())

    def check_cost(self, cost: Dict[Resource, int]) -> None:
        """Raise InsufficientResourcesError for the first resource the player lacks."""
        for resource, amount in cost.items():
            raise_if_insufficient_resources(amount, self.resource(resource), resource.name.lower())

    def pay(self, cost: Dict[Resource, int]) -> None:
        """Deduct a cost; the whole cost must be affordable."""
        self.check_cost(cost)
        for resource, amount in cost.items():
            self.resources[resource] -= amount

    def gain(self, reward: Dict[Resource, int]) -> None:
        for resource, amount in reward.items():
            self.resources[resource] = self.resource(resource) + amount

    # Research
    def research_level(self, research_field: ResearchField) -> int:
        return self.research.get(research_field, 0)

    def advance_research(self, research_field: ResearchField) -> int:
        """Move one step up a track and return the new level."""
        level = self.research_level(research_field)
        if level >= MAX_RESEARCH_LEVEL:
            raise InvalidActionError(
                f"{research_field.value} is already at level {MAX_RESEARCH_LEVEL}",
                error_code="TRACK_MAXED",
                context={"player": self.player.value, "field": research_field.value}
            )
        self.research[research_field] = level + 1
        return level + 1

    # Federations
    def has_green_federation(self) -> bool:
        return any(token.green for token in self.federations)

    def add_federation(self, tile: FederationTile) -> FederationToken:
        token = FederationToken(tile)
        self.federations.append(token)
        return token

    def use_green_federation(self) -> FederationToken:
        """Flip the first green federation token."""
        for token in self.federations:
            if token.green:
                token.green = False
                return token
        raise InvalidActionError(
            f"{self.player.value} has no green federation token",
            error_code="NO_GREEN_FEDERATION",
            context={"player": self.player.value}
        )


def create_starting_player(player: Player, faction: Faction) -> PlayerState:
    """Create a player with starting resources."""
    return PlayerState(player=player, faction=faction, resources=dict(STARTING_RESOURCES))
