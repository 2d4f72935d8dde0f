"""Occupancy states of a hex.

A hex is in exactly one of three states: nobody built there, one main
occupant owns the building, or a main occupant plus a second player holding a
mine on the same planet (faction ability). Encoding the states as separate
types keeps "secondary without main" and "secondary equal to main"
unrepresentable.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from ..core.enums import Building, Player
from ..core.exceptions import OccupancyError


@dataclass(frozen=True)
class Unoccupied:
    """Nothing built on the hex."""

    @property
    def building(self) -> Optional[Building]:
        return None

    @property
    def owner(self) -> Optional[Player]:
        return None

    @property
    def secondary_owner(self) -> Optional[Player]:
        return None

    def players(self) -> List[Player]:
        return []

    def to_dict(self) -> Dict[str, Any]:
        return {"state": "unoccupied"}


@dataclass(frozen=True)
class MainOnly:
    """A single player owns the building."""
    building: Building
    owner: Player

    @property
    def secondary_owner(self) -> Optional[Player]:
        return None

    def players(self) -> List[Player]:
        return [self.owner]

    def to_dict(self) -> Dict[str, Any]:
        return {"state": "main", "building": self.building.value, "owner": self.owner.value}


@dataclass(frozen=True)
class MainAndSecondary:
    """Main occupant plus a second player's mine on the same hex."""
    building: Building
    owner: Player
    secondary_owner: Player

    def __post_init__(self):
        if self.secondary_owner == self.owner:
            raise OccupancyError(
                f"Player {self.owner.value} cannot be both main and secondary occupant",
                error_code="DUPLICATE_OCCUPANT",
                context={"player": self.owner.value}
            )

    def players(self) -> List[Player]:
        return [self.owner, self.secondary_owner]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "state": "shared",
            "building": self.building.value,
            "owner": self.owner.value,
            "secondary_owner": self.secondary_owner.value,
        }


Occupancy = Union[Unoccupied, MainOnly, MainAndSecondary]

UNOCCUPIED = Unoccupied()
