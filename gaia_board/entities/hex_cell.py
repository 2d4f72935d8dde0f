"""Hex cell entity: the occupancy ledger of one board location."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import List, Optional, Set, Union

from ..core.enums import Building, Planet, Player, TradeToken, get_non_structures
from ..core.exceptions import OccupancyError, ShipNotPresentError
from ..core.constants import std_building_value
from ..utils.hex_utils import AxialCoordinate
from ..utils.validation import Validator
from .base import BaseEntity
from .occupancy import MainAndSecondary, MainOnly, Occupancy, Unoccupied, UNOCCUPIED


@dataclass(eq=False)
class HexCell(BaseEntity):
    """One board location: planet, building, owners, federations, ships and trade markers.

    The cell knows nothing about turn order or costs. Mutators are unchecked
    against game rules; the rules layer queries first and mutates after.
    Collections are always allocated and "present" means non-empty.
    """

    coordinate: AxialCoordinate = AxialCoordinate(0, 0)
    planet: Planet = Planet.EMPTY
    sector: str = ""
    occupancy: Occupancy = UNOCCUPIED
    federation_members: Set[Player] = field(default_factory=set)
    ships: Counter = field(default_factory=Counter)
    trade_tokens: List[Union[Player, TradeToken]] = field(default_factory=list)

    def validate(self) -> None:
        """Validate cell state."""
        Validator.validate_type(self.coordinate, AxialCoordinate, "coordinate")
        Validator.validate_enum(self.planet, Planet, "planet")
        if not isinstance(self.occupancy, (Unoccupied, MainOnly, MainAndSecondary)):
            raise OccupancyError(f"Unknown occupancy state: {self.occupancy!r}")
        for count in self.ships.values():
            Validator.validate_positive(count, "ship_count")

    def __repr__(self) -> str:
        return f"HexCell({self.coordinate}, {self.planet.value}, {self.occupancy})"

    # Occupancy views
    @property
    def building(self) -> Optional[Building]:
        """Building of the main occupant."""
        return self.occupancy.building

    @property
    def main_occupant(self) -> Optional[Player]:
        return self.occupancy.owner

    @property
    def secondary_occupant(self) -> Optional[Player]:
        return self.occupancy.secondary_owner

    # Queries
    def has_planet(self) -> bool:
        """Check if a planet is printed on this hex."""
        return self.planet != Planet.EMPTY

    def occupied(self) -> bool:
        """Check if anybody built on this hex."""
        return self.main_occupant is not None

    def occupying_players(self) -> List[Player]:
        """Players counted on this hex for federations and adjacency, main occupant first.

        A gaia-former occupies the hex but never counts.
        """
        if not self.occupied():
            return []
        if self.building == Building.GAIA_FORMER:
            return []
        return self.occupancy.players()

    def building_of(self, player: Player) -> Optional[Building]:
        """Building attributed to a player here.

        A secondary occupant always holds a mine, whatever the main building is.
        """
        if self.secondary_occupant == player:
            return Building.MINE
        if self.main_occupant != player:
            return None
        return self.building

    def colonized_by(self, player: Player) -> bool:
        """Check if the hex counts as colonized by a player.

        Gaia-formers and space stations have no building value, so they never count.
        """
        return std_building_value(self.building_of(player)) > 0

    def is_main_occupier(self, player: Player) -> bool:
        """Check if a player is the principal owner of a colonizing building here."""
        return self.colonized_by(player) and self.secondary_occupant != player

    def has_structure(self) -> bool:
        """Check if the hex holds a structure.

        Space stations and gaia-formers are not structures, so a trading station
        built next to one is still isolated.
        """
        return self.occupied() and self.building not in get_non_structures()

    def is_range_starting_point(self, player: Player) -> bool:
        """Check if a player may measure building range from this hex."""
        return self.colonized_by(player) or self.building_of(player) == Building.SPACE_STATION

    def belongs_to_federation_of(self, player: Player) -> bool:
        return player in self.federation_members

    def has_ships(self) -> bool:
        return len(self.ships) > 0

    def has_ship(self, player: Player) -> bool:
        return self.ships[player] > 0

    def ship_count(self, player: Player) -> int:
        return self.ships[player]

    def has_trade_token(self, player: Player) -> bool:
        return player in self.trade_tokens

    def has_wild_trade_token(self) -> bool:
        return TradeToken.WILD in self.trade_tokens

    def has_trade_tokens(self) -> bool:
        return len(self.trade_tokens) > 0

    # Mutations
    def claim(self, player: Player, building: Building) -> None:
        """Place a building for a new main occupant, or replace the building of the current one."""
        if isinstance(self.occupancy, Unoccupied):
            self.occupancy = MainOnly(building, player)
        elif self.main_occupant == player:
            if isinstance(self.occupancy, MainAndSecondary):
                self.occupancy = MainAndSecondary(building, player, self.occupancy.secondary_owner)
            else:
                self.occupancy = MainOnly(building, player)
        else:
            raise OccupancyError(
                f"Hex {self.coordinate} is held by {self.main_occupant.value}, "
                f"{player.value} cannot claim it",
                error_code="HEX_TAKEN",
                context={"hex_coord": str(self.coordinate), "player": player.value}
            )
        logging.debug(f"{player.value} placed {building.value} on {self.coordinate}")

    def add_secondary_occupant(self, player: Player) -> None:
        """Add a second player holding a mine on this hex."""
        if not isinstance(self.occupancy, MainOnly):
            raise OccupancyError(
                f"Hex {self.coordinate} cannot take a secondary occupant",
                error_code="NO_SECONDARY_SLOT",
                context={"hex_coord": str(self.coordinate), "occupancy": self.occupancy}
            )
        self.occupancy = MainAndSecondary(self.occupancy.building, self.occupancy.owner, player)
        logging.debug(f"{player.value} shares {self.coordinate} with {self.main_occupant.value}")

    def add_to_federation_of(self, player: Player) -> None:
        self.federation_members.add(player)

    def add_ship(self, player: Player) -> None:
        self.ships[player] += 1

    def remove_ship(self, player: Player) -> None:
        """Remove one ship of a player; the player must have a ship here."""
        if self.ships[player] <= 0:
            raise ShipNotPresentError(
                f"{player.value} has no ship on {self.coordinate}",
                error_code="NO_SHIP",
                context={"hex_coord": str(self.coordinate), "player": player.value}
            )
        self.ships[player] -= 1
        if self.ships[player] == 0:
            del self.ships[player]

    def add_trade_token(self, token: Union[Player, TradeToken]) -> None:
        self.trade_tokens.append(token)
