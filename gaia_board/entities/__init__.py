"""Board and player entity definitions."""

from .base import BaseEntity
from .occupancy import Unoccupied, MainOnly, MainAndSecondary, UNOCCUPIED
from .hex_cell import HexCell
from .player import PlayerState, FederationToken, create_starting_player

__all__ = [
    "BaseEntity", "Unoccupied", "MainOnly", "MainAndSecondary", "UNOCCUPIED",
    "HexCell", "PlayerState", "FederationToken", "create_starting_player"
]
