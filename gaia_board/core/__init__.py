"""Core engine components."""

from .enums import *
from .exceptions import *
from .constants import *

__all__ = [
    # Enums
    "Planet", "Building", "Player", "TradeToken", "Faction", "ResearchField",
    "Resource", "FederationTile", "GamePhase",
    # Exceptions
    "GaiaBoardError", "RuleViolationError", "ContractViolationError", "ValidationError",
    "InvalidActionError", "InvalidHexError", "OccupancyError", "ShipNotPresentError",
    # Constants
    "MAX_PLAYERS", "MIN_PLAYERS", "BUILDING_VALUES", "std_building_value"
]
