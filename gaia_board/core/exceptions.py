"""Custom exceptions for the Gaia board engine.

Two families matter to callers:

* ``RuleViolationError`` - the move is illegal. The engine rejects it and the
  board is left exactly as it was before the attempt.
* ``ContractViolationError`` - the caller broke a precondition of the board
  model (for example removing a ship that is not there). These indicate a bug
  upstream and are never turned into a game-rule message.
"""


class GaiaBoardError(Exception):
    """Base exception for all Gaia board engine errors."""

    def __init__(self, message: str, error_code: str = None, context: dict = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.context = context or {}

    def __str__(self):
        base_msg = self.message
        if self.error_code:
            base_msg = f"[{self.error_code}] {base_msg}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base_msg = f"{base_msg} (Context: {context_str})"
        return base_msg


# Game State Exceptions
class GameStateError(GaiaBoardError):
    """Errors related to game state management."""
    pass


# Rule violations
class RuleViolationError(GaiaBoardError):
    """A move is illegal in the current game state."""
    pass


class InvalidActionError(RuleViolationError):
    """Action is invalid for current game state."""
    pass


class InvalidPhaseError(RuleViolationError):
    """Action attempted in the wrong game phase."""
    pass


class InvalidHexError(RuleViolationError):
    """Coordinate is malformed or not on the board."""
    pass


class InsufficientResourcesError(RuleViolationError):
    """Player lacks required resources for action."""
    pass


class OutOfRangeError(RuleViolationError):
    """Target hex is beyond the player's reach."""
    pass


class PlanetAlreadyColonizedError(RuleViolationError):
    """Target hex is already taken."""
    pass


class UpgradeNotAllowedError(RuleViolationError):
    """Building cannot be upgraded into the requested structure."""
    pass


class FederationError(RuleViolationError):
    """Errors related to forming federations."""
    pass


class InvalidFederationError(FederationError):
    """Selected hexes do not form a legal federation."""
    pass


class FederationTileUnavailableError(FederationError):
    """Requested federation tile is not in supply."""
    pass


class ResearchError(RuleViolationError):
    """Errors related to research track advancement."""
    pass


class ResearchTrackCappedError(ResearchError):
    """Track cannot be advanced any further."""
    pass


class ResearchTrackOccupiedError(ResearchError):
    """Another player already holds the last level of the track."""
    pass


class ShipMovementError(RuleViolationError):
    """Ship cannot be launched or moved as requested."""
    pass


class TradeError(RuleViolationError):
    """Trade cannot be carried out."""
    pass


# Contract violations
class ContractViolationError(GaiaBoardError):
    """A caller broke a precondition of the board model."""
    pass


class OccupancyError(ContractViolationError):
    """Occupancy change would break the hex occupancy invariants."""
    pass


class ShipNotPresentError(ContractViolationError):
    """Ship removal requested for a player with no ship on the hex."""
    pass


class InvalidPlayerError(ContractViolationError):
    """Player is not seated in this game."""
    pass


# Validation Exceptions
class ValidationError(GaiaBoardError):
    """Errors related to input or configuration validation."""
    pass


class InvalidInputError(ValidationError):
    """Invalid input provided."""
    pass


class RangeValidationError(ValidationError):
    """Value outside valid range."""
    pass


class TypeValidationError(ValidationError):
    """Invalid type provided."""
    pass


# Utility functions for exception handling
def raise_if_invalid_player(player, valid_players: list, context: str = ""):
    """Raise InvalidPlayerError if player is not seated."""
    if player not in valid_players:
        raise InvalidPlayerError(
            f"Player {player.value if hasattr(player, 'value') else player} is not in this game",
            error_code="INVALID_PLAYER",
            context={"player": player, "valid_players": valid_players, "context": context}
        )


def raise_if_insufficient_resources(required: int, available: int, resource_type: str):
    """Raise InsufficientResourcesError if not enough resources."""
    if available < required:
        raise InsufficientResourcesError(
            f"Insufficient {resource_type}: need {required}, have {available}",
            error_code="INSUFFICIENT_RESOURCES",
            context={"required": required, "available": available, "resource_type": resource_type}
        )
