"""Game action system."""

from .base_action import ActionOutcome, ActionResult, BaseAction, CompoundAction
from .build import BuildAction
from .federation import FederationAction
from .research import ResearchAction
from .ships import LaunchShipAction, MoveShipAction, TradeAction

__all__ = [
    "ActionOutcome",
    "ActionResult",
    "BaseAction",
    "CompoundAction",
    "BuildAction",
    "FederationAction",
    "ResearchAction",
    "LaunchShipAction",
    "MoveShipAction",
    "TradeAction"
]
