"""Core enumerations for the Gaia board engine."""

from enum import Enum


class Planet(Enum):
    """Planet kind printed on a board hex."""
    TERRA = "terra"
    DESERT = "desert"
    SWAMP = "swamp"
    OXIDE = "oxide"
    VOLCANIC = "volcanic"
    TITANIUM = "titanium"
    ICE = "ice"
    GAIA = "gaia"
    TRANSDIM = "transdim"
    LOST = "lost"
    EMPTY = "empty"


class Building(Enum):
    """Structures a player can place on a hex.

    Values are the tokens used by the move notation (``p1 build ts -3x4``).
    """
    MINE = "m"
    TRADING_STATION = "ts"
    PLANETARY_INSTITUTE = "PI"
    RESEARCH_LAB = "lab"
    ACADEMY1 = "ac1"
    ACADEMY2 = "ac2"
    GAIA_FORMER = "gf"
    SPACE_STATION = "sp"


class Player(Enum):
    """Seat identifiers."""
    PLAYER1 = "p1"
    PLAYER2 = "p2"
    PLAYER3 = "p3"
    PLAYER4 = "p4"
    PLAYER5 = "p5"


class TradeToken(Enum):
    """Trade markers that do not belong to a seat."""
    WILD = "wild"


class Faction(Enum):
    """Playable factions."""
    TERRANS = "terrans"
    LANTIDS = "lantids"
    GLEENS = "gleens"
    GEODENS = "geodens"
    AMBAS = "ambas"
    IVITS = "ivits"
    XENOS = "xenos"
    TAKLONS = "taklons"


class ResearchField(Enum):
    """Research tracks."""
    TERRAFORMING = "terra"
    NAVIGATION = "nav"
    INTELLIGENCE = "int"
    GAIA_PROJECT = "gaia"
    ECONOMY = "eco"
    SCIENCE = "sci"


class Resource(Enum):
    """Player resource counters."""
    CREDITS = "c"
    ORE = "o"
    KNOWLEDGE = "k"
    QIC = "q"
    POWER_TOKENS = "t"
    VICTORY_POINTS = "vp"


class FederationTile(Enum):
    """Federation tokens taken when a federation is formed."""
    FED1 = "fed1"
    FED2 = "fed2"
    FED3 = "fed3"
    FED4 = "fed4"
    FED5 = "fed5"
    FED6 = "fed6"


class GamePhase(Enum):
    """Coarse game phases relevant to the board rules."""
    SETUP = "setup"
    MAIN = "main"


# Utility functions for enum operations
def get_colonizable_planets():
    """Get planet kinds a mine can be placed on without a gaia-former."""
    return [
        Planet.TERRA, Planet.DESERT, Planet.SWAMP, Planet.OXIDE,
        Planet.VOLCANIC, Planet.TITANIUM, Planet.ICE, Planet.GAIA
    ]


def get_non_structures():
    """Get buildings that occupy a hex without being a structure."""
    return [Building.GAIA_FORMER, Building.SPACE_STATION]
