"""Game constants for the Gaia board engine."""

from .enums import Building, Faction, FederationTile, ResearchField, Resource


# Game Configuration Constants
MAX_PLAYERS = 5
MIN_PLAYERS = 1
MAX_RESEARCH_LEVEL = 5

# Coordinate notation used by the move protocol, e.g. "-3x4"
COORDINATE_PATTERN = r'^(-?\d+)x(-?\d+)$'

# Standard building values (federation strength / colonization)
BUILDING_VALUES = {
    Building.MINE: 1,
    Building.TRADING_STATION: 2,
    Building.RESEARCH_LAB: 2,
    Building.PLANETARY_INSTITUTE: 3,
    Building.ACADEMY1: 3,
    Building.ACADEMY2: 3,
    Building.GAIA_FORMER: 0,
    Building.SPACE_STATION: 0,
}

# Building Costs
BUILDING_COSTS = {
    Building.MINE: {Resource.ORE: 1, Resource.CREDITS: 2},
    Building.TRADING_STATION: {Resource.ORE: 2, Resource.CREDITS: 6},
    Building.PLANETARY_INSTITUTE: {Resource.ORE: 4, Resource.CREDITS: 6},
    Building.RESEARCH_LAB: {Resource.ORE: 3, Resource.CREDITS: 5},
    Building.ACADEMY1: {Resource.ORE: 6, Resource.CREDITS: 6},
    Building.ACADEMY2: {Resource.ORE: 6, Resource.CREDITS: 6},
    Building.SPACE_STATION: {Resource.QIC: 1},
}

# Trading stations are cheaper next to another player's structure
TRADING_STATION_NEIGHBOR_COST = {Resource.ORE: 2, Resource.CREDITS: 3}
TRADING_STATION_NEIGHBOR_DISTANCE = 2

# Extra cost for settling a gaia planet
GAIA_PLANET_EXTRA_COST = {Resource.QIC: 1}

# Upgrade paths: target building -> buildings it can replace
UPGRADE_SOURCES = {
    Building.TRADING_STATION: [Building.MINE],
    Building.PLANETARY_INSTITUTE: [Building.TRADING_STATION],
    Building.RESEARCH_LAB: [Building.TRADING_STATION],
    Building.ACADEMY1: [Building.RESEARCH_LAB],
    Building.ACADEMY2: [Building.RESEARCH_LAB],
}

# Buildings a player may own at most once
UNIQUE_BUILDINGS = [Building.PLANETARY_INSTITUTE, Building.ACADEMY1, Building.ACADEMY2]

# Gaia project track: power tokens per gaia-former and how many may be deployed
GAIA_FORMER_TOKEN_COST = {1: 6, 2: 6, 3: 4, 4: 3, 5: 3}
GAIA_FORMERS_AVAILABLE = {0: 0, 1: 1, 2: 1, 3: 2, 4: 3, 5: 3}

# Navigation range by navigation level
NAVIGATION_RANGE = [1, 1, 2, 2, 3, 4]

# Factions with board abilities
PLANET_SHARING_FACTIONS = [Faction.LANTIDS]
SPACE_STATION_FACTIONS = [Faction.IVITS]

# Research
RESEARCH_COST = {Resource.KNOWLEDGE: 4}

# One-shot rewards granted on reaching a research level
RESEARCH_REWARDS = {
    (ResearchField.TERRAFORMING, 1): {Resource.ORE: 2},
    (ResearchField.TERRAFORMING, 4): {Resource.ORE: 2},
    (ResearchField.NAVIGATION, 1): {Resource.QIC: 1},
    (ResearchField.NAVIGATION, 3): {Resource.QIC: 1},
    (ResearchField.INTELLIGENCE, 1): {Resource.QIC: 1},
    (ResearchField.INTELLIGENCE, 2): {Resource.QIC: 1},
    (ResearchField.INTELLIGENCE, 3): {Resource.QIC: 2},
    (ResearchField.INTELLIGENCE, 4): {Resource.QIC: 2},
    (ResearchField.INTELLIGENCE, 5): {Resource.QIC: 4},
    (ResearchField.SCIENCE, 5): {Resource.KNOWLEDGE: 9},
    (ResearchField.ECONOMY, 5): {Resource.CREDITS: 6, Resource.ORE: 3},
}

# Federations
FEDERATION_THRESHOLD = 7
SATELLITE_TOKEN_COST = 1
FEDERATION_TILE_SUPPLY = 3

FEDERATION_TILE_REWARDS = {
    FederationTile.FED1: {Resource.VICTORY_POINTS: 12},
    FederationTile.FED2: {Resource.VICTORY_POINTS: 8, Resource.QIC: 1},
    FederationTile.FED3: {Resource.VICTORY_POINTS: 8, Resource.POWER_TOKENS: 2},
    FederationTile.FED4: {Resource.VICTORY_POINTS: 7, Resource.CREDITS: 6},
    FederationTile.FED5: {Resource.VICTORY_POINTS: 7, Resource.ORE: 2},
    FederationTile.FED6: {Resource.VICTORY_POINTS: 6, Resource.KNOWLEDGE: 2},
}

# Ships and trade
SHIP_LAUNCH_COST = {Resource.ORE: 1}
MAX_SHIPS_PER_PLAYER = 3
TRADE_REWARD = {Resource.CREDITS: 3, Resource.VICTORY_POINTS: 1}

# Starting resources
STARTING_RESOURCES = {
    Resource.CREDITS: 15,
    Resource.ORE: 4,
    Resource.KNOWLEDGE: 3,
    Resource.QIC: 1,
    Resource.POWER_TOKENS: 8,
    Resource.VICTORY_POINTS: 10,
}


def std_building_value(building) -> int:
    """Standard value of a building; zero for no building, gaia-formers and space stations."""
    if building is None:
        return 0
    return BUILDING_VALUES.get(building, 0)
