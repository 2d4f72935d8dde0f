"""Hex board management and multi-hex queries."""

from typing import Dict, Iterable, List, Optional

from ..core.enums import Building, Planet, Player
from ..core.exceptions import ValidationError
from ..core.constants import std_building_value
from ..entities.hex_cell import HexCell
from ..utils.hex_utils import AxialCoordinate, CoordinateLike, HexGrid, hexagon, parse_coordinate


class GameBoard:
    """Owns the hex cells of one game and answers questions spanning several hexes."""

    def __init__(self, cells: Iterable[HexCell] = ()):
        self.grid: HexGrid[HexCell] = HexGrid(cells)

    @classmethod
    def from_layout(cls, layout: Dict[CoordinateLike, Planet],
                    sectors: Optional[Dict[CoordinateLike, str]] = None) -> "GameBoard":
        """Build a board holding exactly the listed hexes."""
        sectors = {parse_coordinate(k): v for k, v in (sectors or {}).items()}
        cells = []
        for coord, planet in layout.items():
            coord = parse_coordinate(coord)
            cells.append(HexCell(coordinate=coord, planet=planet, sector=sectors.get(coord, "")))
        return cls(cells)

    @classmethod
    def hexagon(cls, radius: int, planets: Optional[Dict[CoordinateLike, Planet]] = None) -> "GameBoard":
        """Build a hexagonal board; hexes not listed in `planets` are empty space."""
        planets = {parse_coordinate(k): v for k, v in (planets or {}).items()}
        layout = {coord: planets.get(coord, Planet.EMPTY) for coord in hexagon(radius)}
        for coord in planets:
            if coord not in layout:
                raise ValidationError(f"Planet at {coord} lies outside a board of radius {radius}")
        return cls.from_layout(layout)

    def validate(self) -> None:
        """Validate board state."""
        for cell in self.grid:
            cell.validate()

    def is_valid_location(self, coord: CoordinateLike) -> bool:
        return coord in self.grid

    def cell(self, coord: CoordinateLike) -> HexCell:
        """Get the cell at a coordinate; raises InvalidHexError when off the board."""
        return self.grid[coord]

    def cells(self) -> List[HexCell]:
        return list(self.grid)

    # Ownership
    def cells_of(self, player: Player) -> List[HexCell]:
        """Hexes where the player has any building, gaia-formers included."""
        return [cell for cell in self.grid if cell.building_of(player) is not None]

    def colonized_cells(self, player: Player) -> List[HexCell]:
        return [cell for cell in self.grid if cell.colonized_by(player)]

    def count_buildings(self, player: Player, building: Building) -> int:
        return sum(1 for cell in self.grid if cell.building_of(player) == building)

    def range_starting_points(self, player: Player) -> List[HexCell]:
        return [cell for cell in self.grid if cell.is_range_starting_point(player)]

    def distance_from_starting_points(self, player: Player, coord: CoordinateLike) -> Optional[int]:
        """Distance from the nearest hex the player may measure range from, None if there is none."""
        target = parse_coordinate(coord)
        distances = [
            self.grid.distance(cell.coordinate, target)
            for cell in self.range_starting_points(player)
        ]
        return min(distances) if distances else None

    def has_foreign_structure_nearby(self, player: Player, coord: CoordinateLike, distance: int) -> bool:
        """Check for another player's structure within `distance` of a hex."""
        for cell in self.grid.within_distance(coord, distance):
            if not cell.has_structure():
                continue
            if any(other != player for other in cell.occupying_players()):
                return True
        return False

    # Federations
    def federation_cells(self, player: Player) -> List[HexCell]:
        return [cell for cell in self.grid if cell.belongs_to_federation_of(player)]

    def federation_value(self, player: Player, coords: Iterable[CoordinateLike]) -> int:
        """Summed building value of the player's buildings among the given hexes."""
        return sum(std_building_value(self.cell(coord).building_of(player)) for coord in coords)

    def is_connected(self, coords: Iterable[CoordinateLike]) -> bool:
        return self.grid.is_connected(coords)

    # Ships
    def ship_locations(self, player: Player) -> List[AxialCoordinate]:
        locations = []
        for cell in self.grid:
            locations.extend([cell.coordinate] * cell.ship_count(player))
        return locations

    def get_state_summary(self) -> Dict[str, object]:
        """Occupied hexes in serializable form."""
        return {
            str(cell.coordinate): cell.to_dict()
            for cell in self.grid
            if cell.occupied() or cell.federation_members or cell.has_ships() or cell.has_trade_tokens()
        }
