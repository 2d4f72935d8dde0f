"""Axial hex grid mathematics and the generic hex container.

Axial coordinates (pointy-top hexagons), written ``{q}x{r}`` in move notation:
  Direction 0: (q+1, r  ) - East
  Direction 1: (q+1, r-1) - North-East
  Direction 2: (q,   r-1) - North-West
  Direction 3: (q-1, r  ) - West
  Direction 4: (q-1, r+1) - South-West
  Direction 5: (q,   r+1) - South-East
"""

import re
from dataclasses import dataclass
from typing import Dict, Generic, Iterable, Iterator, List, Optional, Set, TypeVar, Union

from ..core.exceptions import InvalidHexError
from ..core.constants import COORDINATE_PATTERN

# Axial direction vectors for pointy-top hexagons
DIRECTIONS = [(1, 0), (1, -1), (0, -1), (-1, 0), (-1, 1), (0, 1)]


@dataclass(frozen=True)
class AxialCoordinate:
    """Represents a hex coordinate in axial form."""
    q: int
    r: int

    def __str__(self) -> str:
        """String representation in move notation."""
        return f"{self.q}x{self.r}"

    @property
    def s(self) -> int:
        """Third cube coordinate."""
        return -self.q - self.r

    def to_string(self) -> str:
        """Convert to string format."""
        return str(self)

    @classmethod
    def from_string(cls, hex_string: str) -> "AxialCoordinate":
        """Create AxialCoordinate from a ``qxr`` string such as ``-3x4``."""
        match = re.match(COORDINATE_PATTERN, hex_string.strip()) if isinstance(hex_string, str) else None
        if not match:
            raise InvalidHexError(
                f"Invalid hex format: {hex_string}",
                error_code="INVALID_HEX",
                context={"hex_coord": hex_string, "pattern": COORDINATE_PATTERN}
            )

        q_str, r_str = match.groups()
        return cls(int(q_str), int(r_str))

    def neighbor(self, direction: int) -> "AxialCoordinate":
        """Get the adjacent coordinate in a direction (0-5)."""
        dq, dr = DIRECTIONS[direction % 6]
        return AxialCoordinate(self.q + dq, self.r + dr)

    def neighbors(self) -> List["AxialCoordinate"]:
        """Get all six adjacent coordinates."""
        return [self.neighbor(direction) for direction in range(6)]

    def distance_to(self, other: "AxialCoordinate") -> int:
        """Hex distance to another coordinate."""
        return hex_distance(self, other)


CoordinateLike = Union[AxialCoordinate, str]


def parse_coordinate(value: CoordinateLike) -> AxialCoordinate:
    """Accept either an AxialCoordinate or its string notation."""
    if isinstance(value, AxialCoordinate):
        return value
    return AxialCoordinate.from_string(value)


def format_coordinate(coord: AxialCoordinate) -> str:
    """Render a coordinate in move notation."""
    return coord.to_string()


def hex_distance(a: AxialCoordinate, b: AxialCoordinate) -> int:
    """Calculate hex distance between two coordinates using cube coordinates."""
    return max(abs(a.q - b.q), abs(a.r - b.r), abs(a.s - b.s))


def hex_ring(center: AxialCoordinate, radius: int) -> List[AxialCoordinate]:
    """Return all coordinates on ring `radius` around `center`.

    Starts at center + radius*dir[4], then walks each of the 6 primary
    directions for `radius` steps.
    """
    if radius == 0:
        return [center]
    results: List[AxialCoordinate] = []
    dq, dr = DIRECTIONS[4]
    q = center.q + dq * radius
    r = center.r + dr * radius
    for i in range(6):
        for _ in range(radius):
            results.append(AxialCoordinate(q, r))
            dq2, dr2 = DIRECTIONS[i]
            q += dq2
            r += dr2
    return results


def hexagon(radius: int, center: AxialCoordinate = AxialCoordinate(0, 0)) -> List[AxialCoordinate]:
    """All coordinates within `radius` of `center`, innermost ring first."""
    coords: List[AxialCoordinate] = []
    for ring in range(radius + 1):
        coords.extend(hex_ring(center, ring))
    return coords


T = TypeVar("T")


class HexGrid(Generic[T]):
    """Container of hex cells keyed by axial coordinate.

    Cells must expose a ``coordinate`` attribute.
    """

    def __init__(self, cells: Iterable[T] = ()):
        self._cells: Dict[AxialCoordinate, T] = {}
        for cell in cells:
            self.add(cell)

    def add(self, cell: T) -> None:
        """Insert a cell, replacing any cell at the same coordinate."""
        self._cells[cell.coordinate] = cell

    def get(self, coord: CoordinateLike) -> Optional[T]:
        """Get the cell at a coordinate, or None when off the grid."""
        return self._cells.get(parse_coordinate(coord))

    def __getitem__(self, coord: CoordinateLike) -> T:
        coord = parse_coordinate(coord)
        cell = self._cells.get(coord)
        if cell is None:
            raise InvalidHexError(
                f"Hex {coord} is not on the board",
                error_code="OFF_BOARD",
                context={"hex_coord": str(coord)}
            )
        return cell

    def __contains__(self, coord: CoordinateLike) -> bool:
        try:
            return parse_coordinate(coord) in self._cells
        except InvalidHexError:
            return False

    def __iter__(self) -> Iterator[T]:
        return iter(self._cells.values())

    def __len__(self) -> int:
        return len(self._cells)

    def coordinates(self) -> List[AxialCoordinate]:
        """All coordinates on the grid."""
        return list(self._cells.keys())

    def neighbors(self, coord: CoordinateLike) -> List[T]:
        """Get cells adjacent to a coordinate that exist on the grid."""
        coord = parse_coordinate(coord)
        return [self._cells[n] for n in coord.neighbors() if n in self._cells]

    def within_distance(self, coord: CoordinateLike, radius: int) -> List[T]:
        """Get all cells within `radius` of a coordinate, the center included."""
        coord = parse_coordinate(coord)
        return [
            self._cells[ring_coord] for ring_coord in hexagon(radius, coord)
            if ring_coord in self._cells
        ]

    def distance(self, a: CoordinateLike, b: CoordinateLike) -> int:
        """Hex distance between two coordinates."""
        return hex_distance(parse_coordinate(a), parse_coordinate(b))

    def is_connected(self, coords: Iterable[CoordinateLike]) -> bool:
        """Check whether a set of coordinates forms one adjacent group."""
        remaining: Set[AxialCoordinate] = {parse_coordinate(c) for c in coords}
        if not remaining:
            return False

        start = next(iter(remaining))
        visited = {start}
        queue = [start]
        while queue:
            current = queue.pop(0)
            for neighbor in current.neighbors():
                if neighbor in remaining and neighbor not in visited:
                    visited.add(neighbor)
                    queue.append(neighbor)

        return visited == remaining
