"""Hex math and validation helpers."""

from .hex_utils import AxialCoordinate, HexGrid, hex_distance, hex_ring, hexagon, parse_coordinate
from .validation import Validator, GameValidator

__all__ = [
    "AxialCoordinate", "HexGrid", "hex_distance", "hex_ring", "hexagon", "parse_coordinate",
    "Validator", "GameValidator"
]
