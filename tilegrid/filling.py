"""Generation of hexagonal regions of tile positions."""

from __future__ import annotations

from tilegrid.axial import AxialPos
from tilegrid.hex_directions import HEX_DIRECTIONS, HexDirection


def generate_hex_ring(origin: AxialPos, radius: int) -> list[AxialPos]:
    """Positions forming a ring of ``radius`` around ``origin``; just ``origin`` for radius 0."""
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    if radius == 0:
        return [origin]
    ring: list[AxialPos] = []
    for direction in HEX_DIRECTIONS:
        corner = origin + radius * AxialPos.from_direction(direction)
        # The tangent is the direction travelled to reach the next corner.
        tangent = AxialPos.from_direction(HexDirection.from_int(int(direction) + 2))
        ring.extend(corner + k * tangent for k in range(radius))
    return ring


def generate_hexagon(origin: AxialPos, radius: int) -> list[AxialPos]:
    """Positions forming a filled hexagon of ``radius`` around ``origin``."""
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")
    hexagon: list[AxialPos] = []
    for r in range(radius + 1):
        hexagon.extend(generate_hex_ring(origin, r))
    return hexagon