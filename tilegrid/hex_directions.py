"""Directions around a hexagonal tile."""

from __future__ import annotations

import enum


class HexDirection(enum.IntEnum):
    """Neighbor direction as a multiple of pi/3; arithmetic wraps modulo 6."""

    ZERO = 0
    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5

    @staticmethod
    def from_int(value: int) -> HexDirection:
        """The direction for any integer, taken modulo 6."""
        return HEX_DIRECTIONS[value % 6]

    def __add__(self, other: int) -> HexDirection:
        if not isinstance(other, int):
            return NotImplemented
        return HexDirection.from_int(int(self) + int(other))

    def __sub__(self, other: int) -> HexDirection:
        if not isinstance(other, int):
            return NotImplemented
        return HexDirection.from_int(int(self) - int(other))

    def to_row(self) -> HexRowDirection:
        """The compass direction for row-oriented maps."""
        return HexRowDirection(int(self))

    def to_col(self) -> HexColDirection:
        """The compass direction for column-oriented maps."""
        return HexColDirection(int(self))


HEX_DIRECTIONS = tuple(HexDirection)
"""All hex directions, in order."""

HEX_OFFSETS = ((1, 0), (0, 1), (-1, 1), (-1, 0), (0, -1), (1, -1))
"""Axial (q, r) offsets of the tile lying in each hex direction."""


class HexRowDirection(enum.IntEnum):
    """Compass directions in row-oriented hex coordinate systems."""

    NORTH = 0
    NORTH_WEST = 1
    SOUTH_WEST = 2
    SOUTH = 3
    SOUTH_EAST = 4
    NORTH_EAST = 5

    def to_hex_direction(self) -> HexDirection:
        return HexDirection.from_int(int(self))


class HexColDirection(enum.IntEnum):
    """Compass directions in column-oriented hex coordinate systems."""

    EAST = 0
    NORTH_EAST = 1
    NORTH_WEST = 2
    WEST = 3
    SOUTH_WEST = 4
    SOUTH_EAST = 5

    def to_hex_direction(self) -> HexDirection:
        return HexDirection.from_int(int(self))