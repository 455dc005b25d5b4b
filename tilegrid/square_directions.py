"""Directions around a tile on a square-like grid."""

from __future__ import annotations

import enum


class SquareDirection(enum.IntEnum):
    """The eight neighbor directions; arithmetic wraps modulo 8."""

    EAST = 0
    NORTH_EAST = 1
    NORTH = 2
    NORTH_WEST = 3
    WEST = 4
    SOUTH_WEST = 5
    SOUTH = 6
    SOUTH_EAST = 7

    @staticmethod
    def from_int(value: int) -> SquareDirection:
        """The direction for any integer, taken modulo 8."""
        return SQUARE_DIRECTIONS[value % 8]

    def __add__(self, other: int) -> SquareDirection:
        if not isinstance(other, int):
            return NotImplemented
        return SquareDirection.from_int(int(self) + int(other))

    def __sub__(self, other: int) -> SquareDirection:
        if not isinstance(other, int):
            return NotImplemented
        return SquareDirection.from_int(int(self) - int(other))

    def is_cardinal(self) -> bool:
        """Whether this is North, South, East or West."""
        return self in (
            SquareDirection.EAST,
            SquareDirection.NORTH,
            SquareDirection.WEST,
            SquareDirection.SOUTH,
        )

    def is_diagonal(self) -> bool:
        return not self.is_cardinal()


SQUARE_DIRECTIONS = tuple(SquareDirection)
"""All square directions, in order."""

CARDINAL_SQUARE_DIRECTIONS = (
    SquareDirection.NORTH,
    SquareDirection.WEST,
    SquareDirection.SOUTH,
    SquareDirection.EAST,
)
"""The cardinal directions (N, W, S, E)."""

SQUARE_OFFSETS = ((1, 0), (1, 1), (0, 1), (-1, 1), (-1, 0), (-1, -1), (0, -1), (1, -1))
"""(x, y) offsets of the tile lying in each square direction."""