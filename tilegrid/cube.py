"""Cube coordinates for hexagonal grids."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class CubePos:
    """Hex position with components q, r, s where q + r + s == 0."""

    q: int
    r: int
    s: int

    @staticmethod
    def from_axial(q: int, r: int) -> CubePos:
        return CubePos(q, r, -(q + r))

    def __add__(self, other: CubePos) -> CubePos:
        if not isinstance(other, CubePos):
            return NotImplemented
        return CubePos(self.q + other.q, self.r + other.r, self.s + other.s)

    def __sub__(self, other: CubePos) -> CubePos:
        if not isinstance(other, CubePos):
            return NotImplemented
        return CubePos(self.q - other.q, self.r - other.r, self.s - other.s)

    def __rmul__(self, scalar: int) -> CubePos:
        if not isinstance(scalar, int):
            return NotImplemented
        return CubePos(scalar * self.q, scalar * self.r, scalar * self.s)

    def magnitude(self) -> int:
        """Distance from the origin on the hex grid."""
        return max(abs(self.q), abs(self.r), abs(self.s))

    def distance_from(self, other: CubePos) -> int:
        return (self - other).magnitude()


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass(frozen=True)
class FractionalCubePos:
    """A cube position with fractional components, e.g. a point inside a hex."""

    q: float
    r: float
    s: float

    @staticmethod
    def from_axial(q: float, r: float) -> FractionalCubePos:
        return FractionalCubePos(q, r, -(q + r))

    def round(self) -> CubePos:
        """The cube position of the hex containing this point."""
        q_round = _round_half_away(self.q)
        r_round = _round_half_away(self.r)
        s_round = _round_half_away(self.s)

        q_diff = abs(q_round - self.q)
        r_diff = abs(r_round - self.r)
        s_diff = abs(s_round - self.s)

        if q_diff > r_diff and q_diff > s_diff:
            r, s = int(r_round), int(s_round)
            return CubePos(-(r + s), r, s)
        if r_diff > s_diff:
            q, s = int(q_round), int(s_round)
            return CubePos(q, -(q + s), s)
        q, r = int(q_round), int(r_round)
        return CubePos(q, r, -(q + r))