"""Basic value types shared by the grid helpers: vectors, sizes, tile positions, map types."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Union

SQRT_3 = 1.7320508
"""sqrt(3)"""

INV_SQRT_3 = 0.57735026
"""1/sqrt(3)"""

DOUBLE_INV_SQRT_3 = 1.1547005
"""2/sqrt(3)"""

HALF_SQRT_3 = 0.8660254
"""sqrt(3)/2"""


@dataclass(frozen=True)
class Vec2:
    """A two-dimensional vector of floats."""

    x: float
    y: float

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vec2:
        if not isinstance(scalar, (int, float)):
            return NotImplemented
        return Vec2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def min(self, other: Vec2) -> Vec2:
        """Component-wise minimum."""
        return Vec2(min(self.x, other.x), min(self.y, other.y))

    def max(self, other: Vec2) -> Vec2:
        """Component-wise maximum."""
        return Vec2(max(self.x, other.x), max(self.y, other.y))


@dataclass(frozen=True)
class Mat2:
    """A 2x2 matrix stored as two column vectors."""

    x_axis: Vec2
    y_axis: Vec2

    def transform(self, v: Vec2) -> Vec2:
        """Multiply this matrix by the column vector ``v``."""
        return self.x_axis * v.x + self.y_axis * v.y

    def __matmul__(self, v: Vec2) -> Vec2:
        if not isinstance(v, Vec2):
            return NotImplemented
        return self.transform(v)


@dataclass(frozen=True)
class TilemapSize:
    """Size of a tilemap, in tiles."""

    x: int
    y: int


@dataclass(frozen=True)
class TilemapGridSize:
    """Size of one grid cell, in world units."""

    x: float
    y: float


@dataclass(frozen=True)
class TilemapTileSize:
    """Size of one tile's texture, in pixels."""

    x: float
    y: float


@dataclass(frozen=True, order=True)
class TilePos:
    """Non-negative position of a tile on a map."""

    x: int
    y: int

    def within_map_bounds(self, map_size: TilemapSize) -> bool:
        """Whether this position lies on a map of the given size."""
        return 0 <= self.x < map_size.x and 0 <= self.y < map_size.y

    @staticmethod
    def from_i32_pair(x: int, y: int, map_size: TilemapSize) -> Optional[TilePos]:
        """Make a position from signed coordinates, or None if off the map."""
        if x < 0 or y < 0:
            return None
        tile_pos = TilePos(x, y)
        return tile_pos if tile_pos.within_map_bounds(map_size) else None


class HexCoordSystem(enum.Enum):
    """Ways of labelling tiles on a hexagonal map."""

    ROW_EVEN = "RowEven"
    ROW_ODD = "RowOdd"
    COLUMN_EVEN = "ColumnEven"
    COLUMN_ODD = "ColumnOdd"
    ROW = "Row"
    COLUMN = "Column"


class IsoCoordSystem(enum.Enum):
    """Ways of labelling tiles on an isometric map."""

    DIAMOND = "Diamond"
    STAGGERED = "Staggered"


class TilemapKind(enum.Enum):
    """The broad shape of a tilemap's grid."""

    SQUARE = "Square"
    HEXAGON = "Hexagon"
    ISOMETRIC = "Isometric"


_EXPECTED_SYSTEM = {
    TilemapKind.SQUARE: type(None),
    TilemapKind.HEXAGON: HexCoordSystem,
    TilemapKind.ISOMETRIC: IsoCoordSystem,
}


@dataclass(frozen=True)
class TilemapType:
    """The grid type of a tilemap, with its coordinate system where it has one."""

    kind: TilemapKind = TilemapKind.SQUARE
    coord_system: Union[HexCoordSystem, IsoCoordSystem, None] = None

    def __post_init__(self) -> None:
        expected = _EXPECTED_SYSTEM[self.kind]
        if not isinstance(self.coord_system, expected):
            raise TypeError(
                f"{self.kind.value} map cannot use coordinate system {self.coord_system!r}"
            )

    @staticmethod
    def square() -> TilemapType:
        return TilemapType(TilemapKind.SQUARE)

    @staticmethod
    def hexagon(coord_system: HexCoordSystem) -> TilemapType:
        return TilemapType(TilemapKind.HEXAGON, coord_system)

    @staticmethod
    def isometric(coord_system: IsoCoordSystem) -> TilemapType:
        return TilemapType(TilemapKind.ISOMETRIC, coord_system)

    def __str__(self) -> str:
        if self.coord_system is None:
            return self.kind.value
        return f"{self.kind.value}({self.coord_system.value})"