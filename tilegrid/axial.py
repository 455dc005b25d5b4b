"""Axial coordinates for hexagonal grids in the Row and Column coordinate systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tilegrid.core import (
    DOUBLE_INV_SQRT_3,
    HALF_SQRT_3,
    INV_SQRT_3,
    Mat2,
    TilemapGridSize,
    TilemapSize,
    TilePos,
    Vec2,
)
from tilegrid.cube import CubePos, FractionalCubePos
from tilegrid.hex_directions import (
    HEX_OFFSETS,
    HexColDirection,
    HexDirection,
    HexRowDirection,
)

_U32_MASK = 0xFFFFFFFF

ROW_BASIS = Mat2(Vec2(1.0, 0.0), Vec2(0.5, HALF_SQRT_3))
"""Maps axial positions to world space for row-oriented ("pointy top") hexes."""

INV_ROW_BASIS = Mat2(Vec2(1.0, 0.0), Vec2(-1.0 * INV_SQRT_3, DOUBLE_INV_SQRT_3))
"""The inverse of ROW_BASIS."""

COL_BASIS = Mat2(Vec2(HALF_SQRT_3, 0.5), Vec2(0.0, 1.0))
"""Maps axial positions to world space for column-oriented ("flat top") hexes."""

INV_COL_BASIS = Mat2(Vec2(DOUBLE_INV_SQRT_3, -1.0 * INV_SQRT_3), Vec2(0.0, 1.0))
"""The inverse of COL_BASIS."""


@dataclass(frozen=True, order=True)
class AxialPos:
    """Hex position (q, r); tile x maps to q and tile y maps to r."""

    q: int
    r: int

    def __add__(self, other: AxialPos) -> AxialPos:
        if not isinstance(other, AxialPos):
            return NotImplemented
        return AxialPos(self.q + other.q, self.r + other.r)

    def __sub__(self, other: AxialPos) -> AxialPos:
        if not isinstance(other, AxialPos):
            return NotImplemented
        return AxialPos(self.q - other.q, self.r - other.r)

    def __mul__(self, scalar: int) -> AxialPos:
        if not isinstance(scalar, int):
            return NotImplemented
        return AxialPos(scalar * self.q, scalar * self.r)

    __rmul__ = __mul__

    @staticmethod
    def from_tile_pos(tile_pos: TilePos) -> AxialPos:
        return AxialPos(tile_pos.x, tile_pos.y)

    @staticmethod
    def from_cube(cube_pos: CubePos) -> AxialPos:
        return AxialPos(cube_pos.q, cube_pos.r)

    @staticmethod
    def from_direction(direction: HexDirection) -> AxialPos:
        """The offset to the neighbor lying in ``direction``."""
        q, r = HEX_OFFSETS[int(direction) % 6]
        return AxialPos(q, r)

    def to_cube(self) -> CubePos:
        return CubePos.from_axial(self.q, self.r)

    def magnitude(self) -> int:
        """Distance from (0, 0) on the hex grid."""
        return self.to_cube().magnitude()

    def distance_from(self, other: AxialPos) -> int:
        return (self - other).magnitude()

    @staticmethod
    def project_row(axial_pos: Vec2, grid_size: TilemapGridSize) -> Vec2:
        """Project a fractional axial position into world space on a row-oriented grid."""
        unscaled = ROW_BASIS @ axial_pos
        return Vec2(
            grid_size.x * unscaled.x,
            ROW_BASIS.y_axis.y * grid_size.y * unscaled.y,
        )

    def _as_vec2(self) -> Vec2:
        return Vec2(float(self.q), float(self.r))

    @staticmethod
    def _half_direction(direction: HexDirection) -> Vec2:
        offset = AxialPos.from_direction(direction)
        return 0.5 * offset._as_vec2()

    def center_in_world_row(self, grid_size: TilemapGridSize) -> Vec2:
        """Center of this tile in world space, for row-oriented hexes."""
        return AxialPos.project_row(self._as_vec2(), grid_size)

    @staticmethod
    def corner_offset_in_world_row(
        corner_direction: HexRowDirection, grid_size: TilemapGridSize
    ) -> Vec2:
        """Offset from a tile center to its corner in ``corner_direction`` (row-oriented)."""
        half = AxialPos._half_direction(corner_direction.to_hex_direction())
        return AxialPos.project_row(half, grid_size)

    def corner_in_world_row(
        self, corner_direction: HexRowDirection, grid_size: TilemapGridSize
    ) -> Vec2:
        """World position of this tile's corner in ``corner_direction`` (row-oriented)."""
        half = AxialPos._half_direction(corner_direction.to_hex_direction())
        return AxialPos.project_row(self._as_vec2() + half, grid_size)

    @staticmethod
    def project_col(axial_pos: Vec2, grid_size: TilemapGridSize) -> Vec2:
        """Project a fractional axial position into world space on a column-oriented grid."""
        unscaled = COL_BASIS @ axial_pos
        return Vec2(
            COL_BASIS.x_axis.x * grid_size.x * unscaled.x,
            grid_size.y * unscaled.y,
        )

    def center_in_world_col(self, grid_size: TilemapGridSize) -> Vec2:
        """Center of this tile in world space, for column-oriented hexes."""
        return AxialPos.project_col(self._as_vec2(), grid_size)

    @staticmethod
    def corner_offset_in_world_col(
        corner_direction: HexColDirection, grid_size: TilemapGridSize
    ) -> Vec2:
        """Offset from a tile center to its corner in ``corner_direction`` (column-oriented)."""
        half = AxialPos._half_direction(corner_direction.to_hex_direction())
        return AxialPos.project_col(half, grid_size)

    def corner_in_world_col(
        self, corner_direction: HexColDirection, grid_size: TilemapGridSize
    ) -> Vec2:
        """World position of this tile's corner in ``corner_direction`` (column-oriented)."""
        half = AxialPos._half_direction(corner_direction.to_hex_direction())
        return AxialPos.project_col(self._as_vec2() + half, grid_size)

    @staticmethod
    def from_world_pos_row(world_pos: Vec2, grid_size: TilemapGridSize) -> AxialPos:
        """The row-oriented hex containing ``world_pos``; (0, 0) is centered at the origin."""
        normalized = Vec2(
            world_pos.x / grid_size.x,
            world_pos.y / (ROW_BASIS.y_axis.y * grid_size.y),
        )
        frac = INV_ROW_BASIS @ normalized
        return FractionalAxialPos(frac.x, frac.y).round()

    @staticmethod
    def from_world_pos_col(world_pos: Vec2, grid_size: TilemapGridSize) -> AxialPos:
        """The column-oriented hex containing ``world_pos``; (0, 0) is centered at the origin."""
        normalized = Vec2(
            world_pos.x / (COL_BASIS.x_axis.x * grid_size.x),
            world_pos.y / grid_size.y,
        )
        frac = INV_COL_BASIS @ normalized
        return FractionalAxialPos(frac.x, frac.y).round()

    def as_tile_pos_given_map_size(self, map_size: TilemapSize) -> Optional[TilePos]:
        """The tile position, or None if negative or off the map."""
        return TilePos.from_i32_pair(self.q, self.r, map_size)

    def as_tile_pos_unchecked(self) -> TilePos:
        """Reinterpret (q, r) as an unsigned tile position without any bounds check."""
        return TilePos(self.q & _U32_MASK, self.r & _U32_MASK)

    def offset(self, direction: HexDirection) -> AxialPos:
        """The neighboring position in ``direction``."""
        return self + AxialPos.from_direction(direction)

    def offset_compass_row(self, direction: HexRowDirection) -> AxialPos:
        return self.offset(direction.to_hex_direction())

    def offset_compass_col(self, direction: HexColDirection) -> AxialPos:
        return self.offset(direction.to_hex_direction())


UNIT_Q = AxialPos(1, 0)
UNIT_R = AxialPos(0, -1)
UNIT_S = AxialPos(1, -1)


@dataclass(frozen=True)
class FractionalAxialPos:
    """A point inside a hexagon, in axial coordinates."""

    q: float
    r: float

    @staticmethod
    def from_axial(axial_pos: AxialPos) -> FractionalAxialPos:
        return FractionalAxialPos(float(axial_pos.q), float(axial_pos.r))

    def round(self) -> AxialPos:
        """The axial position of the hex containing this point."""
        cube = FractionalCubePos.from_axial(self.q, self.r).round()
        return AxialPos.from_cube(cube)