"""Offset coordinates for hexagonal grids in the RowEven, RowOdd, ColumnEven and ColumnOdd systems."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from tilegrid.axial import AxialPos
from tilegrid.core import HexCoordSystem, TilemapGridSize, TilemapSize, TilePos, Vec2
from tilegrid.hex_directions import HexColDirection, HexDirection, HexRowDirection

_U32_MASK = 0xFFFFFFFF

CompassDirection = Union[HexDirection, HexRowDirection, HexColDirection]


def _trunc_div2(x: int) -> int:
    """Halve ``x``, rounding toward zero."""
    return -((-x) // 2) if x < 0 else x // 2


def _ceiled_div2(x: int) -> int:
    """Halve ``x``, rounding away from zero."""
    return _trunc_div2(x - 1) if x < 0 else _trunc_div2(x + 1)


def _as_hex_direction(direction: CompassDirection) -> HexDirection:
    if isinstance(direction, HexDirection):
        return direction
    return direction.to_hex_direction()


@dataclass(frozen=True, order=True)
class HexOffsetPos:
    """A hex position in one of the offset coordinate systems; subclasses pick which one."""

    q: int
    r: int

    _ROW_ORIENTED: ClassVar[bool] = True
    _EVEN: ClassVar[bool] = False

    @classmethod
    def _shift(cls, value: int) -> int:
        return _ceiled_div2(value) if cls._EVEN else _trunc_div2(value)

    @classmethod
    def from_axial(cls, axial_pos: AxialPos):
        """Convert an axial position into this offset system."""
        if cls._ROW_ORIENTED:
            return cls(axial_pos.q + cls._shift(axial_pos.r), axial_pos.r)
        return cls(axial_pos.q, axial_pos.r + cls._shift(axial_pos.q))

    def to_axial(self) -> AxialPos:
        """Convert this position into axial coordinates."""
        if self._ROW_ORIENTED:
            return AxialPos(self.q - self._shift(self.r), self.r)
        return AxialPos(self.q, self.r - self._shift(self.q))

    @classmethod
    def from_tile_pos(cls, tile_pos: TilePos):
        """Read a tile position as a position in this offset system."""
        return cls(tile_pos.x, tile_pos.y)

    def center_in_world(self, grid_size: TilemapGridSize) -> Vec2:
        """The position of this tile's center, in world space."""
        axial_pos = self.to_axial()
        if self._ROW_ORIENTED:
            return axial_pos.center_in_world_row(grid_size)
        return axial_pos.center_in_world_col(grid_size)

    @classmethod
    def corner_offset_in_world(
        cls, corner_direction: CompassDirection, grid_size: TilemapGridSize
    ) -> Vec2:
        """Offset from a tile center to its corner in ``corner_direction``, in world space."""
        direction = _as_hex_direction(corner_direction)
        if cls._ROW_ORIENTED:
            return AxialPos.corner_offset_in_world_row(direction.to_row(), grid_size)
        return AxialPos.corner_offset_in_world_col(direction.to_col(), grid_size)

    def corner_in_world(
        self, corner_direction: CompassDirection, grid_size: TilemapGridSize
    ) -> Vec2:
        """World position of this tile's corner in ``corner_direction``."""
        direction = _as_hex_direction(corner_direction)
        axial_pos = self.to_axial()
        if self._ROW_ORIENTED:
            return axial_pos.corner_in_world_row(direction.to_row(), grid_size)
        return axial_pos.corner_in_world_col(direction.to_col(), grid_size)

    @classmethod
    def from_world_pos(cls, world_pos: Vec2, grid_size: TilemapGridSize):
        """The tile containing ``world_pos``."""
        if cls._ROW_ORIENTED:
            axial_pos = AxialPos.from_world_pos_row(world_pos, grid_size)
        else:
            axial_pos = AxialPos.from_world_pos_col(world_pos, grid_size)
        return cls.from_axial(axial_pos)

    def as_tile_pos_given_map_size(self, map_size: TilemapSize) -> Optional[TilePos]:
        """The tile position, or None if negative or off the map."""
        return TilePos.from_i32_pair(self.q, self.r, map_size)

    def as_tile_pos_unchecked(self) -> TilePos:
        """Reinterpret (q, r) as an unsigned tile position without any bounds check."""
        return TilePos(self.q & _U32_MASK, self.r & _U32_MASK)

    def offset(self, direction: HexDirection):
        """The neighboring position in ``direction``."""
        return type(self).from_axial(self.to_axial().offset(direction))

    def offset_compass(self, direction: CompassDirection):
        """The neighboring position in the given compass direction."""
        return type(self).from_axial(self.to_axial().offset(_as_hex_direction(direction)))


@dataclass(frozen=True, order=True)
class RowOddPos(HexOffsetPos):
    """Position in the RowOdd coordinate system."""

    _ROW_ORIENTED: ClassVar[bool] = True
    _EVEN: ClassVar[bool] = False


@dataclass(frozen=True, order=True)
class RowEvenPos(HexOffsetPos):
    """Position in the RowEven coordinate system."""

    _ROW_ORIENTED: ClassVar[bool] = True
    _EVEN: ClassVar[bool] = True


@dataclass(frozen=True, order=True)
class ColOddPos(HexOffsetPos):
    """Position in the ColumnOdd coordinate system."""

    _ROW_ORIENTED: ClassVar[bool] = False
    _EVEN: ClassVar[bool] = False


@dataclass(frozen=True, order=True)
class ColEvenPos(HexOffsetPos):
    """Position in the ColumnEven coordinate system."""

    _ROW_ORIENTED: ClassVar[bool] = False
    _EVEN: ClassVar[bool] = True


_OFFSET_CLASSES = {
    HexCoordSystem.ROW_EVEN: RowEvenPos,
    HexCoordSystem.ROW_ODD: RowOddPos,
    HexCoordSystem.COLUMN_EVEN: ColEvenPos,
    HexCoordSystem.COLUMN_ODD: ColOddPos,
}


def axial_to_tile_pos(axial_pos: AxialPos, hex_coord_sys: HexCoordSystem) -> TilePos:
    """Convert an axial position into a tile position in the given coordinate system."""
    cls = _OFFSET_CLASSES.get(hex_coord_sys)
    if cls is None:
        return axial_pos.as_tile_pos_unchecked()
    return cls.from_axial(axial_pos).as_tile_pos_unchecked()


def axial_to_tile_pos_given_map_size(
    axial_pos: AxialPos, hex_coord_sys: HexCoordSystem, map_size: TilemapSize
) -> Optional[TilePos]:
    """Like axial_to_tile_pos, but None if the result would not lie on the map."""
    cls = _OFFSET_CLASSES.get(hex_coord_sys)
    if cls is None:
        return axial_pos.as_tile_pos_given_map_size(map_size)
    return cls.from_axial(axial_pos).as_tile_pos_given_map_size(map_size)


def axial_from_tile_pos(tile_pos: TilePos, hex_coord_sys: HexCoordSystem) -> AxialPos:
    """Read a tile position in the given coordinate system as an axial position."""
    cls = _OFFSET_CLASSES.get(hex_coord_sys)
    if cls is None:
        return AxialPos.from_tile_pos(tile_pos)
    return cls.from_tile_pos(tile_pos).to_axial()