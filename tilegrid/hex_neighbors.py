"""Neighbors of a tile on a hexagonal grid."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Callable, Generic, Iterator, Optional, Protocol, TypeVar, Union

from tilegrid.axial import AxialPos
from tilegrid.core import HexCoordSystem, TilemapSize, TilePos
from tilegrid.hex_directions import (
    HEX_DIRECTIONS,
    HexColDirection,
    HexDirection,
    HexRowDirection,
)
from tilegrid.offset import (
    ColEvenPos,
    ColOddPos,
    HexOffsetPos,
    RowEvenPos,
    RowOddPos,
    axial_from_tile_pos,
    axial_to_tile_pos,
)

T = TypeVar("T")
U = TypeVar("U")

AnyHexDirection = Union[HexDirection, HexRowDirection, HexColDirection]

_FIELD_NAMES = ("zero", "one", "two", "three", "four", "five")


class TileLookup(Protocol):
    """Anything that maps a tile position to what is stored there, or None."""

    def get(self, tile_pos: TilePos) -> Any: ...


def _as_hex_direction(direction: AnyHexDirection) -> HexDirection:
    if isinstance(direction, HexDirection):
        return direction
    return direction.to_hex_direction()


def offset_tile_pos(
    direction: AnyHexDirection, tile_pos: TilePos, coord_sys: HexCoordSystem
) -> TilePos:
    """The tile position next to ``tile_pos`` in ``direction``, in the given coordinate system."""
    axial_pos = axial_from_tile_pos(tile_pos, coord_sys)
    return axial_to_tile_pos(axial_pos.offset(_as_hex_direction(direction)), coord_sys)


@dataclass
class HexNeighbors(Generic[T]):
    """Data associated with each neighboring hex cell, where present."""

    zero: Optional[T] = None
    one: Optional[T] = None
    two: Optional[T] = None
    three: Optional[T] = None
    four: Optional[T] = None
    five: Optional[T] = None

    def get(self, direction: AnyHexDirection) -> Optional[T]:
        """The item lying in ``direction``, or None."""
        return getattr(self, _FIELD_NAMES[int(_as_hex_direction(direction))])

    def set(self, direction: AnyHexDirection, data: T) -> None:
        """Store ``data`` as the item lying in ``direction``."""
        setattr(self, _FIELD_NAMES[int(_as_hex_direction(direction))], data)

    def __iter__(self) -> Iterator[T]:
        """Present items, in the order of HEX_DIRECTIONS."""
        return (item for item in (self.get(d) for d in HEX_DIRECTIONS) if item is not None)

    def iter_with_direction(self) -> Iterator[tuple[HexDirection, T]]:
        """Present items with their directions, in the order of HEX_DIRECTIONS."""
        for direction in HEX_DIRECTIONS:
            item = self.get(direction)
            if item is not None:
                yield direction, item

    def and_then(self, f: Callable[[T], Optional[U]]) -> HexNeighbors[U]:
        """Apply ``f`` to each present item; ``f`` may itself return None."""
        return HexNeighbors(
            **{
                field.name: (None if value is None else f(value))
                for field in fields(self)
                for value in (getattr(self, field.name),)
            }
        )

    def map(self, f: Callable[[T], U]) -> HexNeighbors[U]:
        """Apply ``f`` to each present item."""
        return self.and_then(f)

    @staticmethod
    def from_directional_closure(
        f: Callable[[HexDirection], Optional[T]],
    ) -> HexNeighbors[T]:
        """Build neighbors by calling ``f`` for each direction."""
        return HexNeighbors(*(f(direction) for direction in HEX_DIRECTIONS))

    @staticmethod
    def get_neighboring_positions(
        tile_pos: TilePos, map_size: TilemapSize, hex_coord_sys: HexCoordSystem
    ) -> HexNeighbors[TilePos]:
        """Neighboring positions on the map, for any hex coordinate system."""
        dispatch = {
            HexCoordSystem.ROW_EVEN: HexNeighbors.get_neighboring_positions_row_even,
            HexCoordSystem.ROW_ODD: HexNeighbors.get_neighboring_positions_row_odd,
            HexCoordSystem.COLUMN_EVEN: HexNeighbors.get_neighboring_positions_col_even,
            HexCoordSystem.COLUMN_ODD: HexNeighbors.get_neighboring_positions_col_odd,
        }
        finder = dispatch.get(hex_coord_sys, HexNeighbors.get_neighboring_positions_standard)
        return finder(tile_pos, map_size)

    @staticmethod
    def get_neighboring_positions_standard(
        tile_pos: TilePos, map_size: TilemapSize
    ) -> HexNeighbors[TilePos]:
        """Neighboring positions on a Row or Column map."""
        axial_pos = AxialPos.from_tile_pos(tile_pos)
        return HexNeighbors.from_directional_closure(
            lambda d: axial_pos.offset(d).as_tile_pos_given_map_size(map_size)
        )

    @staticmethod
    def _offset_neighbors(
        cls: type[HexOffsetPos], tile_pos: TilePos, map_size: TilemapSize
    ) -> HexNeighbors[TilePos]:
        axial_pos = cls.from_tile_pos(tile_pos).to_axial()
        return HexNeighbors.from_directional_closure(
            lambda d: cls.from_axial(axial_pos.offset(d)).as_tile_pos_given_map_size(map_size)
        )

    @staticmethod
    def get_neighboring_positions_row_even(
        tile_pos: TilePos, map_size: TilemapSize
    ) -> HexNeighbors[TilePos]:
        """Neighboring positions on a RowEven map."""
        return HexNeighbors._offset_neighbors(RowEvenPos, tile_pos, map_size)

    @staticmethod
    def get_neighboring_positions_row_odd(
        tile_pos: TilePos, map_size: TilemapSize
    ) -> HexNeighbors[TilePos]:
        """Neighboring positions on a RowOdd map."""
        return HexNeighbors._offset_neighbors(RowOddPos, tile_pos, map_size)

    @staticmethod
    def get_neighboring_positions_col_even(
        tile_pos: TilePos, map_size: TilemapSize
    ) -> HexNeighbors[TilePos]:
        """Neighboring positions on a ColumnEven map."""
        return HexNeighbors._offset_neighbors(ColEvenPos, tile_pos, map_size)

    @staticmethod
    def get_neighboring_positions_col_odd(
        tile_pos: TilePos, map_size: TilemapSize
    ) -> HexNeighbors[TilePos]:
        """Neighboring positions on a ColumnOdd map."""
        return HexNeighbors._offset_neighbors(ColOddPos, tile_pos, map_size)

    def entities(self, tile_storage: TileLookup) -> HexNeighbors[Any]:
        """What ``tile_storage`` holds at each neighboring position."""
        return self.and_then(tile_storage.get)