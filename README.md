# tilegrid

Geometry helpers for hexagonal tile maps, with the basic value types and
direction enums a tile map needs.

It handles hex grids in six coordinate systems (`Row`, `Column` and the
`RowEven`, `RowOdd`, `ColumnEven`, `ColumnOdd` offset variants): converting
between them, projecting tiles to world-space centres and corners, mapping
world positions back to tiles, finding neighbours, and generating hexagonal
rings and regions. It has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Basic types

`tilegrid.core` holds the plain value types:

- `Vec2` (with `+`, `-`, scalar `*` and `/`, `min`, `max`) and `Mat2`
  (column-major; `m.transform(v)` or `m @ v`).
- `TilePos`, `TilemapSize`, `TilemapGridSize`, `TilemapTileSize`.
- `HexCoordSystem`, `IsoCoordSystem` and `TilemapType`, built with
  `TilemapType.square()`, `TilemapType.hexagon(...)` or
  `TilemapType.isometric(...)`. A map type given a coordinate system of the
  wrong kind raises `TypeError`.

```python
from tilegrid.core import TilePos, TilemapSize

map_size = TilemapSize(4, 4)
TilePos.from_i32_pair(3, 1, map_size)   # TilePos(x=3, y=1)
TilePos.from_i32_pair(-1, 1, map_size)  # None
TilePos(4, 0).within_map_bounds(map_size)  # False
```

## Hex coordinates

- `tilegrid.cube`: `CubePos` (with `magnitude` and `distance_from`) and
  `FractionalCubePos.round()`.
- `tilegrid.axial`: `AxialPos`, used for the `Row` and `Column` systems, and
  `FractionalAxialPos`. `AxialPos` supports `+`, `-` and integer `*`.
- `tilegrid.offset`: `RowOddPos`, `RowEvenPos`, `ColOddPos`, `ColEvenPos`
  (all sharing `HexOffsetPos`), and the helpers `axial_to_tile_pos`,
  `axial_to_tile_pos_given_map_size` and `axial_from_tile_pos`, which pick the
  right system from a `HexCoordSystem`.

```python
from tilegrid.axial import AxialPos
from tilegrid.core import TilemapGridSize
from tilegrid.hex_directions import HexRowDirection

grid_size = TilemapGridSize(50.0, 58.0)
pos = AxialPos(1, 2)

centre = pos.center_in_world_row(grid_size)
assert AxialPos.from_world_pos_row(centre, grid_size) == pos

corner = pos.corner_in_world_row(HexRowDirection.NORTH, grid_size)
pos.distance_from(AxialPos(0, 0))  # 3
```

```python
from tilegrid.core import HexCoordSystem, TilePos
from tilegrid.offset import RowOddPos, axial_from_tile_pos

odd = RowOddPos.from_tile_pos(TilePos(2, 3))
odd.to_axial()                                             # AxialPos(q=1, r=3)
axial_from_tile_pos(TilePos(2, 3), HexCoordSystem.ROW_ODD)  # same
```

`as_tile_pos_given_map_size` returns `None` for positions off the map;
`as_tile_pos_unchecked` does no bounds check.

## Directions and neighbours

`tilegrid.hex_directions` has `HexDirection` (wrapping modulo 6 under `+` and
`-`), the compass enums `HexRowDirection` and `HexColDirection`, and the
`HEX_DIRECTIONS` and `HEX_OFFSETS` tables.

`tilegrid.hex_neighbors` has `HexNeighbors`, which stores one optional item
per direction, and `offset_tile_pos`:

```python
from tilegrid.core import HexCoordSystem, TilemapSize, TilePos
from tilegrid.hex_directions import HexDirection
from tilegrid.hex_neighbors import HexNeighbors, offset_tile_pos

map_size = TilemapSize(4, 4)
neighbors = HexNeighbors.get_neighboring_positions(
    TilePos(0, 0), map_size, HexCoordSystem.ROW_ODD
)
for direction, pos in neighbors.iter_with_direction():
    print(direction.name, pos)

storage = {TilePos(1, 0): "grass"}
neighbors.entities(storage).get(HexDirection.ZERO)  # "grass"

offset_tile_pos(HexDirection.ONE, TilePos(1, 1), HexCoordSystem.ROW)  # TilePos(x=1, y=2)
```

`entities` accepts anything with a `get(tile_pos)` method, such as a `dict`.
`and_then`, `map` and `from_directional_closure` build new `HexNeighbors`
from existing ones or from a function of the direction.

`tilegrid.square_directions` has `SquareDirection` (eight directions,
wrapping modulo 8, with `is_cardinal` and `is_diagonal`) and the
`SQUARE_DIRECTIONS`, `CARDINAL_SQUARE_DIRECTIONS` and `SQUARE_OFFSETS` tables.

## Hexagonal regions

```python
from tilegrid.axial import AxialPos
from tilegrid.filling import generate_hex_ring, generate_hexagon

len(generate_hex_ring(AxialPos(5, 5), 2))  # 12
len(generate_hexagon(AxialPos(5, 5), 2))   # 19
```

A negative radius raises `ValueError`.

## What it does not do

- Square and isometric (diamond or staggered) grids get only the direction
  enum and offset table: there is no world projection, world-to-tile lookup
  or neighbour search for them.
- There is no map-level placement: no anchors, no bounding boxes for maps
  or chunks, and no conversion of a world position to a tile that takes a
  map's anchor into account.
- It holds no tiles and draws nothing; tile storage is whatever mapping the
  caller passes in.