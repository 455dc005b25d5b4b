import pytest

from tilegrid.axial import AxialPos
from tilegrid.core import HexCoordSystem, TilemapSize, TilePos
from tilegrid.hex_directions import HEX_DIRECTIONS, HexColDirection, HexDirection, HexRowDirection
from tilegrid.hex_neighbors import HexNeighbors, offset_tile_pos
from tilegrid.offset import axial_from_tile_pos

MAP = TilemapSize(8, 8)
ALL_SYSTEMS = list(HexCoordSystem)


def test_get_and_set():
    neighbors = HexNeighbors()
    neighbors.set(HexDirection.TWO, "a")
    assert neighbors.get(HexDirection.TWO) == "a"
    assert neighbors.two == "a"
    assert neighbors.get(HexDirection.ZERO) is None


def test_get_accepts_compass_directions():
    neighbors = HexNeighbors(zero="z", three="t")
    assert neighbors.get(HexRowDirection.NORTH) == "z"
    assert neighbors.get(HexColDirection.WEST) == "t"


def test_iteration_skips_missing():
    neighbors = HexNeighbors.from_directional_closure(
        lambda d: int(d) if int(d) % 2 == 0 else None
    )
    assert list(neighbors) == [0, 2, 4]
    assert [d for d, _ in neighbors.iter_with_direction()] == [
        HexDirection.ZERO,
        HexDirection.TWO,
        HexDirection.FOUR,
    ]


def test_map_and_and_then():
    neighbors = HexNeighbors(zero=1, one=2, four=3)
    doubled = neighbors.map(lambda v: v * 2)
    assert list(doubled) == [2, 4, 6]
    filtered = neighbors.and_then(lambda v: v if v > 1 else None)
    assert filtered.zero is None
    assert list(filtered) == [2, 3]


def test_standard_neighbors_pinned():
    n = HexNeighbors.get_neighboring_positions_standard(TilePos(1, 1), MAP)
    assert n.zero == TilePos(2, 1)
    assert n.four == TilePos(1, 0)


def test_standard_neighbors_at_corner_are_clipped():
    n = HexNeighbors.get_neighboring_positions_standard(TilePos(0, 0), MAP)
    assert n.three is None
    assert n.four is None
    assert n.two is None
    assert n.zero is not None and n.one is not None


@pytest.mark.parametrize("system", ALL_SYSTEMS)
def test_neighbors_are_at_distance_one(system):
    tile = TilePos(3, 4)
    n = HexNeighbors.get_neighboring_positions(tile, MAP, system)
    origin = axial_from_tile_pos(tile, system)
    positions = list(n)
    assert len(positions) == 6
    assert len(set(positions)) == 6
    for pos in positions:
        assert axial_from_tile_pos(pos, system).distance_from(origin) == 1


@pytest.mark.parametrize("system", ALL_SYSTEMS)
def test_neighbors_are_symmetric(system):
    tile = TilePos(4, 3)
    n = HexNeighbors.get_neighboring_positions(tile, MAP, system)
    for direction in HEX_DIRECTIONS:
        neighbor = n.get(direction)
        back = HexNeighbors.get_neighboring_positions(neighbor, MAP, system)
        assert back.get(direction + 3) == tile


@pytest.mark.parametrize("system", ALL_SYSTEMS)
def test_offset_tile_pos_matches_neighbors(system):
    tile = TilePos(5, 2)
    n = HexNeighbors.get_neighboring_positions(tile, MAP, system)
    for direction in HEX_DIRECTIONS:
        assert offset_tile_pos(direction, tile, system) == n.get(direction)


def test_offset_tile_pos_with_compass_direction():
    tile = TilePos(2, 2)
    assert offset_tile_pos(HexRowDirection.SOUTH, tile, HexCoordSystem.ROW) == offset_tile_pos(
        HexDirection.THREE, tile, HexCoordSystem.ROW
    )


def test_entities_looks_up_storage():
    storage = {TilePos(2, 1): "entity"}
    n = HexNeighbors.get_neighboring_positions_standard(TilePos(1, 1), MAP)
    found = n.entities(storage)
    assert found.zero == "entity"
    assert list(found) == ["entity"]


def test_standard_equals_axial_offsets():
    tile = TilePos(3, 3)
    n = HexNeighbors.get_neighboring_positions(tile, MAP, HexCoordSystem.COLUMN)
    axial = AxialPos.from_tile_pos(tile)
    for direction in HEX_DIRECTIONS:
        assert n.get(direction) == axial.offset(direction).as_tile_pos_unchecked()