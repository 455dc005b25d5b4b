import pytest

from tilegrid.core import (
    DOUBLE_INV_SQRT_3,
    HALF_SQRT_3,
    INV_SQRT_3,
    SQRT_3,
    HexCoordSystem,
    IsoCoordSystem,
    Mat2,
    TilemapKind,
    TilemapSize,
    TilemapType,
    TilePos,
    Vec2,
)


def test_constants_are_consistent():
    basis = Mat2(Vec2(1.0, 0.0), Vec2(0.5, HALF_SQRT_3))
    column = basis.transform(Vec2(0.0, 1.0))
    assert column.x**2 + column.y**2 == pytest.approx(1.0, rel=1e-6)
    scaled = Vec2(SQRT_3, 0.0) * INV_SQRT_3
    assert scaled.x == pytest.approx(1.0, rel=1e-6)
    doubled = Vec2(INV_SQRT_3, HALF_SQRT_3) * 2
    assert doubled.x == pytest.approx(DOUBLE_INV_SQRT_3, rel=1e-6)
    assert doubled.y == pytest.approx(SQRT_3, rel=1e-6)


def test_vec2_min_max_bound_both():
    a = Vec2(1.5, -2.0)
    b = Vec2(-0.5, 3.0)
    lo, hi = a.min(b), a.max(b)
    assert lo.x <= a.x and lo.x <= b.x and lo.y <= a.y and lo.y <= b.y
    assert {lo.x, hi.x} == {a.x, b.x}
    assert {lo.y, hi.y} == {a.y, b.y}


def test_vec2_arithmetic_round_trip():
    a = Vec2(1.25, -4.0)
    b = Vec2(0.5, 2.0)
    assert (a + b) - b == a
    assert (a * 2) / 2 == a
    assert -(-a) == a
    assert 2 * a == a + a


def test_mat2_identity_and_columns():
    identity = Mat2(Vec2(1.0, 0.0), Vec2(0.0, 1.0))
    v = Vec2(3.0, -7.5)
    assert identity.transform(v) == v
    m = Mat2(Vec2(0.5, -0.5), Vec2(0.5, 0.5))
    assert m.transform(Vec2(1.0, 0.0)) == m.x_axis
    assert m @ Vec2(0.0, 1.0) == m.y_axis


def test_from_i32_pair_rejects_negative():
    size = TilemapSize(4, 4)
    assert TilePos.from_i32_pair(-1, 0, size) is None
    assert TilePos.from_i32_pair(0, -1, size) is None


def test_from_i32_pair_rejects_out_of_bounds():
    size = TilemapSize(4, 3)
    assert TilePos.from_i32_pair(4, 0, size) is None
    assert TilePos.from_i32_pair(0, 3, size) is None


def test_from_i32_pair_accepts_in_bounds():
    size = TilemapSize(4, 3)
    assert TilePos.from_i32_pair(3, 2, size) == TilePos(3, 2)
    assert TilePos.from_i32_pair(0, 0, size) == TilePos(0, 0)


def test_within_map_bounds():
    size = TilemapSize(2, 5)
    assert TilePos(1, 4).within_map_bounds(size)
    assert not TilePos(2, 4).within_map_bounds(size)
    assert not TilePos(1, 5).within_map_bounds(size)


def test_tilemap_type_default_is_square():
    assert TilemapType() == TilemapType.square()
    assert TilemapType.square().kind is TilemapKind.SQUARE
    assert TilemapType.square().coord_system is None


def test_tilemap_type_constructors():
    hexagon = TilemapType.hexagon(HexCoordSystem.ROW_ODD)
    assert hexagon.kind is TilemapKind.HEXAGON
    assert hexagon.coord_system is HexCoordSystem.ROW_ODD
    iso = TilemapType.isometric(IsoCoordSystem.STAGGERED)
    assert iso.kind is TilemapKind.ISOMETRIC
    assert iso.coord_system is IsoCoordSystem.STAGGERED
    assert len({hexagon, iso, TilemapType.hexagon(HexCoordSystem.ROW_ODD)}) == 2


def test_tilemap_type_rejects_mismatched_system():
    with pytest.raises(TypeError):
        TilemapType.hexagon(IsoCoordSystem.DIAMOND)
    with pytest.raises(TypeError):
        TilemapType.isometric(HexCoordSystem.ROW)
    with pytest.raises(TypeError):
        TilemapType(TilemapKind.SQUARE, HexCoordSystem.ROW)


def test_tilemap_type_str():
    assert str(TilemapType.square()) == "Square"
    assert str(TilemapType.hexagon(HexCoordSystem.COLUMN_EVEN)) == "Hexagon(ColumnEven)"