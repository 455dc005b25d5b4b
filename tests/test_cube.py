import itertools

import pytest

from tilegrid.cube import CubePos, FractionalCubePos
from tilegrid.hex_directions import HEX_OFFSETS

AXIAL_PAIRS = list(itertools.product(range(-3, 4), repeat=2))
POINTS = [CubePos.from_axial(q, r) for q, r in AXIAL_PAIRS]


@pytest.mark.parametrize("q, r", AXIAL_PAIRS)
def test_from_axial_satisfies_identity(q, r):
    cube = CubePos.from_axial(q, r)
    assert (cube.q, cube.r) == (q, r)
    assert cube.q + cube.r + cube.s == 0


@pytest.mark.parametrize("offset", HEX_OFFSETS)
def test_unit_offsets_have_magnitude_one(offset):
    assert CubePos.from_axial(*offset).magnitude() == 1


def test_distance_symmetric_and_zero_on_self():
    for a, b in itertools.combinations(POINTS[:12], 2):
        assert a.distance_from(b) == b.distance_from(a)
        assert a.distance_from(a) == 0


def test_triangle_inequality():
    a, b, c = POINTS[0], POINTS[20], POINTS[-1]
    assert a.distance_from(c) <= a.distance_from(b) + b.distance_from(c)


def test_vector_operations():
    a = CubePos.from_axial(2, -1)
    b = CubePos.from_axial(-1, 3)
    assert (a + b) - b == a
    assert 2 * a == a + a
    assert (a - a).magnitude() == 0


@pytest.mark.parametrize("cube", POINTS)
def test_round_of_exact_position_is_identity(cube):
    frac = FractionalCubePos.from_axial(float(cube.q), float(cube.r))
    assert frac.round() == cube


def test_round_keeps_identity_for_fractional_points():
    steps = [x / 7 for x in range(-14, 15)]
    for q, r in itertools.product(steps, repeat=2):
        rounded = FractionalCubePos.from_axial(q, r).round()
        assert rounded.q + rounded.r + rounded.s == 0


def test_round_near_origin():
    assert FractionalCubePos.from_axial(0.1, -0.05).round() == CubePos(0, 0, 0)


def test_round_half_goes_away_from_zero():
    assert FractionalCubePos(0.5, -0.5, 0.0).round() == CubePos(1, -1, 0)