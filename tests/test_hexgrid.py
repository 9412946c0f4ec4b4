import pytest

from h3ijk.hexgrid import (
    M_SQRT3_2,
    UNIT_VECS,
    CoordIJ,
    cube_to_ijk,
    hex2d_to_coord_ijk,
    ij_to_ijk,
    ijk_distance,
    ijk_to_cube,
    ijk_to_hex2d,
    ijk_to_ij,
    neighbor,
    unit_ijk_to_digit,
)
from h3ijk.ijk import I32_MIN, CoordIJK, CoordinateOverflowError, Direction, Vec2d


@pytest.mark.parametrize(
    "ijk, expected",
    [
        (CoordIJK(0, 0, 0), Direction.CENTER),
        (CoordIJK(0, 0, 1), Direction.K_AXES),
        (CoordIJK(0, 1, 0), Direction.J_AXES),
        (CoordIJK(0, 1, 1), Direction.JK_AXES),
        (CoordIJK(1, 0, 0), Direction.I_AXES),
        (CoordIJK(1, 0, 1), Direction.IK_AXES),
        (CoordIJK(1, 1, 0), Direction.IJ_AXES),
        (CoordIJK(2, 2, 2), Direction.CENTER),
        (CoordIJK(1, 1, 2), Direction.K_AXES),
        (CoordIJK(2, 0, 0), Direction.INVALID_DIGIT),
        (CoordIJK(1, 2, 3), Direction.INVALID_DIGIT),
    ],
)
def test_unit_ijk_to_digit(ijk, expected):
    assert unit_ijk_to_digit(ijk) == expected


def test_neighbor_center_is_self():
    origin = CoordIJK(0, 0, 0)
    assert neighbor(origin, Direction.CENTER) == origin


def test_neighbor_i_axis():
    assert neighbor(CoordIJK(0, 0, 0), Direction.I_AXES) == UNIT_VECS[Direction.I_AXES]


def test_neighbor_invalid_is_self():
    origin = CoordIJK(0, 0, 0)
    assert neighbor(origin, Direction.INVALID_DIGIT) == origin


def test_neighbor_from_normalized_non_origin():
    start = CoordIJK(1, 1, 1).normalized()
    assert neighbor(start, Direction.J_AXES) == UNIT_VECS[Direction.J_AXES]


@pytest.mark.parametrize(
    "ijk",
    list(UNIT_VECS) + [CoordIJK(2, 0, 1)],
)
def test_ijk_to_hex2d_roundtrip(ijk):
    assert hex2d_to_coord_ijk(ijk_to_hex2d(ijk)) == ijk


def test_ijk_to_hex2d_values():
    v = ijk_to_hex2d(CoordIJK(0, 1, 0))
    assert v.x == pytest.approx(-0.5)
    assert v.y == pytest.approx(M_SQRT3_2)


Z = CoordIJK(0, 0, 0)
I = CoordIJK(1, 0, 0)
IK = CoordIJK(1, 0, 1)
IJ = CoordIJK(1, 1, 0)
J2 = CoordIJK(0, 2, 0)


@pytest.mark.parametrize(
    "c1, c2, expected",
    [
        (Z, Z, 0),
        (I, I, 0),
        (IK, IK, 0),
        (IJ, IJ, 0),
        (J2, J2, 0),
        (Z, I, 1),
        (Z, J2, 2),
        (Z, IK, 1),
        (I, IK, 1),
        (IK, J2, 3),
        (IJ, IK, 2),
    ],
)
def test_ijk_distance(c1, c2, expected):
    assert ijk_distance(c1, c2) == expected


def test_ijk_to_ij_and_back():
    orig = CoordIJK(1, 2, 0).normalized()
    assert ij_to_ijk(ijk_to_ij(orig)) == orig


def test_ijk_to_ij_and_back_nonzero_k():
    h3_ijk = CoordIJK(1, -3, 2).normalized()
    assert h3_ijk == CoordIJK(4, 0, 5)
    ij = ijk_to_ij(h3_ijk)
    assert ij == CoordIJ(-1, -5)
    assert ij_to_ijk(ij) == h3_ijk


def test_ij_to_ijk_overflow_raises():
    with pytest.raises(CoordinateOverflowError):
        ij_to_ijk(CoordIJ(I32_MIN, 0))


def test_ijk_cube_transformations():
    start = CoordIJK(1, 2, 0)
    cube = ijk_to_cube(start)
    assert cube == CoordIJK(1, 2, -3)
    assert cube.i + cube.j + cube.k == 0
    back = cube_to_ijk(cube)
    assert back == CoordIJK(0, 3, 1)
    assert back != start


@pytest.mark.parametrize(
    "ijk, expected",
    [
        (CoordIJK(0, 0, 0), CoordIJK(0, 0, 0)),
        (CoordIJK(-3, -3, 0), CoordIJK(-3, -3, 6)),
    ],
)
def test_ijk_to_cube_grid_path_values(ijk, expected):
    assert ijk_to_cube(ijk) == expected


@pytest.mark.parametrize(
    "cube, expected",
    [
        (CoordIJK(0, 0, 0), CoordIJK(0, 0, 0)),
        (CoordIJK(-1, -1, 2), CoordIJK(2, 0, 1)),
        (CoordIJK(-2, -2, 4), CoordIJK(4, 0, 2)),
    ],
)
def test_cube_to_ijk_grid_path_values(cube, expected):
    assert cube_to_ijk(cube) == expected


@pytest.mark.parametrize("digit", [d for d in Direction if d != Direction.INVALID_DIGIT])
def test_unit_vectors_map_back_to_digit(digit):
    assert unit_ijk_to_digit(neighbor(CoordIJK(0, 0, 0), digit)) == digit


@pytest.mark.parametrize("digit", list(Direction)[1:7])
def test_neighbor_is_at_distance_one(digit):
    start = CoordIJK(3, 1, 0)
    assert ijk_distance(start, neighbor(start, digit)) == 1