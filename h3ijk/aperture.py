"""Aperture 7 and aperture 3 grid transforms and 60 degree rotations."""

from __future__ import annotations

import math

from h3ijk.ijk import (
    I32_MAX,
    I32_MIN,
    CoordIJK,
    CoordinateOverflowError,
    Direction,
    _saturate,
)

M_ONESEVENTH = 1.0 / 7.0


def _lround(value: float) -> int:
    """Round half away from zero, clamped to the 32-bit range."""
    if value > 0.0:
        result = math.floor(value + 0.5)
    elif value < 0.0:
        result = math.ceil(value - 0.5)
    else:
        result = 0
    return _saturate(int(result))


def _checked(value: int) -> int:
    if not I32_MIN <= value <= I32_MAX:
        raise CoordinateOverflowError(f"value {value} overflows a 32-bit integer")
    return value


def _combine(ijk: CoordIJK, i_vec: CoordIJK, j_vec: CoordIJK, k_vec: CoordIJK) -> CoordIJK:
    """Express ``ijk`` in the basis given by the three unit vector images."""
    return (i_vec.scale(ijk.i) + j_vec.scale(ijk.j) + k_vec.scale(ijk.k)).normalized()


def up_ap7(ijk: CoordIJK) -> CoordIJK:
    """Parent coordinates in a counter-clockwise aperture 7 grid (Class III)."""
    i = ijk.i - ijk.k
    j = ijk.j - ijk.k
    return CoordIJK(
        _lround((3 * i - j) * M_ONESEVENTH),
        _lround((i + 2 * j) * M_ONESEVENTH),
        0,
    ).normalized()


def up_ap7r(ijk: CoordIJK) -> CoordIJK:
    """Parent coordinates in a clockwise aperture 7 grid (Class II)."""
    i = ijk.i - ijk.k
    j = ijk.j - ijk.k
    return CoordIJK(
        _lround((2 * i + j) * M_ONESEVENTH),
        _lround((3 * j - i) * M_ONESEVENTH),
        0,
    ).normalized()


def up_ap7_checked(ijk: CoordIJK) -> CoordIJK:
    """Like :func:`up_ap7`, raising CoordinateOverflowError on 32-bit overflow."""
    i = ijk.i - ijk.k
    j = ijk.j - ijk.k
    new_i = _checked(_checked(i * 3) - j)
    new_j = _checked(i + _checked(j * 2))
    return CoordIJK(
        _lround(new_i * M_ONESEVENTH),
        _lround(new_j * M_ONESEVENTH),
        0,
    ).normalized()


def up_ap7r_checked(ijk: CoordIJK) -> CoordIJK:
    """Like :func:`up_ap7r`, raising CoordinateOverflowError on 32-bit overflow."""
    i = ijk.i - ijk.k
    j = ijk.j - ijk.k
    new_i = _checked(_checked(i * 2) + j)
    new_j = _checked(_checked(j * 3) - i)
    return CoordIJK(
        _lround(new_i * M_ONESEVENTH),
        _lround(new_j * M_ONESEVENTH),
        0,
    ).normalized()


def down_ap7(ijk: CoordIJK) -> CoordIJK:
    """Centre child coordinates at the next finer counter-clockwise aperture 7 resolution."""
    return _combine(ijk, CoordIJK(3, 0, 1), CoordIJK(1, 3, 0), CoordIJK(0, 1, 3))


def down_ap7r(ijk: CoordIJK) -> CoordIJK:
    """Centre child coordinates at the next finer clockwise aperture 7 resolution."""
    return _combine(ijk, CoordIJK(3, 1, 0), CoordIJK(0, 3, 1), CoordIJK(1, 0, 3))


def down_ap3(ijk: CoordIJK) -> CoordIJK:
    """Centre child coordinates at the next finer counter-clockwise aperture 3 resolution."""
    return _combine(ijk, CoordIJK(2, 0, 1), CoordIJK(1, 2, 0), CoordIJK(0, 1, 2))


def down_ap3r(ijk: CoordIJK) -> CoordIJK:
    """Centre child coordinates at the next finer clockwise aperture 3 resolution."""
    return _combine(ijk, CoordIJK(2, 1, 0), CoordIJK(0, 2, 1), CoordIJK(1, 0, 2))


def rotate60_ccw(ijk: CoordIJK) -> CoordIJK:
    """Rotate IJK coordinates 60 degrees counter-clockwise."""
    return _combine(ijk, CoordIJK(1, 1, 0), CoordIJK(0, 1, 1), CoordIJK(1, 0, 1))


def rotate60_cw(ijk: CoordIJK) -> CoordIJK:
    """Rotate IJK coordinates 60 degrees clockwise."""
    return _combine(ijk, CoordIJK(1, 0, 1), CoordIJK(1, 1, 0), CoordIJK(0, 1, 1))


_DIGIT_CCW = {
    Direction.K_AXES: Direction.IK_AXES,
    Direction.IK_AXES: Direction.I_AXES,
    Direction.I_AXES: Direction.IJ_AXES,
    Direction.IJ_AXES: Direction.J_AXES,
    Direction.J_AXES: Direction.JK_AXES,
    Direction.JK_AXES: Direction.K_AXES,
}

_DIGIT_CW = {after: before for before, after in _DIGIT_CCW.items()}


def rotate_digit_60_ccw(digit: Direction) -> Direction:
    """Rotate a digit 60 degrees counter-clockwise; centre and invalid are unchanged."""
    return _DIGIT_CCW.get(Direction(digit), Direction(digit))


def rotate_digit_60_cw(digit: Direction) -> Direction:
    """Rotate a digit 60 degrees clockwise; centre and invalid are unchanged."""
    return _DIGIT_CW.get(Direction(digit), Direction(digit))