"""Conversions and neighbourhood operations on the hexagonal IJK grid."""

from __future__ import annotations

import math
from dataclasses import dataclass

from h3ijk.ijk import CoordIJK, CoordinateOverflowError, Direction, Vec2d, _saturate

# Nudge applied before truncating floating point values to grid indices.
EPSILON = 0.0000000000000001
# 1 / sin(60 degrees)
M_RSIN60 = 1.0 / math.sin(math.radians(60.0))
# sqrt(3) / 2
M_SQRT3_2 = math.sqrt(3.0) / 2.0

# IJK unit vectors indexed by digit (0-6).
UNIT_VECS: tuple[CoordIJK, ...] = (
    CoordIJK(0, 0, 0),  # CENTER
    CoordIJK(0, 0, 1),  # K_AXES
    CoordIJK(0, 1, 0),  # J_AXES
    CoordIJK(0, 1, 1),  # JK_AXES
    CoordIJK(1, 0, 0),  # I_AXES
    CoordIJK(1, 0, 1),  # IK_AXES
    CoordIJK(1, 1, 0),  # IJ_AXES
)


@dataclass(frozen=True)
class CoordIJ:
    """Two-axis IJ hexagon coordinates."""

    i: int = 0
    j: int = 0


def unit_ijk_to_digit(ijk: CoordIJK) -> Direction:
    """Return the digit of a unit (or zero) vector, or INVALID_DIGIT."""
    normalized = ijk.normalized()
    for digit, unit in zip(Direction, UNIT_VECS):
        if normalized == unit:
            return digit
    return Direction.INVALID_DIGIT


def neighbor(ijk: CoordIJK, digit: Direction) -> CoordIJK:
    """Return the normalized coordinates of the neighbour in direction ``digit``."""
    if digit in (Direction.CENTER, Direction.INVALID_DIGIT):
        return ijk
    return (ijk + UNIT_VECS[digit]).normalized()


def ijk_distance(c1: CoordIJK, c2: CoordIJK) -> int:
    """Grid distance between two IJK+ coordinates."""
    diff = (c1 - c2).normalized()
    return max(abs(diff.i), abs(diff.j), abs(diff.k))


def ijk_to_ij(ijk: CoordIJK) -> CoordIJ:
    """Convert IJK+ coordinates to IJ coordinates."""
    return CoordIJ(ijk.i - ijk.k, ijk.j - ijk.k)


def ij_to_ijk(ij: CoordIJ) -> CoordIJK:
    """Convert IJ coordinates to normalized IJK+ coordinates.

    Raises CoordinateOverflowError if normalization could overflow.
    """
    ijk = CoordIJK(ij.i, ij.j, 0)
    if ijk.normalize_could_overflow():
        raise CoordinateOverflowError(f"normalizing {ij} would overflow")
    return ijk.normalized()


def hex2d_to_coord_ijk(v: Vec2d) -> CoordIJK:
    """Return the IJK+ coordinates of the hex containing a 2D point."""
    a1 = abs(v.x)
    a2 = abs(v.y)

    x2 = a2 * M_RSIN60
    x1 = a1 + x2 / 2.0

    m1 = int(x1 + EPSILON)
    m2 = int(x2 + EPSILON)

    r1 = x1 - m1
    r2 = x2 - m2

    if r1 < 0.5:
        if r1 < 1.0 / 3.0:
            i = m1
            j = m2 if r2 < (1.0 + r1) / 2.0 else m2 + 1
        else:
            j = m2 if r2 < (1.0 - r1) else m2 + 1
            i = m1 + 1 if (1.0 - r1) <= r2 < 2.0 * r1 else m1
    elif r1 < 2.0 / 3.0:
        j = m2 + 1 if r2 < 2.0 * r1 - 1.0 else m2
        i = m1 if (2.0 * r1 - 1.0) < r2 < (1.0 - r1) else m1 + 1
    else:
        i = m1 + 1
        j = m2 if r2 < r1 / 2.0 else m2 + 1

    # Fold across the axes when the point lies in a negative half-plane.
    if v.x < 0.0:
        if j % 2 == 0:
            axis_i = j // 2
            diff = i - axis_i
            i -= 2 * diff
        else:
            axis_i = (j + 1) // 2
            diff = i - axis_i
            i -= 2 * diff + 1
    if v.y < 0.0:
        i -= (2 * j + 1) // 2
        j = -j

    return CoordIJK(i, j, 0).normalized()


def ijk_to_hex2d(ijk: CoordIJK) -> Vec2d:
    """Return the 2D Cartesian centre of a hex."""
    i = ijk.i - ijk.k
    j = ijk.j - ijk.k
    return Vec2d(i - 0.5 * j, j * M_SQRT3_2)


def ijk_to_cube(ijk: CoordIJK) -> CoordIJK:
    """Convert IJK+ coordinates to cube coordinates (summing to zero)."""
    i = ijk.i - ijk.k
    j = ijk.j - ijk.k
    return CoordIJK(i, j, -i - j)


def cube_to_ijk(cube: CoordIJK) -> CoordIJK:
    """Convert cube coordinates back to normalized IJK+ coordinates."""
    return CoordIJK(_saturate(-cube.i), cube.j, 0).normalized()