"""Core coordinate types for the hexagonal IJK grid system."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum

I32_MIN = -(2**31)
I32_MAX = 2**31 - 1

# Tolerance used when comparing 2D vectors for near equality.
FLT_EPSILON = 1.1920929e-7


def _saturate(value: int) -> int:
    """Clamp an integer to the signed 32-bit range."""
    return max(I32_MIN, min(I32_MAX, value))


def _add_overflows(a: int, b: int) -> bool:
    return not I32_MIN <= a + b <= I32_MAX


def _sub_overflows(a: int, b: int) -> bool:
    return not I32_MIN <= a - b <= I32_MAX


def _neg_overflows(a: int) -> bool:
    return a == I32_MIN


class CoordinateOverflowError(ArithmeticError):
    """Raised when a coordinate operation would overflow 32-bit integers."""


class Direction(IntEnum):
    """Digit directions of the hexagonal grid (0-6), with 7 as invalid."""

    CENTER = 0
    K_AXES = 1
    J_AXES = 2
    JK_AXES = 3
    I_AXES = 4
    IK_AXES = 5
    IJ_AXES = 6
    INVALID_DIGIT = 7


@dataclass(frozen=True)
class Vec2d:
    """A 2D Cartesian vector."""

    x: float = 0.0
    y: float = 0.0

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.hypot(self.x, self.y)

    def almost_equals(self, other: Vec2d) -> bool:
        """True if both components differ by less than the float tolerance."""
        return abs(self.x - other.x) < FLT_EPSILON and abs(self.y - other.y) < FLT_EPSILON


@dataclass(frozen=True)
class CoordIJK:
    """IJK hexagon coordinates with saturating 32-bit arithmetic."""

    i: int = 0
    j: int = 0
    k: int = 0

    def add(self, other: CoordIJK) -> CoordIJK:
        """Component-wise sum, saturated to the 32-bit range."""
        return CoordIJK(
            _saturate(self.i + other.i),
            _saturate(self.j + other.j),
            _saturate(self.k + other.k),
        )

    def sub(self, other: CoordIJK) -> CoordIJK:
        """Component-wise difference, saturated to the 32-bit range."""
        return CoordIJK(
            _saturate(self.i - other.i),
            _saturate(self.j - other.j),
            _saturate(self.k - other.k),
        )

    def scale(self, factor: int) -> CoordIJK:
        """Uniform scaling, saturated to the 32-bit range."""
        return CoordIJK(
            _saturate(self.i * factor),
            _saturate(self.j * factor),
            _saturate(self.k * factor),
        )

    def __add__(self, other: CoordIJK) -> CoordIJK:
        return self.add(other)

    def __sub__(self, other: CoordIJK) -> CoordIJK:
        return self.sub(other)

    def normalized(self) -> CoordIJK:
        """Return the equivalent coordinates with the smallest non-negative components."""
        i, j, k = self.i, self.j, self.k
        if i < 0:
            j = _saturate(j - i)
            k = _saturate(k - i)
            i = 0
        if j < 0:
            i = _saturate(i - j)
            k = _saturate(k - j)
            j = 0
        if k < 0:
            i = _saturate(i - k)
            j = _saturate(j - k)
            k = 0
        smallest = min(i, j, k)
        if smallest > 0:
            i -= smallest
            j -= smallest
            k -= smallest
        return CoordIJK(i, j, k)

    def normalize_could_overflow(self) -> bool:
        """True if normalizing these coordinates could overflow 32-bit integers.

        Assumes ``k`` is zero, as it is before normalization of IJ input.
        """
        i, j = self.i, self.j
        if i < 0 and (_neg_overflows(i) or _add_overflows(j, -i)):
            return True
        if j < 0 and (_neg_overflows(j) or _add_overflows(i, -j)):
            return True
        max_val, min_val = (i, j) if i > j else (j, i)
        if min_val < 0:
            if _add_overflows(max_val, min_val):
                return True
            if _sub_overflows(0, min_val):
                return True
            if _sub_overflows(max_val, min_val):
                return True
        return False