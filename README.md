# h3ijk

Coordinate machinery for the H3 hexagonal grid system, in pure Python with
no dependencies.

It covers:

- **IJK hex coordinates** (`h3ijk.ijk`): `CoordIJK` with `add`, `sub`,
  `scale`, `normalized` and `normalize_could_overflow`; `Vec2d` planar
  vectors with `magnitude` and `almost_equals`; the `Direction` digits; and
  `CoordinateOverflowError`.
- **Hex grid helpers** (`h3ijk.hexgrid`): `CoordIJ`, conversion between IJK,
  IJ, cube and 2D Cartesian coordinates (`ijk_to_ij`, `ij_to_ijk`,
  `ijk_to_cube`, `cube_to_ijk`, `ijk_to_hex2d`, `hex2d_to_coord_ijk`),
  `unit_ijk_to_digit`, `neighbor` and `ijk_distance`.
- **Apertures and rotations** (`h3ijk.aperture`): parent coordinates in
  aperture 7 grids (`up_ap7`, `up_ap7r` and their `_checked` forms), centre
  child coordinates in aperture 7 and aperture 3 grids (`down_ap7`,
  `down_ap7r`, `down_ap3`, `down_ap3r`), and 60° rotations of coordinates
  (`rotate60_ccw`, `rotate60_cw`) and digits (`rotate_digit_60_ccw`,
  `rotate_digit_60_cw`).
- **Icosahedron projection** (`h3ijk.geo`): `LatLng`, `Vec3d` and `FaceIJK`;
  finding the nearest icosahedron face (`geo_to_closest_face`), projecting
  latitude/longitude to face-local hex2d or IJK coordinates
  (`geo_to_hex2d`, `geo_to_face_ijk`) and back (`hex2d_to_geo`,
  `face_ijk_to_geo`), and `is_resolution_class_iii`.

## Installation

```
pip install .
```

## Example

```python
from h3ijk.geo import LatLng, geo_to_face_ijk, face_ijk_to_geo
from h3ijk.hexgrid import ijk_distance, neighbor
from h3ijk.ijk import CoordIJK, Direction
from h3ijk.aperture import down_ap7, up_ap7

point = LatLng.from_degrees(37.5, -122.5)
fijk = geo_to_face_ijk(point, 5)        # FaceIJK on the nearest face
center = face_ijk_to_geo(fijk, 5)       # cell centre as LatLng (radians)

ijk_distance(CoordIJK(0, 0, 0), CoordIJK(0, 2, 0))   # 2
neighbor(CoordIJK(0, 0, 0), Direction.I_AXES)        # CoordIJK(i=1, j=0, k=0)
down_ap7(CoordIJK(1, 0, 0))                          # CoordIJK(i=3, j=0, k=1)
```

Coordinates are immutable values: operations return new objects rather
than changing their inputs. `CoordIJK` arithmetic saturates at the signed
32-bit range. The checked aperture operations and `ij_to_ijk` raise
`CoordinateOverflowError` when a value would leave that range.

## What it does not do

The package projects points to and from a single icosahedron face. It does
not move coordinates that fall past a face's edge onto the neighbouring
face, and it does not compute cell vertices or cell boundaries. There are
no H3 index values, no command-line tool and no grid traversal functions.

## Running the tests

```
pip install .[test]
pytest
```