"""Geographic coordinates and their projection onto icosahedron faces."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from h3ijk.hexgrid import EPSILON, hex2d_to_coord_ijk, ijk_to_hex2d
from h3ijk.ijk import CoordIJK, Vec2d

NUM_ICOSA_FACES = 20

# Threshold tolerances for comparing geographic coordinates.
EPSILON_DEG = 0.000000001
EPSILON_RAD = EPSILON_DEG * math.pi / 180.0

# Scaling factor from hex2d resolution 0 unit length to gnomonic unit length.
RES0_U_GNOMONIC = 0.38196601125010500003
INV_RES0_U_GNOMONIC = 2.61803398874989588842
# Rotation angle between Class II and Class III resolution axes, asin(sqrt(3/28)).
M_AP7_ROT_RADS = 0.333473172251832115336090755351601070065900389
M_SQRT7 = 2.6457513110645905905016157536392604257102
M_RSQRT7 = 0.37796447300922722721451653623418006081576
M_ONETHIRD = 1.0 / 3.0
M_2PI = 2.0 * math.pi


@dataclass(frozen=True)
class LatLng:
    """A latitude/longitude pair in radians."""

    lat: float = 0.0
    lng: float = 0.0

    @staticmethod
    def from_degrees(lat: float, lng: float) -> LatLng:
        """Build a point from latitude and longitude given in degrees."""
        return LatLng(math.radians(lat), math.radians(lng))

    def almost_equal(self, other: LatLng, threshold: float = EPSILON_RAD) -> bool:
        """True if both components differ by less than ``threshold`` radians."""
        return abs(self.lat - other.lat) < threshold and abs(self.lng - other.lng) < threshold


@dataclass(frozen=True)
class Vec3d:
    """A point in 3D Cartesian space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @staticmethod
    def from_geo(g: LatLng) -> Vec3d:
        """Place a geographic point on the unit sphere."""
        r = math.cos(g.lat)
        return Vec3d(math.cos(g.lng) * r, math.sin(g.lng) * r, math.sin(g.lat))

    def square_distance(self, other: Vec3d) -> float:
        """Squared Euclidean distance to another point."""
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2


@dataclass(frozen=True)
class FaceIJK:
    """IJK coordinates on a particular icosahedron face."""

    face: int = 0
    coord: CoordIJK = field(default_factory=CoordIJK)


FACE_CENTER_GEO: tuple[LatLng, ...] = (
    LatLng(0.80358264971898994, 1.248397419617396),
    LatLng(1.3077478834556382, 2.536945009877921),
    LatLng(1.054751253523952, -1.3475173589003966),
    LatLng(0.6001915955381868, -0.45060390946975575),
    LatLng(0.49171542819877387, 0.40198820291130694),
    LatLng(0.1727453274156187, 1.6781468852804337),
    LatLng(0.6059293215713507, 2.9539233298124116),
    LatLng(0.42737051832897964, -1.8888762003362854),
    LatLng(-0.07906611854921283, -0.73342951338086774),
    LatLng(-0.23096164445538364, 0.506495587332349),
    LatLng(0.07906611854921283, 2.4081631402089255),
    LatLng(0.23096164445538364, -2.635097066257444),
    LatLng(-0.1727453274156187, -1.4634457683093595),
    LatLng(-0.6059293215713507, -0.18766932377738162),
    LatLng(-0.42737051832897964, 1.252716453253508),
    LatLng(-0.6001915955381868, 2.6909887441200375),
    LatLng(-0.49171542819877387, -2.7396044506784863),
    LatLng(-0.80358264971898994, -1.893195233972397),
    LatLng(-1.3077478834556382, -0.6046476437118721),
    LatLng(-1.054751253523952, 1.7940752946893966),
)

FACE_CENTER_POINT: tuple[Vec3d, ...] = (
    Vec3d(0.2199307791404606, 0.6583691780274996, 0.7198475378926182),
    Vec3d(-0.2139234834501421, 0.1478171829550703, 0.9656017935214205),
    Vec3d(0.1092625278784797, -0.481195157287321, 0.8697775121287253),
    Vec3d(0.7428567301586791, -0.3593941678278028, 0.5648005936517033),
    Vec3d(0.8112534709140969, 0.3448953237639384, 0.472138773641393),
    Vec3d(-0.1055498149613921, 0.9794457296411413, 0.1718874610009365),
    Vec3d(-0.8075407579970092, 0.1533552485898818, 0.5695261994882688),
    Vec3d(-0.2846148069787907, -0.8644080972654206, 0.414479255247354),
    Vec3d(0.7405621473854482, -0.6673299564565524, -0.07898376463267377),
    Vec3d(0.8512303986474293, 0.4722343788582681, -0.2289137388687808),
    Vec3d(-0.7405621473854481, 0.6673299564565524, 0.07898376463267377),
    Vec3d(-0.8512303986474292, -0.4722343788582682, 0.2289137388687808),
    Vec3d(0.1055498149613919, -0.9794457296411413, -0.1718874610009365),
    Vec3d(0.8075407579970092, -0.1533552485898819, -0.5695261994882688),
    Vec3d(0.2846148069787908, 0.8644080972654204, -0.414479255247354),
    Vec3d(-0.7428567301586791, 0.3593941678278027, -0.5648005936517033),
    Vec3d(-0.8112534709140971, -0.3448953237639382, -0.472138773641393),
    Vec3d(-0.2199307791404607, -0.6583691780274996, -0.7198475378926182),
    Vec3d(0.213923483450142, -0.1478171829550704, -0.9656017935214205),
    Vec3d(-0.1092625278784796, 0.481195157287321, -0.8697775121287253),
)

# Azimuths (radians) from each face centre to its vertices 0, 1 and 2,
# which give the directions of the face's i, j and k axes.
FACE_AXES_AZ_RADS_CII: tuple[tuple[float, float, float], ...] = (
    (5.61995826852394, 3.5255631661307445, 1.4311680637375487),
    (5.760339081714187, 3.6659439793209917, 1.571548876927796),
    (0.7802136543934301, 4.969003859179821, 2.8746087567866257),
    (0.4304693639799999, 4.619259568766391, 2.5248644663731955),
    (6.130269123335111, 4.035874020941916, 1.9414789185487203),
    (2.692877706530643, 0.5984826041374471, 4.787272808923838),
    (2.982963003477244, 0.8885679010840484, 5.07735810587044),
    (3.532912002790141, 1.4385169003969457, 5.627307105183337),
    (3.494305004259568, 1.3999099018663729, 5.588700106652764),
    (3.0032141694995384, 0.9088190671063429, 5.097609271892734),
    (5.9304729565098116, 3.836077854116616, 1.7416827517234204),
    (0.13837848409025485, 4.327168688876646, 2.23277358648345),
    (0.44871494705915036, 4.6375051518455415, 2.543110049452346),
    (0.15862965011254936, 4.34741985489894, 2.253024752505745),
    (5.8918659579792385, 3.797470855586043, 1.7030757531928476),
    (2.7111232896097933, 0.6167281872165978, 4.8055183920029887),
    (3.294508837434268, 1.200113735041073, 5.388903939827464),
    (3.80481969224544, 1.7104245898522445, 5.899214794638635),
    (3.6644388790551924, 1.570043776661997, 5.758833981448388),
    (2.361378999196363, 0.2669838968031676, 4.4557741015895586),
)


def is_resolution_class_iii(res: int) -> bool:
    """True for odd (Class III) resolutions."""
    return res % 2 == 1


def _pos_angle_rads(rads: float) -> float:
    """Normalize an angle into the range [0, 2*pi)."""
    tmp = rads + M_2PI if rads < 0.0 else rads
    if rads >= M_2PI:
        tmp -= M_2PI
    return tmp


def _constrain_lng(lng: float) -> float:
    while lng > math.pi:
        lng -= M_2PI
    while lng < -math.pi:
        lng += M_2PI
    return lng


def _clamp_unit(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _geo_azimuth_rads(p1: LatLng, p2: LatLng) -> float:
    """Azimuth in radians from ``p1`` to ``p2``."""
    return math.atan2(
        math.cos(p2.lat) * math.sin(p2.lng - p1.lng),
        math.cos(p1.lat) * math.sin(p2.lat)
        - math.sin(p1.lat) * math.cos(p2.lat) * math.cos(p2.lng - p1.lng),
    )


def _pole_or(lat: float, lng_fn) -> LatLng:
    if abs(lat - math.pi / 2) < EPSILON:
        return LatLng(math.pi / 2, 0.0)
    if abs(lat + math.pi / 2) < EPSILON:
        return LatLng(-math.pi / 2, 0.0)
    return LatLng(lat, lng_fn())


def _geo_az_distance_rads(p1: LatLng, az: float, distance: float) -> LatLng:
    """Point reached from ``p1`` along azimuth ``az`` after ``distance`` radians."""
    if distance < EPSILON:
        return p1
    az = _pos_angle_rads(az)
    if az < EPSILON or abs(az - math.pi) < EPSILON:
        lat = p1.lat + distance if az < EPSILON else p1.lat - distance
        return _pole_or(lat, lambda: _constrain_lng(p1.lng))

    sin_lat = _clamp_unit(
        math.sin(p1.lat) * math.cos(distance)
        + math.cos(p1.lat) * math.sin(distance) * math.cos(az)
    )
    lat = math.asin(sin_lat)

    def lng() -> float:
        inv_cos_lat = 1.0 / math.cos(lat)
        sin_lng = _clamp_unit(math.sin(az) * math.sin(distance) * inv_cos_lat)
        cos_lng = _clamp_unit(
            (math.cos(distance) - math.sin(p1.lat) * math.sin(lat))
            / math.cos(p1.lat)
            * inv_cos_lat
        )
        return _constrain_lng(p1.lng + math.atan2(sin_lng, cos_lng))

    return _pole_or(lat, lng)


def geo_to_closest_face(g: LatLng) -> tuple[int, float]:
    """Return the closest face and the squared 3D distance to its centre."""
    v3d = Vec3d.from_geo(g)
    best_face, best_sqd = 0, 5.0
    for face, centre in enumerate(FACE_CENTER_POINT):
        sqd = centre.square_distance(v3d)
        if sqd < best_sqd:
            best_face, best_sqd = face, sqd
    return best_face, best_sqd


def geo_to_hex2d(g: LatLng, res: int) -> tuple[int, Vec2d]:
    """Project a point onto its closest face as hex2d coordinates at ``res``."""
    face, sqd = geo_to_closest_face(g)
    r = math.acos(_clamp_unit(1.0 - sqd * 0.5))
    if r < EPSILON:
        return face, Vec2d(0.0, 0.0)

    azimuth = _geo_azimuth_rads(FACE_CENTER_GEO[face], g)
    theta = _pos_angle_rads(FACE_AXES_AZ_RADS_CII[face][0] - _pos_angle_rads(azimuth))
    if is_resolution_class_iii(res):
        theta = _pos_angle_rads(theta - M_AP7_ROT_RADS)

    r = math.tan(r) * INV_RES0_U_GNOMONIC
    for _ in range(res):
        r *= M_SQRT7
    return face, Vec2d(r * math.cos(theta), r * math.sin(theta))


def hex2d_to_geo(v: Vec2d, face: int, res: int, substrate: bool) -> LatLng:
    """Inverse projection of hex2d coordinates on ``face`` at ``res``."""
    r = v.magnitude()
    if r < EPSILON:
        return FACE_CENTER_GEO[face]

    theta = math.atan2(v.y, v.x)
    for _ in range(res):
        r *= M_RSQRT7
    if substrate:
        r *= M_ONETHIRD
        if is_resolution_class_iii(res):
            r *= M_RSQRT7

    r = math.atan(r * RES0_U_GNOMONIC)
    if not substrate and is_resolution_class_iii(res):
        theta = _pos_angle_rads(theta + M_AP7_ROT_RADS)

    azimuth = _pos_angle_rads(FACE_AXES_AZ_RADS_CII[face][0] - theta)
    return _geo_az_distance_rads(FACE_CENTER_GEO[face], azimuth, r)


def geo_to_face_ijk(g: LatLng, res: int) -> FaceIJK:
    """FaceIJK address of the cell containing ``g`` at ``res``."""
    face, v = geo_to_hex2d(g, res)
    return FaceIJK(face, hex2d_to_coord_ijk(v))


def face_ijk_to_geo(h: FaceIJK, res: int) -> LatLng:
    """Geographic centre of the cell at FaceIJK ``h``."""
    return hex2d_to_geo(ijk_to_hex2d(h.coord), h.face, res, False)