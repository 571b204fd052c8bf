"""Unit-sphere vector helpers.

Points are plain ``(x, y, z)`` tuples. Geographic coordinates are degrees,
latitude first.
"""

from __future__ import annotations

from collections.abc import Iterable
from math import asin, atan2, cos, degrees, hypot, radians, sin, sqrt

Vector = tuple[float, float, float]

EARTH_RADIUS_KM = 6371.0


def dot(a: Vector, b: Vector) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vector, b: Vector) -> Vector:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def normalize(v: Vector) -> Vector:
    """Scale a non-zero vector to unit length."""
    m = sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if m == 0.0:
        raise ValueError("cannot normalize a zero vector")
    return (v[0] / m, v[1] / m, v[2] / m)


def interp(v1: Vector, v2: Vector, v3: Vector) -> Vector:
    """Project the sum of three vectors back onto the unit sphere.

    Passing a corner twice yields the one-third point of an edge; passing
    three distinct corners yields the triangle's centre.
    """
    return normalize(
        (
            v1[0] + v2[0] + v3[0],
            v1[1] + v2[1] + v3[1],
            v1[2] + v2[2] + v3[2],
        )
    )


def triple_product(a: Vector, b: Vector, c: Vector) -> float:
    """Return ``a . (b x c)``; positive when a, b, c wind counter-clockwise."""
    return dot(a, cross(b, c))


def right_side(p: Vector, va: Vector, vb: Vector) -> bool:
    """Whether ``p`` lies on the inner side of the directed edge ``va -> vb``."""
    return dot(cross(va, vb), p) >= 0.0


def within(p: Vector, va: Vector, vb: Vector, vc: Vector) -> bool:
    """Inclusive point-in-spherical-triangle test for a consistently wound triangle."""
    return right_side(p, va, vb) and right_side(p, vb, vc) and right_side(p, vc, va)


def geo_to_point(lat_deg: float, lon_deg: float) -> Vector:
    """Convert latitude/longitude in degrees to a unit vector."""
    lat = radians(lat_deg)
    lon = radians(lon_deg)
    r = cos(lat)
    return (r * cos(lon), r * sin(lon), sin(lat))


def point_to_geo(point: Vector) -> tuple[float, float]:
    """Convert a unit vector to ``(lat, lon)`` degrees, clamped to valid ranges."""
    x, y, z = point
    r = hypot(x, y)
    lat = degrees(atan2(z, r))
    lon = 0.0 if r == 0.0 else degrees(atan2(y, x))
    lat = min(90.0, max(-90.0, lat))
    lon = min(180.0, max(-180.0, lon))
    return (lat, lon)


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance in kilometres between two lat/lon points."""
    phi1 = radians(lat1)
    phi2 = radians(lat2)
    d_phi = phi2 - phi1
    d_lambda = radians(lon2 - lon1)
    a = sin(d_phi / 2.0) ** 2 + cos(phi1) * cos(phi2) * sin(d_lambda / 2.0) ** 2
    return 2.0 * EARTH_RADIUS_KM * asin(min(1.0, sqrt(a)))


def spherical_triangle_area(a: Vector, b: Vector, c: Vector) -> float:
    """Signed solid angle (steradians) of the spherical triangle ``a, b, c``.

    Uses the Van Oosterom-Strackee formula; the sign follows the winding.
    """
    numerator = triple_product(a, b, c)
    denominator = 1.0 + dot(a, b) + dot(b, c) + dot(c, a)
    return 2.0 * atan2(numerator, denominator)


def geo_centroid(points: Iterable[tuple[float, float]]) -> tuple[float, float]:
    """Return the normalized mean of lat/lon points as ``(lat, lon)``.

    Unlike a plain average of longitudes this stays correct across the
    antimeridian.
    """
    x = y = z = 0.0
    for lat, lon in points:
        px, py, pz = geo_to_point(lat, lon)
        x += px
        y += py
        z += pz
    return point_to_geo(normalize((x, y, z)))
