"""Deterministic helpers for laying out a single geodesic tile."""

from __future__ import annotations

import re
from collections.abc import Sequence
from math import atan2, pi

from geotiles.contracts import EdgeInfo, LatLon
from geotiles.geo.sphere import geo_centroid, haversine_km
from geotiles.lookup.icosahedron import INVERTED_CHILDREN

_UI_CODE = re.compile(r"^[A-T][1-9]{1,6}$")
_INVERTED_DIGITS = frozenset(str(digit) for digit in INVERTED_CHILDREN)
_EDGES: tuple[tuple[int, int], ...] = ((0, 1), (1, 2), (2, 0))


def is_ui_code(code: str) -> bool:
    """Whether ``code`` matches the strict map-entry pattern (letter plus 1-6 digits)."""
    return _UI_CODE.match(code) is not None


def is_inverted_tile(code: str) -> bool:
    """Return True when the tile's apex points opposite to its parent's."""
    return code[-1:] in _INVERTED_DIGITS


def tile_bounds(corners: Sequence[LatLon]) -> tuple[float, float, float, float]:
    """Return corner bounds as (lon_min, lat_min, lon_max, lat_max).

    Tiles crossing the antimeridian get ``lon_min > lon_max``, as in GeoJSON
    bounding boxes. Corners on a pole carry no longitude and are skipped for
    the longitude range.
    """
    lats = [lat for lat, _ in corners]
    lons = [lon for lat, lon in corners if abs(lat) < 90.0]
    if max(lons) - min(lons) > 180.0:
        shifted = [lon + 360.0 if lon < 0.0 else lon for lon in lons]
        lon_min = min(shifted)
        lon_max = max(shifted)
        if lon_max > 180.0:
            lon_max -= 360.0
        return (lon_min, min(lats), lon_max, max(lats))
    return (min(lons), min(lats), max(lons), max(lats))


def tile_center(corners: Sequence[LatLon]) -> tuple[float, float]:
    """Return the centre of the corners on the sphere as (center_lat, center_lon)."""
    return geo_centroid(corners)


def tile_edges(corners: Sequence[LatLon]) -> list[EdgeInfo]:
    """Return the three edges (0, 1), (1, 2), (2, 0) with length and latitude span."""
    edges: list[EdgeInfo] = []
    for i, j in _EDGES:
        lat1, lon1 = corners[i]
        lat2, lon2 = corners[j]
        edges.append(
            EdgeInfo(
                vertices=(i, j),
                lat_diff_deg=abs(lat1 - lat2),
                length_km=haversine_km(lat1, lon1, lat2, lon2),
            )
        )
    return edges


def find_ew_edge(corners: Sequence[LatLon]) -> EdgeInfo:
    """Return the most east-west edge, i.e. the one with the smallest latitude span."""
    edges = tile_edges(corners)
    best = edges[0]
    for edge in edges[1:]:
        if edge.lat_diff_deg < best.lat_diff_deg:
            best = edge
    return best


def rotation_angle(corners: Sequence[LatLon], edge: EdgeInfo, inverted: bool) -> float:
    """Angle in radians that turns ``edge`` horizontal, flipped for inverted tiles."""
    lat1, lon1 = corners[edge.vertices[0]]
    lat2, lon2 = corners[edge.vertices[1]]
    angle = atan2(lat2 - lat1, lon2 - lon1)
    if inverted:
        angle += pi
    return angle


def print_pixels(edge_km: float, dpi: int = 300) -> int:
    """Pixel width of an edge printed at 1:100,000, where 1 km maps to 1 cm."""
    if dpi <= 0:
        raise ValueError("dpi must be positive.")
    return round(edge_km * dpi / 2.54)
