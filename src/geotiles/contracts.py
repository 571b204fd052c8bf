"""Core data contracts for geodesic tiles."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from geotiles.geo.sphere import geo_centroid

LatLon = tuple[float, float]


def _to_lat_lon_list(values: object) -> list[LatLon]:
    """Convert list-like or numpy-like corner arrays to a list of (lat, lon) tuples."""
    if hasattr(values, "tolist"):
        raw_values = values.tolist()
    else:
        raw_values = values

    if not isinstance(raw_values, (list, tuple)):
        raise TypeError("Expected list-like corners that can be converted to a Python list.")

    corners: list[LatLon] = []
    for corner in raw_values:
        lat, lon = corner
        corners.append((float(lat), float(lon)))
    return corners


@dataclass(frozen=True, slots=True)
class TileTriangle:
    """A tile code together with its three corners as ``(lat, lon)`` degrees.

    Corner order is the internal subdivision order and determines edge
    adjacency: edges are (0, 1), (1, 2) and (2, 0).
    """

    code: str
    corners: tuple[LatLon, LatLon, LatLon]

    def __post_init__(self) -> None:
        """Validate and normalize corner values."""
        corners = _to_lat_lon_list(self.corners)
        if len(corners) != 3:
            raise ValueError("corners must contain exactly 3 (lat, lon) pairs.")
        for lat, lon in corners:
            if not -90.0 <= lat <= 90.0:
                raise ValueError("corner latitude must be within [-90, 90].")
            if not -180.0 <= lon <= 180.0:
                raise ValueError("corner longitude must be within [-180, 180].")
        object.__setattr__(self, "corners", tuple(corners))

    @property
    def depth(self) -> int:
        """Number of subdivision digits after the facet letter."""
        return len(self.code) - 1

    def lon_lat_ring(self) -> list[list[float]]:
        """Return a closed ``[lon, lat]`` ring as used by GeoJSON polygons."""
        ring = [[lon, lat] for lat, lon in self.corners]
        ring.append(list(ring[0]))
        return ring

    def center(self) -> LatLon:
        """Return the centre of the corners on the sphere as ``(lat, lon)``."""
        return geo_centroid(self.corners)

    def to_dict(self) -> dict[str, Any]:
        """Serialize the tile to a JSON-compatible dictionary."""
        return {
            "code": self.code,
            "corners": [[lat, lon] for lat, lon in self.corners],
        }


@dataclass(frozen=True, slots=True)
class EdgeInfo:
    """One edge of a tile triangle."""

    vertices: tuple[int, int]
    lat_diff_deg: float
    length_km: float
