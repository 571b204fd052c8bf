"""Unit tests for data contracts."""

from __future__ import annotations

import json

import pytest

from geotiles.contracts import TileTriangle


def _valid_tile() -> TileTriangle:
    return TileTriangle(
        code="M713289",
        corners=((-14.100060, -71.548858), (-14.015646, -71.599134), (-14.100223, -71.649112)),
    )


def test_tile_triangle_validates_and_serializes() -> None:
    """A valid tile is created and can be JSON serialized via to_dict."""
    tile = _valid_tile()
    payload = tile.to_dict()

    assert tile.depth == 6
    assert payload["corners"][1] == [-14.015646, -71.599134]
    assert json.loads(json.dumps(payload))["code"] == "M713289"


def test_lon_lat_ring_is_closed_and_reordered() -> None:
    """The ring swaps to [lon, lat] and repeats the first corner."""
    ring = _valid_tile().lon_lat_ring()

    assert len(ring) == 4
    assert ring[0] == [-71.548858, -14.100060]
    assert ring[-1] == ring[0]


def test_center_sits_between_corners() -> None:
    """For a small tile center() is close to the plain corner mean."""
    lat, lon = _valid_tile().center()

    assert lat == pytest.approx(-14.071976333, abs=1e-4)
    assert lon == pytest.approx(-71.599034667, abs=1e-4)


def test_center_wraps_across_antimeridian() -> None:
    """Corners either side of 180 degrees keep the centre near 180, not 0."""
    tile = TileTriangle(code="J", corners=((26.565, 144.0), (-26.565, 180.0), (26.565, -144.0)))

    lat, lon = tile.center()

    assert abs(lon) == pytest.approx(180.0)
    assert lat == pytest.approx(10.81, abs=0.01)


def test_tile_triangle_accepts_list_corners() -> None:
    """List-like corners are normalized to tuples of floats."""
    tile = TileTriangle(code="A", corners=[[90, 0], [26.5, 0], [26.5, 72]])

    assert tile.corners == ((90.0, 0.0), (26.5, 0.0), (26.5, 72.0))


def test_tile_triangle_rejects_wrong_corner_count() -> None:
    """Exactly three corners are required."""
    with pytest.raises(ValueError, match="exactly 3"):
        TileTriangle(code="A", corners=((0.0, 0.0), (1.0, 1.0)))


def test_tile_triangle_rejects_out_of_range_latitude() -> None:
    """Latitudes beyond the poles are rejected."""
    with pytest.raises(ValueError, match="latitude"):
        TileTriangle(code="A", corners=((91.0, 0.0), (0.0, 0.0), (0.0, 1.0)))
