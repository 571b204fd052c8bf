"""Tests for batch enumeration utilities."""

from __future__ import annotations

import numpy as np
import pytest

from geotiles.lookup.tile_lookup import TileLookup
from geotiles.orchestrate.batch import (
    GridSpec,
    corner_array,
    generate_child_codes,
    generate_lat_lon_grid,
    locate_grid,
    missing_codes,
)


def test_generate_lat_lon_grid_inclusive() -> None:
    """Grid generation should include both range endpoints."""
    spec = GridSpec(lat_min=0.0, lat_max=10.0, lon_min=100.0, lon_max=110.0, step_deg=5.0)
    points = generate_lat_lon_grid(spec)

    assert points[0] == (0.0, 100.0)
    assert points[-1] == (10.0, 110.0)
    assert len(points) == 9


def test_generate_lat_lon_grid_enforces_cap() -> None:
    """Grids larger than max_points are refused."""
    spec = GridSpec(lat_min=0.0, lat_max=10.0, lon_min=0.0, lon_max=10.0, step_deg=1.0, max_points=10)

    with pytest.raises(ValueError, match="max_points"):
        generate_lat_lon_grid(spec)


def test_sector_expands_to_729_codes() -> None:
    """Three levels below a sector gives 9**3 codes in lexicographic order."""
    codes = generate_child_codes("M713")

    assert len(codes) == 729
    assert codes[0] == "M713111"
    assert codes[1] == "M713112"
    assert codes[-1] == "M713999"
    assert len(set(codes)) == 729


def test_generate_child_codes_edge_levels() -> None:
    """Zero levels returns the prefix; negative levels are rejected."""
    assert generate_child_codes("M", 0) == ["M"]
    assert generate_child_codes("M", 1) == [f"M{d}" for d in range(1, 10)]
    with pytest.raises(ValueError):
        generate_child_codes("M", -1)


def test_generate_child_codes_respects_max_codes() -> None:
    """Expansions larger than the cap are refused before any code is built."""
    assert len(generate_child_codes("M", 4, max_codes=9**4)) == 9**4
    with pytest.raises(ValueError, match="max_codes"):
        generate_child_codes("M", 5, max_codes=9**4)


def test_missing_codes_excludes_present_tiles() -> None:
    """Only codes absent from the present set are reported."""
    missing = missing_codes("A11", ["A11111", "A11999", "B11111"])

    assert len(missing) == 727
    assert "A11111" not in missing
    assert "A11112" in missing


def test_locate_grid_resolves_every_point() -> None:
    """Each grid point maps to a code of the requested depth."""
    spec = GridSpec(lat_min=-20.0, lat_max=20.0, lon_min=-80.0, lon_max=-60.0, step_deg=10.0)
    located = locate_grid(spec, depth=3, lookup=TileLookup())

    assert len(located) == 15
    lookup = TileLookup()
    for (lat, lon), code in located.items():
        assert code is not None
        assert len(code) == 4
        assert code == lookup.location_to_name(lat, lon, 3)


def test_corner_array_shape_and_values() -> None:
    """corner_array stacks (lat, lon) corners into an (n, 3, 2) array."""
    lookup = TileLookup()
    codes = ["A", "M713289", "T12"]

    corners = corner_array(codes, lookup=lookup)

    assert corners.shape == (3, 3, 2)
    np.testing.assert_allclose(corners[1], np.asarray(lookup.name_to_locations("M713289")))
    assert corner_array([]).shape == (0, 3, 2)
