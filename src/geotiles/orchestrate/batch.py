"""Batch enumeration of tile codes and grid lookups."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from itertools import product
from typing import Any, TypeAlias

import numpy as np

from geotiles.lookup.tile_lookup import TileLookup, default_lookup

NDArray: TypeAlias = Any

SECTOR_LEVELS = 3


@dataclass(frozen=True)
class GridSpec:
    """Lat/lon grid specification for batch tile lookups."""

    lat_min: float
    lat_max: float
    lon_min: float
    lon_max: float
    step_deg: float
    max_points: int | None = None


def _frange_inclusive(start: float, stop: float, step: float) -> list[float]:
    """Build an inclusive floating-point range with deterministic rounding."""
    if step <= 0.0:
        raise ValueError("step must be positive.")
    if start > stop:
        raise ValueError("start must be <= stop.")

    values: list[float] = []
    current = start
    while current <= stop + 1e-9:
        values.append(round(current, 6))
        current += step
    return values


def generate_lat_lon_grid(spec: GridSpec) -> list[tuple[float, float]]:
    """Generate `(lat, lon)` points from the input grid specification."""
    lats = _frange_inclusive(spec.lat_min, spec.lat_max, spec.step_deg)
    lons = _frange_inclusive(spec.lon_min, spec.lon_max, spec.step_deg)
    point_count = len(lats) * len(lons)
    if spec.max_points is not None and point_count > spec.max_points:
        raise ValueError("grid points exceed max_points safety cap")
    return [(lat, lon) for lat in lats for lon in lons]


def generate_child_codes(
    prefix: str,
    levels: int = SECTOR_LEVELS,
    max_codes: int | None = None,
) -> list[str]:
    """Return every descendant code `levels` digits below `prefix`, in lexicographic order.

    A sector such as ``M713`` expands to 729 codes at the default three levels.
    """
    if levels < 0:
        raise ValueError("levels must be >= 0")
    if max_codes is not None and 9**levels > max_codes:
        raise ValueError("child codes exceed max_codes safety cap")
    return [prefix + "".join(digits) for digits in product("123456789", repeat=levels)]


def missing_codes(sector: str, present: Iterable[str], levels: int = SECTOR_LEVELS) -> list[str]:
    """Return the sector's descendant codes that are not in `present`."""
    have = set(present)
    return [code for code in generate_child_codes(sector, levels) if code not in have]


def locate_grid(
    spec: GridSpec,
    depth: int,
    lookup: TileLookup | None = None,
) -> dict[tuple[float, float], str | None]:
    """Map every grid point to the tile code containing it."""
    engine = lookup or default_lookup()
    return {
        (lat, lon): engine.location_to_name(lat, lon, depth)
        for lat, lon in generate_lat_lon_grid(spec)
    }


def corner_array(codes: Iterable[str], lookup: TileLookup | None = None) -> NDArray:
    """Return corners for `codes` as a float array of shape ``(n, 3, 2)`` in (lat, lon) order."""
    engine = lookup or default_lookup()
    rows = [engine.name_to_locations(code) for code in codes]
    if not rows:
        return np.empty((0, 3, 2), dtype=float)
    return np.asarray(rows, dtype=float)
