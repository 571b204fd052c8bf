"""Demo: print a tile, its nine children, and the code found at each child centre."""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from geotiles.geo.tiling import find_ew_edge, is_inverted_tile, print_pixels, tile_center  # noqa: E402
from geotiles.lookup.tile_lookup import TileLookup  # noqa: E402


def main(argv: list[str] | None = None) -> int:
    """Break a tile down into its children and check the reverse lookup."""
    args = sys.argv[1:] if argv is None else argv
    code = args[0] if args else "M713289"
    lookup = TileLookup()

    parent = lookup.tile(code)
    edge = find_ew_edge(parent.corners)

    print("=== Geodesic Tile Breakdown Demo ===")
    print(f"tile: {parent.code}")
    for lat, lon in parent.corners:
        print(f"  corner: lat={lat:.6f}, lon={lon:.6f}")
    print(f"E-W edge: {edge.length_km:.2f} km, {print_pixels(edge.length_km)} px at 300 dpi\n")
    print("child     | type     | center lat | center lon  | located")
    print("----------+----------+------------+-------------+----------")
    for child in lookup.sub_tiles(parent.code):
        lat, lon = tile_center(child.corners)
        located = lookup.location_to_name(lat, lon, child.depth)
        kind = "inverted" if is_inverted_tile(child.code) else "normal"
        print(f"{child.code:<9} | {kind:<8} | {lat:>10.5f} | {lon:>11.5f} | {located}")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
