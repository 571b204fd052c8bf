"""Command-line entrypoint for geotiles."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from geotiles.config import LOG_LEVELS, LookupConfig, config_from_env
from geotiles.geo.tiling import is_inverted_tile
from geotiles.logging import setup_logging
from geotiles.lookup.errors import InvalidCodeError
from geotiles.lookup.tile_lookup import default_lookup
from geotiles.orchestrate.batch import SECTOR_LEVELS, generate_child_codes
from geotiles.schemas import (
    LocateRequest,
    LocateResponse,
    SectorResponse,
    SubTilesResponse,
    TileResponse,
)


def build_parser(config: LookupConfig | None = None) -> argparse.ArgumentParser:
    """Create and return the top-level CLI parser."""
    cfg = config or LookupConfig()
    parser = argparse.ArgumentParser(
        prog="geotiles",
        description="Geodesic icosahedral tile lookup.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s 0.1.0",
    )
    parser.add_argument("--log-level", type=str.upper, choices=LOG_LEVELS, default=cfg.log_level)

    subparsers = parser.add_subparsers(dest="command")

    corners = subparsers.add_parser("corners", help="Print the three corners of a tile code.")
    corners.add_argument("code")

    subtiles = subparsers.add_parser("subtiles", help="Print a tile and its nine children.")
    subtiles.add_argument("code")

    locate = subparsers.add_parser("locate", help="Find the tile code containing a point.")
    locate.add_argument("--lat", type=float, required=True)
    locate.add_argument("--lon", type=float, required=True)
    locate.add_argument("--depth", type=int, default=cfg.default_depth)

    sector = subparsers.add_parser("sector", help="List every descendant code of a sector.")
    sector.add_argument("code")
    sector.add_argument("--levels", type=int, default=SECTOR_LEVELS)

    return parser


def _tile_response(code: str) -> TileResponse:
    tile = default_lookup().tile(code)
    return TileResponse.from_contract(tile, inverted=is_inverted_tile(tile.code))


def _run(args: argparse.Namespace, config: LookupConfig) -> str | None:
    lookup = default_lookup()

    if args.command == "corners":
        return _tile_response(args.code).model_dump_json()

    if args.command == "subtiles":
        parent = _tile_response(args.code)
        children = [
            TileResponse.from_contract(child, inverted=is_inverted_tile(child.code))
            for child in lookup.sub_tiles(parent.code)
        ]
        return SubTilesResponse(parent=parent, children=children).model_dump_json()

    if args.command == "locate":
        request = LocateRequest(lat=args.lat, lon=args.lon, depth=args.depth)
        if request.depth > config.max_depth:
            raise ValueError(f"depth must be <= {config.max_depth}")
        code = lookup.location_to_name(request.lat, request.lon, request.depth)
        return LocateResponse(
            lat=request.lat,
            lon=request.lon,
            depth=request.depth,
            code=code,
            resolved_depth=None if code is None else len(code) - 1,
        ).model_dump_json()

    if args.command == "sector":
        lookup.name_to_facet(args.code)
        sector = args.code[0].upper() + args.code[1:]
        if len(sector) - 1 + args.levels > config.max_depth:
            raise ValueError(f"depth must be <= {config.max_depth}")
        codes = generate_child_codes(sector, args.levels, max_codes=config.max_sector_codes)
        return SectorResponse(
            sector=sector, levels=args.levels, total=len(codes), codes=codes
        ).model_dump_json()

    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the CLI application."""
    config = config_from_env()
    parser = build_parser(config)
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    try:
        output = _run(args, config)
    except InvalidCodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except ValidationError as exc:
        print(f"error: invalid arguments: {exc.error_count()} validation error(s)", file=sys.stderr)
        return 2
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if output is not None:
        print(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
