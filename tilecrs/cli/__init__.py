"""
TileCrs CLI Entry Points

Provides command-line interface for:
- profiles: List supported coordinate reference systems
- to-tile: Convert a CRS coordinate to a tile address
- to-crs: Convert a tile address to a CRS coordinate
- to-geodetic: Convert a CRS coordinate to longitude/latitude
"""

import argparse
import logging
import sys


def _add_grid_arguments(parser: argparse.ArgumentParser) -> None:
    """Tile matrix options shared by to-tile and to-crs"""
    parser.add_argument(
        "--origin", default="upper-left", help="Tile origin (default: upper-left)"
    )
    parser.add_argument("--width", type=int, default=1, help="Tile matrix width (default: 1)")
    parser.add_argument("--height", type=int, default=1, help="Tile matrix height (default: 1)")
    parser.add_argument(
        "--zoom",
        type=int,
        default=None,
        help="Zoom level; derives width/height by doubling the base size",
    )
    parser.add_argument(
        "--base-width",
        type=int,
        default=None,
        help="Zoom level 0 width (default: 2 for EPSG:4326, else 1)",
    )
    parser.add_argument(
        "--base-height", type=int, default=1, help="Zoom level 0 height (default: 1)"
    )
    parser.add_argument(
        "--bounds",
        type=float,
        nargs=4,
        metavar=("MINX", "MINY", "MAXX", "MAXY"),
        default=None,
        help="Tile matrix extent (default: CRS bounds)",
    )


def main(argv=None):
    """Main CLI entry point"""
    parser = argparse.ArgumentParser(
        description="TileCrs - CRS coordinate / tile address conversion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tilecrs profiles                                         List supported CRSs
  tilecrs to-tile EPSG:3857 -8238310.24 4970241.33 --zoom 2
  tilecrs to-crs EPSG:4326 3 1 --width 9 --height 7 --origin lower-left
  tilecrs to-geodetic EPSG:3395 1113194.91 1111475.10
        """,
    )

    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Profiles command
    subparsers.add_parser("profiles", help="List supported coordinate reference systems")

    # To-tile command
    to_tile_parser = subparsers.add_parser("to-tile", help="Convert a CRS coordinate to a tile")
    to_tile_parser.add_argument("crs", help="Coordinate reference system, e.g. EPSG:3857")
    to_tile_parser.add_argument("x", type=float, help="X coordinate")
    to_tile_parser.add_argument("y", type=float, help="Y coordinate")
    _add_grid_arguments(to_tile_parser)

    # To-crs command
    to_crs_parser = subparsers.add_parser("to-crs", help="Convert a tile to a CRS coordinate")
    to_crs_parser.add_argument("crs", help="Coordinate reference system, e.g. EPSG:3857")
    to_crs_parser.add_argument("column", type=int, help="Tile column")
    to_crs_parser.add_argument("row", type=int, help="Tile row")
    _add_grid_arguments(to_crs_parser)

    # To-geodetic command
    to_geodetic_parser = subparsers.add_parser(
        "to-geodetic", help="Convert a CRS coordinate to longitude/latitude"
    )
    to_geodetic_parser.add_argument("crs", help="Coordinate reference system, e.g. EPSG:3395")
    to_geodetic_parser.add_argument("x", type=float, help="X coordinate")
    to_geodetic_parser.add_argument("y", type=float, help="Y coordinate")

    args = parser.parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level, format="%(message)s" if not args.verbose else "%(levelname)s: %(message)s"
    )

    from tilecrs.core.exceptions import TileCrsError

    try:
        if args.command == "profiles":
            from tilecrs.cli.info import run_profiles

            run_profiles(args)
        elif args.command == "to-tile":
            from tilecrs.cli.convert import run_to_tile

            run_to_tile(args)
        elif args.command == "to-crs":
            from tilecrs.cli.convert import run_to_crs

            run_to_crs(args)
        elif args.command == "to-geodetic":
            from tilecrs.cli.convert import run_to_geodetic

            run_to_geodetic(args)
        else:
            parser.print_help()
            sys.exit(1)
    except TileCrsError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
