"""
Conversion CLI commands

to-tile, to-crs and to-geodetic.
"""

import argparse
import logging

from tilecrs.catalog.profile_factory import create_profile
from tilecrs.core.coordinate import Coordinate, CoordinateReferenceSystem, CrsCoordinate
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.grid.scheme import ZoomTimesTwo
from tilecrs.grid.tile_matrix import TileMatrixDimensions
from tilecrs.grid.tile_origin import TileOrigin
from tilecrs.profiles.base import CrsProfile

logger = logging.getLogger(__name__)

GEODETIC_CRS = CoordinateReferenceSystem("EPSG", 4326)


def _grid(args: argparse.Namespace, profile: CrsProfile):
    """Resolve bounds, dimensions and origin from the grid options"""
    origin = TileOrigin.from_name(args.origin)
    bounds = BoundingBox(*args.bounds) if args.bounds else profile.bounds

    if args.zoom is not None:
        base_width = args.base_width
        if base_width is None:
            base_width = 2 if profile.coordinate_reference_system == GEODETIC_CRS else 1
        scheme = ZoomTimesTwo(0, args.zoom, base_width, args.base_height, origin)
        dimensions = scheme.dimensions(args.zoom)
    else:
        dimensions = TileMatrixDimensions(args.width, args.height)

    logger.debug("Grid: bounds=%s dimensions=%s origin=%s", bounds, dimensions, origin.name)
    return bounds, dimensions, origin


def run_to_tile(args: argparse.Namespace) -> None:
    """Run the to-tile command"""
    crs = CoordinateReferenceSystem.parse(args.crs)
    profile = create_profile(crs)
    bounds, dimensions, origin = _grid(args, profile)

    tile = profile.crs_to_tile_coordinate(CrsCoordinate(args.x, args.y, crs), bounds, dimensions, origin)
    print(f"{tile.column} {tile.row}")


def run_to_crs(args: argparse.Namespace) -> None:
    """Run the to-crs command"""
    profile = create_profile(CoordinateReferenceSystem.parse(args.crs))
    bounds, dimensions, origin = _grid(args, profile)

    coordinate = profile.tile_to_crs_coordinate(args.column, args.row, bounds, dimensions, origin)
    print(f"{coordinate.x:.{profile.precision}f} {coordinate.y:.{profile.precision}f}")


def run_to_geodetic(args: argparse.Namespace) -> None:
    """Run the to-geodetic command"""
    profile = create_profile(CoordinateReferenceSystem.parse(args.crs))

    geodetic = profile.to_global_geodetic(Coordinate(args.x, args.y))
    print(f"{geodetic.x:.9f} {geodetic.y:.9f}")
