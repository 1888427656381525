"""
TileCrs - Coordinate reference system tile addressing

Converts between CRS coordinates and (column, row) tile addresses for
Global Geodetic (EPSG:4326), Spherical Mercator (EPSG:3857) and Ellipsoidal
Mercator (EPSG:3395) tile matrices, under any of the four tile origins.

Quick Start:
    >>> import tilecrs as tc
    >>>
    >>> profile = tc.create_profile("EPSG", 3857)
    >>> dims = tc.TileMatrixDimensions(4, 4)
    >>> point = tc.CrsCoordinate.create(-8238310.24, 4970241.33, "EPSG", 3857)
    >>> profile.crs_to_tile_coordinate(point, profile.bounds, dims, tc.TileOrigin.UPPER_LEFT)
    TileCoordinate(column=1, row=1)
    >>>
    >>> # Tile corner back to CRS, then to longitude/latitude
    >>> corner = profile.tile_to_crs_coordinate(1, 1, profile.bounds, dims, tc.TileOrigin.UPPER_LEFT)
    >>> lon_lat = profile.to_global_geodetic(corner)  # about (-90.0, 66.51)
"""

from tilecrs.catalog import CrsProfileFactory, create_profile, get_factory
from tilecrs.core import (
    Coordinate,
    CoordinateReferenceSystem,
    CrsCoordinate,
    CrsMismatchError,
    InvalidArgumentError,
    OutOfBoundsError,
    TileCrsError,
    UnsupportedCrsError,
)
from tilecrs.grid import (
    BoundingBox,
    TileCoordinate,
    TileMatrixDimensions,
    TileOrigin,
    ZoomTimesTwo,
    bounds_corner,
    contains,
)
from tilecrs.profiles import (
    CrsProfile,
    EllipsoidalMercatorCrsProfile,
    GlobalGeodeticCrsProfile,
    SphericalMercatorCrsProfile,
    tile_crs_size,
)

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "Coordinate",
    "CoordinateReferenceSystem",
    "CrsCoordinate",
    "CrsMismatchError",
    "CrsProfile",
    "CrsProfileFactory",
    "EllipsoidalMercatorCrsProfile",
    "GlobalGeodeticCrsProfile",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "SphericalMercatorCrsProfile",
    "TileCoordinate",
    "TileCrsError",
    "TileMatrixDimensions",
    "TileOrigin",
    "UnsupportedCrsError",
    "ZoomTimesTwo",
    "__version__",
    "bounds_corner",
    "contains",
    "create_profile",
    "get_factory",
    "tile_crs_size",
]


# Lazy imports for spatial queries (avoids importing shapely at startup)
def __getattr__(name):
    if name in ("tile_bounds", "tiles_in_bounds", "query_tiles_by_geometry", "geometry_to_bbox"):
        import tilecrs.query.spatial

        return getattr(tilecrs.query.spatial, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
