"""
Spatial query utilities over a tile matrix

Supports:
- Tile footprints (bounding box of one tile)
- Tiles covering a bounding box
- GeoJSON / shapely geometry queries
"""

import json
import math
from pathlib import Path
from typing import Union

from shapely.geometry import box, shape
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from tilecrs.core.exceptions import InvalidArgumentError
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.grid.bounds import bounds_corner
from tilecrs.grid.tile_matrix import TileCoordinate, TileMatrixDimensions
from tilecrs.grid.tile_origin import TileOrigin
from tilecrs.profiles.base import (
    TILE_FRACTION_PRECISION,
    CrsProfile,
    round_half_up,
    tile_crs_size,
    tile_index,
)


def tile_bounds(
    profile: CrsProfile,
    column: int,
    row: int,
    bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
) -> BoundingBox:
    """
    Get the CRS footprint of a tile

    Args:
        profile: CRS profile of the tile matrix
        column: Tile column
        row: Tile row
        bounds: Extent covered by the tile matrix
        dimensions: Tile matrix dimensions at the zoom level
        origin: Corner of the matrix holding tile (0, 0)

    Returns:
        Bounding box of the tile in the profile's CRS

    Examples:
        >>> from tilecrs.profiles import GlobalGeodeticCrsProfile
        >>> profile = GlobalGeodeticCrsProfile()
        >>> str(tile_bounds(profile, 1, 0, profile.bounds, TileMatrixDimensions(2, 1), TileOrigin.UPPER_LEFT))
        '(0.0, -90.0, 180.0, 90.0)'
    """
    near = profile.tile_to_crs_coordinate(column, row, bounds, dimensions, origin)
    far = profile.tile_to_crs_coordinate(column + 1, row + 1, bounds, dimensions, origin)

    return BoundingBox(
        min(near.x, far.x),
        min(near.y, far.y),
        max(near.x, far.x),
        max(near.y, far.y),
    )


def tiles_in_bounds(
    profile: CrsProfile,
    query: BoundingBox,
    bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
) -> list[TileCoordinate]:
    """
    Get all tiles that overlap a bounding box

    Tiles that only touch the query along an edge are not included, unless the
    query itself has no width or height.

    Args:
        profile: CRS profile of the tile matrix
        query: Area of interest in the profile's CRS
        bounds: Extent covered by the tile matrix
        dimensions: Tile matrix dimensions at the zoom level
        origin: Corner of the matrix holding tile (0, 0)

    Returns:
        Tile coordinates ordered by row, then column

    Examples:
        >>> from tilecrs.profiles import GlobalGeodeticCrsProfile
        >>> profile = GlobalGeodeticCrsProfile()
        >>> tiles_in_bounds(profile, BoundingBox(-10.0, -10.0, 10.0, 10.0), profile.bounds,
        ...                 TileMatrixDimensions(2, 1), TileOrigin.UPPER_LEFT)
        [TileCoordinate(column=0, row=0), TileCoordinate(column=1, row=0)]
    """
    if profile is None:
        raise InvalidArgumentError("Profile may not be null")

    if query is None:
        raise InvalidArgumentError("Query bounds may not be null")

    if bounds is None:
        raise InvalidArgumentError("Bounds may not be null")

    if dimensions is None:
        raise InvalidArgumentError("Tile matrix dimensions may not be null")

    if origin is None:
        raise InvalidArgumentError("Origin may not be null")

    if not query.intersects(bounds):
        return []

    # Clip to the tile matrix extent
    clipped = BoundingBox(
        max(query.min_x, bounds.min_x),
        max(query.min_y, bounds.min_y),
        min(query.max_x, bounds.max_x),
        min(query.max_y, bounds.max_y),
    )

    # A query with extent that only touches the matrix edge overlaps no tile
    if (query.width > 0 and clipped.width == 0) or (query.height > 0 and clipped.height == 0):
        return []

    corner = bounds_corner(bounds, origin)
    tile_width, tile_height = tile_crs_size(bounds, dimensions)

    columns = _index_range(
        abs(clipped.min_x - corner.x), abs(clipped.max_x - corner.x), tile_width, dimensions.width
    )
    rows = _index_range(
        abs(clipped.min_y - corner.y), abs(clipped.max_y - corner.y), tile_height, dimensions.height
    )

    return [TileCoordinate(column, row) for row in rows for column in columns]


def query_tiles_by_geometry(
    profile: CrsProfile,
    geometry: Union[dict, BaseGeometry, str, Path],
    bounds: BoundingBox,
    dimensions: TileMatrixDimensions,
    origin: TileOrigin,
) -> list[TileCoordinate]:
    """
    Find tiles that intersect with a geometry

    Args:
        profile: CRS profile of the tile matrix
        geometry: GeoJSON dict, shapely geometry, or path to a GeoJSON file,
            in the profile's CRS
        bounds: Extent covered by the tile matrix
        dimensions: Tile matrix dimensions at the zoom level
        origin: Corner of the matrix holding tile (0, 0)

    Returns:
        Tile coordinates ordered by row, then column

    Examples:
        >>> from tilecrs.profiles import GlobalGeodeticCrsProfile
        >>> geojson = {
        ...     "type": "Polygon",
        ...     "coordinates": [[[126.9, 37.5], [127.1, 37.5], [127.1, 37.6], [126.9, 37.6], [126.9, 37.5]]]
        ... }
        >>> profile = GlobalGeodeticCrsProfile()
        >>> query_tiles_by_geometry(profile, geojson, profile.bounds, TileMatrixDimensions(2, 1), TileOrigin.UPPER_LEFT)
        [TileCoordinate(column=1, row=0)]
    """
    geom = _parse_geometry(geometry)
    if geom.is_empty:
        return []

    candidates = tiles_in_bounds(profile, BoundingBox(*geom.bounds), bounds, dimensions, origin)

    intersecting_tiles = []
    for tile in candidates:
        footprint = tile_bounds(profile, tile.column, tile.row, bounds, dimensions, origin)
        if geom.intersects(box(*footprint.to_tuple())):
            intersecting_tiles.append(tile)

    return intersecting_tiles


def geometry_to_bbox(geometry: Union[dict, BaseGeometry, str, Path]) -> BoundingBox:
    """
    Get bounding box from geometry

    Examples:
        >>> geojson = {"type": "Point", "coordinates": [126.9, 37.5]}
        >>> str(geometry_to_bbox(geojson))
        '(126.9, 37.5, 126.9, 37.5)'
    """
    return BoundingBox(*_parse_geometry(geometry).bounds)


def _index_range(near: float, far: float, tile_size: float, count: int) -> range:
    """Indices of tiles overlapping the distance interval [near, far] from the origin corner"""
    low, high = min(near, far), max(near, far)

    first = tile_index(low, tile_size)
    if high == low:
        last = first
    else:
        last = int(math.ceil(round_half_up(high / tile_size, TILE_FRACTION_PRECISION))) - 1

    first = min(max(first, 0), count - 1)
    last = min(max(last, first), count - 1)
    return range(first, last + 1)


def _parse_geometry(geometry: Union[dict, BaseGeometry, str, Path]) -> BaseGeometry:
    """
    Parse geometry from various input formats

    Args:
        geometry: GeoJSON dict, Shapely geometry, or path to GeoJSON file

    Returns:
        Shapely geometry object
    """
    if geometry is None:
        raise InvalidArgumentError("Geometry may not be null")

    # Already a Shapely geometry
    if isinstance(geometry, BaseGeometry):
        return geometry

    # Path to GeoJSON file
    if isinstance(geometry, (str, Path)):
        path = Path(geometry)
        if not path.exists():
            raise FileNotFoundError(f"GeoJSON file not found: {geometry}")
        with open(path) as f:
            geojson = json.load(f)
        return _geojson_to_geometry(geojson)

    # GeoJSON dict
    if isinstance(geometry, dict):
        return _geojson_to_geometry(geometry)

    raise TypeError(f"Unsupported geometry type: {type(geometry)}")


def _geojson_to_geometry(geojson: dict) -> BaseGeometry:
    """
    Convert GeoJSON dict to Shapely geometry

    Handles FeatureCollection, Feature and raw geometry types.
    """
    if geojson.get("type") == "FeatureCollection":
        features = geojson.get("features", [])
        if not features:
            raise InvalidArgumentError("Empty FeatureCollection")
        if len(features) == 1:
            return shape(features[0]["geometry"])
        return unary_union([shape(f["geometry"]) for f in features])

    if geojson.get("type") == "Feature":
        return shape(geojson["geometry"])

    return shape(geojson)
