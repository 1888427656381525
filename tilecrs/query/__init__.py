"""
TileCrs Query Module

Spatial lookups of tiles by bounding box and geometry.
"""

from tilecrs.query.spatial import (
    geometry_to_bbox,
    query_tiles_by_geometry,
    tile_bounds,
    tiles_in_bounds,
)

__all__ = [
    "geometry_to_bbox",
    "query_tiles_by_geometry",
    "tile_bounds",
    "tiles_in_bounds",
]
