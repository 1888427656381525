"""
TileCrs Grid Module

Bounding boxes, tile origins and tile matrix geometry.
"""

from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.grid.bounds import bounds_corner, contains
from tilecrs.grid.scheme import ZoomTimesTwo
from tilecrs.grid.tile_matrix import TileCoordinate, TileMatrixDimensions
from tilecrs.grid.tile_origin import Horizontal, TileOrigin, Vertical

__all__ = [
    "BoundingBox",
    "Horizontal",
    "TileCoordinate",
    "TileMatrixDimensions",
    "TileOrigin",
    "Vertical",
    "ZoomTimesTwo",
    "bounds_corner",
    "contains",
]
