"""
Tile Schemes

Tile matrix dimensions for each zoom level of a tile set.
"""

import math

from tilecrs.core.exceptions import InvalidArgumentError
from tilecrs.grid.tile_matrix import TileMatrixDimensions
from tilecrs.grid.tile_origin import TileOrigin

# GeoPackage stores tile_column / tile_row as signed 32-bit integers
MAX_TILE_INDEX = 2**31 - 1


class ZoomTimesTwo:
    """
    Tile scheme whose matrix doubles in both directions at each zoom level

    Examples:
        >>> scheme = ZoomTimesTwo(0, 20, 2, 1)  # EPSG:4326 style, 2x1 at zoom 0
        >>> scheme.dimensions(3)
        TileMatrixDimensions(width=16, height=8)
    """

    def __init__(
        self,
        minimum_zoom_level: int,
        maximum_zoom_level: int,
        base_width: int,
        base_height: int,
        origin: TileOrigin = TileOrigin.UPPER_LEFT,
    ):
        """
        Initialize tile scheme

        Args:
            minimum_zoom_level: Lowest zoom level (matrix is base_width x base_height)
            maximum_zoom_level: Highest zoom level
            base_width: Tile columns at the minimum zoom level
            base_height: Tile rows at the minimum zoom level
            origin: Tile origin used by tile sets built on this scheme
        """
        if minimum_zoom_level < 0:
            raise InvalidArgumentError("Minimum zoom level must be at least 0")

        if maximum_zoom_level < 0:
            raise InvalidArgumentError("Maximum zoom level must be at least 0")

        if base_width < 1:
            raise InvalidArgumentError("The base width must be greater than 0")

        if base_height < 1:
            raise InvalidArgumentError("The base height must be greater than 0")

        if origin is None:
            raise InvalidArgumentError("Tile origin may not be null")

        if minimum_zoom_level > maximum_zoom_level:
            raise InvalidArgumentError("Minimum zoom level must be less than or equal to the maximum")

        levels = maximum_zoom_level - minimum_zoom_level
        if base_width * math.pow(2.0, levels) - 1 > MAX_TILE_INDEX:
            raise InvalidArgumentError(
                "This combination of base width and zoom range overflows tile numbering"
            )

        if base_height * math.pow(2.0, levels) - 1 > MAX_TILE_INDEX:
            raise InvalidArgumentError(
                "This combination of base height and zoom range overflows tile numbering"
            )

        self.minimum_zoom_level = minimum_zoom_level
        self.maximum_zoom_level = maximum_zoom_level
        self.origin = origin
        self._dimensions = [
            TileMatrixDimensions(base_width * 2**level, base_height * 2**level)
            for level in range(levels + 1)
        ]

    def dimensions(self, zoom_level: int) -> TileMatrixDimensions:
        """
        Tile matrix dimensions at a zoom level

        Raises:
            InvalidArgumentError: If zoom_level is outside the scheme's range
        """
        if not self.minimum_zoom_level <= zoom_level <= self.maximum_zoom_level:
            raise InvalidArgumentError(
                f"Zoom level must be in the range [{self.minimum_zoom_level}, {self.maximum_zoom_level}]"
            )
        return self._dimensions[zoom_level - self.minimum_zoom_level]

    def __repr__(self) -> str:
        return (
            f"ZoomTimesTwo(zoom={self.minimum_zoom_level}..{self.maximum_zoom_level}, "
            f"base={self._dimensions[0].width}x{self._dimensions[0].height}, "
            f"origin={self.origin.name})"
        )
