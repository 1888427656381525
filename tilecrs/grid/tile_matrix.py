"""
Tile Matrix Dimensions

Tile counts at one zoom level and the integer tile address type.
"""

from dataclasses import dataclass
from typing import NamedTuple

from tilecrs.core.exceptions import InvalidArgumentError


class TileCoordinate(NamedTuple):
    """Discrete tile address within a tile matrix"""

    column: int
    row: int


@dataclass(frozen=True)
class TileMatrixDimensions:
    """
    Number of tile columns (width) and rows (height) at a zoom level

    Examples:
        >>> dims = TileMatrixDimensions(9, 7)
        >>> dims.tile_count
        63
        >>> dims.contains(8, 6), dims.contains(9, 0)
        (True, False)
    """

    width: int
    height: int

    def __post_init__(self):
        if self.width is None or self.width < 1:
            raise InvalidArgumentError(f"Width must be 1 or greater, got {self.width}")

        if self.height is None or self.height < 1:
            raise InvalidArgumentError(f"Height must be 1 or greater, got {self.height}")

    @property
    def tile_count(self) -> int:
        return self.width * self.height

    def contains(self, column: int, row: int) -> bool:
        """True if (column, row) addresses a tile of this matrix"""
        return 0 <= column < self.width and 0 <= row < self.height
