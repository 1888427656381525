"""
Tile Origin

Which corner of a tile matrix holds tile (0, 0).
"""

from enum import Enum

from tilecrs.core.exceptions import InvalidArgumentError


class Horizontal(Enum):
    """Horizontal half of a tile origin"""

    LEFT = 0
    RIGHT = 1

    @property
    def direction(self) -> int:
        """Sign of x as column numbers grow (+1 eastward, -1 westward)"""
        return 1 if self is Horizontal.LEFT else -1


class Vertical(Enum):
    """Vertical half of a tile origin"""

    LOWER = 0
    UPPER = 1

    @property
    def direction(self) -> int:
        """Sign of y as row numbers grow (+1 northward, -1 southward)"""
        return 1 if self is Vertical.LOWER else -1


class TileOrigin(Enum):
    """
    Tile matrix origin, decomposed into a horizontal and a vertical flag

    Examples:
        >>> TileOrigin.UPPER_LEFT.horizontal, TileOrigin.UPPER_LEFT.vertical
        (<Horizontal.LEFT: 0>, <Vertical.UPPER: 1>)
        >>> TileOrigin.from_name("lower-right") is TileOrigin.LOWER_RIGHT
        True
    """

    LOWER_LEFT = (Horizontal.LEFT, Vertical.LOWER)
    LOWER_RIGHT = (Horizontal.RIGHT, Vertical.LOWER)
    UPPER_LEFT = (Horizontal.LEFT, Vertical.UPPER)
    UPPER_RIGHT = (Horizontal.RIGHT, Vertical.UPPER)

    @property
    def horizontal(self) -> Horizontal:
        return self.value[0]

    @property
    def vertical(self) -> Vertical:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "TileOrigin":
        """
        Look up an origin by name

        Accepts "UpperLeft", "upper-left", "upper_left" and similar spellings.

        Raises:
            InvalidArgumentError: If the name is not an origin
        """
        key = (name or "").replace("-", "").replace("_", "").replace(" ", "").upper()
        for origin in cls:
            if origin.name.replace("_", "") == key:
                return origin
        raise InvalidArgumentError(f"Unrecognized tile origin '{name}'")

    def transform(self, to_origin: "TileOrigin", column: int, row: int, dimensions) -> tuple[int, int]:
        """
        Re-express a tile coordinate relative to a different origin

        Args:
            to_origin: Origin to convert the coordinate to
            column: Column relative to this origin
            row: Row relative to this origin
            dimensions: TileMatrixDimensions of the zoom level

        Returns:
            (column, row) relative to to_origin

        Examples:
            >>> from tilecrs.grid.tile_matrix import TileMatrixDimensions
            >>> dims = TileMatrixDimensions(4, 3)
            >>> TileOrigin.UPPER_LEFT.transform(TileOrigin.LOWER_LEFT, 1, 0, dims)
            (1, 2)
        """
        if to_origin is None:
            raise InvalidArgumentError("Requested tile origin may not be null")

        if dimensions is None:
            raise InvalidArgumentError("Tile matrix dimensions may not be null")

        return (
            self.transform_horizontal(to_origin, column, dimensions.width),
            self.transform_vertical(to_origin, row, dimensions.height),
        )

    def transform_horizontal(self, to_origin: "TileOrigin", column: int, matrix_width: int) -> int:
        return _flip(self.horizontal.value, to_origin.horizontal.value, column, matrix_width)

    def transform_vertical(self, to_origin: "TileOrigin", row: int, matrix_height: int) -> int:
        return _flip(self.vertical.value, to_origin.vertical.value, row, matrix_height)


def _flip(from_flag: int, to_flag: int, index: int, size: int) -> int:
    """Mirror index within [0, size) when the axis flags differ"""
    return index + (from_flag ^ to_flag) * ((size - 1) - 2 * index)
