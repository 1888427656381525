"""
Origin-aware bounds utilities

These two functions decide which tile owns a coordinate lying on a shared
edge. Every CRS profile goes through them.
"""

from tilecrs.core.coordinate import Coordinate
from tilecrs.core.exceptions import InvalidArgumentError
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.grid.tile_origin import Horizontal, TileOrigin, Vertical


def contains(bounds: BoundingBox, coordinate: Coordinate, origin: TileOrigin) -> bool:
    """
    Check that a coordinate is inside bounds without lying on the edges
    opposite the tile origin

    The two edges meeting at the origin's corner are inclusive; the other
    two are exclusive.

    Args:
        bounds: Area being tested against
        coordinate: Point being tested
        origin: Tile origin selecting the inclusive edges

    Returns:
        True if the coordinate is strictly inside the bounds or lies on an
        edge adjacent to the origin corner

    Examples:
        >>> world = BoundingBox(-180.0, -90.0, 180.0, 90.0)
        >>> contains(world, Coordinate(-180.0, 90.0), TileOrigin.UPPER_LEFT)
        True
        >>> contains(world, Coordinate(180.0, 0.0), TileOrigin.UPPER_LEFT)
        False
    """
    if bounds is None:
        raise InvalidArgumentError("Bounding box may not be null")

    if coordinate is None:
        raise InvalidArgumentError("Coordinate may not be null")

    if origin is None:
        raise InvalidArgumentError("Origin may not be null")

    far_x = bounds.max_x if origin.horizontal is Horizontal.LEFT else bounds.min_x
    far_y = bounds.min_y if origin.vertical is Vertical.UPPER else bounds.max_y

    on_far_edge = coordinate.x == far_x or coordinate.y == far_y

    return not on_far_edge and bounds.contains(coordinate)


def bounds_corner(bounds: BoundingBox, origin: TileOrigin) -> Coordinate:
    """
    Get the corner of a bounding box that corresponds to the tile origin

    Examples:
        >>> bounds_corner(BoundingBox(0.0, 0.0, 10.0, 5.0), TileOrigin.UPPER_LEFT)
        Coordinate(x=0.0, y=5.0)
    """
    if bounds is None:
        raise InvalidArgumentError("Bounding box may not be null")

    if origin is None:
        raise InvalidArgumentError("Origin may not be null")

    x = bounds.min_x if origin.horizontal is Horizontal.LEFT else bounds.max_x
    y = bounds.max_y if origin.vertical is Vertical.UPPER else bounds.min_y
    return Coordinate(x, y)
