"""
Bounding Box

Immutable axis-aligned rectangle used for CRS domains and tile set extents.
"""

import math
from dataclasses import dataclass

from tilecrs.core.coordinate import Coordinate
from tilecrs.core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned rectangle (min_x, min_y, max_x, max_y)

    Containment here is inclusive on every edge. Tile lookups use the
    origin-aware rule in tilecrs.grid.bounds instead.

    Examples:
        >>> bbox = BoundingBox(-180.0, -90.0, 180.0, 90.0)
        >>> bbox.width, bbox.height
        (360.0, 180.0)
        >>> bbox.top_left
        Coordinate(x=-180.0, y=90.0)
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self):
        for name in ("min_x", "min_y", "max_x", "max_y"):
            value = getattr(self, name)
            if value is None or not math.isfinite(value):
                raise InvalidArgumentError(f"{name} must be a finite number, got {value!r}")

        if self.min_x > self.max_x:
            raise InvalidArgumentError("Min x cannot be greater than max x")

        if self.min_y > self.max_y:
            raise InvalidArgumentError("Min y cannot be greater than max y")

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Coordinate:
        return Coordinate((self.max_x + self.min_x) / 2.0, (self.max_y + self.min_y) / 2.0)

    @property
    def min(self) -> Coordinate:
        return Coordinate(self.min_x, self.min_y)

    @property
    def max(self) -> Coordinate:
        return Coordinate(self.max_x, self.max_y)

    @property
    def top_left(self) -> Coordinate:
        return Coordinate(self.min_x, self.max_y)

    @property
    def top_right(self) -> Coordinate:
        return self.max

    @property
    def bottom_left(self) -> Coordinate:
        return self.min

    @property
    def bottom_right(self) -> Coordinate:
        return Coordinate(self.max_x, self.min_y)

    def contains(self, coordinate: Coordinate) -> bool:
        """Inclusive point-in-rectangle test"""
        return (
            self.min_x <= coordinate.x <= self.max_x
            and self.min_y <= coordinate.y <= self.max_y
        )

    def intersects(self, other: "BoundingBox") -> bool:
        """True if the two rectangles overlap or touch"""
        return (
            self.min_x <= other.max_x
            and self.max_x >= other.min_x
            and self.min_y <= other.max_y
            and self.max_y >= other.min_y
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def __str__(self) -> str:
        return f"({self.min_x}, {self.min_y}, {self.max_x}, {self.max_y})"
