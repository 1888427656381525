"""
TileCrs Core Module

Exceptions and coordinate value types.
"""

from tilecrs.core.coordinate import Coordinate, CoordinateReferenceSystem, CrsCoordinate
from tilecrs.core.exceptions import (
    CrsMismatchError,
    InvalidArgumentError,
    OutOfBoundsError,
    TileCrsError,
    UnsupportedCrsError,
)

__all__ = [
    # Value types
    "Coordinate",
    "CoordinateReferenceSystem",
    "CrsCoordinate",
    # Exceptions
    "CrsMismatchError",
    "InvalidArgumentError",
    "OutOfBoundsError",
    "TileCrsError",
    "UnsupportedCrsError",
]
