"""
TileCrs Exceptions

Exception hierarchy for error handling.
"""


class TileCrsError(Exception):
    """Base exception for TileCrs"""

    pass


class InvalidArgumentError(TileCrsError, ValueError):
    """Missing or malformed argument"""

    pass


class CrsMismatchError(InvalidArgumentError):
    """Coordinate is expressed in a different coordinate reference system"""

    pass


class OutOfBoundsError(InvalidArgumentError):
    """Coordinate has no tile in the requested grid"""

    pass


class UnsupportedCrsError(TileCrsError):
    """No profile is registered for the coordinate reference system"""

    pass
