"""
Coordinates and Coordinate Reference Systems

Value types shared by the tile grid and the CRS profiles.
"""

from dataclasses import dataclass

from tilecrs.core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Coordinate:
    """
    Plain 2D coordinate

    Attributes:
        x: Easting, or longitude in degrees
        y: Northing, or latitude in degrees
    """

    x: float
    y: float

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, eq=False)
class CoordinateReferenceSystem:
    """
    Coordinate reference system identity

    Two systems are equal when their identifiers match and their authorities
    match ignoring case ("epsg" == "EPSG").

    Examples:
        >>> CoordinateReferenceSystem("epsg", 4326) == CoordinateReferenceSystem("EPSG", 4326)
        True
        >>> str(CoordinateReferenceSystem.parse("EPSG:3857"))
        'EPSG:3857'
    """

    authority: str
    identifier: int

    def __post_init__(self):
        if not isinstance(self.authority, str) or not self.authority:
            raise InvalidArgumentError("Authority may not be null or empty")

        if isinstance(self.identifier, bool) or not isinstance(self.identifier, int):
            raise InvalidArgumentError(f"Identifier must be an integer, got {self.identifier!r}")

    @classmethod
    def parse(cls, text: str) -> "CoordinateReferenceSystem":
        """
        Parse an "AUTHORITY:IDENTIFIER" string

        Raises:
            InvalidArgumentError: If the text is not in that form
        """
        authority, sep, identifier = (text or "").strip().rpartition(":")
        if not sep or not authority:
            raise InvalidArgumentError(f"Invalid coordinate reference system '{text}'")
        try:
            return cls(authority, int(identifier))
        except ValueError as e:
            raise InvalidArgumentError(f"Invalid coordinate reference system '{text}': {e}") from e

    def __eq__(self, other) -> bool:
        if not isinstance(other, CoordinateReferenceSystem):
            return NotImplemented
        return (
            self.identifier == other.identifier
            and self.authority.upper() == other.authority.upper()
        )

    def __hash__(self) -> int:
        return hash((self.authority.upper(), self.identifier))

    def __str__(self) -> str:
        return f"{self.authority.upper()}:{self.identifier}"


@dataclass(frozen=True)
class CrsCoordinate(Coordinate):
    """
    Coordinate tagged with the reference system it is expressed in

    Examples:
        >>> point = CrsCoordinate.create(-8238310.24, 4970241.33, "EPSG", 3857)
        >>> str(point.coordinate_reference_system)
        'EPSG:3857'
    """

    coordinate_reference_system: CoordinateReferenceSystem = None

    def __post_init__(self):
        if self.coordinate_reference_system is None:
            raise InvalidArgumentError("Coordinate reference system may not be null")

    @classmethod
    def create(cls, x: float, y: float, authority: str, identifier: int) -> "CrsCoordinate":
        """Build a coordinate from a raw authority/identifier pair"""
        return cls(x, y, CoordinateReferenceSystem(authority, identifier))

    @property
    def coordinate(self) -> Coordinate:
        """The untagged (x, y) pair"""
        return Coordinate(self.x, self.y)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}) {self.coordinate_reference_system}"
