"""
Global Geodetic Profile

EPSG:4326 (WGS 84 latitude/longitude), tiled directly in degrees.
"""

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from tilecrs.core.coordinate import Coordinate, CoordinateReferenceSystem
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.profiles.base import ProportionalCrsProfile

WGS84_GEODETIC_WKT = (
    'GEOGCS["WGS 84",DATUM["WGS_1984",SPHEROID["WGS 84",6378137,298.257223563,'
    'AUTHORITY["EPSG","7030"]],AUTHORITY["EPSG","6326"]],PRIMEM["Greenwich",0,'
    'AUTHORITY["EPSG","8901"]],UNIT["degree",0.01745329251994328,'
    'AUTHORITY["EPSG","9122"]],AUTHORITY["EPSG","4326"]]'
)


@dataclass(frozen=True)
class GlobalGeodeticCrsProfile(ProportionalCrsProfile):
    """
    Global Geodetic (EPSG:4326) profile

    Coordinates are (longitude, latitude) in decimal degrees; the profile's
    bounds are the whole globe, (-180, -90, 180, 90).

    Examples:
        >>> profile = GlobalGeodeticCrsProfile()
        >>> str(profile.coordinate_reference_system)
        'EPSG:4326'
        >>> profile.precision
        7
    """

    coordinate_reference_system: CoordinateReferenceSystem = CoordinateReferenceSystem("EPSG", 4326)
    bounds: BoundingBox = BoundingBox(-180.0, -90.0, 180.0, 90.0)
    precision: int = 7

    name: str = "World Geodetic System (WGS) 1984"
    description: str = "World Geodetic System 1984"
    well_known_text: str = field(default=WGS84_GEODETIC_WKT, repr=False)

    def to_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        return Coordinate(coordinate.x, coordinate.y)

    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        return Coordinate(coordinate.x, coordinate.y)

    def _to_global_geodetic_array(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return xs.copy(), ys.copy()
