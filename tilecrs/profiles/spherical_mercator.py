"""
Spherical Mercator Profile

EPSG:3857 ("Web Mercator"), tiled directly in projected meters.
"""

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from tilecrs.core.coordinate import Coordinate, CoordinateReferenceSystem
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.profiles.base import ProportionalCrsProfile

# Datum's spheroid semi-major axis in meters
EARTH_EQUATORIAL_RADIUS = 6378137.0

EARTH_EQUATORIAL_CIRCUMFERENCE = 2.0 * math.pi * EARTH_EQUATORIAL_RADIUS

_HALF_WORLD = math.pi * EARTH_EQUATORIAL_RADIUS

PSEUDO_MERCATOR_WKT = (
    'PROJCS["WGS 84 / Pseudo-Mercator",GEOGCS["WGS 84",DATUM["WGS_1984",'
    'SPHEROID["WGS 84",6378137,298.257223563,AUTHORITY["EPSG","7030"]],'
    'AUTHORITY["EPSG","6326"]],PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],'
    'UNIT["degree",0.0174532925199433,AUTHORITY["EPSG","9122"]],'
    'AUTHORITY["EPSG","4326"]],PROJECTION["Mercator_1SP"],'
    'PARAMETER["central_meridian",0],PARAMETER["scale_factor",1],'
    'PARAMETER["false_easting",0],PARAMETER["false_northing",0],'
    'UNIT["metre",1,AUTHORITY["EPSG","9001"]],AXIS["X",EAST],AXIS["Y",NORTH],'
    'AUTHORITY["EPSG","3857"]]'
)


@dataclass(frozen=True)
class SphericalMercatorCrsProfile(ProportionalCrsProfile):
    """
    Spherical Mercator (EPSG:3857) profile

    The earth is modeled as a sphere of radius 6378137m. Bounds are the
    square (±πR, ±πR), about ±20037508.34m on both axes.

    Examples:
        >>> profile = SphericalMercatorCrsProfile()
        >>> profile.to_global_geodetic(Coordinate(0.0, 0.0))
        Coordinate(x=0.0, y=0.0)
    """

    coordinate_reference_system: CoordinateReferenceSystem = CoordinateReferenceSystem("EPSG", 3857)
    bounds: BoundingBox = BoundingBox(-_HALF_WORLD, -_HALF_WORLD, _HALF_WORLD, _HALF_WORLD)
    precision: int = 2

    name: str = "Web Mercator"
    description: str = (
        "Projection used in many popular web mapping applications "
        "(Google/Bing/OpenStreetMap/etc). Sometimes known as EPSG:900913."
    )
    well_known_text: str = field(default=PSEUDO_MERCATOR_WKT, repr=False)

    def to_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """
        Convert projected meters to (longitude, latitude) degrees

        Uses the inverse spherical Mercator formula (USGS PP 1395, eq. 7-4):
        latitude = π/2 - 2·atan(exp(-y/R))
        """
        return Coordinate(
            math.degrees(coordinate.x / EARTH_EQUATORIAL_RADIUS),
            math.degrees(math.pi / 2 - 2 * math.atan(math.exp(-coordinate.y / EARTH_EQUATORIAL_RADIUS))),
        )

    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """Convert (longitude, latitude) degrees to projected meters"""
        latitude = math.radians(coordinate.y)
        return Coordinate(
            EARTH_EQUATORIAL_RADIUS * math.radians(coordinate.x),
            EARTH_EQUATORIAL_RADIUS * math.log(math.tan(math.pi / 4 + latitude / 2)),
        )

    def _to_global_geodetic_array(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        lons = np.degrees(xs / EARTH_EQUATORIAL_RADIUS)
        lats = np.degrees(np.pi / 2 - 2 * np.arctan(np.exp(-ys / EARTH_EQUATORIAL_RADIUS)))
        return lons, lats
