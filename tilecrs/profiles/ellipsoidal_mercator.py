"""
Ellipsoidal Mercator Profile

EPSG:3395 ("World Mercator") on the WGS 84 ellipsoid, tiled directly in
projected meters. Geodetic conversion uses the ellipsoidal inverse Mercator
mapping, solved for latitude by fixed-point iteration.
"""

import math
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from tilecrs.core.coordinate import Coordinate, CoordinateReferenceSystem, CrsCoordinate
from tilecrs.core.exceptions import InvalidArgumentError
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.grid.bounds import contains
from tilecrs.grid.tile_origin import TileOrigin
from tilecrs.profiles.base import ProportionalCrsProfile, round_bounds, round_coordinate

# WGS 84 spheroid semi-major axis (equatorial radius) in meters
UNSCALED_EARTH_EQUATORIAL_RADIUS = 6378137.0

# WGS 84 spheroid inverse flattening
INVERSE_FLATTENING = 298.257223563

FLATTENING = 1.0 / INVERSE_FLATTENING

# b = a - a/(1/f)
UNSCALED_EARTH_POLAR_RADIUS = UNSCALED_EARTH_EQUATORIAL_RADIUS - (
    UNSCALED_EARTH_EQUATORIAL_RADIUS / INVERSE_FLATTENING
)

# e = sqrt(f(2 - f))
ECCENTRICITY = math.sqrt(FLATTENING * (2 - FLATTENING))

# Latitude iteration stops once successive sin(latitude) estimates agree this closely
_CONVERGENCE_TOLERANCE = 1e-15
_MAX_ITERATIONS = 100

WORLD_MERCATOR_WKT = (
    'PROJCS["WGS 84 / World Mercator",GEOGCS["WGS 84",DATUM["WGS_1984",'
    'SPHEROID["WGS 84",6378137,298.257223563,AUTHORITY["EPSG","7030"]],'
    'AUTHORITY["EPSG","6326"]],PRIMEM["Greenwich",0,AUTHORITY["EPSG","8901"]],'
    'UNIT["degree",0.01745329251994328,AUTHORITY["EPSG","9122"]],'
    'AUTHORITY["EPSG","4326"]],UNIT["metre",1,AUTHORITY["EPSG","9001"]],'
    'PROJECTION["Mercator_1SP"],PARAMETER["central_meridian",0],'
    'PARAMETER["scale_factor",1],PARAMETER["false_easting",0],'
    'PARAMETER["false_northing",0],AUTHORITY["EPSG","3395"],'
    'AXIS["Easting",EAST],AXIS["Northing",NORTH]]'
)

WORLD_MERCATOR_CRS = CoordinateReferenceSystem("EPSG", 3395)


@dataclass(frozen=True)
class EllipsoidalMercatorCrsProfile(ProportionalCrsProfile):
    """
    Ellipsoidal Mercator (EPSG:3395) profile

    Bounds are the square (±πa, ±πa) so that the zoom level 0 tile is
    square. A radius scale factor other than 1.0 builds a scaled variant of the
    projection, which must be given its own coordinate reference system.

    Attributes:
        earth_equatorial_radius_scale_factor: Scale applied to the WGS 84
            semi-major axis
        coordinate_reference_system: CRS of this variant (EPSG:3395 by default)

    Examples:
        >>> profile = EllipsoidalMercatorCrsProfile()
        >>> geodetic = profile.to_global_geodetic(Coordinate(20037508.342789244, 0.0))
        >>> round(geodetic.x, 9), geodetic.y
        (180.0, 0.0)
    """

    earth_equatorial_radius_scale_factor: float = 1.0
    coordinate_reference_system: CoordinateReferenceSystem = WORLD_MERCATOR_CRS
    precision: int = 2

    name: str = "World Mercator"
    description: str = "World (Ellipsoidal) Mercator"
    well_known_text: str = field(default=WORLD_MERCATOR_WKT, repr=False)

    bounds: BoundingBox = field(init=False)

    def __post_init__(self):
        """Validate the radius scale factor and derive the world bounds"""
        scale = self.earth_equatorial_radius_scale_factor
        if scale is None or not math.isfinite(scale) or scale <= 0:
            raise InvalidArgumentError(f"Radius scale factor must be a positive number, got {scale!r}")

        if scale != 1.0 and self.coordinate_reference_system == WORLD_MERCATOR_CRS:
            raise InvalidArgumentError(
                "A scaled ellipsoidal Mercator profile needs its own coordinate reference system"
            )

        half_world = math.pi * self.scaled_earth_equatorial_radius
        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "bounds", BoundingBox(-half_world, -half_world, half_world, half_world))

    @property
    def scaled_earth_equatorial_radius(self) -> float:
        return UNSCALED_EARTH_EQUATORIAL_RADIUS * self.earth_equatorial_radius_scale_factor

    @property
    def earth_equatorial_circumference(self) -> float:
        return 2.0 * math.pi * self.scaled_earth_equatorial_radius

    def _contains(self, bounds: BoundingBox, coordinate: CrsCoordinate, origin: TileOrigin) -> bool:
        """
        Origin-aware containment on values rounded to the profile precision

        Meter coordinates that went through a geodetic round trip carry
        sub-centimetre noise at the world edges.
        """
        return contains(
            round_bounds(bounds, self.precision),
            round_coordinate(coordinate, self.precision),
            origin,
        )

    def to_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """
        Convert projected meters to (longitude, latitude) degrees

        Longitude is x/a. Latitude comes from the inverse mapping

            s(1)   = tanh(y/a)
            s(n+1) = tanh(y/a + e·atanh(e·s(n)))

        iterated until s converges; latitude = asin(s).
        """
        radius = self.scaled_earth_equatorial_radius
        return Coordinate(
            math.degrees(coordinate.x / radius),
            math.degrees(_inverse_latitude(coordinate.y / radius)),
        )

    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """
        Convert (longitude, latitude) degrees to projected meters

        y = a·atanh(sin φ) - a·e·atanh(e·sin φ)
        """
        radius = self.scaled_earth_equatorial_radius
        sin_latitude = math.sin(math.radians(coordinate.y))
        return Coordinate(
            radius * math.radians(coordinate.x),
            radius * (math.atanh(sin_latitude) - ECCENTRICITY * math.atanh(ECCENTRICITY * sin_latitude)),
        )

    def _to_global_geodetic_array(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        radius = self.scaled_earth_equatorial_radius
        isometric = ys / radius

        previous = np.tanh(isometric)
        for _ in range(_MAX_ITERATIONS):
            current = np.tanh(isometric + ECCENTRICITY * np.arctanh(ECCENTRICITY * previous))
            converged = np.all(np.abs(current - previous) <= _CONVERGENCE_TOLERANCE)
            previous = current
            if converged:
                break

        t = isometric + ECCENTRICITY * np.arctanh(ECCENTRICITY * previous)
        return np.degrees(xs / radius), np.degrees(np.arctan(np.sinh(t)))


def _inverse_latitude(isometric: float) -> float:
    """
    Solve the ellipsoidal inverse Mercator mapping for latitude in radians

    Args:
        isometric: y / a

    Returns:
        Latitude in radians
    """
    previous = math.tanh(isometric)
    for _ in range(_MAX_ITERATIONS):
        current = math.tanh(isometric + ECCENTRICITY * math.atanh(ECCENTRICITY * previous))
        difference = current - previous
        previous = current
        if abs(difference) <= _CONVERGENCE_TOLERANCE:
            break

    # asin(tanh(t)) == atan(sinh(t)), which keeps precision near the poles
    return math.atan(math.sinh(isometric + ECCENTRICITY * math.atanh(ECCENTRICITY * previous)))
