"""
TileCrs Profiles Module

Coordinate reference system profiles and their tile transforms.
"""

from tilecrs.profiles.base import (
    TILE_FRACTION_PRECISION,
    CrsProfile,
    ProportionalCrsProfile,
    round_bounds,
    round_coordinate,
    tile_crs_size,
)
from tilecrs.profiles.ellipsoidal_mercator import EllipsoidalMercatorCrsProfile
from tilecrs.profiles.global_geodetic import GlobalGeodeticCrsProfile
from tilecrs.profiles.spherical_mercator import SphericalMercatorCrsProfile

__all__ = [
    "TILE_FRACTION_PRECISION",
    "CrsProfile",
    "EllipsoidalMercatorCrsProfile",
    "GlobalGeodeticCrsProfile",
    "ProportionalCrsProfile",
    "SphericalMercatorCrsProfile",
    "round_bounds",
    "round_coordinate",
    "tile_crs_size",
]
