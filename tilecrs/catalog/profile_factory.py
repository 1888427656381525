"""
CRS profile factory

Maps (authority, identifier) pairs to CRS profiles. The module-level default
factory is built once at import time and only read afterwards.
"""

import logging

from tilecrs.core.coordinate import CoordinateReferenceSystem
from tilecrs.core.exceptions import InvalidArgumentError, UnsupportedCrsError
from tilecrs.profiles.base import CrsProfile
from tilecrs.profiles.ellipsoidal_mercator import EllipsoidalMercatorCrsProfile
from tilecrs.profiles.global_geodetic import GlobalGeodeticCrsProfile
from tilecrs.profiles.spherical_mercator import SphericalMercatorCrsProfile

logger = logging.getLogger(__name__)

# Built-in profiles for the supported coordinate reference systems
BUILTIN_PROFILES: tuple[CrsProfile, ...] = (
    GlobalGeodeticCrsProfile(),
    SphericalMercatorCrsProfile(),
    EllipsoidalMercatorCrsProfile(),
)


class CrsProfileFactory:
    """
    Lookup table of CRS profiles

    Starts with the built-in EPSG:4326, EPSG:3857 and EPSG:3395 profiles.
    Authorities compare case-insensitively.

    Examples:
        >>> factory = CrsProfileFactory()
        >>> factory.create("epsg", 3857).name
        'Web Mercator'
        >>> factory.create(CoordinateReferenceSystem("EPSG", 4326)) == factory.create("EPSG", 4326)
        True
    """

    def __init__(self, profiles=BUILTIN_PROFILES):
        self._profiles: dict[CoordinateReferenceSystem, CrsProfile] = {
            profile.coordinate_reference_system: profile for profile in profiles
        }

    def register(self, profile: CrsProfile) -> None:
        """
        Register a profile under its coordinate reference system

        Intended for private factory instances; the default factory is shared.
        """
        if profile is None:
            raise InvalidArgumentError("Profile may not be null")
        self._profiles[profile.coordinate_reference_system] = profile
        logger.info("Registered CRS profile: %s", profile.coordinate_reference_system)

    def create(
        self,
        crs_or_authority: CoordinateReferenceSystem | str,
        identifier: int | None = None,
    ) -> CrsProfile:
        """
        Get the profile for a coordinate reference system

        Args:
            crs_or_authority: A CoordinateReferenceSystem, or an authority name
                when identifier is given
            identifier: Numeric identifier within the authority

        Returns:
            The registered profile

        Raises:
            InvalidArgumentError: If the arguments do not name a CRS
            UnsupportedCrsError: If no profile is registered for the CRS
        """
        if isinstance(crs_or_authority, CoordinateReferenceSystem):
            if identifier is not None:
                raise InvalidArgumentError(
                    "Identifier must not be given with a CoordinateReferenceSystem"
                )
            crs = crs_or_authority
        elif identifier is None:
            raise InvalidArgumentError("Identifier may not be null")
        else:
            crs = CoordinateReferenceSystem(crs_or_authority, identifier)

        profile = self._profiles.get(crs)
        if profile is None:
            logger.debug("No CRS profile registered for %s", crs)
            raise UnsupportedCrsError(f"Unsupported coordinate reference system: {crs}")
        return profile

    def supports(self, crs: CoordinateReferenceSystem) -> bool:
        return crs in self._profiles

    def list_coordinate_reference_systems(self) -> list[CoordinateReferenceSystem]:
        """All registered systems, sorted by authority then identifier"""
        return sorted(self._profiles, key=lambda crs: (crs.authority.upper(), crs.identifier))

    def list_profiles(self) -> list[CrsProfile]:
        return [self._profiles[crs] for crs in self.list_coordinate_reference_systems()]


# Global factory instance
_default_factory = CrsProfileFactory()


def get_factory() -> CrsProfileFactory:
    """Get the shared, built-in CRS profile factory."""
    return _default_factory


def create_profile(
    crs_or_authority: CoordinateReferenceSystem | str,
    identifier: int | None = None,
) -> CrsProfile:
    """
    Get a built-in profile from the shared factory

    Examples:
        >>> create_profile("EPSG", 3395).name
        'World Mercator'
    """
    return _default_factory.create(crs_or_authority, identifier)
