"""
TileCrs Test Configuration

Shared pytest fixtures for all tests.
"""

import pytest

from tilecrs.profiles import (
    EllipsoidalMercatorCrsProfile,
    GlobalGeodeticCrsProfile,
    SphericalMercatorCrsProfile,
)


@pytest.fixture
def geodetic_profile():
    """EPSG:4326 profile"""
    return GlobalGeodeticCrsProfile()


@pytest.fixture
def spherical_profile():
    """EPSG:3857 profile"""
    return SphericalMercatorCrsProfile()


@pytest.fixture
def ellipsoidal_profile():
    """EPSG:3395 profile"""
    return EllipsoidalMercatorCrsProfile()


@pytest.fixture(params=["4326", "3857", "3395"])
def any_profile(request):
    """Each built-in profile in turn"""
    return {
        "4326": GlobalGeodeticCrsProfile,
        "3857": SphericalMercatorCrsProfile,
        "3395": EllipsoidalMercatorCrsProfile,
    }[request.param]()
