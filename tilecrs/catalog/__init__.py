"""
TileCrs Catalog Module

Registry of supported coordinate reference system profiles.
"""

from tilecrs.catalog.profile_factory import (
    BUILTIN_PROFILES,
    CrsProfileFactory,
    create_profile,
    get_factory,
)

__all__ = [
    "BUILTIN_PROFILES",
    "CrsProfileFactory",
    "create_profile",
    "get_factory",
]
