"""
Profiles CLI command

Lists the supported coordinate reference systems.
"""

import argparse

from tilecrs.catalog.profile_factory import get_factory


def run_profiles(args: argparse.Namespace) -> None:
    """Run the profiles command"""
    profiles = get_factory().list_profiles()

    print(f"Supported coordinate reference systems: {len(profiles)}")
    print()

    for profile in profiles:
        print(f"{profile.coordinate_reference_system}  {profile.name}")
        print(f"  Description: {profile.description}")
        print(f"  Bounds: {profile.bounds}")
        print(f"  Precision: {profile.precision} decimal places")
        print()
