"""
CRS Profile Protocol and shared tile transforms

A profile binds a coordinate reference system to its world bounds and to the
pair of transforms between continuous CRS coordinates and discrete
(column, row) tile addresses.
"""

import math
from typing import Protocol

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tilecrs.core.coordinate import Coordinate, CoordinateReferenceSystem, CrsCoordinate
from tilecrs.core.exceptions import CrsMismatchError, InvalidArgumentError, OutOfBoundsError
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.grid.bounds import bounds_corner, contains
from tilecrs.grid.tile_matrix import TileCoordinate, TileMatrixDimensions
from tilecrs.grid.tile_origin import TileOrigin

# Decimal places kept on the coordinate / tile-size ratio before flooring.
# Existing GeoPackage content was tiled with this exact tolerance.
TILE_FRACTION_PRECISION = 9


class CrsProfile(Protocol):
    """
    Coordinate reference system profile

    Attributes:
        coordinate_reference_system: Identity of the CRS (e.g. EPSG:4326)
        bounds: Legal coordinate domain of the CRS
        precision: Decimal places that are significant for this CRS's units
        name: Short human-readable name
        description: Longer human-readable description
        well_known_text: OGC WKT 1 definition
    """

    coordinate_reference_system: CoordinateReferenceSystem
    bounds: BoundingBox
    precision: int
    name: str
    description: str
    well_known_text: str

    def crs_to_tile_coordinate(
        self,
        coordinate: CrsCoordinate,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> TileCoordinate:
        """
        Find the tile containing a CRS coordinate

        Args:
            coordinate: Coordinate in this profile's CRS
            bounds: Extent covered by the tile matrix
            dimensions: Tile matrix dimensions at the zoom level
            origin: Corner of the matrix holding tile (0, 0)

        Returns:
            (column, row) of the tile
        """
        ...

    def tile_to_crs_coordinate(
        self,
        column: int,
        row: int,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> CrsCoordinate:
        """
        Get the CRS coordinate of a tile's origin-side corner

        Args:
            column: Tile column (0 or greater)
            row: Tile row (0 or greater)
            bounds: Extent covered by the tile matrix
            dimensions: Tile matrix dimensions at the zoom level
            origin: Corner of the matrix holding tile (0, 0)

        Returns:
            Corner of the tile nearest the matrix origin, in this profile's CRS
        """
        ...

    def to_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """Convert a coordinate in this CRS to (longitude, latitude) degrees"""
        ...

    def from_global_geodetic(self, coordinate: Coordinate) -> Coordinate:
        """Convert (longitude, latitude) degrees to a coordinate in this CRS"""
        ...


def round_half_up(value: float, places: int) -> float:
    """Round to a number of decimal places, halves away from negative infinity"""
    scale = 10.0**places
    return math.floor(value * scale + 0.5) / scale


def round_coordinate(coordinate: Coordinate, precision: int) -> Coordinate:
    return Coordinate(
        round_half_up(coordinate.x, precision),
        round_half_up(coordinate.y, precision),
    )


def round_bounds(bounds: BoundingBox, precision: int) -> BoundingBox:
    lower_left = round_coordinate(bounds.bottom_left, precision)
    upper_right = round_coordinate(bounds.top_right, precision)
    return BoundingBox(lower_left.x, lower_left.y, upper_right.x, upper_right.y)


def tile_crs_size(bounds: BoundingBox, dimensions: TileMatrixDimensions) -> tuple[float, float]:
    """
    Width and height of a single tile in CRS units

    Examples:
        >>> tile_crs_size(BoundingBox(-180.0, -90.0, 180.0, 90.0), TileMatrixDimensions(2, 1))
        (180.0, 180.0)
    """
    if bounds is None:
        raise InvalidArgumentError("Bounds may not be null")

    if dimensions is None:
        raise InvalidArgumentError("Tile matrix dimensions may not be null")

    return bounds.width / dimensions.width, bounds.height / dimensions.height


def tile_index(distance: float, tile_size: float) -> int:
    """Zero-based index of the tile a distance from the origin corner falls in"""
    return int(math.floor(round_half_up(distance / tile_size, TILE_FRACTION_PRECISION)))


class ProportionalCrsProfile:
    """
    Tile transforms for CRSs whose tile grid is linear in CRS units

    All three built-in profiles tile directly in their own units (degrees for
    EPSG:4326, projected meters for the Mercator variants), so they share
    this implementation. Subclasses provide coordinate_reference_system,
    bounds and precision.
    """

    coordinate_reference_system: CoordinateReferenceSystem
    bounds: BoundingBox
    precision: int

    def crs_to_tile_coordinate(
        self,
        coordinate: CrsCoordinate,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> TileCoordinate:
        """
        Find the tile containing a CRS coordinate

        A coordinate on an edge shared by two tiles belongs to the tile nearer
        the origin. The matrix edges opposite the origin are outside the grid.

        Raises:
            InvalidArgumentError: If an argument is missing
            CrsMismatchError: If the coordinate is not in this profile's CRS
            OutOfBoundsError: If the coordinate has no tile in this grid

        Examples:
            >>> from tilecrs.profiles.global_geodetic import GlobalGeodeticCrsProfile
            >>> profile = GlobalGeodeticCrsProfile()
            >>> point = CrsCoordinate.create(140.0, 40.0, "EPSG", 4326)
            >>> profile.crs_to_tile_coordinate(point, profile.bounds, TileMatrixDimensions(9, 7), TileOrigin.UPPER_LEFT)
            TileCoordinate(column=8, row=1)
        """
        if coordinate is None:
            raise InvalidArgumentError("Coordinate may not be null")

        if bounds is None:
            raise InvalidArgumentError("Bounds may not be null")

        if dimensions is None:
            raise InvalidArgumentError("Tile matrix dimensions may not be null")

        if origin is None:
            raise InvalidArgumentError("Origin may not be null")

        crs = getattr(coordinate, "coordinate_reference_system", None)
        if crs is None:
            raise InvalidArgumentError("Coordinate must carry a coordinate reference system")

        if crs != self.coordinate_reference_system:
            raise CrsMismatchError(
                f"Coordinate's coordinate reference system ({crs}) does not match "
                f"the profile's coordinate reference system ({self.coordinate_reference_system})"
            )

        if not self._contains(bounds, coordinate, origin):
            raise OutOfBoundsError(f"Coordinate {coordinate} is outside the bounds {bounds}")

        corner = bounds_corner(bounds, origin)
        tile_width, tile_height = tile_crs_size(bounds, dimensions)

        column = tile_index(abs(coordinate.x - corner.x), tile_width)
        row = tile_index(abs(coordinate.y - corner.y), tile_height)

        # Within the rounding tolerance of a far edge the index reaches the
        # tile count; the coordinate is inside bounds, so it is the last tile
        return TileCoordinate(min(column, dimensions.width - 1), min(row, dimensions.height - 1))

    def _contains(self, bounds: BoundingBox, coordinate: CrsCoordinate, origin: TileOrigin) -> bool:
        """Origin-aware containment on the raw coordinate values"""
        return contains(bounds, coordinate, origin)

    def tile_to_crs_coordinate(
        self,
        column: int,
        row: int,
        bounds: BoundingBox,
        dimensions: TileMatrixDimensions,
        origin: TileOrigin,
    ) -> CrsCoordinate:
        """
        Get the CRS coordinate of a tile's origin-side corner

        Indices past the matrix dimensions are accepted; they produce a
        coordinate outside bounds (used to find a tile's far corner).

        Raises:
            InvalidArgumentError: If an argument is missing or an index is negative
        """
        if column is None or column < 0:
            raise InvalidArgumentError(f"Column must be 0 or greater, got {column}")

        if row is None or row < 0:
            raise InvalidArgumentError(f"Row must be 0 or greater, got {row}")

        if bounds is None:
            raise InvalidArgumentError("Bounds may not be null")

        if dimensions is None:
            raise InvalidArgumentError("Tile matrix dimensions may not be null")

        if origin is None:
            raise InvalidArgumentError("Origin may not be null")

        corner = bounds_corner(bounds, origin)
        tile_width, tile_height = tile_crs_size(bounds, dimensions)

        return CrsCoordinate(
            corner.x + origin.horizontal.direction * column * tile_width,
            corner.y + origin.vertical.direction * row * tile_height,
            self.coordinate_reference_system,
        )

    def to_global_geodetic_array(
        self, xs: ArrayLike, ys: ArrayLike
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """
        Vectorized to_global_geodetic

        Args:
            xs: X coordinates in this CRS
            ys: Y coordinates in this CRS

        Returns:
            (longitudes, latitudes) in degrees
        """
        xs = np.asarray(xs, dtype=np.float64)
        ys = np.asarray(ys, dtype=np.float64)
        if xs.shape != ys.shape:
            raise InvalidArgumentError(f"Shape mismatch: {xs.shape} vs {ys.shape}")
        return self._to_global_geodetic_array(xs, ys)

    def _to_global_geodetic_array(
        self, xs: NDArray[np.float64], ys: NDArray[np.float64]
    ) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        raise NotImplementedError

    def __str__(self) -> str:
        return f"{self.name} ({self.coordinate_reference_system})"
