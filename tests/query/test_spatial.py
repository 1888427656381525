"""
Tests for spatial tile queries
"""

import json

import pytest
from shapely.geometry import Polygon, box

from tilecrs.core.exceptions import InvalidArgumentError
from tilecrs.grid.bounding_box import BoundingBox
from tilecrs.grid.tile_matrix import TileMatrixDimensions
from tilecrs.grid.tile_origin import TileOrigin
from tilecrs.query.spatial import (
    geometry_to_bbox,
    query_tiles_by_geometry,
    tile_bounds,
    tiles_in_bounds,
)

SEOUL = {
    "type": "Polygon",
    "coordinates": [[[126.9, 37.5], [127.1, 37.5], [127.1, 37.6], [126.9, 37.6], [126.9, 37.5]]],
}

# Upper-left triangle that misses the tile south-east of the matrix center
TRIANGLE = {
    "type": "Polygon",
    "coordinates": [[[-170.0, 80.0], [-20.0, 80.0], [-170.0, -70.0], [-170.0, 80.0]]],
}


class TestTileBounds:
    """Test tile_bounds"""

    def test_upper_left(self, geodetic_profile):
        footprint = tile_bounds(
            geodetic_profile, 1, 0, geodetic_profile.bounds, TileMatrixDimensions(2, 1), TileOrigin.UPPER_LEFT
        )
        assert footprint == BoundingBox(0.0, -90.0, 180.0, 90.0)

    def test_lower_left(self, geodetic_profile):
        footprint = tile_bounds(
            geodetic_profile, 0, 0, geodetic_profile.bounds, TileMatrixDimensions(4, 2), TileOrigin.LOWER_LEFT
        )
        assert footprint == BoundingBox(-180.0, -90.0, -90.0, 0.0)

    def test_lower_right(self, geodetic_profile):
        footprint = tile_bounds(
            geodetic_profile, 0, 1, geodetic_profile.bounds, TileMatrixDimensions(4, 2), TileOrigin.LOWER_RIGHT
        )
        assert footprint == BoundingBox(90.0, 0.0, 180.0, 90.0)

    def test_tiles_cover_bounds(self, any_profile):
        dims = TileMatrixDimensions(3, 2)
        footprints = [
            tile_bounds(any_profile, column, row, any_profile.bounds, dims, TileOrigin.UPPER_LEFT)
            for row in range(dims.height)
            for column in range(dims.width)
        ]
        total_area = sum(f.width * f.height for f in footprints)
        assert total_area == pytest.approx(any_profile.bounds.width * any_profile.bounds.height)


class TestTilesInBounds:
    """Test tiles_in_bounds"""

    @pytest.fixture
    def dims(self):
        return TileMatrixDimensions(4, 2)

    def test_straddles_meridian(self, geodetic_profile):
        tiles = tiles_in_bounds(
            geodetic_profile,
            BoundingBox(-10.0, -10.0, 10.0, 10.0),
            geodetic_profile.bounds,
            TileMatrixDimensions(2, 1),
            TileOrigin.UPPER_LEFT,
        )
        assert tiles == [(0, 0), (1, 0)]

    def test_whole_bounds(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, geodetic_profile.bounds, geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert len(tiles) == dims.tile_count
        assert tiles[0] == (0, 0)
        assert tiles[-1] == (3, 1)

    def test_row_major_order(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, BoundingBox(-100.0, -10.0, -80.0, 10.0), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_edge_touching_tiles_excluded(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, BoundingBox(0.0, 0.0, 90.0, 45.0), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(2, 0)]

    def test_lower_left_origin(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, BoundingBox(0.0, 0.0, 90.0, 45.0), geodetic_profile.bounds, dims, TileOrigin.LOWER_LEFT
        )
        assert tiles == [(2, 1)]

    def test_point(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, BoundingBox(-90.5, 45.5, -90.5, 45.5), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(0, 0)]

    def test_touching_far_edge_from_outside(self, geodetic_profile):
        tiles = tiles_in_bounds(
            geodetic_profile,
            BoundingBox(180.0, -10.0, 190.0, 10.0),
            geodetic_profile.bounds,
            TileMatrixDimensions(2, 1),
            TileOrigin.UPPER_LEFT,
        )
        assert tiles == []

    def test_touching_origin_edge_from_outside(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, BoundingBox(-20.0, 90.0, 20.0, 100.0), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == []

    def test_disjoint(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, BoundingBox(200.0, 0.0, 210.0, 10.0), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == []

    def test_clipped_to_bounds(self, geodetic_profile, dims):
        tiles = tiles_in_bounds(
            geodetic_profile, BoundingBox(100.0, -200.0, 300.0, -10.0), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(3, 1)]

    def test_missing_arguments(self, geodetic_profile, dims):
        bounds = geodetic_profile.bounds
        for args in [
            (None, bounds, bounds, dims, TileOrigin.UPPER_LEFT),
            (geodetic_profile, None, bounds, dims, TileOrigin.UPPER_LEFT),
            (geodetic_profile, bounds, None, dims, TileOrigin.UPPER_LEFT),
            (geodetic_profile, bounds, bounds, None, TileOrigin.UPPER_LEFT),
            (geodetic_profile, bounds, bounds, dims, None),
        ]:
            with pytest.raises(InvalidArgumentError):
                tiles_in_bounds(*args)


class TestQueryTilesByGeometry:
    """Test query_tiles_by_geometry"""

    @pytest.fixture
    def dims(self):
        return TileMatrixDimensions(4, 2)

    def test_geojson_dict(self, geodetic_profile):
        tiles = query_tiles_by_geometry(
            geodetic_profile, SEOUL, geodetic_profile.bounds, TileMatrixDimensions(2, 1), TileOrigin.UPPER_LEFT
        )
        assert tiles == [(1, 0)]

    def test_filters_candidates_by_shape(self, geodetic_profile, dims):
        tiles = query_tiles_by_geometry(
            geodetic_profile, TRIANGLE, geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(0, 0), (1, 0), (0, 1)]

    def test_shapely_geometry(self, geodetic_profile, dims):
        tiles = query_tiles_by_geometry(
            geodetic_profile, box(10.0, 10.0, 20.0, 20.0), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(2, 0)]

    def test_feature(self, geodetic_profile, dims):
        feature = {"type": "Feature", "properties": {}, "geometry": SEOUL}
        tiles = query_tiles_by_geometry(
            geodetic_profile, feature, geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(3, 0)]

    def test_feature_collection(self, geodetic_profile, dims):
        collection = {
            "type": "FeatureCollection",
            "features": [
                {"type": "Feature", "properties": {}, "geometry": SEOUL},
                {"type": "Feature", "properties": {}, "geometry": {"type": "Point", "coordinates": [-150.0, -30.0]}},
            ],
        }
        tiles = query_tiles_by_geometry(
            geodetic_profile, collection, geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        )
        assert tiles == [(3, 0), (0, 1)]

    def test_empty_feature_collection(self, geodetic_profile, dims):
        with pytest.raises(InvalidArgumentError):
            query_tiles_by_geometry(
                geodetic_profile,
                {"type": "FeatureCollection", "features": []},
                geodetic_profile.bounds,
                dims,
                TileOrigin.UPPER_LEFT,
            )

    def test_empty_geometry(self, geodetic_profile, dims):
        assert query_tiles_by_geometry(
            geodetic_profile, Polygon(), geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
        ) == []

    def test_geojson_file(self, geodetic_profile, dims, tmp_path):
        path = tmp_path / "seoul.geojson"
        path.write_text(json.dumps(SEOUL))

        for geometry in [path, str(path)]:
            tiles = query_tiles_by_geometry(
                geodetic_profile, geometry, geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
            )
            assert tiles == [(3, 0)]

    def test_missing_file(self, geodetic_profile, dims, tmp_path):
        with pytest.raises(FileNotFoundError):
            query_tiles_by_geometry(
                geodetic_profile, tmp_path / "missing.geojson", geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT
            )

    def test_unsupported_type(self, geodetic_profile, dims):
        with pytest.raises(TypeError):
            query_tiles_by_geometry(geodetic_profile, 42, geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT)

        with pytest.raises(InvalidArgumentError):
            query_tiles_by_geometry(geodetic_profile, None, geodetic_profile.bounds, dims, TileOrigin.UPPER_LEFT)


class TestGeometryToBbox:
    """Test geometry_to_bbox"""

    def test_polygon(self):
        bbox = geometry_to_bbox(SEOUL)
        assert bbox.to_tuple() == pytest.approx((126.9, 37.5, 127.1, 37.6))

    def test_lazy_package_attribute(self):
        import tilecrs

        assert tilecrs.geometry_to_bbox is geometry_to_bbox
        assert tilecrs.tiles_in_bounds is tiles_in_bounds
