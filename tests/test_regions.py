"""Tests for region construction, geometry parsing and index assignment."""

import numpy as np
import pytest
from shapely.geometry import MultiPolygon, Point, Polygon, box, mapping

from ratmap.errors import DuplicateIdentifierError, GeometryError, UnknownIdentifierError
from ratmap.spatial.regions import (
    IndexMap,
    build_regions,
    normalize_identifier,
    parse_geometry,
    regions_from_frame,
)


class TestParseGeometry:
    """Test geometry parsing and validation."""

    def test_shapely_polygon(self):
        geom = box(0, 0, 1, 1)
        assert parse_geometry(geom, "10001") is geom

    def test_wkt(self):
        geom = parse_geometry("POLYGON ((0 0, 1 0, 1 1, 0 1, 0 0))", "10001")
        assert isinstance(geom, Polygon)
        assert geom.area == pytest.approx(1.0)

    def test_geojson_mapping(self):
        multi = MultiPolygon([box(0, 0, 1, 1), box(2, 2, 3, 3)])
        geom = parse_geometry(mapping(multi), "10001")
        assert isinstance(geom, MultiPolygon)

    def test_missing_geometry(self):
        with pytest.raises(GeometryError) as exc:
            parse_geometry(None, "10001")
        assert exc.value.identifier == "10001"

    def test_garbage_wkt(self):
        with pytest.raises(GeometryError):
            parse_geometry("POLYGON ((0 0, 1", "10001")

    def test_not_a_polygon(self):
        with pytest.raises(GeometryError):
            parse_geometry(Point(0, 0), "10001")

    def test_empty_polygon(self):
        with pytest.raises(GeometryError):
            parse_geometry(Polygon(), "10001")

    def test_self_intersecting_polygon(self):
        bowtie = Polygon([(0, 0), (1, 1), (1, 0), (0, 1), (0, 0)])
        with pytest.raises(GeometryError) as exc:
            parse_geometry(bowtie, "10001")
        assert "not valid" in str(exc.value)

    def test_unsupported_type(self):
        with pytest.raises(GeometryError):
            parse_geometry(42, "10001")


class TestIndexMap:
    """Test the identifier <-> index mapping."""

    def test_sorted_one_based(self):
        index_map = IndexMap(["11201", "10001", "10305"])
        assert index_map.identifiers == ("10001", "10305", "11201")
        assert index_map.index_of("10001") == 1
        assert index_map.index_of("11201") == 3
        assert index_map.position_of("11201") == 2

    def test_inverse(self):
        index_map = IndexMap(["b", "a", "c"])
        for rid in index_map:
            assert index_map.identifier_of(index_map.index_of(rid)) == rid

    def test_same_ids_same_assignment(self):
        assert IndexMap(["c", "a", "b"]) == IndexMap(["b", "c", "a"])

    def test_unknown_identifier(self):
        index_map = IndexMap(["a"])
        with pytest.raises(UnknownIdentifierError):
            index_map.index_of("ZZZZZ")
        with pytest.raises(UnknownIdentifierError):
            index_map.identifier_of(2)
        with pytest.raises(UnknownIdentifierError):
            index_map.identifier_of(0)

    def test_duplicates(self):
        with pytest.raises(DuplicateIdentifierError) as exc:
            IndexMap(["a", "b", "a"])
        assert exc.value.identifiers == ("a",)

    def test_to_frame(self):
        df = IndexMap(["b", "a"]).to_frame()
        assert df["identifier"].tolist() == ["a", "b"]
        assert df["index"].tolist() == [1, 2]


class TestBuildRegions:
    """Test building Regions from raw records."""

    def test_regions_sorted_and_indexed(self):
        regions, index_map = build_regions(["10003", "10001", "10002"],
                                           [box(2, 0, 3, 1), box(0, 0, 1, 1), box(1, 0, 2, 1)],
                                           ["B", "A", None])
        assert [r.identifier for r in regions] == ["10001", "10002", "10003"]
        assert [r.index for r in regions] == [1, 2, 3]
        assert [r.group for r in regions] == ["A", None, "B"]
        assert regions[0].geometry.bounds == (0, 0, 1, 1)
        assert len(index_map) == 3

    def test_identifiers_are_strings(self):
        regions, index_map = build_regions([10001, 10002], [box(0, 0, 1, 1), box(1, 0, 2, 1)])
        assert "10001" in index_map
        assert regions[0].identifier == "10001"

    def test_bad_geometry_aborts(self):
        with pytest.raises(GeometryError) as exc:
            build_regions(["10001", "10002"], [box(0, 0, 1, 1), None])
        assert exc.value.identifier == "10002"

    def test_length_mismatch(self):
        with pytest.raises(ValueError):
            build_regions(["10001"], [box(0, 0, 1, 1), box(1, 0, 2, 1)])

    def test_from_frame(self, five_frame):
        regions, index_map = regions_from_frame(five_frame, "ZIPCODE", "BOROUGH")
        assert len(regions) == 5
        assert regions[4].group == "C"

    def test_from_frame_missing_column(self, five_frame):
        with pytest.raises(ValueError):
            regions_from_frame(five_frame, "ZCTA")


class TestNormalizeIdentifier:
    """Test identifier normalization."""

    def test_whole_float_loses_decimal(self):
        assert normalize_identifier(10001.0) == "10001"
        assert normalize_identifier(np.float64(11201.0)) == "11201"

    def test_strings_and_ints(self):
        assert normalize_identifier(" 10001 ") == "10001"
        assert normalize_identifier(10001) == "10001"

    def test_missing(self):
        with pytest.raises(ValueError):
            normalize_identifier(float("nan"))
        with pytest.raises(ValueError):
            normalize_identifier(None)

    def test_float_ids_match_links(self):
        regions, index_map = build_regions([10002.0, 10001.0], [box(1, 0, 2, 1), box(0, 0, 1, 1)])
        assert index_map.identifiers == ("10001", "10002")
        assert regions[0].identifier == "10001"
