"""Tests for loading zipcode GeoJSON area files."""

import json

import pytest
from shapely.geometry import box

from boundary.errors import GeometryError, ValidationError
from core.feature_loader import (
    load_feature_collections,
    load_zipcode_file,
    validate_zipcodes,
)
from tests.conftest import square_geojson


@pytest.mark.unit
class TestValidateZipcodes:

    def test_accepts_plain_keys(self):
        assert validate_zipcodes(["10001", "SW1A-1", "h3z"]) == ["10001", "SW1A-1", "h3z"]

    @pytest.mark.parametrize("zipcodes", [[], None, "10001", {"zip": "10001"}])
    def test_rejects_non_lists(self, zipcodes):
        with pytest.raises(ValidationError, match="non-empty array"):
            validate_zipcodes(zipcodes)

    @pytest.mark.parametrize("bad", ["", "../secret", "a/b", "100 01", 10001, None])
    def test_rejects_bad_keys(self, bad):
        with pytest.raises(ValidationError) as exc_info:
            validate_zipcodes(["10001", bad])
        assert exc_info.value.index == 1


@pytest.mark.unit
class TestLoadZipcodeFile:

    def test_missing_file_is_none(self, geojson_dir):
        directory, _ = geojson_dir
        assert load_zipcode_file(directory, "99999") is None

    def test_reads_features_and_properties(self, geojson_dir):
        directory, write = geojson_dir
        write("10001", square_geojson(0, 0, zip="10001", population=21102))

        fc = load_zipcode_file(directory, "10001")

        assert len(fc) == 1
        feature = fc.features[0]
        assert feature.geometry.equals(box(0, 0, 1, 1))
        assert feature.properties["zip"] == "10001"
        assert feature.properties["population"] == 21102
        assert isinstance(feature.properties["population"], int)

    def test_multiple_features_in_order(self, geojson_dir):
        directory, write = geojson_dir
        write("10002", square_geojson(0, 0, part="a"), square_geojson(3, 3, part="b"))

        fc = load_zipcode_file(directory, "10002")

        assert [f.properties["part"] for f in fc] == ["a", "b"]

    def test_unreadable_file_raises(self, geojson_dir):
        directory, _ = geojson_dir
        (directory / "10003.geojson").write_text("{not json")
        with pytest.raises(ValueError, match="Failed to read"):
            load_zipcode_file(directory, "10003")

    def test_properties_pass_through_exactly(self, geojson_dir):
        """Nulls, ints, date-like strings and nested values come back as stored."""
        directory, write = geojson_dir
        write(
            "10004",
            square_geojson(0, 0, pop=5, opened="2020-01-02", name="a", tags=["x", 1], ratio=0.5),
            square_geojson(3, 3, pop=None, opened=None, name=None, tags=None, ratio=None),
        )

        props = [f.properties for f in load_zipcode_file(directory, "10004")]

        assert props[0] == {"pop": 5, "opened": "2020-01-02", "name": "a", "tags": ["x", 1], "ratio": 0.5}
        assert type(props[0]["pop"]) is int
        assert type(props[0]["opened"]) is str
        assert props[1] == {"pop": None, "opened": None, "name": None, "tags": None, "ratio": None}

    def test_features_without_geometry_skipped(self, geojson_dir):
        directory, write = geojson_dir
        write(
            "10005",
            {"type": "Feature", "geometry": None, "properties": {"part": "ghost"}},
            square_geojson(0, 0, part="real"),
        )

        fc = load_zipcode_file(directory, "10005")

        assert [f.properties["part"] for f in fc] == ["real"]

    def test_empty_file_gives_empty_collection(self, geojson_dir):
        directory, write = geojson_dir
        write("10006")

        fc = load_zipcode_file(directory, "10006")

        assert fc is not None
        assert fc.is_empty

    def test_not_a_feature_collection(self, geojson_dir):
        directory, _ = geojson_dir
        (directory / "10007.geojson").write_text(json.dumps(square_geojson(0, 0)))
        with pytest.raises(ValueError, match="not a FeatureCollection"):
            load_zipcode_file(directory, "10007")

    def test_short_ring_is_geometry_error(self, geojson_dir):
        directory, write = geojson_dir
        write("10008", {
            "type": "Feature",
            "geometry": {"type": "Polygon", "coordinates": [[[0, 0], [1, 1], [0, 0]]]},
            "properties": {},
        })
        with pytest.raises(GeometryError):
            load_zipcode_file(directory, "10008")


@pytest.mark.unit
class TestLoadFeatureCollections:

    def test_one_entry_per_zipcode(self, geojson_dir):
        directory, write = geojson_dir
        write("10001", square_geojson(0, 0))
        write("10003", square_geojson(5, 5))

        result = load_feature_collections(directory, ["10001", "10002", "10003"])

        assert len(result) == 3
        assert result[1] is None
        assert len(result[0]) == 1 and len(result[2]) == 1

    def test_validates_before_reading(self, tmp_path):
        with pytest.raises(ValidationError):
            load_feature_collections(tmp_path, ["../etc/passwd"])
