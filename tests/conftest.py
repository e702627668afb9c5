"""Shared fixtures for boundary tests."""

import json
import logging
from pathlib import Path

import pytest
from shapely.geometry import box, mapping

from boundary.features import Feature, FeatureCollection
from utils.logger import ROOT_LOGGER_NAME


def square_feature(x: float, y: float, size: float = 1.0, **properties) -> Feature:
    """Axis-aligned square feature with its lower-left corner at (x, y)."""
    return Feature(geometry=box(x, y, x + size, y + size), properties=properties)


def collection(*features: Feature) -> FeatureCollection:
    return FeatureCollection(features=list(features))


BOWTIE_GEOJSON = {
    "type": "Feature",
    "geometry": {
        "type": "Polygon",
        "coordinates": [[[0, 0], [1, 1], [1, 0], [0, 1], [0, 0]]],
    },
    "properties": {"name": "bowtie"},
}


def square_geojson(x: float, y: float, size: float = 1.0, **properties) -> dict:
    return {
        "type": "Feature",
        "geometry": mapping(box(x, y, x + size, y + size)),
        "properties": properties,
    }


@pytest.fixture
def geojson_dir(tmp_path):
    """Directory of zipcode area files; returns (directory, writer)."""
    directory = tmp_path / "geojson-files"
    directory.mkdir()

    def write(zipcode: str, *features: dict) -> Path:
        path = directory / f"{zipcode}.geojson"
        path.write_text(json.dumps({"type": "FeatureCollection", "features": list(features)}))
        return path

    return directory, write


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by setup_logging so streams don't leak between tests."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)
