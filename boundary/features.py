"""
Geometry Feature Data Model

Shared data structures for both boundary pipelines. Geometries are Shapely
objects; their variant is exposed through GeometryType so the union and hull
routines can branch on an explicit tag.

GeoJSON encoding follows RFC 7946 (Feature, FeatureCollection).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple

from shapely.errors import ShapelyError
from shapely.geometry import Point as ShapelyPoint, mapping, shape
from shapely.geometry.base import BaseGeometry

from boundary.errors import GeometryError

# (longitude, latitude)
Point = Tuple[float, float]


class GeometryType(Enum):
    POINT = 'Point'
    LINESTRING = 'LineString'
    POLYGON = 'Polygon'
    MULTIPOLYGON = 'MultiPolygon'

    @property
    def is_areal(self) -> bool:
        return self in (GeometryType.POLYGON, GeometryType.MULTIPOLYGON)


def geometry_type(geom: BaseGeometry) -> GeometryType:
    """Return the variant tag of a Shapely geometry, rejecting unsupported types."""
    try:
        return GeometryType(geom.geom_type)
    except ValueError:
        raise GeometryError(f"Unsupported geometry type: {geom.geom_type}")


@dataclass
class Feature:
    """A geometry plus opaque properties."""

    geometry: BaseGeometry
    properties: Dict[str, Any] = field(default_factory=dict)

    @property
    def geometry_type(self) -> GeometryType:
        return geometry_type(self.geometry)

    @classmethod
    def from_geojson(cls, data: Dict[str, Any]) -> 'Feature':
        """
        Build a Feature from a GeoJSON Feature dict.

        Raises:
            GeometryError: If the geometry is missing or Shapely cannot build it
                           (e.g. a ring with fewer than 4 points)
        """
        geometry = data.get('geometry')
        if geometry is None:
            raise GeometryError("Feature has no geometry")

        try:
            geom = shape(geometry)
        except (ShapelyError, ValueError, TypeError, KeyError, IndexError) as e:
            raise GeometryError(f"Cannot build geometry: {e}") from e

        # Reject variants outside the model early
        geometry_type(geom)

        return cls(geometry=geom, properties=dict(data.get('properties') or {}))

    def to_geojson(self) -> Dict[str, Any]:
        return {
            'type': 'Feature',
            'geometry': mapping(self.geometry),
            'properties': dict(self.properties),
        }


@dataclass
class FeatureCollection:
    """Ordered group of Features. An empty collection means "no geometry"."""

    features: List[Feature] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.features)

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    @property
    def is_empty(self) -> bool:
        return not self.features

    @classmethod
    def from_geojson(cls, data: Dict[str, Any]) -> 'FeatureCollection':
        """Build a FeatureCollection from a GeoJSON FeatureCollection dict."""
        if data.get('type') != 'FeatureCollection':
            raise GeometryError(f"Expected FeatureCollection, got {data.get('type')!r}")

        features = []
        for i, item in enumerate(data.get('features') or []):
            try:
                features.append(Feature.from_geojson(item))
            except GeometryError as e:
                raise GeometryError(f"Feature {i}: {e}", index=i) from e
        return cls(features=features)

    def to_geojson(self) -> Dict[str, Any]:
        return {
            'type': 'FeatureCollection',
            'features': [feature.to_geojson() for feature in self.features],
        }


def point_feature(point: Point, properties: Optional[Dict[str, Any]] = None) -> Feature:
    """Wrap a (lon, lat) pair as a Point Feature."""
    return Feature(geometry=ShapelyPoint(point), properties=dict(properties or {}))
