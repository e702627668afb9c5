"""
Boundary Computation Package

This package computes a single outer boundary for a set of regions, either by
unioning their polygons or by taking the convex hull of raw points.

Modules:
    features: Point/Feature/FeatureCollection data model and GeoJSON codec
    errors: ValidationError and GeometryError
    merge: Flatten many FeatureCollections into one
    dissolve: Union polygon features into one boundary (left fold)
    smoothing: Optional buffer post-processing (disabled by default)
    hull: Convex hull of a point set
    pipeline: merge_boundary / hull_boundary operations

Usage:
    from boundary import merge_boundary, hull_boundary

    boundary = merge_boundary([collection_a, None, collection_b])
    territory = hull_boundary([[-73.99, 40.75], [-73.98, 40.76], [-73.97, 40.74]])
"""

from boundary.errors import BoundaryError, GeometryError, ValidationError
from boundary.features import Feature, FeatureCollection, GeometryType
from boundary.pipeline import hull_boundary, merge_boundary

__all__ = [
    'merge_boundary',
    'hull_boundary',
    'Feature',
    'FeatureCollection',
    'GeometryType',
    'BoundaryError',
    'GeometryError',
    'ValidationError'
]
