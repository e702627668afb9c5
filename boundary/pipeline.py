"""
Boundary Pipelines

The two public operations of the package:

1. merge_boundary: FeatureCollections (some possibly missing) → merged → dissolved
2. hull_boundary: raw [lon, lat] points → convex hull polygon

Both are pure and synchronous; they raise ValidationError or GeometryError
and leave logging of failures to the caller.
"""

from typing import Any, Optional, Sequence

from boundary.dissolve import BoundaryResult, unify_polygons
from boundary.features import Feature, FeatureCollection
from boundary.hull import build_convex_hull
from boundary.merge import merge_feature_collections


def merge_boundary(feature_collections: Sequence[Optional[FeatureCollection]],
                   smoothing_distance: Optional[float] = None) -> BoundaryResult:
    """
    Compute the outer boundary of several feature collections.

    Args:
        feature_collections: Loaded collections; None marks a missing region
        smoothing_distance: Optional buffer in degrees (disabled by default)

    Returns:
        Feature with the unioned geometry, or an empty FeatureCollection
        when no features were supplied

    Example:
        >>> result = merge_boundary([fc_a, None, fc_b])
        >>> result.geometry.geom_type
        'Polygon'
    """
    merged = merge_feature_collections(feature_collections)
    return unify_polygons(merged, smoothing_distance=smoothing_distance)


def hull_boundary(points: Sequence[Any]) -> Feature:
    """Compute the convex hull boundary of at least three [lon, lat] points."""
    return build_convex_hull(points)
