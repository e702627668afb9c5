"""
Polygon Dissolve Module

Reduces a FeatureCollection of polygon features to a single boundary by
unioning them one after another (left fold). Disjoint inputs yield a
MultiPolygon; touching or overlapping inputs merge into one Polygon.
"""

from functools import reduce
from typing import Optional, Tuple, Union

from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry
from shapely.validation import explain_validity

from boundary.errors import GeometryError
from boundary.features import Feature, FeatureCollection, geometry_type
from boundary.smoothing import smooth_boundary, validate_smoothing_distance
from utils.logger import get_logger

logger = get_logger(__name__)

BoundaryResult = Union[Feature, FeatureCollection]


def _check_unionable(feature: Feature, step: int, index: int) -> BaseGeometry:
    """
    Ensure a feature can take part in union step ``step``.

    Raises:
        GeometryError: If the geometry is not areal or is invalid
    """
    try:
        tag = feature.geometry_type
    except GeometryError as e:
        raise GeometryError(f"Union step {step} failed: feature {index}: {e}",
                            step=step, index=index) from e

    if not tag.is_areal:
        raise GeometryError(
            f"Union step {step} failed: feature {index} is a {tag.value}, "
            f"only Polygon and MultiPolygon can be unioned",
            step=step, index=index
        )

    geom = feature.geometry
    if not geom.is_valid:
        raise GeometryError(
            f"Union step {step} failed: feature {index} is invalid ({explain_validity(geom)})",
            step=step, index=index
        )

    return geom


def union_step(accumulated: BaseGeometry, indexed_feature: Tuple[int, Feature]) -> BaseGeometry:
    """Union the accumulator with the feature at the given index (step == index)."""
    index, feature = indexed_feature
    geom = _check_unionable(feature, step=index, index=index)

    try:
        result = accumulated.union(geom)
    except GEOSException as e:
        raise GeometryError(f"Union step {index} failed: {e}", step=index, index=index) from e

    logger.debug(f"  - Step {index}: {result.geom_type}")
    return result


def unify_polygons(collection: FeatureCollection,
                   smoothing_distance: Optional[float] = None) -> BoundaryResult:
    """
    Dissolve all features of a collection into one outer boundary.

    Args:
        collection: Polygon/MultiPolygon features to union
        smoothing_distance: Optional buffer distance in degrees; None leaves
                            the raw union untouched

    Returns:
        - Empty FeatureCollection when there are no features
        - The single feature itself when there is exactly one (unsmoothed)
        - A new Feature holding the unioned Polygon or MultiPolygon otherwise

    Raises:
        GeometryError: If any feature is invalid or a union step fails
    """
    smoothing_distance = validate_smoothing_distance(smoothing_distance)
    features = collection.features

    if not features:
        logger.debug("No features to dissolve, returning empty FeatureCollection")
        return FeatureCollection()

    if len(features) == 1 and smoothing_distance is None:
        logger.debug("Single feature detected, returning as-is")
        return features[0]

    logger.debug(f"Dissolving {len(features)} features into single geometry...")

    first = _check_unionable(features[0], step=1, index=0)
    dissolved = reduce(union_step, enumerate(features[1:], start=1), first)

    if smoothing_distance is not None:
        dissolved = smooth_boundary(dissolved, smoothing_distance)

    # GeometryCollection or empty results fall outside the model
    geometry_type(dissolved)

    logger.debug(f"  - Result: {dissolved.geom_type}")

    return Feature(geometry=dissolved)
