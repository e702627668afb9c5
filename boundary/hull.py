"""
Convex Hull Module

Builds the smallest convex polygon enclosing a set of (lon, lat) points.
Used for ad-hoc territories drawn from raw coordinates rather than zipcodes.
"""

import math
from numbers import Real
from typing import Any, List, Sequence

from shapely.geometry import MultiPoint
from shapely.geometry.polygon import orient

from boundary.errors import GeometryError, ValidationError
from boundary.features import Feature, GeometryType, Point, point_feature
from utils.logger import get_logger

logger = get_logger(__name__)

MIN_HULL_POINTS = 3


def _coerce_point(value: Any, index: int) -> Point:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise ValidationError(f"Point {index} must be a [longitude, latitude] pair", index=index)

    coords = []
    for component in value:
        if isinstance(component, bool) or not isinstance(component, Real) or not math.isfinite(component):
            raise ValidationError(f"Point {index} has a non-numeric coordinate: {component!r}", index=index)
        coords.append(float(component))

    return coords[0], coords[1]


def ingest_points(points: Sequence[Any]) -> List[Point]:
    """
    Validate raw point input and return (lon, lat) tuples.

    The count check runs before anything else is inspected.

    Raises:
        ValidationError: Fewer than three points, or a malformed point
    """
    if not isinstance(points, (list, tuple)):
        raise ValidationError("Points must be an array of [longitude, latitude] pairs")

    if len(points) < MIN_HULL_POINTS:
        raise ValidationError("At least three points are required to create a boundary.")

    return [_coerce_point(value, i) for i, value in enumerate(points)]


def build_convex_hull(points: Sequence[Any]) -> Feature:
    """
    Compute the convex hull of a point set.

    Args:
        points: Sequence of [lon, lat] pairs (at least three)

    Returns:
        Feature whose geometry is a closed, counter-clockwise Polygon.
        Collinear input degenerates to a LineString spanning the extreme points.

    Raises:
        ValidationError: If fewer than three points or a point is malformed
        GeometryError: If all points coincide (nothing to enclose)

    Note:
        Duplicate points are ignored by the hull and do not change its shape.
    """
    coords = ingest_points(points)
    point_features = [point_feature(p) for p in coords]

    hull = MultiPoint([f.geometry for f in point_features]).convex_hull
    tag = GeometryType(hull.geom_type)

    if tag is GeometryType.POINT:
        raise GeometryError("Cannot build a boundary: all points are identical")

    if tag is GeometryType.POLYGON:
        hull = orient(hull, sign=1.0)
    else:
        logger.debug("Collinear points, hull degenerates to a LineString")

    logger.debug(f"Convex hull of {len(coords)} point(s): {hull.geom_type}")

    return Feature(geometry=hull)
