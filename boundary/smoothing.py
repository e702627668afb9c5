"""
Boundary Smoothing Module

Optional post-processing of a unioned boundary by buffering it outward.
Smoothing is off unless a distance is configured; there is no default distance.
Distances are in degrees because boundaries stay in geographic lon/lat.
"""

from typing import Optional

from shapely.errors import GEOSException
from shapely.geometry.base import BaseGeometry

from boundary.errors import GeometryError, ValidationError
from utils.logger import get_logger

logger = get_logger(__name__)


def validate_smoothing_distance(distance: Optional[float]) -> Optional[float]:
    """
    Normalize a configured smoothing distance.

    Returns:
        The distance as float, or None when smoothing is disabled

    Raises:
        ValidationError: If the distance is not a positive number
    """
    if distance is None:
        return None

    if isinstance(distance, bool) or not isinstance(distance, (int, float)):
        raise ValidationError(f"Smoothing distance must be a number, got {distance!r}")

    if distance <= 0:
        raise ValidationError(f"Smoothing distance must be positive, got {distance} degrees")

    return float(distance)


def smooth_boundary(geom: BaseGeometry, distance: float) -> BaseGeometry:
    """
    Buffer a boundary geometry by ``distance`` degrees.

    Closes hairline gaps between neighbouring areas that do not share
    exactly coincident edges. Always returns a Polygon or MultiPolygon.
    """
    distance = validate_smoothing_distance(distance)

    logger.debug(f"Smoothing {geom.geom_type} with {distance} degree buffer")

    try:
        return geom.buffer(distance)
    except GEOSException as e:
        raise GeometryError(f"Smoothing buffer failed: {e}") from e
