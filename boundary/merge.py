"""
Feature Merge Module

Flattens several FeatureCollections into one. Absent collections (None, a
zipcode with no backing file) are skipped silently.
"""

from typing import Optional, Sequence

from boundary.features import FeatureCollection
from utils.logger import get_logger

logger = get_logger(__name__)


def merge_feature_collections(collections: Sequence[Optional[FeatureCollection]]) -> FeatureCollection:
    """
    Concatenate the features of all present collections, preserving order.

    Args:
        collections: Ordered FeatureCollections; None entries mean "not found"

    Returns:
        One FeatureCollection (empty if nothing was present)

    Example:
        Input: [FC(a, b), None, FC(c)]
        Output: FC(a, b, c)
    """
    present = [fc for fc in collections if fc is not None]
    features = [feature for fc in present for feature in fc.features]

    logger.debug(f"Merged {len(present)}/{len(collections)} collection(s) into {len(features)} feature(s)")

    return FeatureCollection(features=features)
