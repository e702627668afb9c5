"""
Zipcode Feature Loader

Reads per-zipcode GeoJSON area files (``<directory>/<zipcode>.geojson``) into
FeatureCollections. A zipcode without a file is reported as None so the merge
step can skip it; that is not an error.

Functions:
    validate_zipcodes: Check zipcode keys before touching the filesystem
    load_zipcode_file: Read one zipcode file (or None if missing)
    load_feature_collections: Read many zipcode files, preserving order
"""

import json
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

from boundary.errors import ValidationError
from boundary.features import FeatureCollection
from utils.logger import get_logger

logger = get_logger(__name__)

ZIPCODE_PATTERN = re.compile(r'[A-Za-z0-9-]+')
GEOJSON_SUFFIX = '.geojson'


def validate_zipcodes(zipcodes: Any) -> List[str]:
    """
    Validate zipcode keys.

    Keys may only contain letters, digits and '-', so they can never
    address a file outside the GeoJSON directory.

    Raises:
        ValidationError: If the list is empty or any key is malformed
    """
    if not isinstance(zipcodes, (list, tuple)) or len(zipcodes) == 0:
        raise ValidationError("Invalid input. Expected a non-empty array of zip codes.")

    for i, zipcode in enumerate(zipcodes):
        if not isinstance(zipcode, str) or not ZIPCODE_PATTERN.fullmatch(zipcode):
            raise ValidationError(f"Invalid zip code at index {i}: {zipcode!r}", index=i)

    return list(zipcodes)


def _drop_null_geometries(data: Dict[str, Any], zipcode: str) -> Dict[str, Any]:
    """Skip features without geometry, keeping everything else as read."""
    features = data.get('features') or []
    kept = [item for item in features if isinstance(item, dict) and item.get('geometry') is not None]

    if len(kept) != len(features):
        logger.warning(f"  - Skipping {len(features) - len(kept)} feature(s) without geometry "
                       f"for zipcode {zipcode}")

    return {**data, 'features': kept}


def load_zipcode_file(directory: Union[str, Path], zipcode: str) -> Optional[FeatureCollection]:
    """
    Load the GeoJSON area file for one zipcode.

    Properties are kept exactly as stored in the file (no type coercion).

    Args:
        directory: Directory holding ``<zipcode>.geojson`` files
        zipcode: Validated zipcode key

    Returns:
        FeatureCollection, or None if no file exists for the zipcode

    Raises:
        ValueError: If the file exists but is not a GeoJSON FeatureCollection
        GeometryError: If a feature geometry cannot be built
    """
    file_path = Path(directory) / f"{zipcode}{GEOJSON_SUFFIX}"

    if not file_path.exists():
        logger.info(f"  - No area file for zipcode {zipcode}, skipping")
        return None

    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ValueError(f"Failed to read GeoJSON file {file_path.name}: {e}") from e

    if not isinstance(data, dict) or data.get('type') != 'FeatureCollection':
        raise ValueError(f"GeoJSON file {file_path.name} is not a FeatureCollection")

    collection = FeatureCollection.from_geojson(_drop_null_geometries(data, zipcode))

    if collection.is_empty:
        logger.warning(f"  - Area file for zipcode {zipcode} contains no features")
    else:
        logger.debug(f"  - Loaded {len(collection)} feature(s) for zipcode {zipcode}")

    return collection


def load_feature_collections(directory: Union[str, Path],
                             zipcodes: Sequence[str]) -> List[Optional[FeatureCollection]]:
    """
    Load area files for every zipcode, one entry per zipcode, in order.

    Returns:
        List of FeatureCollection or None (missing file)

    Example:
        >>> load_feature_collections('geojson-files', ['10001', '99999'])
        [FeatureCollection(features=[...]), None]
    """
    zipcodes = validate_zipcodes(zipcodes)

    logger.info(f"Loading {len(zipcodes)} zipcode area file(s) from: {directory}")

    collections = [load_zipcode_file(directory, zipcode) for zipcode in zipcodes]

    found = sum(1 for c in collections if c is not None)
    logger.info(f"  - Found {found}/{len(zipcodes)} area file(s)")

    return collections
