"""
Configuration loading for ZipBoundary.

This module handles loading and validation of the boundary service JSON configuration.

Constants:
    PROJECT_ROOT: Root directory of the project
    CONFIG_DIR: Configuration files directory
    DEFAULT_CONFIG_PATH: Bundled configuration file
    CONFIG_ENV_VAR: Environment variable overriding the configuration path

Functions:
    load_config: Load and validate configuration from JSON
    load_boundary_settings: Merge boundary settings over defaults
"""

import json
import os
from pathlib import Path
from typing import Dict, Optional, Union

# Project paths
PROJECT_ROOT = Path(__file__).parent.parent
CONFIG_DIR = PROJECT_ROOT / 'config'
DEFAULT_CONFIG_PATH = CONFIG_DIR / 'boundary_config.json'
CONFIG_ENV_VAR = 'ZIPBOUNDARY_CONFIG'

DEFAULT_SETTINGS = {
    'geojson_directory': 'geojson-files',
    'host': '127.0.0.1',
    'port': 8002,
    'max_zipcodes': 500,
    'smoothing_distance_degrees': None,
}


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict:
    """
    Load service configuration from JSON file.

    Resolution order: explicit ``config_path``, then the ``ZIPBOUNDARY_CONFIG``
    environment variable, then ``config/boundary_config.json``.

    Returns:
    --------
    Dict
        Configuration dictionary with a 'settings' key

    Raises:
    -------
    FileNotFoundError
        If configuration file doesn't exist
    json.JSONDecodeError
        If configuration file contains invalid JSON
    KeyError
        If required configuration keys are missing
    """
    if config_path is None:
        config_path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        config = json.load(f)

    if 'settings' not in config:
        raise KeyError("Configuration missing required 'settings' key")

    return config


def load_boundary_settings(config: Dict = None) -> Dict:
    """
    Load boundary service settings from configuration.

    Args:
        config: Configuration dictionary (optional, will load if not provided)

    Returns:
        Dictionary with boundary settings

    Defaults:
        - geojson_directory: 'geojson-files' (relative paths resolve against PROJECT_ROOT)
        - host: '127.0.0.1'
        - port: 8002
        - max_zipcodes: 500
        - smoothing_distance_degrees: None (smoothing disabled)

    Note:
        Keys missing from the file fall back to defaults, so partial
        config files stay valid.
    """
    if config is None:
        config = load_config()

    result = {**DEFAULT_SETTINGS, **config.get('settings', {})}

    directory = Path(result['geojson_directory'])
    if not directory.is_absolute():
        directory = PROJECT_ROOT / directory
    result['geojson_directory'] = directory

    result['port'] = int(result['port'])
    result['max_zipcodes'] = int(result['max_zipcodes'])

    return result
