"""
Configuration package for ZipBoundary.

This package contains configuration loading and defaults.

Modules:
    config_loader: Load service settings from JSON
"""

__version__ = '1.0.0'
