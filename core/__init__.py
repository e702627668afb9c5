"""
Core I/O modules for ZipBoundary.

This package contains the collaborators that feed the boundary pipelines.

Modules:
    feature_loader: Read per-zipcode GeoJSON area files
"""

__version__ = '1.0.0'
