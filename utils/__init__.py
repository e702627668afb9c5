"""
Utility modules for ZipBoundary.

This package contains helpers used throughout the application.

Modules:
    logger: Logging configuration and setup
"""

__version__ = '1.0.0'
