"""
Boundary Error Types

ValidationError marks caller input that breaks a precondition (client error).
GeometryError marks a union or hull that could not be computed (server error).
"""

from typing import Optional


class BoundaryError(Exception):
    """Base class for all boundary computation failures."""


class ValidationError(BoundaryError, ValueError):
    """Caller-supplied input violates a precondition."""

    def __init__(self, message: str, index: Optional[int] = None):
        super().__init__(message)
        self.index = index


class GeometryError(BoundaryError):
    """
    A geometric operation failed on degenerate or invalid geometry.

    Attributes:
        step: 1-based union step that failed, if the failure happened in the fold
        index: Index of the offending feature or point, if known
    """

    def __init__(self, message: str, step: Optional[int] = None, index: Optional[int] = None):
        super().__init__(message)
        self.step = step
        self.index = index
