"""Exception and warning hierarchy for polytri.

Every exception raised by the library derives from :class:`PolytriError`.
Input problems are reported as :class:`ValidationError` subclasses (which are
also ``ValueError``), while failures of the ear clipping loop itself are
reported as :class:`TriangulationError` subclasses.
"""

from typing import List, Optional


class PolytriError(Exception):
    """Base class for all polytri errors."""
    pass


class ValidationError(PolytriError, ValueError):
    """Raised when the flat input passed to the engine is malformed."""
    pass


class InvalidVertexCountError(ValidationError):
    """Raised when a ring span yields zero vertices or the coordinate
    count is not a multiple of the stride."""
    pass


class HoleIndexOutOfRangeError(ValidationError):
    """Raised when a hole start index lies outside the vertex list."""

    def __init__(self, index: int, vertex_count: int):
        self.index = index
        self.vertex_count = vertex_count
        super().__init__(
            f"hole index {index} out of range for {vertex_count} vertices"
        )


class HoleIndicesNotIncreasingError(ValidationError):
    """Raised when hole start indices are not strictly increasing."""
    pass


class DimensionTooSmallError(ValidationError):
    """Raised when the coordinate stride is smaller than 2."""

    def __init__(self, dimensions: int):
        self.dimensions = dimensions
        super().__init__(f"dimensions must be >= 2, got {dimensions}")


class TriangulationError(PolytriError):
    """Raised when the ear clipper cannot finish."""
    pass


class NoEarFoundError(TriangulationError):
    """Raised when a full pass over the remaining ring finds no ear.

    Attributes:
        triangles: Flat indices emitted before the loop stalled
        remaining: Original vertex indices still left in the ring
    """

    def __init__(
        self,
        message: str,
        triangles: Optional[List[int]] = None,
        remaining: Optional[List[int]] = None,
    ):
        super().__init__(message)
        self.triangles = list(triangles or [])
        self.remaining = list(remaining or [])


class DegenerateTriangulationWarning(UserWarning):
    """Issued when a triangulation stops early on degenerate input."""
    pass


__all__ = [
    'PolytriError',
    'ValidationError',
    'InvalidVertexCountError',
    'HoleIndexOutOfRangeError',
    'HoleIndicesNotIncreasingError',
    'DimensionTooSmallError',
    'TriangulationError',
    'NoEarFoundError',
    'DegenerateTriangulationWarning',
]
