"""Core types and utilities for polytri.

This module provides the vertex arena, geometric predicates, enums,
exceptions, and conversion helpers used throughout the library.
"""

from .types import (
    DegenerateStrategy,
)

from .errors import (
    PolytriError,
    ValidationError,
    InvalidVertexCountError,
    HoleIndexOutOfRangeError,
    HoleIndicesNotIncreasingError,
    DimensionTooSmallError,
    TriangulationError,
    NoEarFoundError,
    DegenerateTriangulationWarning,
)

from .predicates import (
    signed_area,
    point_in_triangle,
    ring_signed_area,
)

from .ring import (
    VertexArena,
    build_ring,
)

__all__ = [
    # Strategy enums
    'DegenerateStrategy',

    # Exceptions
    'PolytriError',
    'ValidationError',
    'InvalidVertexCountError',
    'HoleIndexOutOfRangeError',
    'HoleIndicesNotIncreasingError',
    'DimensionTooSmallError',
    'TriangulationError',
    'NoEarFoundError',
    'DegenerateTriangulationWarning',

    # Predicates
    'signed_area',
    'point_in_triangle',
    'ring_signed_area',

    # Rings
    'VertexArena',
    'build_ring',
]
