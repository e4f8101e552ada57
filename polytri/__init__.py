"""Polytri - Ear clipping triangulation for polygons with holes.

This library decomposes simple 2D polygons, optionally containing holes,
into triangles whose vertices are taken from the polygon's own vertex list.
The engine works on flat coordinate arrays; a point-list ``Polygon`` wrapper
and shapely conversions sit on top of it.
"""


# Triangulation
from .engine import triangulate, validate_input

# Point-list polygons
from .polygon import Point, Polygon, triangles_to_shapely

# Metrics
from .metrics import deviation, measure_triangulation, triangles_area

# Conversion helpers
from .core.geometry_utils import flatten

# Predicates
from .core.predicates import signed_area, point_in_triangle

# Core types (enums)
from .core import DegenerateStrategy

# Core exceptions
from .core import (
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

__all__ = [

    # Triangulation
    'triangulate',
    'validate_input',

    # Point-list polygons
    'Point',
    'Polygon',
    'triangles_to_shapely',

    # Metrics
    'deviation',
    'measure_triangulation',
    'triangles_area',

    # Conversion helpers
    'flatten',

    # Predicates
    'signed_area',
    'point_in_triangle',

    # Core types (enums)
    'DegenerateStrategy',

    # Core exceptions
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
