"""Common geometry conversion utilities.

This module converts between nested ring representations, shapely
geometries and the flat ``(data, hole_indices, dimensions)`` format the
triangulation engine consumes.
"""

from typing import List, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon, MultiPolygon, GeometryCollection
from shapely.geometry.base import BaseGeometry


def to_single_polygon(geometry: BaseGeometry) -> Polygon:
    """Convert geometry to a single Polygon by taking the largest piece.

    If the geometry is already a Polygon, returns it unchanged.
    If it's a MultiPolygon, returns the largest polygon by area.
    If it's a GeometryCollection, extracts polygons and returns the largest.

    Args:
        geometry: Input geometry

    Returns:
        Single Polygon (largest if multiple pieces exist, empty otherwise)

    Examples:
        >>> poly = Polygon([(0, 0), (1, 0), (1, 1), (0, 1)])
        >>> result = to_single_polygon(poly)
        >>> result.equals(poly)
        True
    """
    if isinstance(geometry, Polygon):
        return geometry
    elif isinstance(geometry, MultiPolygon):
        return max(geometry.geoms, key=lambda p: p.area)
    elif isinstance(geometry, GeometryCollection):
        polygons = []
        for g in geometry.geoms:
            if isinstance(g, Polygon):
                polygons.append(g)
            elif isinstance(g, MultiPolygon):
                polygons.extend(g.geoms)
        if polygons:
            return max(polygons, key=lambda p: p.area)
    return Polygon()


def is_ring_closed(
    coords: np.ndarray,
    tolerance: float = 1e-10
) -> bool:
    """Check if coordinate ring is closed (first == last).

    Args:
        coords: Coordinate array (Nx2 or Nx3)
        tolerance: Tolerance for coordinate comparison

    Returns:
        True if ring has at least two vertices and its first point equals
        its last point within tolerance

    Examples:
        >>> is_ring_closed(np.array([[0, 0], [1, 0], [1, 1], [0, 0]]))
        True
        >>> is_ring_closed(np.array([[0, 0], [1, 0], [1, 1]]))
        False
    """
    if len(coords) < 2:
        return False
    return bool(np.allclose(coords[0], coords[-1], atol=tolerance, rtol=0.0))


def open_ring(coords: Sequence[Sequence[float]], tolerance: float = 1e-10) -> np.ndarray:
    """Return ring coordinates without a repeated closing vertex."""
    array = np.asarray(coords, dtype=float)
    if array.ndim != 2:
        array = array.reshape(-1, 2)
    if is_ring_closed(array, tolerance):
        return array[:-1]
    return array


def flatten(rings: Sequence[Sequence[Sequence[float]]]) -> Tuple[List[float], List[int], int]:
    """Flatten nested rings into the engine's flat input format.

    The first ring is the outer boundary; every following ring is a hole.
    The number of dimensions is taken from the first vertex of the first
    ring and every vertex must have that many components.

    Args:
        rings: Sequence of rings, each a sequence of coordinate tuples

    Returns:
        Tuple of (flat coordinates, hole start indices, dimensions)

    Examples:
        >>> flatten([[(0, 0), (0, 10), (10, 0)], [(1, 1), (2, 1), (1, 2)]])
        ([0.0, 0.0, 0.0, 10.0, 10.0, 0.0, 1.0, 1.0, 2.0, 1.0, 1.0, 2.0], [3], 2)
    """
    if not rings or not len(rings[0]):
        return [], [], 2

    dimensions = len(rings[0][0])
    data: List[float] = []
    hole_indices: List[int] = []
    vertex_count = 0

    for i, ring in enumerate(rings):
        array = np.asarray(ring, dtype=float).reshape(-1, dimensions)
        if i > 0:
            hole_indices.append(vertex_count)
        data.extend(array.ravel().tolist())
        vertex_count += len(array)

    return data, hole_indices, dimensions


__all__ = [
    'to_single_polygon',
    'is_ring_closed',
    'open_ring',
    'flatten',
]
