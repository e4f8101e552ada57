"""Measurement helpers for checking a triangulation against its polygon.

The engine never validates its own output. These helpers give callers an
independent check: how much area the triangles cover compared to the polygon
(``deviation``) and, through shapely, whether the triangles overlap and
whether their union covers the polygon.
"""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Union

from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from .core.predicates import ring_signed_area, triangle_area_xy
from .polygon import Polygon, triangles_to_shapely


def triangles_area(
    data: Sequence[float],
    triangles: Sequence[int],
    dimensions: int = 2,
) -> float:
    """Sum of the unsigned areas of the triangles in ``triangles``."""
    total = 0.0
    for i in range(0, len(triangles) - 2, 3):
        a = triangles[i] * dimensions
        b = triangles[i + 1] * dimensions
        c = triangles[i + 2] * dimensions
        total += abs(triangle_area_xy(
            data[a], data[a + 1],
            data[b], data[b + 1],
            data[c], data[c + 1],
        ))
    return total / 2.0


def _ring_area(data: Sequence[float], start: int, end: int, dimensions: int) -> float:
    points = [(data[i], data[i + 1]) for i in range(start, end, dimensions)]
    return ring_signed_area(points)


def deviation(
    data: Sequence[float],
    hole_indices: Optional[Sequence[int]],
    dimensions: int,
    triangles: Sequence[int],
) -> float:
    """Relative difference between polygon area and triangulated area.

    The polygon area is the unsigned outer ring area minus the unsigned area
    of each hole. ``0.0`` means the triangles cover exactly the polygon's
    area; it does not prove they do not overlap.

    Examples:
        >>> data = [0, 0, 0, 2, 1, 3, 2, 2, 2, 0]
        >>> deviation(data, [], 2, [4, 0, 1, 4, 1, 2, 4, 2, 3])
        0.0
    """
    hole_indices = list(hole_indices or [])
    outer_len = hole_indices[0] * dimensions if hole_indices else len(data)

    polygon_area = abs(_ring_area(data, 0, outer_len, dimensions))
    for i, hole in enumerate(hole_indices):
        start = hole * dimensions
        end = hole_indices[i + 1] * dimensions if i < len(hole_indices) - 1 else len(data)
        polygon_area -= abs(_ring_area(data, start, end, dimensions))

    triangulated = triangles_area(data, triangles, dimensions)

    if polygon_area == 0 and triangulated == 0:
        return 0.0
    if polygon_area == 0:
        return float('inf')
    return abs((triangulated - polygon_area) / polygon_area)


def total_overlap_area(geometries: Iterable[BaseGeometry]) -> float:
    """Compute the total overlapping area within ``geometries``."""
    geometries = [geom for geom in geometries if geom and not geom.is_empty]
    if len(geometries) < 2:
        return 0.0
    union = unary_union(geometries)
    combined_area = sum(getattr(geom, "area", 0.0) for geom in geometries)
    return combined_area - getattr(union, "area", 0.0)


def measure_triangulation(
    polygon: Union[Polygon, ShapelyPolygon],
    triangles: Optional[Sequence[int]] = None,
    tolerance: float = 1e-9,
) -> Dict[str, Optional[float]]:
    """Return core metrics for a triangulation of ``polygon``.

    Args:
        polygon: Point-list or shapely polygon
        triangles: Flat triangle indices into the polygon's vertices; computed
            with :meth:`Polygon.triangulate` when omitted
        tolerance: Relative area tolerance for the ``covers`` flag

    Returns:
        Dict with ``triangle_count``, ``triangle_area``, ``polygon_area``,
        ``deviation``, ``overlap_area`` and ``covers``
    """
    if isinstance(polygon, BaseGeometry):
        polygon = Polygon.from_shapely(polygon)
    if triangles is None:
        triangles = polygon.triangulate()

    data, hole_indices = polygon.flatten()
    points = polygon.vertices()
    pieces = triangles_to_shapely([
        (points[triangles[i]], points[triangles[i + 1]], points[triangles[i + 2]])
        for i in range(0, len(triangles) - 2, 3)
    ])

    reference = polygon.to_shapely()
    polygon_area = reference.area
    triangle_area = triangles_area(data, triangles, 2)
    overlap = total_overlap_area(pieces.geoms)

    covers: Optional[bool] = None
    if polygon_area > 0:
        union = unary_union(list(pieces.geoms)) if len(pieces.geoms) else ShapelyPolygon()
        difference = reference.symmetric_difference(union).area
        covers = difference <= tolerance * polygon_area

    return {
        "triangle_count": len(triangles) // 3,
        "triangle_area": triangle_area,
        "polygon_area": polygon_area,
        "deviation": deviation(data, hole_indices, 2, triangles),
        "overlap_area": overlap,
        "covers": covers,
    }


__all__ = [
    "triangles_area",
    "deviation",
    "total_overlap_area",
    "measure_triangulation",
]
