"""Point-list polygon wrapper around the flat triangulation engine.

:class:`Polygon` keeps an outer ring and hole rings as lists of
:class:`Point` and converts them to and from the flat coordinate format,
and to and from shapely geometries.
"""

from dataclasses import dataclass, field
from typing import List, NamedTuple, Sequence, Tuple, Union

from shapely.geometry import MultiPolygon
from shapely.geometry import Polygon as ShapelyPolygon
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient as _orient

from .core.errors import InvalidVertexCountError
from .core.geometry_utils import open_ring, to_single_polygon
from .engine import triangulate as _triangulate

PointLike = Union["Point", Sequence[float]]


class Point(NamedTuple):
    """A 2D point."""

    x: float
    y: float


def _as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    return Point(float(value[0]), float(value[1]))


def _shoelace(ring: Sequence[Point]) -> float:
    total = 0.0
    n = len(ring)
    for i in range(n):
        j = (i + 1) % n
        total += ring[i].x * ring[j].y - ring[j].x * ring[i].y
    return total


@dataclass
class Polygon:
    """Polygon given as an outer ring of points plus optional hole rings.

    Rings are open (no repeated closing point). For a correct triangulation
    the outer ring must be counter-clockwise and the holes clockwise in the
    engine convention; :meth:`from_shapely` produces that winding.

    Examples:
        >>> square = Polygon([(0, 0), (0, 1), (1, 1), (1, 0)])
        >>> square.triangulate()
        [0, 1, 2, 0, 2, 3]
        >>> len(square.triangles())
        2
    """

    outer_ring: List[Point]
    holes: List[List[Point]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.outer_ring = [_as_point(p) for p in self.outer_ring]
        self.holes = [[_as_point(p) for p in hole] for hole in self.holes]

    def vertices(self) -> List[Point]:
        """All points, outer ring first, then each hole in order."""
        points = list(self.outer_ring)
        for hole in self.holes:
            points.extend(hole)
        return points

    def flatten(self) -> Tuple[List[float], List[int]]:
        """Return ``(data, hole_indices)`` for :func:`polytri.triangulate`.

        Raises:
            InvalidVertexCountError: If a hole ring has no points
        """
        data: List[float] = []
        hole_indices: List[int] = []

        for point in self.outer_ring:
            data.append(point.x)
            data.append(point.y)

        for i, hole in enumerate(self.holes):
            if not hole:
                raise InvalidVertexCountError(f"hole {i} has no vertices")
            hole_indices.append(len(data) // 2)
            for point in hole:
                data.append(point.x)
                data.append(point.y)

        return data, hole_indices

    def triangulate(self, **kwargs) -> List[int]:
        """Triangulate the polygon; keyword arguments go to the engine.

        Returns:
            Flat triangle indices into :meth:`vertices`
        """
        data, hole_indices = self.flatten()
        return _triangulate(data, hole_indices, 2, **kwargs)

    def triangles(self, **kwargs) -> List[Tuple[Point, Point, Point]]:
        """Triangulate and map the indices back to point triples."""
        indices = self.triangulate(**kwargs)
        points = self.vertices()
        return [
            (points[indices[i]], points[indices[i + 1]], points[indices[i + 2]])
            for i in range(0, len(indices) - 2, 3)
        ]

    def area(self) -> float:
        """Shoelace area of the outer ring minus the shoelace area of each hole.

        Signed areas are used as they are: positive for counter-clockwise
        rings in a y-up frame. The result is only the usual polygon area when
        the outer ring and the holes share the same winding.
        """
        total = _shoelace(self.outer_ring)
        for hole in self.holes:
            total -= _shoelace(hole)
        return total / 2.0

    @classmethod
    def from_shapely(cls, geometry: BaseGeometry, orient: bool = True) -> "Polygon":
        """Build a polygon from a shapely geometry.

        Args:
            geometry: Polygon, MultiPolygon or GeometryCollection; for the
                latter two the largest polygon is used
            orient: Rewind rings for the engine, i.e. exterior clockwise and
                interiors counter-clockwise in shapely's y-up frame
                (default: True)

        Returns:
            Polygon with open rings
        """
        polygon = to_single_polygon(geometry)
        if polygon.is_empty:
            return cls([])
        if orient:
            polygon = _orient(polygon, sign=-1.0)

        outer = [Point(x, y) for x, y in open_ring(polygon.exterior.coords)[:, :2].tolist()]
        holes = [
            [Point(x, y) for x, y in open_ring(interior.coords)[:, :2].tolist()]
            for interior in polygon.interiors
        ]
        return cls(outer, holes)

    def to_shapely(self) -> ShapelyPolygon:
        """Return the equivalent shapely polygon."""
        if not self.outer_ring:
            return ShapelyPolygon()
        return ShapelyPolygon(
            [(p.x, p.y) for p in self.outer_ring],
            holes=[[(p.x, p.y) for p in hole] for hole in self.holes],
        )


def triangles_to_shapely(triangles: Sequence[Sequence[PointLike]]) -> MultiPolygon:
    """Convert point triples into a shapely MultiPolygon of triangles."""
    return MultiPolygon([
        ShapelyPolygon([tuple(_as_point(p)) for p in triangle])
        for triangle in triangles
    ])


__all__ = [
    'Point',
    'Polygon',
    'triangles_to_shapely',
]
