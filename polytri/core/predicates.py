"""Orientation and containment predicates used by the ear clipper.

All predicates share one winding convention: a positive signed area means a
counter-clockwise turn with the y axis pointing down (screen space). In a
y-up frame the same triple turns clockwise. Arithmetic is plain floating
point; there are no exact or adaptive predicates here.
"""

from typing import Sequence, Tuple

Point2D = Tuple[float, float]


def triangle_area_xy(
    x1: float, y1: float,
    x2: float, y2: float,
    x3: float, y3: float,
) -> float:
    """Signed area (times two) of the ordered triple, from raw coordinates."""
    return (y2 - y1) * (x3 - x2) - (x2 - x1) * (y3 - y2)


def point_in_triangle_xy(
    ax: float, ay: float,
    bx: float, by: float,
    cx: float, cy: float,
    px: float, py: float,
) -> bool:
    """Boundary-inclusive containment test from raw coordinates.

    Evaluates the edge functions of ``c->a``, ``a->b`` and ``b->c`` against
    ``p``; each is ``triangle_area_xy(u, v, p)``.
    """
    return (
        (ay - cy) * (px - ax) - (ax - cx) * (py - ay) >= 0
        and (by - ay) * (px - bx) - (bx - ax) * (py - by) >= 0
        and (cy - by) * (px - cx) - (cx - bx) * (py - cy) >= 0
    )


def signed_area(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> float:
    """Return the signed area (times two) of triangle ``(p1, p2, p3)``.

    Args:
        p1: First vertex as an ``(x, y)`` pair
        p2: Second vertex
        p3: Third vertex

    Returns:
        ``(p2.y - p1.y) * (p3.x - p2.x) - (p2.x - p1.x) * (p3.y - p2.y)``.
        Positive for a counter-clockwise turn in the engine convention,
        zero for collinear points.

    Examples:
        >>> signed_area((0, 0), (0, 1), (1, 0))
        1.0
        >>> signed_area((0, 0), (1, 1), (2, 2))
        0.0
    """
    return float(triangle_area_xy(p1[0], p1[1], p2[0], p2[1], p3[0], p3[1]))


def point_in_triangle(
    a: Sequence[float],
    b: Sequence[float],
    c: Sequence[float],
    p: Sequence[float],
) -> bool:
    """Check whether ``p`` lies inside or on triangle ``(a, b, c)``.

    The triangle must be counter-clockwise in the engine convention
    (``signed_area(a, b, c) > 0``); for the opposite winding only points on
    a degenerate boundary can satisfy the test.

    Examples:
        >>> point_in_triangle((0, 0), (0, 1), (1, 0), (0.2, 0.2))
        True
        >>> point_in_triangle((0, 0), (0, 1), (1, 0), (0, 0))
        True
        >>> point_in_triangle((0, 0), (0, 1), (1, 0), (2, 2))
        False
    """
    return point_in_triangle_xy(a[0], a[1], b[0], b[1], c[0], c[1], p[0], p[1])


def ring_signed_area(points: Sequence[Sequence[float]]) -> float:
    """Shoelace signed area of a ring given as ``(x, y)`` pairs.

    Positive for counter-clockwise rings in a y-up frame. The ring may be
    open or closed; a repeated closing vertex adds nothing to the sum.
    """
    total = 0.0
    n = len(points)
    for i in range(n):
        x0, y0 = points[i][0], points[i][1]
        x1, y1 = points[(i + 1) % n][0], points[(i + 1) % n][1]
        total += x0 * y1 - x1 * y0
    return total / 2.0


__all__ = [
    'Point2D',
    'signed_area',
    'point_in_triangle',
    'triangle_area_xy',
    'point_in_triangle_xy',
    'ring_signed_area',
]
