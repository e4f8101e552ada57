"""Hole elimination: splice each hole ring into the outer ring.

Holes are merged one at a time, in the order given by the caller. For every
hole a bridge vertex is searched on the current combined ring and the two
rings are joined with a single relink at that vertex and the hole's leftmost
vertex. No vertex is duplicated, so the bridge endpoints appear only once in
the merged ring.
"""

from typing import Optional, Sequence, Tuple

from .core.predicates import point_in_triangle_xy
from .core.ring import VertexArena, build_ring


def leftmost_node(arena: VertexArena, start: int) -> int:
    """Return the node with the smallest x; the earliest one wins ties."""
    x = arena.x
    leftmost = start
    for node in arena.iter_ring(start):
        if x[node] < x[leftmost]:
            leftmost = node
    return leftmost


def find_hole_bridge(
    arena: VertexArena,
    outer: int,
    hole: int,
) -> Tuple[Optional[int], int]:
    """Find the combined-ring vertex that the hole should connect to.

    A ring node ``m`` is admissible when it lies strictly to the right of the
    hole's leftmost vertex and the leftmost vertex's predecessor lies inside
    or on triangle ``(leftmost, m, m.next)``. The admissible node closest to
    the leftmost vertex wins; ties keep the first one visited from ``outer``.

    Args:
        arena: Arena holding both rings
        outer: Starting node of the combined ring
        hole: Any node of the hole ring

    Returns:
        Tuple of (bridge node or None if nothing is admissible, hole leftmost node)
    """
    x, y, nxt = arena.x, arena.y, arena.next

    leftmost = leftmost_node(arena, hole)
    hx, hy = x[leftmost], y[leftmost]
    hp = arena.prev[leftmost]
    px, py = x[hp], y[hp]

    best = None
    best_distance = float('inf')

    for m in arena.iter_ring(outer):
        mx, my = x[m], y[m]
        if mx <= hx:
            continue
        n = nxt[m]
        if not point_in_triangle_xy(hx, hy, mx, my, x[n], y[n], px, py):
            continue
        distance = (mx - hx) * (mx - hx) + (my - hy) * (my - hy)
        if distance < best_distance:
            best_distance = distance
            best = m

    return best, leftmost


def splice_hole(arena: VertexArena, outer_node: int, hole_node: int) -> None:
    """Join the hole ring into the combined ring at the two given nodes.

    ``outer_node`` is followed by ``hole_node``; the hole's former last node
    is followed by ``outer_node``'s former successor.
    """
    bridge_next = arena.next[outer_node]
    hole_prev = arena.prev[hole_node]

    arena.link(outer_node, hole_node)
    arena.link(hole_prev, bridge_next)


def eliminate_holes(
    arena: VertexArena,
    coords: Sequence[float],
    hole_indices: Sequence[int],
    outer: int,
    dimensions: int,
) -> int:
    """Build every hole ring and splice it into the outer ring.

    Args:
        arena: Arena holding the outer ring
        coords: Full flat coordinate sequence
        hole_indices: Start vertex index of each hole, strictly increasing
        outer: Starting node of the outer ring
        dimensions: Coordinate stride

    Returns:
        Starting node of the merged ring (unchanged ``outer``)

    Notes:
        When no admissible bridge vertex exists the hole is attached to
        ``outer`` itself. The merged ring may then overlap the hole region
        and the triangulation may not cover the polygon exactly.
    """
    vertex_count = len(coords) // dimensions

    for i, hole_start in enumerate(hole_indices):
        start = hole_start * dimensions
        if i < len(hole_indices) - 1:
            end = hole_indices[i + 1] * dimensions
        else:
            end = vertex_count * dimensions

        hole = build_ring(arena, coords, start, end, dimensions)
        bridge, leftmost = find_hole_bridge(arena, outer, hole)
        if bridge is None:
            bridge = outer
        splice_hole(arena, bridge, leftmost)

    return outer


__all__ = [
    'leftmost_node',
    'find_hole_bridge',
    'splice_hole',
    'eliminate_holes',
]
