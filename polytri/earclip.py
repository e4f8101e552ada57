"""Ear clipping over a single (hole-merged) vertex ring.

The clipper walks a candidate pointer around the ring. Whenever the candidate
is an ear, the triangle ``(prev, ear, next)`` is emitted, the ear is unlinked
and the walk continues at ``next``; otherwise the walk simply advances. The
loop ends once the ring is down to two nodes.

Each ear test scans the whole remaining ring, so the worst case is O(n^2).
"""

import inspect
import warnings
from typing import List, Union

from .core.errors import DegenerateTriangulationWarning, NoEarFoundError
from .core.predicates import point_in_triangle_xy, triangle_area_xy
from .core.ring import VertexArena
from .core.types import DegenerateStrategy


def is_ear(arena: VertexArena, ear: int) -> bool:
    """Check whether ``ear`` can be clipped from its ring.

    The triangle ``(prev, ear, next)`` must turn counter-clockwise and no
    other ring node may lie inside or on it.
    """
    x, y, nxt = arena.x, arena.y, arena.next
    a = arena.prev[ear]
    c = nxt[ear]
    ax, ay = x[a], y[a]
    bx, by = x[ear], y[ear]
    cx, cy = x[c], y[c]

    if triangle_area_xy(ax, ay, bx, by, cx, cy) <= 0:
        return False

    p = nxt[c]
    while p != a:
        if point_in_triangle_xy(ax, ay, bx, by, cx, cy, x[p], y[p]):
            return False
        p = nxt[p]

    return True


def clip_ears(
    arena: VertexArena,
    start: int,
    on_degenerate: Union[DegenerateStrategy, str] = DegenerateStrategy.RAISE,
) -> List[int]:
    """Triangulate the ring containing ``start`` by repeated ear removal.

    Args:
        arena: Arena holding the ring
        start: First candidate node
        on_degenerate: What to do when a full pass finds no ear

    Returns:
        Flat list of original vertex indices, three per triangle

    Raises:
        NoEarFoundError: If the ring stalls and ``on_degenerate`` is RAISE
    """
    strategy = DegenerateStrategy(on_degenerate)
    index, prev, nxt = arena.index, arena.prev, arena.next
    triangles: List[int] = []

    size = arena.ring_size(start)
    stalled = 0
    ear = start

    while prev[ear] != nxt[ear]:
        a = prev[ear]
        c = nxt[ear]

        if is_ear(arena, ear):
            triangles.append(index[a])
            triangles.append(index[ear])
            triangles.append(index[c])

            arena.remove(ear)
            size -= 1
            stalled = 0
            ear = c
            continue

        ear = c
        stalled += 1

        # a whole lap without a cut leaves the ring unchanged for good
        if stalled >= size:
            _handle_stall(arena, ear, triangles, strategy)
            break

    return triangles


def _handle_stall(
    arena: VertexArena,
    ear: int,
    triangles: List[int],
    strategy: DegenerateStrategy,
) -> None:
    remaining = arena.ring_indices(ear)
    message = (
        f"no ear found among {len(remaining)} remaining vertices "
        f"after {len(triangles) // 3} triangle(s); input is likely "
        f"self-intersecting, collinear or wound the wrong way"
    )

    if strategy == DegenerateStrategy.RAISE:
        raise NoEarFoundError(message, triangles=triangles, remaining=remaining)
    if strategy == DegenerateStrategy.WARN:
        warnings.warn(
            message,
            DegenerateTriangulationWarning,
            stacklevel=_caller_stacklevel(),
        )


def _caller_stacklevel() -> int:
    """Stack level of the first frame outside polytri, for ``warnings.warn``.

    Counted from the frame that calls ``warnings.warn``, so the warning
    points at user code whichever public entry point was used.
    """
    package = __name__.partition('.')[0]
    frame = inspect.currentframe()
    level = 0
    try:
        while frame is not None:
            module = frame.f_globals.get('__name__', '')
            if module != package and not module.startswith(package + '.'):
                break
            frame = frame.f_back
            level += 1
    finally:
        del frame
    return level


__all__ = [
    'is_ear',
    'clip_ears',
]
