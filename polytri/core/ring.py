"""Circular doubly-linked vertex rings stored in a dense arena.

Nodes are arena slots. Each slot holds the caller's vertex index, the x/y
coordinates and the slots of its predecessor and successor. Nodes never move
once created; hole merging and ear removal only rewrite ``prev``/``next``.
"""

from typing import Iterator, List, Sequence

from .errors import InvalidVertexCountError


class VertexArena:
    """Index-addressed storage for ring nodes.

    An arena belongs to a single triangulation call. Slots are allocated in
    creation order and are never freed; an unlinked node simply stops being
    reachable from the ring.
    """

    __slots__ = ('index', 'x', 'y', 'prev', 'next')

    def __init__(self) -> None:
        self.index: List[int] = []
        self.x: List[float] = []
        self.y: List[float] = []
        self.prev: List[int] = []
        self.next: List[int] = []

    def __len__(self) -> int:
        return len(self.index)

    def add(self, index: int, x: float, y: float) -> int:
        """Allocate a node linked to itself and return its slot."""
        slot = len(self.index)
        self.index.append(index)
        self.x.append(x)
        self.y.append(y)
        self.prev.append(slot)
        self.next.append(slot)
        return slot

    def link(self, a: int, b: int) -> None:
        """Make ``b`` the successor of ``a``."""
        self.next[a] = b
        self.prev[b] = a

    def remove(self, node: int) -> None:
        """Unlink ``node`` by joining its neighbours directly."""
        p = self.prev[node]
        n = self.next[node]
        self.next[p] = n
        self.prev[n] = p

    def iter_ring(self, start: int) -> Iterator[int]:
        """Yield every slot of the ring containing ``start`` exactly once."""
        node = start
        while True:
            yield node
            node = self.next[node]
            if node == start:
                break

    def ring_size(self, start: int) -> int:
        return sum(1 for _ in self.iter_ring(start))

    def ring_indices(self, start: int) -> List[int]:
        """Original vertex indices of the ring, in traversal order."""
        return [self.index[node] for node in self.iter_ring(start)]


def build_ring(
    arena: VertexArena,
    coords: Sequence[float],
    start: int,
    end: int,
    dimensions: int,
) -> int:
    """Create a circular ring from ``coords[start:end]`` and return its first slot.

    Args:
        arena: Arena receiving the new nodes
        coords: Full flat coordinate sequence
        start: Offset of the first coordinate of the span
        end: Offset one past the span (exclusive)
        dimensions: Stride between vertices; only x and y are read

    Returns:
        Slot of the node built from the first vertex of the span

    Raises:
        InvalidVertexCountError: If the span holds no vertex
    """
    if end <= start:
        raise InvalidVertexCountError(
            f"ring span [{start}, {end}) contains no vertices"
        )

    first = last = None
    for i in range(start, end, dimensions):
        node = arena.add(i // dimensions, coords[i], coords[i + 1])
        if last is None:
            first = node
        else:
            arena.link(last, node)
        last = node

    arena.link(last, first)
    return first


__all__ = [
    'VertexArena',
    'build_ring',
]
