"""Tests for hole bridging and splicing."""

from polytri.core.ring import VertexArena, build_ring
from polytri.holes import (
    eliminate_holes,
    find_hole_bridge,
    leftmost_node,
    splice_hole,
)

# Outer ring with two admissible bridge candidates for the hole below:
# slot 0 (8, 4) is visited first, slot 2 (4, 2) is closer.
BRIDGE_OUTER = [8, 4, 8, -2, 4, 2, 4, 0]
BRIDGE_HOLE = [0, 0, 1, -1, 2, 0.5]

# Engine-oriented square with a concentric square hole
SQUARE_WITH_HOLE = [0, 0, 0, 10, 10, 10, 10, 0, 2, 2, 8, 2, 8, 8, 2, 8]


def _two_rings(outer, hole):
    arena = VertexArena()
    coords = outer + hole
    outer_node = build_ring(arena, coords, 0, len(outer), 2)
    hole_node = build_ring(arena, coords, len(outer), len(coords), 2)
    return arena, outer_node, hole_node


class TestLeftmostNode:
    """Tests for leftmost_node."""

    def test_first_minimum_wins(self):
        """Test ties on x keep the earliest node."""
        arena = VertexArena()
        start = build_ring(arena, [2, 2, 8, 2, 8, 8, 2, 8], 0, 8, 2)
        assert leftmost_node(arena, start) == 0

    def test_minimum_in_middle(self):
        """Test the minimum is found anywhere in the ring."""
        arena = VertexArena()
        start = build_ring(arena, [5, 0, 3, 1, -1, 4, 0, 0], 0, 8, 2)
        assert leftmost_node(arena, start) == 2


class TestFindHoleBridge:
    """Tests for find_hole_bridge."""

    def test_nearest_admissible_vertex(self):
        """Test the closest admissible vertex wins over an earlier one."""
        arena, outer, hole = _two_rings(BRIDGE_OUTER, BRIDGE_HOLE)
        bridge, leftmost = find_hole_bridge(arena, outer, hole)

        assert leftmost == 4
        assert bridge == 2

    def test_single_admissible_vertex(self):
        """Test a lone admissible vertex is chosen even if far away."""
        outer = [8, 4, 8, -2, 20, 2, 20, 0]
        arena, outer_node, hole = _two_rings(outer, BRIDGE_HOLE)
        bridge, _ = find_hole_bridge(arena, outer_node, hole)

        assert bridge == 0

    def test_no_admissible_vertex(self):
        """Test None is returned when no vertex qualifies."""
        arena, outer, hole = _two_rings(SQUARE_WITH_HOLE[:8], SQUARE_WITH_HOLE[8:])
        bridge, leftmost = find_hole_bridge(arena, outer, hole)

        assert bridge is None
        assert leftmost == 4

    def test_vertices_left_of_hole_are_skipped(self):
        """Test candidates must lie strictly right of the leftmost vertex."""
        outer = [0, 4, 0, -2, -4, 2, -4, 0]
        arena, outer_node, hole = _two_rings(outer, BRIDGE_HOLE)
        bridge, _ = find_hole_bridge(arena, outer_node, hole)

        assert bridge is None


class TestSpliceHole:
    """Tests for splice_hole."""

    def test_splice_order(self):
        """Test the hole is inserted after the bridge vertex."""
        arena, outer, hole = _two_rings(BRIDGE_OUTER, BRIDGE_HOLE)
        splice_hole(arena, 2, 4)

        assert arena.ring_indices(outer) == [0, 1, 2, 4, 5, 6, 3]
        assert arena.prev[4] == 2
        assert arena.prev[3] == 6

    def test_no_vertex_duplicated(self):
        """Test every vertex appears once and the ring stays consistent."""
        arena, outer, hole = _two_rings(BRIDGE_OUTER, BRIDGE_HOLE)
        splice_hole(arena, 2, 4)

        nodes = list(arena.iter_ring(outer))
        assert sorted(nodes) == list(range(7))
        for node in nodes:
            assert arena.prev[arena.next[node]] == node


class TestEliminateHoles:
    """Tests for eliminate_holes."""

    def test_unresolved_bridge_uses_start_vertex(self):
        """Test a hole without an admissible bridge joins the start vertex."""
        arena = VertexArena()
        outer = build_ring(arena, SQUARE_WITH_HOLE, 0, 8, 2)
        merged = eliminate_holes(arena, SQUARE_WITH_HOLE, [4], outer, 2)

        assert merged == outer
        assert arena.ring_indices(merged) == [0, 4, 5, 6, 7, 1, 2, 3]

    def test_resolved_bridge(self):
        """Test a hole is spliced at the chosen bridge vertex."""
        coords = BRIDGE_OUTER + BRIDGE_HOLE
        arena = VertexArena()
        outer = build_ring(arena, coords, 0, 8, 2)
        eliminate_holes(arena, coords, [4], outer, 2)

        assert arena.ring_indices(outer) == [0, 1, 2, 4, 5, 6, 3]

    def test_multiple_holes_all_merged(self):
        """Test every hole vertex ends up in the merged ring exactly once."""
        coords = [
            0, 0, 0, 20, 20, 20, 20, 0,
            2, 2, 6, 2, 6, 6, 2, 6,
            10, 10, 14, 10, 14, 14, 10, 14,
        ]
        arena = VertexArena()
        outer = build_ring(arena, coords, 0, 8, 2)
        eliminate_holes(arena, coords, [4, 8], outer, 2)

        indices = arena.ring_indices(outer)
        assert sorted(indices) == list(range(12))
        assert arena.ring_size(outer) == 12

    def test_higher_dimensions(self):
        """Test hole spans are scaled by the stride."""
        coords = []
        for x, y in zip(SQUARE_WITH_HOLE[0::2], SQUARE_WITH_HOLE[1::2]):
            coords.extend([x, y, 1.0])
        arena = VertexArena()
        outer = build_ring(arena, coords, 0, 12, 3)
        eliminate_holes(arena, coords, [4], outer, 3)

        assert arena.ring_indices(outer) == [0, 4, 5, 6, 7, 1, 2, 3]
