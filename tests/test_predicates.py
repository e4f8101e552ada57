"""Tests for the orientation and containment predicates."""

import pytest

from polytri.core.predicates import (
    signed_area,
    point_in_triangle,
    triangle_area_xy,
    point_in_triangle_xy,
    ring_signed_area,
)


class TestSignedArea:
    """Tests for signed_area."""

    def test_positive_turn(self):
        """Test a triple that turns counter-clockwise with y pointing down."""
        assert signed_area((0, 0), (0, 1), (1, 0)) == 1.0

    def test_negative_turn(self):
        """Test the reversed triple has the opposite sign."""
        assert signed_area((0, 0), (1, 0), (0, 1)) == -1.0

    def test_collinear(self):
        """Test collinear points have zero area."""
        assert signed_area((0, 0), (1, 1), (2, 2)) == 0.0

    def test_formula(self):
        """Test the exact expression on arbitrary points."""
        p1, p2, p3 = (1.5, -2.0), (4.0, 3.0), (-1.0, 0.5)
        expected = (p2[1] - p1[1]) * (p3[0] - p2[0]) - (p2[0] - p1[0]) * (p3[1] - p2[1])
        assert signed_area(p1, p2, p3) == pytest.approx(expected)

    def test_scalar_variant_matches(self):
        """Test the raw-coordinate variant returns the same value."""
        assert triangle_area_xy(0, 0, 0, 1, 1, 0) == signed_area((0, 0), (0, 1), (1, 0))


class TestPointInTriangle:
    """Tests for point_in_triangle."""

    # Positive signed area in the engine convention
    A, B, C = (0, 0), (0, 4), (4, 0)

    def test_interior_point(self):
        """Test a point strictly inside."""
        assert point_in_triangle(self.A, self.B, self.C, (1, 1))

    def test_exterior_point(self):
        """Test a point outside."""
        assert not point_in_triangle(self.A, self.B, self.C, (3, 3))
        assert not point_in_triangle(self.A, self.B, self.C, (-1, 1))

    def test_vertex_is_inside(self):
        """Test that vertices count as inside (boundary inclusive)."""
        assert point_in_triangle(self.A, self.B, self.C, self.A)
        assert point_in_triangle(self.A, self.B, self.C, self.C)

    def test_edge_point_is_inside(self):
        """Test that points on an edge count as inside."""
        assert point_in_triangle(self.A, self.B, self.C, (2, 2))
        assert point_in_triangle(self.A, self.B, self.C, (0, 2))

    def test_same_convention_as_signed_area(self):
        """Test that containment agrees with the signs of the sub-triangles."""
        p = (1, 2)
        assert signed_area(self.C, self.A, p) >= 0
        assert signed_area(self.A, self.B, p) >= 0
        assert signed_area(self.B, self.C, p) >= 0
        assert point_in_triangle(self.A, self.B, self.C, p)

    def test_opposite_winding_rejects_interior(self):
        """Test that a negatively wound triangle does not contain its interior."""
        assert not point_in_triangle(self.A, self.C, self.B, (1, 1))

    def test_scalar_variant_matches(self):
        """Test the raw-coordinate variant."""
        assert point_in_triangle_xy(0, 0, 0, 4, 4, 0, 1, 1)
        assert not point_in_triangle_xy(0, 0, 0, 4, 4, 0, 3, 3)


class TestRingSignedArea:
    """Tests for the shoelace helper."""

    def test_counter_clockwise_square(self):
        """Test a y-up counter-clockwise square is positive."""
        assert ring_signed_area([(0, 0), (10, 0), (10, 10), (0, 10)]) == 100.0

    def test_clockwise_square(self):
        """Test a y-up clockwise square is negative."""
        assert ring_signed_area([(0, 0), (0, 10), (10, 10), (10, 0)]) == -100.0

    def test_closed_ring(self):
        """Test a repeated closing vertex does not change the area."""
        assert ring_signed_area([(0, 0), (2, 0), (2, 2), (0, 2), (0, 0)]) == 4.0
