"""Tests for signed area and point-in-ring classification."""

import numpy as np

from ring_topology import (
    ArcStore,
    PointLocation,
    classify_point,
    is_clockwise,
    ring_area,
    ring_test_point,
    signed_area,
)


def create_square_store():
    """Clockwise 10x10 square as arc 0, triangle as arc 1."""
    return ArcStore.from_arcs(
        [
            [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)],
            [(0, 0), (4, 8), (8, 0), (0, 0)],
        ]
    )


class TestSignedArea:
    """Tests for the shoelace area and its sign convention."""

    def test_clockwise_is_positive(self):
        coords = np.array([(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)], dtype=float)
        assert signed_area(coords) == 100.0

    def test_counter_clockwise_is_negative(self):
        coords = np.array([(0, 0), (10, 0), (10, 10), (0, 10), (0, 0)], dtype=float)
        assert signed_area(coords) == -100.0

    def test_degenerate(self):
        """Fewer than three vertices has no area."""
        assert signed_area(np.array([(0, 0), (1, 1)], dtype=float)) == 0.0
        assert signed_area(np.empty((0, 2))) == 0.0

    def test_ring_area_both_directions(self):
        """Reversing a ring negates its area."""
        arcs = create_square_store()
        assert ring_area([0], arcs) == 100.0
        assert ring_area([~0], arcs) == -100.0

    def test_triangle_area(self):
        arcs = create_square_store()
        assert ring_area([1], arcs) == 32.0


class TestIsClockwise:
    """Tests for chirality from area."""

    def test_signs(self):
        assert is_clockwise(5.0)
        assert not is_clockwise(-5.0)

    def test_zero_counts_as_clockwise(self):
        assert is_clockwise(0.0)
        assert is_clockwise(-0.0)


class TestClassifyPoint:
    """Tests for point-in-ring classification."""

    def test_inside(self):
        arcs = create_square_store()
        assert classify_point((5, 5), [0], arcs) == PointLocation.inside

    def test_outside(self):
        arcs = create_square_store()
        assert classify_point((15, 5), [0], arcs) == PointLocation.outside
        assert classify_point((-5, 5), [0], arcs) == PointLocation.outside
        assert classify_point((5, 20), [0], arcs) == PointLocation.outside

    def test_on_edge(self):
        arcs = create_square_store()
        assert classify_point((0, 5), [0], arcs) == PointLocation.boundary
        assert classify_point((5, 10), [0], arcs) == PointLocation.boundary

    def test_on_vertex(self):
        arcs = create_square_store()
        assert classify_point((10, 10), [0], arcs) == PointLocation.boundary

    def test_direction_independent(self):
        """Classification ignores winding direction."""
        arcs = create_square_store()
        assert classify_point((5, 5), [~0], arcs) == PointLocation.inside
        assert classify_point((0, 5), [~0], arcs) == PointLocation.boundary

    def test_ray_through_vertex(self):
        """A ray passing exactly through a vertex is counted once."""
        arcs = create_square_store()
        # Ray from (1, 8) towards +x passes through the apex (4, 8)
        assert classify_point((1, 8), [1], arcs) == PointLocation.outside
        assert classify_point((4, 4), [1], arcs) == PointLocation.inside

    def test_empty_ring(self):
        arcs = create_square_store()
        assert classify_point((5, 5), [], arcs) == PointLocation.outside

    def test_location_values(self):
        assert int(PointLocation.inside) == 1
        assert int(PointLocation.outside) == 0
        assert int(PointLocation.boundary) == -1


class TestRingTestPoint:
    """Tests for the enclosure test point."""

    def test_midpoint_of_first_segment(self):
        arcs = create_square_store()
        assert ring_test_point([0], arcs) == (0.0, 5.0)

    def test_reversed_ring(self):
        arcs = create_square_store()
        assert ring_test_point([~0], arcs) == (5.0, 0.0)
