"""Tests for ring metadata."""

import pytest

from ring_topology import ArcStore, Bounds, build_ring_metadata, get_ring_metadata


def create_store():
    """A clockwise 10x10 square and a clockwise 2x2 square."""
    return ArcStore.from_arcs(
        [
            [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)],
            [(20, 20), (20, 22), (22, 22), (22, 20), (20, 20)],
        ]
    )


class TestGetRingMetadata:
    """Tests for single-ring metadata."""

    def test_fields(self):
        arcs = create_store()
        data = get_ring_metadata([0], arcs)
        assert data.ids == [0]
        assert data.area == 100.0
        assert data.bounds == Bounds(0, 0, 10, 10)
        assert data.is_clockwise
        assert data.abs_area == 100.0

    def test_counter_clockwise(self):
        arcs = create_store()
        data = get_ring_metadata([~0], arcs)
        assert data.area == -100.0
        assert not data.is_clockwise
        assert data.abs_area == 100.0

    def test_ids_are_copied(self):
        """Metadata holds its own copy of the ring."""
        arcs = create_store()
        ring = [0]
        data = get_ring_metadata(ring, arcs)
        assert data.ids == ring
        assert data.ids is not ring

    def test_accepts_tuples(self):
        arcs = create_store()
        assert get_ring_metadata((1,), arcs).ids == [1]

    def test_unknown_arc_raises(self):
        """Out-of-range arc ids are a precondition violation."""
        with pytest.raises(IndexError):
            get_ring_metadata([5], create_store())


class TestBuildRingMetadata:
    """Tests for metadata over a ring list."""

    def test_input_order_and_index(self):
        arcs = create_store()
        data = build_ring_metadata([[1], [~0]], arcs)
        assert [d.index for d in data] == [0, 1]
        assert [d.area for d in data] == [4.0, -100.0]

    def test_empty(self):
        assert build_ring_metadata([], create_store()) == []
