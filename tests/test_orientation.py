"""Tests for ring reversal and winding changes."""

from ring_topology import (
    ArcStore,
    complement_arc_id,
    get_ring_metadata,
    reverse_ring,
    ring_area,
    set_ring_winding,
)


def create_square_store():
    """Clockwise 10x10 square split into two arcs."""
    return ArcStore.from_arcs(
        [
            [(0, 0), (0, 10), (10, 10)],
            [(10, 10), (10, 0), (0, 0)],
        ]
    )


class TestComplementArcId:
    """Tests for arc id complement."""

    def test_complement(self):
        assert complement_arc_id(0) == -1
        assert complement_arc_id(5) == -6
        assert complement_arc_id(-6) == 5

    def test_involution(self):
        for arc_id in (-3, -1, 0, 2, 7):
            assert complement_arc_id(complement_arc_id(arc_id)) == arc_id


class TestReverseRing:
    """Tests for reverse_ring."""

    def test_reverses_and_complements(self):
        assert reverse_ring([0, 3, ~1]) == [1, ~3, ~0]

    def test_returns_new_list(self):
        """The input ring is not modified."""
        ring = [0, 1]
        result = reverse_ring(ring)
        assert ring == [0, 1]
        assert result is not ring

    def test_double_reverse_is_identity(self):
        ring = [4, ~2, 0, ~7]
        assert reverse_ring(reverse_ring(ring)) == ring

    def test_empty_ring(self):
        assert reverse_ring([]) == []

    def test_reversed_ring_negates_area(self):
        """The same boundary is traced in the opposite direction."""
        arcs = create_square_store()
        assert ring_area(reverse_ring([0, 1]), arcs) == -ring_area([0, 1], arcs)


class TestSetRingWinding:
    """Tests for set_ring_winding."""

    def test_flip_to_ccw(self):
        arcs = create_square_store()
        data = get_ring_metadata([0, 1], arcs)
        assert set_ring_winding(data, clockwise=False)
        assert data.ids == [~1, ~0]
        assert data.area == -100.0
        assert not data.is_clockwise

    def test_area_sign_matches_ids_after_flip(self):
        """Negated area equals the recomputed area of the new ids."""
        arcs = create_square_store()
        data = get_ring_metadata([0, 1], arcs)
        set_ring_winding(data, clockwise=False)
        assert data.area == ring_area(data.ids, arcs)

    def test_no_flip_when_already_correct(self):
        arcs = create_square_store()
        data = get_ring_metadata([0, 1], arcs)
        assert not set_ring_winding(data, clockwise=True)
        assert data.ids == [0, 1]
        assert data.area == 100.0

    def test_flip_to_cw(self):
        arcs = create_square_store()
        data = get_ring_metadata([~1, ~0], arcs)
        assert set_ring_winding(data, clockwise=True)
        assert data.ids == [0, 1]
        assert data.area == 100.0

    def test_zero_area_never_flipped(self):
        """A degenerate ring stays as it is."""
        arcs = ArcStore.from_arcs([[(0, 0), (0, 5), (0, 0)]])
        data = get_ring_metadata([0], arcs)
        assert data.area == 0
        assert not set_ring_winding(data, clockwise=False)
        assert data.ids == [0]
