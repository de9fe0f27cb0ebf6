"""
Ring orientation changes.

Reversing a ring never touches vertex data: the arc order is reversed and
every arc id is complemented, so the ring traces the same boundary in the
opposite direction.
"""

from __future__ import annotations

from .metadata import RingMetadata
from .types import Ring, RingLike


def complement_arc_id(arc_id: int) -> int:
    """Id of the same arc traversed in the opposite direction."""
    return ~arc_id


def reverse_ring(ids: RingLike) -> Ring:
    """
    Reverse the direction of a ring.

    Returns a new ring; the input is left unchanged. An empty ring
    reverses to an empty ring.

    Example:
        >>> reverse_ring([0, 3, ~1])
        [1, -4, -1]
    """
    return [~arc_id for arc_id in reversed(ids)]


def set_ring_winding(data: RingMetadata, clockwise: bool) -> bool:
    """
    Give a ring the requested winding direction.

    When the ring's direction differs, data.ids is replaced by the reversed
    ring and data.area is negated (magnitude unchanged).

    A zero-area ring counts as clockwise whichever way its ids run, so it
    is never flipped.

    Returns:
        True if the ring was flipped
    """
    if data.is_clockwise == clockwise or data.area == 0:
        return False
    data.ids = reverse_ring(data.ids)
    data.area = -data.area
    return True


__all__ = ["complement_arc_id", "reverse_ring", "set_ring_winding"]
