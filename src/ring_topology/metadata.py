"""Per-ring metadata derived from an arc store."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .arcs import ArcStore
from .geometry import is_clockwise, ring_area
from .types import Bounds, Ring, RingLike


@dataclass
class RingMetadata:
    """
    Derived record for one ring, valid for a single pass.

    Attributes:
        ids: Arc ids of the ring (a private copy of the caller's ring)
        area: Signed area; its sign always matches the direction of ids
        bounds: Bounding box of the ring's vertices
        index: Position of the ring in the input sequence
    """

    ids: Ring
    area: float
    bounds: Bounds
    index: int = -1

    @property
    def is_clockwise(self) -> bool:
        return is_clockwise(self.area)

    @property
    def abs_area(self) -> float:
        return abs(self.area)


def get_ring_metadata(ids: RingLike, arcs: ArcStore, index: int = -1) -> RingMetadata:
    """
    Compute area and bounds of a single ring.

    Raises:
        IndexError: If the ring refers to an arc id missing from the store
    """
    return RingMetadata(
        ids=list(ids),
        area=ring_area(ids, arcs),
        bounds=arcs.ring_bounds(ids),
        index=index,
    )


def build_ring_metadata(rings: Sequence[RingLike], arcs: ArcStore) -> list[RingMetadata]:
    """Metadata for every ring, in input order."""
    return [get_ring_metadata(ids, arcs, i) for i, ids in enumerate(rings)]


__all__ = ["RingMetadata", "get_ring_metadata", "build_ring_metadata"]
