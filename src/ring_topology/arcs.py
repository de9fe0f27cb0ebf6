"""
Shared arc storage.

Arcs are polylines shared between rings. A ring never copies vertex data;
it refers to arcs by signed id. A non-negative id traverses the arc in its
stored direction, and its one's complement (``~id``, i.e. ``-id - 1``)
traverses the same arc in reverse.

Usage:
    arcs = ArcStore.from_arcs([
        [(0, 0), (0, 10), (10, 10)],
        [(10, 10), (10, 0), (0, 0)],
    ])
    ring = [0, 1]          # clockwise square
    hole = [~1, ~0]        # same square, counter-clockwise
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Sequence

import numpy as np

if TYPE_CHECKING:
    from typing_extensions import Self

from .types import Bounds, RingLike


def arc_index(arc_id: int) -> int:
    """Absolute arc index for a signed arc id."""
    return ~arc_id if arc_id < 0 else arc_id


def is_reversed(arc_id: int) -> bool:
    """True if the id traverses its arc backwards."""
    return arc_id < 0


class ArcStore:
    """
    Append-only, index-addressed pool of arcs.

    Each arc is held as a read-only float64 array of shape (n, 2), n >= 2.
    Arc ids are assigned in insertion order starting at 0 and never change.
    """

    def __init__(self) -> None:
        self._arcs: list[np.ndarray] = []

    @classmethod
    def from_arcs(cls, arcs: Iterable[Sequence[Sequence[float]]]) -> Self:
        """Build a store from a sequence of polylines."""
        store = cls()
        for points in arcs:
            store.add_arc(points)
        return store

    def add_arc(self, points: Sequence[Sequence[float]]) -> int:
        """
        Append an arc.

        Args:
            points: Sequence of (x, y) vertices

        Returns:
            Id of the new arc

        Raises:
            ValueError: If the arc has fewer than two vertices or the
                vertices are not 2D
        """
        coords = np.array(points, dtype=np.float64)
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError(f"Arc vertices must be (x, y) pairs, got shape {coords.shape}")
        if len(coords) < 2:
            raise ValueError(f"An arc needs at least 2 vertices, got {len(coords)}")
        coords.setflags(write=False)
        self._arcs.append(coords)
        return len(self._arcs) - 1

    def size(self) -> int:
        """Number of arcs in the store."""
        return len(self._arcs)

    def __len__(self) -> int:
        return len(self._arcs)

    def _get(self, arc_id: int) -> np.ndarray:
        idx = arc_index(arc_id)
        if idx >= len(self._arcs):
            raise IndexError(f"Arc id {arc_id} out of range [0, {len(self._arcs)})")
        return self._arcs[idx]

    def arc_length(self, arc_id: int) -> int:
        """Number of vertices in an arc (same for both directions)."""
        return len(self._get(arc_id))

    def vertex_at(self, arc_id: int, nth: int) -> tuple[float, float]:
        """
        Get the nth vertex of an arc in traversal order.

        For a reversed id, vertex 0 is the last stored vertex. Negative
        nth counts back from the end of the traversal.

        Raises:
            IndexError: If the arc id or vertex position is out of range
        """
        coords = self._get(arc_id)
        n = len(coords)
        if nth < 0:
            nth += n
        if nth < 0 or nth >= n:
            raise IndexError(f"Vertex {nth} out of range for arc {arc_id} of length {n}")
        if is_reversed(arc_id):
            nth = n - 1 - nth
        return float(coords[nth, 0]), float(coords[nth, 1])

    def arc_coordinates(self, arc_id: int) -> np.ndarray:
        """Vertices of an arc in traversal order, as a read-only (n, 2) array."""
        coords = self._get(arc_id)
        return coords[::-1] if is_reversed(arc_id) else coords

    def ring_coordinates(self, ids: RingLike) -> np.ndarray:
        """
        Resolve a ring to its vertex sequence.

        Consecutive arcs share an endpoint, which is emitted once. For a
        closed ring the first and last rows are equal.

        Returns:
            (n, 2) float64 array; empty (0, 2) array for an empty ring
        """
        if len(ids) == 0:
            return np.empty((0, 2), dtype=np.float64)
        parts = [self.arc_coordinates(ids[0])]
        for arc_id in ids[1:]:
            parts.append(self.arc_coordinates(arc_id)[1:])
        return np.concatenate(parts)

    def arc_bounds(self, arc_id: int) -> Bounds:
        coords = self._get(arc_id)
        xmin, ymin = coords.min(axis=0)
        xmax, ymax = coords.max(axis=0)
        return Bounds(float(xmin), float(ymin), float(xmax), float(ymax))

    def ring_bounds(self, ids: RingLike) -> Bounds:
        """Union of the bounds of every arc in the ring."""
        if len(ids) == 0:
            raise ValueError("Cannot compute bounds of an empty ring")
        bounds = self.arc_bounds(ids[0])
        for arc_id in ids[1:]:
            bounds = bounds.merge(self.arc_bounds(arc_id))
        return bounds

    def __repr__(self) -> str:
        return f"ArcStore(arcs={len(self._arcs)})"


__all__ = ["ArcStore", "arc_index", "is_reversed"]
