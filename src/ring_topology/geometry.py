"""
Planar geometry primitives over arc-based rings.

Sign convention: a ring that is clockwise in a y-up plane has positive
signed area, a counter-clockwise ring has negative area.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from .arcs import ArcStore
from .types import PointLocation, RingLike


def signed_area(coords: np.ndarray) -> float:
    """
    Signed area of a closed vertex sequence (shoelace formula).

    Args:
        coords: (n, 2) array whose first and last rows coincide

    Returns:
        Positive for clockwise rings, negative for counter-clockwise
    """
    if len(coords) < 3:
        return 0.0
    x = coords[:, 0]
    y = coords[:, 1]
    return -0.5 * float(np.sum(x[:-1] * y[1:] - x[1:] * y[:-1]))


def ring_area(ids: RingLike, arcs: ArcStore) -> float:
    """Signed planar area of a ring."""
    return signed_area(arcs.ring_coordinates(ids))


def is_clockwise(area: float) -> bool:
    """
    Chirality of a signed area.

    Zero-area rings have no defined direction and are treated as
    clockwise so that winding decisions stay well-defined.
    """
    return area >= 0


def classify_point(
    point: Sequence[float],
    ids: RingLike,
    arcs: ArcStore,
) -> PointLocation:
    """
    Locate a point relative to a ring.

    Casts a horizontal ray towards +x and counts the ring segments it
    crosses. A point lying on any segment is reported as boundary.

    Args:
        point: (x, y) coordinates
        ids: Ring arc ids
        arcs: Arc store the ids refer to

    Returns:
        PointLocation.inside, PointLocation.outside or PointLocation.boundary
    """
    coords = arcs.ring_coordinates(ids)
    if len(coords) < 2:
        return PointLocation.outside
    x, y = float(point[0]), float(point[1])
    ax, ay = coords[:-1, 0], coords[:-1, 1]
    bx, by = coords[1:, 0], coords[1:, 1]

    # Collinear with a segment and within its extent
    cross = (bx - ax) * (y - ay) - (by - ay) * (x - ax)
    on_segment = (
        (cross == 0)
        & (np.minimum(ax, bx) <= x)
        & (x <= np.maximum(ax, bx))
        & (np.minimum(ay, by) <= y)
        & (y <= np.maximum(ay, by))
    )
    if np.any(on_segment):
        return PointLocation.boundary

    # Half-open rule: a vertex exactly at ray height is counted once
    straddle = (ay > y) != (by > y)
    if not np.any(straddle):
        return PointLocation.outside
    sax, say = ax[straddle], ay[straddle]
    sbx, sby = bx[straddle], by[straddle]
    x_cross = sax + (y - say) * (sbx - sax) / (sby - say)
    crossings = int(np.count_nonzero(x_cross > x))
    return PointLocation.inside if crossings % 2 == 1 else PointLocation.outside


def ring_test_point(ids: RingLike, arcs: ArcStore) -> tuple[float, float]:
    """
    Midpoint of a ring's first segment.

    Used instead of a vertex when testing whether one ring encloses
    another: nested rings produced by topology building may touch their
    container at a shared vertex, but never along a shared segment.
    """
    x0, y0 = arcs.vertex_at(ids[0], 0)
    x1, y1 = arcs.vertex_at(ids[0], 1)
    return (x0 + x1) / 2, (y0 + y1) / 2


__all__ = [
    "signed_area",
    "ring_area",
    "is_clockwise",
    "classify_point",
    "ring_test_point",
]
