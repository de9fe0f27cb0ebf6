"""
Ring nesting repair.

Two passes over polygon rings that share arcs:

- fix_nesting_errors: drop rings nested directly inside an enclosing ring
  with the same winding direction
- rewind_polygon / rewind_polygons: set winding so outermost rings are
  clockwise and each nesting level alternates direction

Both assume ring boundaries do not overlap (rings are either properly
nested or disjoint), which holds after e.g. dissolving. This is not
checked unless validate=True is passed.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .arcs import ArcStore
from .geometry import classify_point
from .metadata import RingMetadata, build_ring_metadata
from .orientation import set_ring_winding
from .spatial import PathIndex
from .types import Layer, PointLocation, Ring, RingLike, Shape
from .validation import validate_ring_ids

logger = logging.getLogger(__name__)


def fix_nesting_errors(
    rings: Sequence[RingLike],
    arcs: ArcStore,
    validate: bool = False,
) -> list[Ring]:
    """
    Delete rings nested inside an enclosing ring of the same direction.

    Each ring is checked against its smallest enclosing ring only. A ring
    with no enclosing ring is always kept, including counter-clockwise
    rings (unenclosed holes are left in place because removing them
    breaks coordinate rounding in some output formats).

    Args:
        rings: Polygon rings
        arcs: Arc store the rings refer to
        validate: Check ring ids against the store before filtering

    Returns:
        Surviving rings, in input order. With fewer than two rings the
        input is returned as is.

    Raises:
        ValidationError: If validate=True and a ring is malformed
    """
    if validate:
        validate_ring_ids(rings, arcs.size())
    if len(rings) <= 1:
        return rings  # type: ignore[return-value]

    ring_data = build_ring_metadata(rings, arcs)
    # Each ring becomes a single-ring shape, so shape ids are ring ids
    shapes = [[data.ids] for data in ring_data]
    index = PathIndex(shapes, arcs)

    kept: list[Ring] = []
    for i, ids in enumerate(rings):
        container = index.find_smallest_enclosing_shape(ids)
        if container is not None and (
            ring_data[container].is_clockwise == ring_data[i].is_clockwise
        ):
            logger.debug("Removing ring %d: same direction as enclosing ring %d", i, container)
            continue
        kept.append(ids)  # type: ignore[arg-type]

    if len(kept) < len(rings):
        logger.debug("Removed %d of %d rings", len(rings) - len(kept), len(rings))
    return kept


def rewind_polygons(layer: Layer, arcs: ArcStore) -> list[Optional[Shape]]:
    """
    Rewind every polygon in a layer.

    Outer rings become clockwise and nested rings alternate between
    counter-clockwise and clockwise. Null shapes are kept as None.

    Returns:
        The new shape list, also assigned to layer.shapes
    """
    layer.shapes = [
        rewind_polygon(shape, arcs) if shape is not None else None for shape in layer.shapes
    ]
    return layer.shapes


def rewind_polygon(
    rings: Sequence[RingLike],
    arcs: ArcStore,
    validate: bool = False,
) -> list[Ring]:
    """
    Update the winding order of the rings in one polygon.

    Rings are sorted by absolute area, largest first (equal areas keep
    their input order). Each ring's parent is the nearest larger ring, in
    sorted order, that contains it according to is_ring_in_ring. A ring
    with no parent is made clockwise; otherwise it is given the opposite
    direction to its parent.

    This is an approximation of true nesting: when area rank and nesting
    depth disagree, a ring may be matched with a container that is not
    its immediate parent.

    Args:
        rings: Rings of one polygon
        arcs: Arc store the rings refer to
        validate: Check ring ids against the store before rewinding

    Returns:
        New list of rings in descending area order. Reversed rings are new
        lists; the input rings are not modified.

    Raises:
        ValidationError: If validate=True and a ring is malformed
    """
    if validate:
        validate_ring_ids(rings, arcs.size())

    ring_data = build_ring_metadata(rings, arcs)
    # sorted() is stable, so equal-area rings keep their input order
    ring_data = sorted(ring_data, key=lambda data: data.abs_area, reverse=True)

    for i, ring in enumerate(ring_data):
        parent = _find_parent(ring, ring_data[:i], arcs)
        should_be_cw = True if parent is None else not parent.is_clockwise
        if ring.area == 0 and not should_be_cw:
            logger.debug("Ring %d has zero area; leaving it clockwise", ring.index)
        elif set_ring_winding(ring, should_be_cw):
            logger.debug(
                "Reversed ring %d to %s", ring.index, "CW" if should_be_cw else "CCW"
            )

    return [data.ids for data in ring_data]


def _find_parent(
    ring: RingMetadata,
    larger: Sequence[RingMetadata],
    arcs: ArcStore,
) -> Optional[RingMetadata]:
    """Nearest ring by area rank that contains ring, scanning backwards."""
    for candidate in reversed(larger):
        if is_ring_in_ring(ring, candidate, arcs):
            return candidate
    return None


def is_ring_in_ring(a: RingMetadata, b: RingMetadata, arcs: ArcStore) -> bool:
    """
    Test whether ring a lies inside ring b.

    Only the first vertex of a is tested against b, after a bounding-box
    check; the rings are assumed not to cross.
    """
    if not b.bounds.contains(a.bounds):
        return False
    p = arcs.vertex_at(a.ids[0], 0)
    return classify_point(p, b.ids, arcs) == PointLocation.inside


__all__ = [
    "fix_nesting_errors",
    "rewind_polygon",
    "rewind_polygons",
    "is_ring_in_ring",
]
