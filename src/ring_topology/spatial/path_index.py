"""
Containment index over polygon shapes.

Answers "which indexed shape encloses this ring?" queries. Shapes are
bucketed by bounding box in a quadtree; candidates whose box contains the
query ring's box are then tested with a point-in-polygon check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

from ..arcs import ArcStore
from ..geometry import classify_point, ring_area, ring_test_point
from ..types import Bounds, PointLocation, Ring, RingLike, ShapeLike
from .quadtree import BoxEntry, BoxQuadTree

logger = logging.getLogger(__name__)


@dataclass
class ShapeRecord:
    """An indexed shape."""

    index: int
    rings: List[Ring]
    bounds: Bounds
    area: float  # Absolute area


class PathIndex:
    """
    Spatial index for finding the shapes that enclose a ring.

    The index is a snapshot: it must be rebuilt after any ring it was
    built from is modified.

    Example:
        shapes = [[ring] for ring in rings]
        index = PathIndex(shapes, arcs)
        container = index.find_smallest_enclosing_shape(rings[0])
        if container is not None:
            print(f"ring 0 is enclosed by shape {container}")
    """

    def __init__(
        self,
        shapes: Sequence[Optional[ShapeLike]],
        arcs: ArcStore,
        max_depth: int = 8,
    ) -> None:
        """
        Build the index.

        Args:
            shapes: Shapes to index (lists of rings). None or empty shapes
                are skipped but keep their position in the numbering.
            arcs: Arc store the rings refer to
            max_depth: Quadtree subdivision limit
        """
        self._arcs = arcs
        self._records: List[ShapeRecord] = []

        for i, shape in enumerate(shapes):
            if not shape:
                continue
            rings = [list(ids) for ids in shape]
            bounds = arcs.ring_bounds(rings[0])
            area = 0.0
            for ids in rings:
                bounds = bounds.merge(arcs.ring_bounds(ids))
                area += ring_area(ids, arcs)
            self._records.append(ShapeRecord(i, rings, bounds, abs(area)))

        if self._records:
            extent = self._records[0].bounds
            for rec in self._records[1:]:
                extent = extent.merge(rec.bounds)
        else:
            extent = Bounds(0.0, 0.0, 0.0, 0.0)

        self._tree = BoxQuadTree(extent, max_depth=max_depth)
        for rec in self._records:
            self._tree.insert(BoxEntry(rec.bounds, item=rec))

        logger.debug(
            "Indexed %d shapes (quadtree depth %d)", len(self._records), self._tree.depth()
        )

    def __len__(self) -> int:
        return len(self._records)

    def find_enclosing_shapes(self, ids: RingLike) -> List[int]:
        """
        Find every indexed shape that encloses a ring.

        A shape whose bounds equal the ring's bounds is never reported,
        which excludes the ring itself and congruent rings.

        Returns:
            Shape indexes ordered by area, smallest first (ties by index)
        """
        bounds = self._arcs.ring_bounds(ids)
        point = ring_test_point(ids, self._arcs)
        enclosing: List[ShapeRecord] = []

        for entry in self._tree.search(bounds):
            rec: ShapeRecord = entry.item
            if not rec.bounds.contains(bounds) or rec.bounds.same_bounds(bounds):
                continue
            if self._point_in_shape(point, rec):
                enclosing.append(rec)

        enclosing.sort(key=lambda rec: (rec.area, rec.index))
        return [rec.index for rec in enclosing]

    def find_smallest_enclosing_shape(self, ids: RingLike) -> Optional[int]:
        """
        Find the smallest indexed shape that encloses a ring.

        Returns:
            Shape index, or None if no shape encloses the ring
        """
        enclosing = self.find_enclosing_shapes(ids)
        return enclosing[0] if enclosing else None

    def _point_in_shape(self, point: tuple[float, float], rec: ShapeRecord) -> bool:
        """Even-odd test over all rings of a shape; boundary points are outside."""
        if not rec.bounds.contains_point(*point):
            return False
        inside = 0
        for ids in rec.rings:
            location = classify_point(point, ids, self._arcs)
            if location == PointLocation.boundary:
                return False
            if location == PointLocation.inside:
                inside += 1
        return inside % 2 == 1


__all__ = ["PathIndex", "ShapeRecord"]
