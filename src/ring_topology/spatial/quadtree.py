"""
Region quadtree over bounding boxes.

The quadtree recursively subdivides 2D space into quadrants. Each box is
stored in the deepest node whose region fully contains it, so a box that
straddles a quadrant boundary stays at the level where it was split.
Queries only visit nodes whose region overlaps the query box.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple, Union

from ..types import Bounds
from ..validation import validate_max_depth


@dataclass
class BoxEntry:
    """A bounding box with an attached payload."""

    bounds: Bounds
    item: Any = None
    index: int = -1  # Insertion order


@dataclass
class BoxQuadTreeNode:
    """
    A node in the quadtree.

    Attributes:
        x, y: Center of this region
        half_size: Half the width/height of this region
        entries: Boxes that fit this region but none of its quadrants
        children: Four child quadrants [SW, SE, NW, NE], created on demand
    """

    x: float
    y: float
    half_size: float
    entries: List[BoxEntry] = field(default_factory=list)
    children: Optional[List[Optional[BoxQuadTreeNode]]] = None

    def is_leaf(self) -> bool:
        """True if this node has no children."""
        return self.children is None

    def region(self) -> Bounds:
        hs = self.half_size
        return Bounds(self.x - hs, self.y - hs, self.x + hs, self.y + hs)

    def contains(self, bounds: Bounds) -> bool:
        """Check if a box lies within this node's region."""
        return self.region().contains(bounds)

    def get_quadrant(self, bounds: Bounds) -> int:
        """
        Get the quadrant that fully contains a box.

        Returns:
            0=SW, 1=SE, 2=NW, 3=NE, or -1 if the box crosses a center line
        """
        if bounds.xmax <= self.x:
            east = False
        elif bounds.xmin >= self.x:
            east = True
        else:
            return -1
        if bounds.ymax <= self.y:
            north = False
        elif bounds.ymin >= self.y:
            north = True
        else:
            return -1
        return (2 if north else 0) + (1 if east else 0)


class BoxQuadTree:
    """
    Quadtree index for bounding-box intersection queries.

    Usage:
        tree = BoxQuadTree(bounds=(0, 0, 1000, 1000))
        for i, box in enumerate(boxes):
            tree.insert(BoxEntry(box, item=i))

        hits = tree.search(Bounds(10, 10, 20, 20))

    The max_depth parameter bounds the subdivision; boxes that would go
    deeper stay in the node at max_depth.
    """

    def __init__(
        self,
        bounds: Union[Bounds, Tuple[float, float, float, float]],
        max_depth: int = 8,
    ):
        """
        Initialize quadtree.

        Args:
            bounds: (min_x, min_y, max_x, max_y) extent of the indexed boxes
            max_depth: Maximum subdivision depth (0 = single node)
        """
        if isinstance(bounds, Bounds):
            bounds = bounds.to_tuple()
        min_x, min_y, max_x, max_y = bounds
        center_x = (min_x + max_x) / 2
        center_y = (min_y + max_y) / 2
        # Use max dimension to ensure square region
        half_size = max(max_x - min_x, max_y - min_y) / 2

        self.root = BoxQuadTreeNode(center_x, center_y, half_size)
        self.max_depth = validate_max_depth(max_depth)
        self.entry_count = 0

    def insert(self, entry: BoxEntry) -> None:
        """Insert a box into the quadtree."""
        if entry.index < 0:
            entry.index = self.entry_count
        node = self.root
        depth = 0
        if node.contains(entry.bounds):
            while depth < self.max_depth:
                quadrant = node.get_quadrant(entry.bounds)
                if quadrant < 0:
                    break
                node = self._get_child(node, quadrant)
                depth += 1
        node.entries.append(entry)
        self.entry_count += 1

    def _get_child(self, node: BoxQuadTreeNode, quadrant: int) -> BoxQuadTreeNode:
        """Return the child for a quadrant, creating it if needed."""
        if node.children is None:
            node.children = [None, None, None, None]
        child = node.children[quadrant]
        if child is None:
            hs = node.half_size / 2
            cx = node.x + hs * (1 if quadrant & 1 else -1)
            cy = node.y + hs * (1 if quadrant & 2 else -1)
            child = BoxQuadTreeNode(cx, cy, hs)
            node.children[quadrant] = child
        return child

    def search(self, bounds: Bounds) -> List[BoxEntry]:
        """
        Find all boxes that intersect (or touch) a query box.

        Returns:
            Matching entries in insertion order
        """
        found: List[BoxEntry] = []
        self._search(self.root, bounds, found, is_root=True)
        found.sort(key=lambda e: e.index)
        return found

    def _search(
        self,
        node: BoxQuadTreeNode,
        bounds: Bounds,
        found: List[BoxEntry],
        is_root: bool = False,
    ) -> None:
        # The root also holds boxes outside its region, so it is always scanned
        if not is_root and not node.region().intersects(bounds):
            return
        for entry in node.entries:
            if entry.bounds.intersects(bounds):
                found.append(entry)
        if node.children:
            for child in node.children:
                if child is not None:
                    self._search(child, bounds, found)

    def depth(self) -> int:
        """Depth of the deepest node (0 for a tree with only a root)."""
        return self._depth(self.root)

    def _depth(self, node: Optional[BoxQuadTreeNode]) -> int:
        if node is None or node.children is None:
            return 0
        return 1 + max(self._depth(child) for child in node.children)


__all__ = ["BoxEntry", "BoxQuadTree", "BoxQuadTreeNode"]
