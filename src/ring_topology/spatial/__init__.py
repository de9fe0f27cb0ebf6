"""
Spatial data structures for ring containment queries.

Provides a bounding-box quadtree and the PathIndex built on it.
"""

from .path_index import PathIndex, ShapeRecord
from .quadtree import BoxEntry, BoxQuadTree, BoxQuadTreeNode

__all__ = ["BoxEntry", "BoxQuadTree", "BoxQuadTreeNode", "PathIndex", "ShapeRecord"]
