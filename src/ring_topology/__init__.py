"""
ring-topology: Nesting repair for polygon rings built from shared arcs.

Polygons are stored as rings of signed arc ids referring to a shared
ArcStore. This package fixes the nesting of those rings without touching
vertex data.

Available modules:
- arcs: Append-only arc storage with forward/reverse arc ids
- geometry: Signed ring area and point-in-ring classification
- metadata: Per-ring area and bounds
- orientation: Ring reversal and winding changes
- nesting: Nesting-error filter and polygon rewinding
- spatial: Bounding-box quadtree and ring containment index
"""

__version__ = "0.1.0"

# Shared arc storage
from .arcs import ArcStore, arc_index, is_reversed

# Geometry primitives
from .geometry import (
    classify_point,
    is_clockwise,
    ring_area,
    ring_test_point,
    signed_area,
)

# Ring metadata
from .metadata import RingMetadata, build_ring_metadata, get_ring_metadata

# Nesting repair
from .nesting import (
    fix_nesting_errors,
    is_ring_in_ring,
    rewind_polygon,
    rewind_polygons,
)

# Orientation
from .orientation import complement_arc_id, reverse_ring, set_ring_winding

# Spatial data structures
from .spatial import BoxEntry, BoxQuadTree, BoxQuadTreeNode, PathIndex
from .types import (
    Bounds,
    Layer,
    PointLocation,
    Ring,
    RingLike,
    Shape,
    ShapeLike,
)

# Validation utilities
from .validation import (
    InvalidArcIdError,
    InvalidRingError,
    ValidationError,
    validate_max_depth,
    validate_ring_ids,
)

__all__ = [
    # Version
    "__version__",
    # Shared types
    "Bounds",
    "Layer",
    "PointLocation",
    "Ring",
    "Shape",
    "RingLike",
    "ShapeLike",
    # Arcs
    "ArcStore",
    "arc_index",
    "is_reversed",
    # Geometry
    "signed_area",
    "ring_area",
    "is_clockwise",
    "classify_point",
    "ring_test_point",
    # Metadata
    "RingMetadata",
    "get_ring_metadata",
    "build_ring_metadata",
    # Orientation
    "complement_arc_id",
    "reverse_ring",
    "set_ring_winding",
    # Nesting repair
    "fix_nesting_errors",
    "rewind_polygon",
    "rewind_polygons",
    "is_ring_in_ring",
    # Spatial data structures
    "BoxEntry",
    "BoxQuadTree",
    "BoxQuadTreeNode",
    "PathIndex",
    # Validation
    "ValidationError",
    "InvalidRingError",
    "InvalidArcIdError",
    "validate_ring_ids",
    "validate_max_depth",
]
