"""
Common types for ring topology operations.

This module provides the fundamental types shared by the index, metadata
and nesting modules:
- Ring: Sequence of signed arc ids forming one closed loop
- Shape: List of rings making up one polygon
- Bounds: Axis-aligned bounding box
- PointLocation: Result of a point-in-ring test
- Layer: Collection of shapes as handled by a processing command
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Iterable, Optional, Sequence, Union


class PointLocation(IntEnum):
    """
    Location of a point relative to a closed ring.

    - inside: Point is in the ring's interior
    - outside: Point is in the ring's exterior
    - boundary: Point lies on one of the ring's segments
    """

    boundary = -1
    outside = 0
    inside = 1


@dataclass(frozen=True)
class Bounds:
    """
    Axis-aligned bounding box.

    Attributes:
        xmin, ymin: Lower-left corner
        xmax, ymax: Upper-right corner
    """

    xmin: float
    ymin: float
    xmax: float
    ymax: float

    @classmethod
    def from_points(cls, points: Iterable[Sequence[float]]) -> Bounds:
        """Bounding box of a non-empty collection of (x, y) points."""
        xs: list[float] = []
        ys: list[float] = []
        for p in points:
            xs.append(float(p[0]))
            ys.append(float(p[1]))
        if not xs:
            raise ValueError("Cannot compute bounds of an empty point set")
        return cls(min(xs), min(ys), max(xs), max(ys))

    @property
    def width(self) -> float:
        return self.xmax - self.xmin

    @property
    def height(self) -> float:
        return self.ymax - self.ymin

    def area(self) -> float:
        return self.width * self.height

    def contains(self, other: Bounds) -> bool:
        """True if other lies within this box (shared edges allowed)."""
        return (
            self.xmin <= other.xmin
            and self.ymin <= other.ymin
            and self.xmax >= other.xmax
            and self.ymax >= other.ymax
        )

    def contains_point(self, x: float, y: float) -> bool:
        return self.xmin <= x <= self.xmax and self.ymin <= y <= self.ymax

    def intersects(self, other: Bounds) -> bool:
        """True if the boxes overlap or touch."""
        return (
            self.xmin <= other.xmax
            and other.xmin <= self.xmax
            and self.ymin <= other.ymax
            and other.ymin <= self.ymax
        )

    def same_bounds(self, other: Bounds) -> bool:
        return self.to_tuple() == other.to_tuple()

    def merge(self, other: Bounds) -> Bounds:
        """Smallest box containing both boxes."""
        return Bounds(
            min(self.xmin, other.xmin),
            min(self.ymin, other.ymin),
            max(self.xmax, other.xmax),
            max(self.ymax, other.ymax),
        )

    def to_tuple(self) -> tuple[float, float, float, float]:
        return (self.xmin, self.ymin, self.xmax, self.ymax)


# A ring is a list of signed arc ids. Non-negative ids traverse an arc
# forward; the one's complement (~id) traverses it in reverse.
Ring = list[int]
"""Closed loop of signed arc ids."""

Shape = list[Ring]
"""One polygon: its outer rings and holes."""

RingLike = Sequence[int]
"""Input type for rings: any sequence of arc ids."""


class Layer:
    """
    Collection of shapes sharing one arc store.

    Attributes:
        shapes: One entry per feature; None marks a feature without geometry
        geometry_type: "polygon", "polyline" or "point"
        name: Optional layer name
    """

    def __init__(
        self,
        shapes: Optional[Sequence[Optional[Shape]]] = None,
        geometry_type: str = "polygon",
        name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        self.shapes: list[Optional[Shape]] = list(shapes) if shapes is not None else []
        self.geometry_type = geometry_type
        self.name = name

        # Copy any additional custom properties
        for key, value in kwargs.items():
            if not hasattr(self, key):
                setattr(self, key, value)

    def __repr__(self) -> str:
        return (
            f"Layer(name={self.name!r}, geometry_type={self.geometry_type!r}, "
            f"shapes={len(self.shapes)})"
        )


ShapeLike = Union[Shape, Sequence[RingLike]]
"""Input type for shapes: any sequence of rings."""


__all__ = [
    "PointLocation",
    "Bounds",
    "Ring",
    "Shape",
    "RingLike",
    "ShapeLike",
    "Layer",
]
