"""
Input validation utilities for ring topology operations.

The nesting functions assume well-formed rings and do not check them.
These helpers let callers verify that precondition up front; they raise
descriptive exceptions on invalid input.
"""

from __future__ import annotations

from typing import Sequence

from .arcs import arc_index
from .types import RingLike


class ValidationError(ValueError):
    """Base exception for ring validation errors."""

    pass


class InvalidRingError(ValidationError):
    """Raised when a ring is malformed."""

    pass


class InvalidArcIdError(ValidationError):
    """Raised when a ring references an arc missing from the store."""

    pass


def validate_ring_ids(
    rings: Sequence[RingLike],
    arc_count: int,
    strict: bool = True,
) -> list[tuple[int, str]]:
    """
    Validate that every ring is non-empty and refers to existing arcs.

    Args:
        rings: Sequence of rings (sequences of signed arc ids)
        arc_count: Number of arcs in the store
        strict: If True, raises on invalid. If False, returns list of issues.

    Returns:
        List of (ring_index, issue_description) tuples

    Raises:
        InvalidRingError: If strict=True and an empty ring is found
        InvalidArcIdError: If strict=True and an out-of-range arc id is found
    """
    issues: list[tuple[int, str]] = []
    has_empty = False

    for i, ids in enumerate(rings):
        if len(ids) == 0:
            has_empty = True
            issues.append((i, f"Ring {i}: no arcs"))
            continue
        for arc_id in ids:
            idx = arc_index(arc_id)
            if idx >= arc_count:
                issues.append(
                    (i, f"Ring {i}: arc id {arc_id} out of bounds [0, {arc_count})")
                )

    if strict and issues:
        msg = "Invalid rings:\n" + "\n".join(issue[1] for issue in issues)
        if has_empty:
            raise InvalidRingError(msg)
        raise InvalidArcIdError(msg)

    return issues


def validate_max_depth(max_depth: int) -> int:
    """
    Validate quadtree depth is non-negative.

    Raises:
        ValidationError: If max_depth < 0
    """
    if max_depth < 0:
        raise ValidationError(f"max_depth must be >= 0, got {max_depth}")
    return max_depth


__all__ = [
    "ValidationError",
    "InvalidRingError",
    "InvalidArcIdError",
    "validate_ring_ids",
    "validate_max_depth",
]
