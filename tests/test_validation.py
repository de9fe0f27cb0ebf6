"""Tests for input validation module."""

import pytest

from ring_topology.validation import (
    InvalidArcIdError,
    InvalidRingError,
    ValidationError,
    validate_max_depth,
    validate_ring_ids,
)


class TestRingIdValidation:
    """Tests for ring arc id validation."""

    def test_valid_rings(self):
        """Valid rings return no issues."""
        assert validate_ring_ids([[0, 1], [~1, ~0]], arc_count=2) == []

    def test_empty_ring_list(self):
        assert validate_ring_ids([], arc_count=0) == []

    def test_out_of_range_forward_id(self):
        """Forward id beyond the store raises InvalidArcIdError."""
        with pytest.raises(InvalidArcIdError, match="arc id 5 out of bounds"):
            validate_ring_ids([[0, 5]], arc_count=2)

    def test_out_of_range_reversed_id(self):
        """Complemented id beyond the store raises InvalidArcIdError."""
        with pytest.raises(InvalidArcIdError, match="arc id -6"):
            validate_ring_ids([[~5]], arc_count=2)

    def test_empty_ring_raises(self):
        """A ring without arcs raises InvalidRingError."""
        with pytest.raises(InvalidRingError, match="Ring 1: no arcs"):
            validate_ring_ids([[0], []], arc_count=1)

    def test_non_strict_returns_issues(self):
        """strict=False collects issues instead of raising."""
        issues = validate_ring_ids([[0], [], [3, ~4]], arc_count=1, strict=False)
        assert [i for i, _ in issues] == [1, 2, 2]

    def test_errors_are_value_errors(self):
        """Validation errors can be caught as ValueError."""
        with pytest.raises(ValueError):
            validate_ring_ids([[9]], arc_count=1)
        assert issubclass(InvalidRingError, ValidationError)
        assert issubclass(InvalidArcIdError, ValidationError)


class TestMaxDepthValidation:
    """Tests for quadtree depth validation."""

    def test_valid(self):
        assert validate_max_depth(0) == 0
        assert validate_max_depth(8) == 8

    def test_negative_raises(self):
        with pytest.raises(ValidationError, match="max_depth must be >= 0"):
            validate_max_depth(-1)
