"""
Unit tests for numerical helpers.

Tests:
- Tolerance comparisons
- Matrix inversion and singular input
- Round-half-away-from-zero
- Random selection
"""

import numpy as np
import pytest
from bravais.utils import (
    DEFAULT_TOLERANCE,
    invert_matrix,
    is_positive,
    is_zero,
    round_half_away,
    select_one,
)


class TestTolerance:
    """Test fixed-tolerance comparisons."""

    def test_is_zero(self):
        assert is_zero(0.0)
        assert is_zero(0.5 * DEFAULT_TOLERANCE)
        assert is_zero(-0.5 * DEFAULT_TOLERANCE)
        assert not is_zero(1.0e-6)

    def test_is_positive(self):
        assert is_positive(1.0e-6)
        assert not is_positive(0.0)
        assert not is_positive(0.5 * DEFAULT_TOLERANCE)
        assert not is_positive(-1.0)


class TestInvertMatrix:
    """Test matrix inversion."""

    def test_inverse(self):
        """Test that the product with the inverse is the identity."""
        matrix = np.array([[2.0, -1.0], [0.0, np.sqrt(3.0)]])

        assert np.allclose(matrix @ invert_matrix(matrix), np.eye(2))

    def test_singular_raises(self):
        """Test that a singular matrix raises error."""
        with pytest.raises(ValueError, match="Degenerate basis vectors"):
            invert_matrix([[1.0, 2.0], [2.0, 4.0]])

    def test_non_square_raises(self):
        """Test that a non-square matrix raises error."""
        with pytest.raises(ValueError, match="square"):
            invert_matrix(np.ones((2, 3)))


class TestRoundHalfAway:
    """Test rounding to the nearest integer."""

    @pytest.mark.parametrize("value, expected", [
        (0.0, 0), (0.49, 0), (0.5, 1), (1.5, 2), (2.5, 3),
        (-0.49, 0), (-0.5, -1), (-1.5, -2), (-2.5, -3),
        (-0.504, -1), (-0.496, 0), (0.504, 1),
        (0.49999999999999994, 0), (-0.49999999999999994, 0),
        (2.4999999999999996, 2), (-2.4999999999999996, -2),
    ])
    def test_rounding(self, value, expected):
        """Test that ties go away from zero."""
        assert round_half_away(value) == expected

    def test_returns_int(self):
        assert isinstance(round_half_away(np.float64(3.7)), int)


class TestSelectOne:
    """Test uniform random selection."""

    def test_seeded_selection(self):
        """Test that equal seeds give equal results."""
        items = list(range(10))

        first = [select_one(items, np.random.default_rng(5)) for _ in range(3)]
        second = [select_one(items, np.random.default_rng(5)) for _ in range(3)]

        assert first == second
        assert first[0] in items

    def test_all_items_reachable(self):
        """Test that every item can be selected."""
        rng = np.random.default_rng(0)
        items = ('a', 'b', 'c')

        assert {select_one(items, rng) for _ in range(200)} == set(items)

    def test_empty_raises(self):
        """Test that an empty sequence raises error."""
        with pytest.raises(ValueError, match="empty"):
            select_one([])


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
