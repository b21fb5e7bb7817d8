"""Tests for reduce_range in ranges.py."""

import math

import pytest

from pyfuncplotqt.models import DEFAULT_RANGE, AxisRange, Domain, Point
from pyfuncplotqt.ranges import reduce_range
from pyfuncplotqt.sampling import sample


class TestReduceRange:
    """Tests for reduce_range function."""

    def test_empty(self):
        """Test that no points means no range."""
        assert reduce_range([]) is None

    def test_true_min_max_unpadded(self):
        """Test that a non-degenerate range is returned as-is."""
        points = sample(Domain(2.5, 9.0, 0.8))
        ys = [p.y for p in points]

        result = reduce_range(points)
        assert result == AxisRange(min(ys), max(ys))

    def test_single_point_padded(self):
        """Test that a single point is padded by 1 on each side."""
        result = reduce_range([Point(3.0, 0.5)])
        assert result == AxisRange(-0.5, 1.5)

    def test_repeated_y_padded(self):
        result = reduce_range([Point(1.0, 2.0), Point(2.0, 2.0), Point(3.0, 2.0)])
        assert result == AxisRange(1.0, 3.0)

    def test_near_zero_width_padded(self):
        result = reduce_range([Point(1.0, 2.0), Point(2.0, 2.0 + 1e-14)])
        assert result.min == pytest.approx(1.0)
        assert result.max == pytest.approx(3.0)

    def test_infinite_bound_replaced(self):
        """Test that a non-finite bound is replaced by the finite one."""
        result = reduce_range([Point(1.0, 4.0), Point(2.0, math.inf)])
        assert result == AxisRange(3.0, 5.0)

        result = reduce_range([Point(1.0, -math.inf), Point(2.0, 4.0)])
        assert result == AxisRange(3.0, 5.0)

    def test_all_non_finite_defaults(self):
        """Test that nothing finite falls back to the default range."""
        assert reduce_range([Point(1.0, math.nan)]) == DEFAULT_RANGE
        assert reduce_range([Point(1.0, -math.inf), Point(2.0, math.inf)]) == DEFAULT_RANGE

    def test_large_magnitude_padded_by_one(self):
        """Test that +/-1 is used wherever it is still representable."""
        result = reduce_range([Point(1.0, 1e12)])
        assert result == AxisRange(1e12 - 1.0, 1e12 + 1.0)

    def test_huge_magnitude_stays_strict(self):
        """Test max > min where +/-1 would be lost to rounding."""
        result = reduce_range([Point(1.0, 1e20)])
        assert result.max > result.min
        assert result.contains(1e20)

    def test_nan_first_ignored(self):
        """Test that a leading NaN does not discard the finite values."""
        points = [Point(0.0, math.nan), Point(1.0, 0.5), Point(2.0, 1.5)]
        assert reduce_range(points) == AxisRange(0.5, 1.5)

    def test_nan_anywhere_ignored(self):
        points = [Point(0.0, 0.5), Point(1.0, math.nan), Point(2.0, 1.5)]
        assert reduce_range(points) == AxisRange(0.5, 1.5)

    @pytest.mark.parametrize(
        "ys",
        [[0.0], [-7.5], [1.0, 1.0], [0.1, 0.2, 0.3], [-1e-13, 1e-13], [1e300]],
    )
    def test_strictly_positive_span(self, ys):
        points = [Point(float(i), y) for i, y in enumerate(ys)]
        result = reduce_range(points)
        assert result.max > result.min
