"""Tests for all share index calculations"""

import math
import pytest

from gbce_app.metrics.index import calculate_geometric_mean


class TestGeometricMean:
    """Test geometric mean over participating values"""

    def test_two_values(self):
        """Test sqrt(4 * 9) = 6"""
        value, count = calculate_geometric_mean([4.0, 9.0])
        assert value == pytest.approx(6.0)
        assert count == 2

    def test_single_value(self):
        value, count = calculate_geometric_mean([107.5])
        assert value == pytest.approx(107.5)
        assert count == 1

    def test_excludes_non_positive(self):
        """Test zero and negative values do not participate"""
        value, count = calculate_geometric_mean([0.0, 4.0, -3.0, 9.0, 0.0])
        assert value == pytest.approx(6.0)
        assert count == 2

    def test_empty(self):
        assert calculate_geometric_mean([]) == (0.0, 0)

    def test_all_zero(self):
        assert calculate_geometric_mean([0.0, 0.0]) == (0.0, 0)

    def test_three_values(self):
        value, _ = calculate_geometric_mean([2.0, 4.0, 8.0])
        assert value == pytest.approx(4.0)

    def test_overflow_is_not_guarded(self):
        """Test a product beyond float range overflows to inf"""
        value, count = calculate_geometric_mean([1e200, 1e200])
        assert math.isinf(value)
        assert count == 2
