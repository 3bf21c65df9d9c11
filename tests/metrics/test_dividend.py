"""Tests for dividend yield and P/E ratio calculations"""

import math
import pytest

from gbce_app.metrics.dividend import calculate_dividend_yield, calculate_pe_ratio, ieee_divide


class TestIEEEDivide:
    """Test division with IEEE semantics"""

    def test_regular_division(self):
        assert ieee_divide(8.0, 120.0) == pytest.approx(8 / 120)

    def test_positive_over_zero(self):
        assert ieee_divide(8.0, 0.0) == math.inf

    def test_negative_over_zero(self):
        assert ieee_divide(-8.0, 0.0) == -math.inf

    def test_positive_over_negative_zero(self):
        assert ieee_divide(8.0, -0.0) == -math.inf

    def test_zero_over_zero(self):
        assert math.isnan(ieee_divide(0.0, 0.0))


class TestDividendYield:
    """Test dividend yield function"""

    def test_common_yield(self):
        """Test COMMON yield uses last dividend"""
        result = calculate_dividend_yield("COMMON", 120.0, last_dividend=8.0)
        assert result == pytest.approx(0.0666666, rel=1e-5)

    def test_preferred_yield(self):
        """Test PREFERRED yield uses fixed rate and par value"""
        result = calculate_dividend_yield(
            "PREFERRED", 120.0, last_dividend=8.0, fixed_dividend_rate=0.02, par_value=100.0
        )
        assert result == pytest.approx(2.0 / 120.0)

    def test_preferred_ignores_last_dividend(self):
        """Test PREFERRED yield does not depend on last dividend"""
        low = calculate_dividend_yield("PREFERRED", 100.0, 0.0, 0.02, 100.0)
        high = calculate_dividend_yield("PREFERRED", 100.0, 50.0, 0.02, 100.0)
        assert low == high

    def test_common_zero_dividend(self):
        """Test COMMON yield with zero dividend"""
        assert calculate_dividend_yield("COMMON", 100.0, last_dividend=0.0) == 0.0


class TestPERatio:
    """Test P/E ratio function"""

    def test_pe_ratio(self):
        assert calculate_pe_ratio(120.0, 8.0) == 15.0

    def test_pe_ratio_zero_dividend(self):
        """Test zero dividend returns the 0 sentinel"""
        assert calculate_pe_ratio(120.0, 0.0) == 0.0

    def test_pe_ratio_zero_price(self):
        assert calculate_pe_ratio(0.0, 8.0) == 0.0

    def test_pe_ratio_negative_price(self):
        """Test negative price is not guarded"""
        assert calculate_pe_ratio(-16.0, 8.0) == -2.0
