"""
Tests for time utilities and trailing window handling.

Verifies that explicit market time wins over wall-clock time and that
window membership is strictly after the window start.
"""

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

from gbce_app.utils.time import (
    get_market_time, ensure_utc, window_start, format_market_time
)


class TestGetMarketTime:
    """Test get_market_time function."""
    
    def test_uses_market_time_when_available(self):
        """Should use market timestamp when provided."""
        market_ts = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
        result = get_market_time(market_ts)
        assert result == market_ts
    
    def test_falls_back_to_wall_clock_time(self):
        """Should fall back to wall-clock time when market time is None."""
        with patch('gbce_app.utils.time.datetime') as mock_datetime:
            mock_now = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
            mock_datetime.now.return_value = mock_now
            
            result = get_market_time(None)
            assert result == mock_now
            mock_datetime.now.assert_called_once_with(timezone.utc)


class TestEnsureUTC:
    """Test ensure_utc function."""

    def test_naive_is_assumed_utc(self):
        """Naive datetimes gain UTC tzinfo without shifting."""
        naive = datetime(2024, 3, 1, 12, 0, 0)
        result = ensure_utc(naive)
        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_aware_is_converted(self):
        """Aware datetimes are converted to UTC."""
        cet = timezone(timedelta(hours=1))
        aware = datetime(2024, 3, 1, 13, 0, 0, tzinfo=cet)
        result = ensure_utc(aware)
        assert result == datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc


class TestWindow:
    """Test trailing window helpers."""

    def test_window_start(self):
        now = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert window_start(now, timedelta(minutes=10)) == datetime(2024, 3, 1, 11, 50, 0, tzinfo=timezone.utc)


class TestFormatMarketTime:
    """Test format_market_time function."""

    def test_iso_format(self):
        market_ts = datetime(2024, 3, 1, 12, 0, 0, tzinfo=timezone.utc)
        assert format_market_time(market_ts) == "2024-03-01T12:00:00+00:00"
