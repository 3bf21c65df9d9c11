"""
Time semantics utilities for trade timestamps and trailing windows.

Market time is supplied explicitly wherever possible; wall-clock time is
only a fallback used when a caller does not pass one.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional


def get_market_time(market_ts: Optional[datetime] = None) -> datetime:
    """
    Get the current market time, preferring an explicit timestamp over wall-clock time.

    Args:
        market_ts: Optional timestamp supplied by the caller

    Returns:
        Market time as UTC datetime, falling back to wall-clock time if unavailable
    """
    if market_ts is not None:
        return market_ts

    return datetime.now(timezone.utc)


def ensure_utc(ts: datetime) -> datetime:
    """
    Normalize a timestamp to timezone-aware UTC.

    Naive datetimes are assumed to already be in UTC.
    """
    if ts.tzinfo is None:
        return ts.replace(tzinfo=timezone.utc)
    return ts.astimezone(timezone.utc)


def window_start(now: datetime, window: timedelta) -> datetime:
    """
    Calculate the exclusive lower bound of a trailing window.

    Args:
        now: End of the window
        window: Window length

    Returns:
        ``now - window`` in UTC; only instants strictly after it are inside the window
    """
    return ensure_utc(now) - window


def format_market_time(market_ts: datetime) -> str:
    """
    Format market timestamp for reports and logging.

    Args:
        market_ts: Market timestamp to format

    Returns:
        ISO8601 formatted string
    """
    return market_ts.isoformat()
