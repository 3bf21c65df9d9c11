"""Volume Weighted Stock Price (VWSP) calculations"""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from ..utils.time import ensure_utc

if TYPE_CHECKING:
    from ..data.models import LedgerEntry


@dataclass(frozen=True)
class VWSPResult:
    """Aggregation result for a single symbol over a trailing window"""
    value: float
    total_quantity: int
    trade_count: int


def calculate_vwsp(entries: Iterable["LedgerEntry"], symbol: str, since: datetime) -> VWSPResult:
    """
    Calculate Volume Weighted Stock Price over trades after ``since``

    VWSP = sum(price * quantity) / sum(quantity)

    Only trades tagged with ``symbol``, timestamped strictly after ``since``
    and with a positive price take part.

    Args:
        entries: Ledger entries to scan
        symbol: Instrument symbol
        since: Exclusive lower bound of the window

    Returns:
        VWSPResult; value is 0.0 when no trade qualifies or total quantity is 0
    """
    since = ensure_utc(since)
    total_traded_value = 0.0
    total_quantity = 0
    trade_count = 0

    for entry in entries:
        if entry.symbol != symbol:
            continue

        trade = entry.trade
        if ensure_utc(trade.timestamp) > since and trade.price > 0:
            total_traded_value += trade.traded_value
            total_quantity += trade.quantity
            trade_count += 1

    if total_quantity == 0:
        return VWSPResult(value=0.0, total_quantity=0, trade_count=trade_count)

    return VWSPResult(
        value=total_traded_value / total_quantity,
        total_quantity=total_quantity,
        trade_count=trade_count,
    )
