"""
Instrument and trade data models.
"""
from .models import Instrument, InstrumentKind, LedgerEntry, Trade, TradeSide

__all__ = ["Instrument", "InstrumentKind", "LedgerEntry", "Trade", "TradeSide"]
