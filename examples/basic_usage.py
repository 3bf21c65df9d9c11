#!/usr/bin/env python3
"""
Basic Usage Example - GBCE Exchange Valuation Engine

This script demonstrates the basic usage of the exchange engine with the
sample beverage catalog. It shows how to:
- Load the instrument catalog from config/instruments.yaml
- Record trades
- Query dividend yield, P/E ratio, VWSP and the All Share Index

Run: python examples/basic_usage.py
"""

import json
from dataclasses import asdict

from gbce_app.config import ConfigLoader
from gbce_app.exchange import Exchange
from gbce_app.logging import configure_logging


def record_sample_trades(exchange: Exchange) -> None:
    """Record the sample POP trades."""
    exchange.record_trade("POP", 100, "BUY", 110.0)
    exchange.record_trade("POP", 200, "SELL", 105.0)
    exchange.record_trade("POP", 50, "BUY", 115.0)


def main() -> None:
    """Main example function."""
    loader = ConfigLoader.create()
    configure_logging(**asdict(loader.load_config().logging))

    exchange = Exchange.from_config(loader)

    print("🍺 GBCE Exchange - Basic Usage Example")
    print("=" * 50)

    print(f"Registered instruments: {', '.join(exchange.symbols())}")

    record_sample_trades(exchange)

    print(f"Dividend Yield for POP at price 120: {exchange.dividend_yield('POP', 120.0):.4f}")
    print(f"P/E Ratio for POP at price 120: {exchange.pe_ratio('POP', 120.0):.4f}")
    print(f"Volume Weighted Stock Price for POP: {exchange.volume_weighted_price('POP'):.4f}")
    print(f"GBCE All Share Index: {exchange.all_share_index():.4f}")

    print("\n📊 Per-instrument report at price 120:")
    for symbol in exchange.symbols():
        snapshot = exchange.snapshot(symbol, 120.0)
        print(json.dumps(snapshot.to_dict(), indent=2))


if __name__ == "__main__":
    main()
