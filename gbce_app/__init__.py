"""
GBCE App - Global Beverage Corporation Exchange valuation engine

Tracks a catalog of tradable instruments, records executed trades against
them, and derives dividend yield, P/E ratio, volume weighted stock price
and the GBCE All Share Index.
"""

__version__ = "0.1.0"
__author__ = "GBCE Team"
