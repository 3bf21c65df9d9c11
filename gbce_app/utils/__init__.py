"""
Utility functions module.

Time Semantics:
- Trade timestamps are timezone-aware UTC datetimes
- Wall-clock time is only read at the outermost boundary (the exchange clock)
- Every windowed query accepts an explicit ``now`` for deterministic evaluation
"""
