"""
Series encoding module.

Reads and writes trade and candle series in the row text format.
"""

from .io import estimate_row_count, read_candles, read_trades, write_candles, write_trades

__all__ = [
    "estimate_row_count",
    "read_candles",
    "read_trades",
    "write_candles",
    "write_trades",
]
