"""
swollencandle - OHLCV candle aggregation and row encoding

Builds fixed-period candles from raw trades, upscales candles to coarser
named periods, merges candle series and persists trades and candles in a
compact, quote-aware row text format.
"""

__version__ = "0.1.0"
__author__ = "swollencandle Team"

from .aggregation import merge_candles, trades_to_candles, upscale_candles
from .data.models import Candle, Trade, UpscalePeriod, parse_period_name, seconds_in
from .series import read_candles, read_trades, write_candles, write_trades

__all__ = [
    "Candle",
    "Trade",
    "UpscalePeriod",
    "merge_candles",
    "parse_period_name",
    "read_candles",
    "read_trades",
    "seconds_in",
    "trades_to_candles",
    "upscale_candles",
    "write_candles",
    "write_trades",
]
