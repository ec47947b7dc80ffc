"""Aggregation engine: trade bucketing, candle upscaling and series merging"""

from .integrity import check_integrity
from .merge import merge_candles
from .trades import CandleAccumulator, trades_to_candles
from .upscale import upscale_candles

__all__ = [
    "CandleAccumulator",
    "check_integrity",
    "merge_candles",
    "trades_to_candles",
    "upscale_candles",
]
