"""
Canonical data models for trades and candles.

Entities are immutable once read or aggregated. Times are raw integer
timestamps in seconds; no timezone handling is involved.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


@dataclass(frozen=True)
class Trade:
    """Single execution."""
    time: int          # Seconds
    amount: float      # Traded amount
    price: float       # Execution price


@dataclass(frozen=True)
class Candle:
    """OHLCV aggregate over the bucket [time, time + period)."""
    time: int          # Left edge of the bucket, multiple of period
    period: int        # Bucket length in seconds
    count: int         # Number of trades folded in
    volume: float      # Total traded amount
    vwap_price: float  # Volume weighted average price
    open_price: float
    high_price: float
    low_price: float
    close_price: float


def candle_sort_key(candle: Candle) -> int:
    """Candles are ordered by time only."""
    return candle.time


class UpscalePeriod(Enum):
    """Coarse named periods with calendar-free lengths."""

    MINUTE = "minute"
    HOUR = "hour"
    DAY = "day"
    MONTH = "month"  # 30 days
    YEAR = "year"    # 360 days

    @property
    def seconds(self) -> int:
        return _SECONDS[self]


_SECONDS = {
    UpscalePeriod.MINUTE: 60,
    UpscalePeriod.HOUR: 3600,
    UpscalePeriod.DAY: 86400,
    UpscalePeriod.MONTH: 2592000,
    UpscalePeriod.YEAR: 31104000,
}

_BY_NAME = {period.value: period for period in UpscalePeriod}


def seconds_in(period: UpscalePeriod) -> int:
    """Length of a named period in seconds."""
    return period.seconds


def parse_period_name(text: Any) -> Optional[UpscalePeriod]:
    """
    Parse a period name.

    Only the exact lowercase literals minute, hour, day, month and year are
    recognised.

    Args:
        text: Candidate period name

    Returns:
        Matching UpscalePeriod, or None if the text is not a known name
    """
    if not isinstance(text, str):
        return None
    return _BY_NAME.get(text)
