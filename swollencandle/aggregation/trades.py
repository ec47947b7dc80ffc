"""Trade to candle aggregation."""

import math
from typing import Sequence, Union

from ..data.models import Candle, Trade, UpscalePeriod


class CandleAccumulator:
    """Builds one candle from consecutive trades of the same bucket."""

    def __init__(self, trade: Trade, period: int):
        self.time = trade.time // period * period
        self.period = period
        self.count = 1
        self.volume = trade.amount
        self.turnover = trade.amount * trade.price
        self.open_price = trade.price
        self.high_price = trade.price
        self.low_price = trade.price
        self.close_price = trade.price

    def accepts(self, trade: Trade) -> bool:
        """Check whether the trade falls before the end of this bucket."""
        return trade.time < self.time + self.period

    def add_trade(self, trade: Trade) -> None:
        self.count += 1
        self.volume += trade.amount
        self.turnover += trade.price * trade.amount
        # Only one of the two checks fires per trade
        if trade.price > self.high_price:
            self.high_price = trade.price
        elif trade.price < self.low_price:
            self.low_price = trade.price
        self.close_price = trade.price

    def build(self) -> Candle:
        """Finalize the candle; vwap is only defined here."""
        vwap_price = self.turnover / self.volume if self.volume else math.nan
        return Candle(
            time=self.time,
            period=self.period,
            count=self.count,
            volume=self.volume,
            vwap_price=vwap_price,
            open_price=self.open_price,
            high_price=self.high_price,
            low_price=self.low_price,
            close_price=self.close_price,
        )


def trades_to_candles(trades: Sequence[Trade], period: Union[int, UpscalePeriod]) -> list[Candle]:
    """
    Aggregate time-ordered trades into fixed-period candles.

    Trades are folded left to right: a trade before the end of the current
    bucket extends the current candle, any later trade closes it and seeds
    a new one. Buckets without trades produce no candle.

    Args:
        trades: Trades ascending by time
        period: Bucket length in seconds, or a named period

    Returns:
        Candles ascending by time

    Raises:
        ValueError: If the period is not positive
    """
    if isinstance(period, UpscalePeriod):
        period = period.seconds
    if period <= 0:
        raise ValueError(f"Period must be positive, got {period}")
    if not trades:
        return []

    candles = []
    accumulator = CandleAccumulator(trades[0], period)
    for trade in trades[1:]:
        if accumulator.accepts(trade):
            accumulator.add_trade(trade)
        else:
            candles.append(accumulator.build())
            accumulator = CandleAccumulator(trade, period)
    candles.append(accumulator.build())

    return candles
