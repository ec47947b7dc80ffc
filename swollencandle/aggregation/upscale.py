"""Candle to candle upscaling."""

import math
from typing import Sequence

from ..data.models import Candle, UpscalePeriod
from ..errors.aggregation import InvalidUpscalePeriodError
from .integrity import check_integrity


def upscale_candles(source: Sequence[Candle], target: UpscalePeriod) -> list[Candle]:
    """
    Re-aggregate candles to a coarser named period.

    The source is cut into consecutive runs of target/source candles each;
    a trailing run shorter than that is dropped. The source is expected to
    start on a target boundary with no gaps.

    Args:
        source: Candles with a single constant period, ascending by time
        target: Named target period

    Returns:
        Upscaled candles

    Raises:
        NonConstantPeriodError: If the source mixes periods
        InvalidUpscalePeriodError: If the target is not a multiple of the source period
    """
    period = check_integrity(source)
    if period is None:
        return []

    target_seconds = target.seconds
    if period <= 0 or target_seconds % period != 0:
        raise InvalidUpscalePeriodError(
            f"Cannot upscale period {period} to {target.value} ({target_seconds}s)",
            source_period=period,
            target_period=target_seconds,
        )
    if target_seconds == period:
        return list(source)

    candles_to_fit = target_seconds // period
    result = []
    for start in range(0, len(source) // candles_to_fit * candles_to_fit, candles_to_fit):
        result.append(_roll_up(source[start:start + candles_to_fit], target_seconds))
    return result


def _roll_up(run: Sequence[Candle], target_seconds: int) -> Candle:
    first = run[0]
    count = first.count
    volume = first.volume
    turnover = first.vwap_price * first.volume
    high_price = first.high_price
    low_price = first.low_price
    for candle in run[1:]:
        count += candle.count
        volume += candle.volume
        turnover += candle.volume * candle.vwap_price
        if candle.high_price > high_price:
            high_price = candle.high_price
        if candle.low_price < low_price:
            low_price = candle.low_price

    return Candle(
        time=first.time // target_seconds * target_seconds,
        period=target_seconds,
        count=count,
        volume=volume,
        vwap_price=turnover / volume if volume else math.nan,
        open_price=first.open_price,
        high_price=high_price,
        low_price=low_price,
        close_price=run[-1].close_price,
    )
