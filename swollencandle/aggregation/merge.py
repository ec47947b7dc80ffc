"""Merging of two candle series."""

from typing import Sequence

from ..data.models import Candle, candle_sort_key
from ..errors.aggregation import DuplicatedCandleError, MergingPeriodsMismatchError, MismatchedCandlesError


def merge_candles(x: Sequence[Candle], y: Sequence[Candle]) -> list[Candle]:
    """
    Union two candle series keyed by time.

    Overlapping candles must be identical and are kept once; conflicting
    overlaps are rejected.

    Args:
        x: First series, no repeated times
        y: Second series

    Returns:
        Merged candles ascending by time

    Raises:
        MergingPeriodsMismatchError: If both series are non-empty with different periods
        DuplicatedCandleError: If x repeats a time
        MismatchedCandlesError: If a time in y holds a different candle
    """
    if x and y and x[0].period != y[0].period:
        raise MergingPeriodsMismatchError(
            f"Cannot merge period {x[0].period} with period {y[0].period}",
            left_period=x[0].period,
            right_period=y[0].period,
        )

    indexed: dict[int, Candle] = {}
    for candle in x:
        if candle.time in indexed:
            raise DuplicatedCandleError(f"Duplicated candle at time {candle.time}", time=candle.time)
        indexed[candle.time] = candle

    for candle in y:
        existing = indexed.setdefault(candle.time, candle)
        if existing != candle:
            raise MismatchedCandlesError(
                f"Mismatched candles at time {candle.time}",
                existing=existing,
                incoming=candle,
            )

    return sorted(indexed.values(), key=candle_sort_key)
