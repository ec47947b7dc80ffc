"""Candle series integrity checks."""

from typing import Optional, Sequence

from ..data.models import Candle
from ..errors.aggregation import NonConstantPeriodError


def check_integrity(candles: Sequence[Candle]) -> Optional[int]:
    """
    Ensure a candle series has a single constant period.

    Args:
        candles: Candle series

    Returns:
        The common period, or None for an empty series

    Raises:
        NonConstantPeriodError: If any candle's period differs from the first
    """
    if not candles:
        return None
    period = candles[0].period
    for index, candle in enumerate(candles):
        if candle.period != period:
            raise NonConstantPeriodError(
                f"Candle {index} has period {candle.period}, expected {period}",
                expected_period=period,
                actual_period=candle.period,
                index=index,
            )
    return period
