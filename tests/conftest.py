"""Pytest configuration and shared fixtures."""

import pytest

from swollencandle.data.models import Candle, Trade


def make_candle(time: int, period: int = 60, **overrides) -> Candle:
    """Build a candle with sensible defaults for the fields under test."""
    fields = {
        "time": time,
        "period": period,
        "count": 1,
        "volume": 1.0,
        "vwap_price": 100.0,
        "open_price": 100.0,
        "high_price": 100.0,
        "low_price": 100.0,
        "close_price": 100.0,
    }
    fields.update(overrides)
    return Candle(**fields)


@pytest.fixture
def sample_trades() -> list[Trade]:
    """Three trades spread over two one-minute buckets."""
    return [
        Trade(time=0, amount=1.0, price=10.0),
        Trade(time=10, amount=1.0, price=11.0),
        Trade(time=70, amount=1.0, price=9.0),
    ]


@pytest.fixture
def minute_candles() -> list[Candle]:
    """Sixty one-minute candles covering a single hour, vwap 1..60."""
    return [
        make_candle(
            time=i * 60,
            volume=1.0,
            vwap_price=float(i + 1),
            open_price=float(i + 1),
            high_price=float(i + 2),
            low_price=float(i),
            close_price=float(i + 1),
        )
        for i in range(60)
    ]


@pytest.fixture
def sample_candles() -> list[Candle]:
    """Small valid candle series with uniform period."""
    return [
        Candle(time=0, period=60, count=2, volume=2.0, vwap_price=10.5,
               open_price=10.0, high_price=11.0, low_price=10.0, close_price=11.0),
        Candle(time=60, period=60, count=1, volume=1.0, vwap_price=9.0,
               open_price=9.0, high_price=9.0, low_price=9.0, close_price=9.0),
        Candle(time=180, period=60, count=3, volume=0.30000000000000004, vwap_price=12.345678901234567,
               open_price=12.1, high_price=12.9, low_price=11.7, close_price=12.2),
    ]
