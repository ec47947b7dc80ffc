"""
Trade and candle series encoding.

Binds the row codec to the two persisted schemas:

* candles: header row, then time,period,trades,volume,vwap_price,
  open_price,high_price,low_price,close_price
* trades: no header, time,price,amount per row (note the price/amount
  order differs from the Trade field order)

A failing row aborts the whole read; no partial series is returned.
"""

from typing import Optional, Sequence, Union

from ..codec.fields import FieldKind
from ..codec.reader import RowReader
from ..codec.writer import RowWriter
from ..config.defaults import CodecParams
from ..data.models import Candle, Trade
from ..errors.codec import InvalidCandleFieldsError, InvalidTradeFieldsError, ParseError

Source = Union[str, bytes, bytearray, memoryview]

CANDLE_HEADER = (
    "time", "period", "trades", "volume", "vwap_price",
    "open_price", "high_price", "low_price", "close_price",
)

CANDLE_FIELDS = (
    FieldKind.UINT64,   # time
    FieldKind.UINT32,   # period
    FieldKind.UINT64,   # count
    FieldKind.FLOAT64,  # volume
    FieldKind.FLOAT64,  # vwap_price
    FieldKind.FLOAT64,  # open_price
    FieldKind.FLOAT64,  # high_price
    FieldKind.FLOAT64,  # low_price
    FieldKind.FLOAT64,  # close_price
)

TRADE_FIELDS = (
    FieldKind.UINT64,   # time
    FieldKind.FLOAT64,  # price
    FieldKind.FLOAT64,  # amount
)

_DEFAULT_PARAMS = CodecParams()


def estimate_row_count(text_size: int, row_estimate: int) -> int:
    """Expected number of rows in a buffer of the given size; reported in load logs only."""
    return text_size // row_estimate + 1


def read_candles(source: Source) -> list[Candle]:
    """
    Decode a candle series.

    Rows are appended to a list as they parse; the candle row estimate is
    not used for pre-sizing and is only reported by the file loaders.

    Args:
        source: Row text, as str or UTF-8 bytes; the first row is a header

    Returns:
        Candles in file order

    Raises:
        InvalidCandleFieldsError: If any row does not match the candle schema
        CodecError: If the bytes are not valid UTF-8
    """
    reader = RowReader.from_source(source)
    candles = []
    try:
        for row in reader.rows_after_header():
            candles.append(Candle(*row.parse(*CANDLE_FIELDS)))
    except ParseError as e:
        raise InvalidCandleFieldsError(e) from e
    return candles


def write_candles(candles: Sequence[Candle], params: Optional[CodecParams] = None) -> bytes:
    """Encode a candle series, header first."""
    params = params or _DEFAULT_PARAMS
    writer = RowWriter()
    writer.reserve((len(candles) + 1) * params.candle_row_estimate)
    writer.format_row(*CANDLE_HEADER)
    for candle in candles:
        writer.format_row(
            int(candle.time), int(candle.period), int(candle.count),
            float(candle.volume), float(candle.vwap_price),
            float(candle.open_price), float(candle.high_price),
            float(candle.low_price), float(candle.close_price),
        )
    return writer.to_bytes()


def read_trades(source: Source) -> list[Trade]:
    """
    Decode a trade series.

    Rows are appended to a list as they parse; the trade row estimate is
    not used for pre-sizing and is only reported by the file loaders.

    Args:
        source: Row text, as str or UTF-8 bytes; no header row

    Returns:
        Trades in file order

    Raises:
        InvalidTradeFieldsError: If any row does not match the trade schema
        CodecError: If the bytes are not valid UTF-8
    """
    reader = RowReader.from_source(source)
    trades = []
    try:
        for row in reader.all_rows():
            time, price, amount = row.parse(*TRADE_FIELDS)
            trades.append(Trade(time=time, amount=amount, price=price))
    except ParseError as e:
        raise InvalidTradeFieldsError(e) from e
    return trades


def write_trades(trades: Sequence[Trade], params: Optional[CodecParams] = None) -> bytes:
    """Encode a trade series as time,price,amount rows."""
    params = params or _DEFAULT_PARAMS
    writer = RowWriter()
    writer.reserve(len(trades) * params.trade_row_estimate)
    for trade in trades:
        writer.format_row(int(trade.time), float(trade.price), float(trade.amount))
    return writer.to_bytes()
