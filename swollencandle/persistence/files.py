"""File persistence for trade and candle series."""

from pathlib import Path
from typing import Optional, Sequence, Union

from ..config.defaults import CodecParams
from ..data.models import Candle, Trade
from ..errors.codec import CodecError
from ..logging.config import get_persistence_logger
from ..series.io import estimate_row_count, read_candles, read_trades, write_candles, write_trades

PathLike = Union[str, Path]

logger = get_persistence_logger(__name__)


def read_file(path: PathLike) -> bytes:
    """Read a whole file; OSError propagates unchanged."""
    with open(path, "rb") as f:
        return f.read()


def write_file(path: PathLike, data: bytes) -> None:
    """Write a whole buffer to a file, replacing it; OSError propagates unchanged."""
    with open(path, "wb") as f:
        f.write(data)


def load_candles(path: PathLike, params: Optional[CodecParams] = None) -> list[Candle]:
    """
    Load a candle series from a file.

    Args:
        path: File to read
        params: Codec parameters, usually from ConfigLoader.codec_params();
            the row estimate is only reported as expected_rows in the debug log

    Raises:
        OSError: If the file cannot be opened or read
        InvalidCandleFieldsError: If a row does not match the candle schema
    """
    params = params or CodecParams()
    try:
        data = read_file(path)
        candles = read_candles(data)
    except (OSError, CodecError) as e:
        logger.warning("Failed to load candles", path=str(path), error=str(e))
        raise

    logger.debug(
        "Loaded candles",
        path=str(path),
        bytes=len(data),
        rows=len(candles),
        expected_rows=estimate_row_count(len(data), params.candle_row_estimate),
    )
    return candles


def save_candles(path: PathLike, candles: Sequence[Candle],
                 params: Optional[CodecParams] = None) -> None:
    """Save a candle series to a file, header first."""
    data = write_candles(candles, params)
    try:
        write_file(path, data)
    except OSError as e:
        logger.warning("Failed to save candles", path=str(path), error=str(e))
        raise

    logger.debug("Saved candles", path=str(path), bytes=len(data), rows=len(candles))


def load_trades(path: PathLike, params: Optional[CodecParams] = None) -> list[Trade]:
    """
    Load a trade series from a file.

    Args:
        path: File to read
        params: Codec parameters, usually from ConfigLoader.codec_params();
            the row estimate is only reported as expected_rows in the debug log

    Raises:
        OSError: If the file cannot be opened or read
        InvalidTradeFieldsError: If a row does not match the trade schema
    """
    params = params or CodecParams()
    try:
        data = read_file(path)
        trades = read_trades(data)
    except (OSError, CodecError) as e:
        logger.warning("Failed to load trades", path=str(path), error=str(e))
        raise

    logger.debug(
        "Loaded trades",
        path=str(path),
        bytes=len(data),
        rows=len(trades),
        expected_rows=estimate_row_count(len(data), params.trade_row_estimate),
    )
    return trades


def save_trades(path: PathLike, trades: Sequence[Trade],
                params: Optional[CodecParams] = None) -> None:
    """Save a trade series to a file."""
    data = write_trades(trades, params)
    try:
        write_file(path, data)
    except OSError as e:
        logger.warning("Failed to save trades", path=str(path), error=str(e))
        raise

    logger.debug("Saved trades", path=str(path), bytes=len(data), rows=len(trades))
