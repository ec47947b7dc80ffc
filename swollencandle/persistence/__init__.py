"""File persistence layer."""

from .files import load_candles, load_trades, read_file, save_candles, save_trades, write_file

__all__ = [
    "load_candles",
    "load_trades",
    "read_file",
    "save_candles",
    "save_trades",
    "write_file",
]
