"""
Row codec.

Permissive, quote-aware parsing of newline separated rows and compact
formatting of scalar rows, shared by trade and candle persistence.
"""

from .fields import FieldKind, convert_span
from .reader import Row, RowRange, RowReader
from .writer import RowWriter, format_value, nearest_power_of_2

__all__ = [
    "FieldKind",
    "convert_span",
    "Row",
    "RowRange",
    "RowReader",
    "RowWriter",
    "format_value",
    "nearest_power_of_2",
]
