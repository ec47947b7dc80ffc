"""
Error classification for candle aggregation and row encoding.

Aggregation errors report invalid series handed to the aggregator, codec
errors report rows that could not be decoded. OS level I/O errors are not
wrapped and reach callers as OSError.
"""

from .codes import ErrorCode
from .aggregation import (
    AggregationError,
    NonConstantPeriodError,
    InvalidUpscalePeriodError,
    MergingPeriodsMismatchError,
    DuplicatedCandleError,
    MismatchedCandlesError,
)
from .codec import (
    ParseFailure,
    CodecError,
    ParseError,
    InvalidFieldsError,
    InvalidCandleFieldsError,
    InvalidTradeFieldsError,
)

__all__ = [
    "ErrorCode",
    # Aggregation Errors
    "AggregationError",
    "NonConstantPeriodError",
    "InvalidUpscalePeriodError",
    "MergingPeriodsMismatchError",
    "DuplicatedCandleError",
    "MismatchedCandlesError",
    # Codec Errors
    "ParseFailure",
    "CodecError",
    "ParseError",
    "InvalidFieldsError",
    "InvalidCandleFieldsError",
    "InvalidTradeFieldsError",
]
