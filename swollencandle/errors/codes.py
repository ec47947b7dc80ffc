"""
Error codes shared by every swollencandle exception.

Each code maps to a short human readable message so callers can present
failures without matching on exception classes.
"""

from enum import Enum


class ErrorCode(Enum):
    """Closed set of failure kinds reported by the library."""

    OK = "ok"
    NON_CONSTANT_PERIOD = "non_constant_period"
    INVALID_UPSCALE_PERIOD = "invalid_upscale_period"
    MERGING_PERIODS_MISMATCH = "merging_periods_mismatch"
    DUPLICATED_CANDLE = "duplicated_candle"
    MISMATCHED_CANDLES = "mismatched_candles"
    INVALID_CANDLE_FIELDS = "invalid_candle_fields"
    INVALID_TRADE_FIELDS = "invalid_trade_fields"

    @property
    def message(self) -> str:
        return _MESSAGES[self]


_MESSAGES = {
    ErrorCode.OK: "Ok",
    ErrorCode.NON_CONSTANT_PERIOD: "Non constant period",
    ErrorCode.INVALID_UPSCALE_PERIOD: "Invalid upscale period",
    ErrorCode.MERGING_PERIODS_MISMATCH: "Merging periods mismatch",
    ErrorCode.DUPLICATED_CANDLE: "Duplicated candle",
    ErrorCode.MISMATCHED_CANDLES: "Mismatched candles",
    ErrorCode.INVALID_CANDLE_FIELDS: "Invalid candle fields",
    ErrorCode.INVALID_TRADE_FIELDS: "Invalid trade fields",
}
