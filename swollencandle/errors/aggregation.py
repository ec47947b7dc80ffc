"""
Aggregation error classifications.

These exceptions are raised when candle series handed to the aggregator
violate its preconditions. None of them is retried: the input has to be
fixed by the caller.
"""

from typing import Any, Dict, Optional

from .codes import ErrorCode


class AggregationError(Exception):
    """Base class for invalid aggregation input."""

    code = ErrorCode.OK

    def __init__(self, message: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None):
        super().__init__(message or self.code.message)
        self.context = context or {}
        self.recoverable = False


class NonConstantPeriodError(AggregationError):
    """Candle series mixes different periods."""

    code = ErrorCode.NON_CONSTANT_PERIOD

    def __init__(self, message: Optional[str] = None, expected_period: Optional[int] = None,
                 actual_period: Optional[int] = None, index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.expected_period = expected_period
        self.actual_period = actual_period
        self.index = index


class InvalidUpscalePeriodError(AggregationError):
    """Target period is not an integer multiple of the source period."""

    code = ErrorCode.INVALID_UPSCALE_PERIOD

    def __init__(self, message: Optional[str] = None, source_period: Optional[int] = None,
                 target_period: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.source_period = source_period
        self.target_period = target_period


class MergingPeriodsMismatchError(AggregationError):
    """Two non-empty series to merge have different periods."""

    code = ErrorCode.MERGING_PERIODS_MISMATCH

    def __init__(self, message: Optional[str] = None, left_period: Optional[int] = None,
                 right_period: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.left_period = left_period
        self.right_period = right_period


class DuplicatedCandleError(AggregationError):
    """Same time appears twice within one merge input."""

    code = ErrorCode.DUPLICATED_CANDLE

    def __init__(self, message: Optional[str] = None, time: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.time = time


class MismatchedCandlesError(AggregationError):
    """Same time appears in both merge inputs with different fields."""

    code = ErrorCode.MISMATCHED_CANDLES

    def __init__(self, message: Optional[str] = None, existing: Any = None,
                 incoming: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.existing = existing
        self.incoming = incoming
