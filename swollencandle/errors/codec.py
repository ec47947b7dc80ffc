"""
Row codec error classifications.

Low level parse failures are reported as ParseError with the offending row
index and a ParseFailure reason. The series layer wraps them into
schema-level errors so callers can tell candle files from trade files.
"""

from enum import Enum
from typing import Any, Dict, Optional

from .codes import ErrorCode


class ParseFailure(Enum):
    """Why a single row could not be parsed."""

    MALFORMED_QUOTE = "malformed_quote"
    BAD_FIELD_COUNT = "bad_field_count"
    NUMERIC_OVERFLOW_OR_FORMAT = "numeric_overflow_or_format"
    EMPTY_FIELD = "empty_field"


class CodecError(Exception):
    """Base class for row text encoding and decoding failures."""

    code = ErrorCode.OK

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ParseError(CodecError):
    """A row failed to parse against its field kinds."""

    def __init__(self, row_index: int, reason: ParseFailure,
                 field_index: Optional[int] = None, **kwargs):
        message = f"Row {row_index}: {reason.value}"
        if field_index is not None:
            message += f" at field {field_index}"
        super().__init__(message, **kwargs)
        self.row_index = row_index
        self.reason = reason
        self.field_index = field_index


class InvalidFieldsError(CodecError):
    """A row failed schema-level field parsing."""

    def __init__(self, parse_error: ParseError, **kwargs):
        super().__init__(f"{self.code.message}: {parse_error}", **kwargs)
        self.parse_error = parse_error

    @property
    def row_index(self) -> int:
        return self.parse_error.row_index

    @property
    def reason(self) -> ParseFailure:
        return self.parse_error.reason


class InvalidCandleFieldsError(InvalidFieldsError):
    """A candle row could not be parsed."""

    code = ErrorCode.INVALID_CANDLE_FIELDS


class InvalidTradeFieldsError(InvalidFieldsError):
    """A trade row could not be parsed."""

    code = ErrorCode.INVALID_TRADE_FIELDS
