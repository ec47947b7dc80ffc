"""
Scalar field kinds and strict span conversion.

A row parse call describes its columns as an ordered list of FieldKind
values. Numeric conversion accepts exactly the scanned span: no surrounding
whitespace, no leading plus sign, no digit separators and no partial match.
"""

import math
import re
import struct
from enum import Enum
from typing import Union

from ..errors.codec import ParseFailure

FieldValue = Union[int, float, str]


class FieldKind(Enum):
    """Closed set of scalar kinds a row field can be parsed into."""
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    TEXT = "text"

    @property
    def is_integer(self) -> bool:
        return self in _INTEGER_RANGES

    @property
    def is_float(self) -> bool:
        return self in (FieldKind.FLOAT32, FieldKind.FLOAT64)


_INTEGER_RANGES = {
    FieldKind.INT32: (-(2 ** 31), 2 ** 31 - 1),
    FieldKind.UINT32: (0, 2 ** 32 - 1),
    FieldKind.INT64: (-(2 ** 63), 2 ** 63 - 1),
    FieldKind.UINT64: (0, 2 ** 64 - 1),
}

_SIGNED_INTEGER = re.compile(r"-?[0-9]+")
_UNSIGNED_INTEGER = re.compile(r"[0-9]+")
_FINITE_FLOAT = re.compile(r"-?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_SPECIAL_FLOAT = re.compile(r"-?(?:inf|infinity|nan)", re.IGNORECASE)

FLOAT32_MAX = 3.4028234663852886e38


class FieldConversionError(ValueError):
    """A span could not be converted to its field kind."""

    def __init__(self, reason: ParseFailure, span: str):
        super().__init__(f"{reason.value}: {span!r}")
        self.reason = reason
        self.span = span


def convert_span(span: str, kind: FieldKind) -> FieldValue:
    """
    Convert a scanned span to the value of the given kind.

    Args:
        span: Exact field text, without quotes and surrounding whitespace
        kind: Expected scalar kind

    Returns:
        Converted value (int, float or str)

    Raises:
        FieldConversionError: If the span is empty, malformed or out of range
    """
    if kind is FieldKind.TEXT:
        return span
    if not span:
        raise FieldConversionError(ParseFailure.EMPTY_FIELD, span)
    if kind.is_integer:
        return _convert_integer(span, kind)
    return _convert_float(span, kind)


def _convert_integer(span: str, kind: FieldKind) -> int:
    lowest, highest = _INTEGER_RANGES[kind]
    pattern = _UNSIGNED_INTEGER if lowest == 0 else _SIGNED_INTEGER
    if not pattern.fullmatch(span):
        raise FieldConversionError(ParseFailure.NUMERIC_OVERFLOW_OR_FORMAT, span)
    value = int(span)
    if value < lowest or value > highest:
        raise FieldConversionError(ParseFailure.NUMERIC_OVERFLOW_OR_FORMAT, span)
    return value


def _convert_float(span: str, kind: FieldKind) -> float:
    if _SPECIAL_FLOAT.fullmatch(span):
        return float(span)
    if not _FINITE_FLOAT.fullmatch(span):
        raise FieldConversionError(ParseFailure.NUMERIC_OVERFLOW_OR_FORMAT, span)
    value = float(span)
    if math.isinf(value):
        raise FieldConversionError(ParseFailure.NUMERIC_OVERFLOW_OR_FORMAT, span)
    if kind is FieldKind.FLOAT32:
        if abs(value) > FLOAT32_MAX:
            raise FieldConversionError(ParseFailure.NUMERIC_OVERFLOW_OR_FORMAT, span)
        value = struct.unpack("f", struct.pack("f", value))[0]
    return value


def unescape_quoted(span: str) -> str:
    """Collapse doubled quotes inside a quoted span."""
    return span.replace('""', '"')
