"""
Quote-aware row reader over a single immutable text buffer.

Rows are separated by newlines and fields by commas. Spaces, tabs and
carriage returns around a field are insignificant. A field is either bare
or wrapped in double quotes, where a doubled quote stands for a literal
one. Quoted fields cannot span lines.

A Row is a cursor (character offset) into the reader's buffer. Iterating
a range advances the cursor line by line until it reaches the end cursor.
"""

from typing import Iterator, Optional, Union

from ..errors.codec import CodecError, ParseError, ParseFailure
from .fields import FieldConversionError, FieldKind, FieldValue, convert_span, unescape_quoted

_WHITESPACE = " \t\r"
_TOKEN_TERMINATORS = "\t\r\n,"


class Row:
    """Cursor pointing at the first non-whitespace character of a row."""

    __slots__ = ("_text", "_cursor", "index")

    def __init__(self, text: str, cursor: int, index: int = 0):
        self._text = text
        self._cursor = cursor
        self.index = index

    @property
    def cursor(self) -> int:
        return self._cursor

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Row):
            return NotImplemented
        return self._text is other._text and self._cursor == other._cursor

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self) -> int:
        return hash(self._cursor)

    def __repr__(self) -> str:
        return f"Row(index={self.index}, cursor={self._cursor})"

    def parse(self, *kinds: FieldKind) -> tuple[FieldValue, ...]:
        """
        Parse the row into values of the given kinds.

        The row must contain exactly len(kinds) comma separated fields and
        end at a newline or the end of the buffer.

        Args:
            *kinds: Expected kind of each field, in column order

        Returns:
            Tuple of converted values in column order

        Raises:
            ParseError: If the row does not match the field kinds
        """
        if not kinds:
            raise ValueError("At least one field kind is required")

        text = self._text
        size = len(text)
        cursor = self._cursor
        last = len(kinds) - 1
        values = []

        for position, kind in enumerate(kinds):
            value, cursor = self._parse_field(cursor, kind, position)
            values.append(value)
            cursor = _skip_whitespace(text, cursor)
            if position == last:
                if cursor < size and text[cursor] != "\n":
                    raise ParseError(self.index, ParseFailure.BAD_FIELD_COUNT, position)
            else:
                if cursor >= size or text[cursor] != ",":
                    raise ParseError(self.index, ParseFailure.BAD_FIELD_COUNT, position)
                cursor = _skip_whitespace(text, cursor + 1)

        return tuple(values)

    def next_row(self) -> "Row":
        """Row following this one (past the next newline)."""
        text = self._text
        newline = text.find("\n", self._cursor)
        cursor = len(text) if newline == -1 else newline + 1
        return Row(text, _skip_whitespace(text, cursor), self.index + 1)

    def _parse_field(self, cursor: int, kind: FieldKind, position: int) -> tuple[FieldValue, int]:
        text = self._text
        if cursor < len(text) and text[cursor] == '"':
            end, has_inner_quotes = _scan_quoted(text, cursor)
            if end is None:
                raise ParseError(self.index, ParseFailure.MALFORMED_QUOTE, position)
            span = text[cursor + 1:end]
            if kind is FieldKind.TEXT and has_inner_quotes:
                return unescape_quoted(span), end + 1
            return self._convert(span, kind, position), end + 1

        end = _scan_token(text, cursor)
        if end == cursor:
            raise ParseError(self.index, ParseFailure.EMPTY_FIELD, position)
        span = text[cursor:end].rstrip(" ")
        return self._convert(span, kind, position), end

    def _convert(self, span: str, kind: FieldKind, position: int) -> FieldValue:
        try:
            return convert_span(span, kind)
        except FieldConversionError as e:
            raise ParseError(self.index, e.reason, position) from e


class RowRange:
    """Half-open range of rows [begin, end)."""

    def __init__(self, begin: Row, end: Row):
        self.begin = begin
        self.end = end

    def __iter__(self) -> Iterator[Row]:
        row = self.begin
        while row != self.end:
            yield row
            row = row.next_row()


class RowReader:
    """Owns the text buffer rows point into."""

    def __init__(self, text: str):
        self._text = text

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "RowReader":
        """Create a reader over UTF-8 encoded data."""
        try:
            return cls(bytes(data).decode("utf-8"))
        except UnicodeDecodeError as e:
            raise CodecError(f"Row text is not valid UTF-8: {e}") from e

    @classmethod
    def from_source(cls, source: Union[str, bytes, bytearray, memoryview]) -> "RowReader":
        """Create a reader from either decoded text or raw bytes."""
        if isinstance(source, str):
            return cls(source)
        return cls.from_bytes(source)

    @property
    def text_size(self) -> int:
        return len(self._text)

    def first_row(self) -> Row:
        return Row(self._text, _skip_whitespace(self._text, 0), 0)

    def end_row(self) -> Row:
        return Row(self._text, len(self._text))

    def all_rows(self) -> RowRange:
        """Every row, starting with the first."""
        return RowRange(self.first_row(), self.end_row())

    def rows_after_header(self) -> RowRange:
        """Every row but the first."""
        end = self.end_row()
        first = self.first_row()
        if first == end:
            return RowRange(end, end)
        return RowRange(first.next_row(), end)


def _skip_whitespace(text: str, cursor: int) -> int:
    size = len(text)
    while cursor < size and text[cursor] in _WHITESPACE:
        cursor += 1
    return cursor


def _scan_token(text: str, cursor: int) -> int:
    size = len(text)
    while cursor < size and text[cursor] not in _TOKEN_TERMINATORS:
        cursor += 1
    return cursor


def _scan_quoted(text: str, cursor: int) -> tuple[Optional[int], bool]:
    """Return the offset of the closing quote, or None if unterminated."""
    size = len(text)
    has_inner_quotes = False
    cursor += 1
    while cursor < size:
        char = text[cursor]
        if char == "\n":
            return None, has_inner_quotes
        if char == '"':
            if cursor + 1 < size and text[cursor + 1] == '"':
                has_inner_quotes = True
                cursor += 2
                continue
            return cursor, has_inner_quotes
        cursor += 1
    return None, has_inner_quotes
