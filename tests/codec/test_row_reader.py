"""Tests for the quote-aware row reader"""

import pytest

from swollencandle.codec.fields import FieldKind
from swollencandle.codec.reader import RowReader
from swollencandle.errors import CodecError, ParseError, ParseFailure

F64 = FieldKind.FLOAT64
U64 = FieldKind.UINT64
TEXT = FieldKind.TEXT


def parse_first(text: str, *kinds: FieldKind):
    return RowReader(text).first_row().parse(*kinds)


class TestRowParsing:
    """Test parsing of a single row"""

    def test_bare_fields(self):
        assert parse_first("1,2.5,abc", U64, F64, TEXT) == (1, 2.5, "abc")

    def test_quoted_field_with_escaped_quote(self):
        assert parse_first('1,"a""b",2.5', U64, TEXT, F64) == (1, 'a"b', 2.5)

    def test_quoted_field_without_inner_quotes(self):
        assert parse_first('"x,y",1', TEXT, U64) == ("x,y", 1)

    def test_quoted_numeric_field(self):
        assert parse_first('"42","1.25"', U64, F64) == (42, 1.25)

    def test_empty_quoted_text(self):
        assert parse_first('"",1', TEXT, U64) == ("", 1)

    def test_whitespace_around_fields_is_insignificant(self):
        assert parse_first("  1 ,\t2.5\t, \"x\" \r\n", U64, F64, TEXT) == (1, 2.5, "x")

    def test_trailing_spaces_trimmed_from_bare_text(self):
        assert parse_first("a b  ,1", TEXT, U64) == ("a b", 1)

    def test_row_ends_at_newline(self):
        assert parse_first("1,2\n3,4", U64, U64) == (1, 2)

    def test_too_many_fields_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first("1,2,3,4", U64, U64, U64)
        assert exc_info.value.reason is ParseFailure.BAD_FIELD_COUNT
        assert exc_info.value.row_index == 0

    def test_missing_field_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first("1,2", U64, U64, U64)
        assert exc_info.value.reason is ParseFailure.BAD_FIELD_COUNT

    def test_trailing_comma_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first("1,2,", U64, U64)
        assert exc_info.value.reason is ParseFailure.BAD_FIELD_COUNT

    def test_empty_field_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first("1,,3", U64, U64, U64)
        assert exc_info.value.reason is ParseFailure.EMPTY_FIELD
        assert exc_info.value.field_index == 1

    def test_unterminated_quote_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first('1,"unterminated', U64, TEXT)
        assert exc_info.value.reason is ParseFailure.MALFORMED_QUOTE

    def test_newline_inside_quotes_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first('"a\nb",1', TEXT, U64)
        assert exc_info.value.reason is ParseFailure.MALFORMED_QUOTE

    def test_content_after_closing_quote_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first('"a"b,1', TEXT, U64)
        assert exc_info.value.reason is ParseFailure.BAD_FIELD_COUNT

    def test_non_numeric_content_rejected(self):
        with pytest.raises(ParseError) as exc_info:
            parse_first("1,abc", U64, F64)
        assert exc_info.value.reason is ParseFailure.NUMERIC_OVERFLOW_OR_FORMAT

    def test_space_inside_number_rejected(self):
        with pytest.raises(ParseError):
            parse_first("1 2,3", U64, U64)

    def test_requires_field_kinds(self):
        with pytest.raises(ValueError):
            parse_first("1", )


class TestRowIteration:
    """Test row ranges and cursors"""

    def test_all_rows(self):
        reader = RowReader("1,2\n3,4\n5,6\n")
        rows = [row.parse(U64, U64) for row in reader.all_rows()]
        assert rows == [(1, 2), (3, 4), (5, 6)]

    def test_all_rows_without_trailing_newline(self):
        reader = RowReader("1,2\n3,4")
        assert [row.parse(U64, U64) for row in reader.all_rows()] == [(1, 2), (3, 4)]

    def test_rows_after_header(self):
        reader = RowReader("a,b\n1,2\n3,4\n")
        rows = [row.parse(U64, U64) for row in reader.rows_after_header()]
        assert rows == [(1, 2), (3, 4)]

    def test_rows_after_header_on_empty_buffer(self):
        reader = RowReader("")
        assert list(reader.rows_after_header()) == []
        assert list(reader.all_rows()) == []

    def test_header_only_buffer(self):
        reader = RowReader("a,b\n")
        assert list(reader.rows_after_header()) == []

    def test_whitespace_only_buffer_has_no_rows(self):
        reader = RowReader("  \t\r ")
        assert list(reader.all_rows()) == []

    def test_leading_whitespace_skipped_per_row(self):
        reader = RowReader("  1,2\n\t 3,4\n")
        assert [row.cursor for row in reader.all_rows()] == [2, 8]

    def test_row_indices(self):
        reader = RowReader("h\n1\n2\n")
        assert [row.index for row in reader.rows_after_header()] == [1, 2]

    def test_parse_error_reports_row_index(self):
        reader = RowReader("1,2\n3,x\n")
        with pytest.raises(ParseError) as exc_info:
            for row in reader.all_rows():
                row.parse(U64, U64)
        assert exc_info.value.row_index == 1

    def test_rows_equal_by_cursor(self):
        reader = RowReader("1\n2\n")
        first = reader.first_row()
        assert first == reader.first_row()
        assert first != first.next_row()
        assert first.next_row().next_row() == reader.end_row()

    def test_text_size(self):
        assert RowReader("1,2\n").text_size == 4


class TestReaderConstruction:
    """Test reader construction from bytes"""

    def test_from_bytes(self):
        reader = RowReader.from_bytes(b"1,2\n")
        assert reader.first_row().parse(U64, U64) == (1, 2)

    def test_from_source_accepts_text(self):
        reader = RowReader.from_source("1,2\n")
        assert reader.first_row().parse(U64, U64) == (1, 2)

    def test_invalid_utf8_rejected(self):
        with pytest.raises(CodecError):
            RowReader.from_bytes(b"\xff\xfe,1\n")
