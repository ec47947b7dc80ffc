"""Tests for the compact row writer"""

import pytest

from swollencandle.codec.fields import FieldKind
from swollencandle.codec.reader import RowReader
from swollencandle.codec.writer import RowWriter, format_value, nearest_power_of_2


class TestFormatValue:
    """Test scalar formatting"""

    def test_integers_minimal_decimal(self):
        assert format_value(0) == "0"
        assert format_value(-17) == "-17"
        assert format_value(18446744073709551615) == "18446744073709551615"

    def test_floats_shortest_round_trip(self):
        assert format_value(0.1) == "0.1"
        assert format_value(10.5) == "10.5"
        assert float(format_value(1 / 3)) == 1 / 3
        assert float(format_value(0.1 + 0.2)) == 0.1 + 0.2

    def test_text_always_quoted(self):
        assert format_value("time") == '"time"'
        assert format_value("") == '""'

    def test_unsupported_types_rejected(self):
        with pytest.raises(TypeError):
            format_value(True)
        with pytest.raises(TypeError):
            format_value(None)


class TestRowWriter:
    """Test row accumulation"""

    def test_single_row(self):
        writer = RowWriter()
        writer.format_row(1, 2.5, "x")
        assert writer.to_string() == '1,2.5,"x"\n'

    def test_multiple_rows(self):
        writer = RowWriter()
        writer.format_row(1, 2)
        writer.format_row(3, 4)
        assert writer.to_bytes() == b"1,2\n3,4\n"

    def test_empty_writer(self):
        writer = RowWriter()
        assert writer.to_bytes() == b""
        assert writer.size == 0

    def test_row_requires_values(self):
        with pytest.raises(ValueError):
            RowWriter().format_row()

    def test_capacity_grows_to_power_of_two(self):
        writer = RowWriter()
        writer.format_row("abcdefgh")  # 11 bytes with quotes and newline
        assert writer.size == 11
        assert writer.capacity == 16
        writer.format_row("abcdefgh")
        assert writer.size == 22
        assert writer.capacity == 32

    def test_reserve(self):
        writer = RowWriter()
        writer.reserve(100)
        assert writer.capacity == 128
        writer.format_row(1)
        assert writer.capacity == 128
        assert writer.to_bytes() == b"1\n"

    def test_reserve_never_shrinks(self):
        writer = RowWriter()
        writer.reserve(64)
        writer.reserve(10)
        assert writer.capacity == 64

    def test_written_rows_read_back(self):
        writer = RowWriter()
        writer.format_row(7, 0.30000000000000004, "label")
        row = RowReader.from_bytes(writer.to_bytes()).first_row()
        assert row.parse(FieldKind.UINT64, FieldKind.FLOAT64, FieldKind.TEXT) == (
            7, 0.30000000000000004, "label")


class TestNearestPowerOf2:
    """Test buffer growth helper"""

    @pytest.mark.parametrize("n,expected", [(0, 2), (1, 2), (2, 2), (3, 4), (64, 64), (65, 128)])
    def test_values(self, n, expected):
        assert nearest_power_of_2(n) == expected
