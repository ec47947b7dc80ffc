"""
Compact row writer.

Integers are written in minimal decimal form, floats with the shortest
representation that reads back to the same value, and text wrapped in
double quotes. The writer never escapes quotes: callers only pass text
without embedded quotes.
"""

from typing import Union

WritableValue = Union[int, float, str]

_ENCODING = "utf-8"


def nearest_power_of_2(n: int) -> int:
    """Smallest power of two >= n, with a floor of 2."""
    if n < 2:
        return 2
    return 1 << (n - 1).bit_length()


def format_value(value: WritableValue) -> str:
    """Render a single scalar as row text."""
    # bool is an int subclass but has no row representation
    if isinstance(value, bool):
        raise TypeError(f"Cannot format value of type {type(value).__name__}")
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, str):
        return f'"{value}"'
    raise TypeError(f"Cannot format value of type {type(value).__name__}")


class RowWriter:
    """Accumulates rows in a buffer whose capacity grows by powers of two."""

    def __init__(self):
        self._buffer = bytearray()
        self._size = 0

    @property
    def size(self) -> int:
        """Number of bytes written."""
        return self._size

    @property
    def capacity(self) -> int:
        """Number of bytes the buffer can hold before growing."""
        return len(self._buffer)

    def reserve(self, n: int) -> None:
        """Pre-size the buffer for at least n bytes."""
        if n > len(self._buffer):
            self._grow(nearest_power_of_2(n))

    def format_row(self, *values: WritableValue) -> None:
        """
        Append one row made of the given values.

        Args:
            *values: Row fields in column order

        Raises:
            TypeError: If a value is not an int, float or str
        """
        if not values:
            raise ValueError("A row needs at least one value")
        line = ",".join(format_value(value) for value in values) + "\n"
        self._append(line.encode(_ENCODING))

    def to_bytes(self) -> bytes:
        return bytes(self._buffer[:self._size])

    def to_string(self) -> str:
        return self.to_bytes().decode(_ENCODING)

    def _append(self, chunk: bytes) -> None:
        end = self._size + len(chunk)
        if end > len(self._buffer):
            self._grow(nearest_power_of_2(end))
        self._buffer[self._size:end] = chunk
        self._size = end

    def _grow(self, capacity: int) -> None:
        self._buffer.extend(bytes(capacity - len(self._buffer)))
