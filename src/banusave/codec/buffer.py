"""Byte-level writing and reading utilities.

This module provides the growable output buffer used by the encoder and the
bounds-checked cursor used by the decoder. All multi-byte numbers are big-endian.
"""

from __future__ import annotations

import struct

_INT64 = struct.Struct(">q")
_DOUBLE = struct.Struct(">d")


class ByteWriter:
    """Appends encoded primitives to a byte buffer.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_byte(0x10)
        >>> writer.write_int64(42)
        >>> data = writer.to_bytes()
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_byte(self, value: int) -> None:
        """Write a single byte.

        Args:
            value: Byte value (0-255)

        Raises:
            ValueError: If value does not fit in one byte
        """
        if not 0 <= value <= 0xFF:
            raise ValueError(f"Byte value must be 0-255, got {value}")
        self._buffer.append(value)

    def write_int64(self, value: int) -> None:
        """Write a signed 64-bit integer (two's complement).

        Raises:
            struct.error: If value is outside the signed 64-bit range
        """
        self._buffer += _INT64.pack(value)

    def write_double(self, value: float) -> None:
        """Write an IEEE-754 double."""
        self._buffer += _DOUBLE.pack(value)

    def write_bytes(self, data: bytes) -> None:
        """Write raw bytes."""
        self._buffer += data

    def write_cstring(self, data: bytes) -> None:
        """Write bytes followed by a NUL terminator.

        Raises:
            ValueError: If data already contains a NUL byte
        """
        if b"\x00" in data:
            raise ValueError("Embedded NUL byte in terminated string")
        self._buffer += data
        self._buffer.append(0x00)

    def __len__(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        """Return the written bytes."""
        return bytes(self._buffer)


class ByteReader:
    """Reads encoded primitives from a byte buffer.

    The reader keeps an explicit position and checks it against the buffer
    length before every access, so running off the end raises IndexError
    instead of returning short data.

    Example:
        >>> reader = ByteReader(data)
        >>> tag = reader.read_byte()
        >>> value = reader.read_int64()
    """

    def __init__(self, data: bytes | bytearray | memoryview, position: int = 0) -> None:
        """Initialize a reader over data.

        Args:
            data: Byte buffer to read
            position: Offset of the first byte to read
        """
        self._data = data if isinstance(data, bytes) else bytes(data)
        self._view = memoryview(self._data)
        if not 0 <= position <= len(self._view):
            raise ValueError(f"Start position {position} outside buffer of {len(self._view)} bytes")
        self._position = position

    def peek_byte(self) -> int:
        """Return the next byte without consuming it.

        Raises:
            IndexError: If no bytes remain
        """
        if self._position >= len(self._view):
            raise IndexError("Attempted to read past end of buffer")
        return self._view[self._position]

    def read_byte(self) -> int:
        """Read one byte.

        Raises:
            IndexError: If no bytes remain
        """
        value = self.peek_byte()
        self._position += 1
        return value

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read exactly num_bytes bytes.

        Raises:
            IndexError: If fewer than num_bytes remain
        """
        if self._position + num_bytes > len(self._view):
            raise IndexError(
                f"Not enough bytes: need {num_bytes}, have {self.bytes_remaining()}"
            )
        start = self._position
        self._position += num_bytes
        return self._view[start : self._position].tobytes()

    def read_int64(self) -> int:
        """Read a signed 64-bit big-endian integer."""
        return _INT64.unpack(self.read_bytes(8))[0]

    def read_double(self) -> float:
        """Read a big-endian IEEE-754 double."""
        return _DOUBLE.unpack(self.read_bytes(8))[0]

    def read_cstring(self) -> bytes:
        """Read bytes up to a NUL terminator and consume the terminator.

        Returns:
            Bytes before the terminator

        Raises:
            IndexError: If the buffer ends before a terminator is found
        """
        end = self._data.find(b"\x00", self._position)
        if end < 0:
            raise IndexError("Unterminated string: no NUL byte before end of buffer")
        data = self._view[self._position : end].tobytes()
        self._position = end + 1
        return data

    def bytes_remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._view) - self._position

    def position(self) -> int:
        """Return the current read position in bytes."""
        return self._position
