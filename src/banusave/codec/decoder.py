"""Binary decoder for banusave values.

This module provides the decode_value() function that converts tagged binary
data back to Python values. Decoding is recursive descent over a single
cursor: each value reports how many bytes it consumed, and arrays and objects
find their end by meeting a 0x00 byte where the next entry would start.
"""

from __future__ import annotations

import struct
from typing import Any

from ..config import DEFAULT_MAX_DEPTH
from ..exceptions import FormatError
from .buffer import ByteReader
from .tags import TERMINATOR, ValueType


def decode_value(
    data: bytes,
    offset: int = 0,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    text_errors: str = "strict",
) -> tuple[Any, int]:
    """Decode one value from binary data.

    Args:
        data: Binary data to decode
        offset: Position of the value's tag byte
        max_depth: Maximum nesting of arrays and objects
        text_errors: Error handler for UTF-8 decoding of strings and keys

    Returns:
        Tuple of (value, number of bytes consumed from offset)

    Raises:
        FormatError: If data is truncated, has an unknown tag, or is otherwise malformed

    Examples:
        ```python
        from banusave.codec import decode_value, encode_value

        data = encode_value({"hp": 100, "items": ["sword"]})
        value, consumed = decode_value(data)
        assert consumed == len(data)
        ```
    """
    try:
        reader = ByteReader(data, offset)
    except ValueError as e:
        raise FormatError(str(e)) from e

    try:
        value = _decode_one(reader, 0, max_depth, text_errors)
    except IndexError as e:
        raise FormatError(f"Truncated data at byte {reader.position()}: {e}") from e
    except struct.error as e:
        raise FormatError(f"Malformed numeric payload at byte {reader.position()}: {e}") from e

    return value, reader.position() - offset


def decode_text(raw: bytes, what: str, errors: str = "strict") -> str:
    """Decode UTF-8 bytes read from a NUL-terminated slot.

    Raises:
        FormatError: If raw is not valid UTF-8 under the given error handler
    """
    try:
        return raw.decode("utf-8", errors=errors)
    except UnicodeDecodeError as e:
        raise FormatError(f"{what}: invalid UTF-8 encoding: {e}") from e


def _decode_one(reader: ByteReader, depth: int, max_depth: int, text_errors: str) -> Any:
    """Decode the value starting at the reader's position.

    Raises:
        FormatError: If data is invalid
        IndexError: If data is truncated
    """
    start = reader.position()
    tag = reader.read_byte()

    if tag == ValueType.NULL:
        return None

    if tag == ValueType.FALSE:
        return False

    if tag == ValueType.TRUE:
        return True

    if tag == ValueType.INTEGER:
        return reader.read_int64()

    if tag == ValueType.FLOAT:
        return reader.read_double()

    if tag == ValueType.STRING:
        return decode_text(reader.read_cstring(), f"String at byte {start}", text_errors)

    if tag in (ValueType.ARRAY, ValueType.OBJECT):
        if depth + 1 > max_depth:
            raise FormatError(f"Nesting at byte {start} exceeds max_depth={max_depth}")

        if tag == ValueType.ARRAY:
            items: list[Any] = []
            while reader.peek_byte() != TERMINATOR:
                items.append(_decode_one(reader, depth + 1, max_depth, text_errors))
            reader.read_byte()
            return items

        entries: dict[str, Any] = {}
        while reader.peek_byte() != TERMINATOR:
            key_start = reader.position()
            key = decode_text(reader.read_cstring(), f"Key at byte {key_start}", text_errors)
            if key in entries:
                raise FormatError(f"Duplicate key {key!r} at byte {key_start}")
            entries[key] = _decode_one(reader, depth + 1, max_depth, text_errors)
        reader.read_byte()
        return entries

    raise FormatError(f"Unknown tag 0x{tag:02x} at byte {start}")
