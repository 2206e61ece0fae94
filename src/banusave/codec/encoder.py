"""Binary encoder for banusave values.

This module provides the encode_value() function that converts a JSON-like
Python value (None, bool, int, float, str, list, dict) to tagged binary form.
"""

from __future__ import annotations

from typing import Any

from ..config import DEFAULT_MAX_DEPTH
from ..exceptions import InputValidationError
from .buffer import ByteWriter
from .tags import INT64_MAX, INT64_MIN, TERMINATOR, ValueType


def encode_value(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> bytes:
    """Encode a value to banusave binary format.

    Values are written tag byte first. Integers and floats carry an 8-byte
    big-endian payload, strings are NUL-terminated UTF-8, and arrays and
    objects close with a 0x00 end marker.

    Args:
        value: Value to encode
        max_depth: Maximum nesting of arrays and objects

    Returns:
        Encoded bytes

    Raises:
        InputValidationError: If the value cannot be represented

    Examples:
        ```python
        from banusave.codec import encode_value

        encode_value(None)            # b"\\x00"
        encode_value(True)            # b"\\x02"
        encode_value("hi")            # b"0hi\\x00"
        encode_value({"a": [1, 2.5]})
        ```
    """
    writer = ByteWriter()
    _encode_into(writer, value, 0, max_depth, "$")
    return writer.to_bytes()


def value_type(value: Any) -> ValueType:
    """Return the variant a Python value encodes as.

    Raises:
        InputValidationError: If the type is not supported
    """
    if value is None:
        return ValueType.NULL

    # bool is a subclass of int, so it must be matched first
    if isinstance(value, bool):
        return ValueType.TRUE if value else ValueType.FALSE

    if isinstance(value, int):
        return ValueType.INTEGER

    if isinstance(value, float):
        return ValueType.FLOAT

    if isinstance(value, str):
        return ValueType.STRING

    if isinstance(value, (list, tuple)):
        return ValueType.ARRAY

    if isinstance(value, dict):
        return ValueType.OBJECT

    raise InputValidationError(f"Unsupported type {type(value).__name__}")


def encode_text(text: Any, what: str) -> bytes:
    """Encode a string as UTF-8 for a NUL-terminated slot.

    Args:
        text: String to encode
        what: Description used in error messages (e.g. "game ID")

    Raises:
        InputValidationError: If text is not a str, contains NUL, or is not encodable
    """
    if not isinstance(text, str):
        raise InputValidationError(f"{what}: expected str, got {type(text).__name__}")
    if "\x00" in text:
        raise InputValidationError(f"{what}: embedded NUL byte cannot be encoded")
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as err:
        raise InputValidationError(f"{what}: not encodable as UTF-8: {err}") from err


def _encode_into(writer: ByteWriter, value: Any, depth: int, max_depth: int, path: str) -> None:
    kind = value_type(value)

    if kind in (ValueType.NULL, ValueType.FALSE, ValueType.TRUE):
        writer.write_byte(kind)
        return

    if kind is ValueType.INTEGER:
        if value < INT64_MIN or value > INT64_MAX:
            raise InputValidationError(f"{path}: integer {value} outside signed 64-bit range")
        writer.write_byte(kind)
        writer.write_int64(int(value))
        return

    if kind is ValueType.FLOAT:
        writer.write_byte(kind)
        writer.write_double(value)
        return

    if kind is ValueType.STRING:
        writer.write_byte(kind)
        writer.write_cstring(encode_text(value, f"{path}: string"))
        return

    if depth + 1 > max_depth:
        raise InputValidationError(f"{path}: nesting exceeds max_depth={max_depth}")

    if kind is ValueType.ARRAY:
        writer.write_byte(kind)
        for index, item in enumerate(value):
            # A null element would be read back as the end marker
            if item is None:
                raise InputValidationError(
                    f"{path}[{index}]: None cannot be stored in an array"
                )
            _encode_into(writer, item, depth + 1, max_depth, f"{path}[{index}]")
        writer.write_byte(TERMINATOR)
        return

    writer.write_byte(kind)
    for key, item in value.items():
        if key == "":
            raise InputValidationError(f"{path}: empty object key cannot be encoded")
        writer.write_cstring(encode_text(key, f"{path}: key {key!r}"))
        _encode_into(writer, item, depth + 1, max_depth, f"{path}.{key}")
    writer.write_byte(TERMINATOR)
