"""Archive size calculation utilities.

This module provides functions to calculate the encoded size of values
without actually encoding them.
"""

from __future__ import annotations

from typing import Any

from ..codec.encoder import encode_text, value_type
from ..codec.tags import FIXED_WIDTH, INT64_MAX, INT64_MIN, ValueType
from ..config import DEFAULT_MAX_DEPTH
from ..exceptions import InputValidationError
from .checksum import DIGEST_SIZE

_MAGIC_SIZE = len(b"BANUSAVE2")


def encoded_size(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """Calculate the size of a value's encoding in bytes.

    Applies the same validation as encode_value(), so a value that cannot be
    encoded raises here too.

    Args:
        value: Value to measure
        max_depth: Maximum nesting of arrays and objects

    Returns:
        Size in bytes

    Raises:
        InputValidationError: If the value cannot be encoded

    Example:
        >>> encoded_size({"age": 42})
        15  # tag + "age\\0" + 9-byte integer + end marker
    """
    return _size(value, 0, max_depth)


def envelope_size(value: Any, game_id: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> int:
    """Calculate the size of the archive encode() would produce.

    Raises:
        InputValidationError: If the value or game ID cannot be encoded

    Example:
        >>> envelope_size(None, "g")
        44  # 9-byte magic + "g\\0" + null tag + 32-byte checksum
    """
    game_id_size = len(encode_text(game_id, "game ID")) + 1
    return _MAGIC_SIZE + game_id_size + encoded_size(value, max_depth=max_depth) + DIGEST_SIZE


def _size(value: Any, depth: int, max_depth: int) -> int:
    kind = value_type(value)

    if kind in (ValueType.NULL, ValueType.FALSE, ValueType.TRUE):
        return 1

    if kind in (ValueType.INTEGER, ValueType.FLOAT):
        if kind is ValueType.INTEGER and not INT64_MIN <= value <= INT64_MAX:
            raise InputValidationError(f"Integer {value} outside signed 64-bit range")
        return 1 + FIXED_WIDTH

    if kind is ValueType.STRING:
        return 1 + len(encode_text(value, "string")) + 1

    if depth + 1 > max_depth:
        raise InputValidationError(f"Nesting exceeds max_depth={max_depth}")

    total = 2  # tag + end marker
    if kind is ValueType.ARRAY:
        for item in value:
            if item is None:
                raise InputValidationError("None cannot be stored in an array")
            total += _size(item, depth + 1, max_depth)
        return total

    for key, item in value.items():
        if key == "":
            raise InputValidationError("Empty object key cannot be encoded")
        total += len(encode_text(key, "key")) + 1
        total += _size(item, depth + 1, max_depth)
    return total
