"""Tag bytes of the banusave value format.

Every encoded value starts with one tag byte. Fixed-size variants follow it
with a payload of known width; strings, arrays and objects end with a 0x00
terminator instead of carrying a length prefix.
"""

from __future__ import annotations

import enum


class ValueType(enum.IntEnum):
    """Value variants and their tag bytes."""

    NULL = 0x00
    FALSE = 0x01
    TRUE = 0x02
    INTEGER = 0x10
    FLOAT = 0x20
    STRING = 0x30
    ARRAY = 0x40
    OBJECT = 0x50


TAGS = frozenset(int(tag) for tag in ValueType)

# Ends strings, keys and game IDs, and closes arrays and objects
TERMINATOR = 0x00

# Payload width of INTEGER and FLOAT
FIXED_WIDTH = 8

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
