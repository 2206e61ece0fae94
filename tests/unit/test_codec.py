"""Unit tests for value encoding/decoding."""

from __future__ import annotations

import math
import struct
from collections import OrderedDict

import pytest

from banusave import FormatError, InputValidationError, ValueType, decode_value, encode_value
from banusave.codec import value_type


def _int(value: int) -> bytes:
    return b"\x10" + struct.pack(">q", value)


def _float(value: float) -> bytes:
    return b"\x20" + struct.pack(">d", value)


class TestEncodeScalars:
    """Test wire bytes of scalar values."""

    def test_null(self) -> None:
        """Test None encodes as a single 0x00 tag."""
        assert encode_value(None) == b"\x00"

    def test_booleans(self) -> None:
        """Test booleans encode as tags 0x01 and 0x02."""
        assert encode_value(False) == b"\x01"
        assert encode_value(True) == b"\x02"

    def test_integer(self) -> None:
        """Test integers encode as 8-byte big-endian two's complement."""
        assert encode_value(42) == b"\x10\x00\x00\x00\x00\x00\x00\x00\x2a"
        assert encode_value(-1) == b"\x10" + b"\xff" * 8

    def test_integer_bounds(self) -> None:
        """Test the signed 64-bit limits are accepted."""
        assert encode_value(2**63 - 1) == _int(2**63 - 1)
        assert encode_value(-(2**63)) == _int(-(2**63))

    def test_float(self) -> None:
        """Test floats encode as 8-byte big-endian doubles."""
        assert encode_value(2.5) == b"\x20\x40\x04\x00\x00\x00\x00\x00\x00"

    def test_integer_vs_float(self) -> None:
        """Test 1 and 1.0 use different tags."""
        assert encode_value(1)[0] == ValueType.INTEGER
        assert encode_value(1.0)[0] == ValueType.FLOAT

    def test_string(self) -> None:
        """Test strings encode as UTF-8 followed by NUL."""
        assert encode_value("x") == b"\x30x\x00"
        assert encode_value("") == b"\x30\x00"
        assert encode_value("é") == b"\x30\xc3\xa9\x00"

    def test_bool_subclass_of_int(self) -> None:
        """Test True is not encoded as integer 1."""
        assert encode_value(True) != encode_value(1)


class TestEncodeContainers:
    """Test wire bytes of arrays and objects."""

    def test_empty_array(self) -> None:
        """Test an empty array is tag plus end marker."""
        assert encode_value([]) == b"\x40\x00"

    def test_empty_object(self) -> None:
        """Test an empty object is tag plus end marker."""
        assert encode_value({}) == b"\x50\x00"

    def test_array(self) -> None:
        """Test array elements are concatenated in order."""
        expected = b"\x40" + _int(1) + _float(2.5) + b"\x30x\x00" + b"\x02" + b"\x01" + b"\x00"
        assert encode_value([1, 2.5, "x", True, False]) == expected

    def test_tuple_encodes_as_array(self) -> None:
        """Test tuples are accepted as arrays."""
        assert encode_value((1, "a")) == encode_value([1, "a"])

    def test_object(self) -> None:
        """Test objects encode keys then values in insertion order."""
        expected = (
            b"\x50"
            + b"name\x00"
            + b"\x30John Doe\x00"
            + b"age\x00"
            + _int(42)
            + b"\x00"
        )
        assert encode_value({"name": "John Doe", "age": 42}) == expected

    def test_object_null_value(self) -> None:
        """Test None is allowed as an object value."""
        assert encode_value({"a": None}) == b"\x50a\x00\x00\x00"

    def test_nested(self) -> None:
        """Test nested containers."""
        assert encode_value({"a": [[]]}) == b"\x50a\x00\x40\x40\x00\x00\x00"


class TestEncodeErrors:
    """Test values that cannot be encoded."""

    def test_nul_in_string(self) -> None:
        """Test strings with NUL are rejected."""
        with pytest.raises(InputValidationError, match="NUL"):
            encode_value("x\x00y")

    def test_nul_in_key(self) -> None:
        """Test keys with NUL are rejected."""
        with pytest.raises(InputValidationError, match="NUL"):
            encode_value({"k\x00": 1})

    def test_nul_in_nested_string(self) -> None:
        """Test the check reaches nested values."""
        with pytest.raises(InputValidationError, match=r"\$\.a\[1\]"):
            encode_value({"a": ["ok", "bad\x00"]})

    def test_null_array_element(self) -> None:
        """Test None inside an array is rejected."""
        with pytest.raises(InputValidationError, match="None cannot be stored in an array"):
            encode_value([1, None])

    def test_empty_key(self) -> None:
        """Test the empty key is rejected."""
        with pytest.raises(InputValidationError, match="empty object key"):
            encode_value({"": 1})

    def test_non_string_key(self) -> None:
        """Test non-string keys are rejected."""
        with pytest.raises(InputValidationError, match="expected str"):
            encode_value({1: "a"})

    def test_integer_overflow(self) -> None:
        """Test integers outside int64 are rejected."""
        with pytest.raises(InputValidationError, match="64-bit"):
            encode_value(2**63)

        with pytest.raises(InputValidationError, match="64-bit"):
            encode_value(-(2**63) - 1)

    @pytest.mark.parametrize("value", [b"bytes", {1, 2}, object(), 1j, print])
    def test_unsupported_types(self, value: object) -> None:
        """Test unsupported types raise instead of producing output."""
        with pytest.raises(InputValidationError, match="Unsupported type"):
            encode_value(value)

    def test_lone_surrogate(self) -> None:
        """Test strings that are not valid UTF-8 are rejected."""
        with pytest.raises(InputValidationError, match="UTF-8"):
            encode_value("\ud800")

    def test_max_depth(self) -> None:
        """Test nesting deeper than max_depth is rejected."""
        value: list = []
        for _ in range(5):
            value = [value]

        encode_value(value, max_depth=6)
        with pytest.raises(InputValidationError, match="max_depth"):
            encode_value(value, max_depth=5)


class TestValueType:
    """Test variant detection."""

    def test_variants(self) -> None:
        """Test each Python type maps to its variant."""
        assert value_type(None) is ValueType.NULL
        assert value_type(False) is ValueType.FALSE
        assert value_type(True) is ValueType.TRUE
        assert value_type(7) is ValueType.INTEGER
        assert value_type(7.0) is ValueType.FLOAT
        assert value_type("7") is ValueType.STRING
        assert value_type([7]) is ValueType.ARRAY
        assert value_type({"7": 7}) is ValueType.OBJECT


class TestDecode:
    """Test decoding and consumed lengths."""

    def test_scalars(self) -> None:
        """Test scalar values and their lengths."""
        assert decode_value(b"\x00") == (None, 1)
        assert decode_value(b"\x01") == (False, 1)
        assert decode_value(b"\x02") == (True, 1)
        assert decode_value(_int(-42)) == (-42, 9)
        assert decode_value(_float(2.5)) == (2.5, 9)
        assert decode_value(b"\x30John\x00") == ("John", 6)

    def test_types_preserved(self) -> None:
        """Test integers and floats stay distinct."""
        value, _ = decode_value(encode_value([1, 2.5]))

        assert type(value[0]) is int
        assert type(value[1]) is float

    def test_array_consumed_length(self) -> None:
        """Test arrays report tag + children + end marker."""
        data = encode_value([1, "x"])
        value, consumed = decode_value(data + b"\xaa\xbb")

        assert value == [1, "x"]
        assert consumed == len(data) == 1 + 9 + 3 + 1

    def test_object_insertion_order(self) -> None:
        """Test key order survives decoding."""
        original = OrderedDict([("z", 1), ("a", 2), ("m", 3)])
        value, _ = decode_value(encode_value(original))

        assert list(value) == ["z", "a", "m"]

    def test_offset(self) -> None:
        """Test decoding from an offset reports length from that offset."""
        data = b"junk" + encode_value({"k": "v"})
        value, consumed = decode_value(data, 4)

        assert value == {"k": "v"}
        assert consumed == len(data) - 4

    def test_siblings_after_nested_containers(self) -> None:
        """Test offsets stay aligned after nested terminators."""
        original = {"a": [[], {}, [{"b": ""}]], "c": "", "d": {"e": None}}
        data = encode_value(original)

        assert decode_value(data) == (original, len(data))

    def test_nan_bit_pattern(self) -> None:
        """Test NaN payload bits round-trip."""
        raw = b"\x7f\xf8\x00\x00\x00\x00\x00\x01"
        value, _ = decode_value(b"\x20" + raw)

        assert math.isnan(value)
        assert encode_value(value) == b"\x20" + raw

    def test_infinity(self) -> None:
        """Test infinities round-trip."""
        for value in (math.inf, -math.inf, -0.0):
            decoded, _ = decode_value(encode_value(value))
            assert struct.pack(">d", decoded) == struct.pack(">d", value)


class TestDecodeErrors:
    """Test malformed input."""

    def test_empty(self) -> None:
        """Test empty input."""
        with pytest.raises(FormatError, match="Truncated"):
            decode_value(b"")

    @pytest.mark.parametrize("tag", [0x03, 0x11, 0x30 + 1, 0x60, 0xFF])
    def test_unknown_tag(self, tag: int) -> None:
        """Test unknown tags are fatal."""
        with pytest.raises(FormatError, match="Unknown tag"):
            decode_value(bytes([tag]) + b"\x00" * 8)

    def test_truncated_integer(self) -> None:
        """Test fixed-width fields need 8 payload bytes."""
        with pytest.raises(FormatError, match="Truncated"):
            decode_value(_int(1)[:-1])

    def test_truncated_float(self) -> None:
        """Test fixed-width fields need 8 payload bytes."""
        with pytest.raises(FormatError, match="Truncated"):
            decode_value(b"\x20\x00")

    def test_unterminated_string(self) -> None:
        """Test strings need a terminator."""
        with pytest.raises(FormatError, match="Unterminated"):
            decode_value(b"\x30abc")

    def test_unterminated_array(self) -> None:
        """Test arrays need an end marker."""
        with pytest.raises(FormatError, match="Truncated"):
            decode_value(b"\x40\x02\x01")

    def test_unterminated_object(self) -> None:
        """Test objects need an end marker."""
        with pytest.raises(FormatError, match="Truncated"):
            decode_value(b"\x50k\x00\x02")

    def test_object_key_without_value(self) -> None:
        """Test a key must be followed by a value."""
        with pytest.raises(FormatError, match="Truncated"):
            decode_value(b"\x50k\x00")

    def test_duplicate_key(self) -> None:
        """Test duplicate keys are rejected."""
        with pytest.raises(FormatError, match="Duplicate key"):
            decode_value(b"\x50k\x00\x01k\x00\x02\x00")

    def test_invalid_utf8(self) -> None:
        """Test invalid UTF-8 in strict mode."""
        with pytest.raises(FormatError, match="invalid UTF-8"):
            decode_value(b"\x30\xff\xfe\x00")

    def test_invalid_utf8_replaced(self) -> None:
        """Test a lenient error handler substitutes invalid bytes."""
        value, consumed = decode_value(b"\x30a\xff\x00", text_errors="replace")

        assert value == "a�"
        assert consumed == 4

    def test_max_depth(self) -> None:
        """Test deeply nested input is rejected before recursion runs out."""
        depth = 10_000
        data = b"\x40" * depth + b"\x00" * depth

        with pytest.raises(FormatError, match="max_depth"):
            decode_value(data)

    def test_offset_out_of_range(self) -> None:
        """Test offsets beyond the buffer."""
        with pytest.raises(FormatError, match="outside buffer"):
            decode_value(b"\x00", 5)
