"""Checksummed archive container.

This module wraps an encoded value in the banusave envelope:

- [Magic "BANUSAVE2" (9 bytes)] [Game ID] [0x00] [Value] [SHA-256 (32 bytes)]

The checksum covers everything between the magic and the checksum itself.
Version 1 archives use the 8-byte magic "BANUSAVE" and carry no game ID:

- [Magic "BANUSAVE" (8 bytes)] [Value] [SHA-256 (32 bytes)]
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from ..codec.decoder import decode_text, decode_value
from ..codec.encoder import encode_text, encode_value
from ..codec.tags import TAGS
from ..config import DEFAULT_MAX_DEPTH, DecodeOptions
from ..exceptions import FormatError, IntegrityError
from ..utils.checksum import DIGEST_SIZE, sha256_digest, verify_sha256

logger = logging.getLogger(__name__)

MAGIC = b"BANUSAVE2"
LEGACY_MAGIC = b"BANUSAVE"

# Magic + game ID terminator + 1-byte value + checksum
MIN_SIZE = len(MAGIC) + 1 + 1 + DIGEST_SIZE
# Magic + 1-byte value + checksum
LEGACY_MIN_SIZE = len(LEGACY_MAGIC) + 1 + DIGEST_SIZE


@dataclass(frozen=True)
class Envelope:
    """A decoded archive.

    Attributes:
        version: Format version (2 for "BANUSAVE2", 1 for legacy "BANUSAVE")
        game_id: Embedded game ID, or None for version 1 archives
        value: Decoded value
        checksum: SHA-256 digest stored in the archive
        body_size: Size in bytes of the checksummed body
    """

    version: int
    game_id: Optional[str]
    value: Any
    checksum: bytes
    body_size: int


def encode(value: Any, game_id: str, *, max_depth: int = DEFAULT_MAX_DEPTH) -> bytes:
    """Encode a value and game ID into a banusave archive.

    Args:
        value: JSON-like value to store
        game_id: Game identifier embedded in the archive
        max_depth: Maximum nesting of arrays and objects

    Returns:
        Archive bytes

    Raises:
        InputValidationError: If the game ID or value cannot be encoded

    Example:
        >>> data = encode({"name": "John Doe", "age": 42}, "gameID")
        >>> data[:9]
        b'BANUSAVE2'
    """
    game_id_bytes = encode_text(game_id, "game ID")

    result = bytearray()
    result.extend(game_id_bytes)
    result.append(0x00)
    result.extend(encode_value(value, max_depth=max_depth))

    body = bytes(result)
    logger.debug("Encoded archive for game %r: %d body bytes", game_id, len(body))
    return MAGIC + body + sha256_digest(body)


def encode_legacy(value: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> bytes:
    """Encode a value into a version 1 archive (no game ID).

    Only needed to produce archives for readers that predate game IDs.

    Raises:
        InputValidationError: If the value cannot be encoded
    """
    body = encode_value(value, max_depth=max_depth)
    logger.debug("Encoded legacy archive: %d body bytes", len(body))
    return LEGACY_MAGIC + body + sha256_digest(body)


def decode(data: bytes, options: Optional[DecodeOptions] = None) -> tuple[Any, Optional[str]]:
    """Decode a banusave archive.

    Args:
        data: Archive bytes
        options: Decoding options (defaults to DecodeOptions())

    Returns:
        Tuple of (value, game_id); game_id is None for version 1 archives

    Raises:
        FormatError: If the archive is too short, has an unknown header, or is malformed
        IntegrityError: If the checksum does not match

    Example:
        >>> value, game_id = decode(encode([1, 2.5, "x"], "g"))
        >>> value, game_id
        ([1, 2.5, 'x'], 'g')
    """
    envelope = decode_envelope(data, options)
    return envelope.value, envelope.game_id


def decode_envelope(data: bytes, options: Optional[DecodeOptions] = None) -> Envelope:
    """Decode a banusave archive and return it with its metadata.

    Raises:
        FormatError: If the archive is too short, has an unknown header, or is malformed
        IntegrityError: If the checksum does not match
    """
    if options is None:
        options = DecodeOptions()

    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise FormatError(f"Expected bytes, got {type(data).__name__}")
    data = bytes(data)

    if data.startswith(MAGIC):
        return _decode_current(data, options)

    if data.startswith(LEGACY_MAGIC):
        # A legacy body starts with a value tag; anything else is an unknown header
        if len(data) > len(LEGACY_MAGIC) and data[len(LEGACY_MAGIC)] not in TAGS:
            raise FormatError(f"Invalid archive header: {data[:len(MAGIC)]!r}")
        if not options.allow_legacy:
            raise FormatError("Legacy BANUSAVE archives are disabled (allow_legacy=False)")
        return _decode_legacy(data, options)

    if len(data) < LEGACY_MIN_SIZE:
        raise FormatError(f"Archive too short: {len(data)} bytes")
    raise FormatError(f"Invalid archive header: {data[:len(MAGIC)]!r}")


def _decode_current(data: bytes, options: DecodeOptions) -> Envelope:
    if len(data) < MIN_SIZE:
        raise FormatError(f"Archive too short: need at least {MIN_SIZE} bytes, got {len(data)}")

    body, checksum = _verified_body(data, len(MAGIC))

    terminator = body.find(b"\x00")
    if terminator < 0:
        raise FormatError("Unterminated game ID")
    game_id = decode_text(body[:terminator], "Game ID", options.text_errors)

    value = _decode_body(body, terminator + 1, options)
    logger.debug("Decoded archive for game %r: %d body bytes", game_id, len(body))
    return Envelope(2, game_id, value, checksum, len(body))


def _decode_legacy(data: bytes, options: DecodeOptions) -> Envelope:
    if len(data) < LEGACY_MIN_SIZE:
        raise FormatError(
            f"Legacy archive too short: need at least {LEGACY_MIN_SIZE} bytes, got {len(data)}"
        )

    body, checksum = _verified_body(data, len(LEGACY_MAGIC))
    value = _decode_body(body, 0, options)
    logger.info("Decoded legacy BANUSAVE archive without game ID")
    return Envelope(1, None, value, checksum, len(body))


def _verified_body(data: bytes, header_size: int) -> tuple[bytes, bytes]:
    """Split off the checksum and verify it against the body.

    Raises:
        IntegrityError: If the checksum does not match
    """
    body = data[header_size:-DIGEST_SIZE]
    checksum = data[-DIGEST_SIZE:]
    if not verify_sha256(body, checksum):
        raise IntegrityError("Archive checksum mismatch")
    return body, checksum


def _decode_body(body: bytes, offset: int, options: DecodeOptions) -> Any:
    value, consumed = decode_value(
        body, offset, max_depth=options.max_depth, text_errors=options.text_errors
    )

    trailing = len(body) - offset - consumed
    if trailing:
        if options.strict:
            raise FormatError(f"{trailing} trailing bytes after value")
        logger.warning("Ignoring %d trailing bytes after value", trailing)

    return value
