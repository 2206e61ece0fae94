"""SHA-256 checksum helpers.

This module provides the digest that seals every banusave archive and a
constant-time comparison for verifying it.
"""

from __future__ import annotations

import hashlib
import hmac

DIGEST_SIZE = hashlib.sha256().digest_size


def sha256_digest(data: bytes) -> bytes:
    """Calculate the SHA-256 digest of data.

    Args:
        data: Data to checksum

    Returns:
        32-byte digest

    Example:
        >>> len(sha256_digest(b"Hello, World!"))
        32
    """
    return hashlib.sha256(data).digest()


def verify_sha256(data: bytes, expected: bytes) -> bool:
    """Verify a SHA-256 digest in constant time.

    Args:
        data: Data to verify
        expected: Expected 32-byte digest

    Returns:
        True if the digest matches, False otherwise

    Raises:
        ValueError: If expected is not 32 bytes

    Example:
        >>> data = b"Hello, World!"
        >>> verify_sha256(data, sha256_digest(data))
        True
    """
    if len(expected) != DIGEST_SIZE:
        raise ValueError(f"SHA-256 digest must be {DIGEST_SIZE} bytes, got {len(expected)}")

    return hmac.compare_digest(sha256_digest(data), bytes(expected))
