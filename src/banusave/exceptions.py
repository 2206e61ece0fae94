"""Exception hierarchy for banusave.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from BanUSaveError for easy catching of any banusave-specific error.
"""

from __future__ import annotations


class BanUSaveError(Exception):
    """Base exception for all banusave errors."""

    pass


class InputValidationError(BanUSaveError):
    """Raised when a value or game ID cannot be encoded.

    Examples:
        - String, object key or game ID contains a NUL byte
        - Unsupported Python type (set, bytes, custom objects)
        - Integer outside the signed 64-bit range
        - None inside an array or an empty object key (collides with the end marker)
        - Nesting deeper than the configured maximum depth
    """

    pass


class FormatError(BanUSaveError):
    """Raised when archive bytes are structurally invalid.

    Examples:
        - Buffer shorter than the minimum archive size
        - Unknown magic header
        - Unknown tag byte
        - Truncated fixed-width field or unterminated string/array/object
        - Trailing bytes after the root value (strict mode)
    """

    pass


class IntegrityError(BanUSaveError):
    """Raised when the SHA-256 checksum does not match the archive body.

    The checksum is verified before the body is parsed, so corruption is
    reported as an IntegrityError even when the body is also malformed.
    """

    pass
