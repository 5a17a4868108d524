"""Exception hierarchy for varuint.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from VaruintError for easy catching of any varuint-specific error.
"""

from __future__ import annotations


class VaruintError(Exception):
    """Base exception for all varuint errors."""

    pass


class EncodeError(VaruintError, ValueError):
    """Raised when a value cannot be encoded.

    Examples:
        - Negative value passed to the unsigned codec
        - Value wider than the configured integer width
    """

    pass


class DecodeError(VaruintError):
    """Raised when binary data cannot be decoded.

    Examples:
        - Truncated data (fewer bytes than the header byte demands)
        - Reserved header byte
        - Decoded value wider than the configured integer width
    """

    pass


class TruncatedInputError(DecodeError, EOFError):
    """Raised when a source ends before the length announced by the header byte."""

    pass


class UnsupportedEncodingError(DecodeError):
    """Raised when the reserved header byte 255 is encountered.

    Header 255 is kept for a future 128-bit length class and is not decodable
    by this version.
    """

    pass


class ValueOverflowError(DecodeError):
    """Raised when a well-formed value does not fit the requested integer width."""

    pass


class StreamError(VaruintError, OSError):
    """Raised when the underlying sink or source fails.

    The underlying OSError, if any, is available as ``__cause__``.
    """

    pass
