"""varuint: Compact Self-Describing Integer Codec

A Python library for encoding unsigned and signed integers up to 64 bits into
1 to 9 bytes. The first byte of every encoded value alone tells how many
bytes follow, so values can be concatenated without delimiters and decoded
by repeated reads from the same stream.

Inspired by: https://sqlite.org/src4/doc/trunk/www/varint.wiki

Key Features:
- Minimal encoded size for every value up to 2**64-1
- ZigZag mapping for signed values over the same wire format
- Works with any binary file-like object (files, sockets, io.BytesIO)
- Pydantic value types with size_hint/serialize/deserialize

Quick Start:
    >>> import io
    >>> from varuint import encode, decode, encode_signed, decode_signed
    >>>
    >>> buf = io.BytesIO()
    >>> encode(2031, buf)
    2
    >>> encode_signed(-3, buf)
    1
    >>> _ = buf.seek(0)
    >>> decode(buf), decode_signed(buf)
    (2031, -3)
"""

from __future__ import annotations

from .codec import (
    LENGTH_CLASSES,
    MAX_ENCODED_SIZE,
    RESERVED_HEADER,
    LengthClass,
    decode,
    decode_from_bytes,
    decode_signed,
    decode_signed_from_bytes,
    encode,
    encode_signed,
    encode_signed_to_bytes,
    encode_to_bytes,
    encoded_length,
    encoded_length_signed,
    iter_decode,
    iter_decode_signed,
    zigzag_decode,
    zigzag_encode,
)
from .config import IntWidth
from .exceptions import (
    DecodeError,
    EncodeError,
    StreamError,
    TruncatedInputError,
    UnsupportedEncodingError,
    ValueOverflowError,
    VaruintError,
)
from .models import Varint, Varint8, Varint16, Varint32, Varuint, Varuint8, Varuint16, Varuint32
from .streams import ByteReader, ByteWriter, Sink, Source
from .utils import encoded_size, length_class_histogram

__version__ = "0.1.0"

__all__ = [
    # Unsigned codec
    "encoded_length",
    "encode",
    "decode",
    "encode_to_bytes",
    "decode_from_bytes",
    "iter_decode",
    # Signed codec
    "encoded_length_signed",
    "encode_signed",
    "decode_signed",
    "encode_signed_to_bytes",
    "decode_signed_from_bytes",
    "iter_decode_signed",
    # ZigZag
    "zigzag_encode",
    "zigzag_decode",
    # Length table
    "LengthClass",
    "LENGTH_CLASSES",
    "MAX_ENCODED_SIZE",
    "RESERVED_HEADER",
    # Configuration
    "IntWidth",
    # Value types
    "Varuint",
    "Varuint8",
    "Varuint16",
    "Varuint32",
    "Varint",
    "Varint8",
    "Varint16",
    "Varint32",
    # Stream ports
    "Sink",
    "Source",
    "ByteReader",
    "ByteWriter",
    # Sizing
    "encoded_size",
    "length_class_histogram",
    # Exceptions
    "VaruintError",
    "EncodeError",
    "DecodeError",
    "TruncatedInputError",
    "UnsupportedEncodingError",
    "ValueOverflowError",
    "StreamError",
    # Version
    "__version__",
]
