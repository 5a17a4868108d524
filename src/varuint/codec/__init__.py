"""Variable-length integer codec.

This module provides the length table, the unsigned codec, the zigzag
mapping and the signed codec built on top of them.
"""

from __future__ import annotations

from .signed import (
    decode_signed,
    decode_signed_from_bytes,
    encode_signed,
    encode_signed_to_bytes,
    encoded_length_signed,
    iter_decode_signed,
)
from .table import LENGTH_CLASSES, MAX_ENCODED_SIZE, RESERVED_HEADER, LengthClass
from .unsigned import decode, decode_from_bytes, encode, encode_to_bytes, encoded_length, iter_decode
from .zigzag import zigzag_decode, zigzag_encode

__all__ = [
    # Unsigned
    "encoded_length",
    "encode",
    "decode",
    "encode_to_bytes",
    "decode_from_bytes",
    "iter_decode",
    # Signed
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
]
