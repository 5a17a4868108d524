"""Signed varint codec.

Signed values pass through the zigzag mapping and reuse the unsigned wire
format verbatim: ``encode_signed(n)`` and ``encode(zigzag_encode(n))`` emit
identical bytes.
"""

from __future__ import annotations

from collections.abc import Iterator

from ..config import IntWidth
from ..exceptions import EncodeError
from ..streams import Sink, Source
from .unsigned import decode, decode_from_bytes, encode, encode_to_bytes, encoded_length, iter_decode
from .zigzag import zigzag_decode, zigzag_encode


def encoded_length_signed(value: int, *, bits: int = 64) -> int:
    """Return the number of bytes ``encode_signed(value)`` would write.

    Raises:
        EncodeError: If value does not fit the signed width

    Example:
        >>> encoded_length_signed(-120)
        1
        >>> encoded_length_signed(-121)
        2
    """
    return encoded_length(_to_unsigned(value, bits), bits=bits)


def encode_signed(value: int, sink: Sink, *, bits: int = 64) -> int:
    """Write the encoded form of a signed integer to ``sink``.

    Args:
        value: Signed integer to encode
        sink: Destination port
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Number of bytes written

    Raises:
        EncodeError: If value does not fit the signed width
        StreamError: If the sink fails
    """
    return encode(_to_unsigned(value, bits), sink, bits=bits)


def decode_signed(source: Source, *, bits: int = 64) -> int:
    """Read one signed integer from ``source``.

    Raises:
        TruncatedInputError: If the source ends before the whole value
        UnsupportedEncodingError: If the header byte is the reserved 255
        ValueOverflowError: If the value does not fit the width
        StreamError: If the source fails
    """
    return zigzag_decode(decode(source, bits=bits), bits=bits)


def iter_decode_signed(source: Source, *, bits: int = 64) -> Iterator[int]:
    """Decode concatenated signed values until the source is exhausted."""
    for value in iter_decode(source, bits=bits):
        yield zigzag_decode(value, bits=bits)


def encode_signed_to_bytes(value: int, *, bits: int = 64) -> bytes:
    """Encode a signed integer and return the encoded bytes."""
    return encode_to_bytes(_to_unsigned(value, bits), bits=bits)


def decode_signed_from_bytes(data: bytes, offset: int = 0, *, bits: int = 64) -> tuple[int, int]:
    """Decode one signed value from a byte buffer.

    Returns:
        Tuple of (decoded_value, bytes_consumed)
    """
    value, consumed = decode_from_bytes(data, offset, bits=bits)
    return zigzag_decode(value, bits=bits), consumed


def _to_unsigned(value: int, bits: int) -> int:
    width = IntWidth.of(bits, signed=True)
    if not width.contains(value):
        raise EncodeError(
            f"Value {value} is outside the {width} range ({width.min_value} to {width.max_value})"
        )
    return zigzag_encode(value, bits=bits)
