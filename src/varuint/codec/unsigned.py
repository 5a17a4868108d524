"""Unsigned varuint codec.

This module maps unsigned integers to the shortest byte sequence whose first
byte alone reveals the total length, and back. See ``table`` for the length
classes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from ..config import IntWidth
from ..exceptions import (
    EncodeError,
    TruncatedInputError,
    UnsupportedEncodingError,
    ValueOverflowError,
)
from ..streams import ByteReader, Sink, Source, read_byte, read_exact, write_all
from .table import LengthClass, class_for_header, class_for_value

logger = logging.getLogger(__name__)


def encoded_length(value: int, *, bits: int = 64) -> int:
    """Return the number of bytes ``encode(value)`` would write.

    Args:
        value: Unsigned integer to measure
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Encoded size in bytes (1-9)

    Raises:
        EncodeError: If value does not fit the width

    Example:
        >>> encoded_length(240)
        1
        >>> encoded_length(241)
        2
    """
    _check_range(value, IntWidth.of(bits))
    return class_for_value(value).size


def encode(value: int, sink: Sink, *, bits: int = 64) -> int:
    """Write the minimal encoded form of ``value`` to ``sink``.

    Args:
        value: Unsigned integer to encode
        sink: Destination port (any binary file-like object)
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Number of bytes written (equal to ``encoded_length(value)``)

    Raises:
        EncodeError: If value does not fit the width
        StreamError: If the sink fails

    Example:
        >>> import io
        >>> buf = io.BytesIO()
        >>> encode(2032, buf)
        3
        >>> buf.getvalue()
        b'\\xf8\\x00\\x00'
    """
    _check_range(value, IntWidth.of(bits))
    return write_all(sink, _pack(value))


def decode(source: Source, *, bits: int = 64) -> int:
    """Read one encoded value from ``source``.

    Exactly as many bytes as the header byte announces are consumed, so
    concatenated values can be decoded by repeated calls.

    Args:
        source: Origin port (any binary file-like object)
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Decoded unsigned integer

    Raises:
        TruncatedInputError: If the source ends before the whole value
        UnsupportedEncodingError: If the header byte is the reserved 255
        ValueOverflowError: If the value does not fit the width
        StreamError: If the source fails
    """
    width = IntWidth.of(bits)

    header = read_byte(source)
    if header is None:
        logger.debug("Source ended before the header byte")
        raise TruncatedInputError("Truncated input: source ended before the header byte")

    return _decode_body(header, source, width)


def iter_decode(source: Source, *, bits: int = 64) -> Iterator[int]:
    """Decode concatenated values until the source is exhausted.

    Iteration stops cleanly when the source ends on a value boundary.

    Raises:
        TruncatedInputError: If the source ends in the middle of a value
        UnsupportedEncodingError: If a header byte is the reserved 255
        ValueOverflowError: If a value does not fit the width
        StreamError: If the source fails
    """
    width = IntWidth.of(bits)

    while True:
        header = read_byte(source)
        if header is None:
            return
        yield _decode_body(header, source, width)


def encode_to_bytes(value: int, *, bits: int = 64) -> bytes:
    """Encode ``value`` and return the encoded bytes.

    Raises:
        EncodeError: If value does not fit the width
    """
    _check_range(value, IntWidth.of(bits))
    return _pack(value)


def decode_from_bytes(data: bytes, offset: int = 0, *, bits: int = 64) -> tuple[int, int]:
    """Decode one value from a byte buffer.

    Args:
        data: Buffer containing the encoded value
        offset: Starting position in the buffer
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Tuple of (decoded_value, bytes_consumed)

    Raises:
        TruncatedInputError: If the buffer ends before the whole value
        UnsupportedEncodingError: If the header byte is the reserved 255
        ValueOverflowError: If the value does not fit the width
    """
    reader = ByteReader(data, offset)
    value = decode(reader, bits=bits)
    return value, reader.position() - offset


def _check_range(value: int, width: IntWidth) -> None:
    if not 0 <= value <= width.storage_max:
        raise EncodeError(f"Value {value} is outside the {width} range (0 to {width.storage_max})")


def _pack(value: int) -> bytes:
    length_class = class_for_value(value)
    size = length_class.size

    if size == 1:
        return bytes((value,))

    if size == 2:
        offset = value - 240
        return bytes((offset // 256 + 241, offset % 256))

    if size == 3:
        offset = value - 2032
        return bytes((248, offset // 256, offset % 256))

    # Raw big-endian payload, only as many low bytes as the class holds
    return bytes((length_class.first_header,)) + value.to_bytes(length_class.payload_size, "big")


def _unpack(header: int, payload: bytes) -> int:
    if header <= 240:
        return header

    if header <= 247:
        return 240 + 256 * (header - 241) + payload[0]

    if header == 248:
        return 2032 + 256 * payload[0] + payload[1]

    return int.from_bytes(payload, "big")


def _decode_body(header: int, source: Source, width: IntWidth) -> int:
    try:
        length_class: LengthClass = class_for_header(header)
    except UnsupportedEncodingError:
        logger.debug("Rejected reserved header byte %d", header)
        raise

    if length_class.payload_size:
        try:
            payload = read_exact(source, length_class.payload_size)
        except TruncatedInputError as e:
            logger.debug("Header byte %d announces %d bytes: %s", header, length_class.size, e)
            raise TruncatedInputError(
                f"Truncated input: header byte {header} announces {length_class.size} bytes "
                "but the source ended early"
            ) from e
    else:
        payload = b""

    value = _unpack(header, payload)

    if value > width.storage_max:
        logger.debug("Decoded value %d overflows %s", value, width)
        raise ValueOverflowError(f"Decoded value {value} does not fit {width} (max {width.storage_max})")

    return value
