"""Length classes of the varuint wire format.

The header byte (first byte of an encoded value) selects one of nine length
classes. Classes 1-3 fold part of the value into the header byte; classes 4-9
carry a raw big-endian payload. Header 255 is reserved for a future 128-bit
class.

    Header    Bytes  Values
    0-240     1      0 .. 240
    241-247   2      241 .. 2031
    248       3      2032 .. 67567
    249       4      67568 .. 2**24-1
    250       5      2**24 .. 2**32-1
    251       6      2**32 .. 2**40-1
    252       7      2**40 .. 2**48-1
    253       8      2**48 .. 2**56-1
    254       9      2**56 .. 2**64-1
    255       -      reserved
"""

from __future__ import annotations

from dataclasses import dataclass

from ..exceptions import EncodeError, UnsupportedEncodingError

MAX_ENCODED_SIZE = 9
RESERVED_HEADER = 255
MAX_VALUE = (1 << 64) - 1


@dataclass(frozen=True)
class LengthClass:
    """One row of the length table.

    Attributes:
        size: Total encoded size in bytes, header included
        first_header: Lowest header byte selecting this class
        last_header: Highest header byte selecting this class
        min_value: Smallest value encoded in this class
        max_value: Largest value encoded in this class
    """

    size: int
    first_header: int
    last_header: int
    min_value: int
    max_value: int

    @property
    def payload_size(self) -> int:
        """Number of bytes following the header byte."""
        return self.size - 1

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value


LENGTH_CLASSES: tuple[LengthClass, ...] = (
    LengthClass(1, 0, 240, 0, 240),
    LengthClass(2, 241, 247, 241, 2031),
    LengthClass(3, 248, 248, 2032, 67567),
    LengthClass(4, 249, 249, 67568, (1 << 24) - 1),
    LengthClass(5, 250, 250, 1 << 24, (1 << 32) - 1),
    LengthClass(6, 251, 251, 1 << 32, (1 << 40) - 1),
    LengthClass(7, 252, 252, 1 << 40, (1 << 48) - 1),
    LengthClass(8, 253, 253, 1 << 48, (1 << 56) - 1),
    LengthClass(9, 254, 254, 1 << 56, MAX_VALUE),
)

# Header byte -> class, for the 255 decodable headers
_BY_HEADER: tuple[LengthClass, ...] = tuple(
    length_class
    for length_class in LENGTH_CLASSES
    for _ in range(length_class.first_header, length_class.last_header + 1)
)


def class_for_value(value: int) -> LengthClass:
    """Return the length class whose value range contains ``value``.

    Args:
        value: Unsigned integer (0 to 2**64-1)

    Returns:
        The unique matching LengthClass

    Raises:
        EncodeError: If value is negative or wider than 64 bits
    """
    if value < 0 or value > MAX_VALUE:
        raise EncodeError(f"Value {value} is outside the unsigned 64-bit range")

    for length_class in LENGTH_CLASSES:
        if value <= length_class.max_value:
            return length_class

    raise AssertionError("length classes do not cover the 64-bit range")


def class_for_header(header: int) -> LengthClass:
    """Return the length class selected by a header byte.

    Raises:
        UnsupportedEncodingError: If header is the reserved byte 255
        ValueError: If header is not a byte value
    """
    if header == RESERVED_HEADER:
        raise UnsupportedEncodingError(
            f"Header byte {RESERVED_HEADER} is reserved for 128-bit values and is not supported"
        )
    if not 0 <= header < RESERVED_HEADER:
        raise ValueError(f"Header must be a byte value, got {header}")

    return _BY_HEADER[header]
