"""ZigZag mapping between signed and unsigned integers.

Signed values are interleaved by magnitude (0, -1, 1, -2, 2, ... map to
0, 1, 2, 3, 4, ...) so that small negative numbers stay small on the wire.
"""

from __future__ import annotations

from ..config import IntWidth


def zigzag_encode(value: int, *, bits: int = 64) -> int:
    """Map a signed integer to its unsigned zigzag form.

    Args:
        value: Signed integer within the two's complement range of ``bits``
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Unsigned integer in ``0 .. 2**bits-1``

    Raises:
        ValueError: If value does not fit the width

    Example:
        >>> [zigzag_encode(n) for n in (0, -1, 1, -2, 2)]
        [0, 1, 2, 3, 4]
    """
    width = IntWidth.of(bits, signed=True)
    if not width.contains(value):
        raise ValueError(
            f"Value {value} doesn't fit in {bits} bits "
            f"(range: {width.min_value} to {width.max_value})"
        )

    # Python's >> on int is arithmetic, so the sign bit spreads across the mask
    return ((value << 1) ^ (value >> (bits - 1))) & width.storage_max


def zigzag_decode(value: int, *, bits: int = 64) -> int:
    """Map an unsigned zigzag value back to the signed integer.

    Raises:
        ValueError: If value is outside ``0 .. 2**bits-1``

    Example:
        >>> [zigzag_decode(v) for v in (0, 1, 2, 3, 4)]
        [0, -1, 1, -2, 2]
    """
    width = IntWidth.of(bits, signed=True)
    if not 0 <= value <= width.storage_max:
        raise ValueError(f"Value {value} requires more than {bits} bits (max: {width.storage_max})")

    return (value >> 1) ^ -(value & 1)
