#!/usr/bin/env python3
"""Basic usage example for varuint.

This example demonstrates:
1. Measuring encoded sizes
2. Encoding unsigned and signed values into one stream
3. Decoding them back by repeated reads
4. Handling malformed input
"""

from __future__ import annotations

import io

from varuint import (
    TruncatedInputError,
    UnsupportedEncodingError,
    decode,
    decode_signed,
    encode,
    encode_signed,
    encoded_length,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("varuint Basic Usage Example")
    print("=" * 60)
    print()

    # Sizes per length class
    print("1. Encoded sizes...")
    for value in (0, 240, 241, 2031, 2032, 67568, 2**32, 2**64 - 1):
        print(f"   {value:>20}: {encoded_length(value)} bytes")
    print()

    # Encode a mixed stream
    print("2. Encoding a mixed stream...")
    buf = io.BytesIO()
    encode(300, buf)
    encode_signed(-5, buf)
    encode(2**40, buf)

    data = buf.getvalue()
    print(f"   Encoded size: {len(data)} bytes")
    print(f"   Hex: {data.hex()}")
    print()

    # Decode in the same order
    print("3. Decoding...")
    buf.seek(0)
    print(f"   unsigned: {decode(buf)}")
    print(f"   signed:   {decode_signed(buf)}")
    print(f"   unsigned: {decode(buf)}")
    print()

    # Malformed input
    print("4. Malformed input...")
    try:
        decode(io.BytesIO(b"\xfe\x00\x00"))
    except TruncatedInputError as e:
        print(f"   ✓ {e}")

    try:
        decode(io.BytesIO(b"\xff"))
    except UnsupportedEncodingError as e:
        print(f"   ✓ {e}")
    print()

    # Compare to fixed-width encoding
    print("5. Comparing to fixed 8-byte integers...")
    values = list(range(0, 5000, 7))
    size = encoded_size(values)
    print(f"   varuint size: {size} bytes")
    print(f"   Fixed size: {8 * len(values)} bytes")
    print(f"   Compression ratio: {8 * len(values) / size:.1f}x")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
