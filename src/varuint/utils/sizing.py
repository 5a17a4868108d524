"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a sequence of
values without actually encoding them.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from ..codec import encoded_length, encoded_length_signed


def encoded_size(values: Iterable[int], *, signed: bool = False, bits: int = 64) -> int:
    """Calculate the size in bytes of the concatenated encoding of ``values``.

    Args:
        values: Integers to measure
        signed: If True, measure the zigzag (signed) encoding
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Total size in bytes

    Raises:
        EncodeError: If a value does not fit the width

    Example:
        >>> encoded_size([0, 240, 241, 2032])
        7  # 1 + 1 + 2 + 3
        >>> encoded_size([-1, 1], signed=True)
        2
    """
    measure = encoded_length_signed if signed else encoded_length
    return sum(measure(value, bits=bits) for value in values)


def length_class_histogram(
    values: Iterable[int], *, signed: bool = False, bits: int = 64
) -> dict[int, int]:
    """Count how many values fall into each encoded size.

    Args:
        values: Integers to measure
        signed: If True, measure the zigzag (signed) encoding
        bits: Integer width (8, 16, 32 or 64)

    Returns:
        Dictionary mapping encoded size in bytes to number of values,
        sorted by size

    Raises:
        EncodeError: If a value does not fit the width

    Example:
        >>> length_class_histogram([1, 2, 300, 70000])
        {1: 2, 2: 1, 4: 1}
    """
    measure = encoded_length_signed if signed else encoded_length
    counts = Counter(measure(value, bits=bits) for value in values)
    return dict(sorted(counts.items()))
