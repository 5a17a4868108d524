"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def boundary_sizes() -> list[tuple[int, int]]:
    """Length class boundaries paired with their encoded size."""
    return [
        (0, 1),
        (240, 1),
        (241, 2),
        (2031, 2),
        (2032, 3),
        (67567, 3),
        (67568, 4),
        (16777215, 4),
        (16777216, 5),
        (4294967295, 5),
        (4294967296, 6),
        (1099511627775, 6),
        (1099511627776, 7),
        (281474976710655, 7),
        (281474976710656, 8),
        (72057594037927935, 8),
        (72057594037927936, 9),
        (2**64 - 1, 9),
    ]


@pytest.fixture
def sample_stream() -> bytes:
    """Three concatenated values: 7, 300 and 2032."""
    return b"\x07\xf1\x3c\xf8\x00\x00"
