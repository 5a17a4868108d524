"""Utility functions for varuint.

This module provides size calculation over sequences of values.
"""

from __future__ import annotations

from .sizing import encoded_size, length_class_histogram

__all__ = [
    "encoded_size",
    "length_class_histogram",
]
