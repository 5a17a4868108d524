"""Property-based tests using hypothesis."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from varuint import (
    LENGTH_CLASSES,
    ByteReader,
    ByteWriter,
    TruncatedInputError,
    decode,
    decode_from_bytes,
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
from varuint.codec.table import class_for_header

u64 = st.integers(min_value=0, max_value=2**64 - 1)
i64 = st.integers(min_value=-(2**63), max_value=2**63 - 1)


class TestUnsignedProperties:
    """Property-based tests for the unsigned codec."""

    @given(value=u64)
    def test_encode_decode_roundtrip(self, value: int) -> None:
        """Test encode/decode is invertible."""
        data = encode_to_bytes(value)
        assert decode_from_bytes(data) == (value, len(data))

    @given(value=u64)
    def test_size_query_matches_encoding(self, value: int) -> None:
        """Test encoded_length agrees with encode."""
        writer = ByteWriter()
        assert encode(value, writer) == encoded_length(value) == writer.byte_length()

    @given(value=u64)
    def test_header_determines_length(self, value: int) -> None:
        """Test the first byte alone announces the total length."""
        data = encode_to_bytes(value)
        assert class_for_header(data[0]).size == len(data)

    @given(value=u64)
    def test_minimal(self, value: int) -> None:
        """Test no shorter class can hold the value."""
        size = encoded_length(value)
        for length_class in LENGTH_CLASSES:
            if length_class.size < size:
                assert not length_class.contains(value)
            elif length_class.size == size:
                assert length_class.contains(value)

    @given(value=st.integers(min_value=241, max_value=2**64 - 1), data=st.data())
    def test_truncation_detected(self, value: int, data: st.DataObject) -> None:
        """Test every proper prefix of a multi-byte value is rejected."""
        encoded = encode_to_bytes(value)
        cut = data.draw(st.integers(min_value=1, max_value=len(encoded) - 1))

        with pytest.raises(TruncatedInputError):
            decode(ByteReader(encoded[:cut]))

    @given(values=st.lists(u64, max_size=50))
    def test_concatenation(self, values: list[int]) -> None:
        """Test values packed back to back decode in order."""
        writer = ByteWriter()
        for value in values:
            encode(value, writer)

        assert list(iter_decode(ByteReader(writer.to_bytes()))) == values

    @given(value1=u64, value2=u64)
    def test_encoding_injective(self, value1: int, value2: int) -> None:
        """Test distinct values have distinct encodings."""
        if value1 != value2:
            assert encode_to_bytes(value1) != encode_to_bytes(value2)


class TestZigZagProperties:
    """Property-based tests for zigzag."""

    @given(value=i64)
    def test_bijection(self, value: int) -> None:
        """Test decode inverts encode."""
        assert zigzag_decode(zigzag_encode(value)) == value

    @given(value=u64)
    def test_inverse_bijection(self, value: int) -> None:
        """Test encode inverts decode."""
        assert zigzag_encode(zigzag_decode(value)) == value

    @given(value1=i64, value2=i64)
    def test_injective(self, value1: int, value2: int) -> None:
        """Test distinct signed values map to distinct unsigned values."""
        if value1 != value2:
            assert zigzag_encode(value1) != zigzag_encode(value2)

    @given(value=i64)
    def test_magnitude_ordering(self, value: int) -> None:
        """Test the mapping interleaves by absolute value."""
        assert zigzag_encode(value) == (2 * value if value >= 0 else -2 * value - 1)

    @given(value=st.integers(min_value=-128, max_value=127))
    def test_bijection_8_bit(self, value: int) -> None:
        """Test the 8-bit mapping stays within 0-255."""
        mapped = zigzag_encode(value, bits=8)
        assert 0 <= mapped <= 255
        assert zigzag_decode(mapped, bits=8) == value


class TestSignedProperties:
    """Property-based tests for the signed codec."""

    @given(value=i64)
    def test_encode_decode_roundtrip(self, value: int) -> None:
        """Test signed encode/decode is invertible."""
        data = encode_signed_to_bytes(value)
        assert decode_signed_from_bytes(data) == (value, len(data))

    @given(value=i64)
    def test_same_wire_format(self, value: int) -> None:
        """Test signed bytes equal the unsigned bytes of the zigzag value."""
        assert encode_signed_to_bytes(value) == encode_to_bytes(zigzag_encode(value))
        assert encoded_length_signed(value) == encoded_length(zigzag_encode(value))

    @given(value=st.integers(min_value=-120, max_value=120))
    def test_small_magnitudes_single_byte(self, value: int) -> None:
        """Test small positive and negative values take one byte."""
        assert encoded_length_signed(value) == 1

    @given(values=st.lists(i64, max_size=50))
    def test_concatenation(self, values: list[int]) -> None:
        """Test signed values packed back to back decode in order."""
        writer = ByteWriter()
        for value in values:
            encode_signed(value, writer)

        assert list(iter_decode_signed(ByteReader(writer.to_bytes()))) == values
