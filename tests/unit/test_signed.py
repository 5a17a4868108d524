"""Unit tests for the signed codec."""

from __future__ import annotations

import io

import pytest

from varuint import (
    EncodeError,
    TruncatedInputError,
    UnsupportedEncodingError,
    decode_signed,
    decode_signed_from_bytes,
    encode,
    encode_signed,
    encode_signed_to_bytes,
    encode_to_bytes,
    encoded_length_signed,
    iter_decode_signed,
    zigzag_encode,
)
from varuint.streams import ByteReader, ByteWriter

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1


class TestEncodedLengthSigned:
    """Test signed size queries."""

    @pytest.mark.parametrize(
        ("value", "size"),
        [
            (0, 1),
            (1, 1),
            (-1, 1),
            (120, 1),
            (-120, 1),
            (121, 2),
            (-121, 2),
            (2031 // 2, 2),
            (-(2031 // 2), 2),
            (67567 // 2, 3),
            (-(67567 // 2), 3),
            (16777215 // 2, 4),
            (-(16777215 // 2), 4),
            (4294967295 // 2, 5),
            (-(4294967295 // 2), 5),
            (1099511627775 // 2, 6),
            (-(1099511627775 // 2), 6),
            (281474976710655 // 2, 7),
            (-(281474976710655 // 2), 7),
            (72057594037927935 // 2, 8),
            (-(72057594037927935 // 2), 8),
            (I64_MIN, 9),
            (I64_MAX, 9),
        ],
    )
    def test_sizes(self, value: int, size: int) -> None:
        """Test sizes match the bytes written."""
        assert encoded_length_signed(value) == size

        writer = ByteWriter()
        assert encode_signed(value, writer) == size
        assert writer.byte_length() == size

    def test_out_of_range(self) -> None:
        """Test values outside the signed 64-bit range."""
        with pytest.raises(EncodeError, match="i64"):
            encoded_length_signed(I64_MAX + 1)

        with pytest.raises(EncodeError, match="i64"):
            encoded_length_signed(I64_MIN - 1)


class TestSignedWireFormat:
    """Test that signed values reuse the unsigned wire format."""

    def test_small_values(self) -> None:
        """Test the zigzag-mapped bytes for small values."""
        assert encode_signed_to_bytes(0) == b"\x00"
        assert encode_signed_to_bytes(-1) == b"\x01"
        assert encode_signed_to_bytes(1) == b"\x02"

    def test_identical_to_unsigned(self) -> None:
        """Test byte-identical output to encoding the zigzag value."""
        for value in (0, -1, 1, -121, 5000, -70000, I64_MIN, I64_MAX):
            assert encode_signed_to_bytes(value) == encode_to_bytes(zigzag_encode(value))

    def test_extremes(self) -> None:
        """Test the 64-bit extremes."""
        assert encode_signed_to_bytes(I64_MIN) == b"\xfe" + b"\xff" * 8
        assert encode_signed_to_bytes(I64_MAX) == b"\xfe" + b"\xff" * 7 + b"\xfe"

    def test_unsigned_bytes_decode_as_signed(self) -> None:
        """Test decoding bytes written by the unsigned codec."""
        buf = io.BytesIO()
        encode(3, buf)
        buf.seek(0)

        assert decode_signed(buf) == -2


class TestDecodeSigned:
    """Test signed decoding."""

    @pytest.mark.parametrize("value", [0, -1, 1, -2, 2, -1000, 1000, I64_MIN, I64_MAX])
    def test_roundtrip(self, value: int) -> None:
        """Test round trip through a sink and source."""
        buf = io.BytesIO()
        encode_signed(value, buf)
        buf.seek(0)

        assert decode_signed(buf) == value

    def test_decode_signed_from_bytes(self) -> None:
        """Test value and consumed byte count."""
        data = encode_signed_to_bytes(-5000) + b"\x00"
        assert decode_signed_from_bytes(data) == (-5000, 3)

    def test_iter_decode_signed(self) -> None:
        """Test decoding concatenated signed values."""
        writer = ByteWriter()
        for value in (-1, 300, -70000):
            encode_signed(value, writer)

        assert list(iter_decode_signed(ByteReader(writer.to_bytes()))) == [-1, 300, -70000]

    def test_truncated(self) -> None:
        """Test a truncated signed value."""
        with pytest.raises(TruncatedInputError):
            decode_signed(ByteReader(b"\xfe\xff"))

    def test_reserved_header(self) -> None:
        """Test the reserved header is rejected for signed values too."""
        with pytest.raises(UnsupportedEncodingError):
            decode_signed(ByteReader(b"\xff"))


class TestSignedWidths:
    """Test narrower signed widths."""

    def test_int8_extremes(self) -> None:
        """Test -128 and 127 with bits=8."""
        assert encode_signed_to_bytes(-128, bits=8) == b"\xf1\x0f"
        assert encode_signed_to_bytes(127, bits=8) == b"\xf1\x0e"
        assert decode_signed_from_bytes(b"\xf1\x0f", bits=8) == (-128, 2)

    def test_int8_overflow(self) -> None:
        """Test values outside the 8-bit signed range."""
        with pytest.raises(EncodeError, match="i8"):
            encode_signed_to_bytes(128, bits=8)

        with pytest.raises(EncodeError, match="i8"):
            encoded_length_signed(-129, bits=8)
