"""
Tests for the binary and text codecs.
"""

import math

import pytest

from infounit import BitCount, BitRate, ByteCount
from infounit.api.codecs import decode_binary, encode_binary, marshal_text, unmarshal_text
from infounit.core.errors import InvalidLengthError, MalformedRepresentationError, OutOfRangeError
from infounit.core.units import MAX_COUNT


class TestBinaryCodec:
    """Test the fixed-width binary form."""

    def test_encode_count(self):
        """Test that counts are big-endian unsigned 64-bit integers."""
        assert encode_binary(BitCount(0x0102030405060708)) == bytes([1, 2, 3, 4, 5, 6, 7, 8])
        assert encode_binary(ByteCount(MAX_COUNT)) == b"\xff" * 8
        assert encode_binary(ByteCount(0)) == b"\x00" * 8

    def test_encode_rate(self):
        """Test that rates are big-endian IEEE-754 doubles."""
        assert encode_binary(BitRate(1.0)) == b"\x3f\xf0\x00\x00\x00\x00\x00\x00"
        assert encode_binary(BitRate(-2.0)) == b"\xc0\x00\x00\x00\x00\x00\x00\x00"

    @pytest.mark.parametrize(
        "value",
        [BitCount(0), BitCount(12345), ByteCount(MAX_COUNT), BitRate(987654.321), BitRate(-0.5)],
    )
    def test_decode(self, value):
        """Test decoding what was encoded."""
        assert decode_binary(type(value), encode_binary(value)) == value

    def test_decode_special_rates(self):
        """Test NaN and infinities."""
        assert decode_binary(BitRate, encode_binary(BitRate(math.nan))).is_nan()
        assert decode_binary(BitRate, encode_binary(BitRate(-math.inf))).is_inf(-1)

    @pytest.mark.parametrize("length", [0, 1, 7, 9, 16])
    def test_invalid_length(self, length):
        """Test that payloads of any other length are rejected."""
        with pytest.raises(InvalidLengthError, match=f"invalid len: {length}"):
            decode_binary(BitCount, b"\x00" * length)


class TestTextCodec:
    """Test the plain-text form."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (BitCount(1111), "1111 bit"),
            (ByteCount(5000000), "5000000 B"),
            (ByteCount(0), "0 B"),
            (BitRate(0.5), "0.5 bit/s"),
            (BitRate(987654.321), "987654.321 bit/s"),
            (BitRate(1e21), "1000000000000000000000 bit/s"),
            (BitRate(math.inf), "inf bit/s"),
        ],
    )
    def test_marshal(self, value, expected):
        """Test the raw value followed by the base unit."""
        assert marshal_text(value) == expected

    @pytest.mark.parametrize(
        "value",
        [
            BitCount(0),
            BitCount(MAX_COUNT),
            ByteCount(987654321),
            BitRate(0.1),
            BitRate(-12.75),
            BitRate(1e-7),
            BitRate(math.inf),
        ],
    )
    def test_unmarshal(self, value):
        """Test that every marshalled value reads back exactly."""
        assert unmarshal_text(type(value), marshal_text(value)) == value

    def test_unmarshal_human_text(self):
        """Test that human-readable text is accepted too."""
        assert unmarshal_text(ByteCount, b"1.5 MB") == ByteCount(1500000)
        assert unmarshal_text(BitRate, "10 Gbps") == BitRate(1e10)
        assert unmarshal_text(BitRate, "nan bit/s").is_nan()

    def test_unmarshal_malformed(self):
        """Test that malformed text is rejected."""
        with pytest.raises(MalformedRepresentationError):
            unmarshal_text(BitCount, "lots")
        with pytest.raises(OutOfRangeError):
            unmarshal_text(BitCount, "9" * 5000 + " bit")
