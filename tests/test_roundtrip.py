"""Tests for encoding and then decoding."""

import io

import pytest

from leb128 import read, write


def dogfood_unsigned(value: int) -> int:
    buf = io.BytesIO()
    write.unsigned(buf, value)
    buf.seek(0)
    result = read.unsigned(buf)
    assert buf.read() == b''
    return result


def dogfood_signed(value: int) -> int:
    buf = io.BytesIO()
    write.signed(buf, value)
    buf.seek(0)
    result = read.signed(buf)
    assert buf.read() == b''
    return result


class TestRoundTrip:
    """Values survive a write followed by a read."""

    def test_unsigned_small_range(self):
        for i in range(1025):
            assert dogfood_unsigned(i) == i

    def test_signed_small_range(self):
        for i in range(-513, 513):
            assert dogfood_signed(i) == i

    @pytest.mark.parametrize("value", [
        127, 128, 16383, 16384,
        0xFFFFFFFF,
        (1 << 63) - 1,
        1 << 63,
        0xFFFFFFFFFFFFFFFF,
    ])
    def test_unsigned_boundaries(self, value):
        assert dogfood_unsigned(value) == value

    @pytest.mark.parametrize("value", [
        0, -1, 63, 64, -64, -65,
        -(1 << 31), (1 << 31) - 1,
        -(1 << 62), -(1 << 62) - 1,
        -(1 << 63),
        (1 << 63) - 1,
    ])
    def test_signed_boundaries(self, value):
        assert dogfood_signed(value) == value

    def test_powers_of_two(self):
        for i in range(64):
            assert dogfood_unsigned(1 << i) == 1 << i
        for i in range(63):
            assert dogfood_signed(1 << i) == 1 << i
            assert dogfood_signed(-(1 << i)) == -(1 << i)

    def test_mixed_stream(self):
        """Signed and unsigned values interleaved in one stream."""
        values = [("u", 0), ("s", -12345), ("u", 98765), ("s", 127), ("u", 0xFFFFFFFFFFFFFFFF)]
        buf = io.BytesIO()
        for kind, value in values:
            if kind == "u":
                write.unsigned(buf, value)
            else:
                write.signed(buf, value)

        buf.seek(0)
        for kind, value in values:
            decoder = read.unsigned if kind == "u" else read.signed
            assert decoder(buf) == value
        assert buf.read() == b''
