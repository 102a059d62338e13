"""Tests for shared LEB128 bit helpers."""

from leb128.bits import (
    CONTINUATION_BIT,
    INT64_MAX,
    INT64_MIN,
    MASK64,
    SIGN_BIT,
    low_bits_of_byte,
    low_bits_of_u64,
    to_signed64,
    to_unsigned64,
)


class TestConstants:
    """Tests for the bit masks."""

    def test_continuation_bit(self):
        assert CONTINUATION_BIT == 0x80

    def test_sign_bit(self):
        assert SIGN_BIT == 0x40


class TestLowBits:
    """Tests for extracting the 7 payload bits."""

    def test_low_bits_of_byte(self):
        """Continuation bit is stripped, payload kept."""
        for i in range(128):
            assert low_bits_of_byte(i) == i
            assert low_bits_of_byte(i | CONTINUATION_BIT) == i

    def test_low_bits_of_u64(self):
        """Only the low 7 bits of the value survive."""
        for i in range(128):
            assert low_bits_of_u64(1 << 16 | i) == i
            assert low_bits_of_u64(i << 16 | i | CONTINUATION_BIT) == i

    def test_low_bits_of_negative(self):
        """Negative values use their two's complement pattern."""
        assert low_bits_of_u64(-1) == 0x7F
        assert low_bits_of_u64(-2) == 0x7E
        assert low_bits_of_u64(-128) == 0x00


class TestReinterpret:
    """Tests for 64-bit signed/unsigned reinterpretation."""

    def test_to_signed64(self):
        assert to_signed64(0) == 0
        assert to_signed64(INT64_MAX) == INT64_MAX
        assert to_signed64(1 << 63) == INT64_MIN
        assert to_signed64(MASK64) == -1

    def test_to_signed64_masks_high_bits(self):
        """Bits above bit 63 are dropped."""
        assert to_signed64((1 << 64) | 5) == 5

    def test_to_unsigned64(self):
        assert to_unsigned64(-1) == MASK64
        assert to_unsigned64(INT64_MIN) == 1 << 63
        assert to_unsigned64(42) == 42
