"""Bit-level constants and helpers shared by the LEB128 encoder and decoder.

Every encoded byte carries 7 bits of payload plus a continuation flag:
- Bit 7 (0x80) set means more bytes follow
- Bits 0-6 hold the payload, least-significant group first
- In signed encodings, bit 6 (0x40) of the final byte is the sign
"""

# High bit of each byte: more bytes follow
CONTINUATION_BIT = 1 << 7

# Bit 6 of the final byte of a signed encoding
SIGN_BIT = 1 << 6

# Payload bits per encoded byte
PAYLOAD_BITS = 7

# Maximum of 10 bytes for 64-bit values (64 bits / 7 bits per byte = 9.14)
MAX_ENCODED_LENGTH = 10

MASK64 = 0xFFFFFFFFFFFFFFFF

UINT64_MAX = MASK64
INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1


def low_bits_of_byte(byte: int) -> int:
    """Return the 7 payload bits of a byte (continuation bit cleared)."""
    return byte & ~CONTINUATION_BIT & 0xFF


def low_bits_of_u64(value: int) -> int:
    """Return the 7 payload bits of the low byte of a 64-bit value.

    Negative values are taken in two's complement.

    Example:
        >>> low_bits_of_u64(0x1_0000 | 0x85)
        5
        >>> low_bits_of_u64(-2)
        126
    """
    return low_bits_of_byte(to_unsigned64(value) & 0xFF)


def to_signed64(value: int) -> int:
    """Reinterpret a 64-bit pattern as a signed int64."""
    value &= MASK64
    if value > INT64_MAX:
        return value - (1 << 64)
    return value


def to_unsigned64(value: int) -> int:
    """Reinterpret a signed int64 as its unsigned 64-bit pattern."""
    return value & MASK64
