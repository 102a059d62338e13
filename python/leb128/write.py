"""LEB128 encoding.

Integers are written least-significant 7-bit group first. Each byte is
emitted before deciding whether another follows, so zero still encodes as
a single 0x00 byte.

Example:
    >>> import io
    >>> buf = io.BytesIO()
    >>> signed(buf, -12345)
    3
    >>> buf.getvalue().hex()
    'c79f7f'
"""

import io
import warnings
from typing import BinaryIO, Iterator

from .bits import (
    CONTINUATION_BIT,
    INT64_MAX,
    INT64_MIN,
    PAYLOAD_BITS,
    SIGN_BIT,
    UINT64_MAX,
    low_bits_of_u64,
)


def _iter_unsigned_bytes(value: int) -> Iterator[int]:
    """Yield the encoded bytes of an unsigned value, in order."""
    if not isinstance(value, int):
        raise ValueError(f"Unsigned LEB128 value must be an int, got {type(value).__name__}")

    if value < 0:
        raise ValueError(f"Unsigned LEB128 value must be non-negative, got {value}")

    if value > UINT64_MAX:
        raise ValueError(f"Unsigned LEB128 value too large: {value} exceeds uint64 max")

    while True:
        byte = low_bits_of_u64(value)
        value >>= PAYLOAD_BITS
        if value != 0:
            # More bytes to come
            byte |= CONTINUATION_BIT

        yield byte

        if value == 0:
            return


def _iter_signed_bytes(value: int) -> Iterator[int]:
    """Yield the encoded bytes of a signed value, in order.

    Python's >> on a negative int is an arithmetic shift, so the remaining
    value converges to either 0 or -1.
    """
    if not isinstance(value, int):
        raise ValueError(f"Signed LEB128 value must be an int, got {type(value).__name__}")

    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"Signed LEB128 value out of int64 range: {value}")

    more = True
    while more:
        byte = low_bits_of_u64(value)
        value >>= PAYLOAD_BITS

        if (value == 0 and (byte & SIGN_BIT) == 0) or \
                (value == -1 and (byte & SIGN_BIT) == SIGN_BIT):
            # Remaining bits are pure sign extension of this byte
            more = False
        else:
            byte |= CONTINUATION_BIT

        yield byte


def _write_bytes(sink: BinaryIO, encoded: Iterator[int]) -> int:
    bytes_written = 0
    for byte in encoded:
        written = sink.write(bytes([byte])) or 0
        if written != 1:
            warnings.warn(
                f"Short write: sink accepted {written} of 1 bytes "
                f"after {bytes_written} bytes written",
                RuntimeWarning,
            )
        bytes_written += written
    return bytes_written


def unsigned(sink: BinaryIO, value: int) -> int:
    """Write an unsigned integer to a sink using LEB128.

    Args:
        sink: Writable binary file-like object
        value: An unsigned integer (0 to 2^64-1)

    Returns:
        Number of bytes the sink accepted

    Raises:
        ValueError: If value is not an int, negative or too large
        OSError: Any failure of the sink, unchanged

    Example:
        >>> import io
        >>> buf = io.BytesIO()
        >>> unsigned(buf, 624485)
        3
        >>> buf.getvalue().hex()
        'e58e26'
    """
    return _write_bytes(sink, _iter_unsigned_bytes(value))


def signed(sink: BinaryIO, value: int) -> int:
    """Write a signed integer to a sink using LEB128.

    Args:
        sink: Writable binary file-like object
        value: A signed integer (-2^63 to 2^63-1)

    Returns:
        Number of bytes the sink accepted

    Raises:
        ValueError: If value is not an int or outside the int64 range
        OSError: Any failure of the sink, unchanged

    Example:
        >>> import io
        >>> buf = io.BytesIO()
        >>> signed(buf, -123456)
        3
        >>> buf.getvalue().hex()
        'c0bb78'
    """
    return _write_bytes(sink, _iter_signed_bytes(value))


def encode_unsigned(value: int) -> bytes:
    """Encode an unsigned integer as LEB128 bytes.

    Example:
        >>> encode_unsigned(128)
        b'\\x80\\x01'
        >>> encode_unsigned(0)
        b'\\x00'
    """
    buffer = io.BytesIO()
    unsigned(buffer, value)
    return buffer.getvalue()


def encode_signed(value: int) -> bytes:
    """Encode a signed integer as LEB128 bytes.

    Example:
        >>> encode_signed(-2)
        b'~'
        >>> encode_signed(127)
        b'\\xff\\x00'
    """
    buffer = io.BytesIO()
    signed(buffer, value)
    return buffer.getvalue()


def unsigned_size(value: int) -> int:
    """Number of bytes the unsigned encoding of value takes."""
    return sum(1 for _ in _iter_unsigned_bytes(value))


def signed_size(value: int) -> int:
    """Number of bytes the signed encoding of value takes."""
    return sum(1 for _ in _iter_signed_bytes(value))
