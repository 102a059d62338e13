"""LEB128 decoding.

Bytes are consumed one at a time from a readable binary stream until a byte
with the continuation bit clear is found. The stream is left positioned
immediately after the consumed sequence, so back-to-back values can be read
with successive calls.

Decoding fails with one of three distinct errors:
- LEB128IOError: the underlying stream raised an OSError
- UnexpectedEndOfDataError: the stream ran out mid-sequence
- LEB128OverflowError: the value does not fit in 64 bits
"""

import io
from typing import BinaryIO, Iterator, Optional

from .bits import (
    CONTINUATION_BIT,
    INT64_MAX,
    INT64_MIN,
    PAYLOAD_BITS,
    SIGN_BIT,
    low_bits_of_byte,
    to_signed64,
)


class LEB128DecodeError(Exception):
    """Raised when LEB128 decoding fails."""
    pass


class LEB128IOError(LEB128DecodeError):
    """Raised when the underlying byte source fails."""

    def __init__(self, message: str, error: OSError):
        super().__init__(message)
        self.error = error


class UnexpectedEndOfDataError(LEB128DecodeError):
    """Raised when the source is exhausted before a terminating byte."""

    def __init__(self, message: str, bytes_read: int):
        super().__init__(message)
        self.bytes_read = bytes_read


class LEB128OverflowError(LEB128DecodeError, OverflowError):
    """Raised when the encoded value is larger than 64 bits can hold."""

    def __init__(self, message: str, bytes_read: int):
        super().__init__(message)
        self.bytes_read = bytes_read


def _read_byte(source: BinaryIO, bytes_read: int) -> Optional[int]:
    """Read one byte, returning None at end of data.

    A zero-length read is always end of data, never a retry condition.
    """
    try:
        data = source.read(1)
    except OSError as e:
        raise LEB128IOError(
            f"Failed to read byte {bytes_read + 1} of LEB128 value: {e}", e
        ) from e

    if not data:
        return None
    return data[0]


def _unsigned_overflows(payload: int, shift: int) -> bool:
    # Leading zeros of the payload within 64 bits must cover the shift
    leading_zeros = 64 - payload.bit_length()
    return leading_zeros < shift


def _signed_overflows(payload: int, shift: int) -> bool:
    # No payload may start past bit 63, same as the unsigned path
    if shift >= 64:
        return True

    # Payload taken as a 7-bit two's complement value
    if payload & SIGN_BIT:
        payload -= CONTINUATION_BIT
    shifted = payload << shift
    return shifted < INT64_MIN or shifted > INT64_MAX


def _decode(
    source: BinaryIO,
    is_signed: bool,
    eof_at_start_ok: bool = False,
) -> Optional[int]:
    result = 0
    shift = 0
    bytes_read = 0
    overflows = _signed_overflows if is_signed else _unsigned_overflows

    while True:
        byte = _read_byte(source, bytes_read)
        if byte is None:
            if bytes_read == 0:
                if eof_at_start_ok:
                    return None
                raise UnexpectedEndOfDataError(
                    "Unexpected end of stream: no bytes to read", bytes_read
                )
            raise UnexpectedEndOfDataError(
                f"Unexpected end of stream after {bytes_read} bytes", bytes_read
            )
        bytes_read += 1

        payload = low_bits_of_byte(byte)
        if overflows(payload, shift):
            raise LEB128OverflowError(
                f"LEB128 value too large: byte {bytes_read} overflows 64 bits",
                bytes_read,
            )

        result |= payload << shift
        shift += PAYLOAD_BITS

        if (byte & CONTINUATION_BIT) == 0:
            break

    if not is_signed:
        return result

    if shift < 64 and (byte & SIGN_BIT) == SIGN_BIT:
        # Sign extend the result
        result |= -(1 << shift)

    return to_signed64(result)


def unsigned(source: BinaryIO) -> int:
    """Read an unsigned LEB128 integer from a stream.

    Args:
        source: A binary buffer to read from (file-like object)

    Returns:
        The decoded unsigned integer value (0 to 2^64-1)

    Raises:
        UnexpectedEndOfDataError: If the stream ends mid-sequence
        LEB128OverflowError: If the value exceeds 64 bits
        LEB128IOError: If reading from the stream fails

    Example:
        >>> import io
        >>> unsigned(io.BytesIO(b'\\xe5\\x8e\\x26'))
        624485
    """
    return _decode(source, is_signed=False)


def signed(source: BinaryIO) -> int:
    """Read a signed LEB128 integer from a stream.

    Args:
        source: A binary buffer to read from (file-like object)

    Returns:
        The decoded signed integer value (-2^63 to 2^63-1)

    Raises:
        UnexpectedEndOfDataError: If the stream ends mid-sequence
        LEB128OverflowError: If the value exceeds 64 bits
        LEB128IOError: If reading from the stream fails

    Example:
        >>> import io
        >>> signed(io.BytesIO(b'\\xc0\\xbb\\x78'))
        -123456
    """
    return _decode(source, is_signed=True)


def _from_bytes(data: bytes, offset: int, is_signed: bool) -> tuple[int, int]:
    if offset < 0:
        raise ValueError(f"Offset must be non-negative, got {offset}")

    buffer = io.BytesIO(data[offset:])
    value = _decode(buffer, is_signed=is_signed)
    bytes_consumed = buffer.tell()
    return value, bytes_consumed


def unsigned_from_bytes(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Read an unsigned LEB128 integer from a bytes object.

    Args:
        data: Bytes containing the encoded value
        offset: Starting position in the bytes

    Returns:
        Tuple of (decoded_value, bytes_consumed)

    Example:
        >>> unsigned_from_bytes(b'\\xff\\x82\\x01\\xff', offset=1)
        (130, 2)
    """
    return _from_bytes(data, offset, is_signed=False)


def signed_from_bytes(data: bytes, offset: int = 0) -> tuple[int, int]:
    """Read a signed LEB128 integer from a bytes object.

    Args:
        data: Bytes containing the encoded value
        offset: Starting position in the bytes

    Returns:
        Tuple of (decoded_value, bytes_consumed)

    Example:
        >>> signed_from_bytes(b'\\x80\\x7f')
        (-128, 2)
    """
    return _from_bytes(data, offset, is_signed=True)


def iter_unsigned(source: BinaryIO) -> Iterator[int]:
    """Iterate over back-to-back unsigned values until the stream ends.

    The stream must end exactly on a value boundary; a truncated final
    value raises UnexpectedEndOfDataError.

    Example:
        >>> import io
        >>> list(iter_unsigned(io.BytesIO(b'\\x82\\x01\\x01')))
        [130, 1]
    """
    while True:
        value = _decode(source, is_signed=False, eof_at_start_ok=True)
        if value is None:
            return
        yield value


def iter_signed(source: BinaryIO) -> Iterator[int]:
    """Iterate over back-to-back signed values until the stream ends.

    Example:
        >>> import io
        >>> list(iter_signed(io.BytesIO(b'\\x7e\\x80\\x7f')))
        [-2, -128]
    """
    while True:
        value = _decode(source, is_signed=True, eof_at_start_ok=True)
        if value is None:
            return
        yield value
