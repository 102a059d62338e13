"""Read and write DWARF's "Little Endian Base 128" (LEB128) variable-length integers.

Example usage:
    import io
    from leb128 import read, write

    buf = io.BytesIO()
    write.signed(buf, -12345)
    write.unsigned(buf, 98765)

    buf.seek(0)
    assert read.signed(buf) == -12345
    assert read.unsigned(buf) == 98765
"""

from . import read, write
from .bits import CONTINUATION_BIT, MAX_ENCODED_LENGTH, SIGN_BIT
from .read import (
    LEB128DecodeError,
    LEB128IOError,
    LEB128OverflowError,
    UnexpectedEndOfDataError,
    iter_signed,
    iter_unsigned,
    signed_from_bytes,
    unsigned_from_bytes,
)
from .write import encode_signed, encode_unsigned, signed_size, unsigned_size

__version__ = "0.1.0"

__all__ = [
    # Modules
    "read",
    "write",
    # Constants
    "CONTINUATION_BIT",
    "SIGN_BIT",
    "MAX_ENCODED_LENGTH",
    # Errors
    "LEB128DecodeError",
    "LEB128IOError",
    "LEB128OverflowError",
    "UnexpectedEndOfDataError",
    # Bytes helpers
    "encode_unsigned",
    "encode_signed",
    "unsigned_from_bytes",
    "signed_from_bytes",
    "unsigned_size",
    "signed_size",
    # Iterators
    "iter_unsigned",
    "iter_signed",
]
