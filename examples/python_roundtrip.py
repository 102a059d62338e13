#!/usr/bin/env python3
"""
Example: Write LEB128 numbers to a buffer and read them back

Mirrors the usage shown in the leb128 package docstring.
"""

import io
import sys
from pathlib import Path

# Add parent directory to path to import leb128
sys.path.insert(0, str(Path(__file__).parent.parent / "python"))

from leb128 import read, write


def roundtrip_signed(value):
    """Write a signed number and read it back."""
    buf = io.BytesIO()
    written = write.signed(buf, value)
    print(f"signed {value} -> {buf.getvalue().hex()} ({written} bytes)")

    buf.seek(0)
    return read.signed(buf)


def roundtrip_unsigned(value):
    """Write an unsigned number and read it back."""
    buf = io.BytesIO()
    written = write.unsigned(buf, value)
    print(f"unsigned {value} -> {buf.getvalue().hex()} ({written} bytes)")

    buf.seek(0)
    return read.unsigned(buf)


def main():
    assert roundtrip_signed(-12345) == -12345
    assert roundtrip_unsigned(98765) == 98765


if __name__ == "__main__":
    main()
