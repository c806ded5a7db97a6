"""
Low-level byte helpers for the binary board format.

All multi-byte integers are little-endian and unsigned.
"""

import base64
from typing import Optional, Sequence

from .models import ParamValue


def read_uint(data: Sequence[int], offset: int, size: int) -> int:
    """Read an unsigned little-endian integer of ``size`` bytes.

    Bytes past the end of ``data`` read as zero.
    """
    value = 0
    for i in range(size):
        pos = offset + i
        if pos < len(data):
            value |= data[pos] << (8 * i)
    return value


def read_short(data: Sequence[int], offset: int) -> int:
    """Read a 16-bit value."""
    return read_uint(data, offset, 2)


def read_long(data: Sequence[int], offset: int) -> int:
    """Read a 32-bit value."""
    return read_uint(data, offset, 4)


def apply_uint(buf: bytearray, offset: int, size: int, value: int) -> None:
    """Write ``value`` into ``buf`` as ``size`` little-endian bytes.

    Raises:
        ValueError: if ``value`` does not fit in ``size`` bytes
    """
    if value < 0 or value >= 1 << (8 * size):
        raise ValueError(f"value {value} does not fit in {size} byte(s)")
    for i in range(size):
        buf[offset + i] = (value >> (8 * i)) & 0xFF


def apply_short(buf: bytearray, offset: int, value: int) -> None:
    """Write a 16-bit value."""
    apply_uint(buf, offset, 2, value)


def apply_long(buf: bytearray, offset: int, value: int) -> None:
    """Write a 32-bit value."""
    apply_uint(buf, offset, 4, value)


def is_true(value: ParamValue) -> bool:
    """Interpret a parameter as a boolean; only True and "true" count."""
    return value is True or value == "true"


def apply_bool(buf: bytearray, offset: int, bit: int, value: ParamValue) -> None:
    """Set or clear one bit of ``buf[offset]``."""
    buf[offset] &= ~(1 << bit) & 0xFF
    if is_true(value):
        buf[offset] |= 1 << bit


def read_bit(data: Sequence[int], offset: int, bit: int) -> int:
    """Read one bit as 0 or 1."""
    if offset >= len(data):
        return 0
    return (data[offset] >> bit) & 0x01


def find_zero(data: bytes, start: int, end: Optional[int] = None) -> int:
    """Index of the first zero byte at or after ``start``, or -1."""
    if end is None:
        return data.find(b"\x00", start)
    return data.find(b"\x00", start, end)


def read_cstring(data: bytes, start: int) -> bytes:
    """Bytes from ``start`` up to a zero terminator or the end of data."""
    end = find_zero(data, start)
    if end < 0:
        end = len(data)
    return data[start:end]


def clamp(value: int, maximum: int) -> int:
    """Clamp an integer into ``0..maximum``."""
    return max(0, min(int(value), maximum))


def pad_to_multiple(data: bytes, multiple: int = 3) -> bytes:
    """Append zero bytes so the length is a multiple of ``multiple``."""
    remainder = len(data) % multiple
    if remainder:
        data += b"\x00" * (multiple - remainder)
    return data


# =============================================================================
# URL-safe base64
# =============================================================================

_TO_URL = str.maketrans({"+": "-", "/": "_", "=": "*"})
_FROM_URL = str.maketrans({"-": "+", "_": "/", "*": "="})


def to_base64u(data: bytes) -> str:
    """Encode bytes as base64 with ``+/=`` replaced by ``-_*``."""
    return base64.b64encode(bytes(data)).decode("ascii").translate(_TO_URL)


def from_base64u(text: str) -> bytes:
    """Decode a string produced by :func:`to_base64u`.

    Raises:
        ValueError: if the text is not valid base64 after substitution
    """
    standard = text.strip().translate(_FROM_URL)
    return base64.b64decode(standard, validate=True)
