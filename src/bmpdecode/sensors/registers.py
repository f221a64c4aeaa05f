"""
Primitive readers for the little-endian register words of Bosch pressure
sensors.

All helpers take a bytes-like buffer (``bytes``, ``bytearray``,
``memoryview`` or a sequence of ints in ``0..255``) plus an offset and never
read past the end of it: out-of-bounds reads raise :class:`OutOfRangeError`
instead of returning garbage.
"""

from __future__ import annotations

from typing import Sequence, Union

Buffer = Union[bytes, bytearray, memoryview, Sequence[int]]

MAX_20BIT = (1 << 20) - 1


class OutOfRangeError(ValueError):
    """Raised when a register read falls outside the supplied buffer."""


def require_length(buf: Buffer, length: int, what: str = "buffer") -> None:
    """Raise :class:`OutOfRangeError` unless ``buf`` holds at least ``length`` bytes."""
    if len(buf) < length:
        raise OutOfRangeError(f"{what} needs at least {length} bytes, got {len(buf)}")


def _byte_at(buf: Buffer, index: int) -> int:
    if index < 0 or index >= len(buf):
        raise OutOfRangeError(f"read at offset {index} outside buffer of {len(buf)} bytes")
    value = buf[index]
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise OutOfRangeError(f"element {index} is not a byte: {value!r}")
    return value


def decode_u8(buf: Buffer, offset: int) -> int:
    return _byte_at(buf, offset)


def decode_u16_le(buf: Buffer, offset: int) -> int:
    """Unsigned 16-bit word, LSB at ``offset``."""
    return _byte_at(buf, offset) | (_byte_at(buf, offset + 1) << 8)


def decode_s16_le(buf: Buffer, offset: int) -> int:
    """Signed (two's complement) 16-bit word, LSB at ``offset``."""
    v = decode_u16_le(buf, offset)
    if v & 0x8000:
        v -= 0x10000
    return v


def decode_20bit(buf: Buffer, offset: int) -> int:
    """
    Packed 20-bit ADC sample: MSB, LSB and the high nibble of XLSB.

    The low nibble of the third byte is ignored. Every input is checked to be
    a byte before shifting, so the result always lies in
    ``[0, MAX_20BIT]`` and is never sign-extended.
    """
    return (
        (_byte_at(buf, offset) << 12)
        | (_byte_at(buf, offset + 1) << 4)
        | (_byte_at(buf, offset + 2) >> 4)
    )
