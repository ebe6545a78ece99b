"""Big-endian conversion between fixed-width integers and byte arrays."""

from __future__ import annotations

import struct

from bitserial_crc.constants import CRC_32_LENGTH, CRC_CCITT_LENGTH
from bitserial_crc.types import wire_type_for_width


def int_to_bytes(value: int, width: int) -> bytes:
    """Split ``value`` into ``width`` bytes, most-significant byte first."""
    wt = wire_type_for_width(width)
    if not 0 <= value <= wt.mask:
        raise ValueError(f"Value 0x{value:X} does not fit in {width} bytes")
    return struct.pack(wt.fmt, value)


def bytes_to_int(data: bytes | bytearray) -> int:
    """Reassemble a 2- or 4-byte big-endian sequence into an integer."""
    wt = wire_type_for_width(len(data))
    (value,) = struct.unpack(wt.fmt, data)
    return value


def ccitt_to_bytes(value: int) -> bytes:
    return int_to_bytes(value, CRC_CCITT_LENGTH)


def bytes_to_ccitt(data: bytes | bytearray) -> int:
    if len(data) != CRC_CCITT_LENGTH:
        raise ValueError(f"Expected {CRC_CCITT_LENGTH} bytes, got {len(data)}")
    return bytes_to_int(data)


def crc32_to_bytes(value: int) -> bytes:
    return int_to_bytes(value, CRC_32_LENGTH)


def bytes_to_crc32(data: bytes | bytearray) -> int:
    if len(data) != CRC_32_LENGTH:
        raise ValueError(f"Expected {CRC_32_LENGTH} bytes, got {len(data)}")
    return bytes_to_int(data)
