"""Bit-serial, MSB-first CRC engine.

The public entry point works on big-endian byte arrays so that polynomials,
seeds and results keep the byte layout other systems store and transmit.
Internally the register is a plain integer, converted once on entry and once
on exit, and each supported width has its own shift loop.
"""

from __future__ import annotations

from typing import Callable

from bitserial_crc.codec import bytes_to_int, int_to_bytes
from bitserial_crc.constants import BITS_PER_BYTE
from bitserial_crc.types import wire_type_for_width


def _shift_register_16(poly: int, crc: int, data: bytes | bytearray) -> int:
    for byte in data:
        crc ^= byte << 8
        for _ in range(BITS_PER_BYTE):
            if crc & 0x8000:
                crc = ((crc << 1) ^ poly) & 0xFFFF
            else:
                crc = (crc << 1) & 0xFFFF
    return crc


def _shift_register_32(poly: int, crc: int, data: bytes | bytearray) -> int:
    for byte in data:
        crc ^= byte << 24
        for _ in range(BITS_PER_BYTE):
            if crc & 0x80000000:
                crc = ((crc << 1) ^ poly) & 0xFFFFFFFF
            else:
                crc = (crc << 1) & 0xFFFFFFFF
    return crc


_SHIFT_REGISTERS: dict[int, Callable[[int, int, bytes | bytearray], int]] = {
    2: _shift_register_16,
    4: _shift_register_32,
}


def data_view(data: bytes | bytearray, length: int | None = None) -> bytes | bytearray:
    """Return the first ``length`` bytes of ``data`` (all of it when None)."""
    if length is None:
        return data
    if not 0 <= length <= len(data):
        raise ValueError(f"Data length {length} out of range for a {len(data)}-byte buffer")
    return data[:length]


def compute(
    poly: bytes | bytearray,
    seed: bytes | bytearray,
    data: bytes | bytearray,
    length: int | None = None,
) -> bytes:
    """Compute the CRC of ``data`` and return it as big-endian bytes.

    ``poly`` and ``seed`` must have the same length, 2 or 4 bytes, which sets
    the register width. Each data byte is XORed into the top byte of the
    register and followed by eight shift steps; a step whose outgoing bit is
    set also XORs the polynomial in. An empty buffer returns the seed.
    """
    if len(poly) != len(seed):
        raise ValueError(
            f"Polynomial and seed widths differ: {len(poly)} != {len(seed)} bytes"
        )
    width = wire_type_for_width(len(poly)).size
    shift = _SHIFT_REGISTERS[width]
    crc = shift(bytes_to_int(poly), bytes_to_int(seed), data_view(data, length))
    return int_to_bytes(crc, width)
