"""Bit-serial CRC-CCITT and CRC-32 over big-endian byte arrays."""

from bitserial_crc.crc import CCITT, CRC32, CrcVariant, crc16, crc32, crc_ccitt
from bitserial_crc.engine import compute
from bitserial_crc.codec import (
    int_to_bytes,
    bytes_to_int,
    ccitt_to_bytes,
    bytes_to_ccitt,
    crc32_to_bytes,
    bytes_to_crc32,
)
from bitserial_crc.constants import (
    CRC_CCITT_POLY,
    CRC_32_POLY,
    CRC_CCITT_LENGTH,
    CRC_32_LENGTH,
    CRC_CCITT_SEED,
    CRC_32_SEED,
)

__all__ = [
    "crc_ccitt",
    "crc32",
    "crc16",
    "compute",
    "CrcVariant",
    "CCITT",
    "CRC32",
    "int_to_bytes",
    "bytes_to_int",
    "ccitt_to_bytes",
    "bytes_to_ccitt",
    "crc32_to_bytes",
    "bytes_to_crc32",
    "CRC_CCITT_POLY",
    "CRC_32_POLY",
    "CRC_CCITT_LENGTH",
    "CRC_32_LENGTH",
    "CRC_CCITT_SEED",
    "CRC_32_SEED",
]
