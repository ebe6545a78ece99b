"""Polynomial and register constants."""

BITS_PER_BYTE = 8
MSB = 0x80

CRC_CCITT_LENGTH = 2
CRC_32_LENGTH = 4

CRC_CCITT_POLY = bytes([0x10, 0x21])
CRC_32_POLY = bytes([0xED, 0xB8, 0x83, 0x20])  # MSB-first, not the zlib CRC-32

CRC_CCITT_SEED = 0xFFFF
CRC_32_SEED = 0xFFFFFFFF
