"""Print reference CRC vectors for the CCITT and CRC-32 variants.

Useful when checking a checksum stored by firmware against this library.
"""

from bitserial_crc import (
    CCITT,
    CRC32,
    crc16,
    crc32,
    crc_ccitt,
    ccitt_to_bytes,
    crc32_to_bytes,
)


def hex_dump(data: bytes, label: str = "") -> None:
    if label:
        print(f"\n  {label}")
    for i in range(0, len(data), 16):
        hex_values = " ".join(f"{b:02x}" for b in data[i : i + 16])
        print(f"  {i:04x}: {hex_values}")


def main() -> None:
    print("=" * 60)
    print("  Bit-serial CRC reference vectors")
    for variant in (CCITT, CRC32):
        print(f"  {variant.name}: poly={variant.poly.hex()} seed=0x{variant.seed:X}")
    print("=" * 60)

    check = b"123456789"
    hex_dump(check, "Check string:")

    value16 = crc_ccitt(check)
    print(f"  CRC-CCITT: 0x{value16:04X}  bytes={ccitt_to_bytes(value16).hex()}")
    value16_zero = crc_ccitt(check, seed=0x0000)
    print(f"  CRC-CCITT (seed 0): 0x{value16_zero:04X}")

    value32 = crc32(check)
    print(f"  CRC-32:    0x{value32:08X}  bytes={crc32_to_bytes(value32).hex()}")

    print("\n16-bit values (EEPROM word checksums):")
    for word in (0x0000, 0x1234, 0xFFFF):
        print(f"  crc16(0x{word:04X}) = 0x{crc16(word):04X}")

    print("\nSeed chaining:")
    head, tail = check[:4], check[4:]
    chained = crc_ccitt(tail, seed=crc_ccitt(head))
    print(f"  CRC-CCITT({head!r}) -> {tail!r}: 0x{chained:04X} (whole: 0x{value16:04X})")


if __name__ == "__main__":
    main()
