"""Fixed-width unsigned integer types used for CRC registers."""

from __future__ import annotations


class WireType:
    """Marker for a fixed-width unsigned integer packed big-endian."""

    def __init__(self, fmt: str, size: int):
        self.fmt = fmt
        self.size = size

    @property
    def bits(self) -> int:
        return self.size * 8

    @property
    def mask(self) -> int:
        return (1 << self.bits) - 1

    @property
    def top_bit(self) -> int:
        return 1 << (self.bits - 1)

    def __repr__(self) -> str:
        return f"WireType({self.fmt!r}, {self.size})"


# Register widths share the byte order of the polynomials: most-significant first.
UInt16 = WireType(">H", 2)
UInt32 = WireType(">I", 4)

WIRE_TYPES: dict[int, WireType] = {
    UInt16.size: UInt16,
    UInt32.size: UInt32,
}


def wire_type_for_width(width: int) -> WireType:
    """Return the WireType for a register width given in bytes."""
    wt = WIRE_TYPES.get(width)
    if wt is None:
        raise ValueError(f"Unsupported CRC width: {width} bytes (expected 2 or 4)")
    return wt
