"""CRC-CCITT and CRC-32 entry points with integer seeds and results."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from bitserial_crc.codec import bytes_to_int, int_to_bytes
from bitserial_crc.constants import (
    CRC_32_POLY,
    CRC_32_SEED,
    CRC_CCITT_POLY,
    CRC_CCITT_SEED,
)
from bitserial_crc.engine import compute
from bitserial_crc.types import wire_type_for_width


class CrcVariant(BaseModel):
    """A generator polynomial bound to its register width and default seed.

    The width in bytes is the length of ``poly``; only 2 and 4 are supported.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    poly: bytes
    seed: int

    @field_validator("poly")
    @classmethod
    def check_poly_width(cls, v: bytes) -> bytes:
        wire_type_for_width(len(v))
        return v

    @model_validator(mode="after")
    def check_seed_fits(self) -> CrcVariant:
        if not 0 <= self.seed <= wire_type_for_width(self.width).mask:
            raise ValueError(f"Seed 0x{self.seed:X} does not fit in {self.width} bytes")
        return self

    @property
    def width(self) -> int:
        return len(self.poly)

    def compute(
        self,
        data: bytes | bytearray,
        length: Optional[int] = None,
        seed: Optional[int] = None,
    ) -> int:
        """CRC of ``data`` (or its first ``length`` bytes) as an integer."""
        if seed is None:
            seed = self.seed
        crc = compute(self.poly, int_to_bytes(seed, self.width), data, length)
        return bytes_to_int(crc)


CCITT = CrcVariant(name="CRC-CCITT", poly=CRC_CCITT_POLY, seed=CRC_CCITT_SEED)
CRC32 = CrcVariant(name="CRC-32", poly=CRC_32_POLY, seed=CRC_32_SEED)


def crc_ccitt(
    data: bytes | bytearray,
    length: Optional[int] = None,
    seed: int = CRC_CCITT_SEED,
) -> int:
    """Compute CRC-CCITT (polynomial 0x1021, MSB-first, no final XOR)."""
    return CCITT.compute(data, length, seed)


def crc32(
    data: bytes | bytearray,
    length: Optional[int] = None,
    seed: int = CRC_32_SEED,
) -> int:
    """Compute the 32-bit CRC over polynomial bytes ED B8 83 20, MSB-first.

    The polynomial is shifted MSB-first with no reflection and no final XOR,
    so results differ from zlib's CRC-32.
    """
    return CRC32.compute(data, length, seed)


def crc16(value: int, seed: int = CRC_CCITT_SEED) -> int:
    """CRC-CCITT of a single 16-bit value, high byte first."""
    return crc_ccitt(int_to_bytes(value, CCITT.width), 2, seed)
