"""Tests for the bit-serial engine at the byte-array boundary."""

import pytest

from bitserial_crc import compute, CRC_CCITT_POLY, CRC_32_POLY


def test_empty_data_returns_seed():
    assert compute(CRC_CCITT_POLY, b"\xab\xcd", b"") == b"\xab\xcd"
    assert compute(CRC_32_POLY, b"\x01\x02\x03\x04", b"") == b"\x01\x02\x03\x04"


def test_single_bit_reaches_top_and_applies_poly():
    # 0x01 needs seven plain shifts to reach the MSB; the eighth shifts it out
    # and XORs the polynomial into an otherwise empty register.
    assert compute(CRC_CCITT_POLY, b"\x00\x00", b"\x01") == CRC_CCITT_POLY
    assert compute(CRC_32_POLY, b"\x00\x00\x00\x00", b"\x01") == CRC_32_POLY


def test_ccitt_two_zero_bytes_from_all_ones():
    assert compute(CRC_CCITT_POLY, b"\xff\xff", b"\x00\x00") == b"\x1d\x0f"


def test_result_has_register_width():
    assert len(compute(CRC_CCITT_POLY, b"\xff\xff", b"123456789")) == 2
    assert len(compute(CRC_32_POLY, b"\xff\xff\xff\xff", b"123456789")) == 4


def test_length_limits_processed_bytes():
    data = b"\x00\x00\x55\xaa"
    assert compute(CRC_CCITT_POLY, b"\xff\xff", data, 2) == b"\x1d\x0f"
    assert compute(CRC_CCITT_POLY, b"\xff\xff", data, 0) == b"\xff\xff"


def test_data_is_not_mutated():
    data = bytearray(b"\x10\x20\x30")
    compute(CRC_32_POLY, b"\xff\xff\xff\xff", data)
    assert data == bytearray(b"\x10\x20\x30")


def test_mismatched_poly_and_seed_rejected():
    with pytest.raises(ValueError, match="widths differ"):
        compute(CRC_CCITT_POLY, b"\x00\x00\x00\x00", b"\x01")


def test_unsupported_width_rejected():
    with pytest.raises(ValueError, match="Unsupported CRC width"):
        compute(b"\x07", b"\x00", b"\x01")


def test_length_out_of_range_rejected():
    with pytest.raises(ValueError, match="out of range"):
        compute(CRC_CCITT_POLY, b"\xff\xff", b"\x01\x02", 3)
    with pytest.raises(ValueError, match="out of range"):
        compute(CRC_CCITT_POLY, b"\xff\xff", b"\x01\x02", -1)
