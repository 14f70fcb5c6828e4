import math

import pytest

from loadscale.convert import (
    bytes_to_float,
    bytes_to_uint16,
    float_to_bytes,
    text_to_bytes,
)


def test_float_to_bytes_is_little_endian_ieee():
    assert float_to_bytes(1.0) == b"\x00\x00\x80\x3f"


def test_float_to_bytes_length():
    assert len(float_to_bytes(123.456)) == 4


@pytest.mark.parametrize("value", [0.0, 1.5, -2.25, 1024.0, -0.125])
def test_float_round_trip(value):
    assert bytes_to_float(float_to_bytes(value)) == value


def test_float_round_trip_is_single_precision():
    back = bytes_to_float(float_to_bytes(0.1))
    assert math.isclose(back, 0.1, rel_tol=1e-7)


def test_bytes_to_float_uses_first_four_bytes():
    data = float_to_bytes(-2.25) + b"\xff\xff"
    assert bytes_to_float(data) == -2.25


def test_bytes_to_float_accepts_list():
    assert bytes_to_float(list(float_to_bytes(1.5))) == 1.5


def test_bytes_to_float_too_short():
    with pytest.raises(ValueError):
        bytes_to_float(b"\x00\x00\x80")


def test_bytes_to_uint16_order():
    assert bytes_to_uint16(0x34, 0x12) == 0x1234


def test_bytes_to_uint16_extremes():
    assert bytes_to_uint16(0, 0) == 0
    assert bytes_to_uint16(0xFF, 0xFF) == 0xFFFF


@pytest.mark.parametrize("low,high", [(256, 0), (0, -1)])
def test_bytes_to_uint16_rejects_non_bytes(low, high):
    with pytest.raises(ValueError):
        bytes_to_uint16(low, high)


def test_text_to_bytes_copies_text():
    assert text_to_bytes("WEIGHT:") == b"WEIGHT:"


def test_text_to_bytes_stops_at_nul():
    assert text_to_bytes("ab\0cd") == b"ab"


def test_text_to_bytes_accepts_bytes():
    assert text_to_bytes(b"kg\0junk") == b"kg"


def test_text_to_bytes_empty():
    assert text_to_bytes("") == b""