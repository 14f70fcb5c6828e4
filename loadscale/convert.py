"""Conversions between numbers, text and the byte layouts used on the wire."""

from __future__ import annotations

import struct

_FLOAT = struct.Struct("<f")


def _check_byte(value: int, name: str) -> int:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} must be a byte value, got {value!r}")
    return value


def float_to_bytes(value: float) -> bytes:
    """Return the four little-endian bytes of ``value`` as a 32-bit float."""
    return _FLOAT.pack(value)


def bytes_to_float(data: bytes) -> float:
    """Interpret the first four bytes of ``data`` as a little-endian 32-bit float."""
    raw = bytes(data)
    if len(raw) < _FLOAT.size:
        raise ValueError(f"need {_FLOAT.size} bytes for a float, got {len(raw)}")
    return _FLOAT.unpack(raw[: _FLOAT.size])[0]


def bytes_to_uint16(low: int, high: int) -> int:
    """Combine a low and a high byte into an unsigned 16-bit value."""
    return _check_byte(low, "low") | (_check_byte(high, "high") << 8)


def text_to_bytes(text: str | bytes) -> bytes:
    """Return the bytes of ``text`` up to, but not including, the first NUL."""
    raw = text.encode("latin-1") if isinstance(text, str) else bytes(text)
    return raw.split(b"\0", 1)[0]