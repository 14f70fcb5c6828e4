"""Line-oriented serial input and number formatting for the serial port."""

from __future__ import annotations

import re
from typing import Iterable, NamedTuple

RECEIVE_BUFFER_SIZE = 100
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


class KalmanParameters(NamedTuple):
    """Measurement error, estimate error and process noise."""

    measurement_error: float
    estimate_error: float
    process_noise: float


def number_to_string(number: int) -> str:
    """Decimal text of a signed 32-bit integer."""
    if not _INT32_MIN <= number <= _INT32_MAX:
        raise ValueError(f"{number!r} is outside the 32-bit signed range")
    return str(int(number))


class LineReceiver:
    """Collects received bytes into lines ended by a newline.

    The byte before the newline (normally a carriage return) is dropped.
    """

    def __init__(self, capacity: int = RECEIVE_BUFFER_SIZE) -> None:
        self.capacity = capacity
        self._buffer = bytearray()
        self.line = b""
        self.ready = False

    def feed(self, byte: int) -> bytes | None:
        """Take one byte; return the line it completes, if any."""
        if not 0 <= byte <= 0xFF:
            raise ValueError(f"not a byte value: {byte!r}")
        if byte == 0x0A:
            self.line = bytes(self._buffer[:-1])
            self._buffer.clear()
            self.ready = True
            return self.line
        if len(self._buffer) >= self.capacity:
            self._buffer.clear()
            raise ValueError(f"received line is longer than {self.capacity} bytes")
        self._buffer.append(byte)
        return None

    def take_line(self) -> bytes | None:
        """Return the last completed line once, or None if there is none new."""
        if not self.ready:
            return None
        self.ready = False
        return self.line


def _scan_float(line: str | bytes) -> float | None:
    text = line.decode("latin-1") if isinstance(line, (bytes, bytearray)) else line
    match = _FLOAT_PREFIX.match(text)
    return float(match.group(1)) if match else None


def parse_kalman_parameters(lines: Iterable[str | bytes]) -> KalmanParameters:
    """Read three non-zero numbers from successive lines.

    Lines that do not start with a number, or give zero, are skipped.
    """
    values: list[float] = []
    for line in lines:
        value = _scan_float(line)
        if value:
            values.append(value)
            if len(values) == 3:
                return KalmanParameters(*values)
    raise ValueError(f"expected 3 non-zero parameters, got {len(values)}")