"""HX711 load-cell amplifier read through injectable pin operations."""

from __future__ import annotations

from typing import Callable

_GAIN_PULSES = {128: 1, 64: 3, 32: 2}


def gain_pulses(gain: int) -> int:
    """Extra clock pulses that select channel and gain for the next reading."""
    try:
        return _GAIN_PULSES[gain]
    except KeyError:
        raise ValueError(f"unsupported gain {gain!r}; use 128, 64 or 32") from None


def decode_signed_reading(high: int, middle: int, low: int) -> int:
    """Turn the three bytes shifted out of the chip into a signed reading.

    The bytes are inverted and incremented, so the result is the negated
    24-bit two's-complement value, sign-extended to 32 bits.
    """
    for value in (high, middle, low):
        if not 0 <= value <= 0xFF:
            raise ValueError(f"not a byte value: {value!r}")
    high, middle, low = (~high & 0xFF), (~middle & 0xFF), (~low & 0xFF)
    if high & 0x80 or (high, middle, low) == (0x7F, 0xFF, 0xFF):
        filler = 0xFF
    else:
        filler = 0x00
    value = ((filler << 24) | (high << 16) | (middle << 8) | low) + 1
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def _check_times(times: int) -> int:
    if not 1 <= times <= 0xFF:
        raise ValueError(f"times must be between 1 and 255, got {times!r}")
    return times


class LoadCell:
    """An HX711 channel with tare offset and scale factor.

    ``shift_in`` returns the next byte clocked out of the chip, ``clock_pulse``
    gives one pulse on the clock pin and ``is_ready`` reports whether a
    conversion is waiting. Creating the object performs one reading so the
    chosen gain takes effect.
    """

    def __init__(
        self,
        shift_in: Callable[[], int],
        clock_pulse: Callable[[], object] | None = None,
        is_ready: Callable[[], bool] | None = None,
        gain: int = 128,
        scale: float = 1.0,
        offset: int = 0,
    ) -> None:
        self._shift_in = shift_in
        self._clock_pulse = clock_pulse if clock_pulse is not None else (lambda: None)
        self._is_ready = is_ready if is_ready is not None else (lambda: True)
        self.gain = gain
        self.pulses = gain_pulses(gain)
        self.scale = scale
        self.offset = offset
        self.read()

    def read(self) -> int:
        """Wait for the chip, then return one signed reading."""
        while not self._is_ready():
            pass
        high = self._shift_in()
        middle = self._shift_in()
        low = self._shift_in()
        for _ in range(self.pulses):
            self._clock_pulse()
        return decode_signed_reading(high, middle, low)

    def read_average(self, times: int = 10) -> int:
        """Average of ``times`` readings, truncated toward zero."""
        _check_times(times)
        total = sum(self.read() for _ in range(times))
        quotient = abs(total) // times
        return -quotient if total < 0 else quotient

    def get_value(self, times: int = 1) -> float:
        """Average reading with the tare offset removed."""
        return float(self.read_average(times) - self.offset)

    def get_units(self, times: int = 1) -> float:
        """Tared reading divided by the scale factor."""
        return self.get_value(times) / self.scale

    def tare(self, times: int = 10) -> None:
        """Take the current average reading as the zero offset."""
        self.offset = self.read_average(times)