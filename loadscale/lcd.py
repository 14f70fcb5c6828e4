"""Character LCD (HD44780 behind a PCF8574 I2C expander) driven in 4-bit mode."""

from __future__ import annotations

from typing import Callable

from .convert import text_to_bytes

PCF8574T_ADDRESS = 0x4E
ROW1 = 0x80
ROW2 = 0xC0
DELAY_TIME = 10
ROW_WIDTH = 16

_DATA_FLAGS = (0x0D, 0x09)
_COMMAND_FLAGS = (0x0C, 0x08)
_INIT_COMMANDS = (0x33, 0x32, 0x28, 0x01, 0x06, 0x0C, 0x02)


def _code(value: int | str) -> int:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        value = ord(value)
    if not 0 <= value <= 0xFF:
        raise ValueError(f"not a byte value: {value!r}")
    return value


def format_integer(number: float) -> str:
    """Decimal text the display shows for ``number`` truncated to an integer.

    Zero gives an empty string.
    """
    value = int(number)
    digits = str(abs(value)) if value else ""
    return f"-{digits}" if value < 0 else digits


def format_float(number: float) -> str:
    """Text the display shows for ``number`` rounded to three decimals."""
    scaled = int(number * 10000)
    if number < 0:
        scaled = -scaled
    scaled = scaled // 10 + (1 if scaled % 10 >= 5 else 0)
    digits = str(scaled) if scaled else ""
    if len(digits) > 3:
        digits = f"{digits[:-3]}.{digits[-3:]}"
    return f"-{digits}" if number < 0 else digits


def cursor_address(row: int, col: int) -> int:
    """Set-DDRAM-address command for a 1-based row and 0-based column."""
    if row == 1:
        return (ROW1 + col) & 0xFF
    return (ROW1 | (0x40 + col)) & 0xFF


def nibble_bytes(value: int | str, is_data: bool) -> bytes:
    """The four expander bytes that clock ``value`` into the display."""
    code = _code(value)
    enable, latch = _DATA_FLAGS if is_data else _COMMAND_FLAGS
    upper = code & 0xF0
    lower = (code << 4) & 0xF0
    return bytes((upper | enable, upper | latch, lower | enable, lower | latch))


class Lcd:
    """Two-line display reached through a byte writer and a millisecond delay."""

    def __init__(
        self,
        write_byte: Callable[[int], object],
        delay: Callable[[int], object] | None = None,
    ) -> None:
        self._write_byte = write_byte
        self._delay = delay if delay is not None else (lambda _ms: None)
        self.last_weight = 1.0

    def _send(self, value: int | str, is_data: bool) -> None:
        for byte in nibble_bytes(value, is_data):
            self._write_byte(byte)

    def write_command(self, command: int) -> None:
        """Send a control command."""
        self._send(command, False)

    def write_data(self, char: int | str) -> None:
        """Send one character."""
        self._send(char, True)

    def write_string(self, text: str | bytes) -> None:
        """Send the characters of ``text`` up to the first NUL."""
        for code in text_to_bytes(text):
            self.write_data(code)

    def goto(self, row: int, col: int) -> None:
        """Move the cursor."""
        self.write_command(cursor_address(row, col))

    def clear(self) -> None:
        """Clear the display."""
        self.write_command(0x01)
        self._delay(5)

    def clear_row(self, row: int) -> None:
        """Blank row 1 or 2; other rows are ignored."""
        address = {1: ROW1, 2: ROW2}.get(row)
        if address is None:
            return
        self.write_command(address)
        self.write_string(" " * ROW_WIDTH)

    def initialise(self) -> None:
        """Switch the display to 4-bit mode and turn it on."""
        for command in _INIT_COMMANDS:
            self.write_command(command)
            self._delay(DELAY_TIME)
        self.write_command(ROW1)

    def print_on(self) -> None:
        """Show the start-up messages."""
        self.clear()
        self.goto(1, 0)
        self.write_string("Initializing...")
        self._delay(500)
        self.goto(2, 0)
        self.write_string("Calibrating...")
        self._delay(1000)
        self.clear()

    def show_weight(self, weight: float) -> None:
        """Display a weight in kilograms, redrawing only when it changed."""
        if weight == self.last_weight:
            return
        self.last_weight = weight

        self.clear_row(2)
        self.goto(1, 0)
        self.write_string("WEIGHT:")
        if weight == 0:
            self.goto(2, 7)
            self.write_data("0")
        elif weight >= 1:
            self.goto(2, 4)
            self.write_string(format_float(weight))
            self.goto(2, 10)
            self.write_string("kg")
        elif 0 < weight < 1:
            self.goto(2, 5)
            self.write_string(format_integer(weight * 1000))
            self.goto(2, 9)
            self.write_string("g")
        elif -1 < weight < 0:
            self.goto(2, 4)
            self.write_string(format_integer(weight * 1000.0))
            self.goto(2, 9)
            self.write_string("g")
        else:
            self.goto(2, 3)
            self.write_string(format_float(weight))
            self.goto(2, 10)
            self.write_string("kg")