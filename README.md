# loadscale

`loadscale` holds the hardware-free building blocks of a small digital
weighing scale. It covers the framed serial protocol, decoding of HX711
amplifier readings, Kalman smoothing, and the text and byte sequences for a
16x2 character display. Every piece of hardware I/O goes through callables
that you pass in, so you can use the package against real devices, against a
simulation, or in tests.

## Modules

### `loadscale.convert`

- `float_to_bytes(value)` and `bytes_to_float(data)` convert between a float
  and its 4-byte little-endian 32-bit form.
- `bytes_to_uint16(low, high)` joins two bytes into an unsigned 16-bit value.
  It raises `ValueError` for values outside 0–255.
- `text_to_bytes(text)` returns the bytes of a string up to its first NUL.

### `loadscale.message`

A frame is laid out as:

```
start 0xAA | type | sensor | length | weight (4 bytes, answers only) | CRC-16 (low byte first)
```

- `MessageType` lists the message types. The odd values are requests:
  `CALIB_ASK`, `HOLD_ASK`, `UNHOLD_ASK` and `ASK`. The even values are the
  answers that carry a weight: `CALIB_ANSWER`, `HOLD_ANSWER`, `UNHOLD_ANSWER`
  and `ANSWER`.
  - `answer()` gives the reply type for a request.
  - `carries_weight()` tells whether a type carries a weight.
  - `length` is the value of the length field for that type.
- `Frame` is a frozen dataclass. `Frame.weight()` decodes the stored weight and
  raises `FrameError` for request frames.
- `checksum(data)` is a CRC-16 with reflected polynomial 0xA001 and initial
  value 0xFFFF.
- `create_frame(message_type, sensor, weight)` builds a frame.
- `encode_frame(frame)` serialises a frame and appends its checksum.
- `decode_frame(data)` parses a frame. It keeps the stored checksum in
  `Frame.check` but does not verify it.
- Malformed input raises `FrameError`, a subclass of `ValueError`.
- The constant `WEIGHT_SENSOR` is `0x11`: a load cell, sensor 1.

### `loadscale.kalman`

- `ScalarKalmanFilter(q=0.022, r=0.617, estimate=0.0, error=0.0)` is a
  one-state filter. `update(measurement)` returns the new estimate.
- `KalmanFilter2D` tracks value and rate from a scalar measurement. By default
  it uses a constant-velocity model sampled every 0.25 ms. `update(measurement)`
  returns the value estimate.

### `loadscale.lcd`

These functions have no side effects:

- `format_integer(number)` returns the text the display shows for a number
  truncated to an integer. Zero gives an empty string.
- `format_float(number)` returns the text for a number rounded to three
  decimals.
- `cursor_address(row, col)` returns the set-address command for a 1-based row
  and a 0-based column.
- `nibble_bytes(value, is_data)` returns the four expander bytes that clock one
  command or character into the display in 4-bit mode.

`Lcd(write_byte, delay=None)` drives the display. It sends each expander byte
to `write_byte` and each pause in milliseconds to `delay`. Its methods are:

- `write_command`, `write_data`, `write_string`
- `goto`, `clear`, `clear_row`
- `initialise`
- `print_on`, which shows the start-up messages
- `show_weight(weight)`, which shows kilograms, or grams below 1 kg in
  magnitude. It redraws only when the weight has changed.

### `loadscale.uartline`

- `LineReceiver(capacity=100)` collects bytes into newline-terminated lines
  and drops the byte just before the newline, which is normally `\r`.
  - `feed(byte)` returns the completed line, if the byte completes one.
  - `take_line()` returns the last line once.
  - A line longer than the capacity raises `ValueError`.
- `number_to_string(number)` returns the decimal text of a signed 32-bit
  integer.
- `parse_kalman_parameters(lines)` reads the first three non-zero numbers from
  successive lines. It returns them as a `KalmanParameters` tuple of
  `measurement_error`, `estimate_error` and `process_noise`.

### `loadscale.loadcell`

- `gain_pulses(gain)` returns the extra clock pulses that select gain 128, 64
  or 32.
- `decode_signed_reading(high, middle, low)` turns the three shifted-out bytes
  into a signed reading.
- `LoadCell(shift_in, clock_pulse=None, is_ready=None, gain=128, scale=1.0, offset=0)`
  wraps one HX711 channel. It takes one reading when it is created. Its methods
  are:
  - `read()`
  - `read_average(times)`
  - `get_value(times)`, which removes the tare offset
  - `get_units(times)`, which also divides by the scale factor
  - `tare(times)`

## Example

```python
from loadscale.message import MessageType, WEIGHT_SENSOR, checksum, create_frame, decode_frame, encode_frame

frame = create_frame(MessageType.ANSWER, WEIGHT_SENSOR, 1.25)
wire = encode_frame(frame)

decoded = decode_frame(wire)
assert decoded.check == checksum(wire[:-2])
print(decoded.weight())  # 1.25
```

## What it does not do

- There is no byte-stream receiver that assembles frames and checks them.
  `decode_frame` parses a complete frame that you already have, and you must
  verify its checksum yourself with `checksum`.
- There is no scale state: no calibration or hold mode, no button debouncing,
  and no automatic answers to requests.
- There is no command-line program. The package is a library only.

## Installing and testing

```
pip install .
pip install .[test]
pytest
```