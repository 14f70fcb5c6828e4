"""Frames exchanged with the scale over the serial link.

Frame layout: start (1) | type (1) | sensor (1) | length (1) | data (0 or 4) | CRC (2).
The length field counts the data plus the checksum.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from .convert import bytes_to_float, bytes_to_uint16, float_to_bytes

START_BYTE = 0xAA
DEFAULT_LENGTH = 4
WEIGHT_DATA_LENGTH = 4
CHECKSUM_LENGTH = 2

LOADCELL = 0x10
SENSOR_1, SENSOR_2, SENSOR_3, SENSOR_4, SENSOR_5 = range(1, 6)
WEIGHT_SENSOR = LOADCELL | SENSOR_1

_ASK_LENGTH = CHECKSUM_LENGTH
_ANSWER_LENGTH = WEIGHT_DATA_LENGTH + CHECKSUM_LENGTH


class FrameError(ValueError):
    """Raised when a frame cannot be built or parsed."""


class MessageType(IntEnum):
    """Kinds of message; odd values are requests, even values carry a weight."""

    CALIB_ASK = 1
    CALIB_ANSWER = 2
    HOLD_ASK = 3
    HOLD_ANSWER = 4
    UNHOLD_ASK = 5
    UNHOLD_ANSWER = 6
    ASK = 7
    ANSWER = 8

    def answer(self) -> MessageType:
        """Return the message type that replies to this request."""
        if self.carries_weight():
            raise FrameError(f"{self.name} is not a request")
        return MessageType(self.value + 1)

    def carries_weight(self) -> bool:
        """True for message types whose frames hold a weight."""
        return self.value % 2 == 0

    @property
    def length(self) -> int:
        """Value of the length field for frames of this type."""
        return _ANSWER_LENGTH if self.carries_weight() else _ASK_LENGTH


@dataclass(frozen=True)
class Frame:
    """One message frame."""

    message_type: MessageType
    sensor: int
    length: int
    data: bytes = bytes(WEIGHT_DATA_LENGTH)
    check: int = 0
    start: int = START_BYTE

    def weight(self) -> float:
        """Return the weight held in the frame's data."""
        if not self.message_type.carries_weight():
            raise FrameError(f"{self.message_type.name} frames hold no weight")
        return bytes_to_float(self.data)


def checksum(data: bytes) -> int:
    """CRC-16 (reflected polynomial 0xA001, initial value 0xFFFF) of ``data``."""
    crc = 0xFFFF
    for byte in bytes(data):
        crc ^= byte
        for _ in range(8):
            crc = (crc >> 1) ^ 0xA001 if crc & 1 else crc >> 1
    return crc


def _message_type(value: int) -> MessageType:
    try:
        return MessageType(value)
    except ValueError:
        raise FrameError(f"unknown message type {value!r}") from None


def create_frame(message_type: int, sensor: int, weight: float = 0.0) -> Frame:
    """Build a frame of the given type; the weight is stored only if the type carries one."""
    kind = _message_type(message_type)
    data = float_to_bytes(weight) if kind.length == _ANSWER_LENGTH else bytes(WEIGHT_DATA_LENGTH)
    return Frame(message_type=kind, sensor=sensor, length=kind.length, data=data)


def encode_frame(frame: Frame) -> bytes:
    """Serialise a frame and append its checksum, low byte first."""
    if frame.start != START_BYTE:
        raise FrameError(f"frame does not start with 0x{START_BYTE:02X}")
    body = bytes([frame.start, int(frame.message_type), frame.sensor, frame.length])
    if frame.length != _ASK_LENGTH:
        body += bytes(frame.data[:WEIGHT_DATA_LENGTH]).ljust(WEIGHT_DATA_LENGTH, b"\0")
    crc = checksum(body)
    return body + bytes([crc & 0xFF, (crc >> 8) & 0xFF])


def decode_frame(data: bytes) -> Frame:
    """Parse a frame from ``data``; the stored checksum is kept but not verified."""
    raw = bytes(data)
    if not raw or raw[0] != START_BYTE:
        raise FrameError(f"frame does not start with 0x{START_BYTE:02X}")
    if len(raw) < DEFAULT_LENGTH:
        raise FrameError("frame header is incomplete")
    start, type_byte, sensor, length = raw[:DEFAULT_LENGTH]
    kind = _message_type(type_byte)
    index = DEFAULT_LENGTH
    payload = bytes(WEIGHT_DATA_LENGTH)
    if kind.carries_weight():
        payload = raw[index : index + WEIGHT_DATA_LENGTH]
        index += WEIGHT_DATA_LENGTH
    if len(raw) < index + CHECKSUM_LENGTH:
        raise FrameError("frame is truncated")
    check = bytes_to_uint16(raw[index], raw[index + 1])
    return Frame(
        message_type=kind,
        sensor=sensor,
        length=length,
        data=payload,
        check=check,
        start=start,
    )