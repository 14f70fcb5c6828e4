import dataclasses

import pytest

from loadscale.convert import float_to_bytes
from loadscale.message import (
    START_BYTE,
    WEIGHT_SENSOR,
    Frame,
    FrameError,
    MessageType,
    checksum,
    create_frame,
    decode_frame,
    encode_frame,
)


def test_checksum_standard_check_value():
    assert checksum(b"123456789") == 0x4B37


def test_checksum_of_nothing_is_initial_value():
    assert checksum(b"") == 0xFFFF


def test_answer_pairs():
    assert MessageType.CALIB_ASK.answer() is MessageType.CALIB_ANSWER
    assert MessageType.HOLD_ASK.answer() is MessageType.HOLD_ANSWER
    assert MessageType.UNHOLD_ASK.answer() is MessageType.UNHOLD_ANSWER
    assert MessageType.ASK.answer() is MessageType.ANSWER


def test_answer_of_answer_fails():
    with pytest.raises(FrameError):
        MessageType.ANSWER.answer()


@pytest.mark.parametrize(
    "message_type, expected",
    [
        (MessageType.CALIB_ASK, False),
        (MessageType.CALIB_ANSWER, True),
        (MessageType.HOLD_ASK, False),
        (MessageType.HOLD_ANSWER, True),
        (MessageType.UNHOLD_ASK, False),
        (MessageType.UNHOLD_ANSWER, True),
        (MessageType.ASK, False),
        (MessageType.ANSWER, True),
    ],
)
def test_carries_weight(message_type, expected):
    result = message_type.carries_weight()
    assert result == expected


def test_create_answer_frame():
    frame = create_frame(MessageType.ANSWER, WEIGHT_SENSOR, 1.5)
    assert frame.length == 6
    assert frame.data == float_to_bytes(1.5)
    assert frame.weight() == 1.5


def test_create_ask_frame_has_no_weight():
    frame = create_frame(MessageType.ASK, WEIGHT_SENSOR, 1.5)
    assert frame.length == 2
    with pytest.raises(FrameError):
        frame.weight()


def test_create_unknown_type():
    with pytest.raises(FrameError):
        create_frame(9, WEIGHT_SENSOR, 0.0)


def test_encode_answer_layout():
    wire = encode_frame(create_frame(MessageType.ANSWER, WEIGHT_SENSOR, 1.5))
    assert len(wire) == 10
    assert wire[:4] == bytes([START_BYTE, MessageType.ANSWER, WEIGHT_SENSOR, 6])
    assert wire[4:8] == float_to_bytes(1.5)
    crc = checksum(wire[:8])
    assert wire[8] == crc & 0xFF
    assert wire[9] == crc >> 8


def test_encode_ask_layout():
    wire = encode_frame(create_frame(MessageType.CALIB_ASK, WEIGHT_SENSOR))
    assert len(wire) == 6
    assert wire[:4] == bytes([START_BYTE, MessageType.CALIB_ASK, WEIGHT_SENSOR, 2])
    crc = checksum(wire[:4])
    assert wire[4:] == bytes([crc & 0xFF, crc >> 8])


def test_encode_rejects_bad_start():
    frame = dataclasses.replace(create_frame(MessageType.ASK, WEIGHT_SENSOR), start=0)
    with pytest.raises(FrameError):
        encode_frame(frame)


@pytest.mark.parametrize("weight", [0.0, 1.5, -0.25, 12.75])
def test_answer_round_trip(weight):
    wire = encode_frame(create_frame(MessageType.HOLD_ANSWER, WEIGHT_SENSOR, weight))
    frame = decode_frame(wire)
    assert frame.message_type is MessageType.HOLD_ANSWER
    assert frame.sensor == WEIGHT_SENSOR
    assert frame.length == 6
    assert frame.weight() == weight
    assert frame.check == checksum(wire[:8])


def test_ask_round_trip():
    wire = encode_frame(create_frame(MessageType.UNHOLD_ASK, WEIGHT_SENSOR))
    frame = decode_frame(wire)
    assert frame.message_type is MessageType.UNHOLD_ASK
    assert frame.length == 2
    assert frame.check == checksum(wire[:4])


def test_decode_then_encode_is_identity():
    wire = encode_frame(create_frame(MessageType.CALIB_ANSWER, WEIGHT_SENSOR, 2.5))
    assert encode_frame(decode_frame(wire)) == wire


def test_decode_bad_start():
    with pytest.raises(FrameError):
        decode_frame(b"\x00\x07\x11\x02\x00\x00")


def test_decode_truncated():
    wire = encode_frame(create_frame(MessageType.ANSWER, WEIGHT_SENSOR, 1.0))
    with pytest.raises(FrameError):
        decode_frame(wire[:-1])


def test_decode_unknown_type():
    with pytest.raises(FrameError):
        decode_frame(bytes([START_BYTE, 0x20, WEIGHT_SENSOR, 2, 0, 0]))


def test_frame_is_immutable():
    frame = create_frame(MessageType.ASK, WEIGHT_SENSOR)
    with pytest.raises(dataclasses.FrozenInstanceError):
        frame.sensor = 0
    assert frame.sensor == WEIGHT_SENSOR
    assert frame == Frame(MessageType.ASK, WEIGHT_SENSOR, 2)