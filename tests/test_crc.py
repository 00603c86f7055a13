import pytest

from rmcontrol.crc import (
    append_crc8,
    append_crc16,
    crc8,
    crc16,
    verify_crc8,
    verify_crc16,
)


def test_crc8_table_entry():
    assert crc8(bytes([1]), 0) == 0x5E


def test_crc8_check_value():
    assert crc8(b"123456789", 0) == 0xA1


def test_crc16_check_value():
    assert crc16(b"123456789") == 0x6F91


def test_empty_data_returns_init():
    assert crc8(b"") == 0xFF
    assert crc16(b"") == 0xFFFF
    assert crc16(b"", 0x1234) == 0x1234


def test_crc16_chaining_matches_whole():
    data = b"\xa5\x08\x00\x01\x02\x03\x04\x05"
    partial = crc16(data[:3])
    assert crc16(data[3:], partial) == crc16(data)


@pytest.mark.parametrize("payload", [b"\xa5\x10\x00\x07\x00", b"abcdefgh", bytes(range(40))])
def test_append_then_verify_crc8(payload):
    framed = append_crc8(payload)
    assert len(framed) == len(payload)
    assert framed[:-1] == payload[:-1]
    assert verify_crc8(framed)


@pytest.mark.parametrize("payload", [b"\xa5\x10\x00\x07\x00\x00\x00", bytes(range(64))])
def test_append_then_verify_crc16(payload):
    framed = append_crc16(payload)
    assert framed[:-2] == payload[:-2]
    assert verify_crc16(framed)


def test_corruption_detected():
    framed8 = bytearray(append_crc8(b"\xa5\x08\x00\x01\x00"))
    framed8[1] ^= 0x01
    assert verify_crc8(framed8) is False
    framed16 = bytearray(append_crc16(b"hello world\x00\x00"))
    framed16[0] ^= 0x80
    assert verify_crc16(framed16) is False


def test_short_messages_do_not_verify():
    assert verify_crc8(b"\x00\x00") is False
    assert verify_crc16(b"\xff\xff") is False


def test_append_short_raises():
    with pytest.raises(ValueError):
        append_crc8(b"\x01\x02")
    with pytest.raises(ValueError):
        append_crc16(b"\x01")