"""CRC8 and CRC16 checksums used by the referee serial protocol.

Both are reflected, table-driven checksums: CRC8 uses polynomial 0x31
(reflected 0x8C) and CRC16 uses polynomial 0x1021 (reflected 0x8408).
"""

from __future__ import annotations

from collections.abc import Iterable

CRC8_INIT = 0xFF
CRC16_INIT = 0xFFFF


def _reflected_table(poly: int) -> tuple[int, ...]:
    table = []
    for byte in range(256):
        crc = byte
        for _ in range(8):
            crc = (crc >> 1) ^ poly if crc & 1 else crc >> 1
        table.append(crc)
    return tuple(table)


_CRC8_TABLE = _reflected_table(0x8C)
_CRC16_TABLE = _reflected_table(0x8408)


def crc8(data: Iterable[int], init: int = CRC8_INIT) -> int:
    """Return the CRC8 of ``data`` starting from ``init``."""
    crc = init & 0xFF
    for byte in bytes(data):
        crc = _CRC8_TABLE[crc ^ byte]
    return crc


def verify_crc8(data: bytes) -> bool:
    """Check that the last byte of ``data`` is the CRC8 of the bytes before it."""
    data = bytes(data)
    if len(data) <= 2:
        return False
    return crc8(data[:-1]) == data[-1]


def append_crc8(data: bytes) -> bytes:
    """Return ``data`` with its last byte replaced by the CRC8 of the rest."""
    data = bytes(data)
    if len(data) <= 2:
        raise ValueError("message too short to carry a CRC8")
    return data[:-1] + bytes([crc8(data[:-1])])


def crc16(data: Iterable[int], init: int = CRC16_INIT) -> int:
    """Return the CRC16 of ``data`` starting from ``init``."""
    crc = init & 0xFFFF
    for byte in bytes(data):
        crc = (crc >> 8) ^ _CRC16_TABLE[(crc ^ byte) & 0xFF]
    return crc


def verify_crc16(data: bytes) -> bool:
    """Check that the last two bytes of ``data`` are its little-endian CRC16."""
    data = bytes(data)
    if len(data) <= 2:
        return False
    return crc16(data[:-2]).to_bytes(2, "little") == data[-2:]


def append_crc16(data: bytes) -> bytes:
    """Return ``data`` with its last two bytes replaced by the CRC16 of the rest."""
    data = bytes(data)
    if len(data) <= 2:
        raise ValueError("message too short to carry a CRC16")
    return data[:-2] + crc16(data[:-2]).to_bytes(2, "little")