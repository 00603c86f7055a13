"""Command ids, enumerations and wire records of the referee serial protocol.

All records are packed little-endian structures. Bit fields are laid out
from the least significant bit upwards, as the referee system sends them.
"""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from typing import ClassVar

SOF = 0xA5


class RefereeCmdId(IntEnum):
    GAME_STATUS_CMD = 0x0001
    GAME_RESULT_CMD = 0x0002
    GAME_ROBOT_HP_CMD = 0x0003
    DART_STATUS_CMD = 0x0004
    ICRA_ZONE_STATUS_CMD = 0x0005
    FIELD_EVENTS_CMD = 0x0101
    SUPPLY_PROJECTILE_ACTION_CMD = 0x0102
    REFEREE_WARNING_CMD = 0x0104
    DART_INFO_CMD = 0x0105
    ROBOT_STATUS_CMD = 0x0201
    POWER_HEAT_DATA_CMD = 0x0202
    ROBOT_POS_CMD = 0x0203
    BUFF_CMD = 0x0204
    AERIAL_ROBOT_ENERGY_CMD = 0x0205
    ROBOT_HURT_CMD = 0x0206
    SHOOT_DATA_CMD = 0x0207
    BULLET_REMAINING_CMD = 0x0208
    ROBOT_RFID_STATUS_CMD = 0x0209
    DART_CLIENT_CMD = 0x020A
    ROBOTS_POS_CMD = 0x020B
    RADAR_MARK_CMD = 0x020C
    SENTRY_INFO_CMD = 0x020D
    RADAR_INFO_CMD = 0x020E
    INTERACTIVE_DATA_CMD = 0x0301
    CUSTOM_CONTROLLER_CMD = 0x0302
    TARGET_POS_CMD = 0x0303
    ROBOT_COMMAND_CMD = 0x0304
    CLIENT_MAP_CMD = 0x0305
    CUSTOM_CLIENT_CMD = 0x0306
    MAP_SENTRY_CMD = 0x0307
    CUSTOM_TO_ROBOT_CMD = 0x0308
    ROBOT_TO_CUSTOM_CMD = 0x0309
    POWER_MANAGEMENT_SAMPLE_AND_STATUS_DATA_CMD = 0x8301
    POWER_MANAGEMENT_INITIALIZATION_EXCEPTION_CMD = 0x8302
    POWER_MANAGEMENT_SYSTEM_EXCEPTION_CMD = 0x8303
    POWER_MANAGEMENT_PROCESS_STACK_OVERFLOW_CMD = 0x8304
    POWER_MANAGEMENT_UNKNOWN_EXCEPTION_CMD = 0x8305


class DataCmdId(IntEnum):
    ROBOT_INTERACTIVE_CMD_MIN = 0x0200
    ROBOT_INTERACTIVE_CMD_MAX = 0x02FF
    CLIENT_GRAPH_DELETE_CMD = 0x0100
    CLIENT_GRAPH_SINGLE_CMD = 0x0101
    CLIENT_GRAPH_DOUBLE_CMD = 0x0102
    CLIENT_GRAPH_FIVE_CMD = 0x0103
    CLIENT_GRAPH_SEVEN_CMD = 0x0104
    CLIENT_CHARACTER_CMD = 0x0110
    SENTRY_CMD = 0x0120
    RADAR_CMD = 0x0121
    BULLET_NUM_SHARE_CMD = 0x0200
    SENTRY_TO_RADAR_CMD = 0x0201
    RADAR_TO_SENTRY_CMD = 0x0202


class RobotId(IntEnum):
    RED_HERO = 1
    RED_ENGINEER = 2
    RED_STANDARD_3 = 3
    RED_STANDARD_4 = 4
    RED_STANDARD_5 = 5
    RED_AERIAL = 6
    RED_SENTRY = 7
    RED_RADAR = 9
    RED_OUTPOST = 10
    RED_BASE = 11
    BLUE_HERO = 101
    BLUE_ENGINEER = 102
    BLUE_STANDARD_3 = 103
    BLUE_STANDARD_4 = 104
    BLUE_STANDARD_5 = 105
    BLUE_AERIAL = 106
    BLUE_SENTRY = 107
    BLUE_RADAR = 109
    BLUE_OUTPOST = 110
    BLUE_BASE = 111


class ClientId(IntEnum):
    RED_HERO_CLIENT = 0x0101
    RED_ENGINEER_CLIENT = 0x0102
    RED_STANDARD_3_CLIENT = 0x0103
    RED_STANDARD_4_CLIENT = 0x0104
    RED_STANDARD_5_CLIENT = 0x0105
    RED_AERIAL_CLIENT = 0x0106
    BLUE_HERO_CLIENT = 0x0165
    BLUE_ENGINEER_CLIENT = 0x0166
    BLUE_STANDARD_3_CLIENT = 0x0167
    BLUE_STANDARD_4_CLIENT = 0x0168
    BLUE_STANDARD_5_CLIENT = 0x0169
    BLUE_AERIAL_CLIENT = 0x016A
    REFEREE_SERVER = 0x8080


class GraphOperation(IntEnum):
    ADD = 1
    UPDATE = 2
    DELETE = 3


class GraphColor(IntEnum):
    MAIN_COLOR = 0
    YELLOW = 1
    GREEN = 2
    ORANGE = 3
    PURPLE = 4
    PINK = 5
    CYAN = 6
    BLACK = 7
    WHITE = 8


class GraphType(IntEnum):
    LINE = 0
    RECTANGLE = 1
    CIRCLE = 2
    ELLIPSE = 3
    ARC = 4
    FLOAT_NUM = 5
    INT_NUM = 6
    STRING = 7


def _checked(data: bytes, size: int, name: str) -> bytes:
    data = bytes(data)
    if len(data) < size:
        raise ValueError(f"{name} needs {size} bytes, got {len(data)}")
    return data[:size]


@dataclass
class FrameHeader:
    """Five-byte header that starts every referee frame."""

    sof: int = SOF
    data_length: int = 0
    seq: int = 0
    crc_8: int = 0

    SIZE: ClassVar[int] = 5
    _FORMAT: ClassVar[str] = "<BHBB"

    @classmethod
    def unpack(cls, data: bytes) -> "FrameHeader":
        return cls(*struct.unpack(cls._FORMAT, _checked(data, cls.SIZE, "FrameHeader")))

    def pack(self) -> bytes:
        return struct.pack(self._FORMAT, self.sof, self.data_length, self.seq, self.crc_8)


@dataclass
class GameStatus:
    game_type: int = 0
    game_progress: int = 0
    stage_remain_time: int = 0
    sync_time_stamp: int = 0

    IN_BATTLE: ClassVar[int] = 4
    SIZE: ClassVar[int] = 11

    @classmethod
    def unpack(cls, data: bytes) -> "GameStatus":
        flags, remain, stamp = struct.unpack("<BHQ", _checked(data, cls.SIZE, "GameStatus"))
        return cls(flags & 0x0F, flags >> 4, remain, stamp)


@dataclass
class GameResult:
    winner: int = 0

    SIZE: ClassVar[int] = 1

    @classmethod
    def unpack(cls, data: bytes) -> "GameResult":
        return cls(_checked(data, cls.SIZE, "GameResult")[0])


@dataclass
class RefereeWarning:
    level: int = 0
    foul_robot_id: int = 0
    count: int = 0

    SIZE: ClassVar[int] = 3

    @classmethod
    def unpack(cls, data: bytes) -> "RefereeWarning":
        return cls(*_checked(data, cls.SIZE, "RefereeWarning"))


@dataclass
class GameRobotStatus:
    robot_id: int = 0
    robot_level: int = 0
    remain_hp: int = 0
    max_hp: int = 0
    shooter_cooling_rate: int = 0
    shooter_cooling_limit: int = 0
    chassis_power_limit: int = 0
    mains_power_gimbal_output: int = 0
    mains_power_chassis_output: int = 0
    mains_power_shooter_output: int = 0

    SIZE: ClassVar[int] = 13

    @classmethod
    def unpack(cls, data: bytes) -> "GameRobotStatus":
        fields = struct.unpack("<BBHHHHHB", _checked(data, cls.SIZE, "GameRobotStatus"))
        *numbers, power = fields
        return cls(*numbers, power & 1, (power >> 1) & 1, (power >> 2) & 1)


@dataclass
class PowerHeatData:
    chassis_power_buffer: int = 0
    shooter_id_1_17_mm_cooling_heat: int = 0
    shooter_id_2_17_mm_cooling_heat: int = 0
    shooter_id_1_42_mm_cooling_heat: int = 0

    SIZE: ClassVar[int] = 16

    @classmethod
    def unpack(cls, data: bytes) -> "PowerHeatData":
        _, _, _, *values = struct.unpack("<HHfHHHH", _checked(data, cls.SIZE, "PowerHeatData"))
        return cls(*values)


@dataclass
class BulletAllowance:
    bullet_allowance_num_17_mm: int = 0
    bullet_allowance_num_42_mm: int = 0
    coin_remaining_num: int = 0

    SIZE: ClassVar[int] = 6

    @classmethod
    def unpack(cls, data: bytes) -> "BulletAllowance":
        return cls(*struct.unpack("<HHH", _checked(data, cls.SIZE, "BulletAllowance")))


# (field, width) for each of the three 32-bit words after the graphic id.
_GRAPH_WORDS: tuple[tuple[tuple[str, int], ...], ...] = (
    (
        ("operate_type", 3),
        ("graphic_type", 3),
        ("layer", 4),
        ("color", 4),
        ("start_angle", 9),
        ("end_angle", 9),
    ),
    (("width", 10), ("start_x", 11), ("start_y", 11)),
    (("radius", 10), ("end_x", 11), ("end_y", 11)),
)


@dataclass
class GraphConfig:
    """Fifteen-byte description of one client graphic.

    Values wider than their bit field are truncated on packing, as a bit
    field assignment would truncate them.
    """

    graphic_id: bytes = b"\x00\x00\x00"
    operate_type: int = 0
    graphic_type: int = 0
    layer: int = 0
    color: int = 0
    start_angle: int = 0
    end_angle: int = 0
    width: int = 0
    start_x: int = 0
    start_y: int = 0
    radius: int = 0
    end_x: int = 0
    end_y: int = 0

    SIZE: ClassVar[int] = 15

    def pack(self) -> bytes:
        graphic_id = bytes(self.graphic_id)
        if len(graphic_id) != 3:
            raise ValueError("graphic_id must be exactly 3 bytes")
        words = []
        for layout in _GRAPH_WORDS:
            word = 0
            shift = 0
            for name, width in layout:
                word |= (int(getattr(self, name)) & ((1 << width) - 1)) << shift
                shift += width
            words.append(word)
        return graphic_id + struct.pack("<III", *words)

    @classmethod
    def unpack(cls, data: bytes) -> "GraphConfig":
        data = _checked(data, cls.SIZE, "GraphConfig")
        values: dict[str, int] = {}
        for layout, word in zip(_GRAPH_WORDS, struct.unpack("<III", data[3:])):
            for name, width in layout:
                values[name] = word & ((1 << width) - 1)
                word >>= width
        return cls(graphic_id=data[:3], **values)