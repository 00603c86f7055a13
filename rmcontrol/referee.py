"""Receiver for the referee system's serial stream.

Incoming bytes are shifted into a fixed 256-byte window. Each pass scans
the front half of the window for frames, checks both CRCs and stores the
records the robot uses in a ``RefereeInfo``.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from rmcontrol.crc import verify_crc8, verify_crc16
from rmcontrol.protocol import (
    SOF,
    BulletAllowance,
    FrameHeader,
    GameResult,
    GameRobotStatus,
    GameStatus,
    PowerHeatData,
    RefereeCmdId,
    RefereeWarning,
)

FRAME_LENGTH = 128
HEADER_LENGTH = FrameHeader.SIZE
CMD_ID_LENGTH = 2
TAIL_LENGTH = 2
UNPACK_BUFFER_LENGTH = 256
# Frames announcing more payload than this are treated as corrupt.
MAX_DATA_LENGTH = 256

_PAYLOAD_OFFSET = HEADER_LENGTH + CMD_ID_LENGTH


@dataclass
class RefereeInfo:
    """The referee records the robot keeps, as last received."""

    game_status_data: GameStatus = field(default_factory=GameStatus)
    game_result_ref: GameResult = field(default_factory=GameResult)
    referee_warning_ref: RefereeWarning = field(default_factory=RefereeWarning)
    game_robot_status_data: GameRobotStatus = field(default_factory=GameRobotStatus)
    power_heat_data: PowerHeatData = field(default_factory=PowerHeatData)
    bullet_allowance_data: BulletAllowance = field(default_factory=BulletAllowance)


_HANDLERS = {
    RefereeCmdId.GAME_STATUS_CMD: ("game_status_data", GameStatus),
    RefereeCmdId.GAME_RESULT_CMD: ("game_result_ref", GameResult),
    RefereeCmdId.REFEREE_WARNING_CMD: ("referee_warning_ref", RefereeWarning),
    RefereeCmdId.ROBOT_STATUS_CMD: ("game_robot_status_data", GameRobotStatus),
    RefereeCmdId.POWER_HEAT_DATA_CMD: ("power_heat_data", PowerHeatData),
    RefereeCmdId.BULLET_REMAINING_CMD: ("bullet_allowance_data", BulletAllowance),
}


class RefereeReceiver:
    """Decodes referee frames from raw serial bytes into ``info``."""

    def __init__(self, info: RefereeInfo | None = None) -> None:
        self.info = info if info is not None else RefereeInfo()
        self.online = False
        self._buffer = bytes(UNPACK_BUFFER_LENGTH)

    def feed(self, data: bytes) -> list[int]:
        """Take newly read bytes and decode the frames in the window.

        Returns the command ids of the frames that passed both checks in
        this pass, in the order they were found. Reads of a full window or
        more do not enter the window, though the window is still scanned.
        """
        data = bytes(data)
        if not data:
            return []
        if len(data) < UNPACK_BUFFER_LENGTH:
            self._buffer = (self._buffer + data)[-UNPACK_BUFFER_LENGTH:]

        window = self._buffer
        found: list[int] = []
        index = 0
        while index < UNPACK_BUFFER_LENGTH - FRAME_LENGTH:
            if window[index] == SOF:
                consumed = self.unpack(window[index:])
                if consumed is not None:
                    if consumed:
                        found.append(
                            int.from_bytes(window[index + 5 : index + 7], "little")
                        )
                    index += consumed
            index += 1
        return found

    def unpack(self, frame: bytes) -> int | None:
        """Decode the frame at the start of ``frame``.

        Returns the frame's length when it is valid, 0 when its header is
        valid but announces an implausible length, and None otherwise.
        """
        frame = bytes(frame)
        if len(frame) < HEADER_LENGTH or not verify_crc8(frame[:HEADER_LENGTH]):
            return None
        header = FrameHeader.unpack(frame)
        if header.data_length > MAX_DATA_LENGTH:
            return 0

        length = header.data_length + HEADER_LENGTH + CMD_ID_LENGTH + TAIL_LENGTH
        if len(frame) < length or not verify_crc16(frame[:length]):
            return None

        cmd_id = int.from_bytes(frame[HEADER_LENGTH:_PAYLOAD_OFFSET], "little")
        handler = _HANDLERS.get(cmd_id)
        if handler is not None:
            name, record = handler
            body = frame[_PAYLOAD_OFFSET : _PAYLOAD_OFFSET + record.SIZE]
            setattr(self.info, name, record.unpack(body.ljust(record.SIZE, b"\0")))
        self.online = True
        return length