"""Client graphics records and the framing that sends them to the referee.

Every frame is a seven-byte header (start byte, data length, sequence
number, CRC8, command id), a six-byte interaction header (content id,
sender, receiver), the content and a little-endian CRC16 trailer.
"""

from __future__ import annotations

import struct
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import ClassVar, Union

from rmcontrol.crc import crc8, crc16
from rmcontrol.protocol import (
    SOF,
    ClientId,
    DataCmdId,
    GraphConfig,
    GraphType,
    RefereeCmdId,
    RobotId,
)

STRING_CAPACITY = 30

_HEADER = struct.Struct("<BHB")
_INTERACTION = struct.Struct("<HHH")

_GRAPH_DATA_IDS = {
    1: DataCmdId.CLIENT_GRAPH_SINGLE_CMD,
    2: DataCmdId.CLIENT_GRAPH_DOUBLE_CMD,
    5: DataCmdId.CLIENT_GRAPH_FIVE_CMD,
    7: DataCmdId.CLIENT_GRAPH_SEVEN_CMD,
}


class DeleteOperation(IntEnum):
    NO_OPERATE = 0
    LAYER = 1
    ALL = 2


def _graphic_id(name: str) -> bytes:
    """Three-byte graphic id: the name's first characters in reverse order."""
    raw = name.encode("utf-8")[:3].split(b"\0", 1)[0]
    return bytes(reversed(raw)).rjust(3, b"\0")


@dataclass
class GraphData:
    """One shape drawn on the operator client."""

    name: str = ""
    operate: int = 0
    graphic_type: int = GraphType.LINE
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

    SIZE: ClassVar[int] = GraphConfig.SIZE

    def pack(self) -> bytes:
        return GraphConfig(
            graphic_id=_graphic_id(self.name),
            operate_type=self.operate,
            graphic_type=self.graphic_type,
            layer=self.layer,
            color=self.color,
            start_angle=self.start_angle,
            end_angle=self.end_angle,
            width=self.width,
            start_x=self.start_x,
            start_y=self.start_y,
            radius=self.radius,
            end_x=self.end_x,
            end_y=self.end_y,
        ).pack()


@dataclass
class FloatData:
    """A floating-point number drawn on the operator client."""

    name: str = ""
    operate: int = 0
    layer: int = 0
    color: int = 0
    size: int = 0
    digit: int = 0
    width: int = 0
    start_x: int = 0
    start_y: int = 0
    value: float = 0.0

    graphic_type: ClassVar[int] = GraphType.FLOAT_NUM
    SIZE: ClassVar[int] = GraphConfig.SIZE

    def pack(self) -> bytes:
        head = GraphConfig(
            graphic_id=_graphic_id(self.name),
            operate_type=self.operate,
            graphic_type=self.graphic_type,
            layer=self.layer,
            color=self.color,
            start_angle=self.size,
            end_angle=self.digit,
            width=self.width,
            start_x=self.start_x,
            start_y=self.start_y,
        ).pack()[:11]
        return head + struct.pack("<f", self.value)


@dataclass
class StringData:
    """A text graphic: its shape record followed by up to 30 bytes of text."""

    graph: GraphData = field(default_factory=GraphData)
    text: bytes = b""

    SIZE: ClassVar[int] = GraphConfig.SIZE + STRING_CAPACITY

    def pack(self) -> bytes:
        text = bytes(self.text)
        if len(text) > STRING_CAPACITY:
            raise ValueError(f"text holds at most {STRING_CAPACITY} bytes, got {len(text)}")
        return self.graph.pack() + text.ljust(STRING_CAPACITY, b"\0")


def line_draw(name, operate, layer, color, width, start_x, start_y, end_x, end_y) -> GraphData:
    """Return a straight line from the start to the end point."""
    return GraphData(
        name, operate, GraphType.LINE, layer, color,
        width=width, start_x=start_x, start_y=start_y, end_x=end_x, end_y=end_y,
    )


def rectangle_draw(
    name, operate, layer, color, width, start_x, start_y, end_x, end_y
) -> GraphData:
    """Return a rectangle given two opposite corners."""
    return GraphData(
        name, operate, GraphType.RECTANGLE, layer, color,
        width=width, start_x=start_x, start_y=start_y, end_x=end_x, end_y=end_y,
    )


def circle_draw(name, operate, layer, color, width, start_x, start_y, radius) -> GraphData:
    """Return a full circle around the start point."""
    return GraphData(
        name, operate, GraphType.CIRCLE, layer, color,
        width=width, start_x=start_x, start_y=start_y, radius=radius,
    )


def arc_draw(
    name, operate, layer, color, start_angle, end_angle, width, start_x, start_y,
    x_length, y_length,
) -> GraphData:
    """Return an elliptic arc centred on the start point with the given half axes."""
    return GraphData(
        name, operate, GraphType.ARC, layer, color,
        start_angle=start_angle, end_angle=end_angle, width=width,
        start_x=start_x, start_y=start_y, end_x=x_length, end_y=y_length,
    )


def float_draw(
    name, operate, layer, color, size, digit, width, start_x, start_y, value
) -> FloatData:
    """Return a number shown with ``digit`` decimals in font ``size``."""
    return FloatData(name, operate, layer, color, size, digit, width, start_x, start_y, value)


def string_draw(
    name, operate, layer, color, size, digit, width, start_x, start_y, text
) -> StringData:
    """Return a text graphic holding at most ``digit`` bytes of ``text``."""
    graph = GraphData(
        name, operate, GraphType.STRING, layer, color,
        start_angle=size, end_angle=digit, width=width, start_x=start_x, start_y=start_y,
    )
    limit = max(0, min(int(digit), STRING_CAPACITY))
    return StringData(graph, text.encode("utf-8")[:limit])


Drawable = Union[GraphData, FloatData]


class UIFramer:
    """Builds client-UI frames and passes each finished frame to ``sink``."""

    def __init__(
        self,
        sink: Callable[[bytes], object],
        robot_id: int = RobotId.RED_HERO,
        client_id: int = ClientId.RED_HERO_CLIENT,
    ) -> None:
        self.sink = sink
        self.robot_id = robot_id
        self.client_id = client_id
        self.seq = 0

    def _send(self, data_id: int, payload: bytes) -> bytes:
        head = _HEADER.pack(SOF, _INTERACTION.size + len(payload), self.seq)
        head += bytes([crc8(head)]) + struct.pack("<H", RefereeCmdId.INTERACTIVE_DATA_CMD)
        frame = head + _INTERACTION.pack(
            data_id, self.robot_id & 0xFFFF, self.client_id & 0xFFFF
        ) + payload
        frame += struct.pack("<H", crc16(frame))
        self.sink(frame)
        self.seq = (self.seq + 1) & 0xFF
        return frame

    def delete(self, operate: int, layer: int) -> bytes:
        """Delete one layer or all graphics; return the frame sent."""
        return self._send(
            DataCmdId.CLIENT_GRAPH_DELETE_CMD, bytes([int(operate) & 0xFF, int(layer) & 0xFF])
        )

    def refresh(self, *args: Drawable) -> bytes:
        """Send 1, 2, 5 or 7 graphics in one frame; return the frame sent."""
        data_id = _GRAPH_DATA_IDS.get(len(args))
        if data_id is None:
            raise ValueError(f"can send 1, 2, 5 or 7 graphics at once, not {len(args)}")
        return self._send(data_id, b"".join(graph.pack() for graph in args))

    def refresh_string(self, string_data: StringData) -> bytes:
        """Send one text graphic; return the frame sent."""
        return self._send(DataCmdId.CLIENT_CHARACTER_CMD, string_data.pack())