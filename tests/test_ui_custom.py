import struct

import pytest

from rmcontrol.protocol import DataCmdId, GraphColor, GraphConfig
from rmcontrol.ui import UIFramer, line_draw
from rmcontrol.ui_custom import (
    AUTOAIM_LOCKED,
    AUTOAIM_LOST,
    AUTOAIM_OFFLINE,
    CROSS_CENTER_X,
    CROSS_CENTER_Y,
    CustomUI,
    UIMode,
)
from rmcontrol.ui_text import state_str


def parse(frame):
    data_id, sender, receiver = struct.unpack_from("<HHH", frame, 7)
    return data_id, sender, receiver, frame[13:-2]


def graphs(payload):
    return [GraphConfig.unpack(payload[i:i + 15]) for i in range(0, len(payload), 15)]


@pytest.fixture
def setup():
    frames = []
    delays = []
    ui = CustomUI(UIFramer(frames.append), delays.append)
    return ui, frames, delays


def test_init_clears_and_draws_infantry_cross(setup):
    ui, frames, delays = setup
    ui.init()
    assert len(frames) == 2
    data_id, _, _, payload = parse(frames[0])
    assert data_id == DataCmdId.CLIENT_GRAPH_DELETE_CMD
    assert payload == bytes([2, 0])
    data_id, _, _, payload = parse(frames[1])
    assert data_id == DataCmdId.CLIENT_GRAPH_DOUBLE_CMD
    horizontal, vertical = graphs(payload)
    assert horizontal.start_y == horizontal.end_y == CROSS_CENTER_Y
    assert (horizontal.start_x + horizontal.end_x) // 2 == CROSS_CENTER_X
    assert horizontal.end_x - horizontal.start_x == ui.crosshair.cross_width
    assert vertical.start_x == vertical.end_x == CROSS_CENTER_X
    assert delays == [0.1, 0.1]


def test_hero_cross_has_seven_lines(setup):
    ui, frames, _ = setup
    ui.mode = UIMode.HERO
    ui.init()
    data_id, _, _, payload = parse(frames[-1])
    assert data_id == DataCmdId.CLIENT_GRAPH_SEVEN_CMD
    lines = graphs(payload)
    assert len(lines) == 7
    expected_id = line_draw("L3", 1, 0, 0, 0, 0, 0, 0, 0).pack()[:3]
    assert lines[2].graphic_id == expected_id
    assert lines[2].color == GraphColor.YELLOW
    for line in lines[2:]:
        assert line.start_y == line.end_y
        assert (line.start_x + line.end_x) // 2 == CROSS_CENTER_X


def test_update_ui_data_and_sync(setup):
    ui, _, _ = setup
    ui.update_ui_data(True, True, False, 55.7)
    ui.sync_parameter()
    assert ui.display.auto_aim_state == AUTOAIM_LOCKED
    assert ui.state.cap_percent == 55
    assert ui.state.fric_state == 1
    assert ui.state.spin_state == 0
    ui.update_ui_data(False, False, True, 0.0)
    assert ui.display.auto_aim_state == AUTOAIM_LOST


@pytest.mark.parametrize(
    "aim, color",
    [
        (AUTOAIM_LOST, GraphColor.GREEN),
        (AUTOAIM_LOCKED, GraphColor.PURPLE),
        (AUTOAIM_OFFLINE, GraphColor.BLACK),
    ],
)
def test_aim_box_color(setup, aim, color):
    ui, frames, _ = setup
    ui.display.auto_aim_state = aim
    ui.update_dynamic_parameter()
    assert len(frames) == 3
    assert parse(frames[0])[0] == DataCmdId.CLIENT_GRAPH_SINGLE_CMD
    assert parse(frames[1])[0] == DataCmdId.CLIENT_CHARACTER_CMD
    (box,) = graphs(parse(frames[2])[3])
    assert box.color == color
    assert box.start_y == 300 and box.end_y == 800


def test_offline_box_position(setup):
    ui, frames, _ = setup
    ui.display.auto_aim_state = AUTOAIM_OFFLINE
    ui.update_dynamic_parameter()
    (box,) = graphs(parse(frames[-1])[3])
    assert (box.start_x, box.end_x) == (700, 1300)


def test_cap_bar_full_length(setup):
    ui, frames, _ = setup
    ui.state.cap_percent = 100
    ui.update_dynamic_parameter()
    (bar,) = graphs(parse(frames[0])[3])
    assert bar.end_x - bar.start_x == ui.state.cap_display_length
    assert bar.start_y == bar.end_y


def test_cycle_sets_ids_and_sends_state_text(setup):
    ui, frames, delays = setup
    ui.init()
    frames.clear()
    delays.clear()
    ui.update_ui_data(True, False, True, 42.0)
    ui.cycle(3)
    assert len(frames) == 7
    for frame in frames:
        _, sender, receiver, _ = parse(frame)
        assert sender == 3
        assert receiver == 0x103
    strings = [parse(f)[3] for f in frames if parse(f)[0] == DataCmdId.CLIENT_CHARACTER_CMD]
    text = strings[-1][15:15 + 21]
    assert text == state_str(42, 1, 1).encode()
    assert delays == [0.1, 0.1, 0.1, 0.1, 0.1, 0.1, 0.15, 0.1, 0.001]


def test_read_robot_id(setup):
    ui, _, _ = setup
    ui.framer.robot_id = 101
    ui.read_robot_id()
    assert ui.framer.client_id == 0x0165
    ui.framer.robot_id = 3
    ui.framer.client_id = 0x0103
    ui.read_robot_id()
    assert ui.framer.client_id == 0x0103