import struct
import threading

from rmcontrol.crc import verify_crc16
from rmcontrol.protocol import DataCmdId, GraphColor
from rmcontrol.ui import DeleteOperation, StringData, UIFramer
from rmcontrol.ui_panel import PANEL_LAYER, UIPanel


def _data_id(frame):
    return struct.unpack_from("<H", frame, 7)[0]


def _panel():
    frames = []
    return UIPanel(UIFramer(frames.append)), frames


def test_reset_clears_state():
    panel, _ = _panel()
    panel.set_fric(1)
    panel.set_mode()
    panel.reset()
    assert not panel.fric_open
    assert not panel.ui_open
    assert panel.fric_name == StringData()


def test_open_sends_four_frames():
    panel, frames = _panel()
    panel.open()
    assert [_data_id(f) for f in frames] == [
        DataCmdId.CLIENT_GRAPH_DOUBLE_CMD,
        DataCmdId.CLIENT_GRAPH_SINGLE_CMD,
        DataCmdId.CLIENT_CHARACTER_CMD,
        DataCmdId.CLIENT_CHARACTER_CMD,
    ]
    assert all(verify_crc16(f) for f in frames)
    assert panel.ui_mode
    assert frames[2][13:-2] == panel.fric_name.pack()
    assert panel.fric_name.text == b"SPIN"
    assert panel.spin_name.text == b""
    assert panel.accuracy_graph.radius == 20


def test_indicator_colors_follow_flags():
    panel, _ = _panel()
    panel.open()
    assert panel.fric_graph.color == GraphColor.MAIN_COLOR
    panel.set_fric(0)
    panel.open()
    assert panel.fric_graph.color == GraphColor.GREEN
    assert panel.spin_graph.color == GraphColor.MAIN_COLOR


def test_set_spin_sets_mode_only():
    panel, _ = _panel()
    panel.set_spin(1)
    assert panel.spin_mode
    assert not panel.spin_open


def test_close_deletes_layer():
    panel, frames = _panel()
    panel.open()
    frames.clear()
    panel.close()
    assert not panel.ui_mode
    assert len(frames) == 1
    assert _data_id(frames[0]) == DataCmdId.CLIENT_GRAPH_DELETE_CMD
    assert frames[0][13:-2] == bytes([DeleteOperation.ALL, PANEL_LAYER])


def test_set_control_redraws_then_clears():
    panel, frames = _panel()
    panel.set_control()
    assert len(frames) == 5
    assert _data_id(frames[-1]) == DataCmdId.CLIENT_GRAPH_DELETE_CMD
    assert panel.fric_graph.color == GraphColor.CYAN
    assert not panel.fric_mode
    assert [f[3] for f in frames] == list(range(5))


def test_set_control_with_friction_open():
    panel, _ = _panel()
    panel.set_fric(1)
    panel.set_control()
    assert panel.fric_mode
    assert panel.fric_graph.color == GraphColor.GREEN


def test_run_stops_after_one_cycle():
    stop = threading.Event()
    frames = []

    def sink(frame):
        frames.append(frame)
        if len(frames) == 5:
            stop.set()

    panel = UIPanel(UIFramer(sink))
    panel.run(stop, period=0.0)
    assert len(frames) == 5
    assert panel.ui_open