"""Custom operator HUD: crosshair, capacitor bar, status text and aim box."""

from __future__ import annotations

import threading
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum

from rmcontrol.protocol import ClientId, GraphColor, GraphOperation, RobotId
from rmcontrol.ui import (
    DeleteOperation,
    GraphData,
    StringData,
    UIFramer,
    line_draw,
    rectangle_draw,
    string_draw,
)
from rmcontrol.ui_text import state_str

AUTOAIM_LOST = 0
AUTOAIM_LOCKED = 1
AUTOAIM_OFFLINE = 2

CROSS_CENTER_X = 960
CROSS_CENTER_Y = 540

STATE_TEXT_LENGTH = 21
CLIENT_ID_OFFSET = 0x100


class UIMode(IntEnum):
    INFANTRY = 1
    HERO = 2


@dataclass
class DisplayData:
    """Values the HUD shows, fed from the rest of the robot."""

    distance: float = 0.0
    shoot_speed: float = 0.0
    super_cap_percent: float = 0.0
    spin_state: int = 0
    fric_state: int = 0
    auto_aim_state: int = AUTOAIM_LOST


@dataclass
class CrosshairData:
    """Geometry and colours of the crosshair and its ballistic rulers."""

    center: list[int] = field(default_factory=lambda: [CROSS_CENTER_X, CROSS_CENTER_Y])
    ballistic_ruler: list[int] = field(default_factory=lambda: [100, 200, 300, 400, 500])
    ruler_length: list[int] = field(default_factory=lambda: [400, 300, 200, 100, 50])
    line_width: int = 3
    cross_width: int = 300
    cross_high: int = 300
    cross_high_offset: int = 0
    cross_color: int = GraphColor.ORANGE
    ruler_color: int = GraphColor.YELLOW
    dist_indicate_color: int = GraphColor.PURPLE
    dist_indicate_length: int = 150
    dist_indicate_width: int = 30
    distance: int = 0
    dist_start_point: list[int] = field(default_factory=lambda: [140, 20])
    dist_text_size: int = 15
    dist_display_length: int = 100
    dist_display_width: int = 8
    speed_start_point: list[int] = field(default_factory=lambda: [140, -30])
    speed_display_length: int = 100
    speed_display_width: int = 8
    speed_text_size: int = 15
    shoot_text_color: int = GraphColor.ORANGE
    shoot_bar_color: int = GraphColor.CYAN
    shoot_speed_percent: int = 10
    shoot_dist_percent: int = 10


@dataclass
class StateIndicator:
    """Capacitor bar and status text in the lower right of the screen."""

    cap_text_pos: list[int] = field(default_factory=lambda: [1600, 800])
    cap_display_length: int = 250
    cap_display_width: int = 30
    cap_text_size: int = 30
    cap_text_color: int = GraphColor.YELLOW
    cap_bar_color: int = GraphColor.CYAN
    cap_percent: int = 100
    spin_state_pos: list[int] = field(default_factory=lambda: [0, 0])
    fric_state_pos: list[int] = field(default_factory=lambda: [0, 0])
    spin_state: int = 0
    fric_state: int = 0


class CustomUI:
    """Draws and refreshes the HUD through a ``UIFramer``.

    ``delay`` is called with a pause in seconds between frames.
    """

    def __init__(
        self, framer: UIFramer, delay: Callable[[float], object] = time.sleep
    ) -> None:
        self.framer = framer
        self.delay = delay
        self.mode = UIMode.INFANTRY
        self.display = DisplayData()
        self.crosshair = CrosshairData()
        self.state = StateIndicator()
        self.state_text = StringData()
        self.shoot_distance_bar = GraphData()
        self.cap_percentage = GraphData()
        self.auto_aim_range = GraphData()
        self.cross_lines = [GraphData() for _ in range(7)]

    def _parameter_init(self) -> None:
        self.crosshair = CrosshairData()
        self.state = StateIndicator()
        self.display.distance = 0.0
        self.display.shoot_speed = 0.0
        self.display.super_cap_percent = 35.0
        self.display.spin_state = 0
        self.display.fric_state = 0

    def init(self) -> None:
        """Clear the client, reset the parameters and draw the crosshair."""
        self.clear()
        self._parameter_init()
        self._draw_crosshair()

    def clear(self) -> None:
        """Delete every graphic on the client."""
        self.framer.delete(DeleteOperation.ALL, 0)
        self.delay(0.1)

    def sync_parameter(self) -> None:
        """Copy the display values into the drawing parameters."""
        self.crosshair.shoot_dist_percent = int(self.display.distance * (100 // 8))
        self.state.cap_percent = int(self.display.super_cap_percent)
        self.state.fric_state = int(self.display.fric_state)
        self.state.spin_state = int(self.display.spin_state)

    def update_ui_data(
        self, fric_state: bool, auto_aim_state: bool, spin_state: bool, cap_state: float
    ) -> None:
        """Record the robot's current state for the next redraw."""
        self.display.distance = 10
        self.display.auto_aim_state = AUTOAIM_LOCKED if auto_aim_state else AUTOAIM_LOST
        self.display.fric_state = int(bool(fric_state))
        self.display.shoot_speed = 10
        self.display.spin_state = int(bool(spin_state))
        self.display.super_cap_percent = cap_state

    def _main_cross(self) -> None:
        c = self.crosshair
        cx, cy = c.center
        self.cross_lines[0] = line_draw(
            "L1", GraphOperation.ADD, 0, c.cross_color, c.line_width,
            cx - c.cross_width // 2, cy, cx + c.cross_width // 2, cy,
        )
        self.cross_lines[1] = line_draw(
            "L2", GraphOperation.ADD, 0, c.cross_color, c.line_width,
            cx, cy + c.cross_high // 2 + c.cross_high_offset,
            cx, cy - c.cross_high // 2 + c.cross_high_offset,
        )

    def draw_crosshair_hero(self) -> None:
        """Draw the crosshair with five ballistic rulers."""
        self._main_cross()
        c = self.crosshair
        cx, cy = c.center
        for index, (drop, length) in enumerate(zip(c.ballistic_ruler, c.ruler_length)):
            self.cross_lines[index + 2] = line_draw(
                f"L{index + 3}", GraphOperation.ADD, 0, c.ruler_color, c.line_width,
                cx - length // 2, cy - drop // 2, cx + length // 2, cy - drop // 2,
            )
        self.framer.refresh(*self.cross_lines)
        self.delay(0.1)

    def draw_crosshair_infantry(self) -> None:
        """Draw the plain crosshair without rulers."""
        self._main_cross()
        self.framer.refresh(self.cross_lines[0], self.cross_lines[1])
        self.delay(0.1)

    def _draw_crosshair(self) -> None:
        if self.mode == UIMode.HERO:
            self.draw_crosshair_hero()
        else:
            self.draw_crosshair_infantry()

    def _cap_line(self, operate: int) -> GraphData:
        s = self.state
        x, y = s.cap_text_pos
        bar_y = int(y - s.cap_text_size * 4.8)
        return line_draw(
            "cap", operate, 1, s.cap_bar_color, s.cap_display_width,
            x, bar_y, x + (s.cap_display_length * s.cap_percent) // 100, bar_y,
        )

    def _state_text(self, operate: int) -> StringData:
        s = self.state
        text = state_str(s.cap_percent, s.spin_state, s.fric_state)
        return string_draw(
            "sta", operate, 1, s.cap_text_color, s.cap_text_size, STATE_TEXT_LENGTH, 2,
            s.cap_text_pos[0], s.cap_text_pos[1], text,
        )

    @staticmethod
    def _aim_box() -> GraphData:
        return rectangle_draw(
            "aui", GraphOperation.ADD, 0, GraphColor.CYAN, 3, 700, 300, 1300, 800
        )

    def update_dynamic_parameter(self) -> None:
        """Refresh the capacitor bar, the status text and the auto-aim box."""
        self.cap_percentage = self._cap_line(GraphOperation.UPDATE)

        cx = self.crosshair.center[0]
        half = self.crosshair.cross_width + 50 // 2
        aim = self.display.auto_aim_state
        if aim in (AUTOAIM_LOST, AUTOAIM_LOCKED):
            color = GraphColor.GREEN if aim == AUTOAIM_LOST else GraphColor.PURPLE
            self.auto_aim_range = rectangle_draw(
                "aui", GraphOperation.UPDATE, 0, color, 3, cx - half, 300, cx + half, 800
            )
        elif aim == AUTOAIM_OFFLINE:
            self.auto_aim_range = rectangle_draw(
                "aui", GraphOperation.UPDATE, 0, GraphColor.BLACK, 3, 700, 300, 1300, 800
            )

        if self.mode == UIMode.HERO:
            self.framer.refresh(self.shoot_distance_bar, self.cap_percentage)
        else:
            self.framer.refresh(self.cap_percentage)
        self.delay(0.1)
        self.framer.refresh_string(self.state_text)
        self.delay(0.1)
        self.framer.refresh(self.auto_aim_range)

    def read_robot_id(self) -> None:
        """Pick the operator client matching a hero robot id."""
        if self.framer.robot_id == RobotId.BLUE_HERO:
            self.framer.client_id = ClientId.BLUE_HERO_CLIENT
        elif self.framer.robot_id == RobotId.RED_HERO:
            self.framer.client_id = ClientId.RED_HERO_CLIENT

    def cycle(self, robot_id: int) -> None:
        """Run one full redraw for the robot with ``robot_id``."""
        self.framer.robot_id = robot_id
        self.framer.client_id = CLIENT_ID_OFFSET + robot_id
        self.sync_parameter()
        self.update_dynamic_parameter()

        self.delay(0.1)
        self._draw_crosshair()
        self.delay(0.1)

        self.cap_percentage = self._cap_line(GraphOperation.UPDATE)
        self.framer.refresh(self.shoot_distance_bar, self.cap_percentage)
        self.delay(0.1)

        self.state_text = self._state_text(GraphOperation.UPDATE)
        self.framer.refresh_string(self.state_text)
        self.delay(0.15)

        self.auto_aim_range = self._aim_box()
        self.framer.refresh(self.auto_aim_range)
        self.delay(0.1)
        self.delay(0.001)

    def run(self, robot_id: Callable[[], int], stop: threading.Event) -> None:
        """Draw the HUD, then redraw it until ``stop`` is set."""
        self.init()
        self.sync_parameter()

        self.cap_percentage = self._cap_line(GraphOperation.ADD)
        self.framer.refresh(self.shoot_distance_bar, self.cap_percentage)
        self.delay(0.1)

        self.state_text = self._state_text(GraphOperation.ADD)
        self.framer.refresh_string(self.state_text)
        self.delay(0.15)

        self.auto_aim_range = self._aim_box()
        self.framer.refresh(self.auto_aim_range)
        self.delay(0.1)

        while not stop.is_set():
            self.cycle(robot_id())