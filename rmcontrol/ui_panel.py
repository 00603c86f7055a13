"""Simple friction-wheel and spin indicator panel on the operator client."""

from __future__ import annotations

import threading

from rmcontrol.protocol import GraphColor, GraphOperation
from rmcontrol.ui import (
    DeleteOperation,
    GraphData,
    StringData,
    UIFramer,
    circle_draw,
    line_draw,
    string_draw,
)

FRIC_NAME_START_X = 800
FRIC_NAME_START_Y = 500
SPIN_NAME_START_X = 850
SPIN_NAME_START_Y = 550

PANEL_LAYER = 9


class UIPanel:
    """Draws friction and spin indicators and an accuracy circle."""

    def __init__(self, framer: UIFramer) -> None:
        self.framer = framer
        self.reset()

    def reset(self) -> None:
        """Clear every flag and graphic."""
        self.ui_open = False
        self.ui_mode = False
        self.fric_open = False
        self.fric_mode = False
        self.spin_open = False
        self.spin_mode = False
        self.fric_name = StringData()
        self.spin_name = StringData()
        self.fric_graph = GraphData()
        self.spin_graph = GraphData()
        self.accuracy_graph = GraphData()

    def open(self) -> None:
        """Draw the panel and send it to the client."""
        self.ui_mode = True
        self.fric_name = string_draw(
            "frs", GraphOperation.ADD, PANEL_LAYER, GraphColor.WHITE, 10, 6, 3,
            FRIC_NAME_START_X, FRIC_NAME_START_Y, "FRIC",
        )
        # The spin label is written over the friction label slot.
        self.fric_name = string_draw(
            "sps", GraphOperation.ADD, PANEL_LAYER, GraphColor.WHITE, 10, 6, 3,
            SPIN_NAME_START_X, SPIN_NAME_START_Y, "SPIN",
        )
        self.fric_graph = self._fric_line(
            GraphColor.GREEN if self.fric_open else GraphColor.MAIN_COLOR
        )
        self.spin_graph = self._spin_line(
            GraphColor.GREEN if self.spin_open else GraphColor.MAIN_COLOR
        )
        self.accuracy_graph = circle_draw(
            "acc", GraphOperation.ADD, PANEL_LAYER, GraphColor.YELLOW, 10, 700, 500, 20
        )
        self.framer.refresh(self.fric_graph, self.spin_graph)
        self.framer.refresh(self.accuracy_graph)
        self.framer.refresh_string(self.fric_name)
        self.framer.refresh_string(self.spin_name)

    def close(self) -> None:
        """Delete everything the panel drew."""
        self.ui_mode = False
        self.framer.delete(DeleteOperation.ALL, PANEL_LAYER)

    def set_fric(self, mode: int) -> None:
        """Mark the friction wheels as open; ``mode`` is not used."""
        self.fric_open = True

    def set_spin(self, mode: int) -> None:
        """Mark spin mode as set; ``mode`` is not used."""
        self.spin_mode = True

    def set_mode(self) -> None:
        self.ui_open = True

    def set_control(self) -> None:
        """Redraw the panel, update the indicator lines and then clear the layer."""
        self.open()
        self.fric_graph = self._fric_line(
            GraphColor.GREEN if self.fric_open else GraphColor.CYAN
        )
        self.fric_mode = self.fric_open
        self.spin_graph = self._spin_line(
            GraphColor.GREEN if self.spin_open else GraphColor.CYAN
        )
        self.spin_mode = self.spin_open
        self.close()

    def run(self, stop: threading.Event, period: float = 0.010) -> None:
        """Reset, then redraw every ``period`` seconds until ``stop`` is set."""
        self.reset()
        while not stop.is_set():
            self.set_mode()
            self.set_control()
            stop.wait(period)

    @staticmethod
    def _fric_line(color: int) -> GraphData:
        return line_draw(
            "frg", GraphOperation.ADD, PANEL_LAYER, color, 5,
            FRIC_NAME_START_X, FRIC_NAME_START_Y, FRIC_NAME_START_X + 20, FRIC_NAME_START_Y,
        )

    @staticmethod
    def _spin_line(color: int) -> GraphData:
        return line_draw(
            "sps", GraphOperation.ADD, PANEL_LAYER, color, 5,
            SPIN_NAME_START_X, SPIN_NAME_START_Y, SPIN_NAME_START_X + 20, SPIN_NAME_START_Y,
        )