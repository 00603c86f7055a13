"""Offline detection shared by devices that receive periodic updates."""

from __future__ import annotations

import time
from collections.abc import Callable

_INITIAL_AGE_S = 10.0


class DeviceBase:
    """Tracks when a device last reported and whether it has gone silent.

    ``offline_time`` is in milliseconds; ``clock`` returns seconds. A new
    device is treated as last heard from ten seconds ago.
    """

    def __init__(self, offline_time: int, clock: Callable[[], float] = time.monotonic) -> None:
        self.offline_time = offline_time
        self._clock = clock
        self._last_time = clock() - _INITIAL_AGE_S

    def offline(self) -> bool:
        elapsed_ms = int((self._clock() - self._last_time) * 1000)
        return elapsed_ms >= self.offline_time

    def update_time(self) -> None:
        """Record that the device has just reported."""
        self._last_time = self._clock()