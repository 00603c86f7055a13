"""Rate limiter that moves its output towards a target by a fixed step."""

from __future__ import annotations


class Ramp:
    """Moves ``out`` towards the input by at most ``acc * dt`` per update."""

    def __init__(self, acc: float, dt: float) -> None:
        self.dt = dt
        self.acc = acc * dt
        self.out = 0.0

    def update(self, value: float) -> None:
        if abs(self.out - value) <= self.acc:
            self.out = value
        else:
            self.out += self.acc if value > self.out else -self.acc

    def set_acc(self, acc: float) -> None:
        """Change the acceleration; the step becomes ``acc * dt``."""
        self.acc = acc * self.dt

    def clear(self, value: float = 0.0) -> None:
        """Reset the output to ``value``."""
        self.out = value