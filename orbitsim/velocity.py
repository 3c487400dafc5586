"""Two-dimensional velocity in metres per second."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(slots=True)
class Velocity:
    """A velocity with a horizontal (dx) and vertical (dy) component."""

    dx: float = 0.0
    dy: float = 0.0

    def speed(self) -> float:
        """Magnitude of the velocity."""
        return math.hypot(self.dx, self.dy)

    def set_polar(self, radians: float, magnitude: float) -> None:
        """Set from a direction and a magnitude.

        A direction of zero points straight up; angles grow clockwise.
        """
        self.dx = magnitude * math.sin(radians)
        self.dy = magnitude * math.cos(radians)

    def accelerate(self, ddx: float, ddy: float, time: float) -> None:
        """Apply v = v0 + a t."""
        self.dx += ddx * time
        self.dy += ddy * time

    def add_velocity(self, other: Velocity) -> None:
        """Add another velocity to this one."""
        self.dx += other.dx
        self.dy += other.dy

    def reverse(self) -> None:
        """Point the velocity the opposite way."""
        self.dx = -self.dx
        self.dy = -self.dy