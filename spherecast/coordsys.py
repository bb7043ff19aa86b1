"""Mapping between world coordinates and screen pixels."""

from __future__ import annotations

from dataclasses import dataclass

from spherecast.vector import Vector


@dataclass
class CoordSystem:
    """A world rectangle mapped onto a screen area; screen y grows downwards."""

    x_max: int
    x_min: int
    y_max: int
    y_min: int
    x_size: int
    y_size: int
    x_pos: int = 0
    y_pos: int = 0

    @property
    def x_scale(self) -> float:
        """Pixels per world unit along x."""
        return self.x_size / (self.x_max - self.x_min)

    @property
    def y_scale(self) -> float:
        """Pixels per world unit along y."""
        return self.y_size / (self.y_max - self.y_min)

    def to_screen(self, point: Vector) -> Vector:
        """Convert a world point to screen coordinates."""
        return Vector(
            (point.x - self.x_min) * self.x_scale + self.x_pos,
            (self.y_max - point.y) * self.y_scale + self.y_pos,
        )

    def from_screen(self, point: Vector) -> Vector:
        """Convert screen coordinates to a world point."""
        return Vector(
            (point.x - self.x_pos) / self.x_scale + self.x_min,
            self.y_max - (point.y - self.y_pos) / self.y_scale,
        )

    def set_screen_size(self, x_size: int, y_size: int) -> None:
        """Change the screen area size."""
        self.x_size = x_size
        self.y_size = y_size

    def set_x_axis(self, x_max: int, x_min: int) -> None:
        """Change the world range along x."""
        self.x_max = x_max
        self.x_min = x_min

    def set_y_axis(self, y_max: int, y_min: int) -> None:
        """Change the world range along y."""
        self.y_max = y_max
        self.y_min = y_min