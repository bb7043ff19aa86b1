"""RGB colours with channels kept within 0..255."""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real

from spherecast.vector import Vector

CHANNEL_MAX = 255.0


def _clamp(value: float) -> float:
    if value > CHANNEL_MAX:
        return CHANNEL_MAX
    if value < 0:
        return 0.0
    return float(value)


@dataclass(frozen=True, slots=True)
class Colour:
    """An immutable colour; every channel is clamped into 0..255 on creation."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _clamp(self.r))
        object.__setattr__(self, "g", _clamp(self.g))
        object.__setattr__(self, "b", _clamp(self.b))

    @classmethod
    def from_vector(cls, vector: Vector) -> Colour:
        """Build a colour from a vector's x, y, z as r, g, b."""
        return cls(vector.x, vector.y, vector.z)

    def as_vector(self) -> Vector:
        """The channels as a vector."""
        return Vector(self.r, self.g, self.b)

    def modulate(self, other: Colour) -> Colour:
        """Channel-wise product, clamped."""
        return Colour(self.r * other.r, self.g * other.g, self.b * other.b)

    def rgb(self) -> tuple[int, int, int]:
        """Channels as 8-bit integers, truncated."""
        return int(self.r), int(self.g), int(self.b)

    def __add__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return Colour(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return Colour(self.r - other.r, self.g - other.g, self.b - other.b)

    def __neg__(self) -> Colour:
        return Colour(-self.r, -self.g, -self.b)

    def __mod__(self, other: Colour) -> Colour:
        if not isinstance(other, Colour):
            return NotImplemented
        return self.modulate(other)

    def __mul__(self, factor: float) -> Colour:
        if not isinstance(factor, Real):
            return NotImplemented
        return Colour(self.r * factor, self.g * factor, self.b * factor)

    __rmul__ = __mul__