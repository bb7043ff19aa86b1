"""Three-component vectors and vectors anchored at a point."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vector:
    """An immutable vector in 3D space; ``z`` defaults to zero for 2D use."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        return Vector(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vector:
        if not isinstance(factor, Real):
            return NotImplemented
        return Vector(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __matmul__(self, other: Vector) -> float:
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dot(other)

    def length(self) -> float:
        """Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector:
        """Unit vector with the same direction."""
        length = self.length()
        if length == 0:
            raise ZeroDivisionError("cannot normalize a zero vector")
        return self * (1 / length)

    def dot(self, other: Vector) -> float:
        """Scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def rotated_2d(self, angle: float) -> Vector:
        """Rotate in the XY plane by ``angle`` radians; ``z`` becomes zero."""
        return self.rotated_2d_sincos(math.sin(angle), math.cos(angle))

    def rotated_2d_sincos(self, sin: float, cos: float) -> Vector:
        """Rotate in the XY plane given the angle's sine and cosine; ``z`` becomes zero."""
        return Vector(cos * self.x - sin * self.y, sin * self.x + cos * self.y)

    def orthogonal_2d(self) -> Vector:
        """A vector orthogonal to this one in the XY plane (clockwise turn)."""
        return Vector(self.y, -self.x)


@dataclass(frozen=True, slots=True)
class PosedVector:
    """A vector anchored at a point."""

    point: Vector = field(default_factory=Vector)
    vector: Vector = field(default_factory=Vector)

    def __neg__(self) -> PosedVector:
        return PosedVector(self.point, -self.vector)

    def length(self) -> float:
        """Length of the vector part."""
        return self.vector.length()

    def normalized(self) -> PosedVector:
        """Same anchor, unit-length vector."""
        return PosedVector(self.point, self.vector.normalized())

    def scaled(self, factor: float) -> PosedVector:
        """Same anchor, vector multiplied by ``factor``."""
        return PosedVector(self.point, self.vector * factor)

    def rotated_2d(self, angle: float) -> PosedVector:
        """Same anchor, vector rotated in the XY plane."""
        return PosedVector(self.point, self.vector.rotated_2d(angle))

    def rotated_2d_sincos(self, sin: float, cos: float) -> PosedVector:
        """Same anchor, vector rotated by the angle with the given sine and cosine."""
        return PosedVector(self.point, self.vector.rotated_2d_sincos(sin, cos))

    def pointed_at(self, target: Vector) -> PosedVector:
        """Same anchor, vector reaching from the anchor to ``target``."""
        return PosedVector(self.point, target - self.point)

    def end(self) -> Vector:
        """The point the vector reaches."""
        return self.point + self.vector