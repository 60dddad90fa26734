"""Three-dimensional vectors of floats."""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from numbers import Real


def _format_component(value: float) -> str:
    """Render a float the shortest exact way, without an exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    text = format(Decimal(repr(value)), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


@dataclass(frozen=True)
class Vector3D:
    """An immutable vector with x, y and z components."""

    x: float
    y: float
    z: float

    def add(self, other: Vector3D) -> Vector3D:
        """Return the component-wise sum."""
        return Vector3D(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: Vector3D) -> Vector3D:
        """Return the component-wise difference."""
        return Vector3D(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, scalar: float) -> Vector3D:
        """Return the vector multiplied by a scalar."""
        return Vector3D(self.x * scalar, self.y * scalar, self.z * scalar)

    def mult(self, other: Vector3D) -> Vector3D:
        """Return the component-wise product."""
        return Vector3D(self.x * other.x, self.y * other.y, self.z * other.z)

    def magnitude(self) -> float:
        """Return the Euclidean length."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def dot(self, other: Vector3D) -> float:
        """Return the scalar product."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector3D) -> Vector3D:
        """Return the vector product."""
        return Vector3D(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def normalize(self) -> Vector3D:
        """Return the unit vector in the same direction.

        A zero vector has no direction; its components come back as NaN.
        """
        mag = self.magnitude()
        if mag == 0.0:
            return Vector3D(math.nan, math.nan, math.nan)
        return Vector3D(self.x / mag, self.y / mag, self.z / mag)

    def __add__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: object) -> Vector3D:
        if not isinstance(other, Vector3D):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: object) -> Vector3D:
        if isinstance(other, Vector3D):
            return self.mult(other)
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, other: object) -> Vector3D:
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __str__(self) -> str:
        return "[ {}, {}, {} ]".format(
            _format_component(self.x),
            _format_component(self.y),
            _format_component(self.z),
        )