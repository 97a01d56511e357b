"""Two-dimensional vector used for positions and velocities."""

from __future__ import annotations

import math
from typing import Iterator


class Vec2:
    """A mutable 2D vector of floats."""

    __slots__ = ("x", "y")
    __hash__ = None  # mutable, compared by value

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    def __repr__(self) -> str:
        return f"Vec2({self.x!r}, {self.y!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def copy(self) -> Vec2:
        """Return an independent copy of this vector."""
        return Vec2(self.x, self.y)

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, value: float) -> Vec2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        return Vec2(self.x * value, self.y * value)

    __rmul__ = __mul__

    def __truediv__(self, value: float) -> Vec2:
        if not isinstance(value, (int, float)):
            return NotImplemented
        return Vec2(self.x / value, self.y / value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def __ne__(self, other: object) -> bool:
        """True only when both components differ."""
        if not isinstance(other, Vec2):
            return NotImplemented
        return self.x != other.x and self.y != other.y

    def __iadd__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self

    def __imul__(self, other: Vec2) -> Vec2:
        """Component-wise multiplication in place."""
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x *= other.x
        self.y *= other.y
        return self

    def __itruediv__(self, other: Vec2) -> Vec2:
        """Component-wise division in place."""
        if not isinstance(other, Vec2):
            return NotImplemented
        self.x /= other.x
        self.y /= other.y
        return self

    def dist(self) -> float:
        """Length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def dist_no_sqrt(self) -> float:
        """Squared length of the vector."""
        return self.x * self.x + self.y * self.y

    @classmethod
    def from_angle(cls, degrees: float) -> Vec2:
        """Unit vector pointing at the given angle in degrees."""
        radians = math.radians(degrees)
        return cls(math.cos(radians), math.sin(radians))