"""Components that can be attached to an entity."""

from __future__ import annotations

from dataclasses import dataclass, field

from shapewars.vec2 import Vec2


@dataclass(frozen=True)
class Color:
    """An RGBA colour with 8-bit channels."""

    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"colour channel {name}={value} out of range 0..255")

    def with_alpha(self, alpha: int) -> Color:
        """Same colour with a new alpha, wrapped to 8 bits."""
        return Color(self.r, self.g, self.b, int(alpha) % 256)


@dataclass
class Transform:
    """Position, velocity and rotation angle in degrees."""

    pos: Vec2 = field(default_factory=Vec2)
    velocity: Vec2 = field(default_factory=Vec2)
    angle: float = 0.0


@dataclass
class Shape:
    """A regular polygon drawn around its centre."""

    radius: float
    points: int
    fill: Color
    outline: Color
    thickness: float


@dataclass
class Collision:
    """Collision circle radius."""

    radius: float = 0.0


@dataclass
class Score:
    score: int = 0


@dataclass
class Lifespan:
    """Remaining and initial lifespan of an entity."""

    total: int = 0
    remaining: int = field(init=False)

    def __post_init__(self) -> None:
        self.remaining = self.total


@dataclass
class Input:
    """Movement and shooting intents of a controllable entity."""

    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False
    shoot: bool = False