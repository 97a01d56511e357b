"""Game entity: an identity, a tag and optional components."""

from __future__ import annotations

from shapewars.components import Collision, Input, Lifespan, Score, Shape, Transform


class Entity:
    """A tagged object in the game world carrying components."""

    def __init__(self, entity_id: int, tag: str = "default") -> None:
        self._id = entity_id
        self._tag = tag
        self._active = True
        self.transform: Transform | None = None
        self.shape: Shape | None = None
        self.collision: Collision | None = None
        self.input: Input | None = None
        self.score: Score | None = None
        self.lifespan: Lifespan | None = None

    def __repr__(self) -> str:
        return f"Entity(id={self._id}, tag={self._tag!r}, active={self._active})"

    @property
    def id(self) -> int:
        return self._id

    @property
    def tag(self) -> str:
        return self._tag

    @property
    def is_active(self) -> bool:
        return self._active

    def destroy(self) -> None:
        """Mark the entity for removal on the next manager update."""
        self._active = False