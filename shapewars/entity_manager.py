"""Bookkeeping of entities with deferred insertion and removal."""

from __future__ import annotations

from collections import defaultdict

from shapewars.entity import Entity


class EntityManager:
    """Owns all entities; additions and removals take effect on update()."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._pending: list[Entity] = []
        self._by_tag: defaultdict[str, list[Entity]] = defaultdict(list)
        self._total = 0

    def update(self) -> None:
        """Move pending entities in and drop destroyed ones."""
        for entity in self._pending:
            self._entities.append(entity)
            self._by_tag[entity.tag].append(entity)
        self._pending.clear()

        self._entities = [e for e in self._entities if e.is_active]
        for tag, group in self._by_tag.items():
            self._by_tag[tag] = [e for e in group if e.is_active]

    def add_entity(self, tag: str) -> Entity:
        """Create an entity; it becomes visible after the next update()."""
        entity = Entity(self._total, tag)
        self._total += 1
        self._pending.append(entity)
        return entity

    def get_entities(self, tag: str | None = None) -> list[Entity]:
        """Snapshot of all live entities, or of those with the given tag."""
        if tag is None:
            return list(self._entities)
        return list(self._by_tag.get(tag, ()))

    def has_tag(self, tag: str) -> bool:
        """Whether any entity with this tag is in the live collection."""
        return any(e.tag == tag for e in self._entities)