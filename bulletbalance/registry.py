"""A minimal entity-component registry."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

Entity = int


class Registry:
    """Stores entities and the components attached to them, one per type."""

    def __init__(self) -> None:
        self._next_id: Entity = 0
        self._entities: dict[Entity, dict[type, Any]] = {}

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity: object) -> bool:
        return entity in self._entities

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    def create(self) -> Entity:
        """Create a new entity with no components and return its id."""
        entity = self._next_id
        self._next_id += 1
        self._entities[entity] = {}
        return entity

    def _components(self, entity: Entity) -> dict[type, Any]:
        try:
            return self._entities[entity]
        except KeyError:
            raise KeyError(f"unknown entity: {entity!r}") from None

    def emplace(self, entity: Entity, component: Any) -> Any:
        """Attach ``component`` to ``entity`` and return it."""
        components = self._components(entity)
        component_type = type(component)
        if component_type in components:
            raise ValueError(
                f"entity {entity!r} already has a {component_type.__name__}"
            )
        components[component_type] = component
        return component

    def has(self, entity: Entity, component_type: type) -> bool:
        """Return whether ``entity`` exists and has a component of that type."""
        components = self._entities.get(entity)
        return components is not None and component_type in components

    def get(self, entity: Entity, *args: type) -> Any:
        """Return one component, or a tuple of components for several types."""
        if not args:
            raise TypeError("get() needs at least one component type")
        components = self._components(entity)
        try:
            found = tuple(components[component_type] for component_type in args)
        except KeyError as missing:
            name = missing.args[0].__name__
            raise KeyError(f"entity {entity!r} has no {name}") from None
        return found[0] if len(found) == 1 else found

    def view(self, *args: type) -> Iterator[tuple[Any, ...]]:
        """Yield ``(entity, *components)`` for every entity having all types."""
        if not args:
            raise TypeError("view() needs at least one component type")
        for entity, components in list(self._entities.items()):
            if all(component_type in components for component_type in args):
                yield (entity, *(components[t] for t in args))