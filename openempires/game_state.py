"""Entity and component storage."""

from __future__ import annotations

import itertools
import threading
from typing import Any, ClassVar, NewType, TypeVar

Entity = NewType("Entity", int)
C = TypeVar("C")


class Component:
    """Base for component classes, giving each subclass a small integer id."""

    _next_type: ClassVar[int] = 0
    _type_lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def component_type(cls) -> int:
        """Id of this component class, assigned on first request."""
        with Component._type_lock:
            type_id = cls.__dict__.get("_component_type_id")
            if type_id is None:
                type_id = Component._next_type
                Component._next_type += 1
                setattr(cls, "_component_type_id", type_id)
            return type_id


class GameState:
    """Holds all entities and their components."""

    _instance: ClassVar[GameState | None] = None
    _instance_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._ids = itertools.count()
        self._entities: set[Entity] = set()
        self._components: dict[type, dict[Entity, Any]] = {}

    @classmethod
    def get_instance(cls) -> GameState:
        """Return the process-wide game state."""
        with cls._instance_lock:
            if cls._instance is None:
                cls._instance = cls()
            return cls._instance

    def create_entity(self) -> Entity:
        with self._lock:
            entity = Entity(next(self._ids))
            self._entities.add(entity)
            return entity

    def destroy_entity(self, entity: Entity) -> None:
        """Destroy ``entity`` and all its components."""
        with self._lock:
            self._require_valid(entity)
            self._entities.discard(entity)
            for store in self._components.values():
                store.pop(entity, None)

    def is_entity_valid(self, entity: Entity) -> bool:
        with self._lock:
            return entity in self._entities

    def add_component(self, entity: Entity, component: C) -> C:
        """Attach ``component``, replacing one of the same type."""
        with self._lock:
            self._require_valid(entity)
            self._components.setdefault(type(component), {})[entity] = component
            return component

    def has_component(self, entity: Entity, component_type: type) -> bool:
        with self._lock:
            return entity in self._components.get(component_type, {})

    def get_component(self, entity: Entity, component_type: type[C]) -> C:
        """Return the component of ``component_type``; KeyError if absent."""
        with self._lock:
            self._require_valid(entity)
            try:
                return self._components[component_type][entity]
            except KeyError:
                raise KeyError(
                    f"entity {entity} has no {component_type.__name__}"
                ) from None

    def get_components(self, entity: Entity, *args: type) -> tuple[Any, ...]:
        """Return the components of each type given, in the order given."""
        with self._lock:
            return tuple(self.get_component(entity, t) for t in args)

    def entities_with(self, component_type: type[C]) -> list[tuple[Entity, C]]:
        """Snapshot of (entity, component) pairs holding ``component_type``."""
        with self._lock:
            return list(self._components.get(component_type, {}).items())

    def clear_all(self) -> None:
        """Destroy every entity and component."""
        with self._lock:
            self._entities.clear()
            self._components.clear()

    def init(self) -> None:
        """Nothing to start: the state is ready once constructed."""

    def shutdown(self) -> None:
        """Nothing to stop: the state holds no threads or handles."""

    def _require_valid(self, entity: Entity) -> None:
        if entity not in self._entities:
            raise KeyError(f"invalid entity {entity}")