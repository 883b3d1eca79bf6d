"""A small entity-component-system store with timed systems."""

from __future__ import annotations

import math
import pickle
import time
from dataclasses import dataclass, field
from typing import IO, Any, Callable, Dict, List, Optional, Type, TypeVar, Union

T = TypeVar("T")


@dataclass
class Entity:
    """An entity: an id, a deletion mark and components keyed by their type."""

    id: int
    deleted: bool = False
    components: Dict[type, Any] = field(default_factory=dict)

    def assign(self, component: Any) -> "Entity":
        """Attach a component, replacing one of the same type; returns the entity."""
        self.components[type(component)] = component
        return self

    def component(self, component_type: Type[T]) -> Optional[T]:
        """The component of that type, or None."""
        return self.components.get(component_type)


class BaseSystem:
    """A system run once per tick; subclasses override configure and update."""

    system_name: str = ""
    total_time_ms: float = 0.0

    def configure(self) -> None:
        """Called once by ECS.configure; names the system after its class if unnamed."""
        if not self.system_name:
            self.system_name = type(self).__name__

    def update(self, duration_ms: float) -> None:
        """Called every tick with the elapsed time; accumulates it in total_time_ms."""
        self.total_time_ms += duration_ms


@dataclass
class SystemProfile:
    """Timings of one system, in microseconds."""

    last: float = 0.0
    best: float = math.inf
    worst: float = 0.0


class ECS:
    """Holds entities and systems."""

    def __init__(self) -> None:
        self._entities: Dict[int, Entity] = {}
        self._next_id = 1
        self.systems: List[BaseSystem] = []
        self.profiles: List[SystemProfile] = []

    def entity(self, entity_id: int) -> Optional[Entity]:
        """The live entity with that id, or None."""
        found = self._entities.get(entity_id)
        if found is None or found.deleted:
            return None
        return found

    def create_entity(self, new_id: Optional[int] = None) -> Entity:
        """Create an entity with a fresh id, or with new_id if given."""
        if new_id is None:
            new_id = self._next_id
            self._next_id += 1
            while new_id in self._entities:
                new_id = self._next_id
                self._next_id += 1
        elif new_id in self._entities:
            raise ValueError(f"Duplicate entity ID: {new_id}")
        created = Entity(new_id)
        self._entities[new_id] = created
        return created

    def delete_entity(self, entity_id: Union[int, Entity]) -> None:
        """Mark an entity deleted; it is removed at the next garbage collection."""
        key = entity_id.id if isinstance(entity_id, Entity) else entity_id
        found = self._entities.get(key)
        if found is not None:
            found.deleted = True

    def delete_all_entities(self) -> None:
        for found in self._entities.values():
            found.deleted = True

    def each(self, func: Callable[[Entity], Any]) -> None:
        """Call func for every live entity."""
        for found in list(self._entities.values()):
            if not found.deleted:
                func(found)

    def add_system(self, system: BaseSystem) -> BaseSystem:
        self.systems.append(system)
        self.profiles.append(SystemProfile())
        return system

    def delete_all_systems(self) -> None:
        self.systems.clear()
        self.profiles.clear()

    def configure(self) -> None:
        for system in self.systems:
            system.configure()

    def tick(self, duration_ms: float) -> None:
        """Run every system once, recording its time, then collect garbage."""
        for system, profile in zip(self.systems, self.profiles):
            started = time.perf_counter()
            system.update(duration_ms)
            elapsed = float(int((time.perf_counter() - started) * 1_000_000))
            profile.last = elapsed
            profile.worst = max(profile.worst, elapsed)
            profile.best = min(profile.best, elapsed)
        self.garbage_collect()

    def garbage_collect(self) -> None:
        """Drop entities marked deleted."""
        self._entities = {key: e for key, e in self._entities.items() if not e.deleted}

    def save(self, stream: IO[bytes]) -> None:
        """Write the entities to a binary stream."""
        pickle.dump({"next_id": self._next_id, "entities": self._entities}, stream)

    def load(self, stream: IO[bytes]) -> None:
        """Replace the entities with those read from a binary stream."""
        state = pickle.load(stream)
        self._entities = state["entities"]
        self._next_id = state["next_id"]

    def profile_dump(self) -> str:
        """A table of system timings in microseconds."""
        lines = [
            "SYSTEMS PERFORMANCE IN MICROSECONDS:\n",
            "System".rjust(20) + "Last".rjust(20) + "Best".rjust(20) + "Worst\n".rjust(20),
        ]
        for system, profile in zip(self.systems, self.profiles):
            lines.append(
                system.system_name.rjust(20)
                + f"{profile.last:.3f}".rjust(20)
                + f"{profile.best:.3f}".rjust(20)
                + f"{profile.worst:.3f}".rjust(20)
                + "\n"
            )
        return "".join(lines)