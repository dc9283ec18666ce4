"""Registry of live game objects with per-frame input, update and draw dispatch."""

from __future__ import annotations

import logging
from typing import Any, Iterator, Optional, Protocol

from .settings import GAME_SPEED

log = logging.getLogger(__name__)


class GameObject(Protocol):
    """What the manager expects of a game object."""

    name: str
    enabled: bool
    z: float
    position: tuple[float, float]

    def initialize(self) -> None: ...

    def process_input(self, event: Any) -> None: ...

    def update(self, delta: float) -> None: ...

    def draw(self, target: Any) -> None: ...


class GameObjectManager:
    """Keeps game objects in draw order and looks them up by name."""

    def __init__(self) -> None:
        self._by_name: dict[str, GameObject] = {}
        self._objects: list[GameObject] = []

    @property
    def objects(self) -> tuple[GameObject, ...]:
        """The managed objects in their current order."""
        return tuple(self._objects)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[GameObject]:
        return iter(tuple(self._objects))

    def _enabled(self) -> Iterator[GameObject]:
        return (obj for obj in tuple(self._objects) if obj.enabled)

    def process_input(self, event: Any) -> None:
        for obj in self._enabled():
            obj.process_input(event)

    def update(self, delta: float) -> None:
        for obj in self._enabled():
            obj.update(delta * GAME_SPEED)

    def draw(self, target: Any) -> None:
        for obj in self._enabled():
            obj.draw(target)

    def add_object(self, obj: GameObject) -> None:
        """Register an object under its name and initialize it."""
        self._by_name[obj.name] = obj
        self._objects.append(obj)
        obj.initialize()

    def delete_object(self, obj: GameObject) -> None:
        """Remove an object; unknown objects are ignored."""
        index = next((i for i, item in enumerate(self._objects) if item is obj), None)
        if index is None:
            return
        del self._objects[index]
        if self._by_name.get(obj.name) is obj:
            del self._by_name[obj.name]

    def delete_object_by_name(self, name: str) -> None:
        obj = self.find_object_by_name(name)
        if obj is not None:
            self.delete_object(obj)

    def delete_all_objects(self) -> None:
        self._objects.clear()
        self._by_name.clear()

    def sort_objects_by_z(self) -> None:
        """Order objects farthest first, so nearer ones draw on top."""
        self._objects.sort(key=lambda obj: obj.z, reverse=True)

    def sort_objects_by_x(self) -> None:
        """Order objects left to right."""
        self._objects.sort(key=lambda obj: obj.position[0])

    def find_object_by_name(self, name: str) -> Optional[GameObject]:
        """Return the object registered under ``name``, or None."""
        obj = self._by_name.get(name)
        if obj is None:
            log.error("Object [%s] NOT found.", name)
        return obj