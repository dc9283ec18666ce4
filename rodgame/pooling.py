"""Object pools of reusable game objects, and registries for them."""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Optional, Protocol

from .settings import ERROR_LOGGING

log = logging.getLogger(__name__)


class Poolable(Protocol):
    """What a pool expects of the objects it manages."""

    enabled: bool

    def clone(self) -> "Poolable": ...

    def on_activate(self) -> None: ...

    def on_release(self) -> None: ...


class _Parent(Protocol):
    def attach_child(self, child: Any) -> None: ...


class _Manager(Protocol):
    def add_object(self, obj: Any) -> None: ...


class GameObjectPool:
    """A fixed-size pool of clones of a reference object."""

    def __init__(
        self,
        tag: Hashable,
        pool_size: int,
        reference: Poolable,
        parent: Optional[_Parent] = None,
        manager: Optional[_Manager] = None,
    ) -> None:
        self.tag = tag
        self.pool_size = pool_size
        self.reference = reference
        self.parent = parent
        self.manager = manager
        self._available: list[Poolable] = []
        self._used: list[Poolable] = []

    @property
    def available(self) -> tuple[Poolable, ...]:
        return tuple(self._available)

    @property
    def used(self) -> tuple[Poolable, ...]:
        return tuple(self._used)

    def initialize(self) -> None:
        """Create the pooled clones, attach them and leave them disabled."""
        for _ in range(self.pool_size):
            obj = self.reference.clone()
            if self.parent is not None:
                self.parent.attach_child(obj)
            elif self.manager is not None:
                self.manager.add_object(obj)
            obj.enabled = False
            self._available.append(obj)

    def request_poolable(self) -> Optional[Poolable]:
        """Activate and return the oldest available object, or None if none is left."""
        if not self.has_available(1):
            if ERROR_LOGGING:
                log.error("request_poolable failed: no available objects.")
            return None
        obj = self._available.pop(0)
        self._used.append(obj)
        self._set_enabled(obj, True)
        return obj

    def request_poolable_batch(self, count: int) -> list[Poolable]:
        """Activate ``count`` objects, or none at all if not enough are available."""
        if not self.has_available(count):
            if ERROR_LOGGING:
                log.error(
                    "Not enough poolable objects. REQUESTED : %d | AVAILABLE : %d",
                    count,
                    len(self._available),
                )
            return []
        return [obj for obj in (self.request_poolable() for _ in range(count)) if obj is not None]

    def release_poolable(self, obj: Poolable) -> None:
        """Return an object in use to the pool; others are ignored."""
        index = next((i for i, item in enumerate(self._used) if item is obj), None)
        if index is None:
            return
        del self._used[index]
        self._available.append(obj)
        self._set_enabled(obj, False)

    def release_poolable_batch(self, objs: Iterable[Poolable]) -> None:
        for obj in list(objs):
            self.release_poolable(obj)

    def has_available(self, count: int) -> bool:
        return len(self._available) >= count

    @staticmethod
    def _set_enabled(obj: Poolable, enabled: bool) -> None:
        obj.enabled = enabled
        if enabled:
            obj.on_activate()
        else:
            obj.on_release()


class ObjectPoolManager:
    """Looks pools up by their tag."""

    def __init__(self) -> None:
        self._pools: dict[Hashable, GameObjectPool] = {}

    def register_pool(self, pool: GameObjectPool) -> None:
        self._pools[pool.tag] = pool

    def unregister_pool(self, pool: GameObjectPool) -> None:
        self._pools.pop(pool.tag, None)

    def get_pool(self, tag: Hashable) -> GameObjectPool:
        """Return the pool registered for ``tag``; raise KeyError if there is none."""
        try:
            return self._pools[tag]
        except KeyError:
            raise KeyError(f"no pool registered for {tag!r}") from None


class BlockerManager:
    """Tracks the blockers currently in play."""

    def __init__(self) -> None:
        self._blockers: list[Any] = []

    @property
    def blockers(self) -> list[Any]:
        return list(self._blockers)

    def add_blocker(self, blocker: Any) -> None:
        self._blockers.append(blocker)

    def clear_all(self) -> None:
        self._blockers.clear()