"""Publish/subscribe of game events keyed by an event key."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Hashable, Mapping, Optional


class EventListener(ABC):
    """Receives broadcasts for the event key it reports."""

    @property
    @abstractmethod
    def key(self) -> Hashable:
        """The event key this listener listens to."""

    @abstractmethod
    def on_event_trigger(self, parameters: Mapping[str, Any]) -> None:
        """Handle one broadcast event."""


class EventBroadcaster:
    """Keeps listeners by key and delivers broadcasts to them."""

    def __init__(self) -> None:
        self._by_key: dict[Hashable, list[EventListener]] = {}
        self._listeners: list[EventListener] = []

    @property
    def listeners(self) -> tuple[EventListener, ...]:
        return tuple(self._listeners)

    def register_listener(self, listener: EventListener) -> None:
        self._by_key.setdefault(listener.key, []).append(listener)
        self._listeners.append(listener)

    def unregister_listener(self, listener: EventListener) -> None:
        """Remove a listener; raise ValueError if it is not registered."""
        keyed = self._by_key.get(listener.key, [])
        index = next((i for i, item in enumerate(keyed) if item is listener), None)
        if index is None:
            raise ValueError("listener is not registered")
        del keyed[index]
        if not keyed:
            del self._by_key[listener.key]
        index = next((i for i, item in enumerate(self._listeners) if item is listener), None)
        if index is not None:
            del self._listeners[index]

    def unregister_all_listeners(self) -> None:
        self._listeners.clear()
        self._by_key.clear()

    def broadcast(self, key: Hashable, parameters: Optional[Mapping[str, Any]] = None) -> None:
        """Deliver ``parameters`` to every listener registered for ``key``."""
        payload = dict(parameters or {})
        for listener in list(self._by_key.get(key, ())):
            listener.on_event_trigger(payload)