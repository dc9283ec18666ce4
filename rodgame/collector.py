"""Collection of items under the crosshair."""

from __future__ import annotations

from typing import Any, Protocol


class Collectable(Protocol):
    """A component marking its owner as something that can be picked up."""

    owner: Any
    collected: bool


class ItemCollectorSystem:
    """Tracks collectables and picks up the ones hit at a location."""

    def __init__(self) -> None:
        self._collectables: list[Collectable] = []

    @property
    def collectables(self) -> tuple[Collectable, ...]:
        return tuple(self._collectables)

    def collect(self, location: tuple[float, float]) -> None:
        """Collect every enabled item containing ``location``, newest first."""
        for collectable in reversed(list(self._collectables)):
            item = collectable.owner
            if item.contains(location) and item.enabled:
                item.collect()
                collectable.collected = True

    def register_component(self, collectable: Collectable) -> None:
        self._collectables.append(collectable)

    def unregister_component(self, collectable: Collectable) -> None:
        """Stop tracking ``collectable``; unknown ones are ignored."""
        index = next((i for i, c in enumerate(self._collectables) if c is collectable), None)
        if index is not None:
            del self._collectables[index]

    def clear_all(self) -> None:
        self._collectables.clear()