"""Inventory of held items in three slots, plus a queue of items to activate."""

from __future__ import annotations

import logging
from typing import Hashable, Optional

log = logging.getLogger(__name__)

SLOT_COUNT = 3


class ItemManager:
    """Holds up to three stored items and the items waiting to be activated."""

    def __init__(self) -> None:
        self._slots: list[Optional[Hashable]] = [None] * SLOT_COUNT
        self._active: list[Hashable] = []

    @property
    def slots(self) -> tuple[Optional[Hashable], ...]:
        """The slot contents in order; empty slots hold None."""
        return tuple(self._slots)

    @property
    def item_count(self) -> int:
        return sum(item is not None for item in self._slots)

    def add_item(self, item: Hashable, active: bool = False) -> bool:
        """Queue ``item`` for activation, or store it in the first free slot.

        Returns False when the item had to be stored but every slot was full.
        """
        if active:
            self._active.append(item)
            return True
        free = next((i for i, slot in enumerate(self._slots) if slot is None), None)
        if free is None:
            log.warning("No slots. %s", self._slots)
            return False
        self._slots[free] = item
        log.info("Added %r to %d", item, free)
        return True

    def use_item(self, index: int) -> bool:
        """Empty slot ``index``; True if it held an item."""
        if self.get_item(index) is None:
            return False
        self._slots[index] = None
        return True

    def take_active_items(self) -> list[Hashable]:
        """Return the queued items and empty the queue."""
        items = self._active
        self._active = []
        return items

    def get_item(self, index: int) -> Optional[Hashable]:
        """Return the item in slot ``index``, or None if the slot is empty or absent."""
        if 0 <= index < SLOT_COUNT:
            return self._slots[index]
        return None

    def clear_all(self) -> None:
        self._slots = [None] * SLOT_COUNT