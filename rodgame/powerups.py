"""Timed power-ups collected by the player."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Hashable, Optional, Protocol

from .settings import (
    GAME_SPEED,
    PWR_DAMAGE_DURATION,
    PWR_FREEZE_DURATION,
    PWR_INVINCIBILITY_DURATION,
)

log = logging.getLogger(__name__)


class PowerUp(Enum):
    """The kinds of power-up an item can grant."""

    HEALTH = "health"
    DAMAGE = "damage"
    PIERCE = "pierce"
    INVINCIBILITY = "invincibility"
    FREEZE = "freeze"


_SOUNDS = {
    PowerUp.HEALTH: "health",
    PowerUp.DAMAGE: "damage",
    PowerUp.PIERCE: "piercing",
    PowerUp.INVINCIBILITY: "invincibility",
    PowerUp.FREEZE: "freeze",
}

_DURATIONS = {
    PowerUp.DAMAGE: PWR_DAMAGE_DURATION,
    PowerUp.INVINCIBILITY: PWR_INVINCIBILITY_DURATION,
    PowerUp.FREEZE: PWR_FREEZE_DURATION,
}


class _ActiveItems(Protocol):
    def take_active_items(self) -> list[Hashable]: ...


class _Player(Protocol):
    def random_increment_health(self) -> None: ...


class PowerUpSystem:
    """Activates queued power-ups and counts their durations down once a second."""

    FRAME_INTERVAL = 1.0

    def __init__(
        self,
        items: _ActiveItems,
        player_lookup: Callable[[], Optional[_Player]],
        play_sound: Optional[Callable[[str], None]] = None,
    ) -> None:
        self.items = items
        self.player_lookup = player_lookup
        self.play_sound = play_sound
        self._levels: dict[PowerUp, float] = {}
        self._ticks = 0.0

    @property
    def levels(self) -> dict[PowerUp, float]:
        """Remaining level of every power-up that has been touched."""
        return dict(self._levels)

    def _level(self, kind: PowerUp) -> float:
        return self._levels.get(kind, 0.0)

    def perform(self, delta: float) -> None:
        """Advance by ``delta`` seconds; work happens once per elapsed interval."""
        self._ticks += delta * GAME_SPEED
        if self._ticks <= self.FRAME_INTERVAL:
            return

        for item in self.items.take_active_items():
            self.activate_power_up(item)

        if self._level(PowerUp.HEALTH) > 0:
            player = self.player_lookup()
            if player is not None:
                while self._level(PowerUp.HEALTH) > 0:
                    self._levels[PowerUp.HEALTH] -= 1
                    player.random_increment_health()

        for kind in (PowerUp.DAMAGE, PowerUp.INVINCIBILITY, PowerUp.FREEZE):
            if self._level(kind) > 0:
                self._levels[kind] -= 1.0
                log.debug("%s %s", kind.name, self._levels[kind])
            else:
                self._levels[kind] = 0.0

        self._ticks = 0.0

    def activate_power_up(self, kind: Hashable) -> None:
        """Start or extend a power-up; anything that is not a PowerUp is ignored."""
        if not isinstance(kind, PowerUp):
            return
        if kind is PowerUp.HEALTH:
            self._levels[kind] = self._level(kind) + 1.0
        elif kind is PowerUp.PIERCE:
            self._levels[kind] = 1.0
        else:
            self._levels[kind] = _DURATIONS[kind]
        if self.play_sound is not None:
            self.play_sound(_SOUNDS[kind])

    def clear_power_up(self, kind: PowerUp) -> None:
        self._levels[kind] = 0.0

    def clear_all(self) -> None:
        self._levels.clear()

    def is_active(self, kind: PowerUp) -> bool:
        return self._level(kind) != 0