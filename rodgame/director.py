"""Enemy templates by rarity and the director that spawns enemy waves."""

from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Any, Callable, Hashable, Optional, Protocol, Union

from .pooling import GameObjectPool, ObjectPoolManager

log = logging.getLogger(__name__)


class EnemyType(Enum):
    """Enemy rarity."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    ELITE = "elite"


class Enemy(Protocol):
    """What the enemy registry and director expect of an enemy template."""

    tag: Hashable
    enemy_type: EnemyType
    enabled: bool

    def clone(self) -> "Enemy": ...

    def on_activate(self) -> None: ...

    def on_release(self) -> None: ...


class EnemyManager:
    """Enemy templates grouped by rarity, plus the enemies in play."""

    def __init__(self) -> None:
        self._by_type: dict[EnemyType, list[Enemy]] = {}
        self._enemies: list[Enemy] = []

    @property
    def enemies(self) -> list[Enemy]:
        return list(self._enemies)

    def register(self, enemy: Enemy) -> None:
        """Add ``enemy`` as a template of its rarity."""
        self._by_type.setdefault(enemy.enemy_type, []).append(enemy)

    def add_enemy(self, enemy: Enemy) -> None:
        self._enemies.append(enemy)

    def get_all_type(self, enemy_type: EnemyType) -> list[Enemy]:
        return list(self._by_type.get(enemy_type, ()))

    def clear_all(self) -> None:
        self._by_type.clear()
        self._enemies.clear()


POOL_SIZES = {
    EnemyType.COMMON: 6,
    EnemyType.UNCOMMON: 3,
    EnemyType.ELITE: 2,
}


class EnemyDirector:
    """Builds a pool per enemy template and spawns ever harder waves over time."""

    UPDATE_INTERVAL = 8.0
    LUCK_PERCENT = 0.20

    def __init__(
        self,
        enemies: EnemyManager,
        pools: ObjectPoolManager,
        objects: Optional[Any] = None,
        partition_count: Union[int, Callable[[], int]] = 1,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.enemies = enemies
        self.pools = pools
        self.objects = objects
        self.partition_count = partition_count
        self.rng = rng if rng is not None else random.Random()
        self.ticks = 0.0
        self.update_ticks = 0.0

        for enemy_type in EnemyType:
            for enemy in enemies.get_all_type(enemy_type):
                self._create_pool(POOL_SIZES[enemy_type], enemy)

    def _create_pool(self, size: int, enemy: Enemy) -> None:
        pool = GameObjectPool(enemy.tag, size, enemy, None, self.objects)
        pool.initialize()
        self.pools.register_pool(pool)

    def _partitions(self) -> int:
        count = self.partition_count
        return count() if callable(count) else count

    def spawn_wave(self) -> None:
        """Request a wave of enemies sized by elapsed time and screen count."""
        spawn_count = int(self.ticks * self._partitions())
        luck = spawn_count * self.randomize_percent(self.LUCK_PERCENT)
        spawn_count = int(spawn_count - luck)

        decay = 0.02 * (self.ticks / 5.0)
        common_share = 0.7 - decay
        uncommon_share = (1 - common_share) * 0.6
        elite_share = 1 - (common_share + uncommon_share)

        for enemy_type, share in (
            (EnemyType.COMMON, common_share),
            (EnemyType.UNCOMMON, uncommon_share),
            (EnemyType.ELITE, elite_share),
        ):
            templates = self.enemies.get_all_type(enemy_type)
            if not templates:
                continue
            rounds = int(share * spawn_count / len(templates))
            for _ in range(rounds):
                for enemy in templates:
                    self.pools.get_pool(enemy.tag).request_poolable()

    def randomize_percent(self, maximum: float) -> float:
        """A random fraction in whole percent, from 0 up to but excluding ``maximum``."""
        whole = int(maximum * 100)
        if whole <= 0:
            raise ValueError(f"maximum must be at least 0.01, got {maximum}")
        value = self.rng.randrange(whole) / 100.0
        log.debug("luck %s", value)
        return value

    def perform(self, delta: float) -> None:
        """Advance by ``delta`` seconds, spawning a wave each update interval."""
        self.ticks += delta
        self.update_ticks += delta
        if self.update_ticks > self.UPDATE_INTERVAL:
            self.update_ticks = 0.0
            self.spawn_wave()