"""Pairwise collision tracking between registered colliders."""

from __future__ import annotations

from typing import Any, Protocol


class Collider(Protocol):
    """What the physics manager expects of a collider."""

    owner: Any
    marked_for_cleanup: bool

    def clean_collisions(self) -> None: ...

    def is_colliding(self, other: "Collider") -> bool: ...

    def has_collided(self, other: "Collider") -> bool: ...

    def set_collided(self, other: "Collider", collided: bool) -> None: ...

    def on_collision_enter(self, other_owner: Any) -> None: ...

    def on_collision_exit(self, other_owner: Any) -> None: ...

    def on_collision_continue(self, other_owner: Any) -> None: ...


class PhysicsManager:
    """Checks every pair of tracked colliders and fires enter, exit and continue callbacks."""

    def __init__(self) -> None:
        self._tracked: list[Collider] = []
        self._untracked: list[Collider] = []

    @property
    def tracked(self) -> tuple[Collider, ...]:
        return tuple(self._tracked)

    def perform(self) -> None:
        colliders = list(self._tracked)
        for a in colliders:
            for b in colliders:
                if a is b:
                    continue
                colliding = a.is_colliding(b)
                both_collided = a.has_collided(b) and b.has_collided(a)
                if colliding and not a.has_collided(b) and not b.has_collided(a):
                    a.set_collided(b, True)
                    b.set_collided(a, True)
                    a.on_collision_enter(b.owner)
                    b.on_collision_enter(a.owner)
                elif not colliding and both_collided:
                    a.set_collided(b, False)
                    b.set_collided(a, False)
                    a.on_collision_exit(b.owner)
                    b.on_collision_exit(a.owner)

                if a.is_colliding(b) and a.has_collided(b) and b.has_collided(a):
                    a.on_collision_continue(b.owner)
                    b.on_collision_continue(a.owner)
        self.clean_up()

    def track_collider(self, collider: Collider) -> None:
        collider.clean_collisions()
        self._tracked.append(collider)

    def untrack_collider(self, collider: Collider) -> None:
        """Schedule ``collider`` for removal at the next clean-up."""
        self._untracked.append(collider)

    def clean_up(self) -> None:
        """Drop colliders scheduled for removal or marked for clean-up."""
        self._untracked.extend(c for c in self._tracked if c.marked_for_cleanup)
        for collider in self._untracked:
            index = next((i for i, c in enumerate(self._tracked) if c is collider), None)
            if index is not None:
                del self._tracked[index]
        self._untracked.clear()