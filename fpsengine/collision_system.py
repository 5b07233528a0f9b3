"""Registry of dynamic colliders with layer filtering and pairwise hit reporting."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from itertools import combinations
from typing import Any, Callable

from fpsengine.colliders import Collider, ColliderType, Vec3


class CollisionLayer(enum.IntFlag):
    """Bit flags naming what a collider is and what it collides with."""

    NONE = 0
    PLAYER = 1 << 0
    ENEMY = 1 << 1
    PROJECTILE = 1 << 2
    TRIGGER = 1 << 3
    ALL = 0xFFFFFFFF


def _has_flag(value: int, flag: int) -> bool:
    return (int(value) & int(flag)) != 0


@dataclass(eq=False)
class ColliderData:
    """A registered collider and its filtering settings."""

    collider: Collider
    layer: CollisionLayer = CollisionLayer.NONE
    mask: CollisionLayer = CollisionLayer.ALL
    user_data: Any = None
    collider_id: int = 0
    enabled: bool = True


@dataclass
class CollisionHit:
    """One overlapping pair found during an update."""

    data_a: ColliderData
    data_b: ColliderData
    penetration: Vec3 = field(default_factory=Vec3)


CollisionCallback = Callable[[CollisionHit], None]


class CollisionSystem:
    """Tests every enabled pair of registered colliders and reports hits."""

    def __init__(self) -> None:
        self._colliders: dict[int, ColliderData] = {}
        self._next_id = 1
        self._callback: CollisionCallback | None = None

    def __len__(self) -> int:
        return len(self._colliders)

    def __contains__(self, collider_id: object) -> bool:
        return collider_id in self._colliders

    def initialize(self) -> None:
        self._colliders.clear()
        self._next_id = 1

    def shutdown(self) -> None:
        self._colliders.clear()
        self._callback = None

    def register(
        self,
        collider: Collider,
        layer: CollisionLayer = CollisionLayer.NONE,
        mask: CollisionLayer = CollisionLayer.ALL,
        user_data: Any = None,
    ) -> int:
        """Register a collider and return its id."""
        if collider is None:
            raise ValueError("collider must not be None")
        collider_id = self._next_id
        self._next_id += 1
        self._colliders[collider_id] = ColliderData(
            collider=collider,
            layer=layer,
            mask=mask,
            user_data=user_data,
            collider_id=collider_id,
        )
        return collider_id

    def unregister(self, collider_id: int) -> None:
        self._colliders.pop(collider_id, None)

    def set_enabled(self, collider_id: int, enabled: bool) -> None:
        data = self._colliders.get(collider_id)
        if data is not None:
            data.enabled = enabled

    def set_callback(self, callback: CollisionCallback | None) -> None:
        self._callback = callback

    def update(self) -> None:
        """Report every overlapping, mutually accepted pair to the callback."""
        callback = self._callback
        if callback is None:
            return
        active = [d for d in self._colliders.values() if d.enabled and d.collider is not None]
        for a, b in combinations(active, 2):
            if not (_has_flag(a.mask, b.layer) and _has_flag(b.mask, a.layer)):
                continue
            if not a.collider.intersects(b.collider):
                continue
            penetration = Vec3()
            if (
                a.collider.collider_type is ColliderType.BOX
                and b.collider.collider_type is ColliderType.BOX
            ):
                penetration = a.collider.compute_penetration(b.collider) or Vec3()  # type: ignore[attr-defined]
            callback(CollisionHit(a, b, penetration))