"""Static map blocks on a uniform grid, and a facade over dynamic and map collision."""

from __future__ import annotations

import math
from dataclasses import dataclass
from itertools import product
from typing import Any

from fpsengine.colliders import BoxCollider, Collider, Vec3
from fpsengine.collision_system import CollisionCallback, CollisionLayer, CollisionSystem

_COORD_MASK = 0x1FFFFF
_DEFAULT_CELL_SIZE = 2.0
_DEFAULT_CHECK_RADIUS = 3.0


class MapCollision:
    """Static boxes bucketed by the grid cell of their center."""

    def __init__(self, cell_size: float = _DEFAULT_CELL_SIZE) -> None:
        self._cell_size = _checked_cell_size(cell_size)
        self._grid: dict[tuple[int, int, int], list[BoxCollider]] = {}

    @property
    def cell_size(self) -> float:
        return self._cell_size

    def __len__(self) -> int:
        return sum(len(blocks) for blocks in self._grid.values())

    def initialize(self, cell_size: float = _DEFAULT_CELL_SIZE) -> None:
        self._cell_size = _checked_cell_size(cell_size)
        self._grid.clear()

    def register_block(self, block: BoxCollider) -> None:
        if block is None:
            raise ValueError("block must not be None")
        key = _cell_key(*self._cell_coord(block.center))
        self._grid.setdefault(key, []).append(block)

    def clear(self) -> None:
        self._grid.clear()

    def _cell_coord(self, position: Vec3) -> tuple[int, int, int]:
        return tuple(math.floor(c / self._cell_size) for c in position)  # type: ignore[return-value]

    def nearby_blocks(self, position: Vec3, radius: float) -> list[BoxCollider]:
        """Blocks registered in cells within ``radius`` (plus one cell) of ``position``."""
        cx, cy, cz = self._cell_coord(position)
        reach = math.ceil(radius / self._cell_size) + 1
        offsets = range(-reach, reach + 1)
        result: list[BoxCollider] = []
        for dx, dy, dz in product(offsets, offsets, offsets):
            result.extend(self._grid.get(_cell_key(cx + dx, cy + dy, cz + dz), ()))
        return result

    def check_collision(self, moving: BoxCollider) -> Vec3 | None:
        """Penetration against the first nearby block that overlaps, or None."""
        if moving is None:
            return None
        for block in self.nearby_blocks(moving.center, _DEFAULT_CHECK_RADIUS):
            penetration = moving.compute_penetration(block)
            if penetration is not None:
                return penetration
        return None

    def check_collision_all(
        self, moving: BoxCollider, check_radius: float = _DEFAULT_CHECK_RADIUS
    ) -> list[Vec3]:
        """Penetrations against every nearby overlapping block."""
        if moving is None:
            return []
        penetrations = (
            moving.compute_penetration(block)
            for block in self.nearby_blocks(moving.center, check_radius)
        )
        return [p for p in penetrations if p is not None]


@dataclass(frozen=True)
class MapResolution:
    """Outcome of pushing a body out of the map."""

    collided: bool
    position: Vec3
    velocity: Vec3
    grounded: bool


class CollisionManager:
    """Single entry point to dynamic collision and static map collision."""

    def __init__(self, cell_size: float = _DEFAULT_CELL_SIZE) -> None:
        self.system = CollisionSystem()
        self.map = MapCollision(cell_size)

    def initialize(self, cell_size: float = _DEFAULT_CELL_SIZE) -> None:
        self.system.initialize()
        self.map.initialize(cell_size)

    def shutdown(self) -> None:
        self.system.shutdown()
        self.map.clear()

    def update(self) -> None:
        self.system.update()

    def register_dynamic(
        self,
        collider: Collider,
        layer: CollisionLayer = CollisionLayer.NONE,
        mask: CollisionLayer = CollisionLayer.ALL,
        user_data: Any = None,
    ) -> int:
        return self.system.register(collider, layer, mask, user_data)

    def unregister_dynamic(self, collider_id: int) -> None:
        self.system.unregister(collider_id)

    def set_enabled(self, collider_id: int, enabled: bool) -> None:
        self.system.set_enabled(collider_id, enabled)

    def set_callback(self, callback: CollisionCallback | None) -> None:
        self.system.set_callback(callback)

    def register_map_block(self, block: BoxCollider) -> None:
        self.map.register_block(block)

    def check_map_collision(self, collider: BoxCollider) -> Vec3 | None:
        return self.map.check_collision(collider)

    def check_map_collision_all(self, collider: BoxCollider, radius: float) -> list[Vec3]:
        return self.map.check_collision_all(collider, radius)

    def resolve_map_collision(
        self, collider: BoxCollider, position: Vec3, velocity: Vec3
    ) -> MapResolution:
        """Apply every map penetration to ``position`` and cancel blocked velocity."""
        penetrations = self.map.check_collision_all(collider, _DEFAULT_CHECK_RADIUS)
        grounded = False
        for pen in penetrations:
            position = position + pen
            velocity = Vec3(
                0.0 if pen.x != 0.0 else velocity.x,
                0.0 if pen.y != 0.0 else velocity.y,
                0.0 if pen.z != 0.0 else velocity.z,
            )
            if pen.y > 0.0:
                grounded = True
        return MapResolution(bool(penetrations), position, velocity, grounded)


def _checked_cell_size(cell_size: float) -> float:
    if not cell_size > 0:
        raise ValueError(f"cell size must be positive, got {cell_size!r}")
    return float(cell_size)


def _cell_key(x: int, y: int, z: int) -> tuple[int, int, int]:
    return x & _COORD_MASK, y & _COORD_MASK, z & _COORD_MASK