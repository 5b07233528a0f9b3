"""Box and sphere colliders with overlap, containment and penetration tests."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Vec3:
    """An immutable three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def scaled_by(self, other: Vec3) -> Vec3:
        """Component-wise product."""
        return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z


class ColliderType(Enum):
    """Shape of a collider."""

    BOX = "box"
    SPHERE = "sphere"


class ColliderPurpose(Enum):
    """What a collider is used for."""

    BODY = "body"
    ATTACK = "attack"
    TRIGGER = "trigger"


class Collider(ABC):
    """Common state of every collider: transform and purpose."""

    collider_type: ColliderType

    def __init__(self, position: Vec3 = Vec3()) -> None:
        self.position = position
        self.rotation = Vec3()
        self.scale = Vec3(1.0, 1.0, 1.0)
        self.purpose = ColliderPurpose.BODY

    @property
    def center(self) -> Vec3:
        return self.position

    @center.setter
    def center(self, value: Vec3) -> None:
        self.position = value

    @abstractmethod
    def intersects(self, other: Collider | None) -> bool:
        """Whether this collider overlaps ``other``."""

    @abstractmethod
    def bounds(self) -> tuple[Vec3, Vec3]:
        """World-space axis-aligned bounds as ``(min, max)``."""


class BoxCollider(Collider):
    """An axis-aligned box; rotation is stored but does not affect bounds."""

    collider_type = ColliderType.BOX

    def __init__(self, center: Vec3 = Vec3(), size: Vec3 = Vec3(1.0, 1.0, 1.0)) -> None:
        super().__init__(center)
        self.size = size

    def __repr__(self) -> str:
        return f"BoxCollider(center={self.position!r}, size={self.size!r})"

    def set_transform(self, position: Vec3, rotation: Vec3, scale: Vec3) -> None:
        self.position = position
        self.rotation = rotation
        self.scale = scale

    @property
    def half_extents(self) -> Vec3:
        return self.size.scaled_by(self.scale) * 0.5

    @property
    def min_corner(self) -> Vec3:
        return self.position - self.half_extents

    @property
    def max_corner(self) -> Vec3:
        return self.position + self.half_extents

    def bounds(self) -> tuple[Vec3, Vec3]:
        return self.min_corner, self.max_corner

    def intersects(self, other: Collider | None) -> bool:
        if other is None:
            return False
        if other.collider_type is ColliderType.BOX:
            return self._intersects_box(other)  # type: ignore[arg-type]
        if other.collider_type is ColliderType.SPHERE:
            return self._intersects_sphere(other)  # type: ignore[arg-type]
        return False

    def _intersects_box(self, other: BoxCollider) -> bool:
        lo, hi = self.bounds()
        olo, ohi = other.bounds()
        return all(l <= oh and h >= ol for l, h, ol, oh in zip(lo, hi, olo, ohi))

    def _intersects_sphere(self, other: SphereCollider) -> bool:
        lo, hi = self.bounds()
        center = other.center
        radius = other.world_radius
        closest = Vec3(*(min(max(c, l), h) for c, l, h in zip(center, lo, hi)))
        return (center - closest).length_squared() <= radius * radius

    def contains(self, point: Vec3) -> bool:
        lo, hi = self.bounds()
        return all(l <= p <= h for p, l, h in zip(point, lo, hi))

    def compute_penetration(self, other: BoxCollider) -> Vec3 | None:
        """Smallest-axis push that separates this box from ``other``, or None."""
        if not self._intersects_box(other):
            return None
        lo, hi = self.bounds()
        olo, ohi = other.bounds()
        overlaps = [min(h - ol, oh - l) for l, h, ol, oh in zip(lo, hi, olo, ohi)]
        ox, oy, oz = overlaps
        if ox <= oy and ox <= oz:
            axis = 0
        elif oy <= oz:
            axis = 1
        else:
            axis = 2
        my_center = (tuple(lo)[axis] + tuple(hi)[axis]) * 0.5
        other_center = (tuple(olo)[axis] + tuple(ohi)[axis]) * 0.5
        amount = -overlaps[axis] if my_center < other_center else overlaps[axis]
        components = [0.0, 0.0, 0.0]
        components[axis] = amount
        return Vec3(*components)


class SphereCollider(Collider):
    """A sphere whose world radius grows with the largest scale component."""

    collider_type = ColliderType.SPHERE

    def __init__(self, center: Vec3 = Vec3(), radius: float = 1.0) -> None:
        super().__init__(center)
        self.radius = radius

    def __repr__(self) -> str:
        return f"SphereCollider(center={self.position!r}, radius={self.radius!r})"

    @property
    def world_radius(self) -> float:
        return self.radius * max(self.scale)

    def bounds(self) -> tuple[Vec3, Vec3]:
        r = self.world_radius
        extent = Vec3(r, r, r)
        return self.position - extent, self.position + extent

    def intersects(self, other: Collider | None) -> bool:
        if other is None:
            return False
        if other.collider_type is ColliderType.SPHERE:
            dist_sq = (self.position - other.position).length_squared()
            radius_sum = self.world_radius + other.world_radius  # type: ignore[attr-defined]
            return dist_sq <= radius_sum * radius_sum
        if other.collider_type is ColliderType.BOX:
            return other.intersects(self)
        return False


def _distance(a: Vec3, b: Vec3) -> float:
    return math.sqrt((a - b).length_squared())