"""Vertex format and CPU-side triangle meshes with cached bounds."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from fpsengine.colliders import Vec3

Color = tuple[float, float, float, float]
TexCoord = tuple[float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


@dataclass(frozen=True, slots=True)
class Vertex3D:
    """A vertex with position, normal, RGBA color and texture coordinate."""

    position: Vec3 = Vec3()
    normal: Vec3 = Vec3()
    color: Color = WHITE
    tex_coord: TexCoord = (0.0, 0.0)


class Mesh:
    """Vertices and optional triangle-list indices."""

    def __init__(
        self, vertices: Iterable[Vertex3D] = (), indices: Iterable[int] = ()
    ) -> None:
        self.vertices = vertices
        self.indices = indices

    def __repr__(self) -> str:
        return f"Mesh(vertices={self.vertex_count}, indices={self.index_count})"

    @property
    def vertices(self) -> tuple[Vertex3D, ...]:
        return self._vertices

    @vertices.setter
    def vertices(self, vertices: Iterable[Vertex3D]) -> None:
        self._vertices = tuple(vertices)
        self._bounds: tuple[Vec3, Vec3] | None = None

    @property
    def indices(self) -> tuple[int, ...]:
        return self._indices

    @indices.setter
    def indices(self, indices: Iterable[int]) -> None:
        self._indices = tuple(indices)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def index_count(self) -> int:
        return len(self._indices)

    @property
    def has_indices(self) -> bool:
        return bool(self._indices)

    def bounds(self) -> tuple[Vec3, Vec3]:
        """Axis-aligned bounds of the vertex positions; zero for an empty mesh."""
        if self._bounds is None:
            self._bounds = self._compute_bounds()
        return self._bounds

    def _compute_bounds(self) -> tuple[Vec3, Vec3]:
        if not self._vertices:
            return Vec3(), Vec3()
        xs, ys, zs = zip(*(tuple(v.position) for v in self._vertices))
        return Vec3(min(xs), min(ys), min(zs)), Vec3(max(xs), max(ys), max(zs))