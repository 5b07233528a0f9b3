"""Builders for box, plane and UV-sphere meshes."""

from __future__ import annotations

import math

from fpsengine.colliders import Vec3
from fpsengine.mesh import Mesh, Vertex3D

_QUAD_UVS = ((0.0, 0.0), (1.0, 0.0), (0.0, 1.0), (1.0, 1.0))
_QUAD_ORDER = (0, 1, 2, 2, 1, 3)

# Each face: outward normal and the sign of each corner along x, y, z.
_BOX_FACES = (
    (Vec3(0.0, 0.0, -1.0), ((-1, 1, -1), (1, 1, -1), (-1, -1, -1), (1, -1, -1))),
    (Vec3(0.0, 0.0, 1.0), ((1, 1, 1), (-1, 1, 1), (1, -1, 1), (-1, -1, 1))),
    (Vec3(-1.0, 0.0, 0.0), ((-1, 1, 1), (-1, 1, -1), (-1, -1, 1), (-1, -1, -1))),
    (Vec3(1.0, 0.0, 0.0), ((1, 1, -1), (1, 1, 1), (1, -1, -1), (1, -1, 1))),
    (Vec3(0.0, 1.0, 0.0), ((-1, 1, 1), (1, 1, 1), (-1, 1, -1), (1, 1, -1))),
    (Vec3(0.0, -1.0, 0.0), ((-1, -1, -1), (1, -1, -1), (-1, -1, 1), (1, -1, 1))),
)


def create_box(size_x: float = 1.0, size_y: float = 1.0, size_z: float = 1.0) -> Mesh:
    """A box centered on the origin with four vertices per face."""
    half = Vec3(size_x * 0.5, size_y * 0.5, size_z * 0.5)
    vertices = [
        Vertex3D(Vec3(*signs).scaled_by(half), normal, tex_coord=uv)
        for normal, corners in _BOX_FACES
        for signs, uv in zip(corners, _QUAD_UVS)
    ]
    indices = [face * 4 + i for face in range(len(_BOX_FACES)) for i in _QUAD_ORDER]
    return Mesh(vertices, indices)


def create_plane(width: float = 1.0, height: float = 1.0) -> Mesh:
    """A quad on the XZ plane facing +Y."""
    hw = width * 0.5
    hh = height * 0.5
    up = Vec3(0.0, 1.0, 0.0)
    corners = (Vec3(-hw, 0.0, hh), Vec3(hw, 0.0, hh), Vec3(-hw, 0.0, -hh), Vec3(hw, 0.0, -hh))
    vertices = [Vertex3D(pos, up, tex_coord=uv) for pos, uv in zip(corners, _QUAD_UVS)]
    return Mesh(vertices, _QUAD_ORDER)


def create_sphere(radius: float = 0.5, slices: int = 16, stacks: int = 16) -> Mesh:
    """A UV sphere with ``(slices + 1) * (stacks + 1)`` vertices."""
    if slices < 1 or stacks < 1:
        raise ValueError(f"slices and stacks must be positive, got {slices}, {stacks}")

    vertices = []
    for stack in range(stacks + 1):
        phi = math.pi * stack / stacks
        sin_phi, cos_phi = math.sin(phi), math.cos(phi)
        for slice_ in range(slices + 1):
            theta = 2.0 * math.pi * slice_ / slices
            normal = Vec3(math.cos(theta) * sin_phi, cos_phi, math.sin(theta) * sin_phi)
            vertices.append(
                Vertex3D(normal * radius, normal, tex_coord=(slice_ / slices, stack / stacks))
            )

    indices = []
    for stack in range(stacks):
        for slice_ in range(slices):
            first = stack * (slices + 1) + slice_
            second = first + slices + 1
            indices.extend((first, second, first + 1, second, second + 1, first + 1))

    return Mesh(vertices, indices)


def box_triangle_list() -> list[Vertex3D]:
    """The unit box expanded into 36 unindexed triangle-list vertices."""
    box = create_box()
    return [box.vertices[i] for i in box.indices]