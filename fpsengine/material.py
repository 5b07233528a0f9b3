"""Surface material parameters and their constant-buffer layout."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from typing import Any, Iterable

Color = tuple[float, float, float, float]

_LAYOUT = struct.Struct("<20f")  # four RGBA colors, shininess, three padding floats


def _color(value: Iterable[float]) -> Color:
    components = tuple(float(c) for c in value)
    if len(components) != 4:
        raise ValueError(f"a color needs 4 components, got {len(components)}")
    return components  # type: ignore[return-value]


@dataclass
class MaterialData:
    """Lighting coefficients laid out for a 16-byte aligned constant buffer."""

    ambient: Color = (0.2, 0.2, 0.2, 1.0)
    diffuse: Color = (1.0, 1.0, 1.0, 1.0)
    specular: Color = (0.0, 0.0, 0.0, 1.0)
    emission: Color = (0.0, 0.0, 0.0, 1.0)
    shininess: float = 0.0

    def __post_init__(self) -> None:
        self.ambient = _color(self.ambient)
        self.diffuse = _color(self.diffuse)
        self.specular = _color(self.specular)
        self.emission = _color(self.emission)
        self.shininess = float(self.shininess)

    def pack(self) -> bytes:
        """Little-endian 80-byte buffer image of this data."""
        return _LAYOUT.pack(
            *self.ambient,
            *self.diffuse,
            *self.specular,
            *self.emission,
            self.shininess,
            0.0,
            0.0,
            0.0,
        )


class Material:
    """Material parameters plus an optional, externally owned texture."""

    def __init__(self, data: MaterialData | None = None, texture: Any = None) -> None:
        self.data = data if data is not None else MaterialData()
        self.texture = texture

    def __repr__(self) -> str:
        return f"Material(data={self.data!r}, texture={self.texture!r})"

    @property
    def diffuse(self) -> Color:
        return self.data.diffuse

    @diffuse.setter
    def diffuse(self, color: Iterable[float]) -> None:
        self.data.diffuse = _color(color)

    @property
    def ambient(self) -> Color:
        return self.data.ambient

    @ambient.setter
    def ambient(self, color: Iterable[float]) -> None:
        self.data.ambient = _color(color)

    @property
    def emission(self) -> Color:
        return self.data.emission

    @emission.setter
    def emission(self, color: Iterable[float]) -> None:
        self.data.emission = _color(color)

    @property
    def specular(self) -> Color:
        return self.data.specular

    @property
    def shininess(self) -> float:
        return self.data.shininess

    def set_specular(self, color: Iterable[float], shininess: float) -> None:
        self.data.specular = _color(color)
        self.data.shininess = float(shininess)


def default_material() -> Material:
    """A material with opaque white diffuse color."""
    material = Material()
    material.diffuse = (1.0, 1.0, 1.0, 1.0)
    return material