"""Plain value types shared by the ray tracer: boxes, materials, primitives and rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Sequence, Tuple

Vec3 = Tuple[float, float, float]

FLT_MAX = 3.4028234663852886e38
"""Largest finite single-precision float; bounds of an empty box start from it."""


def _vec3(value: Sequence[float]) -> Vec3:
    x, y, z = value
    return (float(x), float(y), float(z))


def _coerce(obj: object, *names: str) -> None:
    for name in names:
        object.__setattr__(obj, name, _vec3(getattr(obj, name)))


@dataclass(frozen=True)
class Aabb:
    """Axis-aligned bounding box given by its minimum and maximum corners."""

    min: Vec3
    max: Vec3

    def __post_init__(self) -> None:
        _coerce(self, "min", "max")

    def contains(self, point: Sequence[float]) -> bool:
        """Return True if the point lies inside the box or on its boundary."""
        return all(lo <= p <= hi for lo, p, hi in zip(self.min, _vec3(point), self.max))


def bounding_box(points: Iterable[Sequence[float]]) -> Aabb:
    """Return the smallest box holding every point.

    With no points the box is inverted, spanning from FLT_MAX down to -FLT_MAX.
    """
    lo = [FLT_MAX] * 3
    hi = [-FLT_MAX] * 3
    for point in points:
        for axis, value in enumerate(_vec3(point)):
            lo[axis] = min(lo[axis], value)
            hi[axis] = max(hi[axis], value)
    return Aabb(tuple(lo), tuple(hi))


@dataclass(frozen=True)
class Material:
    """Surface response: diffuse colour, emission and specular reflection."""

    color: Vec3 = (1.0, 1.0, 1.0)
    emission_color: Vec3 = (0.0, 0.0, 0.0)
    emission_strength: float = 0.0
    smoothness: float = 0.0
    specular_color: Vec3 = (1.0, 1.0, 1.0)
    specular_probability: float = 0.0

    def __post_init__(self) -> None:
        _coerce(self, "color", "emission_color", "specular_color")


@dataclass(frozen=True)
class Triangle:
    """Three vertices with one normal per vertex."""

    vertices: Tuple[Vec3, Vec3, Vec3]
    normals: Tuple[Vec3, Vec3, Vec3]

    def __post_init__(self) -> None:
        if len(self.vertices) != 3 or len(self.normals) != 3:
            raise ValueError("a triangle needs exactly three vertices and three normals")
        object.__setattr__(self, "vertices", tuple(_vec3(v) for v in self.vertices))
        object.__setattr__(self, "normals", tuple(_vec3(n) for n in self.normals))


@dataclass
class Mesh:
    """A list of triangles sharing one material and bounding box."""

    triangles: list = field(default_factory=list)
    material: Material = field(default_factory=Material)
    bounding_box: Aabb = field(default_factory=lambda: bounding_box(()))


@dataclass(frozen=True)
class MeshInfo:
    """Where a mesh's triangles sit in a scene's flat triangle list."""

    triangle_start: int
    triangle_count: int
    material: Material
    bounding_box: Aabb


@dataclass(frozen=True)
class Sphere:
    center: Vec3
    radius: float
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        _coerce(self, "center")
        object.__setattr__(self, "radius", float(self.radius))


@dataclass(frozen=True)
class SkyBox:
    """Gradient sky with a sun, used for rays that leave the scene."""

    is_hidden: bool = False
    ground_color: Vec3 = (0.0, 0.0, 0.0)
    zenith_color: Vec3 = (0.0, 0.0, 0.0)
    horizon_color: Vec3 = (0.0, 0.0, 0.0)
    sun_focus: float = 0.0
    sun_intensity: float = 0.0
    sun_direction: Vec3 = (0.0, 1.0, 0.0)
    brightness: float = 1.0

    def __post_init__(self) -> None:
        _coerce(self, "ground_color", "zenith_color", "horizon_color", "sun_direction")


@dataclass(frozen=True)
class Ray:
    origin: Vec3
    direction: Vec3

    def __post_init__(self) -> None:
        _coerce(self, "origin", "direction")


@dataclass(frozen=True)
class HitInfo:
    """Result of intersecting a ray with the scene."""

    did_hit: bool = False
    distance: float = math.inf
    point: Vec3 = (0.0, 0.0, 0.0)
    normal: Vec3 = (0.0, 0.0, 0.0)
    material: Material = field(default_factory=Material)

    def __post_init__(self) -> None:
        _coerce(self, "point", "normal")