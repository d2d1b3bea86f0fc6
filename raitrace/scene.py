"""A scene flattened for rendering: spheres, one triangle list and per-mesh ranges."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from raitrace.geometry import Mesh, MeshInfo, Sphere, Triangle


@dataclass
class Scene:
    """Spheres plus all mesh triangles packed into one list.

    Each entry in ``meshes_info`` records where its mesh's triangles start in
    ``triangles`` and how many there are.
    """

    spheres: List[Sphere] = field(default_factory=list)
    triangles: List[Triangle] = field(default_factory=list)
    meshes_info: List[MeshInfo] = field(default_factory=list)

    @property
    def spheres_count(self) -> int:
        return len(self.spheres)

    @property
    def triangles_count(self) -> int:
        return len(self.triangles)

    @property
    def meshes_count(self) -> int:
        return len(self.meshes_info)

    def upload(self, spheres: Iterable[Sphere], meshes: Iterable[Mesh]) -> None:
        """Replace the scene contents with the given spheres and meshes."""
        self.clear()
        self.spheres = list(spheres)
        for mesh in meshes:
            self.meshes_info.append(
                MeshInfo(
                    triangle_start=len(self.triangles),
                    triangle_count=len(mesh.triangles),
                    material=mesh.material,
                    bounding_box=mesh.bounding_box,
                )
            )
            self.triangles.extend(mesh.triangles)

    def clear(self) -> None:
        """Remove everything from the scene."""
        self.spheres = []
        self.triangles = []
        self.meshes_info = []

    def mesh_triangles(self, index: int) -> List[Triangle]:
        """Return the triangles of the mesh at ``index``."""
        info = self.meshes_info[index]
        return self.triangles[info.triangle_start : info.triangle_start + info.triangle_count]


def upload_scene(scene: Scene, spheres: Iterable[Sphere], meshes: Iterable[Mesh]) -> None:
    """Replace the contents of ``scene`` with the given spheres and meshes."""
    scene.upload(spheres, meshes)


def free_scene(scene: Scene) -> None:
    """Empty ``scene``."""
    scene.clear()