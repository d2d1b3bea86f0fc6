"""The built-in scene and camera, and a command that builds and describes them."""

from __future__ import annotations

import argparse
import math
import sys
from typing import List, Optional, Sequence

from raitrace.camera import Camera
from raitrace.geometry import Material, Mesh, Sphere, Triangle, bounding_box
from raitrace.mesh_loader import ObjLoadError, load_meshes_from_obj
from raitrace.scene import Scene
from raitrace.settings import default_render_settings, rendering_context

RENDER_WIDTH = 1085
RENDER_HEIGHT = 1026

WHITE = Material((1.0, 1.0, 1.0), (0.0, 0.0, 0.0), 0.0, 0.0, (1.0, 1.0, 1.0), 0.0)
RED = Material((0.9, 0.1, 0.1), (0.0, 0.0, 0.0), 0.0, 0.0, (1.0, 1.0, 1.0), 0.0)
GREEN = Material((0.1, 0.9, 0.1), (0.0, 0.0, 0.0), 0.0, 0.0, (1.0, 1.0, 1.0), 0.0)
LIGHT = Material((0.0, 0.0, 0.0), (1.0, 1.0, 1.0), 20.0, 0.0, (1.0, 1.0, 1.0), 0.0)


def make_quad(v0, v1, v2, v3, material: Material) -> Mesh:
    """Two triangles spanning a planar quad, with the face normal on every vertex."""
    a = [p - q for p, q in zip(v1, v0)]
    b = [p - q for p, q in zip(v2, v0)]
    cross = (a[1] * b[2] - a[2] * b[1], a[2] * b[0] - a[0] * b[2], a[0] * b[1] - a[1] * b[0])
    length = math.sqrt(sum(c * c for c in cross))
    if length == 0.0:
        raise ValueError("quad corners are degenerate")
    normal = tuple(c / length for c in cross)
    normals = (normal, normal, normal)
    triangles = [Triangle((v0, v1, v2), normals), Triangle((v0, v2, v3), normals)]
    return Mesh(triangles=triangles, material=material, bounding_box=bounding_box((v0, v1, v2, v3)))


def make_cornell_box() -> List[Mesh]:
    """Floor, ceiling, three walls, a front wall and a ceiling light."""
    return [
        make_quad((-2, 0, 2), (2, 0, 2), (2, 0, -2), (-2, 0, -2), WHITE),  # floor
        make_quad((-2, 4, -2), (2, 4, -2), (2, 4, 2), (-2, 4, 2), WHITE),  # ceiling
        make_quad((-2, 0, -2), (2, 0, -2), (2, 4, -2), (-2, 4, -2), WHITE),  # back
        make_quad((-2, 0, 2), (-2, 0, -2), (-2, 4, -2), (-2, 4, 2), RED),  # left
        make_quad((2, 0, -2), (2, 0, 2), (2, 4, 2), (2, 4, -2), GREEN),  # right
        make_quad((2, 0, 2), (-2, 0, 2), (-2, 4, 2), (2, 4, 2), WHITE),  # front
        make_quad((-0.5, 3.99, -0.5), (0.5, 3.99, -0.5), (0.5, 3.99, 0.5), (-0.5, 3.99, 0.5), LIGHT),
    ]


def make_spheres() -> List[Sphere]:
    """Three spheres in a row: a glossy mirror, a matte red and a semi-glossy blue."""
    mirror = Material((0.95, 0.95, 0.95), (0.0, 0.0, 0.0), 0.0, 1.0, (1.0, 1.0, 1.0), 0.2)
    matte = Material((0.8, 0.2, 0.2), (0.0, 0.0, 0.0), 0.0, 0.0, (1.0, 1.0, 1.0), 0.0)
    glossy = Material((0.2, 0.6, 0.9), (0.0, 0.0, 0.0), 0.0, 0.2, (1.0, 1.0, 1.0), 0.2)
    return [
        Sphere((0.0, 1.0, 0.0), 0.5, mirror),
        Sphere((-1.2, 1.0, 0.0), 0.5, matte),
        Sphere((1.2, 1.0, 0.0), 0.5, glossy),
    ]


def make_scene() -> Scene:
    """The Cornell box with its three spheres."""
    scene = Scene()
    scene.upload(make_spheres(), make_cornell_box())
    return scene


def default_camera() -> Camera:
    """Camera standing in front of the box, looking in."""
    return Camera(
        near_plane=0.1,
        far_plane=100.0,
        fov=45.0,
        aspect=RENDER_WIDTH / RENDER_HEIGHT,
        position=(0.0, 1.0, 3.85),
        direction=(0.0, 0.0, -1.0),
        speed=3.0,
        sensitivity=0.005,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Build the default scene and print what the renderer would receive."""
    parser = argparse.ArgumentParser(prog="raitrace", description="Build the default ray-tracing scene.")
    parser.add_argument("--obj", action="append", default=[], help="OBJ file to add to the scene")
    args = parser.parse_args(argv)

    extra: List[Mesh] = []
    for path in args.obj:
        try:
            extra.extend(load_meshes_from_obj(path, WHITE))
        except ObjLoadError as exc:
            print(f"error: {exc}", file=sys.stderr)
            return 1

    if extra:
        scene = Scene()
        scene.upload(make_spheres(), [*make_cornell_box(), *extra])
    else:
        scene = make_scene()
    context = rendering_context(default_camera(), default_render_settings())

    print(f"resolution: {RENDER_WIDTH}x{RENDER_HEIGHT}")
    print(f"spheres: {scene.spheres_count}")
    print(f"meshes: {scene.meshes_count}")
    print(f"triangles: {scene.triangles_count}")
    print("camera: ({:.2f}, {:.2f}, {:.2f})".format(*context.camera_position))
    print(f"max bounces: {context.max_bounces}, rays per pixel: {context.rays_per_pixel}")
    return 0