"""Reading triangle meshes from Wavefront OBJ text."""

from __future__ import annotations

import math
from typing import Iterable, List, Optional, Sequence, Tuple

from raitrace.geometry import Material, Mesh, Triangle, Vec3, bounding_box

_Corner = Tuple[int, Optional[int]]


class ObjLoadError(Exception):
    """Raised when an OBJ file cannot be read or is malformed."""


def _sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _cross(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def _normalize(v: Vec3) -> Vec3:
    length = math.sqrt(v[0] * v[0] + v[1] * v[1] + v[2] * v[2])
    if length == 0.0:
        return (math.nan, math.nan, math.nan)
    return (v[0] / length, v[1] / length, v[2] / length)


def _parse_vec(args: Sequence[str], lineno: int) -> Vec3:
    if len(args) < 3:
        raise ObjLoadError(f"line {lineno}: expected three coordinates")
    try:
        return (float(args[0]), float(args[1]), float(args[2]))
    except ValueError as exc:
        raise ObjLoadError(f"line {lineno}: invalid number") from exc


def _resolve(token: str, count: int, lineno: int) -> int:
    try:
        index = int(token)
    except ValueError as exc:
        raise ObjLoadError(f"line {lineno}: invalid index {token!r}") from exc
    if index == 0:
        raise ObjLoadError(f"line {lineno}: index 0 is not valid")
    return index - 1 if index > 0 else count + index


def _parse_corner(token: str, n_positions: int, n_normals: int, lineno: int) -> _Corner:
    parts = token.split("/")
    position = _resolve(parts[0], n_positions, lineno)
    normal = None
    if len(parts) >= 3 and parts[2]:
        normal = _resolve(parts[2], n_normals, lineno)
    return position, normal


def _lookup(table: List[Vec3], index: int, kind: str) -> Vec3:
    if not 0 <= index < len(table):
        raise ObjLoadError(f"{kind} index {index + 1} out of range")
    return table[index]


def _build_mesh(
    faces: List[List[_Corner]],
    positions: List[Vec3],
    normals: List[Vec3],
    material: Material,
) -> Mesh:
    triangles = []
    for face in faces:
        if len(face) < 3:
            continue
        for k in range(1, len(face) - 1):
            corners = (face[0], face[k], face[k + 1])
            vertices = tuple(_lookup(positions, p, "vertex") for p, _ in corners)
            face_normal = None
            tri_normals = []
            for _, n in corners:
                if n is not None:
                    tri_normals.append(_lookup(normals, n, "normal"))
                else:
                    if face_normal is None:
                        v0, v1, v2 = vertices
                        face_normal = _normalize(_cross(_sub(v1, v0), _sub(v2, v0)))
                    tri_normals.append(face_normal)
            triangles.append(Triangle(vertices, tuple(tri_normals)))
    box = bounding_box(v for tri in triangles for v in tri.vertices)
    return Mesh(triangles=triangles, material=material, bounding_box=box)


def parse_obj(lines: Iterable[str], material: Material) -> List[Mesh]:
    """Parse OBJ lines into one mesh per object or group that has faces.

    Polygons are split into triangles as a fan; faces with fewer than three
    corners are skipped. Corners without a normal get the face normal.
    """
    positions: List[Vec3] = []
    normals: List[Vec3] = []
    shapes: List[List[List[_Corner]]] = []
    faces: List[List[_Corner]] = []

    for lineno, raw in enumerate(lines, 1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue
        keyword, *args = line.split()
        if keyword == "v":
            positions.append(_parse_vec(args, lineno))
        elif keyword == "vn":
            normals.append(_parse_vec(args, lineno))
        elif keyword == "f":
            faces.append(
                [_parse_corner(tok, len(positions), len(normals), lineno) for tok in args]
            )
        elif keyword in ("o", "g"):
            if faces:
                shapes.append(faces)
                faces = []
    if faces:
        shapes.append(faces)

    return [_build_mesh(shape, positions, normals, material) for shape in shapes]


def load_meshes_from_obj(path, material: Material) -> List[Mesh]:
    """Load every mesh in an OBJ file, each given the same material."""
    try:
        with open(path, encoding="utf-8") as handle:
            return parse_obj(handle, material)
    except OSError as exc:
        raise ObjLoadError(f"failed to load OBJ file: {path}") from exc