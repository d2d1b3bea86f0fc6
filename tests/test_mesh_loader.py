import math

import pytest

from raitrace.geometry import Material, bounding_box
from raitrace.mesh_loader import ObjLoadError, load_meshes_from_obj, parse_obj

MATERIAL = Material(color=(0.5, 0.5, 0.5))

TRIANGLE = """\
v 0 0 0
v 1 0 0
v 0 1 0
f 1 2 3
"""

QUAD = """\
v -2 0 2
v 2 0 2
v 2 0 -2
v -2 0 -2
f 1 2 3 4
"""


def test_single_triangle_vertices_and_material():
    (mesh,) = parse_obj(TRIANGLE.splitlines(), MATERIAL)
    assert len(mesh.triangles) == 1
    assert mesh.triangles[0].vertices == ((0, 0, 0), (1, 0, 0), (0, 1, 0))
    assert mesh.material is MATERIAL


def test_missing_normals_use_face_normal():
    (mesh,) = parse_obj(TRIANGLE.splitlines(), MATERIAL)
    assert mesh.triangles[0].normals == ((0.0, 0.0, 1.0),) * 3


def test_explicit_normals_are_used():
    text = TRIANGLE.replace("f 1 2 3", "vn 0 0 -1\nf 1//1 2//1 3//1")
    (mesh,) = parse_obj(text.splitlines(), MATERIAL)
    assert mesh.triangles[0].normals == ((0.0, 0.0, -1.0),) * 3


def test_full_corner_format():
    text = TRIANGLE.replace("f 1 2 3", "vt 0 0\nvn 1 0 0\nf 1/1/1 2/1/1 3/1/1")
    (mesh,) = parse_obj(text.splitlines(), MATERIAL)
    assert mesh.triangles[0].normals[2] == (1.0, 0.0, 0.0)


def test_quad_is_split_as_fan():
    (mesh,) = parse_obj(QUAD.splitlines(), MATERIAL)
    first, second = mesh.triangles
    assert first.vertices == ((-2, 0, 2), (2, 0, 2), (2, 0, -2))
    assert second.vertices == ((-2, 0, 2), (2, 0, -2), (-2, 0, -2))


def test_negative_indices_match_positive():
    positive = parse_obj(QUAD.splitlines(), MATERIAL)
    negative = parse_obj(QUAD.replace("f 1 2 3 4", "f -4 -3 -2 -1").splitlines(), MATERIAL)
    assert positive[0].triangles == negative[0].triangles


def test_bounding_box_covers_all_vertices():
    (mesh,) = parse_obj(QUAD.splitlines(), MATERIAL)
    vertices = [v for tri in mesh.triangles for v in tri.vertices]
    assert mesh.bounding_box == bounding_box(vertices)
    assert all(mesh.bounding_box.contains(v) for v in vertices)


def test_groups_make_separate_meshes():
    text = "o first\n" + TRIANGLE + "g second\nf 3 2 1\nf 1 2 3\n"
    meshes = parse_obj(text.splitlines(), MATERIAL)
    assert [len(m.triangles) for m in meshes] == [1, 2]
    assert meshes[1].triangles[0].vertices[0] == (0, 1, 0)


def test_empty_groups_are_not_meshes():
    text = "o empty\ng also_empty\n" + TRIANGLE
    assert len(parse_obj(text.splitlines(), MATERIAL)) == 1


def test_short_faces_are_skipped():
    text = TRIANGLE + "f 1 2\n"
    (mesh,) = parse_obj(text.splitlines(), MATERIAL)
    assert len(mesh.triangles) == 1


def test_comments_and_unknown_statements_are_ignored():
    text = "# a comment\nmtllib scene.mtl\ns off\n" + TRIANGLE + "usemtl white\n"
    (mesh,) = parse_obj(text.splitlines(), MATERIAL)
    assert len(mesh.triangles) == 1


def test_degenerate_triangle_normal_is_nan():
    text = "v 0 0 0\nv 1 0 0\nv 2 0 0\nf 1 2 3\n"
    (mesh,) = parse_obj(text.splitlines(), MATERIAL)
    normal = mesh.triangles[0].normals[0]
    assert [math.isnan(c) for c in normal] == [True, True, True]


def test_no_faces_gives_no_meshes():
    assert parse_obj(["v 0 0 0"], MATERIAL) == []


@pytest.mark.parametrize(
    "text",
    [
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 0 1 2\n",
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 9\n",
        "v 0 0 x\n",
        "v 0 0\n",
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1//4 2 3\n",
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nf a b c\n",
    ],
)
def test_malformed_input_raises(text):
    with pytest.raises(ObjLoadError):
        parse_obj(text.splitlines(), MATERIAL)


def test_load_from_file(tmp_path):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD, encoding="utf-8")
    meshes = load_meshes_from_obj(path, MATERIAL)
    assert meshes[0].triangles == parse_obj(QUAD.splitlines(), MATERIAL)[0].triangles


def test_missing_file_raises(tmp_path):
    with pytest.raises(ObjLoadError):
        load_meshes_from_obj(tmp_path / "missing.obj", MATERIAL)