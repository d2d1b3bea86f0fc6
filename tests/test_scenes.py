import math

import numpy as np
import pytest

from raitrace.scenes import (
    RENDER_HEIGHT,
    RENDER_WIDTH,
    default_camera,
    main,
    make_cornell_box,
    make_quad,
    make_scene,
    make_spheres,
)
from raitrace.geometry import Material


def test_make_quad_builds_two_triangles_with_unit_normal():
    v = [(-2, 0, 2), (2, 0, 2), (2, 0, -2), (-2, 0, -2)]
    mesh = make_quad(*v, Material())
    assert len(mesh.triangles) == 2
    normal = mesh.triangles[0].normals[0]
    assert normal == pytest.approx((0.0, 1.0, 0.0))
    assert all(n == normal for t in mesh.triangles for n in t.normals)
    assert mesh.triangles[1].vertices == ((-2.0, 0.0, 2.0), (2.0, 0.0, -2.0), (-2.0, 0.0, -2.0))


def test_make_quad_normal_is_perpendicular_to_edges():
    v0, v1, v2, v3 = (0, 0, 0), (1, 0, 0), (1, 2, 1), (0, 2, 1)
    mesh = make_quad(v0, v1, v2, v3, Material())
    n = np.array(mesh.triangles[0].normals[0])
    assert np.linalg.norm(n) == pytest.approx(1.0)
    assert np.dot(n, np.subtract(v1, v0)) == pytest.approx(0.0)
    assert np.dot(n, np.subtract(v3, v0)) == pytest.approx(0.0)


def test_make_quad_bounding_box_holds_corners():
    corners = [(-0.5, 3.99, -0.5), (0.5, 3.99, -0.5), (0.5, 3.99, 0.5), (-0.5, 3.99, 0.5)]
    mesh = make_quad(*corners, Material())
    assert mesh.bounding_box.min == (-0.5, 3.99, -0.5)
    assert mesh.bounding_box.max == (0.5, 3.99, 0.5)
    assert all(mesh.bounding_box.contains(c) for c in corners)


def test_make_quad_rejects_degenerate():
    with pytest.raises(ValueError):
        make_quad((0, 0, 0), (0, 0, 0), (0, 0, 0), (1, 1, 1), Material())


def test_cornell_box_has_one_light():
    meshes = make_cornell_box()
    assert len(meshes) == 7
    lights = [m for m in meshes if m.material.emission_strength > 0]
    assert len(lights) == 1
    assert lights[0].material.emission_strength == 20.0
    assert meshes[3].material.color == (0.9, 0.1, 0.1)
    assert meshes[4].material.color == (0.1, 0.9, 0.1)


def test_cornell_box_inside_outer_bounds():
    for mesh in make_cornell_box():
        for tri in mesh.triangles:
            for vx, vy, vz in tri.vertices:
                assert -2.0 <= vx <= 2.0 and 0.0 <= vy <= 4.0 and -2.0 <= vz <= 2.0


def test_spheres():
    spheres = make_spheres()
    assert [s.center for s in spheres] == [(0.0, 1.0, 0.0), (-1.2, 1.0, 0.0), (1.2, 1.0, 0.0)]
    assert all(s.radius == 0.5 for s in spheres)
    assert spheres[0].material.smoothness == 1.0


def test_make_scene_packs_all_triangles():
    scene = make_scene()
    assert scene.spheres_count == 3
    assert scene.meshes_count == len(make_cornell_box())
    assert scene.triangles_count == sum(len(m.triangles) for m in make_cornell_box())
    for index, mesh in enumerate(make_cornell_box()):
        assert scene.mesh_triangles(index) == mesh.triangles


def test_default_camera():
    cam = default_camera()
    assert cam.position == (0.0, 1.0, 3.85)
    assert cam.direction == (0.0, 0.0, -1.0)
    assert cam.aspect == pytest.approx(RENDER_WIDTH / RENDER_HEIGHT)
    assert cam.fov == 45.0


def test_main_reports_scene(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "spheres: 3" in out
    assert f"meshes: {len(make_cornell_box())}" in out
    assert "1085x1026" in out


def test_main_adds_obj_meshes(tmp_path, capsys):
    obj = tmp_path / "tri.obj"
    obj.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n", encoding="utf-8")
    assert main(["--obj", str(obj)]) == 0
    out = capsys.readouterr().out
    assert f"meshes: {len(make_cornell_box()) + 1}" in out


def test_main_reports_missing_obj(tmp_path, capsys):
    assert main(["--obj", str(tmp_path / "missing.obj")]) == 1
    assert "error" in capsys.readouterr().err