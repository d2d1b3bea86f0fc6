# raitrace

Building blocks for a path-traced renderer: scene geometry, OBJ mesh
loading, a flat scene layout ready for a tracing kernel, a fly-through
camera and the render settings that drive the tracer.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

- `raitrace.geometry`: the frozen value types `Aabb`, `Material`,
  `Triangle`, `MeshInfo`, `Sphere`, `SkyBox`, `Ray` and `HitInfo`, and the
  mutable `Mesh`. Vectors are stored as tuples of three floats.
  `bounding_box(points)` returns the axis-aligned box around a set of
  points; with no points the box is inverted, running from `FLT_MAX` down to
  `-FLT_MAX`. `Aabb.contains(point)` tests a point, boundary included.
- `raitrace.mesh_loader`: `load_meshes_from_obj(path, material)` reads a
  Wavefront OBJ file into one `Mesh` per object (`o`) or group (`g`) that has
  faces, every mesh getting the same material. Positions (`v`), normals
  (`vn`) and faces (`f`) are read, with 1-based or negative indices; other
  statements are ignored. Polygons with more than three corners are split
  into a triangle fan, faces with fewer than three corners are skipped, and a
  corner without a normal gets the face normal. `parse_obj(lines, material)`
  does the same for lines already in memory. A file that cannot be opened, a
  bad number, or an index that is zero or out of range raises
  `ObjLoadError`.
- `raitrace.scene`: `Scene` holds the spheres, all mesh triangles in one
  list, and a `MeshInfo` per mesh with the start and count of its triangles.
  `Scene.upload(spheres, meshes)` replaces the contents, `Scene.clear()`
  empties it, `Scene.mesh_triangles(index)` returns one mesh's triangles, and
  `spheres_count`, `triangles_count` and `meshes_count` give the sizes.
  `upload_scene` and `free_scene` are the same operations as functions.
- `raitrace.camera`: `Camera` keeps its position, direction and the inverse
  view and projection matrices (numpy arrays). `Camera.update(delta_time,
  input_state)` moves it with W/A/S/D, Space and Left Shift, turns it while
  the secondary mouse button is held, and returns whether it changed.
  `InputState` is the frame's snapshot of pressed keys (`Key` values), mouse
  position and secondary button. `look_at`, `perspective` and `angle_axis`
  are the matrix and quaternion helpers it uses.
- `raitrace.settings`: `RenderSettings` with `toggle_rendering(on_stop)` and
  `clamp()`, which keeps bounces, rays per pixel, strengths, focus distance,
  exposure, gamma and the sky box's sun and brightness in their allowed
  ranges. `default_render_settings()` gives the starting values, and
  `rendering_context(camera, settings)` joins camera and settings into the
  `RenderingContext` handed to a tracer.
- `raitrace.scenes`: the stock Cornell box (`make_cornell_box`), three
  spheres (`make_spheres`), the two joined in `make_scene`, a single quad
  (`make_quad`), and `default_camera()`.

## Example

```python
from raitrace.scenes import make_scene, default_camera
from raitrace.settings import default_render_settings, rendering_context

scene = make_scene()
camera = default_camera()
settings = default_render_settings()

context = rendering_context(camera, settings)
print(scene.spheres_count, scene.triangles_count, scene.meshes_count)
print(context.max_bounces, context.rays_per_pixel)
```

## Command line

```
raitrace
raitrace --obj model.obj --obj other.obj
```

This builds the default scene and camera, adds the meshes of any `--obj`
files with a white material, and prints the resolution, the counts of
spheres, meshes and triangles, the camera position, and the bounce and
rays-per-pixel settings. It exits with status 1 if an OBJ file cannot be
loaded.

## What it does not do

The package prepares everything a tracer needs but does not trace rays
itself: it produces no pixels and writes no images. It has no window,
editor or live input handling; camera input is passed in as `InputState`
values.