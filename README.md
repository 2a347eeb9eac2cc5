# tubeflight

This package holds the math for a small 3D fly-through scene. In that scene a ship follows a closed Catmull-Rom track through a tube and past asteroids. The scene also has a free-look camera and text on the screen.

Everything here is plain Python on top of numpy.

## Install

```
pip install .
pip install ".[test]"   # adds pytest and hypothesis
```

## Modules

### `tubeflight.vectors`

Vector and quaternion helpers in the style of GLM.

- Vectors are numpy arrays.
- Matrices are 4x4 arrays that act on column vectors.
- Quaternions are in `(w, x, y, z)` order.

The functions are:

- `normalize`
- `quat_from_euler`
- `quat_rotate`
- `quat_look_at`
- `quat_to_mat4`
- `look_at_matrix`
- `perspective`, which raises `ValueError` for a zero aspect ratio
- `ortho`
- `catmull_rom`
- `rotate_vector`
- `translate`
- `scale`

The module also has direction constants such as `UP`, `BACK`, `RIGHT` and `IDENTITY_QUAT`.

### `tubeflight.extensions`

- `decompose(transform)` returns a `Decomposition` holding `translation`, Euler `rotation` in radians, and `scale`. It raises `ValueError` when the matrix cannot be normalised.
- `look_at_rotation` builds a rotation basis that aims at a target.
- `move_towards` steps a position towards a target.
- `smooth_damp` is a critically damped spring step. It returns `(position, velocity)`.

### `tubeflight.randomness`

`Random(seed=None)` draws uniform values:

- `int_range(start, end)` gives an integer, inclusive at both ends.
- `int_value()` gives 0 or 1.
- `float_range(start, end)` gives a float in `[start, end)`.
- `float_value()` gives a float in `[0, 1)`.

An empty range raises `ValueError`.

### `tubeflight.frustum`

- `Frustum.update(matrix)` extracts and normalises the six planes. The planes are indexed by `Side`.
- `check_sphere(position, radius)` returns `False` only when the sphere lies wholly outside a plane.

### `tubeflight.lights`

The light classes are `DirectionalLight`, `PointLight` and `SpotLight`. They are built on `BaseLight`, and the two positioned lights carry an `Attenuation`.

`submit` sends the light's uniform values to any object that has a `set_uniform(name, value)` method. Point lights and spot lights take an array index.

### `tubeflight.catmullrom`

`CatmullRom.uniformly_sample_control_points(points, num_samples)` resamples a closed control polygon, in two passes. Afterwards:

- `control_points` holds the resampled polygon.
- `centreline_points` and `centreline_normals` hold samples that are close to equally spaced.

`sample(distance)` returns `(point, direction)` for a distance along the polygon. It returns `None` for a negative distance.

### `tubeflight.poisson`

`disk_sampler_2d(radius, sample_region_size, num_samples_before_rejection=30, rng=None)` gives Poisson-disk points in a rectangle. `is_valid` is the acceptance test it uses.

### `tubeflight.input`

`InputState` keeps keyboard and mouse-button state, together with the frame in which each one last changed.

Events are fed in through:

- `key_callback`
- `mouse_button_callback`
- `cursor_position_callback`
- `scroll_callback`

State is queried with:

- `get_key` and `get_key_down`
- `get_mouse_button` and `get_mouse_button_down`

`update()` advances the frame.

`Key` and `Action` name the codes that are used.

### `tubeflight.camera`

`Camera` holds a position, a rotation and a speed. It has:

- mouse look with pitch clamped to ±89°
- W/A/S/D movement
- `view_matrix()`
- `set_perspective_projection(fov_degrees, aspect, near, far)`
- `set_orthographic_projection(width, height)`

### `tubeflight.components`

The entity components are:

- `TransformComponent`, whose `matrix()` is translate · rotate · scale
- `ModelComponent`
- `MeshComponent`
- `ShipComponent`
- `BlinkComponent`

### `tubeflight.mesh` and `tubeflight.geometry`

- `Vertex` holds a position, a normal and a texture coordinate.
- `Mesh` holds vertices, optional indices, textures and a `PrimitiveMode`.
- `Mesh.draw_count()` gives the number of elements that are drawn.

The procedural shapes are:

- `cuboid`
- `sphere`
- `quad`
- `octahedron`
- `tetrahedron`
- `line`, a closed loop
- `torus`, a triangle strip
- `tube`, a point cloud of rings along a path

### `tubeflight.textmesh`

`layout_text(font, text, x, y, scale)` turns a string into one `TextQuad` per character.

- Each quad has six `(x, y, u, v)` vertices.
- Glyphs come from a `FontAtlas` of `Glyph`s.
- A newline moves down by the atlas line height.
- A character with no glyph uses glyph 127.

## Example

```python
from tubeflight.catmullrom import CatmullRom
from tubeflight.geometry import tube

track = CatmullRom()
track.uniformly_sample_control_points(
    [(400, -50, 0), (0, 100, 400), (-400, 5, 0), (0, -100, -400)], 500
)
mesh = tube(track.control_points, 30.0, 48, None)
print(len(track.centreline_points), mesh.draw_count())
```

## What it does not do

There is no window, no GPU rendering and no game loop, and the package provides no command to run.

The package does not do any of the following:

- load or compile shaders
- load images, models or fonts
- rasterise glyphs into an atlas
- play sound

Textures, models and shaders appear only as opaque values. A mesh's `textures`, for example, can hold anything, and lights write to any object that has a `set_uniform` method. Uploading and drawing are left to the caller.