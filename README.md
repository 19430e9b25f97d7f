# sceneforge

Building blocks for simple scene rendering. It includes colors that convert
between color models, materials, and 2D and 3D primitives that describe
themselves as lists of draw calls. It also tracks keyboard and mouse state,
provides a frame timer, and generates heightmap terrain.

Rendering does not depend on any particular graphics layer. Every `render()`
method returns a list of `sceneforge.object2.DrawCall` values. Each one holds:

- a primitive `Mode` (points, lines, line loop, triangles, triangle strip or triangle fan);
- its vertices and, where given, its normals;
- an optional color;
- an optional row-major 4x4 model matrix.

Any graphics layer can consume these.

## Install

```
pip install .
```

Tests need the `test` extra:

```
pip install ".[test]"
pytest
```

## Colors

```python
from sceneforge.colors import Color

c = Color.from_hls(0.0, 0.5, 1.0)    # pure red
c.lighten(0.25).shift_ccw(1 / 3)      # modifiers change the color in place
print(c.rgba(), c.hls(), c.hsv(), c.cmy(), c.cmyk())
print(Color.parse("(0.1, 0.2, 0.3, 1.0)"))
```

Colors can be built in several ways:

- from RGB (`from_rgb`) or from 8-bit RGB (`from_unsigned_rgb`);
- from a color model: `from_hls`, `from_hsv`, `from_cmy` or `from_cmyk`;
- from a gray level (`from_luminance`).

Components are clamped to `[0, 1]`, and hue wraps around.

Named colors are class methods:

- `black`, `gray`, `silver`, `white`;
- `red`, `red_orange`, `orange`, `yellow_orange`;
- `yellow`, `yellow_green`, `green`, `blue_green`;
- `blue`, `blue_purple`, `purple`, `red_purple`.

## Materials and objects

```python
from sceneforge.material import Material
from sceneforge.shapes2d import Circle, Rectangle
from sceneforge.shapes3d import Box, Sphere

box = Box((0.0, 1.0, 0.0), 2.0, 1.0, 1.0)
box.material = Material.from_rgb(0.8, 0.2, 0.2)
box.orientation = (0.5, 0.0, 0.0)   # yaw, pitch, roll; or a quaternion (w, x, y, z)
print(box.dimensions, box.bounding_sphere_radius())

rect = Rectangle((10.0, 10.0), (4.0, 2.0))
rect.rotation = 0.25
for call in rect.render():
    print(call.mode, call.vertices)
```

**2D shapes** (`sceneforge.shapes2d`) build on `Object2`. Each one has a
position, a rotation in radians and a `Transform2`. The shapes are:

- `Circle`;
- `Line`, which offers `endpoints()`;
- `Rectangle`, which offers `center()`, `ratio()` and `corners()`;
- `Triangle`, an equilateral triangle that offers `corners()`.

**3D shapes** (`sceneforge.shapes3d`) build on `Object3`. Each one has a
position, an orientation quaternion, a material and a `model_matrix`. The
shapes are:

- `Box`;
- `Cylinder`;
- `Sphere`, which also offers `point_on_surface` and `point_at_angles`;
- `Grid3`, a line grid in the y = 0 plane.

## Input

`sceneforge.devices` has two state trackers, `Keyboard` and `Mouse`, with
`Key` and `MouseButton` enums for the codes.

Feed them events:

- keyboard: `press`, `release`, `press_special`, `release_special` and `update_modifiers`;
- mouse: `on_motion`, `on_button` and `on_entry`.

Then query their state:

- keyboard: `key_down`, `key_hold` and `key_up`;
- mouse: `button_down`, `button_hold`, `button_up`, `position`, `position_delta` and `has_moved`.

Call `update()` once per frame to clear the one-frame flags.

## Timing

`sceneforge.timer.Timer` measures:

- the run time;
- the time between updates, multiplied by `timescale`;
- the frame rate over one-second windows;
- a separate stopwatch (`start_timer`, `timer_run_time`).

You can pass it any clock function; the default is `time.perf_counter`.

## Files

`sceneforge.files.read_text_file` reads a whole UTF-8 file, and
`read_binary_file` reads a whole file as bytes.

## Terrain

```python
import random
from sceneforge.terrain import Terrain

terrain = Terrain(64, 10.0, 64, rng=random.Random(1))
terrain.generate_fault_line(100)
mesh = terrain.update_maps()        # indices, vertices, normals, texcoords
terrain.save_heightmap("height.png")
```

The generators are:

- `generate_random`;
- `generate_fault_line`, and its `_plateau`, `_sine` and `_cosine` variants;
- `generate_fault_line_with_function`, which takes a profile function;
- `generate_particle_deposition`.

`normalize` rescales the heights to `[0, 1]`, and `flatten` zeroes them.

Heightmaps and normal maps are held in `sceneforge.texture.Texture` objects.
These are float arrays of shape `(height, width, channels)`. They are saved
to image files at 8 bits per channel and loaded back from image files.

## What is not included

This package does not open windows or draw anything on screen. It has no
cameras, shaders, texture binding or main loop, and it installs no command.

Input devices do not listen to a window system by themselves. Events must be
passed to them by the caller.