# spherecast

A small ray caster that renders one shaded sphere into a window, pixel by
pixel. The sphere drifts up and down along the y axis while a white light
circles around it. Every pixel is lit with ambient, diffuse and specular
(Phong) terms.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
spherecast
```

This opens an 800×800 window and animates the scene until the window is
closed. The command takes these options:

- `--frames N`: stop after `N` frames instead of waiting for the window to
  be closed.
- `--size N`: side of the square window in pixels (default 800).
- `--log [PATH]`: write an HTML log file. With no path given, the log goes
  to `/tmp/vector_test.html`.

The command exits with status 0, or 1 if a pixel could not be stored.

## Using it as a library

- `spherecast.vector`: `Vector` and `PosedVector`, immutable vectors with
  addition, scaling, dot products (`a.dot(b)` or `a @ b`), `length`,
  `normalized` and rotation in the XY plane.
- `spherecast.colour`: `Colour`, an RGB triple clamped to 0–255 on creation,
  with addition, subtraction, scaling and channel-wise `modulate` (also `%`).
- `spherecast.coordsys`: `CoordSystem`, which maps world points to screen
  pixels (`to_screen`) and back (`from_screen`).
- `spherecast.quadratic`: `solve_equation`, `solve_linear` and
  `solve_quadratic`, returning a `Solution` with a `RootCase`;
  `format_args` and `format_result` describe them in text, and
  `read_coefficients` and `ask_repeat` prompt on given text streams.
- `spherecast.raycast`: the scene (`Scene`, `LightSource`, `Sphere`,
  `PointInfo`), lighting (`raycast_point`), ray–sphere intersection
  (`sphere_crossing`), `rotate_light`, `SphereMover` and `render_frame`,
  which fills any object with a `set_pixel` method and raises
  `PixelNotSetError` for a pixel outside it.
- `spherecast.graphics`: `PixelBuffer` (an RGBA byte array), `arrow_head`,
  `axis_divisions`, and the pygame-backed `Window` and `PixelsWindow`.
- `spherecast.logs`: `HtmlLog`, a context manager writing an HTML log, and
  `error_report`, which prints an error to stderr and into a log.
- `spherecast.general`: `murmur_hash` (32-bit MurmurHash2, seed 0),
  `double_is_equal`, `int_compare`, `time_string` and `file_size`.
- `spherecast.app`: `run`, which drives the animation loop, and `main`.

To render one frame without opening a window:

```python
from spherecast.graphics import PixelBuffer
from spherecast.raycast import default_coordsys, default_scene, default_sphere, render_frame

buffer = PixelBuffer(200, 200)
render_frame(default_scene(), default_sphere(), default_coordsys(200, 200), buffer)
print(buffer.get_pixel(100, 100))
```

## What it does not do

The scene is fixed: one sphere and one light, set by the constants in
`spherecast.raycast`. Frames are shown on screen only; nothing saves them
to image files. The equation solver has no command of its own.