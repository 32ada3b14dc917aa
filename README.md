# glscene

This package draws a small OpenGL 3.3 core-profile scene. It opens a 960x540
window titled "OpenGL". The window shows a textured, lit cube that drifts
along the x axis, with a small light cube orbiting it. A free-flying camera
lets you look around the scene.

## Installing

```
pip install .
```

To install the test dependencies and run the tests:

```
pip install .[test]
pytest
```

## Running

Run the command from a directory that holds an `assets/` folder:

```
glscene
```

The command reads these files, relative to the working directory:

- `assets/shaders/main.vert`
- `assets/shaders/main.frag`
- `assets/shaders/lightSource.frag`
- `assets/textures/container.jpg`

If a shader file is missing, the command fails with `FileNotFoundError`. If
the texture cannot be read, a warning is logged and the cube is drawn
without it. If no suitable window can be created, the command raises
`RuntimeError`.

At start-up the command logs the arguments it was given and the GLSL version
the driver reports. The `GLSCENE_LOG_LEVEL` environment variable sets the log
level. It accepts these values:

- `trace` or `debug`
- `info` (the default)
- `warn` or `warning`
- `err` or `error`
- `critical`
- `off`

At `debug` level the log also shows shader compile and link messages. A
shader that fails to compile or link leaves its program empty; it does not
stop the command.

## Controls

| Input                   | Action                          |
|-------------------------|---------------------------------|
| `W` / `S`               | move forward / backward         |
| `A` / `D`               | strafe left / right             |
| `Space` / `Left Ctrl`   | move up / down                  |
| hold right mouse button | capture the cursor and look     |
| `Esc`                   | close the window                |

The camera moves at 2.5 units per second. While the cursor is captured, the
view turns 0.2 degrees per pixel of mouse movement. The pitch is held
between -89 and 89 degrees.

## What the package does not ship

The package contains no shader sources and no texture images. You supply the
files listed under "Running".

The shaders must work with the following vertex attributes:

| Location | Contents            |
|----------|---------------------|
| 0        | position            |
| 1        | normal              |
| 2        | texture coordinates |

The command sets these uniforms:

- **Both programs:** `model`, `view` and `projection` (`mat4`).
- **Main program only:**
  - `normalMatrix` (`mat3`)
  - `objectColor`, `lightColor` and `lightPos` (`vec3`)
  - `fTexture1` (`int`, texture unit 0)
- **Light program only:** `translation` (`vec3`).

## Using the pieces

You can use the building blocks on their own:

- **`glscene.transforms`:** `normalize`, `look_at`, `perspective` (field of
  view in radians), `translate`, `scale` and `normal_matrix`. They work on
  numpy arrays in row-major mathematical layout.
- **`glscene.keyboard.Keyboard`:** tracks a fixed set of keys. Use
  `Keyboard.dispatch(key, action)` with a `KeyAction` to feed it events, and
  `get_key` to read a key's state.
- **`glscene.mouse.Mouse`:** tracks the cursor. Use `Mouse.move(x, y)` and
  `Mouse.click(button, pressed)` to feed it events. `get_movement()` returns
  a `CursorMovement`.
- **`setup(window)`:** both `Keyboard.setup(window)` and `Mouse.setup(window)`
  connect their class to a pyglet window.
- **`glscene.camera.Camera`:** turns keyboard and mouse state into view and
  projection matrices.
- **GL wrappers:** these need a current OpenGL context when they draw or
  upload:
  - `glscene.shader.Shader` (`use`, `uniform_location`, `set_uniform`)
  - `glscene.texture.Texture` (`activate`), with `load_image` for reading
    images
  - `glscene.shape.Shape`, its subclasses `Square` and `Triangle`, and
    `with_uv` for adding texture coordinates
  - `glscene.cube.Cube`
- **`glscene.app`:** `setup_window(argv)` and `main(argv=None)`, which is
  what the `glscene` command runs.

Example:

```python
import numpy as np
from glscene.camera import Camera

with Camera(np.zeros(3), 16 / 9) as camera:
    view = camera.view(1 / 60)
    projection = camera.projection()
```