"""Window setup and the render loop for a lit, textured cube with an orbiting light."""

from __future__ import annotations

import itertools
import logging
import math
import os
import sys
import time
from collections.abc import Mapping, Sequence

import numpy as np

from .camera import Camera
from .cube import Cube
from .keyboard import Keyboard
from .mouse import Mouse
from .shader import Shader
from .texture import Texture
from .transforms import normal_matrix, scale, translate

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = "GLSCENE_LOG_LEVEL"

WINDOW_WIDTH = 1920 // 2
WINDOW_HEIGHT = 1080 // 2
WINDOW_TITLE = "OpenGL"

MAIN_VERTEX_SHADER = "assets/shaders/main.vert"
MAIN_FRAGMENT_SHADER = "assets/shaders/main.frag"
LIGHT_FRAGMENT_SHADER = "assets/shaders/lightSource.frag"
CONTAINER_TEXTURE = "assets/textures/container.jpg"

CUBE_START = (0.0, 0.0, 0.0)
LIGHT_START = (1.2, 1.0, 2.0)
OBJECT_COLOR = (1.0, 0.5, 0.31)
LIGHT_COLOR = (1.0, 1.0, 1.0)
LIGHT_SCALE = 0.2
ORBIT_RATE = 1.5
CUBE_SPEED = 3 * 0.5

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "err": logging.ERROR,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
    "off": logging.CRITICAL + 10,
}


def _log_level(environ: Mapping[str, str]) -> int:
    """Return the logging level named in the environment, defaulting to INFO."""
    name = environ.get(LOG_LEVEL_ENV, "").strip().lower()
    return _LEVELS.get(name, logging.INFO)


def _log_arguments(argv: Sequence[str]) -> None:
    logger.info("Running with %d args", len(argv))
    for index, arg in enumerate(argv):
        logger.info("arg[%d] = %s", index, arg)


def _model_matrix(position, factor) -> np.ndarray:
    """Return the model matrix placing an object at ``position`` with a scale."""
    return scale(translate(np.identity(4), position), factor)


def _animate(cube_position, now: float, delta: float) -> tuple[np.ndarray, np.ndarray]:
    """Return the next cube position and the light position orbiting the current cube."""
    cube = np.asarray(cube_position, dtype=float)
    angle = now * ORBIT_RATE
    light = cube + np.array([math.cos(angle), math.sin(angle), -math.cos(angle) * 2])
    moved = cube + np.array([CUBE_SPEED * delta, 0.0, 0.0])
    return moved, light


def setup_window(argv):
    """Configure logging, open a 3.3 core-profile window and hook up input."""
    logging.basicConfig(
        level=_log_level(os.environ),
        format="[%(asctime)s] [%(levelname)s] %(message)s",
    )
    _log_arguments(list(argv))

    import pyglet
    from pyglet import gl

    config = gl.Config(
        major_version=3,
        minor_version=3,
        forward_compatible=True,
        double_buffer=True,
        depth_size=24,
    )
    try:
        window = pyglet.window.Window(
            width=WINDOW_WIDTH, height=WINDOW_HEIGHT, caption=WINDOW_TITLE, config=config
        )
    except (pyglet.window.NoSuchConfigException, pyglet.gl.ContextException) as exc:
        logger.error("Failed to create window")
        raise RuntimeError("failed to create window") from exc

    def on_resize(width, height):
        fb_width, fb_height = window.get_framebuffer_size()
        gl.glViewport(0, 0, fb_width, fb_height)
        return pyglet.event.EVENT_HANDLED

    def on_key_press(symbol, modifiers):
        if symbol == pyglet.window.key.ESCAPE:
            window.has_exit = True
            return pyglet.event.EVENT_HANDLED
        return None

    window.push_handlers(on_resize=on_resize, on_key_press=on_key_press)

    Keyboard.setup(window)
    Mouse.setup(window)
    return window


def _shading_language_version(gl) -> str:
    raw = gl.glGetString(gl.GL_SHADING_LANGUAGE_VERSION)
    if not raw:
        return ""
    value = bytes(itertools.takewhile(bool, (raw[i] for i in itertools.count())))
    return value.decode("utf-8", errors="replace")


def main(argv=None) -> int:
    """Open the window and render the scene until it is closed."""
    argv = list(sys.argv if argv is None else argv)
    start = time.perf_counter()
    window = setup_window(argv)

    from pyglet import gl

    width, height = window.get_size()

    gl.glEnable(gl.GL_BLEND)
    gl.glBlendFunc(gl.GL_ONE, gl.GL_ONE_MINUS_SRC_ALPHA)

    logger.info("Supported GLSL version is %s", _shading_language_version(gl))

    shader = Shader(MAIN_VERTEX_SHADER, MAIN_FRAGMENT_SHADER)
    light_shader = Shader(MAIN_VERTEX_SHADER, LIGHT_FRAGMENT_SHADER)

    cube = Cube(CUBE_START)
    light_cube = Cube(LIGHT_START)
    cube.set_texture(Texture(CONTAINER_TEXTURE))

    shader.use()
    shader.set_uniform("fTexture1", 0)

    camera = Camera((0.0, 0.0, 0.0), width / height)
    last_frame = 0.0

    try:
        while not window.has_exit:
            current_frame = time.perf_counter() - start
            delta_time = current_frame - last_frame
            last_frame = current_frame

            gl.glClearColor(0.2, 0.3, 0.3, 1.0)
            gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)

            view = camera.view(delta_time)
            projection = camera.projection()

            shader.use()
            shader.set_uniform("view", view)
            shader.set_uniform("projection", projection)

            gl.glEnable(gl.GL_DEPTH_TEST)
            gl.glDepthMask(gl.GL_TRUE)

            model = _model_matrix(cube.position, 1.0)
            shader.set_uniform("model", model)
            shader.set_uniform("normalMatrix", normal_matrix(view, model))
            shader.set_uniform("objectColor", OBJECT_COLOR)
            shader.set_uniform("lightColor", LIGHT_COLOR)
            shader.set_uniform("lightPos", light_cube.position)

            cube.draw()

            light_shader.use()
            model = _model_matrix(light_cube.position, LIGHT_SCALE)
            light_shader.set_uniform("model", model)
            # The light's normal matrix goes through the main program's location.
            shader.set_uniform("normalMatrix", normal_matrix(view, model))
            light_shader.set_uniform("view", view)
            light_shader.set_uniform("projection", projection)
            light_shader.set_uniform("translation", light_cube.position)

            light_cube.draw()

            cube.position, light_cube.position = _animate(
                cube.position, current_frame, delta_time
            )

            gl.glBindVertexArray(0)

            window.dispatch_events()
            window.flip()
    finally:
        camera.close()
        window.close()
    return 0