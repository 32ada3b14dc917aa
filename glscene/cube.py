"""Unit cube with normals and texture coordinates."""

from __future__ import annotations

from typing import ClassVar

import numpy as np


def _gl():
    from pyglet import gl

    return gl


# position (3), normal (3), texture coordinates (2)
CUBE_VERTEX_DATA: tuple[float, ...] = (
    -0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 0.0,
    0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 1.0, 0.0,
    0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 1.0, 1.0,
    0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 1.0, 1.0,
    -0.5, 0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 1.0,
    -0.5, -0.5, -0.5, 0.0, 0.0, -1.0, 0.0, 0.0,

    -0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 0.0, 0.0,
    0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 0.0,
    0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 1.0,
    0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 1.0, 1.0,
    -0.5, 0.5, 0.5, 0.0, 0.0, 1.0, 0.0, 1.0,
    -0.5, -0.5, 0.5, 0.0, 0.0, 1.0, 0.0, 0.0,

    -0.5, 0.5, 0.5, -1.0, 0.0, 0.0, 1.0, 0.0,
    -0.5, 0.5, -0.5, -1.0, 0.0, 0.0, 1.0, 1.0,
    -0.5, -0.5, -0.5, -1.0, 0.0, 0.0, 0.0, 1.0,
    -0.5, -0.5, -0.5, -1.0, 0.0, 0.0, 0.0, 1.0,
    -0.5, -0.5, 0.5, -1.0, 0.0, 0.0, 0.0, 0.0,
    -0.5, 0.5, 0.5, -1.0, 0.0, 0.0, 1.0, 0.0,

    0.5, 0.5, 0.5, 1.0, 0.0, 0.0, 1.0, 0.0,
    0.5, 0.5, -0.5, 1.0, 0.0, 0.0, 1.0, 1.0,
    0.5, -0.5, -0.5, 1.0, 0.0, 0.0, 0.0, 1.0,
    0.5, -0.5, -0.5, 1.0, 0.0, 0.0, 0.0, 1.0,
    0.5, -0.5, 0.5, 1.0, 0.0, 0.0, 0.0, 0.0,
    0.5, 0.5, 0.5, 1.0, 0.0, 0.0, 1.0, 0.0,

    -0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 0.0, 1.0,
    0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 1.0, 1.0,
    0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 1.0, 0.0,
    0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 1.0, 0.0,
    -0.5, -0.5, 0.5, 0.0, -1.0, 0.0, 0.0, 0.0,
    -0.5, -0.5, -0.5, 0.0, -1.0, 0.0, 0.0, 1.0,

    -0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 1.0,
    0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 1.0, 1.0,
    0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 1.0, 0.0,
    0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 1.0, 0.0,
    -0.5, 0.5, 0.5, 0.0, 1.0, 0.0, 0.0, 0.0,
    -0.5, 0.5, -0.5, 0.0, 1.0, 0.0, 0.0, 1.0,
)

FLOATS_PER_VERTEX = 8
VERTEX_COUNT = 36
_FLOAT_SIZE = 4


def _vertex_table() -> np.ndarray:
    """Return the cube's vertex data as one row of eight floats per vertex."""
    return np.array(CUBE_VERTEX_DATA, dtype=float).reshape(VERTEX_COUNT, FLOATS_PER_VERTEX)


class Cube:
    """A unit cube centred on its position.

    All cubes share one vertex buffer; each has its own vertex array,
    created on first draw.
    """

    _vbo: ClassVar[int] = 0

    def __init__(self, position) -> None:
        self.position = np.array(position, dtype=float)
        self.texture = None
        self._vao = 0
        self._dirty = True

    def _configure(self, gl) -> None:
        if not self._vao:
            vao = (gl.GLuint * 1)()
            gl.glGenVertexArrays(1, vao)
            self._vao = vao[0]
        gl.glBindVertexArray(self._vao)

        if not Cube._vbo:
            vbo = (gl.GLuint * 1)()
            gl.glGenBuffers(1, vbo)
            Cube._vbo = vbo[0]
            gl.glBindBuffer(gl.GL_ARRAY_BUFFER, Cube._vbo)
            data = (gl.GLfloat * len(CUBE_VERTEX_DATA))(*CUBE_VERTEX_DATA)
            gl.glBufferData(gl.GL_ARRAY_BUFFER, memoryview(data).nbytes, data, gl.GL_STATIC_DRAW)

        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, Cube._vbo)

        stride = FLOATS_PER_VERTEX * _FLOAT_SIZE
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
        gl.glEnableVertexAttribArray(0)
        gl.glVertexAttribPointer(1, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 3 * _FLOAT_SIZE)
        gl.glEnableVertexAttribArray(1)
        if self.texture is not None:
            gl.glVertexAttribPointer(2, 2, gl.GL_FLOAT, gl.GL_FALSE, stride, 6 * _FLOAT_SIZE)
            gl.glEnableVertexAttribArray(2)

        gl.glBindVertexArray(0)
        self._dirty = False

    def set_texture(self, texture) -> None:
        """Attach a texture and enable the cube's texture coordinates."""
        self.texture = texture
        self._dirty = True

    def draw(self) -> None:
        """Draw the cube's 36 vertices as triangles."""
        gl = _gl()
        if self.texture is not None:
            self.texture.activate(0)
        if self._dirty:
            self._configure(gl)
        gl.glBindVertexArray(self._vao)
        gl.glDrawArrays(gl.GL_TRIANGLES, 0, VERTEX_COUNT)
        gl.glBindVertexArray(0)