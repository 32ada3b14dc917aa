"""Indexed meshes drawn from their vertex positions."""

from __future__ import annotations

import numpy as np

_FLOAT_SIZE = 4


def _gl():
    from pyglet import gl

    return gl


def with_uv(vertex_data) -> list[float]:
    """Interleave texture coordinates after each (x, y, z) position.

    The coordinates map x and y from [-1, 1] onto [0, 1].
    """
    data = [float(v) for v in vertex_data]
    if len(data) % 3:
        raise ValueError("vertex data must hold whole (x, y, z) triples")
    result: list[float] = []
    for x, y, z in zip(data[0::3], data[1::3], data[2::3]):
        result.extend((x, y, z, (x + 1.0) / 2.0, (y + 1.0) / 2.0))
    return result


class Shape:
    """A mesh of positions and triangle indices, optionally textured.

    GPU buffers are created and refreshed on the next draw after a change.
    """

    def __init__(self, vertex_data, indices) -> None:
        self.vertex_data = [float(v) for v in vertex_data]
        self.indices = [int(i) for i in indices]
        self.texture = None
        self.attribs = 3
        self.position = np.zeros(3)
        self.scale = np.ones(3)
        self._vao = 0
        self._vbo = 0
        self._ebo = 0
        self._dirty = True

    def _upload(self, gl) -> None:
        if not self._vao:
            vao = (gl.GLuint * 1)()
            buffers = (gl.GLuint * 2)()
            gl.glGenVertexArrays(1, vao)
            gl.glGenBuffers(2, buffers)
            self._vao, self._vbo, self._ebo = vao[0], buffers[0], buffers[1]

        gl.glBindVertexArray(self._vao)

        indices = (gl.GLuint * len(self.indices))(*self.indices)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, self._ebo)
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER, memoryview(indices).nbytes, indices, gl.GL_STATIC_DRAW
        )

        vertices = (gl.GLfloat * len(self.vertex_data))(*self.vertex_data)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, self._vbo)
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER, memoryview(vertices).nbytes, vertices, gl.GL_STATIC_DRAW
        )

        stride = self.attribs * _FLOAT_SIZE
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, stride, 0)
        gl.glEnableVertexAttribArray(0)
        if self.texture is not None:
            gl.glVertexAttribPointer(1, 2, gl.GL_FLOAT, gl.GL_FALSE, stride, 3 * _FLOAT_SIZE)
            gl.glEnableVertexAttribArray(1)

        gl.glBindVertexArray(0)
        self._dirty = False

    def draw(self) -> None:
        """Draw the mesh as triangles, binding its texture to unit 0 first."""
        gl = _gl()
        if self.texture is not None:
            self.texture.activate(0)
        if self._dirty:
            self._upload(gl)
        gl.glBindVertexArray(self._vao)
        gl.glDrawElements(gl.GL_TRIANGLES, len(self.indices), gl.GL_UNSIGNED_INT, 0)
        gl.glBindVertexArray(0)

    def set_texture(self, texture) -> None:
        """Attach a texture, adding texture coordinates to the vertex data."""
        if self.texture is None:
            self.vertex_data = with_uv(self.vertex_data)
            self.attribs += 2
        self.texture = texture
        self._dirty = True


class Square(Shape):
    """A 2x2 square in the z = 0 plane, centred on the origin."""

    def __init__(self, position) -> None:
        super().__init__(
            [
                -1.0, 1.0, 0.0,
                1.0, 1.0, 0.0,
                -1.0, -1.0, 0.0,
                1.0, -1.0, 0.0,
            ],
            [0, 1, 2, 1, 3, 2],
        )
        self.position = np.array(position, dtype=float)


class Triangle(Shape):
    """A triangle pointing up in the z = 0 plane."""

    def __init__(self, position) -> None:
        super().__init__(
            [
                0.0, 1.0, 0.0,
                -1.0, -1.0, 0.0,
                1.0, -1.0, 0.0,
            ],
            [0, 1, 2],
        )
        self.position = np.array(position, dtype=float)