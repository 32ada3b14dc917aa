"""GLSL program built from a vertex and a fragment shader file."""

from __future__ import annotations

import logging
import numbers
from pathlib import Path
from typing import ClassVar

import numpy as np

logger = logging.getLogger(__name__)


def _gl():
    from pyglet import gl

    return gl


def _classify(value):
    """Return the uniform kind of ``value`` and the value converted for upload."""
    if isinstance(value, numbers.Integral):
        return "int", int(value)
    if isinstance(value, numbers.Real):
        return "float", float(value)
    try:
        array = np.asarray(value, dtype=np.float32)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"unsupported uniform value: {value!r}") from exc
    kinds = {(3,): "vec3", (3, 3): "mat3", (4, 4): "mat4"}
    kind = kinds.get(array.shape)
    if kind is None:
        raise TypeError(f"unsupported uniform shape: {array.shape}")
    return kind, array


class Shader:
    """A shader program linked from two source files.

    The sources are read when the shader is created; compiling and linking
    happen on first use, when a GL context is current. Compiled shader
    objects are shared between programs that use the same file. Compile and
    link failures are logged and leave the program empty.
    """

    _shader_cache: ClassVar[dict[str, object]] = {}

    def __init__(self, vert_path, frag_path) -> None:
        self.vert_path = Path(vert_path)
        self.frag_path = Path(frag_path)
        self.vertex_source = self.vert_path.read_text(encoding="utf-8")
        self.fragment_source = self.frag_path.read_text(encoding="utf-8")
        self.program = 0
        self._linked = None
        self._built = False

    @classmethod
    def _compile(cls, path: Path, source: str, stage: str):
        from pyglet.graphics.shader import Shader as ShaderStage
        from pyglet.graphics.shader import ShaderException

        key = str(path)
        logger.debug("%s", key)
        if key in cls._shader_cache:
            return cls._shader_cache[key]
        try:
            compiled = ShaderStage(source, stage)
        except ShaderException as exc:
            logger.debug("%s", exc)
            compiled = None
        cls._shader_cache[key] = compiled
        return compiled

    def _program_id(self) -> int:
        if self._built:
            return self.program
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        vert = self._compile(self.vert_path, self.vertex_source, "vertex")
        frag = self._compile(self.frag_path, self.fragment_source, "fragment")
        self._built = True
        if vert is None or frag is None:
            logger.debug("program not linked: a shader stage failed to compile")
            return self.program
        try:
            self._linked = ShaderProgram(vert, frag)
        except ShaderException as exc:
            logger.debug("%s", exc)
            return self.program
        self.program = self._linked.id
        return self.program

    def use(self) -> None:
        """Make this program the current one, building it first if needed."""
        gl = _gl()
        gl.glUseProgram(self._program_id())

    def uniform_location(self, name: str) -> int:
        """Return the location of a uniform, or -1 if the program has none by that name."""
        gl = _gl()
        program = self._program_id()
        encoded = name.encode("utf-8") + b"\0"
        text = (gl.GLchar * len(encoded)).from_buffer_copy(encoded)
        return gl.glGetUniformLocation(program, text)

    def set_uniform(self, name: str, value) -> None:
        """Set a uniform of the current program.

        Integers and bools set ``int`` uniforms, other real numbers ``float``;
        arrays of shape (3,), (3, 3) and (4, 4) set ``vec3``, ``mat3`` and
        ``mat4``. Matrices are given in row-major mathematical layout.
        """
        kind, payload = _classify(value)
        gl = _gl()
        location = self.uniform_location(name)
        if kind == "int":
            gl.glUniform1i(location, payload)
        elif kind == "float":
            gl.glUniform1f(location, payload)
        elif kind == "vec3":
            gl.glUniform3fv(location, 1, (gl.GLfloat * 3)(*payload.tolist()))
        else:
            data = payload.flatten(order="F").tolist()
            upload = gl.glUniformMatrix3fv if kind == "mat3" else gl.glUniformMatrix4fv
            upload(location, 1, gl.GL_FALSE, (gl.GLfloat * len(data))(*data))