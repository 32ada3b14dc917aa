"""Image textures loaded from disk."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

logger = logging.getLogger(__name__)


def _gl():
    from pyglet import gl

    return gl


def load_image(path):
    """Load an image as ``(width, height, channels, pixels)``.

    The rows are flipped so the first row is the bottom of the picture, as
    OpenGL expects. Pixels are 8-bit RGB, or RGBA when the image carries
    transparency.
    """
    with Image.open(path) as image:
        image.load()
        has_alpha = "A" in image.getbands() or "transparency" in image.info
        converted = image.convert("RGBA" if has_alpha else "RGB")
    flipped = converted.transpose(Image.Transpose.FLIP_TOP_BOTTOM)
    return flipped.width, flipped.height, len(flipped.getbands()), flipped.tobytes()


class Texture:
    """A 2D texture with repeat wrapping and trilinear filtering.

    The image is read when the texture is created and uploaded on first
    activation. An image that cannot be read is reported as a warning and
    leaves the texture empty (id 0).
    """

    def __init__(self, path) -> None:
        self.path = Path(path)
        self.texture_id = 0
        self.width = 0
        self.height = 0
        self.channels = 0
        self._pixels: bytes | None = None
        try:
            self.width, self.height, self.channels, self._pixels = load_image(self.path)
        except OSError:
            logger.warning("Failed to load texture from %s", self.path)

    def _upload(self, gl) -> None:
        ids = (gl.GLuint * 1)()
        gl.glGenTextures(1, ids)
        texture = ids[0]
        gl.glBindTexture(gl.GL_TEXTURE_2D, texture)

        fmt = gl.GL_RGBA if self.channels == 4 else gl.GL_RGB
        pixels = (gl.GLubyte * len(self._pixels)).from_buffer_copy(self._pixels)
        gl.glPixelStorei(gl.GL_UNPACK_ALIGNMENT, 1)
        gl.glTexImage2D(
            gl.GL_TEXTURE_2D, 0, fmt, self.width, self.height, 0,
            fmt, gl.GL_UNSIGNED_BYTE, pixels,
        )

        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_S, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_WRAP_T, gl.GL_REPEAT)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MIN_FILTER, gl.GL_LINEAR_MIPMAP_LINEAR)
        gl.glTexParameteri(gl.GL_TEXTURE_2D, gl.GL_TEXTURE_MAG_FILTER, gl.GL_LINEAR)
        gl.glGenerateMipmap(gl.GL_TEXTURE_2D)

        self.texture_id = texture
        self._pixels = None

    def activate(self, index: int) -> None:
        """Bind the texture to texture unit ``index``."""
        gl = _gl()
        if self._pixels is not None:
            self._upload(gl)
        gl.glActiveTexture(gl.GL_TEXTURE0 + index)
        gl.glBindTexture(gl.GL_TEXTURE_2D, self.texture_id)