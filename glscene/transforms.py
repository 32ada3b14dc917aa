"""Matrix helpers for a right-handed OpenGL camera.

Matrices are 4x4 float arrays in ordinary mathematical layout
(``m[row, col]``, column vectors); transpose them before uploading to GL
without the transpose flag.
"""

from __future__ import annotations

import math

import numpy as np


def normalize(vector) -> np.ndarray:
    """Return the vector scaled to unit length."""
    v = np.asarray(vector, dtype=float)
    length = np.linalg.norm(v)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def look_at(eye, center, up) -> np.ndarray:
    """Return a view matrix looking from ``eye`` towards ``center``."""
    eye = np.asarray(eye, dtype=float)
    f = normalize(np.asarray(center, dtype=float) - eye)
    s = normalize(np.cross(f, np.asarray(up, dtype=float)))
    u = np.cross(s, f)
    result = np.identity(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


def perspective(fovy: float, aspect: float, near: float, far: float) -> np.ndarray:
    """Return a perspective projection; ``fovy`` is in radians, depth maps to [-1, 1]."""
    if aspect == 0 or near == far:
        raise ValueError("aspect must be non-zero and near must differ from far")
    tan_half = math.tan(fovy / 2.0)
    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(far + near) / (far - near)
    result[2, 3] = -(2.0 * far * near) / (far - near)
    result[3, 2] = -1.0
    return result


def translate(matrix, offset) -> np.ndarray:
    """Return ``matrix`` followed by a translation by ``offset``."""
    t = np.identity(4)
    t[:3, 3] = np.asarray(offset, dtype=float)
    return np.asarray(matrix, dtype=float) @ t


def scale(matrix, factors) -> np.ndarray:
    """Return ``matrix`` followed by a per-axis scale; a scalar scales uniformly."""
    f = np.broadcast_to(np.asarray(factors, dtype=float), (3,))
    s = np.diag([*f, 1.0])
    return np.asarray(matrix, dtype=float) @ s


def normal_matrix(view, model) -> np.ndarray:
    """Return the 3x3 matrix that transforms normals into view space."""
    model_view = np.asarray(view, dtype=float) @ np.asarray(model, dtype=float)
    return np.linalg.inv(model_view[:3, :3]).T