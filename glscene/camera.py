"""First-person fly camera driven by keyboard and mouse."""

from __future__ import annotations

import math

import numpy as np

from .keyboard import KEY_A, KEY_D, KEY_LEFT_CONTROL, KEY_S, KEY_SPACE, KEY_W, Keyboard
from .mouse import Mouse
from .transforms import look_at, normalize, perspective


class Camera:
    """Moves with W/A/S/D, Space and Left Ctrl; looks around while the cursor is locked."""

    def __init__(self, position, aspect_ratio: float) -> None:
        self.position = np.array(position, dtype=float)
        self.front = np.array([0.0, 0.0, -1.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.pitch = 0.0
        self.yaw = -90.0
        self.speed = 2.5
        self.sensitivity = 0.2
        self.aspect_ratio = float(aspect_ratio)
        self.keyboard = Keyboard(
            [KEY_W, KEY_S, KEY_A, KEY_D, KEY_SPACE, KEY_LEFT_CONTROL]
        )
        self.mouse = Mouse()

    def __enter__(self) -> Camera:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def update(self, delta_time: float) -> None:
        """Apply mouse look and keyboard movement over ``delta_time`` seconds."""
        drag = self.mouse.get_movement()
        if drag.locked:
            self.yaw += drag.offset_x * self.sensitivity
            self.pitch += drag.offset_y * self.sensitivity
            self.pitch = min(89.0, max(-89.0, self.pitch))
            yaw = math.radians(self.yaw)
            pitch = math.radians(self.pitch)
            self.front = normalize(
                [
                    math.cos(yaw) * math.cos(pitch),
                    math.sin(pitch),
                    math.sin(yaw) * math.cos(pitch),
                ]
            )

        key = self.keyboard.get_key
        forward = int(key(KEY_W)) - int(key(KEY_S))
        sideways = int(key(KEY_D)) - int(key(KEY_A))
        vertical = int(key(KEY_SPACE)) - int(key(KEY_LEFT_CONTROL))

        right = normalize(np.cross(self.front, self.up))
        direction = self.speed * (
            forward * self.front + sideways * right + vertical * self.up
        )
        self.position = self.position + direction * delta_time

    def view(self, delta_time: float) -> np.ndarray:
        """Update the camera, then return its view matrix."""
        self.update(delta_time)
        return look_at(self.position, self.position + self.front, self.up)

    def projection(self) -> np.ndarray:
        """Return the 90-degree perspective projection for this camera."""
        return perspective(math.radians(90.0), self.aspect_ratio, 0.1, 100.0)

    def close(self) -> None:
        """Stop listening to keyboard and mouse events."""
        self.keyboard.close()
        self.mouse.close()