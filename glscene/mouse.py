"""Cursor tracking shared across subscribers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

MOUSE_LEFT = 1
MOUSE_MIDDLE = 2
MOUSE_RIGHT = 4


@dataclass(frozen=True)
class CursorMovement:
    """Cursor position and its change since the previous reading."""

    current_x: float
    current_y: float
    offset_x: float
    offset_y: float
    locked: bool


class Mouse:
    """Tracks cursor position and whether the cursor is locked for dragging.

    Holding the right mouse button locks the cursor; releasing it unlocks
    and resets the tracked position.
    """

    _instances: ClassVar[list[Mouse]] = []

    def __init__(self) -> None:
        self.x = 0.0
        self.y = 0.0
        self.last_x = 0.0
        self.last_y = 0.0
        self.locked = False
        Mouse._instances.append(self)

    def __enter__(self) -> Mouse:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Stop receiving cursor events."""
        Mouse._instances[:] = [m for m in Mouse._instances if m is not self]

    @classmethod
    def move(cls, x: float, y: float) -> None:
        """Record a new cursor position (y grows downwards) on every live mouse."""
        for mouse in list(cls._instances):
            mouse.x = float(x)
            mouse.y = float(y)

    @classmethod
    def click(cls, button: int, pressed: bool, window=None) -> None:
        """Handle a button event; the right button locks or unlocks the cursor."""
        if button != MOUSE_RIGHT:
            return
        locked = bool(pressed)
        for mouse in list(cls._instances):
            mouse.locked = locked
            if not locked:
                mouse.x = mouse.y = 0.0
                mouse.last_x = mouse.last_y = 0.0
        if window is not None:
            window.set_exclusive_mouse(locked)

    def get_movement(self) -> CursorMovement:
        """Return the movement since the last call and remember the current position."""
        payload = CursorMovement(
            self.x,
            self.y,
            self.x - self.last_x,
            self.last_y - self.y,
            self.locked,
        )
        self.last_x = self.x
        self.last_y = self.y
        return payload

    @staticmethod
    def setup(window) -> None:
        """Route a window's motion and button events to :meth:`move` and :meth:`click`."""
        cursor_x = 0.0
        cursor_y = 0.0

        def on_mouse_motion(x, y, dx, dy):
            nonlocal cursor_x, cursor_y
            cursor_x += dx
            cursor_y -= dy
            Mouse.move(cursor_x, cursor_y)

        def on_mouse_drag(x, y, dx, dy, buttons, modifiers):
            on_mouse_motion(x, y, dx, dy)

        def on_button(button, pressed):
            nonlocal cursor_x, cursor_y
            if button == MOUSE_RIGHT:
                cursor_x = cursor_y = 0.0
            Mouse.click(button, pressed, window)

        def on_mouse_press(x, y, button, modifiers):
            on_button(button, True)

        def on_mouse_release(x, y, button, modifiers):
            on_button(button, False)

        window.push_handlers(
            on_mouse_motion=on_mouse_motion,
            on_mouse_drag=on_mouse_drag,
            on_mouse_press=on_mouse_press,
            on_mouse_release=on_mouse_release,
        )