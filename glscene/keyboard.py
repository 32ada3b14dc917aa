"""Keyboard state tracking shared across subscribers."""

from __future__ import annotations

from enum import IntEnum
from typing import ClassVar, Iterable

KEY_W = ord("w")
KEY_S = ord("s")
KEY_A = ord("a")
KEY_D = ord("d")
KEY_SPACE = 0x020
KEY_LEFT_CONTROL = 0xFFE3


class KeyAction(IntEnum):
    """What happened to a key."""

    RELEASE = 0
    PRESS = 1
    REPEAT = 2


class Keyboard:
    """Tracks the pressed state of a fixed set of subscribed keys.

    Every live keyboard receives every key event dispatched through
    :meth:`dispatch`; keys it did not subscribe to are ignored.
    """

    _instances: ClassVar[list[Keyboard]] = []

    def __init__(self, keys: Iterable[int]) -> None:
        self._keys: dict[int, bool] = dict.fromkeys(keys, False)
        Keyboard._instances.append(self)

    def __enter__(self) -> Keyboard:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def get_key(self, key: int) -> bool:
        """Return whether a subscribed key is held; unknown keys read as released."""
        return self._keys.get(key, False)

    def set_key(self, key: int, value: bool) -> None:
        """Record the state of a subscribed key; unknown keys are ignored."""
        if key in self._keys:
            self._keys[key] = bool(value)

    def close(self) -> None:
        """Stop receiving key events."""
        Keyboard._instances[:] = [kb for kb in Keyboard._instances if kb is not self]

    @classmethod
    def dispatch(cls, key: int, action: KeyAction | int) -> None:
        """Deliver a key event to every live keyboard. Repeats are ignored."""
        action = KeyAction(action)
        if action is KeyAction.REPEAT:
            return
        pressed = action is not KeyAction.RELEASE
        for keyboard in list(cls._instances):
            keyboard.set_key(key, pressed)

    @staticmethod
    def setup(window) -> None:
        """Route a window's key press and release events to :meth:`dispatch`."""

        def on_key_press(symbol, modifiers):
            Keyboard.dispatch(symbol, KeyAction.PRESS)

        def on_key_release(symbol, modifiers):
            Keyboard.dispatch(symbol, KeyAction.RELEASE)

        window.push_handlers(on_key_press=on_key_press, on_key_release=on_key_release)