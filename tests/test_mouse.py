import pytest

from glscene.mouse import MOUSE_LEFT, MOUSE_RIGHT, CursorMovement, Mouse


@pytest.fixture
def mouse():
    m = Mouse()
    yield m
    m.close()


class FakeWindow:
    def __init__(self):
        self.handlers = {}
        self.exclusive = []

    def push_handlers(self, **handlers):
        self.handlers.update(handlers)

    def set_exclusive_mouse(self, value):
        self.exclusive.append(value)


def test_initial_movement_is_still(mouse):
    assert mouse.get_movement() == CursorMovement(0.0, 0.0, 0.0, 0.0, False)


def test_movement_offsets(mouse):
    Mouse.move(10, 20)
    movement = mouse.get_movement()
    assert movement.current_x == 10
    assert movement.current_y == 20
    assert movement.offset_x == 10
    assert movement.offset_y == -20


def test_movement_resets_after_reading(mouse):
    Mouse.move(3, 4)
    mouse.get_movement()
    second = mouse.get_movement()
    assert second.offset_x == 0
    assert second.offset_y == 0
    assert second.current_x == 3


def test_right_click_locks_and_unlock_resets(mouse):
    Mouse.click(MOUSE_RIGHT, True)
    Mouse.move(5, 6)
    assert mouse.get_movement().locked is True
    Mouse.click(MOUSE_RIGHT, False)
    assert (mouse.x, mouse.y, mouse.last_x, mouse.last_y) == (0.0, 0.0, 0.0, 0.0)
    assert mouse.locked is False


def test_other_buttons_ignored(mouse):
    window = FakeWindow()
    Mouse.click(MOUSE_LEFT, True, window)
    assert mouse.locked is False
    assert window.exclusive == []


def test_click_sets_exclusive_mode(mouse):
    window = FakeWindow()
    Mouse.click(MOUSE_RIGHT, True, window)
    Mouse.click(MOUSE_RIGHT, False, window)
    assert window.exclusive == [True, False]


def test_closed_mouse_not_updated():
    m = Mouse()
    m.close()
    Mouse.move(7, 8)
    assert (m.x, m.y) == (0.0, 0.0)


def test_setup_tracks_virtual_cursor(mouse):
    window = FakeWindow()
    Mouse.setup(window)
    window.handlers["on_mouse_press"](0, 0, MOUSE_RIGHT, 0)
    assert mouse.locked is True
    window.handlers["on_mouse_motion"](100, 100, 5, 3)
    window.handlers["on_mouse_drag"](100, 100, 5, 3, MOUSE_RIGHT, 0)
    movement = mouse.get_movement()
    assert movement.offset_x == 10
    assert movement.offset_y == 6
    window.handlers["on_mouse_release"](0, 0, MOUSE_RIGHT, 0)
    assert mouse.locked is False
    assert window.exclusive == [True, False]