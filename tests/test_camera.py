import math

import numpy as np
import pytest

from glscene.camera import Camera
from glscene.keyboard import KEY_A, KEY_D, KEY_S, KEY_SPACE, KEY_W, KeyAction, Keyboard
from glscene.mouse import MOUSE_RIGHT, Mouse


@pytest.fixture
def camera():
    cam = Camera([1.0, 2.0, 3.0], 16 / 9)
    yield cam
    cam.close()


def test_initial_orientation(camera):
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])
    assert camera.yaw == -90.0
    assert camera.pitch == 0.0


def test_view_without_input_keeps_position(camera):
    view = camera.view(1.0)
    assert np.allclose(camera.position, [1.0, 2.0, 3.0])
    assert np.allclose(view @ np.append(camera.position, 1.0), [0.0, 0.0, 0.0, 1.0])


def test_forward_moves_along_front(camera):
    start = camera.position.copy()
    Keyboard.dispatch(KEY_W, KeyAction.PRESS)
    camera.update(0.5)
    Keyboard.dispatch(KEY_W, KeyAction.RELEASE)
    assert np.allclose(camera.position, start + camera.speed * 0.5 * camera.front)


def test_opposite_keys_cancel(camera):
    start = camera.position.copy()
    for key in (KEY_W, KEY_S, KEY_A, KEY_D):
        Keyboard.dispatch(key, KeyAction.PRESS)
    camera.update(1.0)
    for key in (KEY_W, KEY_S, KEY_A, KEY_D):
        Keyboard.dispatch(key, KeyAction.RELEASE)
    assert np.allclose(camera.position, start)


def test_space_moves_up(camera):
    start = camera.position.copy()
    Keyboard.dispatch(KEY_SPACE, KeyAction.PRESS)
    camera.update(1.0)
    Keyboard.dispatch(KEY_SPACE, KeyAction.RELEASE)
    assert np.allclose(camera.position - start, camera.speed * camera.up)


def test_strafe_is_perpendicular_to_front(camera):
    start = camera.position.copy()
    Keyboard.dispatch(KEY_D, KeyAction.PRESS)
    camera.update(1.0)
    Keyboard.dispatch(KEY_D, KeyAction.RELEASE)
    moved = camera.position - start
    assert math.isclose(np.dot(moved, camera.front), 0.0, abs_tol=1e-12)
    assert math.isclose(np.linalg.norm(moved), camera.speed)


def test_unlocked_mouse_does_not_rotate(camera):
    Mouse.move(500, 500)
    camera.update(0.0)
    assert np.allclose(camera.front, [0.0, 0.0, -1.0])


def test_pitch_is_clamped(camera):
    Mouse.click(MOUSE_RIGHT, True)
    Mouse.move(0, -100000)
    camera.update(0.0)
    Mouse.click(MOUSE_RIGHT, False)
    assert camera.pitch == 89.0
    assert math.isclose(np.linalg.norm(camera.front), 1.0)
    assert math.isclose(camera.front[1], math.sin(math.radians(89.0)))


def test_yaw_follows_horizontal_drag(camera):
    Mouse.click(MOUSE_RIGHT, True)
    Mouse.move(50, 0)
    camera.update(0.0)
    Mouse.click(MOUSE_RIGHT, False)
    assert math.isclose(camera.yaw, -90.0 + 50 * camera.sensitivity)
    assert math.isclose(np.linalg.norm(camera.front), 1.0)


def test_projection_has_ninety_degree_fov(camera):
    proj = camera.projection()
    assert math.isclose(proj[1, 1], 1.0)
    assert math.isclose(proj[0, 0] * camera.aspect_ratio, proj[1, 1])


def test_closed_camera_ignores_keys():
    cam = Camera([0.0, 0.0, 0.0], 1.0)
    cam.close()
    Keyboard.dispatch(KEY_W, KeyAction.PRESS)
    cam.update(1.0)
    Keyboard.dispatch(KEY_W, KeyAction.RELEASE)
    assert np.allclose(cam.position, [0.0, 0.0, 0.0])