import logging
import math

import numpy as np
import pytest

from glscene import app


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("debug", logging.DEBUG),
        ("trace", logging.DEBUG),
        ("INFO", logging.INFO),
        ("warn", logging.WARNING),
        ("err", logging.ERROR),
        ("critical", logging.CRITICAL),
    ],
)
def test_log_level_from_environment(value, expected):
    assert app._log_level({app.LOG_LEVEL_ENV: value}) == expected


def test_log_level_defaults_to_info():
    assert app._log_level({}) == logging.INFO
    assert app._log_level({app.LOG_LEVEL_ENV: "nonsense"}) == logging.INFO


def test_log_level_off_silences_critical():
    assert app._log_level({app.LOG_LEVEL_ENV: "off"}) > logging.CRITICAL


def test_log_arguments_reports_each_argument(caplog):
    with caplog.at_level(logging.INFO, logger="glscene.app"):
        app._log_arguments(["prog", "--flag"])
    messages = [record.getMessage() for record in caplog.records]
    assert messages == ["Running with 2 args", "arg[0] = prog", "arg[1] = --flag"]


def test_model_matrix_places_origin_at_position():
    position = np.array([1.2, 1.0, 2.0])
    model = app._model_matrix(position, 1.0)
    assert np.allclose(model @ np.array([0.0, 0.0, 0.0, 1.0]), [*position, 1.0])


def test_model_matrix_scales_axes_uniformly():
    model = app._model_matrix([3.0, -1.0, 0.5], app.LIGHT_SCALE)
    assert np.allclose(np.diag(model)[:3], [app.LIGHT_SCALE] * 3)
    assert model[3, 3] == 1.0


def test_animate_light_starts_on_orbit():
    cube = np.array(app.CUBE_START)
    _, light = app._animate(cube, 0.0, 0.0)
    assert np.allclose(light, cube + np.array([1.0, 0.0, -2.0]))


@pytest.mark.parametrize("now", [0.3, 1.0, 2.7, 10.0])
def test_animate_light_orbit_invariants(now):
    cube = np.array([0.5, -0.25, 4.0])
    _, light = app._animate(cube, now, 0.0)
    offset = light - cube
    assert offset[0] ** 2 + offset[1] ** 2 == pytest.approx(1.0)
    assert offset[2] == pytest.approx(-2.0 * offset[0])


def test_animate_moves_cube_along_x_only():
    cube = np.array([1.0, 2.0, 3.0])
    moved, _ = app._animate(cube, 5.0, 0.2)
    assert moved[0] == pytest.approx(1.0 + app.CUBE_SPEED * 0.2)
    assert moved[1:].tolist() == [2.0, 3.0]


def test_animate_light_follows_cube_before_it_moves():
    cube = np.array([2.0, 0.0, 0.0])
    _, light_a = app._animate(cube, 1.0, 0.0)
    _, light_b = app._animate(cube, 1.0, 5.0)
    assert np.allclose(light_a, light_b)
    assert light_a[1] == pytest.approx(math.sin(app.ORBIT_RATE))


def test_animate_does_not_change_input():
    cube = np.array([0.0, 0.0, 0.0])
    app._animate(cube, 1.0, 1.0)
    assert cube.tolist() == [0.0, 0.0, 0.0]