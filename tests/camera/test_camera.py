import numpy as np
import pytest

from duskwater.camera.camera import PerspectiveCamera
from duskwater.types import Vector3


def make_camera():
    return PerspectiveCamera(
        fov=60.0,
        aspect=16 / 9,
        near=1.0,
        far=20000.0,
        position=Vector3(0.0, 100.0, 1000.0),
    )


def test_look_at_normalizes_forward():
    cam = make_camera()
    cam.look_at(Vector3(0.0, 0.0, -1000.0))
    assert cam.forward.length() == pytest.approx(1.0)
    assert cam.forward.z < 0.0


def test_look_at_own_position_keeps_forward():
    cam = make_camera()
    before = cam.forward
    cam.look_at(cam.position)
    assert cam.forward == before


def test_right_is_horizontal():
    cam = make_camera()
    cam.look_at(Vector3(0.0, 0.0, -1000.0))
    right = cam.right

    assert right.y == 0.0
    assert right.is_close(Vector3(1.0, 0.0, 0.0), tol=1e-12)


def test_data_combines_matrices():
    cam = make_camera()
    data = cam.data()

    assert data.view_proj == pytest.approx(data.proj @ data.view)
    assert np.allclose(data.position, [0.0, 100.0, 1000.0])
    assert data.near == 1.0
    assert data.far == 20000.0


def test_set_viewport_updates_aspect():
    cam = make_camera()
    cam.set_viewport(800, 800)
    assert cam.aspect == 1.0
