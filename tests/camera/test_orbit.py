import math

import pytest

from duskwater.camera.camera import PerspectiveCamera
from duskwater.camera.orbit import OrbitControls
from duskwater.types import Vector3


@pytest.fixture
def camera():
    cam = PerspectiveCamera(
        fov=60.0, aspect=1.0, near=1.0, far=100.0, position=Vector3(0.0, 0.0, 10.0)
    )
    cam.look_at(Vector3.zero())
    return cam


def test_update_without_input_leaves_camera_alone(camera):
    orbit = OrbitControls(camera, Vector3.zero())
    before = (camera.position, camera.forward)

    orbit.update()

    assert (camera.position, camera.forward) == before
    assert not orbit.has_pending_motion()


def test_rotation_keeps_distance_and_aims_at_target(camera):
    orbit = OrbitControls(camera, Vector3.zero(), enable_damping=False)

    orbit.rotate_by_pixels(100, 0, viewport_height=720)
    orbit.update()

    assert camera.position.length() == pytest.approx(10.0)
    assert camera.position.x != pytest.approx(0.0)
    expected = (-camera.position).normalized()
    assert camera.forward.is_close(expected, tol=1e-9)
    assert not orbit.has_pending_motion()


def test_damping_spreads_motion_over_ticks(camera):
    orbit = OrbitControls(camera, Vector3.zero(), damping_factor=0.05)

    orbit.rotate_by_pixels(200, 0, viewport_height=720)
    orbit.update()
    first = camera.position
    assert orbit.has_pending_motion()

    orbit.update()
    assert camera.position != first


def test_polar_angle_is_clamped(camera):
    orbit = OrbitControls(camera, Vector3.zero(), enable_damping=False)

    # Drag far enough to flip over the pole
    orbit.rotate_by_pixels(0, 5000, viewport_height=720)
    orbit.update()

    assert math.isfinite(camera.position.y)
    assert camera.position.length() == pytest.approx(10.0)
    assert camera.forward.length() == pytest.approx(1.0)


def test_pan_moves_target_on_ground_plane(camera):
    orbit = OrbitControls(camera, Vector3.zero(), enable_damping=False)

    orbit.pan_by_pixels(50, 30, viewport_height=720)
    orbit.update()

    assert orbit.target != Vector3.zero()
    assert orbit.target.y == pytest.approx(0.0)
    # Camera moved with the target
    assert (camera.position - orbit.target).length() == pytest.approx(10.0)


def test_zero_height_viewport_is_ignored(camera):
    orbit = OrbitControls(camera, Vector3.zero())
    orbit.rotate_by_pixels(10, 10, viewport_height=0)
    orbit.pan_by_pixels(10, 10, viewport_height=0)
    assert not orbit.has_pending_motion()
