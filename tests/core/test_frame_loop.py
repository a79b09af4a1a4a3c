import pytest

from duskwater.core.frame_loop import FrameLoop
from duskwater.core.timing import SimulationTime
from duskwater.environment.apply import on_sun_angle_changed


def test_each_tick_renders_once(scene, renderer):
    loop = FrameLoop(scene, renderer)

    for _ in range(5):
        loop.tick()

    assert len(renderer.frames) == 5


def test_water_time_advances_a_fixed_step(scene, renderer):
    loop = FrameLoop(scene, renderer)

    loop.tick(0.5)
    loop.tick(0.001)
    loop.tick()

    times = [t for t, _, _ in renderer.frames]
    assert times == pytest.approx([1 / 60, 2 / 60, 3 / 60])
    assert scene.water_time.tick_count == 3
    assert loop.last_delta_hint == 0.0


def test_environment_is_not_recomputed_per_tick(scene, model, renderer):
    on_sun_angle_changed(scene, model, 40)
    params = scene.environment
    loop = FrameLoop(scene, renderer)

    for _ in range(3):
        loop.tick()

    assert all(env is params for _, _, env in renderer.frames)


def test_held_key_moves_camera_before_render(scene, renderer):
    loop = FrameLoop(scene, renderer)
    start = scene.camera.position
    forward = scene.camera.forward

    scene.keys.forward = True
    loop.tick()
    loop.tick()

    _, rendered_at, _ = renderer.frames[0]
    assert rendered_at.is_close(start + forward, tol=1e-9)
    assert scene.camera.position.is_close(start + forward * 2.0, tol=1e-9)


def test_idle_camera_does_not_drift(scene, renderer):
    loop = FrameLoop(scene, renderer)
    start = scene.camera.position
    forward = scene.camera.forward

    for _ in range(120):
        loop.tick()

    assert scene.camera.position == start
    assert scene.camera.forward == forward


def test_orbit_target_follows_camera(scene, renderer):
    loop = FrameLoop(scene, renderer)

    scene.keys.up = True
    loop.tick()

    expected = scene.camera.position + scene.camera.forward
    assert scene.orbit.target.is_close(expected, tol=1e-9)


def test_simulation_time_advanced():
    t = SimulationTime(fixed_delta_seconds=0.5)
    t2 = t.advanced().advanced()

    assert t.elapsed_seconds == 0.0
    assert t2.elapsed_seconds == 1.0
    assert t2.tick_count == 2
