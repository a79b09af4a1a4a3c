# duskwater/camera/controller.py
from __future__ import annotations

from typing import TYPE_CHECKING

from duskwater.input.keys import KeyState
from duskwater.math import cross_vec3, norm_vec
from duskwater.types import Vector3

if TYPE_CHECKING:
    from duskwater.core.context import SceneContext

WORLD_UP = Vector3(0.0, 1.0, 0.0)


def compute_camera_delta(
    keys: KeyState, forward: Vector3, move_speed: float
) -> Vector3:
    """
    Position change for one tick. Constant speed while a key is held,
    nothing otherwise.
    """
    delta = Vector3.zero()
    if not keys.any_held():
        return delta

    # up x forward keeps strafing level whatever the pitch
    right = norm_vec(cross_vec3(WORLD_UP, forward))

    if keys.forward:
        delta = delta + forward * move_speed
    if keys.back:
        delta = delta + forward * -move_speed
    if keys.strafe_left:
        delta = delta + right * -move_speed
    if keys.strafe_right:
        delta = delta + right * move_speed
    if keys.down:
        delta = delta + WORLD_UP * -move_speed
    if keys.up:
        delta = delta + WORLD_UP * move_speed

    return delta


def camera_movement_system(ctx: SceneContext) -> None:
    camera = ctx.camera
    delta = compute_camera_delta(
        ctx.keys, camera.forward, ctx.settings.camera.move_speed
    )
    camera.position = camera.position + delta
