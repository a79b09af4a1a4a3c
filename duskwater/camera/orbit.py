# duskwater/camera/orbit.py
from __future__ import annotations

import math
from typing import TYPE_CHECKING

from duskwater.camera.camera import PerspectiveCamera
from duskwater.math import cartesian_to_spherical, cross_vec3, spherical_to_cartesian
from duskwater.types import Vector3

if TYPE_CHECKING:
    from duskwater.core.context import SceneContext

EPS = 1e-6


class OrbitControls:
    """
    Pointer-driven rotation and panning around a target point.

    Pointer input only queues deltas; `update()` applies them, eased by the
    damping factor, and re-aims the camera at the target.
    """

    def __init__(
        self,
        camera: PerspectiveCamera,
        target: Vector3 | None = None,
        damping_factor: float = 0.05,
        enable_damping: bool = True,
        rotate_speed: float = 1.0,
        pan_speed: float = 1.0,
        min_polar_angle: float = 0.0,
        max_polar_angle: float = math.pi,
    ):
        self.camera = camera
        self.target = target or Vector3.zero()

        self.damping_factor = damping_factor
        self.enable_damping = enable_damping
        self.rotate_speed = rotate_speed
        self.pan_speed = pan_speed
        self.min_polar_angle = min_polar_angle
        self.max_polar_angle = max_polar_angle

        # Pending deltas
        self._delta_azimuth = 0.0
        self._delta_polar = 0.0
        self._pan_offset = Vector3.zero()

    # -- pointer input --
    def rotate_by_pixels(self, dx: float, dy: float, viewport_height: int) -> None:
        if viewport_height <= 0:
            return
        self._delta_azimuth -= (
            2.0 * math.pi * dx / viewport_height * self.rotate_speed
        )
        self._delta_polar -= (
            2.0 * math.pi * dy / viewport_height * self.rotate_speed
        )

    def pan_by_pixels(self, dx: float, dy: float, viewport_height: int) -> None:
        if viewport_height <= 0:
            return

        # Scale so the point under the cursor stays under the cursor
        distance = (self.camera.position - self.target).length()
        distance *= math.tan(math.radians(self.camera.fov) / 2.0)
        pan_x = 2.0 * dx * distance / viewport_height * self.pan_speed
        pan_y = 2.0 * dy * distance / viewport_height * self.pan_speed

        right = self.camera.right
        # Pan across the ground plane rather than screen space
        ground_forward = cross_vec3(Vector3.up(), right)

        self._pan_offset = (
            self._pan_offset + right * -pan_x + ground_forward * pan_y
        )

    def has_pending_motion(self) -> bool:
        return (
            abs(self._delta_azimuth) > EPS
            or abs(self._delta_polar) > EPS
            or self._pan_offset.length() > EPS
        )

    # -- per tick --
    def update(self) -> None:
        if not self.has_pending_motion():
            return

        offset = self.camera.position - self.target
        radius, polar, azimuth = cartesian_to_spherical(offset)

        factor = self.damping_factor if self.enable_damping else 1.0

        azimuth += self._delta_azimuth * factor
        polar += self._delta_polar * factor
        polar = max(self.min_polar_angle, min(self.max_polar_angle, polar))
        polar = max(EPS, min(math.pi - EPS, polar))

        self.target = self.target + self._pan_offset * factor

        self.camera.position = self.target + spherical_to_cartesian(
            radius, polar, azimuth
        )
        self.camera.look_at(self.target)

        if self.enable_damping:
            keep = 1.0 - self.damping_factor
            self._delta_azimuth *= keep
            self._delta_polar *= keep
            self._pan_offset = self._pan_offset * keep
        else:
            self._delta_azimuth = 0.0
            self._delta_polar = 0.0
            self._pan_offset = Vector3.zero()


def orbit_target_system(ctx: SceneContext) -> None:
    """Keeps the orbit pivot one unit ahead so free-fly and orbit agree."""
    camera = ctx.camera
    ctx.orbit.target = camera.position + camera.forward


def orbit_update_system(ctx: SceneContext) -> None:
    ctx.orbit.update()
