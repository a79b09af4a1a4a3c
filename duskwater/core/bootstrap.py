# duskwater/core/bootstrap.py
from __future__ import annotations

import logging
from typing import Callable, TypeVar

from duskwater.camera.camera import PerspectiveCamera
from duskwater.camera.orbit import OrbitControls
from duskwater.config import AppSettings
from duskwater.core.context import SceneContext, Viewport
from duskwater.core.timing import SimulationTime
from duskwater.graphics.capabilities import (
    SKY,
    WATER,
    CapabilityProbe,
    CapabilityUnavailable,
)
from duskwater.graphics.lights import AmbientLight, Background, DirectionalLight
from duskwater.graphics.sky import AtmosphereSky, FlatSky, SkyBackend
from duskwater.graphics.skybox import Skybox
from duskwater.graphics.starfield import Starfield
from duskwater.graphics.water import FlatWater, ShaderWater, WaterBackend
from duskwater.input.keys import KeyState

logger = logging.getLogger(__name__)

B = TypeVar("B")


def _select(
    probe: CapabilityProbe,
    feature: str,
    enabled: bool,
    full: Callable[[], B],
    fallback: Callable[[], B],
) -> B:
    if not enabled:
        logger.info("%s disabled by settings, using fallback", feature)
        return fallback()

    try:
        probe.require(feature)
    except CapabilityUnavailable as e:
        logger.error("%s unavailable, using fallback: %s", feature, e)
        return fallback()

    return full()


class SceneBootstrap:
    """
    Builds the camera, entities and lights, and picks the sky and water
    implementations once from what the probe reports.
    """

    def __init__(self, settings: AppSettings, probe: CapabilityProbe):
        self.settings = settings
        self.probe = probe

    def build(self, viewport: Viewport | None = None) -> SceneContext:
        s = self.settings
        if viewport is None:
            viewport = Viewport(s.window.width, s.window.height)

        camera = PerspectiveCamera(
            fov=s.camera.fov,
            aspect=viewport.aspect_ratio,
            near=s.camera.near,
            far=s.camera.far,
            position=s.camera.position,
        )
        camera.look_at(s.camera.look_at)

        orbit = OrbitControls(
            camera,
            target=camera.position + camera.forward,
            damping_factor=s.camera.damping_factor,
            rotate_speed=s.camera.rotate_speed,
            pan_speed=s.camera.pan_speed,
            min_polar_angle=s.camera.min_polar_angle,
            max_polar_angle=s.camera.max_polar_angle,
        )

        sky: SkyBackend = _select(
            self.probe,
            SKY,
            s.sky.enabled,
            lambda: AtmosphereSky(s.sky),
            FlatSky,
        )
        water: WaterBackend = _select(
            self.probe,
            WATER,
            s.water.enabled,
            lambda: ShaderWater(s.water),
            lambda: FlatWater(s.water),
        )

        skybox = Skybox(s.sky.skybox_radius) if s.sky.skybox_enabled else None

        return SceneContext(
            settings=s,
            viewport=viewport,
            camera=camera,
            orbit=orbit,
            keys=KeyState(),
            sky=sky,
            water=water,
            starfield=Starfield(s.starfield),
            background=Background(color=s.sky.fallback_color),
            ambient=AmbientLight(),
            directional=DirectionalLight(),
            skybox=skybox,
            water_time=SimulationTime(fixed_delta_seconds=s.water.time_step),
        )
