# duskwater/environment/apply.py
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from duskwater.environment.model import EnvironmentModel, EnvironmentParameters

if TYPE_CHECKING:
    from duskwater.core.context import SceneContext

logger = logging.getLogger(__name__)


def apply_environment(ctx: SceneContext, params: EnvironmentParameters) -> None:
    """
    Write a parameter set into the scene. Every value is overwritten, so the
    scene afterwards depends only on `params`.
    """
    ctx.sun_vector = params.sun_vector
    ctx.environment = params

    ctx.sky.apply(params)
    ctx.water.apply(params)

    ctx.background.color = params.background.to_rgb()
    ctx.starfield.opacity = params.starfield_opacity

    ctx.ambient.color = params.ambient.color.to_rgb()
    ctx.ambient.intensity = params.ambient.intensity

    ctx.directional.color = params.directional.color.to_rgb()
    ctx.directional.intensity = params.directional.intensity
    ctx.directional.position = params.sun_vector

    if ctx.skybox is not None:
        ctx.skybox.color = params.skybox_tint.to_rgb()


def on_sun_angle_changed(
    ctx: SceneContext, model: EnvironmentModel, sun_angle: float
) -> EnvironmentParameters:
    params = model.update(sun_angle)
    apply_environment(ctx, params)
    logger.debug(
        "sun angle %.1f: brightness %.3f, sunset %.3f",
        sun_angle,
        params.sky_brightness,
        params.sunset_progress,
    )
    return params
