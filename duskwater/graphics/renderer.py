# duskwater/graphics/renderer.py
from __future__ import annotations

import logging

import moderngl

from duskwater.core.context import SceneContext
from duskwater.graphics.frame import FrameContext
from duskwater.graphics.shaders import ShaderManager

logger = logging.getLogger(__name__)


class SceneRenderer:
    """
    Draws a SceneContext into the window's default framebuffer.
    """

    def __init__(self, gl: moderngl.Context, shaders: ShaderManager):
        self.gl = gl
        self.shaders = shaders
        self._compiled: list = []

    def prepare(self, ctx: SceneContext) -> None:
        """Create GPU resources for everything in the scene."""
        for renderable in ctx.renderables():
            renderable.compile(self.gl, self.shaders)
            self._compiled.append(renderable)
        logger.info(
            "renderer ready: sky=%s water=%s stars=%d",
            ctx.sky.name,
            ctx.water.name,
            ctx.starfield.count,
        )

    def render(self, ctx: SceneContext) -> None:
        gl = self.gl
        w, h = ctx.viewport.width, ctx.viewport.height

        frame = FrameContext(
            gl=gl,
            camera=ctx.camera.data(),
            viewport_width=w,
            viewport_height=h,
            elapsed_seconds=ctx.water_time.elapsed_seconds,
            background=ctx.background,
            ambient=ctx.ambient,
            directional=ctx.directional,
        )

        gl.screen.use()
        gl.viewport = (0, 0, w, h)
        r, g, b = ctx.background.color
        gl.clear(r, g, b, 1.0, depth=1.0)

        for renderable in ctx.renderables():
            renderable.draw(frame)

    def release(self) -> None:
        for renderable in self._compiled:
            renderable.release()
        self._compiled.clear()
        self.shaders.release()
