# duskwater/core/application.py
from __future__ import annotations

import logging

import moderngl
import pygame

from duskwater.config import AppSettings
from duskwater.core.bootstrap import SceneBootstrap
from duskwater.core.context import SceneContext
from duskwater.core.frame_loop import FrameLoop
from duskwater.environment.apply import on_sun_angle_changed
from duskwater.environment.model import EnvironmentModel
from duskwater.graphics.capabilities import SKY, WATER, ShaderProbe
from duskwater.graphics.renderer import SceneRenderer
from duskwater.graphics.shaders import ShaderManager
from duskwater.graphics.sky import SKY_SHADER
from duskwater.graphics.water import WATER_SHADER
from duskwater.input.context import default_scene_context
from duskwater.input.handler import PAN_BUTTON, ROTATE_BUTTON, InputHandler
from duskwater.input.keys import SUN_EARLIER, SUN_LATER
from duskwater.input.slider import SunAngleSlider
from duskwater.types import InputAction

logger = logging.getLogger(__name__)


class Application:
    """
    Owns the window, the GL context and the event loop. Everything the frame
    loop touches lives on the SceneContext built at startup.
    """

    def __init__(self, settings: AppSettings | None = None):
        self.settings = settings or AppSettings()

        self.window: pygame.Surface | None = None
        self.gl: moderngl.Context | None = None
        self.clock: pygame.time.Clock | None = None
        self._pygame_initialized = False
        self.running = False

        self.ctx: SceneContext | None = None
        self.renderer: SceneRenderer | None = None
        self.frame_loop: FrameLoop | None = None
        self.input: InputHandler | None = None
        self.model = EnvironmentModel()
        self.slider = SunAngleSlider(
            self.settings.controls.initial_sun_angle,
            self.settings.controls.sun_step,
        )

    def _create_window(self) -> None:
        win = self.settings.window

        pygame.init()
        self._pygame_initialized = True

        major, minor = divmod(win.gl_version, 100)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MAJOR_VERSION, major)
        pygame.display.gl_set_attribute(pygame.GL_CONTEXT_MINOR_VERSION, minor // 10)
        pygame.display.gl_set_attribute(
            pygame.GL_CONTEXT_PROFILE_MASK, pygame.GL_CONTEXT_PROFILE_CORE
        )
        pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)

        self.window = pygame.display.set_mode(
            (win.width, win.height),
            pygame.OPENGL | pygame.DOUBLEBUF | pygame.RESIZABLE,
        )

        self.gl = moderngl.create_context(require=win.gl_version)
        gl_version = self.gl.version_code
        logger.info("OpenGL version %s.%s", str(gl_version)[0], str(gl_version)[1:])

        self.clock = pygame.time.Clock()
        pygame.key.set_repeat(
            self.settings.controls.key_repeat_delay_ms,
            self.settings.controls.key_repeat_interval_ms,
        )

    def initialize(self) -> None:
        self._create_window()
        assert self.gl is not None

        shaders = ShaderManager(self.gl)
        probe = ShaderProbe(shaders, {SKY: SKY_SHADER, WATER: WATER_SHADER})

        self.ctx = SceneBootstrap(self.settings, probe).build()

        self.renderer = SceneRenderer(self.gl, shaders)
        self.renderer.prepare(self.ctx)
        self.frame_loop = FrameLoop(self.ctx, self.renderer)

        self.input = InputHandler(self.ctx.keys)
        self.input.push_context(default_scene_context())
        self.input.on_press(self._on_action)

        self.slider.subscribe(self._on_sun_angle)
        # Apply the starting position once so the first frame is lit
        self.slider.notify()
        logger.info("initialization complete")

    def _on_sun_angle(self, value: float) -> None:
        assert self.ctx is not None
        on_sun_angle_changed(self.ctx, self.model, value)
        pygame.display.set_caption(
            f"{self.settings.window.title} - sun {value:.0f}"
        )

    def _on_action(self, action: InputAction) -> None:
        if action == SUN_EARLIER:
            self.slider.step(-1)
        elif action == SUN_LATER:
            self.slider.step(1)

    def _handle_events(self) -> None:
        assert self.ctx is not None and self.input is not None

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.VIDEORESIZE:
                self.ctx.resize(event.w, event.h)
                logger.debug("resized to %dx%d", event.w, event.h)
            else:
                self.input.process_event(event)

        h = self.ctx.viewport.height
        dx, dy = self.input.take_drag(ROTATE_BUTTON)
        if dx or dy:
            self.ctx.orbit.rotate_by_pixels(dx, dy, h)
        dx, dy = self.input.take_drag(PAN_BUTTON)
        if dx or dy:
            self.ctx.orbit.pan_by_pixels(dx, dy, h)

    def run(self) -> int:
        try:
            self.initialize()
        except Exception:
            logger.exception("failed to initialize the scene")
            self.shutdown()
            return 1

        assert self.frame_loop is not None and self.clock is not None
        fps = self.settings.window.target_fps
        self.running = True
        dt = 0.0

        try:
            while self.running:
                self._handle_events()
                self.frame_loop.tick(dt)
                pygame.display.flip()
                dt = self.clock.tick(fps) / 1000.0
        finally:
            self.shutdown()

        return 0

    def shutdown(self) -> None:
        if self.renderer is not None:
            self.renderer.release()
            self.renderer = None
        if self._pygame_initialized:
            pygame.quit()
            self._pygame_initialized = False
