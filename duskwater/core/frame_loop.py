# duskwater/core/frame_loop.py
from __future__ import annotations

from typing import Protocol

from duskwater.camera.controller import camera_movement_system
from duskwater.camera.orbit import orbit_target_system, orbit_update_system
from duskwater.core.context import SceneContext
from duskwater.core.scheduler import Scheduler, Stage, SystemId


class FrameRenderer(Protocol):
    def render(self, ctx: SceneContext) -> None: ...


def water_time_system(ctx: SceneContext) -> None:
    ctx.water_time = ctx.water_time.advanced()


class FrameLoop:
    """
    One `tick()` per display refresh. The host owns the scheduling and only
    promises to call `tick` repeatedly.

    The environment model is not run here: it only reacts to sun angle
    changes, so frame cadence and environment updates stay independent.
    """

    def __init__(self, ctx: SceneContext, renderer: FrameRenderer):
        self.ctx = ctx
        self.renderer = renderer
        self.scheduler = Scheduler()
        self.last_delta_hint = 0.0

        self.scheduler.add_system(Stage.TIME, water_time_system)
        self.scheduler.add_system(Stage.MOVEMENT, camera_movement_system)
        self.scheduler.add_system(Stage.POST_MOVEMENT, orbit_target_system)
        self.scheduler.add_system(
            Stage.POST_MOVEMENT,
            orbit_update_system,
            after=SystemId("orbit_target_system"),
        )

    def tick(self, delta_time_hint: float = 0.0) -> None:
        # The hint is informational; water time always moves one fixed step.
        self.last_delta_hint = delta_time_hint

        self.scheduler.run_all(self.ctx)
        self.renderer.render(self.ctx)
