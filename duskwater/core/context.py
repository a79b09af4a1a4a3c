# duskwater/core/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterator, Optional

from duskwater.camera.camera import PerspectiveCamera
from duskwater.camera.orbit import OrbitControls
from duskwater.config import AppSettings
from duskwater.core.timing import SimulationTime
from duskwater.graphics.lights import AmbientLight, Background, DirectionalLight
from duskwater.graphics.renderable import Renderable
from duskwater.graphics.sky import SkyBackend
from duskwater.graphics.skybox import Skybox
from duskwater.graphics.starfield import Starfield
from duskwater.graphics.water import WaterBackend
from duskwater.input.keys import KeyState
from duskwater.types import Vector3

if TYPE_CHECKING:
    from duskwater.environment.model import EnvironmentParameters


@dataclass(slots=True)
class Viewport:
    width: int
    height: int

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height if self.height > 0 else 1.0


@dataclass
class SceneContext:
    """
    All mutable scene state, built by the bootstrap and handed explicitly to
    the frame loop, the environment applier and the input handlers.
    """

    settings: AppSettings
    viewport: Viewport
    camera: PerspectiveCamera
    orbit: OrbitControls
    keys: KeyState

    sky: SkyBackend
    water: WaterBackend
    starfield: Starfield
    background: Background
    ambient: AmbientLight
    directional: DirectionalLight
    skybox: Optional[Skybox] = None

    water_time: SimulationTime = field(default_factory=SimulationTime)
    sun_vector: Vector3 = field(default_factory=Vector3.zero)
    environment: Optional[EnvironmentParameters] = None

    def renderables(self) -> Iterator[Renderable]:
        """Draw order: sky, skybox, water, then the transparent stars."""
        yield self.sky
        if self.skybox is not None:
            yield self.skybox
        yield self.water
        yield self.starfield

    def resize(self, width: int, height: int) -> None:
        self.viewport = Viewport(max(width, 1), max(height, 1))
        self.camera.set_viewport(self.viewport.width, self.viewport.height)
