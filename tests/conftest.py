from dataclasses import replace

import pytest

from duskwater.config import AppSettings, StarfieldSettings
from duskwater.core.bootstrap import SceneBootstrap
from duskwater.core.context import Viewport
from duskwater.environment.model import EnvironmentModel
from duskwater.graphics.capabilities import SKY, WATER, StaticProbe


class RecordingRenderer:
    """Stands in for the GL renderer; remembers what each frame saw."""

    def __init__(self):
        self.frames = []

    def render(self, ctx):
        self.frames.append(
            (ctx.water_time.elapsed_seconds, ctx.camera.position, ctx.environment)
        )


@pytest.fixture
def settings():
    """Default settings with a small, seeded starfield."""
    return AppSettings(starfield=replace(StarfieldSettings(), count=256, seed=7))


@pytest.fixture
def scene(settings):
    """A fully featured scene built without a GL context."""
    probe = StaticProbe({SKY, WATER})
    return SceneBootstrap(settings, probe).build(Viewport(1280, 720))


@pytest.fixture
def model():
    return EnvironmentModel()


@pytest.fixture
def renderer():
    return RecordingRenderer()
