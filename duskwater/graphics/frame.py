# duskwater/graphics/frame.py
from __future__ import annotations

from dataclasses import dataclass

import moderngl

from duskwater.camera.camera import CameraData
from duskwater.graphics.lights import AmbientLight, Background, DirectionalLight


@dataclass(frozen=True, slots=True)
class FrameContext:
    """Everything a renderable needs to draw one frame."""

    gl: moderngl.Context
    camera: CameraData
    viewport_width: int
    viewport_height: int
    elapsed_seconds: float
    background: Background
    ambient: AmbientLight
    directional: DirectionalLight
