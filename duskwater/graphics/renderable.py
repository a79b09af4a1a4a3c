# duskwater/graphics/renderable.py
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import moderngl

from duskwater.graphics.shaders import ShaderManager

if TYPE_CHECKING:
    from duskwater.environment.model import EnvironmentParameters
    from duskwater.graphics.frame import FrameContext


class Renderable(ABC):
    """
    Lifecycle shared by everything the scene renderer draws.

    State (uniform values, opacity, ...) lives on the object and can be read
    and written without a GL context. GPU resources only exist between
    `compile()` and `release()`.
    """

    def compile(self, gl: moderngl.Context, shaders: ShaderManager) -> None:
        pass

    @abstractmethod
    def draw(self, frame: FrameContext) -> None: ...

    def release(self) -> None:
        pass


class EnvironmentBackend(Renderable):
    """
    A renderable whose look follows the environment parameters.
    Full-featured and fallback implementations share this interface.
    """

    name: str = "backend"
    is_fallback: bool = False

    @abstractmethod
    def apply(self, params: EnvironmentParameters) -> None: ...
