# duskwater/graphics/sky.py
from __future__ import annotations

from typing import TYPE_CHECKING

import moderngl
import numpy as np

from duskwater.config import SkySettings
from duskwater.graphics.geometry import create_fullscreen_triangle
from duskwater.graphics.renderable import EnvironmentBackend
from duskwater.graphics.shaders import ShaderId, ShaderManager, ShaderRequest
from duskwater.graphics.uniforms import set_matrix, set_uniform
from duskwater.types import Vector3

if TYPE_CHECKING:
    from duskwater.environment.model import EnvironmentParameters
    from duskwater.graphics.frame import FrameContext

SKY_SHADER = ShaderRequest(
    shader_id=ShaderId("sky"),
    vertex="fullscreen.vert",
    fragment="sky.frag",
    label="AtmosphereSky",
)


class SkyBackend(EnvironmentBackend):
    pass


class AtmosphereSky(SkyBackend):
    """
    Analytic daylight sky drawn behind the scene.

    The dome is infinitely far away: it is drawn as a fullscreen triangle
    and each pixel's view ray is rebuilt from the inverse view-projection.
    """

    name = "atmosphere"

    def __init__(self, settings: SkySettings):
        self.turbidity = settings.turbidity
        self.rayleigh = settings.rayleigh
        self.mie_coefficient = settings.mie_coefficient
        self.mie_directional_g = settings.mie_directional_g
        self.sun_position = Vector3.zero()
        self.up = Vector3.up()

        self._program: moderngl.Program | None = None
        self._vbo: moderngl.Buffer | None = None
        self._vao: moderngl.VertexArray | None = None

    def apply(self, params: EnvironmentParameters) -> None:
        self.sun_position = params.sun_vector
        self.turbidity = params.turbidity
        self.rayleigh = params.rayleigh
        self.mie_coefficient = params.mie_coefficient
        self.mie_directional_g = params.mie_directional_g

    def compile(self, gl: moderngl.Context, shaders: ShaderManager) -> None:
        self._program = shaders.get(SKY_SHADER)
        self._vbo = create_fullscreen_triangle(gl)
        self._vao = gl.vertex_array(
            self._program, [(self._vbo, "2f", "in_position")]
        )

    def draw(self, frame: FrameContext) -> None:
        if self._vao is None:
            return

        gl = frame.gl
        prog = self._program

        inv_view_proj = np.linalg.inv(frame.camera.view_proj)
        set_matrix(prog, "u_inv_view_proj", inv_view_proj)
        set_uniform(prog, "u_camera_position", tuple(frame.camera.position))
        set_uniform(prog, "u_sun_position", tuple(self.sun_position))
        set_uniform(prog, "u_up", tuple(self.up))
        set_uniform(prog, "u_turbidity", self.turbidity)
        set_uniform(prog, "u_rayleigh", self.rayleigh)
        set_uniform(prog, "u_mie_coefficient", self.mie_coefficient)
        set_uniform(prog, "u_mie_directional_g", self.mie_directional_g)

        gl.disable(moderngl.DEPTH_TEST)
        gl.disable(moderngl.BLEND)
        self._vao.render(moderngl.TRIANGLES, vertices=3)

    def release(self) -> None:
        if self._vao:
            self._vao.release()
        if self._vbo:
            self._vbo.release()
        self._vao = None
        self._vbo = None
        self._program = None


class FlatSky(SkyBackend):
    """
    Fallback: no dome at all, the background clear colour is the sky.
    """

    name = "flat"
    is_fallback = True

    def apply(self, params: EnvironmentParameters) -> None:
        pass

    def draw(self, frame: FrameContext) -> None:
        pass
