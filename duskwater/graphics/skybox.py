# duskwater/graphics/skybox.py
from __future__ import annotations

from typing import TYPE_CHECKING

import moderngl

from duskwater.graphics.geometry import sphere_vertices
from duskwater.graphics.renderable import Renderable
from duskwater.graphics.shaders import ShaderManager
from duskwater.graphics.uniforms import set_matrix, set_uniform
from duskwater.graphics.water import FLAT_SHADER
from duskwater.types import Color3

if TYPE_CHECKING:
    from duskwater.graphics.frame import FrameContext


class Skybox(Renderable):
    """
    Unlit tinted sphere that follows the camera. When present it covers the
    atmosphere dome; its tint darkens with the sky.
    """

    def __init__(self, radius: float):
        self.radius = radius
        self.color: Color3 = (0.0, 0.0, 0.0)

        self._program: moderngl.Program | None = None
        self._vbo: moderngl.Buffer | None = None
        self._vao: moderngl.VertexArray | None = None

    def compile(self, gl: moderngl.Context, shaders: ShaderManager) -> None:
        self._program = shaders.get(FLAT_SHADER)
        self._vbo = gl.buffer(sphere_vertices(self.radius).tobytes())
        self._vao = gl.vertex_array(
            self._program, [(self._vbo, "3f", "in_position")]
        )

    def draw(self, frame: FrameContext) -> None:
        if self._vao is None:
            return

        prog = self._program
        set_matrix(prog, "u_view_proj", frame.camera.view_proj)
        set_uniform(prog, "u_offset", tuple(frame.camera.position))
        set_uniform(prog, "u_color", self.color)
        set_uniform(prog, "u_unlit", 1)

        gl = frame.gl
        gl.disable(moderngl.DEPTH_TEST | moderngl.CULL_FACE | moderngl.BLEND)
        self._vao.render(moderngl.TRIANGLES)

    def release(self) -> None:
        if self._vao:
            self._vao.release()
        if self._vbo:
            self._vbo.release()
        self._vao = None
        self._vbo = None
        self._program = None
