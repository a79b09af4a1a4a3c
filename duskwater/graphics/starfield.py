# duskwater/graphics/starfield.py
from __future__ import annotations

from typing import TYPE_CHECKING

import moderngl
import numpy as np
from numpy.typing import NDArray

from duskwater.config import StarfieldSettings
from duskwater.graphics.renderable import Renderable
from duskwater.graphics.shaders import ShaderId, ShaderManager, ShaderRequest
from duskwater.graphics.uniforms import set_matrix, set_uniform

if TYPE_CHECKING:
    from duskwater.graphics.frame import FrameContext

STAR_SHADER = ShaderRequest(
    shader_id=ShaderId("stars"),
    vertex="stars.vert",
    fragment="stars.frag",
    label="Starfield",
)


def generate_star_positions(
    count: int, extent: float, rng: np.random.Generator
) -> NDArray[np.float32]:
    """
    Points in a cube of side `extent` centred on the origin, kept to the
    upper half so the stars sit above the horizon. Returns (count, 3).
    """
    x = (rng.random(count) - 0.5) * extent
    y = rng.random(count) * extent * 0.5
    z = (rng.random(count) - 0.5) * extent
    return np.stack([x, y, z], axis=-1).astype(np.float32)


class Starfield(Renderable):
    """
    Point cloud whose opacity tracks how dark the sky is.
    Transparent, never writes depth.
    """

    def __init__(self, settings: StarfieldSettings):
        rng = np.random.default_rng(settings.seed)
        self.positions = generate_star_positions(
            settings.count, settings.extent, rng
        )
        self.point_size = settings.point_size
        self.size_attenuation = settings.size_attenuation
        self.color = settings.color
        self.opacity = 0.0

        self._program: moderngl.Program | None = None
        self._vbo: moderngl.Buffer | None = None
        self._vao: moderngl.VertexArray | None = None

    @property
    def count(self) -> int:
        return len(self.positions)

    def compile(self, gl: moderngl.Context, shaders: ShaderManager) -> None:
        self._program = shaders.get(STAR_SHADER)
        self._vbo = gl.buffer(self.positions.tobytes())
        self._vao = gl.vertex_array(
            self._program, [(self._vbo, "3f", "in_position")]
        )

    def draw(self, frame: FrameContext) -> None:
        if self._vao is None or self.opacity <= 0.0:
            return

        gl = frame.gl
        prog = self._program

        set_matrix(prog, "u_view", frame.camera.view)
        set_matrix(prog, "u_proj", frame.camera.proj)
        set_uniform(prog, "u_size", self.point_size)
        set_uniform(prog, "u_scale", frame.viewport_height * 0.5)
        set_uniform(prog, "u_size_attenuation", int(self.size_attenuation))
        set_uniform(prog, "u_color", self.color)
        set_uniform(prog, "u_opacity", self.opacity)

        gl.enable(moderngl.DEPTH_TEST | moderngl.BLEND | moderngl.PROGRAM_POINT_SIZE)
        gl.blend_func = moderngl.SRC_ALPHA, moderngl.ONE_MINUS_SRC_ALPHA

        fbo = gl.fbo
        fbo.depth_mask = False
        try:
            self._vao.render(moderngl.POINTS)
        finally:
            fbo.depth_mask = True

    def release(self) -> None:
        if self._vao:
            self._vao.release()
        if self._vbo:
            self._vbo.release()
        self._vao = None
        self._vbo = None
        self._program = None
