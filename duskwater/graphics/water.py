# duskwater/graphics/water.py
from __future__ import annotations

from typing import TYPE_CHECKING

import moderngl

from duskwater.config import WaterSettings
from duskwater.graphics.geometry import plane_vertices
from duskwater.graphics.renderable import EnvironmentBackend
from duskwater.graphics.shaders import ShaderId, ShaderManager, ShaderRequest
from duskwater.graphics.textures import generate_water_normals
from duskwater.graphics.uniforms import set_matrix, set_uniform
from duskwater.types import Color3, Vector3

if TYPE_CHECKING:
    from duskwater.environment.model import EnvironmentParameters
    from duskwater.graphics.frame import FrameContext

WATER_SHADER = ShaderRequest(
    shader_id=ShaderId("water"),
    vertex="water.vert",
    fragment="water.frag",
    label="ShaderWater",
)

FLAT_SHADER = ShaderRequest(
    shader_id=ShaderId("flat"),
    vertex="flat.vert",
    fragment="flat.frag",
    label="Flat",
)


class WaterBackend(EnvironmentBackend):
    pass


class _PlaneMesh:
    """Shared VBO/VAO handling for the two water variants."""

    def __init__(self, size: float, height: float):
        self.size = size
        self.height = height
        self._vbo: moderngl.Buffer | None = None
        self._vao: moderngl.VertexArray | None = None

    def build(self, gl: moderngl.Context, program: moderngl.Program) -> None:
        self._vbo = gl.buffer(plane_vertices(self.size, self.height).tobytes())
        self._vao = gl.vertex_array(program, [(self._vbo, "3f", "in_position")])

    @property
    def ready(self) -> bool:
        return self._vao is not None

    def render(self) -> None:
        if self._vao is not None:
            self._vao.render(moderngl.TRIANGLES)

    def release(self) -> None:
        if self._vao:
            self._vao.release()
        if self._vbo:
            self._vbo.release()
        self._vao = None
        self._vbo = None


class ShaderWater(WaterBackend):
    """
    Animated ocean: scrolling normal map, sun glint, Fresnel blend
    towards the sky colour.
    """

    name = "shader"

    def __init__(self, settings: WaterSettings, normal_seed: int = 0):
        self.texture_size = settings.texture_size
        self.distortion_scale = settings.distortion_scale
        self.sun_color: Color3 = settings.sun_color
        self.water_color: Color3 = settings.water_color
        self.sun_direction = Vector3.zero()
        self.size_factor = 1.0
        self.alpha = 1.0
        self.normal_seed = normal_seed

        self._mesh = _PlaneMesh(settings.size, settings.height)
        self._program: moderngl.Program | None = None
        self._normals: moderngl.Texture | None = None

    def apply(self, params: EnvironmentParameters) -> None:
        self.sun_direction = params.water_sun_direction
        self.water_color = params.water_tint.to_rgb()

    def compile(self, gl: moderngl.Context, shaders: ShaderManager) -> None:
        self._program = shaders.get(WATER_SHADER)
        self._mesh.build(gl, self._program)

        pixels = generate_water_normals(self.texture_size, seed=self.normal_seed)
        self._normals = gl.texture(
            (self.texture_size, self.texture_size), 3, data=pixels.tobytes()
        )
        self._normals.repeat_x = True
        self._normals.repeat_y = True
        self._normals.build_mipmaps()
        self._normals.filter = (moderngl.LINEAR_MIPMAP_LINEAR, moderngl.LINEAR)

    def draw(self, frame: FrameContext) -> None:
        if not self._mesh.ready or self._normals is None:
            return

        gl = frame.gl
        prog = self._program

        set_matrix(prog, "u_view_proj", frame.camera.view_proj)
        set_uniform(prog, "u_eye", tuple(frame.camera.position))
        set_uniform(prog, "u_time", frame.elapsed_seconds)
        set_uniform(prog, "u_size", self.size_factor)
        set_uniform(prog, "u_alpha", self.alpha)
        set_uniform(prog, "u_distortion_scale", self.distortion_scale)
        set_uniform(prog, "u_sun_color", self.sun_color)
        set_uniform(prog, "u_sun_direction", tuple(self.sun_direction))
        set_uniform(prog, "u_water_color", self.water_color)
        set_uniform(prog, "u_sky_color", frame.background.color)
        set_uniform(prog, "u_normal_sampler", 0)

        self._normals.use(location=0)

        gl.enable(moderngl.DEPTH_TEST)
        gl.disable(moderngl.CULL_FACE)
        gl.disable(moderngl.BLEND)
        self._mesh.render()

    def release(self) -> None:
        self._mesh.release()
        if self._normals:
            self._normals.release()
        self._normals = None
        self._program = None


class FlatWater(WaterBackend):
    """
    Fallback: a plain coloured plane. It does not follow the time of day
    itself, but is lit by the scene's ambient and directional lights.
    """

    name = "flat"
    is_fallback = True

    def __init__(self, settings: WaterSettings):
        self.color: Color3 = settings.fallback_color
        self._mesh = _PlaneMesh(settings.size, settings.height)
        self._program: moderngl.Program | None = None

    def apply(self, params: EnvironmentParameters) -> None:
        pass

    def compile(self, gl: moderngl.Context, shaders: ShaderManager) -> None:
        self._program = shaders.get(FLAT_SHADER)
        self._mesh.build(gl, self._program)

    def draw(self, frame: FrameContext) -> None:
        if not self._mesh.ready:
            return

        prog = self._program
        set_matrix(prog, "u_view_proj", frame.camera.view_proj)
        set_uniform(prog, "u_offset", (0.0, 0.0, 0.0))
        set_uniform(prog, "u_color", self.color)
        set_uniform(prog, "u_unlit", 0)
        set_uniform(prog, "u_ambient", frame.ambient.radiance)
        set_uniform(prog, "u_light_color", frame.directional.radiance)
        set_uniform(prog, "u_light_direction", tuple(frame.directional.direction))

        frame.gl.enable(moderngl.DEPTH_TEST)
        frame.gl.disable(moderngl.CULL_FACE)
        frame.gl.disable(moderngl.BLEND)
        self._mesh.render()

    def release(self) -> None:
        self._mesh.release()
        self._program = None
