# duskwater/graphics/shaders.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, NewType

import moderngl

logger = logging.getLogger(__name__)

ShaderId = NewType("ShaderId", str)

SHADER_DIR = Path(__file__).parent / "shaders"


@dataclass(frozen=True, slots=True)
class ShaderRequest:
    """
    Request to load/compile a vertex + fragment program.

    `vertex` and `fragment` are file names relative to the shader directory.
    """

    shader_id: ShaderId
    vertex: str
    fragment: str
    label: str = ""


def load_source(name: str, shader_dir: Path = SHADER_DIR) -> str:
    path = shader_dir / name
    if not path.exists():
        raise FileNotFoundError(f"Shader {name} missing in {shader_dir}")
    return path.read_text(encoding="utf-8")


class ShaderManager:
    """
    Loads, compiles and caches one program per shader id.
    """

    def __init__(self, gl: moderngl.Context, shader_dir: Path = SHADER_DIR):
        self._gl = gl
        self._dir = Path(shader_dir)
        self._cache: Dict[ShaderId, moderngl.Program] = {}

    def get(self, req: ShaderRequest) -> moderngl.Program:
        """Return a compiled program, compiling and caching as needed."""
        cached = self._cache.get(req.shader_id)
        if cached is not None:
            return cached

        vert = load_source(req.vertex, self._dir)
        frag = load_source(req.fragment, self._dir)

        program = self._gl.program(vertex_shader=vert, fragment_shader=frag)
        logger.debug("compiled %s", req.label or req.shader_id)

        self._cache[req.shader_id] = program
        return program

    def release(self) -> None:
        for program in self._cache.values():
            program.release()
        self._cache.clear()
