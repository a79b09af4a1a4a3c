# duskwater/graphics/uniforms.py
from typing import Any

import moderngl
import numpy as np


def set_uniform(
    program: moderngl.Program | None, name: str, value: Any
) -> None:
    """
    Assign a uniform if the linked program still has it.
    GLSL compilers drop unused uniforms, so a missing name is not an error.
    """
    if not program:
        return

    if name not in program:
        return

    member = program[name]

    if isinstance(member, moderngl.Uniform):
        if isinstance(value, bytes):
            member.write(value)
        else:
            member.value = value


def pack_mat4(mat: np.ndarray) -> bytes:
    """
    Packs a row-major numpy 4x4 as the column-major floats GLSL expects.
    """
    if mat.shape != (4, 4):
        raise ValueError("Matrix must be 4x4")
    return mat.astype("f4").T.tobytes()


def set_matrix(program: moderngl.Program | None, name: str, mat: np.ndarray) -> None:
    set_uniform(program, name, pack_mat4(mat))
