# duskwater/graphics/geometry.py
from __future__ import annotations

import math
import struct

import moderngl
import numpy as np


def create_fullscreen_triangle(ctx: moderngl.Context) -> moderngl.Buffer:
    """
    Create a vertex buffer for a fullscreen triangle.

    The triangle is defined in clip space and covers the entire viewport.

    Vertex positions (x, y):
        (-1, -1)
        (3, -1)
        (-1, 3)
    """
    verts = (-1.0, -1.0, 3.0, -1.0, -1.0, 3.0)
    data = struct.pack("6f", *verts)

    return ctx.buffer(data)


def plane_vertices(size: float, height: float) -> np.ndarray:
    """
    Two triangles spanning a square on the XZ plane, facing +Y.
    Returns (6, 3) float32 world positions.
    """
    h = size * 0.5
    return np.array(
        [
            [-h, height, -h],
            [-h, height, h],
            [h, height, h],
            [-h, height, -h],
            [h, height, h],
            [h, height, -h],
        ],
        dtype=np.float32,
    )


def sphere_vertices(radius: float, segments: int = 32, rings: int = 16) -> np.ndarray:
    """
    Triangle list for a UV sphere, (N, 3) float32.
    Winding is not relied upon; draw with culling disabled.
    """
    if segments < 3 or rings < 2:
        raise ValueError("sphere needs at least 3 segments and 2 rings")

    grid = np.empty((rings + 1, segments + 1, 3), dtype=np.float32)
    for r in range(rings + 1):
        polar = math.pi * r / rings
        for s in range(segments + 1):
            azimuth = 2.0 * math.pi * s / segments
            grid[r, s] = (
                radius * math.sin(polar) * math.sin(azimuth),
                radius * math.cos(polar),
                radius * math.sin(polar) * math.cos(azimuth),
            )

    tris = []
    for r in range(rings):
        for s in range(segments):
            a = grid[r, s]
            b = grid[r + 1, s]
            c = grid[r + 1, s + 1]
            d = grid[r, s + 1]
            tris.extend((a, b, c, a, c, d))

    return np.array(tris, dtype=np.float32)
