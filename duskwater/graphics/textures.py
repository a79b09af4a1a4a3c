# duskwater/graphics/textures.py
import math

import numpy as np

WAVES_PER_OCTAVE = 6


def generate_water_normals(
    size: int = 512,
    seed: int = 0,
    octaves: int = 4,
    strength: float = 0.15,
) -> np.ndarray:
    """
    Tileable tangent-space normal map built from a sum of sine waves.

    Integer wave numbers keep every wave periodic over the texture, so the
    map repeats without seams. Returns (size, size, 3) uint8, blue = up.
    """
    rng = np.random.default_rng(seed)

    coords = np.arange(size, dtype=np.float64) / size
    uu, vv = np.meshgrid(coords, coords)

    du = np.zeros((size, size), dtype=np.float64)
    dv = np.zeros((size, size), dtype=np.float64)

    for octave in range(octaves):
        max_k = 2 ** (octave + 1)
        amplitude = 1.0 / (2**octave)

        for _ in range(WAVES_PER_OCTAVE):
            kx, ky = 0, 0
            while kx == 0 and ky == 0:
                kx, ky = rng.integers(-max_k, max_k + 1, size=2)

            phase = rng.uniform(0.0, 2.0 * math.pi)
            arg = 2.0 * math.pi * (kx * uu + ky * vv) + phase

            # Analytic gradient of amplitude * sin(arg), normalized per wave
            k_len = math.hypot(kx, ky)
            slope = amplitude * np.cos(arg) / k_len
            du += slope * kx
            dv += slope * ky

    nx = -du * strength
    ny = -dv * strength
    nz = np.ones_like(nx)

    inv_len = 1.0 / np.sqrt(nx * nx + ny * ny + nz * nz)
    normals = np.stack([nx * inv_len, ny * inv_len, nz * inv_len], axis=-1)

    encoded = (normals * 0.5 + 0.5) * 255.0
    return np.clip(np.rint(encoded), 0, 255).astype(np.uint8)
