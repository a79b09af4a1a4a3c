# duskwater/math.py
import math

import numpy as np

from duskwater.types import Scalar, Vector3


def lerp(a: Scalar, b: Scalar, t: Scalar) -> Scalar:
    return a + (b - a) * t


def smoothstep(x: Scalar, edge0: Scalar, edge1: Scalar) -> Scalar:
    """
    Cubic Hermite step between two edges, flat at both ends.
    Saturates to 0 at or below edge0 and to 1 at or above edge1.
    """
    if x <= edge0:
        return 0.0
    if x >= edge1:
        return 1.0

    t = (x - edge0) / (edge1 - edge0)
    return t * t * (3.0 - 2.0 * t)


def spherical_to_cartesian(
    radius: Scalar, polar: Scalar, azimuth: Scalar
) -> Vector3:
    """
    polar is measured from +Y, azimuth around +Y starting at +Z.
    """
    sin_polar_radius = math.sin(polar) * radius
    return Vector3(
        sin_polar_radius * math.sin(azimuth),
        math.cos(polar) * radius,
        sin_polar_radius * math.cos(azimuth),
    )


def cartesian_to_spherical(v: Vector3) -> tuple[Scalar, Scalar, Scalar]:
    """Inverse of spherical_to_cartesian: (radius, polar, azimuth)."""
    radius = v.length()
    if radius == 0.0:
        return 0.0, 0.0, 0.0

    polar = math.acos(min(max(v.y / radius, -1.0), 1.0))
    azimuth = math.atan2(v.x, v.z)
    return radius, polar, azimuth


# -- Vector Math --
def magnitude_vec(v: Vector3) -> Scalar:
    return math.hypot(*v)


def norm_vec(v: Vector3) -> Vector3:
    mag = magnitude_vec(v)
    if mag == 0:
        return v
    return v / mag


def cross_vec3(a: Vector3, b: Vector3) -> Vector3:
    return Vector3(
        a.y * b.z - a.z * b.y,
        a.z * b.x - a.x * b.z,
        a.x * b.y - a.y * b.x,
    )


def create_view_matrix(eye: Vector3, forward: Vector3) -> np.ndarray:
    """
    Look-along view matrix (world -> camera) with a fixed +Y up.
    forward is expected to be normalized.
    """
    fx, fy, fz = forward

    # Right (s = cross(f, up(0,1,0))) -> (-fz, 0, fx)
    sx, sy, sz = -fz, 0.0, fx
    len_s_sq = sx * sx + sz * sz
    if len_s_sq < 1e-12:
        # Singularity: looking straight up/down
        sx, sy, sz = 1.0, 0.0, 0.0
    else:
        inv_len_s = 1.0 / math.sqrt(len_s_sq)
        sx, sy, sz = sx * inv_len_s, sy * inv_len_s, sz * inv_len_s

    # Up (u = cross(s, f))
    ux = sy * fz - sz * fy
    uy = sz * fx - sx * fz
    uz = sx * fy - sy * fx

    ex, ey, ez = eye
    trans_s = -(sx * ex + sy * ey + sz * ez)
    trans_u = -(ux * ex + uy * ey + uz * ez)
    trans_f = fx * ex + fy * ey + fz * ez

    return np.array(
        [
            [sx, sy, sz, trans_s],
            [ux, uy, uz, trans_u],
            [-fx, -fy, -fz, trans_f],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def create_perspective_projection(
    fov_deg: float, aspect: float, near: float, far: float
) -> np.ndarray:
    """
    Standard OpenGL perspective projection.
    fov_deg: vertical field of view in degrees
    aspect: width / height
    """
    tan_half_fov = math.tan(math.radians(fov_deg) / 2.0)

    # Avoid division by zero
    if tan_half_fov == 0:
        tan_half_fov = 0.001
    if near == far:
        far += 0.001
    if aspect == 0:
        aspect = 1.0

    mat = np.zeros((4, 4), dtype=np.float64)
    mat[0, 0] = 1.0 / (aspect * tan_half_fov)
    mat[1, 1] = 1.0 / tan_half_fov
    mat[2, 2] = (far + near) / (near - far)
    mat[2, 3] = (2.0 * far * near) / (near - far)
    mat[3, 2] = -1.0

    return mat
