# duskwater/environment/model.py
"""
Sun angle -> sky, water, light and starfield parameters.

Everything here is pure arithmetic on the sun angle. The same angle always
gives the same `EnvironmentParameters`; nothing is accumulated between calls.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from duskwater.math import lerp, smoothstep, spherical_to_cartesian
from duskwater.types import HSL, Scalar, Vector3

SUN_DISTANCE = 1000.0
SUN_AZIMUTH = math.pi * 0.25

BRIGHTNESS_EDGE_LOW = 0.1
BRIGHTNESS_EDGE_HIGH = 0.9


@dataclass(frozen=True, slots=True)
class LightParameters:
    color: HSL
    intensity: Scalar
    direction: Vector3 | None = None  # None for non-directional lights


@dataclass(frozen=True, slots=True)
class EnvironmentParameters:
    # inputs to the remaps, kept for consumers and debugging
    sun_angle: Scalar
    theta: Scalar
    sun_vector: Vector3
    normalized_theta: Scalar
    sky_brightness: Scalar
    sunset_progress: Scalar

    # atmosphere
    turbidity: Scalar
    rayleigh: Scalar
    mie_coefficient: Scalar
    mie_directional_g: Scalar

    background: HSL
    starfield_opacity: Scalar

    ambient: LightParameters
    directional: LightParameters

    water_sun_direction: Vector3
    water_tint: HSL

    skybox_tint: HSL


def sun_theta(sun_angle: Scalar) -> Scalar:
    """[0, 100] -> [-pi/2, pi/2]. Not clamped."""
    return math.pi * (sun_angle / 100.0 - 0.5)


def sun_vector_from_theta(theta: Scalar) -> Vector3:
    return spherical_to_cartesian(
        SUN_DISTANCE, math.pi / 2.0 - theta, SUN_AZIMUTH
    )


def normalized_theta(theta: Scalar) -> Scalar:
    return (math.sin(theta) + 1.0) * 0.5


def sky_brightness(norm_theta: Scalar) -> Scalar:
    return smoothstep(norm_theta, BRIGHTNESS_EDGE_LOW, BRIGHTNESS_EDGE_HIGH)


def sunset_progress(norm_theta: Scalar) -> Scalar:
    """1 with the sun on the horizon, 0 at zenith and nadir."""
    return 1.0 - 2.0 * abs(norm_theta - 0.5)


def compute_environment(sun_angle: Scalar) -> EnvironmentParameters:
    theta = sun_theta(sun_angle)
    sun = sun_vector_from_theta(theta)

    nt = normalized_theta(theta)
    sb = sky_brightness(nt)
    sp = sunset_progress(nt)

    # rayleigh keys off its own copy of the horizon term
    rayleigh = lerp(0.5, 4.0, 1.0 - abs(nt - 0.5) * 2.0)

    return EnvironmentParameters(
        sun_angle=sun_angle,
        theta=theta,
        sun_vector=sun,
        normalized_theta=nt,
        sky_brightness=sb,
        sunset_progress=sp,
        turbidity=lerp(1.0, 20.0, nt),
        rayleigh=rayleigh,
        mie_coefficient=lerp(0.005, 0.03, sp),
        mie_directional_g=lerp(0.7, 0.98, sp),
        background=HSL(
            lerp(0.55, 0.05, sp),
            lerp(0.2, 0.8, sp),
            lerp(0.2, 0.5, nt),
        ),
        starfield_opacity=lerp(0.8, 0.0, sb),
        ambient=LightParameters(
            color=HSL(lerp(0.6, 0.05, sp), 0.5, 0.5),
            intensity=lerp(0.05, 0.3, sb),
        ),
        directional=LightParameters(
            color=HSL(lerp(0.1, 0.05, sp), 1.0, 0.95),
            intensity=lerp(0.1, 1.5, sb),
            direction=sun,
        ),
        water_sun_direction=sun.normalized(),
        water_tint=HSL(
            lerp(0.6, 0.05, sp),
            lerp(0.5, 0.8, sp),
            lerp(0.2, 0.6, sb),
        ),
        skybox_tint=HSL(lerp(0.67, 0.6, nt), 0.5, sb),
    )


class EnvironmentModel:
    """
    Stateless apart from the last sun vector it produced.
    """

    def __init__(self) -> None:
        self.sun_vector: Vector3 = Vector3.zero()

    def update(self, sun_angle: Scalar) -> EnvironmentParameters:
        params = compute_environment(sun_angle)
        self.sun_vector = params.sun_vector
        return params
