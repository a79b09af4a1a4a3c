# duskwater/config.py
from __future__ import annotations

from dataclasses import dataclass, field

from duskwater.types import Color3, Vector3, hex_to_rgb


@dataclass(frozen=True, slots=True)
class WindowSettings:
    width: int = 1280
    height: int = 720
    title: str = "duskwater"
    target_fps: int = 60
    gl_version: int = 330


@dataclass(frozen=True, slots=True)
class CameraSettings:
    fov: float = 60.0
    near: float = 1.0
    far: float = 20000.0
    position: Vector3 = Vector3(0.0, 100.0, 1000.0)
    look_at: Vector3 = Vector3(0.0, 0.0, -1000.0)
    move_speed: float = 1.0

    # Orbit controls
    damping_factor: float = 0.05
    rotate_speed: float = 1.0
    pan_speed: float = 1.0
    min_polar_angle: float = 0.0
    max_polar_angle: float = 3.141592653589793


@dataclass(frozen=True, slots=True)
class SkySettings:
    """
    Sky dome policy. `enabled=False` forces the flat background fallback.
    """

    enabled: bool = True
    fallback_color: Color3 = hex_to_rgb(0x87CEEB)

    # Initial uniforms, replaced by the first environment update
    turbidity: float = 10.0
    rayleigh: float = 2.0
    mie_coefficient: float = 0.005
    mie_directional_g: float = 0.8

    skybox_enabled: bool = False
    skybox_radius: float = 9000.0


@dataclass(frozen=True, slots=True)
class WaterSettings:
    enabled: bool = True
    size: float = 10000.0
    height: float = -10.0
    texture_size: int = 512
    distortion_scale: float = 3.7
    sun_color: Color3 = (1.0, 1.0, 1.0)
    water_color: Color3 = hex_to_rgb(0x001E0F)
    fallback_color: Color3 = hex_to_rgb(0x0077BE)

    # Simulated seconds added to the surface animation per tick
    time_step: float = 1.0 / 60.0


@dataclass(frozen=True, slots=True)
class StarfieldSettings:
    count: int = 10000
    extent: float = 15000.0
    point_size: float = 2.0
    size_attenuation: bool = True
    color: Color3 = (1.0, 1.0, 1.0)
    seed: int | None = None


@dataclass(frozen=True, slots=True)
class ControlSettings:
    initial_sun_angle: float = 50.0
    sun_step: float = 1.0
    key_repeat_delay_ms: int = 250
    key_repeat_interval_ms: int = 30


@dataclass(frozen=True, slots=True)
class AppSettings:
    """
    The master configuration object handed to the bootstrap.
    """

    window: WindowSettings = field(default_factory=WindowSettings)
    camera: CameraSettings = field(default_factory=CameraSettings)
    sky: SkySettings = field(default_factory=SkySettings)
    water: WaterSettings = field(default_factory=WaterSettings)
    starfield: StarfieldSettings = field(default_factory=StarfieldSettings)
    controls: ControlSettings = field(default_factory=ControlSettings)
