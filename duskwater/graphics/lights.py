# duskwater/graphics/lights.py
from dataclasses import dataclass

from duskwater.types import Color3, Vector3, hex_to_rgb


@dataclass
class Background:
    """Clear colour behind everything else."""

    color: Color3 = (0.0, 0.0, 0.0)


@dataclass
class AmbientLight:
    """
    Global base light level.
    """

    color: Color3 = hex_to_rgb(0x404040)
    intensity: float = 1.0

    @property
    def radiance(self) -> Color3:
        r, g, b = self.color
        return (r * self.intensity, g * self.intensity, b * self.intensity)


@dataclass
class DirectionalLight:
    """
    Light arriving from `position` towards the origin, like the sun.
    """

    color: Color3 = (1.0, 1.0, 1.0)
    intensity: float = 0.5
    position: Vector3 = Vector3(1.0, 1.0, 1.0)

    @property
    def radiance(self) -> Color3:
        r, g, b = self.color
        return (r * self.intensity, g * self.intensity, b * self.intensity)

    @property
    def direction(self) -> Vector3:
        """Unit vector pointing towards the light."""
        return self.position.normalized()
