from duskwater.graphics.capabilities import (
    SKY,
    WATER,
    CapabilityProbe,
    CapabilityUnavailable,
    ShaderProbe,
    StaticProbe,
)

__all__ = [
    "SKY",
    "WATER",
    "CapabilityProbe",
    "CapabilityUnavailable",
    "ShaderProbe",
    "StaticProbe",
]
