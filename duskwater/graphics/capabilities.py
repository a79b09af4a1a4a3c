# duskwater/graphics/capabilities.py
"""
Optional rendering features are probed once, when the scene is built.

A probe either returns quietly or raises `CapabilityUnavailable`; the
bootstrap turns that into a fallback backend so nothing downstream has to
check what it got.
"""

from __future__ import annotations

from typing import Iterable, Mapping, Protocol

import moderngl

from duskwater.graphics.shaders import ShaderManager, ShaderRequest

SKY = "sky"
WATER = "water"


class CapabilityUnavailable(RuntimeError):
    pass


class CapabilityProbe(Protocol):
    def require(self, feature: str) -> None: ...


class ShaderProbe:
    """A feature is available when its program compiles and links."""

    def __init__(
        self, shaders: ShaderManager, requests: Mapping[str, ShaderRequest]
    ):
        self._shaders = shaders
        self._requests = dict(requests)

    def require(self, feature: str) -> None:
        req = self._requests.get(feature)
        if req is None:
            raise CapabilityUnavailable(f"No program registered for '{feature}'")

        try:
            self._shaders.get(req)
        except (OSError, moderngl.Error) as e:
            raise CapabilityUnavailable(
                f"'{feature}' program failed to build: {e}"
            ) from e


class StaticProbe:
    """Answers from a fixed set of feature names."""

    def __init__(self, available: Iterable[str]):
        self._available = frozenset(available)

    def require(self, feature: str) -> None:
        if feature not in self._available:
            raise CapabilityUnavailable(f"'{feature}' is not available")
