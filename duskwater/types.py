# duskwater/types.py
from __future__ import annotations

import colorsys
import math
from dataclasses import dataclass
from typing import Any, Iterator, Tuple, TypeAlias, overload

Scalar: TypeAlias = float

Color3 = Tuple[float, float, float]  # linear r, g, b in [0, 1]

InputAction = str


@dataclass(frozen=True, slots=True)
class Vector3:
    x: Scalar
    y: Scalar
    z: Scalar

    @staticmethod
    def zero() -> Vector3:
        return Vector3(0.0, 0.0, 0.0)

    @staticmethod
    def up() -> Vector3:
        return Vector3(0.0, 1.0, 0.0)

    def __iter__(self) -> Iterator[Scalar]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __add__(self, other: Vector3) -> Vector3:
        return Vector3(
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
        )

    def __sub__(self, other: Vector3) -> Vector3:
        return Vector3(
            self.x - other.x,
            self.y - other.y,
            self.z - other.z,
        )

    def __mul__(self, scalar: float) -> Vector3:
        return Vector3(
            self.x * scalar,
            self.y * scalar,
            self.z * scalar,
        )

    def __rmul__(self, scalar: float) -> Vector3:
        return self.__mul__(scalar)

    def __neg__(self) -> Vector3:
        return Vector3(-self.x, -self.y, -self.z)

    @overload
    def __truediv__(self, other: float) -> Vector3: ...
    @overload
    def __truediv__(self, other: Vector3) -> Vector3: ...

    def __truediv__(self, other: Any):
        if isinstance(other, (int, float)):
            if other == 0.0:
                raise ValueError(other)
            return Vector3(self.x / other, self.y / other, self.z / other)

        if isinstance(other, Vector3):
            if other.x == 0 or other.y == 0 or other.z == 0:
                raise ValueError(other)
            return Vector3(self.x / other.x, self.y / other.y, self.z / other.z)

        raise TypeError(
            f"other must be Vector3 or Scalar, not {type(other).__name__}"
        )

    @overload
    def __getitem__(self, index: int) -> Scalar: ...
    @overload
    def __getitem__(self, index: slice) -> tuple[Scalar, ...]: ...

    def __getitem__(self, index: Any):
        if isinstance(index, int):
            if index == 0:
                return self.x
            if index == 1:
                return self.y
            if index == 2:
                return self.z
            raise IndexError(index)

        if isinstance(index, slice):
            return tuple(self)[index]

        raise TypeError(
            f"indices must be int or slice, not {type(index).__name__}"
        )

    def length(self) -> Scalar:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3:
        """Unit copy. A zero vector stays zero."""
        n = self.length()
        if n == 0.0:
            return self
        inv = 1.0 / n
        return Vector3(self.x * inv, self.y * inv, self.z * inv)

    def is_close(self, other: Vector3, tol: float = 1e-9) -> bool:
        return (
            abs(self.x - other.x) <= tol
            and abs(self.y - other.y) <= tol
            and abs(self.z - other.z) <= tol
        )


@dataclass(frozen=True, slots=True)
class HSL:
    """
    Hue / saturation / lightness, each nominally in [0, 1].

    Hue wraps around, saturation and lightness are clamped on conversion.
    """

    h: Scalar
    s: Scalar
    l: Scalar  # noqa: E741

    def to_rgb(self) -> Color3:
        hue = self.h % 1.0
        sat = min(max(self.s, 0.0), 1.0)
        light = min(max(self.l, 0.0), 1.0)
        # colorsys orders the arguments h, l, s
        return colorsys.hls_to_rgb(hue, light, sat)


def hex_to_rgb(value: int) -> Color3:
    """0xRRGGBB -> (r, g, b) in [0, 1]."""
    return (
        ((value >> 16) & 0xFF) / 255.0,
        ((value >> 8) & 0xFF) / 255.0,
        (value & 0xFF) / 255.0,
    )
