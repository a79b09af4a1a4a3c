# duskwater/camera/camera.py
from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from duskwater.math import create_perspective_projection, create_view_matrix
from duskwater.types import Vector3


@dataclass(frozen=True, slots=True)
class CameraData:
    """Camera matrices and parameters required for rendering."""

    view: NDArray[np.float64]  # shape (4,4)
    proj: NDArray[np.float64]  # shape (4,4)
    view_proj: NDArray[np.float64]  # shape (4,4)
    position: NDArray[np.float64]  # shape (3,)
    near: float
    far: float


@dataclass
class PerspectiveCamera:
    """
    Free camera: a position and the unit vector it looks along.
    Up is always +Y.
    """

    fov: float
    aspect: float
    near: float
    far: float
    position: Vector3 = field(default_factory=Vector3.zero)
    forward: Vector3 = Vector3(0.0, 0.0, -1.0)

    def look_at(self, target: Vector3) -> None:
        direction = (target - self.position).normalized()
        if direction.length() > 0.0:
            self.forward = direction

    def set_viewport(self, width: int, height: int) -> None:
        self.aspect = width / height if height > 0 else 1.0

    @property
    def right(self) -> Vector3:
        """Camera-space +X in world space."""
        fx, _, fz = self.forward
        right = Vector3(-fz, 0.0, fx)
        if right.length() < 1e-9:
            return Vector3(1.0, 0.0, 0.0)
        return right.normalized()

    @property
    def view_matrix(self) -> NDArray[np.float64]:
        return create_view_matrix(self.position, self.forward)

    @property
    def projection_matrix(self) -> NDArray[np.float64]:
        return create_perspective_projection(
            self.fov, self.aspect, self.near, self.far
        )

    def data(self) -> CameraData:
        view = self.view_matrix
        proj = self.projection_matrix
        return CameraData(
            view=view,
            proj=proj,
            view_proj=proj @ view,
            position=np.array(tuple(self.position), dtype=np.float64),
            near=self.near,
            far=self.far,
        )
