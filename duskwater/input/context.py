from dataclasses import dataclass, field
from typing import Dict, Optional

import pygame

from duskwater.input.keys import (
    BACK,
    DOWN,
    FORWARD,
    STRAFE_LEFT,
    STRAFE_RIGHT,
    SUN_EARLIER,
    SUN_LATER,
    UP,
)
from duskwater.types import InputAction


@dataclass(frozen=True)
class InputContext:
    """
    A named Key -> Action table. Handlers consult the most recently pushed
    context first.
    """

    name: str
    bindings: Dict[int, InputAction] = field(default_factory=dict)

    def get_action(self, key: int) -> Optional[InputAction]:
        return self.bindings.get(key)


def default_scene_context() -> InputContext:
    """W/S/A/D/Q/E fly the camera, LEFT/RIGHT move the sun."""
    return InputContext(
        "scene",
        {
            pygame.K_w: FORWARD,
            pygame.K_s: BACK,
            pygame.K_a: STRAFE_LEFT,
            pygame.K_d: STRAFE_RIGHT,
            pygame.K_q: DOWN,
            pygame.K_e: UP,
            pygame.K_LEFT: SUN_EARLIER,
            pygame.K_RIGHT: SUN_LATER,
        },
    )
