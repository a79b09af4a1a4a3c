# duskwater/input/keys.py
from dataclasses import dataclass, fields

from duskwater.types import InputAction

FORWARD: InputAction = "FORWARD"
BACK: InputAction = "BACK"
STRAFE_LEFT: InputAction = "STRAFE_LEFT"
STRAFE_RIGHT: InputAction = "STRAFE_RIGHT"
DOWN: InputAction = "DOWN"
UP: InputAction = "UP"

SUN_EARLIER: InputAction = "SUN_EARLIER"
SUN_LATER: InputAction = "SUN_LATER"

MOVEMENT_ACTIONS = {
    FORWARD: "forward",
    BACK: "back",
    STRAFE_LEFT: "strafe_left",
    STRAFE_RIGHT: "strafe_right",
    DOWN: "down",
    UP: "up",
}


@dataclass
class KeyState:
    """
    The six held-movement flags. Written by key events, read once per tick.
    """

    forward: bool = False
    back: bool = False
    strafe_left: bool = False
    strafe_right: bool = False
    down: bool = False
    up: bool = False

    def set(self, action: InputAction, pressed: bool) -> None:
        attr = MOVEMENT_ACTIONS.get(action)
        if attr is None:
            raise KeyError(f"{action!r} is not a movement action")
        setattr(self, attr, pressed)

    def any_held(self) -> bool:
        return any(getattr(self, f.name) for f in fields(self))

    def release_all(self) -> None:
        for f in fields(self):
            setattr(self, f.name, False)
