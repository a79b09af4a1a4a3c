from typing import Callable, Dict, List, Optional

import pygame

from duskwater.input.context import InputContext
from duskwater.input.keys import MOVEMENT_ACTIONS, KeyState
from duskwater.types import InputAction

ROTATE_BUTTON = 1
PAN_BUTTON = 3

ActionListener = Callable[[InputAction], None]


class InputHandler:
    """
    Turns pygame events into held movement flags, one-shot action presses and
    accumulated mouse drags.
    """

    def __init__(self, keys: KeyState):
        self.keys = keys
        self._context_stack: List[InputContext] = []
        self._press_listeners: List[ActionListener] = []

        self._held_buttons: set[int] = set()
        # Accumulated per button because several motion events can arrive
        # between frames
        self._drag: Dict[int, list[float]] = {}

    def push_context(self, context: InputContext):
        """Add a context to the top of the stack (highest priority)."""
        self._context_stack.append(context)

    def on_press(self, listener: ActionListener) -> None:
        """Called on key down for every bound action that is not movement."""
        self._press_listeners.append(listener)

    def process_event(self, event: pygame.event.Event) -> None:
        """Feed pygame events here to update state."""
        if event.type == pygame.KEYDOWN:
            action = self._resolve_key(event.key)
            if action is None:
                return
            if action in MOVEMENT_ACTIONS:
                self.keys.set(action, True)
            else:
                for listener in self._press_listeners:
                    listener(action)

        elif event.type == pygame.KEYUP:
            action = self._resolve_key(event.key)
            if action in MOVEMENT_ACTIONS:
                self.keys.set(action, False)

        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._held_buttons.add(event.button)

        elif event.type == pygame.MOUSEBUTTONUP:
            self._held_buttons.discard(event.button)

        elif event.type == pygame.MOUSEMOTION:
            dx, dy = event.rel
            for button in self._held_buttons:
                acc = self._drag.setdefault(button, [0.0, 0.0])
                acc[0] += dx
                acc[1] += dy

        elif event.type == pygame.WINDOWFOCUSLOST:
            # Key-up events are not delivered to an unfocused window
            self.keys.release_all()
            self._held_buttons.clear()

    def take_drag(self, button: int) -> tuple[float, float]:
        """
        Returns the (dx, dy) dragged with `button` held since the last call
        and resets it.
        """
        acc = self._drag.pop(button, None)
        if acc is None:
            return 0.0, 0.0
        return acc[0], acc[1]

    def _resolve_key(self, key_code: int) -> Optional[InputAction]:
        """Finds the action for a key by walking down the stack."""
        for context in reversed(self._context_stack):
            action = context.get_action(key_code)
            if action:
                return action
        return None
