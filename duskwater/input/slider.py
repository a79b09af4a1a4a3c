# duskwater/input/slider.py
from __future__ import annotations

from typing import Callable, List

SUN_ANGLE_MIN = 0.0
SUN_ANGLE_MAX = 100.0

SliderListener = Callable[[float], None]


class SunAngleSlider:
    """
    The sun-angle control. Holds a value in [0, 100] and notifies listeners
    whenever it changes.
    """

    def __init__(self, value: float = 50.0, step: float = 1.0):
        self.step_size = step
        self._value = self._clamp(value)
        self._listeners: List[SliderListener] = []

    @staticmethod
    def _clamp(value: float) -> float:
        return max(SUN_ANGLE_MIN, min(SUN_ANGLE_MAX, float(value)))

    @property
    def value(self) -> float:
        return self._value

    def subscribe(self, listener: SliderListener) -> None:
        self._listeners.append(listener)

    def set_value(self, value: float) -> bool:
        """Returns True if the value changed and listeners were called."""
        new_value = self._clamp(value)
        if new_value == self._value:
            return False

        self._value = new_value
        self.notify()
        return True

    def step(self, direction: int) -> bool:
        return self.set_value(self._value + direction * self.step_size)

    def notify(self) -> None:
        """Push the current value to every listener, changed or not."""
        for listener in self._listeners:
            listener(self._value)
