"""Cached state of a gamepad's buttons and axes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Iterator, Optional, Tuple

from .ev import Code


@dataclass
class ButtonData:
    """State of one button and when it last changed."""

    value: float
    is_pressed: bool
    is_repeating: bool
    counter: int
    timestamp: datetime


@dataclass(frozen=True)
class AxisData:
    """Value of one axis and when it last changed."""

    value: float
    counter: int
    timestamp: datetime


class GamepadState:
    """Button and axis state keyed by event code."""

    def __init__(self) -> None:
        self._buttons: Dict[Code, ButtonData] = {}
        self._axes: Dict[Code, AxisData] = {}

    def is_pressed(self, btn: Code) -> bool:
        """True if the button is known and pressed."""
        data = self._buttons.get(btn)
        return data.is_pressed if data is not None else False

    def value(self, el: Code) -> float:
        """Value of an axis or button, or 0.0 when nothing is known about it."""
        axis = self._axes.get(el)
        if axis is not None:
            return axis.value
        button = self._buttons.get(el)
        if button is not None:
            return button.value
        return 0.0

    def buttons(self) -> Iterator[Tuple[Code, ButtonData]]:
        return iter(self._buttons.items())

    def axes(self) -> Iterator[Tuple[Code, AxisData]]:
        return iter(self._axes.items())

    def button_data(self, btn: Code) -> Optional[ButtonData]:
        return self._buttons.get(btn)

    def axis_data(self, axis: Code) -> Optional[AxisData]:
        return self._axes.get(axis)

    def set_btn_pressed(
        self, btn: Code, pressed: bool, counter: int, timestamp: datetime
    ) -> None:
        data = self._buttons.setdefault(
            btn, ButtonData(1.0 if pressed else 0.0, pressed, False, counter, timestamp)
        )
        data.is_pressed = pressed
        data.is_repeating = False
        data.counter = counter
        data.timestamp = timestamp

    def set_btn_repeating(self, btn: Code, counter: int, timestamp: datetime) -> None:
        data = self._buttons.setdefault(
            btn, ButtonData(1.0, True, True, counter, timestamp)
        )
        data.is_repeating = True
        data.counter = counter
        data.timestamp = timestamp

    def set_btn_value(
        self, btn: Code, value: float, counter: int, timestamp: datetime
    ) -> None:
        data = self._buttons.setdefault(
            btn, ButtonData(value, False, False, counter, timestamp)
        )
        data.value = value
        data.counter = counter
        data.timestamp = timestamp

    def update_axis(self, axis: Code, data: AxisData) -> None:
        self._axes[axis] = data