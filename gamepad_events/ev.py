"""Gamepad elements, event codes and events."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Hashable, Optional, Union

from .utils import time_now

BTN_UNKNOWN = 0

BTN_SOUTH = 1
BTN_EAST = 2
BTN_C = 3
BTN_NORTH = 4
BTN_WEST = 5
BTN_Z = 6
BTN_LT = 7
BTN_RT = 8
BTN_LT2 = 9
BTN_RT2 = 10
BTN_SELECT = 11
BTN_START = 12
BTN_MODE = 13
BTN_LTHUMB = 14
BTN_RTHUMB = 15

BTN_DPAD_UP = 16
BTN_DPAD_DOWN = 17
BTN_DPAD_LEFT = 18
BTN_DPAD_RIGHT = 19

BTN_TRIGGER_HAPPY1 = 20
BTN_TRIGGER_HAPPY2 = 21
BTN_TRIGGER_HAPPY3 = 22
BTN_TRIGGER_HAPPY4 = 23
BTN_TRIGGER_HAPPY5 = 24
BTN_TRIGGER_HAPPY6 = 25
BTN_TRIGGER_HAPPY7 = 26
BTN_TRIGGER_HAPPY8 = 27

AXIS_UNKNOWN = 0

AXIS_LSTICKX = 1
AXIS_LSTICKY = 2
AXIS_LEFTZ = 3
AXIS_RSTICKX = 4
AXIS_RSTICKY = 5
AXIS_RIGHTZ = 6
AXIS_DPADX = 7
AXIS_DPADY = 8


@dataclass(frozen=True)
class Code:
    """Platform specific code of a single gamepad element.

    ``native`` is either a plain integer or a platform code object that
    provides ``into_u32()``.
    """

    native: Hashable

    def into_u32(self) -> int:
        if isinstance(self.native, int):
            return self.native
        return self.native.into_u32()  # type: ignore[attr-defined]

    def __str__(self) -> str:
        return str(self.native)


class Button(Enum):
    """Gamepad elements whose state is a value from 0.0 to 1.0."""

    SOUTH = BTN_SOUTH
    EAST = BTN_EAST
    NORTH = BTN_NORTH
    WEST = BTN_WEST
    C = BTN_C
    Z = BTN_Z
    LEFT_TRIGGER = BTN_LT
    LEFT_TRIGGER2 = BTN_LT2
    RIGHT_TRIGGER = BTN_RT
    RIGHT_TRIGGER2 = BTN_RT2
    SELECT = BTN_SELECT
    START = BTN_START
    MODE = BTN_MODE
    LEFT_THUMB = BTN_LTHUMB
    RIGHT_THUMB = BTN_RTHUMB
    DPAD_UP = BTN_DPAD_UP
    DPAD_DOWN = BTN_DPAD_DOWN
    DPAD_LEFT = BTN_DPAD_LEFT
    DPAD_RIGHT = BTN_DPAD_RIGHT
    TRIGGER_HAPPY1 = BTN_TRIGGER_HAPPY1
    TRIGGER_HAPPY2 = BTN_TRIGGER_HAPPY2
    TRIGGER_HAPPY3 = BTN_TRIGGER_HAPPY3
    TRIGGER_HAPPY4 = BTN_TRIGGER_HAPPY4
    TRIGGER_HAPPY5 = BTN_TRIGGER_HAPPY5
    TRIGGER_HAPPY6 = BTN_TRIGGER_HAPPY6
    TRIGGER_HAPPY7 = BTN_TRIGGER_HAPPY7
    TRIGGER_HAPPY8 = BTN_TRIGGER_HAPPY8
    UNKNOWN = BTN_UNKNOWN

    @classmethod
    def default(cls) -> "Button":
        return cls.UNKNOWN

    def is_action(self) -> bool:
        return self in _ACTION_BUTTONS

    def is_trigger(self) -> bool:
        return self in _TRIGGER_BUTTONS

    def is_menu(self) -> bool:
        return self in _MENU_BUTTONS

    def is_stick(self) -> bool:
        return self in _STICK_BUTTONS

    def is_dpad(self) -> bool:
        return self in _DPAD_BUTTONS

    def to_nec(self) -> Optional[Code]:
        """Return the platform-neutral code of this button, or None for UNKNOWN."""
        if self is Button.UNKNOWN:
            return None
        return Code(self.value)


_ACTION_BUTTONS = frozenset(
    {
        Button.SOUTH,
        Button.EAST,
        Button.NORTH,
        Button.WEST,
        Button.C,
        Button.Z,
        Button.TRIGGER_HAPPY1,
        Button.TRIGGER_HAPPY2,
        Button.TRIGGER_HAPPY3,
        Button.TRIGGER_HAPPY4,
        Button.TRIGGER_HAPPY5,
        Button.TRIGGER_HAPPY6,
        Button.TRIGGER_HAPPY7,
        Button.TRIGGER_HAPPY8,
    }
)
_TRIGGER_BUTTONS = frozenset(
    {Button.LEFT_TRIGGER, Button.LEFT_TRIGGER2, Button.RIGHT_TRIGGER, Button.RIGHT_TRIGGER2}
)
_MENU_BUTTONS = frozenset({Button.SELECT, Button.START, Button.MODE})
_STICK_BUTTONS = frozenset({Button.LEFT_THUMB, Button.RIGHT_THUMB})
_DPAD_BUTTONS = frozenset(
    {Button.DPAD_UP, Button.DPAD_DOWN, Button.DPAD_LEFT, Button.DPAD_RIGHT}
)


class Axis(Enum):
    """Gamepad elements whose state is a value from -1.0 to 1.0."""

    LEFT_STICK_X = AXIS_LSTICKX
    LEFT_STICK_Y = AXIS_LSTICKY
    LEFT_Z = AXIS_LEFTZ
    RIGHT_STICK_X = AXIS_RSTICKX
    RIGHT_STICK_Y = AXIS_RSTICKY
    RIGHT_Z = AXIS_RIGHTZ
    DPAD_X = AXIS_DPADX
    DPAD_Y = AXIS_DPADY
    UNKNOWN = AXIS_UNKNOWN

    def is_stick(self) -> bool:
        """Return True for the four analog stick axes."""
        return self in (
            Axis.LEFT_STICK_X,
            Axis.LEFT_STICK_Y,
            Axis.RIGHT_STICK_X,
            Axis.RIGHT_STICK_Y,
        )

    def second_axis(self) -> Optional["Axis"]:
        """Return the other axis of the same element, if any."""
        return _SECOND_AXIS.get(self)


_SECOND_AXIS = {
    Axis.LEFT_STICK_X: Axis.LEFT_STICK_Y,
    Axis.LEFT_STICK_Y: Axis.LEFT_STICK_X,
    Axis.RIGHT_STICK_X: Axis.RIGHT_STICK_Y,
    Axis.RIGHT_STICK_Y: Axis.RIGHT_STICK_X,
    Axis.DPAD_X: Axis.DPAD_Y,
    Axis.DPAD_Y: Axis.DPAD_X,
}


@dataclass(frozen=True)
class AxisOrBtn:
    """Either an axis or a button."""

    element: Union[Axis, Button]

    def is_button(self) -> bool:
        return isinstance(self.element, Button)


@dataclass(frozen=True)
class ButtonPressed:
    """A button has been pressed."""

    button: Button
    code: Code


@dataclass(frozen=True)
class ButtonRepeated:
    """A held button repeated."""

    button: Button
    code: Code


@dataclass(frozen=True)
class ButtonReleased:
    """A previously pressed button has been released."""

    button: Button
    code: Code


@dataclass(frozen=True)
class ButtonChanged:
    """The value of a button changed; value is in [0.0, 1.0]."""

    button: Button
    value: float
    code: Code


@dataclass(frozen=True)
class AxisChanged:
    """The value of an axis changed; value is in [-1.0, 1.0]."""

    axis: Axis
    value: float
    code: Code


@dataclass(frozen=True)
class Connected:
    """A gamepad has been connected."""


@dataclass(frozen=True)
class Disconnected:
    """A gamepad has been disconnected."""


@dataclass(frozen=True)
class Dropped:
    """An event was dropped by a filter and should be ignored."""


@dataclass(frozen=True)
class ForceFeedbackEffectCompleted:
    """A force feedback effect ran for its duration and stopped."""


EventType = Union[
    ButtonPressed,
    ButtonRepeated,
    ButtonReleased,
    ButtonChanged,
    AxisChanged,
    Connected,
    Disconnected,
    Dropped,
    ForceFeedbackEffectCompleted,
]


@dataclass(frozen=True)
class Event:
    """A gamepad event: which gamepad, what happened and when."""

    id: Hashable
    event: EventType
    time: datetime = field(default_factory=time_now)

    def drop(self) -> "Event":
        """Return a copy of this event whose type is Dropped."""
        return dataclasses.replace(self, event=Dropped())

    def is_dropped(self) -> bool:
        return self.event == Dropped()