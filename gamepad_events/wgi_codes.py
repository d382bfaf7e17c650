"""Event codes of controllers read through Windows.Gaming.Input."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import List, Tuple

_U32_MAX = 0xFFFF_FFFF


class EvCodeKind(IntEnum):
    """What kind of element an event code refers to."""

    BUTTON = 0
    AXIS = 1
    SWITCH = 2

    def __str__(self) -> str:
        return {
            EvCodeKind.BUTTON: "Button",
            EvCodeKind.AXIS: "Axis",
            EvCodeKind.SWITCH: "Switch",
        }[self]


@dataclass(frozen=True, order=True)
class EvCode:
    """An element of a controller: its kind and index within that kind."""

    kind: EvCodeKind
    index: int

    def into_u32(self) -> int:
        return ((int(self.kind) << 16) | self.index) & _U32_MAX

    def __str__(self) -> str:
        return f"{self.kind}({self.index})"


AXIS_LSTICKX = EvCode(EvCodeKind.AXIS, 0)
AXIS_LSTICKY = EvCode(EvCodeKind.AXIS, 1)
AXIS_RSTICKX = EvCode(EvCodeKind.AXIS, 2)
AXIS_LT2 = EvCode(EvCodeKind.AXIS, 3)
AXIS_RT2 = EvCode(EvCodeKind.AXIS, 4)
AXIS_RSTICKY = EvCode(EvCodeKind.AXIS, 5)
AXIS_RT = EvCode(EvCodeKind.AXIS, 6)
AXIS_LT = EvCode(EvCodeKind.AXIS, 7)
AXIS_LEFTZ = EvCode(EvCodeKind.AXIS, 8)
AXIS_RIGHTZ = EvCode(EvCodeKind.AXIS, 9)

AXIS_DPADX = EvCode(EvCodeKind.SWITCH, 0)
AXIS_DPADY = EvCode(EvCodeKind.SWITCH, 1)

BTN_WEST = EvCode(EvCodeKind.BUTTON, 0)
BTN_SOUTH = EvCode(EvCodeKind.BUTTON, 1)
BTN_EAST = EvCode(EvCodeKind.BUTTON, 2)
BTN_NORTH = EvCode(EvCodeKind.BUTTON, 3)
BTN_LT = EvCode(EvCodeKind.BUTTON, 4)
BTN_RT = EvCode(EvCodeKind.BUTTON, 5)
BTN_LT2 = EvCode(EvCodeKind.BUTTON, 6)
BTN_RT2 = EvCode(EvCodeKind.BUTTON, 7)
BTN_SELECT = EvCode(EvCodeKind.BUTTON, 8)
BTN_START = EvCode(EvCodeKind.BUTTON, 9)
BTN_LTHUMB = EvCode(EvCodeKind.BUTTON, 10)
BTN_RTHUMB = EvCode(EvCodeKind.BUTTON, 11)
BTN_MODE = EvCode(EvCodeKind.BUTTON, 12)
BTN_C = EvCode(EvCodeKind.BUTTON, 13)
BTN_Z = EvCode(EvCodeKind.BUTTON, 14)

# D-pad "buttons" of hat-based controllers use indices far above any real
# button so they never collide with one.
BTN_DPAD_UP = EvCode(EvCodeKind.BUTTON, _U32_MAX - 3)
BTN_DPAD_RIGHT = EvCode(EvCodeKind.BUTTON, _U32_MAX - 2)
BTN_DPAD_DOWN = EvCode(EvCodeKind.BUTTON, _U32_MAX - 1)
BTN_DPAD_LEFT = EvCode(EvCodeKind.BUTTON, _U32_MAX)

BUTTONS: Tuple[EvCode, ...] = (
    BTN_WEST,
    BTN_SOUTH,
    BTN_EAST,
    BTN_NORTH,
    BTN_LT,
    BTN_RT,
    BTN_SELECT,
    BTN_START,
    BTN_LTHUMB,
    BTN_RTHUMB,
    BTN_DPAD_UP,
    BTN_DPAD_RIGHT,
    BTN_DPAD_DOWN,
    BTN_DPAD_LEFT,
)

AXES: Tuple[EvCode, ...] = (
    AXIS_LSTICKX,
    AXIS_LSTICKY,
    AXIS_RSTICKX,
    AXIS_LT2,
    AXIS_RT2,
    AXIS_RSTICKY,
)


class SwitchPosition(IntEnum):
    """Position of a controller switch (hat)."""

    CENTER = 0
    UP = 1
    UP_RIGHT = 2
    RIGHT = 3
    DOWN_RIGHT = 4
    DOWN = 5
    DOWN_LEFT = 6
    LEFT = 7
    UP_LEFT = 8


_SWITCH_DIRECTIONS = {
    SwitchPosition.UP: (0, 1),
    SwitchPosition.DOWN: (0, -1),
    SwitchPosition.RIGHT: (1, 0),
    SwitchPosition.LEFT: (-1, 0),
    SwitchPosition.UP_LEFT: (-1, 1),
    SwitchPosition.UP_RIGHT: (1, 1),
    SwitchPosition.DOWN_LEFT: (-1, -1),
    SwitchPosition.DOWN_RIGHT: (1, -1),
}


def direction_from_switch(switch: SwitchPosition) -> Tuple[int, int]:
    """Treat a switch as a d-pad and return its (x, y) values in -1..1."""
    return _SWITCH_DIRECTIONS.get(switch, (0, 0))


def collect_codes(
    axis_count: int, button_count: int, switch_count: int
) -> Tuple[List[EvCode], List[EvCode]]:
    """Return the (buttons, axes) codes of a raw controller.

    Every switch contributes two axes, one for x and one for y.
    """
    buttons = [EvCode(EvCodeKind.BUTTON, index) for index in range(button_count)]
    axes = [EvCode(EvCodeKind.AXIS, index) for index in range(axis_count)]
    for index in range(switch_count):
        axes.append(EvCode(EvCodeKind.SWITCH, index * 2))
        axes.append(EvCode(EvCodeKind.SWITCH, index * 2 + 1))
    return buttons, axes