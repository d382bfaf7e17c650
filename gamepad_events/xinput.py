"""Event codes, axis ranges and state comparison for XInput controllers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum
from typing import List, Optional, Tuple

from .wgi_reading import PowerInfo, RawEvent

logger = logging.getLogger(__name__)

IS_Y_AXIS_REVERSED = False

GAMEPAD_NAME = "Xbox Controller"

MAX_XINPUT_CONTROLLERS = 4
EVENT_THREAD_SLEEP_TIME_MS = 10
ITERATIONS_TO_CHECK_IF_CONNECTED = 100

XINPUT_GAMEPAD_DPAD_UP = 0x0001
XINPUT_GAMEPAD_DPAD_DOWN = 0x0002
XINPUT_GAMEPAD_DPAD_LEFT = 0x0004
XINPUT_GAMEPAD_DPAD_RIGHT = 0x0008
XINPUT_GAMEPAD_START = 0x0010
XINPUT_GAMEPAD_BACK = 0x0020
XINPUT_GAMEPAD_LEFT_THUMB = 0x0040
XINPUT_GAMEPAD_RIGHT_THUMB = 0x0080
XINPUT_GAMEPAD_LEFT_SHOULDER = 0x0100
XINPUT_GAMEPAD_RIGHT_SHOULDER = 0x0200
XINPUT_GAMEPAD_A = 0x1000
XINPUT_GAMEPAD_B = 0x2000
XINPUT_GAMEPAD_X = 0x4000
XINPUT_GAMEPAD_Y = 0x8000

XINPUT_GAMEPAD_LEFT_THUMB_DEADZONE = 7849
XINPUT_GAMEPAD_RIGHT_THUMB_DEADZONE = 8689
XINPUT_GAMEPAD_TRIGGER_THRESHOLD = 30

_I16_MIN = -(2**15)
_I16_MAX = 2**15 - 1
_U8_MIN = 0
_U8_MAX = 255


@dataclass(frozen=True, order=True)
class XInputCode:
    """Event code of an XInput element: a single byte."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f"XInput code out of range: {self.value}")

    def into_u32(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


AXIS_LSTICKX = XInputCode(0)
AXIS_LSTICKY = XInputCode(1)
AXIS_LEFTZ = XInputCode(2)
AXIS_RSTICKX = XInputCode(3)
AXIS_RSTICKY = XInputCode(4)
AXIS_RIGHTZ = XInputCode(5)
AXIS_DPADX = XInputCode(6)
AXIS_DPADY = XInputCode(7)
AXIS_RT = XInputCode(8)
AXIS_LT = XInputCode(9)
AXIS_RT2 = XInputCode(10)
AXIS_LT2 = XInputCode(11)

BTN_SOUTH = XInputCode(12)
BTN_EAST = XInputCode(13)
BTN_C = XInputCode(14)
BTN_NORTH = XInputCode(15)
BTN_WEST = XInputCode(16)
BTN_Z = XInputCode(17)
BTN_LT = XInputCode(18)
BTN_RT = XInputCode(19)
BTN_LT2 = XInputCode(20)
BTN_RT2 = XInputCode(21)
BTN_SELECT = XInputCode(22)
BTN_START = XInputCode(23)
BTN_MODE = XInputCode(24)
BTN_LTHUMB = XInputCode(25)
BTN_RTHUMB = XInputCode(26)

BTN_DPAD_UP = XInputCode(27)
BTN_DPAD_DOWN = XInputCode(28)
BTN_DPAD_LEFT = XInputCode(29)
BTN_DPAD_RIGHT = XInputCode(30)

BUTTONS: Tuple[XInputCode, ...] = (
    BTN_SOUTH,
    BTN_EAST,
    BTN_NORTH,
    BTN_WEST,
    BTN_LT,
    BTN_RT,
    BTN_SELECT,
    BTN_START,
    BTN_MODE,
    BTN_LTHUMB,
    BTN_RTHUMB,
    BTN_DPAD_UP,
    BTN_DPAD_DOWN,
    BTN_DPAD_LEFT,
    BTN_DPAD_RIGHT,
)

AXES: Tuple[XInputCode, ...] = (
    AXIS_LSTICKX,
    AXIS_LSTICKY,
    AXIS_RSTICKX,
    AXIS_RSTICKY,
    AXIS_RT2,
    AXIS_LT2,
)


@dataclass(frozen=True)
class AxisInfo:
    """Range of an axis and its recommended dead zone."""

    min: int
    max: int
    deadzone: Optional[int] = None


_STICK_LEFT = AxisInfo(_I16_MIN, _I16_MAX, XINPUT_GAMEPAD_LEFT_THUMB_DEADZONE)
_STICK_RIGHT = AxisInfo(_I16_MIN, _I16_MAX, XINPUT_GAMEPAD_RIGHT_THUMB_DEADZONE)
_TRIGGER = AxisInfo(_U8_MIN, _U8_MAX, XINPUT_GAMEPAD_TRIGGER_THRESHOLD)

# Indexed by code value; axes without information are None.
AXES_INFO: Tuple[Optional[AxisInfo], ...] = (
    _STICK_LEFT,  # LeftStickX
    _STICK_LEFT,  # LeftStickY
    None,  # LeftZ
    _STICK_RIGHT,  # RightStickX
    _STICK_RIGHT,  # RightStickY
    None,  # RightZ
    None,  # DPadX
    None,  # DPadY
    None,  # RightTrigger
    None,  # LeftTrigger
    _TRIGGER,  # RightTrigger2
    _TRIGGER,  # LeftTrigger2
)


def axis_info(code: XInputCode) -> Optional[AxisInfo]:
    """Range information of an axis, or None if the code has none."""
    if code.value < len(AXES_INFO):
        return AXES_INFO[code.value]
    return None


@dataclass(frozen=True)
class XInputGamepadState:
    """One XInput reading: button bit mask, triggers and thumb sticks."""

    buttons: int = 0
    left_trigger: int = 0
    right_trigger: int = 0
    thumb_lx: int = 0
    thumb_ly: int = 0
    thumb_rx: int = 0
    thumb_ry: int = 0


@dataclass(frozen=True)
class XInputEvent:
    """A change of one element of an XInput controller."""

    kind: RawEvent.Kind
    code: XInputCode
    value: Optional[int] = None

    @classmethod
    def pressed(cls, code: XInputCode) -> "XInputEvent":
        return cls(RawEvent.Kind.BUTTON_PRESSED, code)

    @classmethod
    def released(cls, code: XInputCode) -> "XInputEvent":
        return cls(RawEvent.Kind.BUTTON_RELEASED, code)

    @classmethod
    def axis(cls, value: int, code: XInputCode) -> "XInputEvent":
        return cls(RawEvent.Kind.AXIS_VALUE_CHANGED, code, value)


_BUTTON_MASKS: Tuple[Tuple[int, XInputCode], ...] = (
    (XINPUT_GAMEPAD_DPAD_UP, BTN_DPAD_UP),
    (XINPUT_GAMEPAD_DPAD_DOWN, BTN_DPAD_DOWN),
    (XINPUT_GAMEPAD_DPAD_LEFT, BTN_DPAD_LEFT),
    (XINPUT_GAMEPAD_DPAD_RIGHT, BTN_DPAD_RIGHT),
    (XINPUT_GAMEPAD_START, BTN_START),
    (XINPUT_GAMEPAD_BACK, BTN_SELECT),
    (XINPUT_GAMEPAD_LEFT_THUMB, BTN_LTHUMB),
    (XINPUT_GAMEPAD_RIGHT_THUMB, BTN_RTHUMB),
    (XINPUT_GAMEPAD_LEFT_SHOULDER, BTN_LT),
    (XINPUT_GAMEPAD_RIGHT_SHOULDER, BTN_RT),
    (XINPUT_GAMEPAD_A, BTN_SOUTH),
    (XINPUT_GAMEPAD_B, BTN_EAST),
    (XINPUT_GAMEPAD_X, BTN_WEST),
    (XINPUT_GAMEPAD_Y, BTN_NORTH),
)


def is_mask_eq(left: int, right: int, mask: int) -> bool:
    """True if ``mask`` is set in both values or in neither."""
    return ((left & mask) != 0) == ((right & mask) != 0)


def compare_state(
    current: XInputGamepadState, previous: XInputGamepadState
) -> List[XInputEvent]:
    """Events for every element whose state differs between two readings."""
    axes = (
        (current.left_trigger, previous.left_trigger, AXIS_LT2),
        (current.right_trigger, previous.right_trigger, AXIS_RT2),
        (current.thumb_lx, previous.thumb_lx, AXIS_LSTICKX),
        (current.thumb_ly, previous.thumb_ly, AXIS_LSTICKY),
        (current.thumb_rx, previous.thumb_rx, AXIS_RSTICKX),
        (current.thumb_ry, previous.thumb_ry, AXIS_RSTICKY),
    )
    events = [
        XInputEvent.axis(now, code) for now, before, code in axes if now != before
    ]
    for mask, code in _BUTTON_MASKS:
        if not is_mask_eq(current.buttons, previous.buttons, mask):
            if current.buttons & mask:
                events.append(XInputEvent.pressed(code))
            else:
                events.append(XInputEvent.released(code))
    return events


class BatteryType(IntEnum):
    """Kind of battery reported by XInput."""

    DISCONNECTED = 0x00
    WIRED = 0x01
    ALKALINE = 0x02
    NIMH = 0x03
    UNKNOWN = 0xFF


class BatteryLevel(IntEnum):
    """Charge level reported by XInput."""

    EMPTY = 0x00
    LOW = 0x01
    MEDIUM = 0x02
    FULL = 0x03


_LEVEL_PERCENT = {
    BatteryLevel.EMPTY: 0,
    BatteryLevel.LOW: 33,
    BatteryLevel.MEDIUM: 67,
    BatteryLevel.FULL: 100,
}


def battery_power_info(battery_type: int, battery_level: int) -> PowerInfo:
    """Power state from XInput battery information."""
    if battery_type == BatteryType.WIRED:
        return PowerInfo.wired()
    if battery_type in (BatteryType.ALKALINE, BatteryType.NIMH):
        try:
            level = _LEVEL_PERCENT[BatteryLevel(battery_level)]
        except ValueError:
            logger.debug("Unexpected battery level: %s", battery_level)
            level = 100
        if level == 100:
            return PowerInfo.charged()
        return PowerInfo.discharging(level)
    return PowerInfo.unknown()