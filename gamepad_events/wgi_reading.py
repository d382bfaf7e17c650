"""Turn successive Windows.Gaming.Input readings into raw gamepad events."""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from enum import Enum, IntEnum, IntFlag
from typing import List, Optional, Sequence, Tuple

from . import wgi_codes as nec
from .wgi_codes import EvCode, EvCodeKind, SwitchPosition, direction_from_switch

IS_Y_AXIS_REVERSED = True

SDL_HARDWARE_BUS_USB = 0x03

# Standard controllers poll at roughly 125 Hz, so about 8 ms between updates.
EVENT_THREAD_SLEEP_TIME_MS = 8

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _as_i32(value: float) -> int:
    """Convert a float to a 32-bit integer, truncating and saturating."""
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


def _as_u8(value: float) -> int:
    """Convert a float to an 8-bit unsigned integer, truncating and saturating."""
    if math.isnan(value):
        return 0
    if value >= 255:
        return 255
    if value <= 0:
        return 0
    return int(value)


@dataclass(frozen=True)
class PowerInfo:
    """Power state of a gamepad; ``level`` is a percentage when (dis)charging."""

    class Kind(Enum):
        UNKNOWN = "unknown"
        WIRED = "wired"
        DISCHARGING = "discharging"
        CHARGING = "charging"
        CHARGED = "charged"

    kind: "PowerInfo.Kind"
    level: Optional[int] = None

    @classmethod
    def unknown(cls) -> "PowerInfo":
        return cls(cls.Kind.UNKNOWN)

    @classmethod
    def wired(cls) -> "PowerInfo":
        return cls(cls.Kind.WIRED)

    @classmethod
    def charged(cls) -> "PowerInfo":
        return cls(cls.Kind.CHARGED)

    @classmethod
    def discharging(cls, level: int) -> "PowerInfo":
        return cls(cls.Kind.DISCHARGING, level)

    @classmethod
    def charging(cls, level: int) -> "PowerInfo":
        return cls(cls.Kind.CHARGING, level)

    def __str__(self) -> str:
        name = self.kind.name.capitalize()
        return name if self.level is None else f"{name} {self.level}"


@dataclass(frozen=True)
class RawEvent:
    """A change reported by a controller, before any mapping is applied."""

    class Kind(Enum):
        BUTTON_PRESSED = "button_pressed"
        BUTTON_RELEASED = "button_released"
        AXIS_VALUE_CHANGED = "axis_value_changed"

    kind: "RawEvent.Kind"
    code: EvCode
    value: Optional[int] = None

    @classmethod
    def pressed(cls, code: EvCode) -> "RawEvent":
        return cls(cls.Kind.BUTTON_PRESSED, code)

    @classmethod
    def released(cls, code: EvCode) -> "RawEvent":
        return cls(cls.Kind.BUTTON_RELEASED, code)

    @classmethod
    def axis(cls, value: int, code: EvCode) -> "RawEvent":
        return cls(cls.Kind.AXIS_VALUE_CHANGED, code, value)


@dataclass
class RawGamepadReading:
    """One reading of a controller without a gamepad mapping."""

    axes: List[float] = field(default_factory=list)
    buttons: List[bool] = field(default_factory=list)
    switches: List[SwitchPosition] = field(default_factory=list)
    time: int = 0


@dataclass
class GamepadReading:
    """One reading of a controller that has the standard gamepad layout."""

    class Buttons(IntFlag):
        NONE = 0
        MENU = 0x1
        VIEW = 0x2
        A = 0x4
        B = 0x8
        X = 0x10
        Y = 0x20
        DPAD_UP = 0x40
        DPAD_DOWN = 0x80
        DPAD_LEFT = 0x100
        DPAD_RIGHT = 0x200
        LEFT_SHOULDER = 0x400
        RIGHT_SHOULDER = 0x800
        LEFT_THUMBSTICK = 0x1000
        RIGHT_THUMBSTICK = 0x2000

    timestamp: int = 0
    buttons: int = 0
    left_trigger: float = 0.0
    right_trigger: float = 0.0
    left_thumbstick_x: float = 0.0
    left_thumbstick_y: float = 0.0
    right_thumbstick_x: float = 0.0
    right_thumbstick_y: float = 0.0


_B = GamepadReading.Buttons

BUTTON_MAP: Tuple[Tuple[GamepadReading.Buttons, EvCode], ...] = (
    (_B.DPAD_UP, nec.BTN_DPAD_UP),
    (_B.DPAD_DOWN, nec.BTN_DPAD_DOWN),
    (_B.DPAD_LEFT, nec.BTN_DPAD_LEFT),
    (_B.DPAD_RIGHT, nec.BTN_DPAD_RIGHT),
    (_B.MENU, nec.BTN_START),
    (_B.VIEW, nec.BTN_SELECT),
    (_B.LEFT_THUMBSTICK, nec.BTN_LTHUMB),
    (_B.RIGHT_THUMBSTICK, nec.BTN_RTHUMB),
    (_B.LEFT_SHOULDER, nec.BTN_LT),
    (_B.RIGHT_SHOULDER, nec.BTN_RT),
    (_B.A, nec.BTN_SOUTH),
    (_B.B, nec.BTN_EAST),
    (_B.X, nec.BTN_WEST),
    (_B.Y, nec.BTN_NORTH),
)


class BatteryStatus(IntEnum):
    """Battery status as reported by the system."""

    NOT_PRESENT = 0
    DISCHARGING = 1
    IDLE = 2
    CHARGING = 3


def _get(items: Sequence, index: int):
    return items[index] if index < len(items) else None


def raw_reading_differences(
    old: RawGamepadReading, new: RawGamepadReading
) -> List[RawEvent]:
    """Events for every axis, button and switch that differs between readings."""
    events: List[RawEvent] = []

    for index, value in enumerate(new.axes):
        if _get(old.axes, index) != value:
            events.append(
                RawEvent.axis(
                    _as_i32((value * 65535.0) - 32768.0),
                    EvCode(EvCodeKind.AXIS, index),
                )
            )

    for index, pressed in enumerate(new.buttons):
        if _get(old.buttons, index) != pressed:
            code = EvCode(EvCodeKind.BUTTON, index)
            events.append(RawEvent.pressed(code) if pressed else RawEvent.released(code))

    for index, old_switch in enumerate(old.switches):
        old_x, old_y = direction_from_switch(old_switch)
        new_x, new_y = direction_from_switch(new.switches[index])
        if old_x != new_x:
            events.append(RawEvent.axis(new_x, EvCode(EvCodeKind.SWITCH, index * 2)))
        if old_y != new_y:
            events.append(RawEvent.axis(-new_y, EvCode(EvCodeKind.SWITCH, index * 2 + 1)))

    return events


def gamepad_reading_differences(
    old: GamepadReading, new: GamepadReading
) -> List[RawEvent]:
    """Events for every stick, trigger and button that differs between readings."""
    axes = (
        (new.left_trigger, old.left_trigger, nec.AXIS_LT2, 1.0),
        (new.right_trigger, old.right_trigger, nec.AXIS_RT2, 1.0),
        (new.left_thumbstick_x, old.left_thumbstick_x, nec.AXIS_LSTICKX, 1.0),
        (new.left_thumbstick_y, old.left_thumbstick_y, nec.AXIS_LSTICKY, -1.0),
        (new.right_thumbstick_x, old.right_thumbstick_x, nec.AXIS_RSTICKX, 1.0),
        (new.right_thumbstick_y, old.right_thumbstick_y, nec.AXIS_RSTICKY, -1.0),
    )
    events: List[RawEvent] = []
    for new_value, old_value, code, multiplier in axes:
        if new_value != old_value:
            events.append(
                RawEvent.axis(_as_i32(multiplier * new_value * float(_I32_MAX)), code)
            )

    for flag, code in BUTTON_MAP:
        now = new.buttons & flag
        if now != (old.buttons & flag):
            events.append(RawEvent.pressed(code) if now else RawEvent.released(code))
    return events


def hardware_uuid(vendor_id: int, product_id: int) -> uuid.UUID:
    """SDL-style identifier of a USB controller with the given ids."""
    version = 0
    data = (
        SDL_HARDWARE_BUS_USB.to_bytes(4, "little")
        + (vendor_id & 0xFFFF).to_bytes(2, "little")
        + bytes(2)
        + (product_id & 0xFFFF).to_bytes(2, "little")
        + bytes(2)
        + version.to_bytes(2, "little")
        + bytes(2)
    )
    return uuid.UUID(bytes=data)


def _ratio(remaining: float, full: float) -> float:
    if full == 0:
        if remaining == 0:
            return math.nan
        return math.copysign(math.inf, remaining)
    return remaining / full


def power_info_from_battery(
    is_wireless: bool,
    status: int,
    full_capacity: Optional[int],
    remaining_capacity: Optional[int],
) -> PowerInfo:
    """Power state from a battery report; missing capacities yield UNKNOWN."""
    if not is_wireless:
        return PowerInfo.wired()
    if status in (BatteryStatus.DISCHARGING, BatteryStatus.CHARGING):
        if full_capacity is None or remaining_capacity is None:
            return PowerInfo.unknown()
        percent = _as_u8(_ratio(float(remaining_capacity), float(full_capacity)) * 100.0)
        if percent == 100:
            return PowerInfo.charged()
        if status == BatteryStatus.DISCHARGING:
            return PowerInfo.discharging(percent)
        return PowerInfo.charging(percent)
    if status == BatteryStatus.NOT_PRESENT:
        return PowerInfo.wired()
    if status == BatteryStatus.IDLE:
        return PowerInfo.charged()
    return PowerInfo.unknown()