import pytest

from gamepad_events import wgi_codes as nec
from gamepad_events.wgi_codes import EvCode, EvCodeKind, SwitchPosition, direction_from_switch
from gamepad_events.wgi_reading import (
    BatteryStatus,
    GamepadReading,
    PowerInfo,
    RawEvent,
    RawGamepadReading,
    gamepad_reading_differences,
    hardware_uuid,
    power_info_from_battery,
    raw_reading_differences,
)


def _raw(axes=(0.5, 0.5), buttons=(False, False), switches=(SwitchPosition.CENTER,), time=0):
    return RawGamepadReading(list(axes), list(buttons), list(switches), time)


def test_raw_identical_readings_give_no_events():
    assert raw_reading_differences(_raw(), _raw(time=5)) == []


def test_raw_axis_change_reports_only_changed_axis():
    events = raw_reading_differences(_raw(), _raw(axes=(0.5, 1.0)))
    assert len(events) == 1
    assert events[0].kind is RawEvent.Kind.AXIS_VALUE_CHANGED
    assert events[0].code == EvCode(EvCodeKind.AXIS, 1)


def test_raw_axis_extremes():
    events = raw_reading_differences(_raw(), _raw(axes=(0.0, 1.0)))
    assert [e.value for e in events] == [-32768, 32767]


def test_raw_axis_values_are_monotonic():
    lows = raw_reading_differences(_raw(), _raw(axes=(0.25, 0.75)))
    assert lows[0].value < lows[1].value


def test_raw_new_axis_beyond_old_length_is_reported():
    events = raw_reading_differences(_raw(axes=(0.5,)), _raw(axes=(0.5, 0.5)))
    assert [e.code for e in events] == [EvCode(EvCodeKind.AXIS, 1)]


def test_raw_buttons_pressed_and_released():
    old = _raw(buttons=(True, False))
    new = _raw(buttons=(False, True))
    events = raw_reading_differences(old, new)
    assert events == [
        RawEvent.released(EvCode(EvCodeKind.BUTTON, 0)),
        RawEvent.pressed(EvCode(EvCodeKind.BUTTON, 1)),
    ]


def test_raw_switch_up_reports_inverted_y_only():
    events = raw_reading_differences(_raw(), _raw(switches=(SwitchPosition.UP,)))
    assert events == [
        RawEvent.axis(-direction_from_switch(SwitchPosition.UP)[1], EvCode(EvCodeKind.SWITCH, 1))
    ]


def test_raw_second_switch_uses_doubled_indices():
    old = _raw(switches=(SwitchPosition.CENTER, SwitchPosition.CENTER))
    new = _raw(switches=(SwitchPosition.CENTER, SwitchPosition.DOWN_RIGHT))
    events = raw_reading_differences(old, new)
    x, y = direction_from_switch(SwitchPosition.DOWN_RIGHT)
    assert events == [
        RawEvent.axis(x, EvCode(EvCodeKind.SWITCH, 2)),
        RawEvent.axis(-y, EvCode(EvCodeKind.SWITCH, 3)),
    ]


def test_raw_events_ordered_axes_buttons_switches():
    new = _raw(axes=(0.0, 0.5), buttons=(True, False), switches=(SwitchPosition.LEFT,))
    kinds = [e.code.kind for e in raw_reading_differences(_raw(), new)]
    assert kinds == [EvCodeKind.AXIS, EvCodeKind.BUTTON, EvCodeKind.SWITCH]


def test_gamepad_identical_readings_give_no_events():
    assert gamepad_reading_differences(GamepadReading(), GamepadReading(timestamp=3)) == []


def test_gamepad_y_axis_is_inverted():
    new = GamepadReading(left_thumbstick_x=0.5, left_thumbstick_y=0.5)
    events = gamepad_reading_differences(GamepadReading(), new)
    assert [e.code for e in events] == [nec.AXIS_LSTICKX, nec.AXIS_LSTICKY]
    assert events[1].value == -events[0].value
    assert events[0].value > 0


def test_gamepad_full_trigger_is_i32_max():
    events = gamepad_reading_differences(GamepadReading(), GamepadReading(right_trigger=1.0))
    assert events == [RawEvent.axis(2**31 - 1, nec.AXIS_RT2)]


def test_gamepad_button_press_and_release():
    pressed = GamepadReading(buttons=GamepadReading.Buttons.A)
    assert gamepad_reading_differences(GamepadReading(), pressed) == [
        RawEvent.pressed(nec.BTN_SOUTH)
    ]
    assert gamepad_reading_differences(pressed, GamepadReading()) == [
        RawEvent.released(nec.BTN_SOUTH)
    ]


def test_gamepad_button_events_follow_map_order():
    buttons = GamepadReading.Buttons.A | GamepadReading.Buttons.DPAD_UP
    events = gamepad_reading_differences(GamepadReading(), GamepadReading(buttons=buttons))
    assert [e.code for e in events] == [nec.BTN_DPAD_UP, nec.BTN_SOUTH]


def test_hardware_uuid_layout():
    result = hardware_uuid(0x045E, 0x028E)
    assert str(result) == "03000000-5e04-0000-8e02-000000000000"


def test_hardware_uuid_embeds_ids_little_endian():
    result = hardware_uuid(0x1234, 0xABCD)
    assert result.bytes[4:6] == (0x1234).to_bytes(2, "little")
    assert result.bytes[8:10] == (0xABCD).to_bytes(2, "little")
    assert result.bytes[0] == 0x03


def test_power_wired_when_not_wireless():
    assert power_info_from_battery(False, BatteryStatus.DISCHARGING, 100, 50) == PowerInfo.wired()


def test_power_not_present_and_idle():
    assert power_info_from_battery(True, BatteryStatus.NOT_PRESENT, None, None) == PowerInfo.wired()
    assert power_info_from_battery(True, BatteryStatus.IDLE, None, None) == PowerInfo.charged()


def test_power_full_battery_is_charged():
    assert power_info_from_battery(True, BatteryStatus.CHARGING, 200, 200) == PowerInfo.charged()


@pytest.mark.parametrize(
    "status, kind",
    [
        (BatteryStatus.DISCHARGING, PowerInfo.Kind.DISCHARGING),
        (BatteryStatus.CHARGING, PowerInfo.Kind.CHARGING),
    ],
)
def test_power_partial_battery(status, kind):
    info = power_info_from_battery(True, status, 100, 50)
    assert info.kind is kind
    assert info.level == 50


def test_power_unknown_cases():
    assert power_info_from_battery(True, 99, 100, 50) == PowerInfo.unknown()
    assert power_info_from_battery(True, BatteryStatus.CHARGING, None, 50) == PowerInfo.unknown()


def test_power_info_str():
    assert str(PowerInfo.discharging(40)) == "Discharging 40"
    assert str(PowerInfo.wired()) == "Wired"