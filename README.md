# gamepad-events

A platform-neutral model of gamepad input — buttons, axes, event codes,
events and the cached state of a gamepad — together with the code tables and
reading-comparison logic for Windows Gaming Input and XInput controllers, and
a command that trims an SDL controller database down to one platform.

## Installation

```
pip install gamepad-events
```

For running the tests:

```
pip install "gamepad-events[test]"
```

## Events and elements

`gamepad_events.ev` defines:

- `Button` and `Axis` enumerations (`Button.SOUTH`, `Button.LEFT_TRIGGER`,
  `Button.DPAD_UP`, …, `Axis.LEFT_STICK_X`, `Axis.DPAD_Y`, …, each with an
  `UNKNOWN` member). Buttons can be classified with `is_action()`,
  `is_trigger()`, `is_menu()`, `is_stick()` and `is_dpad()`; `to_nec()` gives
  the button's `Code`, or `None` for `Button.UNKNOWN`. `Axis.is_stick()` and
  `Axis.second_axis()` tell whether an axis belongs to a stick and which axis
  it is paired with.
- `Code`, a hashable wrapper around a platform code; `into_u32()` returns its
  numeric value.
- `AxisOrBtn`, holding either an axis or a button.
- The event kinds `ButtonPressed`, `ButtonRepeated`, `ButtonReleased`,
  `ButtonChanged`, `AxisChanged`, `Connected`, `Disconnected`, `Dropped` and
  `ForceFeedbackEffectCompleted`.
- `Event`, a frozen record of a gamepad id, an event kind and a time (the
  current UTC time by default). `drop()` returns a copy whose kind is
  `Dropped`; `is_dropped()` tests for it.

```python
from gamepad_events.ev import Axis, Button, ButtonPressed, Event

Button.SOUTH.is_action()          # True
Axis.LEFT_STICK_X.second_axis()   # Axis.LEFT_STICK_Y

event = Event(0, ButtonPressed(Button.SOUTH, Button.SOUTH.to_nec()))
event.drop().is_dropped()         # True
```

## Cached state

`gamepad_events.state.GamepadState` keeps the last known data of every button
(`ButtonData`) and axis (`AxisData`), keyed by `Code`. `value()` returns the
axis or button value, or `0.0` when nothing is known; `is_pressed()`,
`button_data()`, `axis_data()`, `buttons()` and `axes()` read the state, and
`set_btn_pressed()`, `set_btn_repeating()`, `set_btn_value()` and
`update_axis()` change it.

```python
from gamepad_events.ev import Button
from gamepad_events.state import GamepadState
from gamepad_events.utils import time_now

state = GamepadState()
code = Button.SOUTH.to_nec()
state.set_btn_pressed(code, True, 1, time_now())
state.is_pressed(code)   # True
state.value(code)        # 1.0
```

`gamepad_events.utils` provides `time_now()` and `test_bit(n, array)`.

## Backend helpers

- `gamepad_events.wgi_codes` – `EvCode` and `EvCodeKind` for Windows Gaming
  Input controllers, the standard code constants, `SwitchPosition` with
  `direction_from_switch()`, and `collect_codes()`, which lists the button and
  axis codes of a controller (every switch counts as two axes).
- `gamepad_events.wgi_reading` – `RawGamepadReading` and `GamepadReading`;
  `raw_reading_differences()` and `gamepad_reading_differences()` return the
  `RawEvent`s for everything that changed between two readings;
  `hardware_uuid()` builds an SDL-style identifier from vendor and product
  ids; `power_info_from_battery()` turns a battery report into a `PowerInfo`.
- `gamepad_events.xinput` – `XInputCode` and its constants, `AxisInfo` ranges
  and dead zones via `axis_info()`, `compare_state()` over two
  `XInputGamepadState` readings returning `XInputEvent`s, `is_mask_eq()`, and
  `battery_power_info()` from `BatteryType` and `BatteryLevel`.

## Controller database

The `gamepad-controllerdb` command copies only the lines of an SDL
`gamecontrollerdb.txt` whose `platform:` field matches one platform into
`OUT_DIR/gamecontrollerdb.txt`:

```
gamepad-controllerdb OUT_DIR [--source PATH] [--family FAMILY] [--os OS]
```

`--source` defaults to `SDL_GameControllerDB/gamecontrollerdb.txt`;
`--family` (`unix`, `windows`, `wasm`) and `--os` default to the running
system. The same work is available from Python as
`gamepad_events.controllerdb.write_filtered()`, which returns the number of
lines written, with `sdl_platform()` and `filter_mappings()` as its parts.

## What this package does not do

It does not open, poll or detect gamepads, and has no force feedback. It
supplies the data model and the pure logic for turning controller readings
into events; reading the devices themselves is left to the caller. It also
has no event filters (dead zones, jitter, repeat) or mapping of raw codes to
`Button` and `Axis` through the controller database.