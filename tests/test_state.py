from datetime import datetime, timedelta, timezone

from gamepad_events.ev import Code
from gamepad_events.state import AxisData, ButtonData, GamepadState

T0 = datetime(2022, 3, 4, tzinfo=timezone.utc)
T1 = T0 + timedelta(seconds=1)


def test_empty_state_defaults():
    state = GamepadState()
    assert state.is_pressed(Code(1)) is False
    assert state.value(Code(1)) == 0.0
    assert state.button_data(Code(1)) is None
    assert state.axis_data(Code(1)) is None
    assert list(state.buttons()) == []
    assert list(state.axes()) == []


def test_set_btn_pressed_creates_entry():
    state = GamepadState()
    state.set_btn_pressed(Code(1), True, 5, T0)
    assert state.is_pressed(Code(1))
    assert state.button_data(Code(1)) == ButtonData(1.0, True, False, 5, T0)
    assert state.value(Code(1)) == 1.0


def test_release_keeps_value_updates_rest():
    state = GamepadState()
    state.set_btn_pressed(Code(1), True, 5, T0)
    state.set_btn_pressed(Code(1), False, 6, T1)
    data = state.button_data(Code(1))
    assert data.is_pressed is False
    assert data.value == 1.0
    assert data.counter == 6
    assert data.timestamp == T1


def test_repeating_then_pressed_clears_repeat():
    state = GamepadState()
    state.set_btn_repeating(Code(2), 1, T0)
    data = state.button_data(Code(2))
    assert data.is_repeating and data.is_pressed
    state.set_btn_pressed(Code(2), True, 2, T1)
    assert state.button_data(Code(2)).is_repeating is False


def test_set_btn_value():
    state = GamepadState()
    state.set_btn_value(Code(3), 0.25, 1, T0)
    assert state.value(Code(3)) == 0.25
    assert not state.is_pressed(Code(3))
    state.set_btn_value(Code(3), 0.75, 2, T1)
    data = state.button_data(Code(3))
    assert data.value == 0.75
    assert data.counter == 2


def test_axis_value_takes_precedence():
    state = GamepadState()
    state.set_btn_value(Code(4), 0.5, 1, T0)
    state.update_axis(Code(4), AxisData(-0.5, 2, T1))
    assert state.value(Code(4)) == -0.5
    assert state.axis_data(Code(4)) == AxisData(-0.5, 2, T1)


def test_iteration_yields_all_entries():
    state = GamepadState()
    state.set_btn_pressed(Code(1), True, 1, T0)
    state.set_btn_pressed(Code(2), False, 1, T0)
    state.update_axis(Code(7), AxisData(0.1, 1, T0))
    assert {code for code, _ in state.buttons()} == {Code(1), Code(2)}
    assert dict(state.axes()) == {Code(7): AxisData(0.1, 1, T0)}