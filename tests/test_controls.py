import pytest

from noneuclid.controls import InputState
from noneuclid.settings import MOUSE_SMOOTH


def test_fresh_state_is_idle():
    state = InputState()
    assert not any(state.key)
    assert not any(state.mouse_button)
    assert state.mouse_dx == 0.0


def test_press_and_end_frame():
    state = InputState()
    state.press_key("W")
    assert state.key[ord("W")] and state.key_press[ord("W")]
    state.end_frame()
    assert state.key[ord("W")]
    assert not state.key_press[ord("W")]
    state.release_key(ord("W"))
    assert not state.key[ord("W")]


def test_key_codes_wrap_to_byte():
    state = InputState()
    state.press_key(0x100 + ord("A"))
    assert state.key[ord("A")]


def test_mouse_buttons():
    state = InputState()
    state.press_mouse_button(2)
    assert state.mouse_button[2] and state.mouse_button_press[2]
    state.end_frame()
    assert state.mouse_button[2] and not state.mouse_button_press[2]
    state.release_mouse_button(2)
    assert not state.mouse_button[2]
    with pytest.raises(IndexError):
        state.press_mouse_button(3)


def test_mouse_motion_is_smoothed():
    state = InputState()
    state.add_mouse_motion(6.0, -2.0)
    state.add_mouse_motion(4.0, 0.0)
    state.end_frame()
    assert state.mouse_dx == pytest.approx(10.0 * (1.0 - MOUSE_SMOOTH))
    assert state.mouse_dy == pytest.approx(-2.0 * (1.0 - MOUSE_SMOOTH))
    assert state.mouse_ddx == 0.0
    first = state.mouse_dx
    state.end_frame()
    assert state.mouse_dx == pytest.approx(first * MOUSE_SMOOTH)