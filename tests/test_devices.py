import pytest

from sceneforge.devices import Key, Keyboard, Mouse, MouseButton


def test_key_constants_match_keyboard_codes():
    kb = Keyboard()
    kb.press_special(1)
    assert kb.key_down(Key.F1) and kb.key_down(257)
    kb.press_special(108)
    assert kb.key_hold(Key.INSERT) and kb.key_hold(277)
    kb.press(27)
    assert kb.key_down(Key.ESCAPE)
    mouse = Mouse()
    mouse.on_button(2, True, 0, 0)
    assert mouse.button_hold(MouseButton.RIGHT)


def test_key_from_special():
    assert Keyboard.key_from_special(1) == Key.F1
    assert Keyboard.key_from_special(12) == Key.F12
    assert Keyboard.key_from_special(100) == Key.LEFT
    assert Keyboard.key_from_special(108) == Key.INSERT
    assert Keyboard.key_from_special(50) == 0


def test_press_hold_release_cycle():
    kb = Keyboard()
    kb.press("w")
    assert kb.key_down("w") and kb.key_hold("w")
    assert not kb.key_up("w")
    kb.update()
    assert not kb.key_down("w") and kb.key_hold("w")
    kb.release(ord("w"))
    assert kb.key_up("w") and not kb.key_hold("w")
    kb.update()
    assert not kb.key_up("w")


def test_special_keys():
    kb = Keyboard()
    kb.press_special(101)
    assert kb.key_down(Key.UP) and kb.key_hold(Key.UP)
    kb.release_special(101)
    assert kb.key_up(Key.UP) and not kb.key_hold(Key.UP)


def test_modifiers():
    kb = Keyboard()
    kb.update_modifiers(True, False, False)
    assert kb.key_down(Key.SHIFT) and kb.key_hold(Key.SHIFT)
    kb.update()
    kb.update_modifiers(True, True, False)
    assert not kb.key_down(Key.SHIFT)
    assert kb.key_down(Key.CONTROL)
    kb.update_modifiers(False, True, False)
    assert not kb.key_hold(Key.SHIFT)
    assert kb.key_hold(Key.CONTROL)
    assert not kb.key_hold(Key.ALT)


def test_invalid_keys():
    kb = Keyboard()
    with pytest.raises(ValueError):
        kb.key_down(400)
    with pytest.raises(ValueError):
        kb.press("ab")
    with pytest.raises(ValueError):
        kb.key_hold(-1)


def test_mouse_starts_at_center():
    mouse = Mouse((40.7, 30.2))
    assert mouse.position == (40.0, 30.0)
    assert mouse.has_moved()
    mouse.set_position(40, 30)
    assert not mouse.has_moved()
    assert mouse.position_delta() == (0.0, 0.0)


def test_mouse_motion_delta():
    mouse = Mouse((10, 10))
    mouse.on_motion(13, 6)
    assert mouse.position == (13.0, 6.0)
    assert mouse.position_delta() == (3.0, -4.0)
    assert mouse.has_moved()


def test_mouse_buttons_and_entry():
    mouse = Mouse()
    mouse.on_button(MouseButton.LEFT, True, 5, 5)
    assert mouse.button_down(MouseButton.LEFT)
    assert mouse.button_hold(MouseButton.LEFT)
    assert mouse.position == (5.0, 5.0)
    mouse.update()
    assert not mouse.button_down(MouseButton.LEFT)
    assert mouse.button_hold(MouseButton.LEFT)
    mouse.on_entry(True)
    assert mouse.button_hold(MouseButton.LEFT)
    mouse.on_entry(False)
    assert not mouse.button_hold(MouseButton.LEFT)
    mouse.on_button(MouseButton.RIGHT, False, 5, 5)
    assert mouse.button_up(MouseButton.RIGHT)


def test_mouse_unknown_button():
    mouse = Mouse()
    with pytest.raises(ValueError):
        mouse.on_button(9, True, 0, 0)
    with pytest.raises(ValueError):
        mouse.button_hold(7)