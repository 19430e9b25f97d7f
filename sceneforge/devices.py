"""Keyboard and mouse state tracking, fed by window-system events."""

from __future__ import annotations

from enum import IntEnum
from typing import Set, Tuple, Union

KEY_SLOTS = 288


class Key(IntEnum):
    """Key codes: 0-255 ASCII, 257-277 special keys, 278 and up modifiers."""

    BACKSPACE = 8
    TAB = 9
    ENTER = 13
    ESCAPE = 27
    SPACE = 32
    F1 = 257
    F2 = 258
    F3 = 259
    F4 = 260
    F5 = 261
    F6 = 262
    F7 = 263
    F8 = 264
    F9 = 265
    F10 = 266
    F11 = 267
    F12 = 268
    LEFT = 269
    UP = 270
    RIGHT = 271
    DOWN = 272
    PAGE_UP = 273
    PAGE_DOWN = 274
    HOME = 275
    END = 276
    INSERT = 277
    ALT = 278
    SHIFT = 279
    CONTROL = 280


class MouseButton(IntEnum):
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2
    WHEEL_UP = 3
    WHEEL_DOWN = 4


_SPECIAL = {code: Key.F1 + code - 1 for code in range(1, 13)}
_SPECIAL.update({code: Key.LEFT + code - 100 for code in range(100, 109)})


def _slot(key: Union[int, str]) -> int:
    if isinstance(key, str):
        if len(key) != 1:
            raise ValueError(f"expected a single character, got {key!r}")
        key = ord(key)
    code = int(key)
    if not 0 <= code < KEY_SLOTS:
        raise ValueError(f"key code {code} out of range")
    return code


def _button(button: int) -> MouseButton:
    try:
        return MouseButton(int(button))
    except ValueError:
        raise ValueError(f"unknown mouse button {button}") from None


class Keyboard:
    """Per-frame key state: pressed this frame, held, released this frame."""

    def __init__(self) -> None:
        self._up: Set[int] = set()
        self._hold: Set[int] = set()
        self._down: Set[int] = set()

    def update(self) -> None:
        """End the frame: forget presses and releases, keep held keys."""
        self._up.clear()
        self._down.clear()

    def key_up(self, key: Union[int, str]) -> bool:
        return _slot(key) in self._up

    def key_hold(self, key: Union[int, str]) -> bool:
        return _slot(key) in self._hold

    def key_down(self, key: Union[int, str]) -> bool:
        return _slot(key) in self._down

    @staticmethod
    def key_from_special(key: int) -> int:
        """Map a window-system special key code to a Key code, or 0 if unknown."""
        return int(_SPECIAL.get(int(key), 0))

    def update_modifiers(self, shift: bool, control: bool, alt: bool) -> None:
        for key, active in ((Key.SHIFT, shift), (Key.CONTROL, control), (Key.ALT, alt)):
            if active:
                if key not in self._hold:
                    self._down.add(key)
                    self._hold.add(key)
            else:
                self._hold.discard(key)

    def _press(self, code: int) -> None:
        self._down.add(code)
        self._hold.add(code)

    def _release(self, code: int) -> None:
        self._up.add(code)
        self._hold.discard(code)

    def press(self, key: Union[int, str]) -> None:
        self._press(_slot(key))

    def release(self, key: Union[int, str]) -> None:
        self._release(_slot(key))

    def press_special(self, key: int) -> None:
        self._press(self.key_from_special(key))

    def release_special(self, key: int) -> None:
        self._release(self.key_from_special(key))


class Mouse:
    """Pointer position and per-frame button state."""

    def __init__(self, center: Tuple[float, float] = (0.0, 0.0)) -> None:
        self._position: Tuple[float, float] = (0.0, 0.0)
        self._last: Tuple[float, float] = (0.0, 0.0)
        self._up: Set[MouseButton] = set()
        self._down: Set[MouseButton] = set()
        self._hold: Set[MouseButton] = set()
        self.center(center)

    def update(self) -> None:
        """End the frame: forget presses and releases, keep held buttons."""
        self._down.clear()
        self._up.clear()

    def center(self, point: Tuple[float, float]) -> None:
        """Move the pointer to the given point, usually the window centre."""
        x, y = point
        self.set_position(x, y)

    def set_position(self, x: float, y: float) -> None:
        """Place the pointer at whole-pixel coordinates."""
        self._move(int(x), int(y))

    def _move(self, x: float, y: float) -> None:
        self._last = self._position
        self._position = (float(x), float(y))

    @property
    def position(self) -> Tuple[float, float]:
        return self._position

    def position_delta(self) -> Tuple[float, float]:
        return (
            self._position[0] - self._last[0],
            self._position[1] - self._last[1],
        )

    def has_moved(self) -> bool:
        return self._last != self._position

    def button_up(self, button: int) -> bool:
        return _button(button) in self._up

    def button_down(self, button: int) -> bool:
        return _button(button) in self._down

    def button_hold(self, button: int) -> bool:
        return _button(button) in self._hold

    def on_entry(self, entered: bool) -> None:
        """Pointer entered or left the window; leaving drops all held buttons."""
        if not entered:
            self._hold.clear()

    def on_motion(self, x: float, y: float) -> None:
        self._move(x, y)

    def on_button(self, button: int, pressed: bool, x: float, y: float) -> None:
        which = _button(button)
        if pressed:
            self._down.add(which)
            self._hold.add(which)
        else:
            self._up.add(which)
            self._hold.discard(which)
        self._move(x, y)