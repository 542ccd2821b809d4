"""Keyboard and mouse state built from window messages."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

WM_KEYDOWN = 0x0100
WM_KEYUP = 0x0101
WM_MOUSEMOVE = 0x0200
WM_LBUTTONDOWN = 0x0201
WM_LBUTTONUP = 0x0202
WM_RBUTTONDOWN = 0x0204
WM_RBUTTONUP = 0x0205

_KEY_COUNT = 256
_REPEAT_BIT = 1 << 30


@dataclass(slots=True)
class MouseState:
    """Mouse position and button states."""

    pos: tuple[int, int] = (0, 0)
    left_pressed: bool = False
    right_pressed: bool = False


@dataclass(slots=True)
class KeyEdge:
    """Whether a key was just pressed or released."""

    pressed: bool = False
    released: bool = False


@dataclass(frozen=True, slots=True)
class Message:
    """A window message: its kind and the two parameters that come with it."""

    kind: int
    wparam: int = 0
    lparam: int = 0
    hwnd: Any = None


def _signed16(value: int) -> int:
    value &= 0xFFFF
    return value - 0x10000 if value & 0x8000 else value


def get_x_from_lparam(lparam: int) -> int:
    """Signed x coordinate held in the low word of a mouse message parameter."""
    return _signed16(lparam)


def get_y_from_lparam(lparam: int) -> int:
    """Signed y coordinate held in the high word of a mouse message parameter."""
    return _signed16(lparam >> 16)


class InputManager:
    """Tracks which keys are held, which were just pressed, and the mouse."""

    def __init__(self) -> None:
        self._mouse = MouseState()
        self._key_down = [False] * _KEY_COUNT
        self._key_edge = [KeyEdge() for _ in range(_KEY_COUNT)]
        self.capture: Any = None

    @property
    def mouse_state(self) -> MouseState:
        return replace(self._mouse)

    def handle_message(self, message: Message) -> bool:
        """Update state from message; return False if it is not an input message."""
        if message.kind == WM_KEYDOWN:
            self._key_pressed(message.wparam, message.lparam)
        elif message.kind == WM_KEYUP:
            self._key_released(message.wparam)
        elif message.kind in (
            WM_MOUSEMOVE,
            WM_LBUTTONDOWN,
            WM_LBUTTONUP,
            WM_RBUTTONDOWN,
            WM_RBUTTONUP,
        ):
            self._mouse_message(message)
        else:
            return False
        return True

    def get_key_pressed(self, key: int) -> bool:
        """True if the key went down and has not been released since."""
        return self._key_edge[int(key)].pressed

    def get_key_down(self, key: int) -> bool:
        return self._key_down[int(key)]

    @staticmethod
    def _check_key(code: int) -> int:
        if not 0 <= code < _KEY_COUNT:
            raise ValueError(f"key code out of range: {code}")
        return code

    def _key_pressed(self, wparam: int, lparam: int) -> None:
        code = self._check_key(wparam)
        was_down = (lparam & _REPEAT_BIT) != 0
        self._key_down[code] = True
        edge = self._key_edge[code]
        if not was_down:
            edge.pressed = True
        edge.released = False

    def _key_released(self, wparam: int) -> None:
        code = self._check_key(wparam)
        self._key_down[code] = False
        edge = self._key_edge[code]
        edge.pressed = False
        edge.released = True

    def _mouse_message(self, message: Message) -> None:
        self._mouse.pos = (get_x_from_lparam(message.lparam), get_y_from_lparam(message.lparam))
        if message.kind == WM_LBUTTONDOWN:
            self._mouse.left_pressed = True
            self.capture = message.hwnd
        elif message.kind == WM_RBUTTONDOWN:
            self._mouse.right_pressed = True
            self.capture = message.hwnd
        elif message.kind == WM_LBUTTONUP:
            self._mouse.left_pressed = False
            self.capture = None
        elif message.kind == WM_RBUTTONUP:
            self._mouse.right_pressed = False
            self.capture = None