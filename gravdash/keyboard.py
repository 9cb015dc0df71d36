"""Keyboard state: which keys are held, and their click and repeat timing."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Container

CLICK_TIME = 150
"""Milliseconds between repeated clicks while a key is held down."""


class Key(IntEnum):
    """Keyboard key codes."""

    UNKNOWN = -1
    A = 0
    B = 1
    C = 2
    D = 3
    E = 4
    F = 5
    G = 6
    H = 7
    I = 8  # noqa: E741
    J = 9
    K = 10
    L = 11
    M = 12
    N = 13
    O = 14  # noqa: E741
    P = 15
    Q = 16
    R = 17
    S = 18
    T = 19
    U = 20
    V = 21
    W = 22
    X = 23
    Y = 24
    Z = 25
    NUM0 = 26
    NUM1 = 27
    NUM2 = 28
    NUM3 = 29
    NUM4 = 30
    NUM5 = 31
    NUM6 = 32
    NUM7 = 33
    NUM8 = 34
    NUM9 = 35
    ESCAPE = 36
    LCONTROL = 37
    LSHIFT = 38
    LALT = 39
    LSYSTEM = 40
    RCONTROL = 41
    RSHIFT = 42
    RALT = 43
    RSYSTEM = 44
    MENU = 45
    LBRACKET = 46
    RBRACKET = 47
    SEMICOLON = 48
    COMMA = 49
    PERIOD = 50
    APOSTROPHE = 51
    SLASH = 52
    BACKSLASH = 53
    GRAVE = 54
    EQUAL = 55
    HYPHEN = 56
    SPACE = 57
    ENTER = 58
    BACKSPACE = 59
    TAB = 60
    PAGEUP = 61
    PAGEDOWN = 62
    END = 63
    HOME = 64
    INSERT = 65
    DELETE = 66
    ADD = 67
    SUBTRACT = 68
    MULTIPLY = 69
    DIVIDE = 70
    LEFT = 71
    RIGHT = 72
    UP = 73
    DOWN = 74
    NUMPAD0 = 75
    NUMPAD1 = 76
    NUMPAD2 = 77
    NUMPAD3 = 78
    NUMPAD4 = 79
    NUMPAD5 = 80
    NUMPAD6 = 81
    NUMPAD7 = 82
    NUMPAD8 = 83
    NUMPAD9 = 84
    F1 = 85
    F2 = 86
    F3 = 87
    F4 = 88
    F5 = 89
    F6 = 90
    F7 = 91
    F8 = 92
    F9 = 93
    F10 = 94
    F11 = 95
    F12 = 96
    F13 = 97
    F14 = 98
    F15 = 99
    PAUSE = 100


def _is_letter(code: int) -> bool:
    return Key.A <= code <= Key.Z


def _is_number(code: int) -> bool:
    return Key.NUM0 <= code <= Key.NUM9


def _is_numpad(code: int) -> bool:
    return Key.NUMPAD0 <= code <= Key.NUMPAD9


_NAMED_KEYS: dict[Key, str] = {
    key: key.name.lower()
    for key in Key
    if key is not Key.UNKNOWN
    and not (_is_letter(key) or _is_number(key) or _is_numpad(key))
}
_KEYS_BY_NAME: dict[str, Key] = {name: key for key, name in _NAMED_KEYS.items()}


def key_name(code: int) -> str | None:
    """The display name of a key code, or ``None`` if it has none."""
    try:
        key = Key(code)
    except ValueError:
        return None
    if _is_letter(key):
        return chr(ord("a") + key - Key.A)
    if _is_number(key):
        return str(key - Key.NUM0)
    if _is_numpad(key):
        return f"npad{key - Key.NUMPAD0}"
    return _NAMED_KEYS.get(key)


def key_code(name: str) -> Key:
    """The key code for a display name; raise ValueError if there is none."""
    if len(name) == 1:
        if "a" <= name <= "z":
            return Key(Key.A + ord(name) - ord("a"))
        if "0" <= name <= "9":
            return Key(Key.NUM0 + ord(name) - ord("0"))
    elif "npad" in name:
        digit = name[-1]
        if not "0" <= digit <= "9":
            raise ValueError(f"could not find the key code for {name!r}")
        return Key(Key.NUMPAD0 + ord(digit) - ord("0"))

    try:
        return _KEYS_BY_NAME[name]
    except KeyError:
        raise ValueError(f"could not find the key code for {name!r}") from None


class KeyState(Enum):
    """Where a held key is in its click cycle."""

    INITIAL_CLICK = auto()
    HOLD = auto()
    CLICK = auto()


@dataclass
class KeyPress:
    """A key that is currently held down."""

    code: Key
    state: KeyState = KeyState.INITIAL_CLICK
    click_timer: int = CLICK_TIME

    def update(self, delta: int) -> None:
        """Advance the click timer by ``delta`` milliseconds."""
        if self.state in (KeyState.CLICK, KeyState.INITIAL_CLICK):
            self.state = KeyState.HOLD

        self.click_timer -= delta
        if self.click_timer < 0:
            self.state = KeyState.CLICK
            self.click_timer = CLICK_TIME


class Keyboard:
    """Tracks held keys, most recently pressed first."""

    def __init__(self) -> None:
        self._active: list[KeyPress] = []

    def _find(self, code: int) -> KeyPress | None:
        return next((press for press in self._active if press.code == code), None)

    def add_key_press(self, code: int) -> None:
        """Record a key press, unless the key is already held."""
        if self._find(code) is None:
            self._active.insert(0, KeyPress(Key(code)))

    def update(self, pressed: Container[int], delta: int) -> None:
        """Advance held keys; stop at the first one no longer in ``pressed``,
        which is released."""
        for i, press in enumerate(self._active):
            if press.code not in pressed:
                del self._active[i]
                break
            press.update(delta)

    def key_at_head(self) -> Key | None:
        """The most recent key if it was pressed this frame, else ``None``."""
        if not self._active:
            return None
        head = self._active[0]
        return head.code if head.state is KeyState.INITIAL_CLICK else None

    def is_key_held(self, code: int) -> bool:
        return self._find(code) is not None

    def is_key_on_initial_click(self, code: int) -> bool:
        press = self._find(code)
        return press is not None and press.state is KeyState.INITIAL_CLICK

    def is_key_clicked(self, code: int) -> bool:
        press = self._find(code)
        return press is not None and press.state in (
            KeyState.INITIAL_CLICK,
            KeyState.CLICK,
        )