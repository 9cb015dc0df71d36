"""Mapping of game actions to keyboard keys."""

from __future__ import annotations

from enum import IntEnum

from gravdash.keyboard import Key, Keyboard


class Action(IntEnum):
    """Things a player can do."""

    LEFT = 0
    RIGHT = 1
    UP = 2
    DOWN = 3
    JUMP = 4
    SELECT = 5
    SPECIAL = 6
    ESCAPE = 7


class KeyboardControls:
    """Answers action queries by looking up bound keys on a keyboard."""

    def __init__(self, keyboard: Keyboard) -> None:
        self.keyboard = keyboard
        self._keys: dict[Action, Key] = {action: Key.UNKNOWN for action in Action}

    def is_action_held(self, action: Action) -> bool:
        return self.keyboard.is_key_held(self._keys[action])

    def is_action_on_initial_click(self, action: Action) -> bool:
        return self.keyboard.is_key_on_initial_click(self._keys[action])

    def is_action_clicked(self, action: Action) -> bool:
        return self.keyboard.is_key_clicked(self._keys[action])

    def get_action(self, action: int) -> int:
        """The key bound to ``action``, or ``Key.UNKNOWN`` for an invalid action."""
        try:
            return int(self._keys[Action(action)])
        except ValueError:
            return int(Key.UNKNOWN)

    def set_action(self, action: Action, key: int) -> None:
        """Bind ``action`` to ``key``."""
        self._keys[Action(action)] = Key(key)