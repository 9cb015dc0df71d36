"""User settings: video, audio, key bindings and colours."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from gravdash.controls import Action, KeyboardControls
from gravdash.events import EventQueue, EventType
from gravdash.keyboard import Key, Keyboard


class Setting(IntEnum):
    """Every configurable setting."""

    AUTO_SCALE = 0
    SCALE = 1
    FULLSCREEN = 2
    COLOUR = 3
    MUSIC = 4
    SFX = 5
    LEFT = 6
    RIGHT = 7
    UP = 8
    DOWN = 9
    JUMP = 10
    SELECT = 11
    SPECIAL = 12
    ESCAPE = 13
    P1_COL = 14
    P2_COL = 15
    P2_LEFT = 16
    P2_RIGHT = 17
    P2_JUMP = 18
    P2_SPECIAL = 19
    COLOUR_HELP = 20
    ACC_WORLD_COL = 21
    ACC_PLAYER_COL = 22
    ACC_TARGET_COL = 23
    ACC_SAW_COL = 24
    ACC_TIME_COL = 25


class Colour(IntEnum):
    """Colour palettes."""

    BROWN = 0
    GREEN = 1
    BLUE = 2
    PURPLE = 3


_DEFAULTS: dict[Setting, int] = {
    Setting.AUTO_SCALE: 1,
    Setting.SCALE: 6,
    Setting.FULLSCREEN: 0,
    Setting.COLOUR: Colour.BROWN,
    Setting.MUSIC: 10,
    Setting.SFX: 10,
    Setting.LEFT: Key.A,
    Setting.RIGHT: Key.D,
    Setting.UP: Key.W,
    Setting.DOWN: Key.S,
    Setting.JUMP: Key.SPACE,
    Setting.SELECT: Key.SPACE,
    Setting.SPECIAL: Key.LSHIFT,
    Setting.ESCAPE: Key.ESCAPE,
    Setting.P1_COL: Colour.BLUE,
    Setting.P2_COL: Colour.GREEN,
    Setting.P2_LEFT: Key.LEFT,
    Setting.P2_RIGHT: Key.RIGHT,
    Setting.P2_JUMP: Key.UP,
    Setting.P2_SPECIAL: Key.RSHIFT,
    Setting.COLOUR_HELP: 0,
    Setting.ACC_WORLD_COL: Colour.BROWN,
    Setting.ACC_PLAYER_COL: Colour.BLUE,
    Setting.ACC_TARGET_COL: Colour.GREEN,
    Setting.ACC_SAW_COL: Colour.PURPLE,
    Setting.ACC_TIME_COL: Colour.PURPLE,
}

_LAYOUT: tuple[tuple[Setting, tuple[str, ...]], ...] = (
    (Setting.AUTO_SCALE, ("video", "autoScale")),
    (Setting.SCALE, ("video", "scale")),
    (Setting.FULLSCREEN, ("video", "fullscreen")),
    (Setting.COLOUR, ("video", "colour")),
    (Setting.MUSIC, ("audio", "music")),
    (Setting.SFX, ("audio", "sfx")),
    (Setting.P1_COL, ("multiplayer", "p1Colour")),
    (Setting.P2_COL, ("multiplayer", "p2Colour")),
    (Setting.LEFT, ("multiplayer", "p1Controls", "left")),
    (Setting.RIGHT, ("multiplayer", "p1Controls", "right")),
    (Setting.UP, ("multiplayer", "p1Controls", "up")),
    (Setting.DOWN, ("multiplayer", "p1Controls", "down")),
    (Setting.JUMP, ("multiplayer", "p1Controls", "jump")),
    (Setting.SPECIAL, ("multiplayer", "p1Controls", "special")),
    (Setting.SELECT, ("multiplayer", "p1Controls", "select")),
    (Setting.ESCAPE, ("multiplayer", "p1Controls", "escape")),
    (Setting.P2_LEFT, ("multiplayer", "p2Controls", "left")),
    (Setting.P2_RIGHT, ("multiplayer", "p2Controls", "right")),
    (Setting.P2_JUMP, ("multiplayer", "p2Controls", "jump")),
    (Setting.P2_SPECIAL, ("multiplayer", "p2Controls", "special")),
    (Setting.COLOUR_HELP, ("accessibility", "colourHelp")),
    (Setting.ACC_WORLD_COL, ("accessibility", "world")),
    (Setting.ACC_PLAYER_COL, ("accessibility", "player")),
    (Setting.ACC_TARGET_COL, ("accessibility", "target")),
    (Setting.ACC_SAW_COL, ("accessibility", "saw")),
    (Setting.ACC_TIME_COL, ("accessibility", "time")),
)

_P1_BINDINGS = (
    (Action.LEFT, Setting.LEFT),
    (Action.RIGHT, Setting.RIGHT),
    (Action.UP, Setting.UP),
    (Action.DOWN, Setting.DOWN),
    (Action.SELECT, Setting.SELECT),
    (Action.ESCAPE, Setting.ESCAPE),
    (Action.JUMP, Setting.JUMP),
    (Action.SPECIAL, Setting.SPECIAL),
)

_P2_BINDINGS = (
    (Action.LEFT, Setting.P2_LEFT),
    (Action.RIGHT, Setting.P2_RIGHT),
    (Action.JUMP, Setting.P2_JUMP),
    (Action.SPECIAL, Setting.P2_SPECIAL),
)


def _read(data: Any, path: tuple[str, ...]) -> int:
    value = data
    for key in path:
        value = value[key]
    if isinstance(value, bool):
        return int(value)
    if not isinstance(value, (int, float)):
        raise TypeError(f"expected a number at {'/'.join(path)}, got {value!r}")
    return int(value)


class Settings:
    """The current settings and the player controls built from them."""

    def __init__(self, keyboard: Keyboard, events: EventQueue) -> None:
        self.keyboard = keyboard
        self.events = events
        self.auto_scale_value = 1
        self._values: dict[Setting, int] = {}
        self._controls: tuple[KeyboardControls, KeyboardControls]
        self.load_defaults()

    def load_defaults(self) -> None:
        """Reset every setting to its default."""
        self._values = {setting: int(value) for setting, value in _DEFAULTS.items()}
        self._init_controls()

    def load(self, data: dict[str, Any]) -> None:
        """Load settings from a decoded JSON object; raise ValueError if malformed."""
        try:
            values = {setting: _read(data, path) for setting, path in _LAYOUT}
        except (KeyError, IndexError, TypeError) as exc:
            raise ValueError("invalid settings data") from exc
        self._values = values
        self._init_controls()

    def save(self) -> dict[str, Any]:
        """The settings as a JSON-ready object, readable by :meth:`load`."""
        result: dict[str, Any] = {}
        for setting, path in _LAYOUT:
            node = result
            for key in path[:-1]:
                node = node.setdefault(key, {})
            node[path[-1]] = self._values[setting]
        return result

    def get(self, setting: Setting) -> int:
        return self._values[setting]

    def set(self, setting: Setting, value: int) -> None:
        """Change a setting, rebuilding controls and requesting window updates as needed."""
        value = int(value)
        if self._values[setting] == value:
            return
        self._values[setting] = value

        if Setting.LEFT <= setting <= Setting.ESCAPE or Setting.P2_LEFT <= setting <= Setting.P2_SPECIAL:
            self._init_controls()

        if setting is Setting.FULLSCREEN:
            self.events.push(EventType.UPDATE_WINDOW)

        if self._values[Setting.FULLSCREEN]:
            return
        if setting is Setting.AUTO_SCALE and self.auto_scale_value != self._values[Setting.SCALE]:
            self.events.push(EventType.UPDATE_WINDOW)
        elif setting is Setting.SCALE and not self._values[Setting.AUTO_SCALE]:
            self.events.push(EventType.UPDATE_WINDOW)

    def scale(self) -> int:
        """The effective window scale."""
        if self._values[Setting.FULLSCREEN]:
            return 2 * self.auto_scale_value
        if self._values[Setting.AUTO_SCALE]:
            return self.auto_scale_value
        return self._values[Setting.SCALE]

    def _assisted(self, accessible: Setting) -> Colour:
        if self._values[Setting.COLOUR_HELP]:
            return Colour(self._values[accessible])
        return Colour(self._values[Setting.COLOUR])

    def world_colour(self) -> Colour:
        return self._assisted(Setting.ACC_WORLD_COL)

    def player_colour(self, player_id: int) -> Colour:
        """Colour of player 0 (solo), 1 or 2 (multiplayer)."""
        if player_id == 0:
            return self._assisted(Setting.ACC_PLAYER_COL)
        if player_id == 1:
            return Colour(self._values[Setting.P1_COL])
        return Colour(self._values[Setting.P2_COL])

    def target_colour(self) -> Colour:
        return self._assisted(Setting.ACC_TARGET_COL)

    def saw_colour(self) -> Colour:
        return self._assisted(Setting.ACC_SAW_COL)

    def time_colour(self) -> Colour:
        return self._assisted(Setting.ACC_TIME_COL)

    def _player_controls(self, player: int) -> KeyboardControls:
        return self._controls[0] if player == 0 else self._controls[1]

    def is_action_on_initial_click(self, action: Action, player: int = 0) -> bool:
        return self._player_controls(player).is_action_on_initial_click(action)

    def is_action_held(self, action: Action, player: int = 0) -> bool:
        return self._player_controls(player).is_action_held(action)

    def is_action_clicked(self, action: Action, player: int = 0) -> bool:
        return self._player_controls(player).is_action_clicked(action)

    def _build_controls(self, bindings) -> KeyboardControls:
        controls = KeyboardControls(self.keyboard)
        for action, setting in bindings:
            controls.set_action(action, self._values[setting])
        return controls

    def _init_controls(self) -> None:
        self._controls = (
            self._build_controls(_P1_BINDINGS),
            self._build_controls(_P2_BINDINGS),
        )