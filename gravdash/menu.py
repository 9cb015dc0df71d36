"""The stack of menus the user moves through, and the layout of each menu."""

from __future__ import annotations

from enum import IntEnum

from gravdash.events import Event, EventQueue, EventType
from gravdash.list_item import (
    Interactable,
    KeybindInteractable,
    RangeInteractable,
    SelectionInteractable,
    StaticInteractable,
    ToggleInteractable,
)
from gravdash.menu_interface import (
    GameEndInterface,
    GridInterface,
    ListInterface,
    MenuInterface,
    VerticalInterface,
)
from gravdash.settings import Setting, Settings
from gravdash.static_button import ButtonConfig, ButtonSize
from gravdash.stats import LocalStats
from gravdash.controls import Action


class MenuType(IntEnum):
    """The different menus, each with its own layout and behaviour."""

    GAME_END = 0
    MAIN = 1
    OPTIONS = 2
    PAUSE = 3
    PLAY = 4
    TUTOR = 5
    STATS = 6


class GamePreset(IntEnum):
    """Game modes that can be started from the play menu."""

    MINUTE = 0
    RUSH = 1
    COOP = 2
    VS = 3


COLOURS = ("brown", "green", "blue", "purple")


def _push_menu(menu_type: MenuType) -> Event:
    return Event(EventType.PUSH_MENU, int(menu_type))


def _new_game(preset: GamePreset) -> Event:
    return Event(EventType.GAME_NEW, int(preset))


def _main_menu(settings: Settings, events: EventQueue) -> MenuInterface:
    buttons = [
        ButtonConfig("stats", _push_menu(MenuType.STATS), ButtonSize.MEDIUM),
        ButtonConfig("opts.", _push_menu(MenuType.OPTIONS), ButtonSize.MEDIUM),
        ButtonConfig("play", _push_menu(MenuType.PLAY), ButtonSize.LARGE),
        ButtonConfig("tutor", _push_menu(MenuType.STATS), ButtonSize.MEDIUM),
        ButtonConfig("exit", Event(EventType.PROGRAM_CLOSE), ButtonSize.MEDIUM),
    ]
    return GridInterface(settings, events, 2, buttons, Event(EventType.PROGRAM_CLOSE))


def _play_menu(settings: Settings, events: EventQueue) -> MenuInterface:
    buttons = [
        ButtonConfig("1min", _new_game(GamePreset.MINUTE), ButtonSize.LARGE),
        ButtonConfig("rush", _new_game(GamePreset.RUSH), ButtonSize.LARGE),
        ButtonConfig("co-op", _new_game(GamePreset.COOP), ButtonSize.MEDIUM),
        ButtonConfig("vs.", _new_game(GamePreset.VS), ButtonSize.MEDIUM),
    ]
    return GridInterface(settings, events, 2, buttons, Event(EventType.MENU_RETURN))


def _pause_menu(settings: Settings, events: EventQueue) -> MenuInterface:
    buttons = [
        ButtonConfig("resume", Event(EventType.RESUME), ButtonSize.SMALL),
        ButtonConfig("retry", Event(EventType.GAME_RESET), ButtonSize.SMALL),
        ButtonConfig("opts.", _push_menu(MenuType.OPTIONS), ButtonSize.SMALL),
        ButtonConfig("quit", Event(EventType.GAME_EXIT), ButtonSize.SMALL),
    ]
    return VerticalInterface(settings, events, buttons, Event(EventType.RESUME))


def _options_menu(settings: Settings, events: EventQueue) -> MenuInterface:
    def toggle(setting: Setting) -> Interactable:
        return ToggleInteractable(settings, events, setting=setting)

    def ranged(setting: Setting, minimum: int, maximum: int) -> Interactable:
        return RangeInteractable(
            settings, events, minimum=minimum, maximum=maximum, setting=setting
        )

    def select(setting: Setting) -> Interactable:
        return SelectionInteractable(settings, events, selections=COLOURS, setting=setting)

    def keybind(setting: Setting) -> Interactable:
        return KeybindInteractable(settings, events, setting=setting)

    items = [
        ("auto-scale", toggle(Setting.AUTO_SCALE)),
        ("scale", ranged(Setting.SCALE, 1, 32)),
        ("fullscreen", toggle(Setting.FULLSCREEN)),
        ("colour", select(Setting.COLOUR)),
        ("music", ranged(Setting.MUSIC, 0, 10)),
        ("sfx", ranged(Setting.SFX, 0, 10)),
        ("left", keybind(Setting.LEFT)),
        ("right", keybind(Setting.RIGHT)),
        ("up", keybind(Setting.UP)),
        ("down", keybind(Setting.DOWN)),
        ("jump", keybind(Setting.JUMP)),
        ("select", keybind(Setting.SELECT)),
        ("special", keybind(Setting.SPECIAL)),
        ("pause/exit", keybind(Setting.ESCAPE)),
        ("p1-colour", select(Setting.P1_COL)),
        ("p2-colour", select(Setting.P2_COL)),
        ("p2-left", keybind(Setting.P2_LEFT)),
        ("p2-right", keybind(Setting.P2_RIGHT)),
        ("p2-jump", keybind(Setting.P2_JUMP)),
        ("p2-special", keybind(Setting.P2_SPECIAL)),
        ("colour-help", toggle(Setting.COLOUR_HELP)),
        ("world", select(Setting.ACC_WORLD_COL)),
        ("player", select(Setting.ACC_PLAYER_COL)),
        ("target", select(Setting.ACC_TARGET_COL)),
        ("saw", select(Setting.ACC_SAW_COL)),
        ("time", select(Setting.ACC_TIME_COL)),
    ]
    headers = [
        (0, "video"),
        (4, "audio"),
        (6, "controls"),
        (14, "multiplayer"),
        (20, "accessibility"),
    ]
    return ListInterface(settings, events, items, headers, Event(EventType.MENU_RETURN))


def _stats_menu(settings: Settings, events: EventQueue) -> MenuInterface:
    def fixed(value: int) -> Interactable:
        return StaticInteractable(settings, events, value)

    items = [
        ("games-played", fixed(86)),
        ("jumps", fixed(1421)),
        ("specials", fixed(142)),
        ("hits", fixed(64)),
    ]
    for _ in range(3):
        items += [("1st", fixed(100)), ("2nd", fixed(50)), ("3rd", fixed(25))]
    headers = [(0, "statistics"), (4, "1-minute"), (7, "rush"), (10, "co-op")]
    return ListInterface(settings, events, items, headers, Event(EventType.MENU_RETURN))


def _game_end_menu(
    settings: Settings, events: EventQueue, local_stats: LocalStats
) -> MenuInterface:
    buttons = [
        ButtonConfig("retry", Event(EventType.GAME_RESET), ButtonSize.SMALL),
        ButtonConfig("leave", Event(EventType.GAME_EXIT), ButtonSize.SMALL),
    ]
    return GameEndInterface(
        settings, events, buttons, Event(EventType.GAME_EXIT), local_stats
    )


def load_menu(
    menu_type: MenuType,
    settings: Settings,
    events: EventQueue,
    local_stats: LocalStats | None = None,
) -> MenuInterface | None:
    """Build the interface for ``menu_type``; the tutorial has none and gives ``None``."""
    menu_type = MenuType(menu_type)
    if menu_type is MenuType.MAIN:
        return _main_menu(settings, events)
    if menu_type is MenuType.PLAY:
        return _play_menu(settings, events)
    if menu_type is MenuType.PAUSE:
        return _pause_menu(settings, events)
    if menu_type is MenuType.OPTIONS:
        return _options_menu(settings, events)
    if menu_type is MenuType.STATS:
        return _stats_menu(settings, events)
    if menu_type is MenuType.GAME_END:
        return _game_end_menu(settings, events, local_stats or LocalStats())
    return None


class Menu:
    """A stack of menus recording the path the user took to the current one."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        start_menu: MenuType = MenuType.MAIN,
        local_stats: LocalStats | None = None,
    ) -> None:
        self.settings = settings
        self.events = events
        self.local_stats = local_stats if local_stats is not None else LocalStats()
        self._stack: list[MenuInterface] = []
        self.push(start_menu)

    def __len__(self) -> int:
        return len(self._stack)

    @property
    def top(self) -> MenuInterface | None:
        """The menu being shown, or ``None`` when no menu is open."""
        return self._stack[-1] if self._stack else None

    def update(self, delta: int = 0) -> None:
        """Update the shown menu; with none open, escape pauses the game."""
        top = self.top
        if top is not None:
            if isinstance(top, ListInterface):
                top.update(delta)
            else:
                top.update()
            return

        if self.settings.is_action_on_initial_click(Action.ESCAPE):
            self.events.push(EventType.PAUSE)

    def reload_stack(self, menu_type: MenuType) -> None:
        """Close every menu and open ``menu_type``."""
        self.clear()
        self.push(menu_type)

    def clear(self) -> None:
        """Close every menu."""
        self._stack.clear()

    def push(self, menu_type: MenuType) -> None:
        """Open ``menu_type`` on top of the current menu."""
        interface = load_menu(menu_type, self.settings, self.events, self.local_stats)
        if interface is None:
            raise ValueError(f"there is no menu for {MenuType(menu_type).name}")
        self._stack.append(interface)

    def back(self) -> None:
        """Close the current menu and return to the previous one."""
        if not self._stack:
            raise IndexError("no menu to return from")
        self._stack.pop()