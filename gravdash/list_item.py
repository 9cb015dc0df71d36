"""Rows of a settings list and the controls that edit their values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence

from gravdash.controls import Action
from gravdash.events import Event, EventQueue, EventType
from gravdash.keyboard import Key, key_name
from gravdash.rounded_rect import RoundedRect, Shade
from gravdash.settings import Setting, Settings
from gravdash.static_button import SPRITE_DIM

Point = tuple[float, float]

LIST_MARGIN = 5 * SPRITE_DIM
"""Horizontal distance from the list's centre to each side of a row."""

_CHAR_WIDTH = 4.0


def _text_width(text: str) -> float:
    return _CHAR_WIDTH * len(text)


class Interactable(ABC):
    """A value the user can edit, reported through an event when it changes.

    Tied to a ``setting``, it starts from that setting's value and pushes
    ``UPDATE_SETTINGS`` events; otherwise it holds ``value`` and pushes
    events of ``event_type``.
    """

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        value: int = 0,
        event_type: EventType = EventType.NULL,
        setting: Setting | None = None,
    ) -> None:
        self.settings = settings
        self.events = events
        if setting is not None:
            self.event = Event(EventType.UPDATE_SETTINGS, settings.get(setting), int(setting))
        else:
            self.event = Event(event_type, int(value))
        self.backup = self.event.value
        self.position: Point = (0.0, 0.0)
        self.text = ""

    @property
    def value(self) -> int:
        return self.event.value

    @value.setter
    def value(self, new: int) -> None:
        self.event.value = int(new)

    @abstractmethod
    def update(self) -> bool:
        """Handle input; return True once the interaction has finished."""

    def set_position(self, pos: Point) -> None:
        self.position = (float(pos[0]), float(pos[1]))

    def _push(self) -> None:
        self.events.push(self.event)

    def _clicked_delta(self, forward: Action, backward: Action) -> int:
        return int(self.settings.is_action_clicked(forward)) - int(
            self.settings.is_action_clicked(backward)
        )


class StaticInteractable(Interactable):
    """Shows a fixed number; interacting only re-sends its event."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        value: int = 0,
        event_type: EventType = EventType.NULL,
        setting: Setting | None = None,
    ) -> None:
        super().__init__(settings, events, value, event_type, setting)
        self.text = str(self.value)

    def update(self) -> bool:
        self._push()
        return True


class ToggleInteractable(Interactable):
    """An on/off switch."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        value: int = 0,
        event_type: EventType = EventType.NULL,
        setting: Setting | None = None,
    ) -> None:
        super().__init__(settings, events, int(bool(value)), event_type, setting)

    @property
    def toggled(self) -> bool:
        return bool(self.value)

    def update(self) -> bool:
        self.value = int(not self.value)
        self._push()
        return True


class RangeInteractable(Interactable):
    """A number stepped left and right between two bounds."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        value: int = 0,
        minimum: int = 0,
        maximum: int = 0,
        event_type: EventType = EventType.NULL,
        setting: Setting | None = None,
    ) -> None:
        if minimum > maximum:
            raise ValueError(f"minimum {minimum} is greater than maximum {maximum}")
        super().__init__(settings, events, min(max(value, minimum), maximum), event_type, setting)
        self.minimum = minimum
        self.maximum = maximum
        self._refresh()

    def _refresh(self) -> None:
        self.text = f"{{{self.value}}}"

    def update(self) -> bool:
        if self.settings.is_action_on_initial_click(Action.SELECT):
            self.backup = self.value
            self._push()
            return True
        if self.settings.is_action_on_initial_click(Action.ESCAPE):
            self.value = self.backup
            self._refresh()
            return True

        delta = self._clicked_delta(Action.RIGHT, Action.LEFT)
        if not delta or not self.minimum <= self.value + delta <= self.maximum:
            return False

        self.value += delta
        self._refresh()
        self._push()
        return False


class SelectionInteractable(Interactable):
    """Chooses one of several named options, wrapping at either end."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        index: int = 0,
        selections: Sequence[str] = (),
        event_type: EventType = EventType.NULL,
        setting: Setting | None = None,
    ) -> None:
        if not selections:
            raise ValueError("at least one selection is required")
        self.selections = list(selections)
        clamped = min(max(index, 0), len(self.selections) - 1)
        super().__init__(settings, events, clamped, event_type, setting)
        self._refresh()

    @property
    def selection(self) -> str:
        return self.selections[self.value]

    def _refresh(self) -> None:
        self.text = f"{{{self.selection}}}"

    def update(self) -> bool:
        if self.settings.is_action_on_initial_click(Action.SELECT):
            self.backup = self.value
            self._push()
            return True
        if self.settings.is_action_on_initial_click(Action.ESCAPE):
            self.value = self.backup
            self._refresh()
            return True

        delta = self._clicked_delta(Action.RIGHT, Action.LEFT)
        if not delta:
            return False

        new = self.value + delta
        if new < 0:
            new = len(self.selections) - 1
        elif new >= len(self.selections):
            new = 0
        self.value = new
        self._refresh()
        self._push()
        return False


class KeybindInteractable(Interactable):
    """Waits for a key press and binds it."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        value: int = Key.UNKNOWN,
        event_type: EventType = EventType.NULL,
        setting: Setting | None = None,
    ) -> None:
        super().__init__(settings, events, int(value), event_type, setting)
        self.text = key_name(self.value) or "NULL"
        width = _text_width(self.text)
        x, y = self.position
        self.background = RoundedRect((x - width / 2.0, y - 1.0), (width + 4.0, 6.0), Shade.DARKEST)

    def update(self) -> bool:
        code = self.settings.keyboard.key_at_head()
        if code is None:
            return False
        name = key_name(code)
        if name is None:
            return False

        self.value = int(code)
        self.text = name
        width = _text_width(name)
        self.background.set_horizontal(self.position[0] - width / 2.0)
        self.background.set_dim((width + 4.0, 6.0))
        self._push()
        return True

    def set_position(self, pos: Point) -> None:
        x, y = pos[0] - 2.0, pos[1]
        width = _text_width(self.text)
        self.background.set_horizontal(self.position[0] - width / 2.0)
        self.background.set_vertical(y)
        super().set_position((x, y))


class ListItem:
    """A named row of a list whose value is edited by an interactable."""

    def __init__(
        self, settings: Settings, name: str, vert_offset: float, interactable: Interactable
    ) -> None:
        self.settings = settings
        self.name = name
        self.vert_offset = float(vert_offset)
        self.interactable = interactable
        self.is_active = False
        self.name_position: Point = (0.0, 0.0)

    def update(self) -> bool:
        """Handle input; return True if the row consumed it."""
        if self.is_active:
            if self.interactable.update():
                self.is_active = False
            return True

        if self.settings.is_action_on_initial_click(Action.SELECT):
            self.is_active = True
            return True
        return False

    def set_position(self, origin: Point) -> None:
        """Place the row relative to the list's origin."""
        y = origin[1] + self.vert_offset
        self.name_position = (origin[0] - LIST_MARGIN, y)
        self.interactable.set_position((origin[0] + LIST_MARGIN, y))