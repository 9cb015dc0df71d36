"""A first-in, first-out queue of game and menu events."""

from __future__ import annotations

import dataclasses
from collections import deque
from dataclasses import dataclass
from enum import Enum, auto


class EventType(Enum):
    """The kinds of event the game and its menus exchange."""

    NULL = auto()
    UPDATE_SETTINGS = auto()
    UPDATE_WINDOW = auto()
    PAUSE = auto()
    RESUME = auto()
    MENU_RETURN = auto()
    PUSH_MENU = auto()
    PROGRAM_CLOSE = auto()
    GAME_NEW = auto()
    GAME_RESET = auto()
    GAME_EXIT = auto()


@dataclass
class Event:
    """An event with an optional integer payload.

    ``setting`` is only used by ``UPDATE_SETTINGS`` events, where ``value``
    is the new value of that setting.
    """

    type: EventType = EventType.NULL
    value: int = 0
    setting: int | None = None


class EventQueue:
    """Holds pushed events until they are polled, oldest first."""

    def __init__(self) -> None:
        self._events: deque[Event] = deque()

    def push(self, event: Event | EventType) -> None:
        """Queue a copy of ``event``; a bare type becomes an event without data."""
        if isinstance(event, EventType):
            event = Event(event)
        self._events.append(dataclasses.replace(event))

    def poll(self) -> Event | None:
        """Remove and return the oldest event, or ``None`` if there is none."""
        if not self._events:
            return None
        return self._events.popleft()

    def clear(self) -> None:
        """Drop every queued event."""
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self):
        return iter(tuple(self._events))