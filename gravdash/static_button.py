"""Menu buttons that do nothing but push an event when clicked."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum

from gravdash.events import Event, EventQueue

Point = tuple[float, float]

SPRITE_DIM = 8
"""Side length of one sprite tile, in pixels."""


class ButtonSize(Enum):
    """Button sizes, each with its own texture, font and text placement."""

    SMALL = 0
    MEDIUM = 1
    LARGE = 2

    @property
    def texture(self) -> str:
        return _TEXTURES[self]

    @property
    def font(self) -> str:
        return "large" if self is ButtonSize.LARGE else "small"

    @property
    def text_offset(self) -> Point:
        return _TEXT_OFFSETS[self]

    @property
    def frame_size(self) -> tuple[int, int]:
        """Width and height of one frame of the button texture."""
        return _FRAME_SIZES[self]


_TEXTURES = {
    ButtonSize.SMALL: "small_button",
    ButtonSize.MEDIUM: "medium_button",
    ButtonSize.LARGE: "large_button",
}

_TEXT_OFFSETS = {
    ButtonSize.SMALL: (0.0, -0.5),
    ButtonSize.MEDIUM: (-2.5, 6.0),
    ButtonSize.LARGE: (-2.5, 5.0),
}

_FRAME_SIZES = {
    ButtonSize.SMALL: (4 * SPRITE_DIM, SPRITE_DIM),
    ButtonSize.MEDIUM: (3 * SPRITE_DIM, 2 * SPRITE_DIM - 2),
    ButtonSize.LARGE: (3 * SPRITE_DIM, 4 * SPRITE_DIM - 2),
}


@dataclass
class ButtonConfig:
    """What a button shows, how big it is and what clicking it does."""

    name: str
    click_event: Event
    size: ButtonSize


class StaticButton:
    """A button whose only behaviour is to be highlighted and clicked."""

    def __init__(self, config: ButtonConfig, events: EventQueue, pos: Point = (0.0, 0.0)) -> None:
        self.size = ButtonSize(config.size)
        self.name = config.name
        self.click_event = dataclasses.replace(config.click_event)
        self.events = events
        self.pos: Point = (float(pos[0]), float(pos[1]))
        off_x, off_y = self.size.text_offset
        self.text_pos: Point = (self.pos[0] + off_x, self.pos[1] + off_y)
        self.highlighted = False
        self.frame_left = 0

    @property
    def texture(self) -> str:
        return self.size.texture

    @property
    def font(self) -> str:
        return self.size.font

    @property
    def width(self) -> float:
        return float(self.size.frame_size[0])

    @property
    def height(self) -> float:
        return float(self.size.frame_size[1])

    def move(self, offset: Point) -> None:
        """Shift the button and its label by ``offset``."""
        dx, dy = offset
        self.pos = (self.pos[0] + dx, self.pos[1] + dy)
        self.text_pos = (self.text_pos[0] + dx, self.text_pos[1] + dy)

    def click(self) -> None:
        """Push the button's event."""
        self.events.push(self.click_event)

    def toggle_highlight(self) -> None:
        """Switch between the plain and the highlighted frame."""
        self.frame_left = 0 if self.highlighted else self.size.frame_size[0]
        self.highlighted = not self.highlighted