"""Menu layouts: button grids, vertical button lists and scrolling settings lists."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Sequence

from gravdash.bezier import Bezier
from gravdash.controls import Action
from gravdash.events import Event, EventQueue
from gravdash.list_item import LIST_MARGIN, Interactable, ListItem
from gravdash.rounded_rect import RoundedRect, Shade
from gravdash.settings import Settings
from gravdash.static_button import SPRITE_DIM, ButtonConfig, ButtonSize, StaticButton
from gravdash.stats import LocalStats

Point = tuple[float, float]

GRID_VERT_POS = 2.0 * SPRITE_DIM - 1.0
"""Vertical distance of the top and bottom grid rows from the grid's centre."""

MAX_BUTTONS = 6
"""The most buttons, or grid cells, a layout may hold."""

SCROLL_TIME = 250
"""Milliseconds taken to scroll a list from one row to another."""

_EASE_IN = Bezier([(0.0, 0.0), (0.5, 0.0), (1.0, 1.0)])


@dataclass
class Label:
    """A piece of text placed on the screen."""

    text: str
    pos: Point


class MenuInterface:
    """A menu layout that pushes ``menu_return`` when the user escapes from it."""

    def __init__(self, settings: Settings, events: EventQueue, menu_return: Event) -> None:
        self.settings = settings
        self.events = events
        self.menu_return = menu_return

    def update(self) -> None:
        """Push the return event if escape was just pressed."""
        if self.settings.is_action_on_initial_click(Action.ESCAPE):
            self.events.push(self.menu_return)

    def _clicked_delta(self, forward: Action, backward: Action) -> int:
        return int(self.settings.is_action_clicked(forward)) - int(
            self.settings.is_action_clicked(backward)
        )


class GridInterface(MenuInterface):
    """Buttons laid out in columns of two rows.

    A large button fills a whole column; two medium buttons in a row share
    one, and a lone medium button leaves the lower cell empty.
    """

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        initial_highlight: int,
        configs: Sequence[ButtonConfig],
        menu_return: Event,
        centre: Point = (0.0, 0.0),
    ) -> None:
        super().__init__(settings, events, menu_return)
        if not configs:
            raise ValueError("a grid needs at least one button")
        if any(ButtonSize(c.size) is ButtonSize.SMALL for c in configs):
            raise ValueError("small buttons cannot be placed on a grid")

        padding = 0.5 * SPRITE_DIM
        hori = -padding
        grid: list[int | None] = []
        buttons: list[StaticButton] = []
        pending = deque(configs)

        while pending:
            config = pending.popleft()
            index = len(buttons)
            grid.append(index)
            button = StaticButton(config, events)

            hori += padding
            if index != 0:
                hori += 0.5 * button.width

            large = ButtonSize(config.size) is ButtonSize.LARGE
            button.move((hori, 0.0 if large else -GRID_VERT_POS))
            buttons.append(button)

            if large:
                grid.append(index)
            elif pending and ButtonSize(pending[0].size) is ButtonSize.MEDIUM:
                grid.append(len(buttons))
                button = StaticButton(pending.popleft(), events)
                button.move((hori, GRID_VERT_POS))
                buttons.append(button)
            else:
                grid.append(None)

            hori += 0.5 * button.width

        if len(grid) > MAX_BUTTONS:
            raise ValueError(f"a grid holds at most {MAX_BUTTONS} cells, got {len(grid)}")
        if not 0 <= initial_highlight < len(grid) or grid[initial_highlight] is None:
            raise ValueError(f"no button at grid position {initial_highlight}")

        offset = 0.5 * hori - 0.25 * buttons[0].width
        shift = (centre[0] - offset, centre[1])
        for button in buttons:
            button.move(shift)

        self.grid: tuple[int | None, ...] = tuple(grid)
        self.buttons = buttons
        self.current = initial_highlight
        self.highlighted.toggle_highlight()

    @property
    def highlighted(self) -> StaticButton:
        """The button at the current grid position."""
        return self.buttons[self.grid[self.current]]

    def update(self) -> None:
        """Click the highlighted button, or move the highlight around the grid."""
        if self.settings.is_action_on_initial_click(Action.SELECT):
            self.highlighted.click()
            return
        super().update()

        x_move = self._clicked_delta(Action.RIGHT, Action.LEFT)
        y_move = self._clicked_delta(Action.DOWN, Action.UP)
        cur = self.current

        if (
            (not x_move and not y_move)
            or (cur <= 1 and x_move < 0)
            or (cur >= len(self.grid) - 2 and x_move > 0)
            or (cur % 2 == 0 and y_move < 0)
            or (cur % 2 == 1 and y_move > 0)
        ):
            return

        nxt = cur + y_move + 2 * x_move
        if self.grid[nxt] is None:
            nxt -= 1

        if self.grid[cur] != self.grid[nxt]:
            self.buttons[self.grid[cur]].toggle_highlight()
            self.buttons[self.grid[nxt]].toggle_highlight()
        self.current = nxt


class VerticalInterface(MenuInterface):
    """Buttons stacked one after another, with a wrapping highlight."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        configs: Sequence[ButtonConfig],
        menu_return: Event,
        centre: Point = (0.0, 0.0),
    ) -> None:
        super().__init__(settings, events, menu_return)
        if not configs:
            raise ValueError("a vertical menu needs at least one button")
        if len(configs) > MAX_BUTTONS:
            raise ValueError(f"a vertical menu holds at most {MAX_BUTTONS} buttons")

        step = StaticButton(configs[0], events).height + 2.0
        pos = 0.5 * step * (len(configs) - 1)
        self.buttons: list[StaticButton] = []
        for config in configs:
            self.buttons.append(StaticButton(config, events, (centre[0] + pos, centre[1] - pos)))
            pos -= step

        self.current = 0
        self.buttons[self.current].toggle_highlight()

    @property
    def highlighted(self) -> StaticButton:
        return self.buttons[self.current]

    def update(self) -> None:
        """Click the highlighted button, or move the highlight up or down."""
        if self.settings.is_action_on_initial_click(Action.SELECT):
            self.highlighted.click()
            return
        super().update()

        move = self._clicked_delta(Action.DOWN, Action.UP)
        if not move or len(self.buttons) == 1:
            return

        nxt = self.current + move
        if nxt < 0:
            nxt = len(self.buttons) - 1
        elif nxt >= len(self.buttons):
            nxt = 0

        self.buttons[self.current].toggle_highlight()
        self.buttons[nxt].toggle_highlight()
        self.current = nxt


class GameEndInterface(VerticalInterface):
    """The end-of-game menu, showing the results of the last game."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        configs: Sequence[ButtonConfig],
        menu_return: Event,
        local_stats: LocalStats,
        centre: Point = (0.0, 0.0),
    ) -> None:
        super().__init__(settings, events, configs, menu_return, centre)
        for button in self.buttons:
            button.move((4.0 * SPRITE_DIM, 0.0))

        boosted = local_stats.time_boosts != -1
        y = centre[1] - (40.0 + (7.0 if boosted else 0.0)) / 2.0

        self.title = Label("results", (centre[0] - 6.5 * SPRITE_DIM, y - SPRITE_DIM))
        self.underline_pos: Point = (self.title.pos[0] - 3.0, self.title.pos[1] + 17.0)

        lines = [
            f"jumps - {local_stats.jumps}",
            f"hits - {local_stats.hits}",
            f"specials - {local_stats.specials}",
            f"3+ combos - {local_stats.combos}",
        ]
        if boosted:
            lines.append(f"cycles - {local_stats.time_boosts}")

        x = centre[0] - 6.0 * SPRITE_DIM
        self.stats = [
            Label(text, (x, y + 14.0 + 7.0 * row)) for row, text in enumerate(lines)
        ]


class Header:
    """A section title of a list, between an overline and an underline."""

    def __init__(self, text: str, vert_offset: float) -> None:
        self.title = Label(text, (0.0, 0.0))
        self.vert_offset = float(vert_offset)
        self.overline_pos: Point = (0.0, 0.0)
        self.underline_pos: Point = (0.0, 0.0)

    def set_position(self, pos: Point) -> None:
        """Place the header relative to the list's origin."""
        x = pos[0]
        y = pos[1] + self.vert_offset - 1.0
        self.overline_pos = (x, y - 5.0)
        self.underline_pos = (x, y + 4.0)
        self.title.pos = (x, y - SPRITE_DIM - 1.0)


@dataclass
class _Scroll:
    start: Point
    end: Point
    duration: int
    elapsed: int = 0


class ListInterface(MenuInterface):
    """A scrolling list of editable rows split into sections by headers."""

    def __init__(
        self,
        settings: Settings,
        events: EventQueue,
        items: Sequence[tuple[str, Interactable]],
        headers: Sequence[tuple[int, str]],
        menu_return: Event,
    ) -> None:
        super().__init__(settings, events, menu_return)
        if not items:
            raise ValueError("a list needs at least one item")

        self.items: list[ListItem] = []
        self.headers: list[Header] = []
        pending = deque(headers)
        offset = 0.0
        for index, (name, interactable) in enumerate(items):
            if pending and pending[0][0] == index:
                offset += SPRITE_DIM
                self.headers.append(Header(pending.popleft()[1], offset))
                offset += SPRITE_DIM
            self.items.append(ListItem(settings, name, offset, interactable))
            offset += SPRITE_DIM

        self.current = 0
        self.highlight = RoundedRect((0.0, 0.0), (2.0 * LIST_MARGIN + 2.0, 6.0), Shade.LIGHT)
        self.origin: Point = (0.0, -self.items[0].vert_offset)
        self._scroll: _Scroll | None = None
        self._update_positions()

    @property
    def scrolling(self) -> bool:
        return self._scroll is not None

    def update(self, delta: int = 0) -> None:
        """Advance scrolling by ``delta`` milliseconds and handle input."""
        if self._advance_scroll(delta):
            self._update_positions()

        if self.items[self.current].update():
            self.highlight.set_colour(Shade.DARK)
            return

        if self.settings.is_action_on_initial_click(Action.ESCAPE):
            self.events.push(self.menu_return)

        self.highlight.set_colour(Shade.LIGHT)

        move = self._clicked_delta(Action.DOWN, Action.UP)
        if not move:
            return

        nxt = self.current + move
        if nxt < 0:
            nxt = len(self.items) - 1
        elif nxt >= len(self.items):
            nxt = 0
        self.current = nxt

        target = (self.origin[0], -self.items[nxt].vert_offset)
        self._scroll = _Scroll(self.origin, target, SCROLL_TIME)

    def _advance_scroll(self, delta: int) -> bool:
        scroll = self._scroll
        if scroll is None:
            return False
        scroll.elapsed += delta
        t = min(scroll.elapsed / scroll.duration, 1.0) if scroll.duration > 0 else 1.0
        progress = _EASE_IN.value(t)
        (sx, sy), (ex, ey) = scroll.start, scroll.end
        self.origin = (sx + (ex - sx) * progress, sy + (ey - sy) * progress)
        if t >= 1.0:
            self._scroll = None
        return True

    def _update_positions(self) -> None:
        for item in self.items:
            item.set_position(self.origin)
        for header in self.headers:
            header.set_position(self.origin)
        self.highlight.set_vertical(self.origin[1] + self.items[self.current].vert_offset)