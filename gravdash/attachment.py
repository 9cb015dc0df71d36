"""A position that notifies a listener whenever it changes."""

from __future__ import annotations

from typing import Callable

Point = tuple[float, float]


class Attachment:
    """Keeps a position and passes every change to an attached callback."""

    def __init__(
        self, pos: Point = (0.0, 0.0), on_update: Callable[[Point], None] | None = None
    ) -> None:
        self.pos: Point = (float(pos[0]), float(pos[1]))
        self._on_update = on_update

    @property
    def is_attached(self) -> bool:
        return self._on_update is not None

    def attach(self, on_update: Callable[[Point], None]) -> None:
        """Attach a callback and immediately send it the current position."""
        self._on_update = on_update
        on_update(self.pos)

    def update_pos(self, new_pos: Point) -> None:
        """Replace the position."""
        self.pos = (float(new_pos[0]), float(new_pos[1]))
        self.force_update()

    def move(self, offset: Point) -> None:
        """Shift the position by ``offset``."""
        self.pos = (self.pos[0] + offset[0], self.pos[1] + offset[1])
        self.force_update()

    def force_update(self) -> None:
        """Send the current position to the callback, if one is attached."""
        if self._on_update is not None:
            self._on_update(self.pos)