"""Frame-by-frame sprite animation driven by a queue of animations."""

from __future__ import annotations

import dataclasses
from collections import deque
from dataclasses import dataclass

ALWAYS = -1
"""Loop count for an animation that repeats until cleared."""


@dataclass
class Animation:
    """One row of a sprite sheet played for a number of loops."""

    index: int
    frame_duration: int
    loops: int = 0
    hold: int = 0


@dataclass
class FrameRect:
    """The region of the sprite sheet currently shown."""

    left: int
    top: int
    width: int
    height: int


class AnimationHandler:
    """Plays queued animations one after another on a sprite sheet."""

    def __init__(self, num_animations: int, num_frames: int, frame_size: tuple[int, int]) -> None:
        self.num_animations = num_animations
        self.num_frames = num_frames
        width, height = frame_size
        self.frame_rect = FrameRect(0, 0, width, height)
        self.frame_index = 0
        self.frame_timer = 0
        self._animations: deque[Animation] = deque()

    @property
    def current(self) -> Animation | None:
        """The animation being played, or ``None`` when idle."""
        return self._animations[0] if self._animations else None

    def __len__(self) -> int:
        return len(self._animations)

    def update(self, delta: int) -> None:
        """Advance the animation by ``delta`` milliseconds."""
        if not self._animations:
            return
        self.frame_timer -= delta
        while self.frame_timer <= 0 and self._animations:
            self._advance_frame()

    def clear(self) -> None:
        """Drop every queued animation."""
        self._animations.clear()

    def queue_animation(
        self, index: int, duration: int, loops: int = 0, hold: int = 0
    ) -> None:
        """Queue an animation; it starts at once if nothing else is playing."""
        anim = Animation(index, duration, loops, hold)
        self._animations.append(dataclasses.replace(anim))
        if len(self._animations) == 1:
            self.frame_timer = anim.frame_duration + anim.hold
            self.frame_index = 0
            self._set_region()

    def _advance_frame(self) -> None:
        self.frame_index += 1
        if self.frame_index >= self.num_frames:
            self.frame_index = 0
            head = self._animations[0]
            if head.loops != ALWAYS:
                if head.loops == 0:
                    self._animations.popleft()
                    if not self._animations:
                        return
                    nxt = self._animations[0]
                    self.frame_timer += nxt.frame_duration + nxt.hold
                    self._set_region()
                    return
                head.loops -= 1

        self.frame_timer += self._animations[0].frame_duration
        self._set_region()

    def _set_region(self) -> None:
        rect = self.frame_rect
        rect.top = self._animations[0].index * rect.width
        rect.left = self.frame_index * rect.height