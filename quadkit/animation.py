"""Sprite-sheet animations: one animation per row, one frame per tile."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

from quadkit.geometry import Rect, Vec2


@dataclass
class Animation:
    """An animation stored in one row of the sprite sheet."""

    name: str
    row: int
    frames: int
    fps: int


@dataclass
class AnimationFrame:
    """Where the current frame sits in the sheet, and its size."""

    source_rect: Rect
    dest_size: Vec2


class AnimatedSprite:
    """Tracks the current animation and frame of a tiled sprite sheet."""

    def __init__(
        self,
        tile_width: int,
        tile_height: int,
        animations: Sequence[Animation],
        playing: bool,
    ) -> None:
        self._tile_width = float(tile_width)
        self._tile_height = float(tile_height)
        self._animations = list(animations)
        self._current = 0
        self._time = 0.0
        self._frame = 0
        self.playing = playing

    def set_animation(self, animation: int) -> None:
        """Switch animation; the frame is kept, wrapped to the new animation's length."""
        self._current = animation
        self._frame %= self._animations[animation].frames

    def current_animation(self) -> int:
        """Index of the animation being displayed."""
        return self._current

    def set_frame(self, frame: int) -> None:
        """Jump to a given frame of the current animation."""
        self._frame = frame

    def is_last_frame(self) -> bool:
        """True while the last frame of the current animation is displayed."""
        return self._frame == self._animations[self._current].frames - 1

    def update(self, frame_time: float) -> None:
        """Advance by ``frame_time`` seconds, switching frames every 1 / fps seconds."""
        animation = self._animations[self._current]
        if self.playing:
            self._time += frame_time
            period = 1.0 / animation.fps if animation.fps else math.inf
            if self._time > period:
                self._frame += 1
                self._time = 0.0
        self._frame %= animation.frames

    def frame(self) -> AnimationFrame:
        """The current frame's source rectangle and size."""
        animation = self._animations[self._current]
        return AnimationFrame(
            source_rect=Rect(
                self._tile_width * self._frame,
                self._tile_height * animation.row,
                self._tile_width,
                self._tile_height,
            ),
            dest_size=Vec2(self._tile_width, self._tile_height),
        )