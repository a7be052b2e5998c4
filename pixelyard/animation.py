"""Sprite-sheet animation state and the frame tables it steps through."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

log = logging.getLogger(__name__)

Clock = Callable[[], int]


@dataclass(frozen=True)
class AnimationProperties:
    """One row of a sprite sheet: frame count, per-frame delay in ms, row index."""

    frames: int
    delay: int
    row: int


@dataclass
class PlayerAnimations:
    """Animation rows used by the player sprite sheet."""

    idle: AnimationProperties = AnimationProperties(6, 100, 0)
    walk: AnimationProperties = AnimationProperties(6, 100, 1)
    attack_horizontal: AnimationProperties = AnimationProperties(6, 100, 2)
    attack_top: AnimationProperties = AnimationProperties(6, 100, 6)
    attack_down: AnimationProperties = AnimationProperties(6, 100, 4)
    death: AnimationProperties = AnimationProperties(7, 150, 1)


@dataclass
class EntityAnimations:
    """Animation rows used by an entity sprite sheet."""

    idle: AnimationProperties = AnimationProperties(8, 100, 0)
    death: AnimationProperties = AnimationProperties(7, 150, 1)


@dataclass
class FRect:
    """A rectangle with float coordinates, used as a sprite-sheet source area."""

    x: float = 0.0
    y: float = 0.0
    w: float = 0.0
    h: float = 0.0


class Animation:
    """Advances a frame index over time and writes the frame's area into a rect."""

    def __init__(self, clock: Clock) -> None:
        self._clock = clock
        self.current_index = 0
        self._reverse_index: int | None = None
        self._last_update = 0

    def reset(self, index: int = 0) -> None:
        """Set the forward frame index."""
        self.current_index = index

    def _tick(self, props: AnimationProperties) -> bool:
        now = self._clock()
        if now - self._last_update >= props.delay:
            self._last_update = now
            return True
        return False

    def show(self, props: AnimationProperties, src: FRect, sprite_size: int) -> None:
        """Loop through the row's frames forever."""
        if self._tick(props):
            self.current_index = (self.current_index + 1) % props.frames
            src.x = self.current_index * sprite_size
            src.y = sprite_size * props.row

    def show_once(self, props: AnimationProperties, src: FRect, sprite_size: int) -> bool:
        """Play the row once; return True once the last frame has been reached."""
        if self.current_index >= props.frames:
            src.x = (props.frames - 1) * sprite_size
            src.y = sprite_size * props.row
            return True

        if self._tick(props):
            src.x = self.current_index * sprite_size
            src.y = sprite_size * props.row
            self.current_index += 1

        return False

    def show_reversed(self, props: AnimationProperties, src: FRect, sprite_size: int) -> bool:
        """Play the row backwards once; return True when it has run past frame 0."""
        if self._reverse_index is None:
            self._reverse_index = props.frames

        if self._tick(props):
            self._reverse_index -= 1
            if self._reverse_index < 0:
                self._reverse_index = -1
                return True

            src.x = self._reverse_index * sprite_size
            log.debug("reverse frame at src.x=%.2f src.y=%.2f", src.x, src.y)
            src.y = sprite_size * props.row

        return False